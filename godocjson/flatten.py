"""Flatten a documentation model into JSON output records.

Every record carries its owning package's name and import path plus the
resolved source position, so each one can be consumed on its own. Types reuse
the package-level conversions for their associated declarations, which keeps
both levels of the output in the same shape.

Any failure (unresolvable position, unsupported type expression) aborts the
whole pass; there is no partial output.
"""

from collections.abc import Iterable

from godocjson.docmodel import DocFunc, DocPackage, DocType, DocValue
from godocjson.fileset import PositionResolver
from godocjson.logging import get_logger
from godocjson.records import Func, FuncParam, Note, Package, Type, Value
from godocjson.syntax import FieldGroup
from godocjson.typesig import type_of

logger = get_logger(__name__)


def _params(groups: Iterable[FieldGroup]) -> tuple[FuncParam, ...]:
    params: list[FuncParam] = []
    for group in groups:
        t = type_of(group.type)
        params.extend(FuncParam(type=t, name=name) for name in group.names)
    return tuple(params)


def _results(groups: Iterable[FieldGroup]) -> tuple[FuncParam, ...]:
    results: list[FuncParam] = []
    for group in groups:
        t = type_of(group.type)
        if not group.names:
            # func foo() Type
            results.append(FuncParam(type=t))
        else:
            # func foo() (a, b Type)
            results.extend(FuncParam(type=t, name=name) for name in group.names)
    return tuple(results)


def convert_function(doc: DocFunc, package_name: str, import_path: str, resolver: PositionResolver) -> Func:
    """Convert a documented function or method into a Func record."""
    position = resolver.position(doc.decl.pos)
    signature = doc.decl.type
    return Func(
        doc=doc.doc,
        name=doc.name,
        package_name=package_name,
        package_import_path=import_path,
        filename=position.filename,
        line=position.line,
        params=_params(signature.params),
        results=_results(signature.results or ()),
        recv=doc.recv,
        orig=doc.orig,
    )


def convert_value(doc: DocValue, package_name: str, import_path: str, resolver: PositionResolver) -> Value:
    """Convert a const or var declaration group into a single Value record.

    The position is taken from the declaration keyword, not from the first name.
    """
    position = resolver.position(doc.decl.tok_pos)
    return Value(
        package_name=package_name,
        package_import_path=import_path,
        doc=doc.doc,
        names=tuple(doc.names),
        type=doc.decl.tok,
        filename=position.filename,
        line=position.line,
    )


def convert_functions(docs: Iterable[DocFunc], package_name: str, import_path: str, resolver: PositionResolver) -> tuple[Func, ...]:
    return tuple(convert_function(d, package_name, import_path, resolver) for d in docs)


def convert_values(docs: Iterable[DocValue], package_name: str, import_path: str, resolver: PositionResolver) -> tuple[Value, ...]:
    return tuple(convert_value(d, package_name, import_path, resolver) for d in docs)


def convert_type(doc: DocType, package_name: str, import_path: str, resolver: PositionResolver) -> Type:
    """Convert a documented type and everything associated with it."""
    position = resolver.position(doc.decl.tok_pos)
    return Type(
        package_name=package_name,
        package_import_path=import_path,
        doc=doc.doc,
        name=doc.name,
        filename=position.filename,
        line=position.line,
        consts=convert_values(doc.consts, package_name, import_path, resolver),
        vars=convert_values(doc.vars, package_name, import_path, resolver),
        funcs=convert_functions(doc.funcs, package_name, import_path, resolver),
        methods=convert_functions(doc.methods, package_name, import_path, resolver),
    )


def convert_notes(package: DocPackage) -> dict[str, tuple[Note, ...]]:
    """Copy note groups key for key, keeping the upstream order within each group."""
    return {
        marker: tuple(Note(pos=n.pos, end=n.end, uid=n.uid, body=n.body) for n in notes)
        for marker, notes in package.notes.items()
    }


def flatten_package(package: DocPackage, resolver: PositionResolver) -> Package:
    """Produce the self-contained Package record for a documentation model.

    Raises:
        PositionError: If any declaration position cannot be resolved.
        UnsupportedTypeError: If any signature contains an unrenderable type.
    """
    name, import_path = package.name, package.import_path
    logger.debug(
        "Flattening package %s (%d consts, %d types, %d vars, %d funcs)",
        import_path or name,
        len(package.consts),
        len(package.types),
        len(package.vars),
        len(package.funcs),
    )
    return Package(
        doc=package.doc,
        name=name,
        import_path=import_path,
        imports=tuple(package.imports),
        filenames=tuple(package.filenames),
        notes=convert_notes(package),
        bugs=tuple(package.bugs),
        consts=convert_values(package.consts, name, import_path, resolver),
        types=tuple(convert_type(t, name, import_path, resolver) for t in package.types),
        vars=convert_values(package.vars, name, import_path, resolver),
        funcs=convert_functions(package.funcs, name, import_path, resolver),
    )


__all__ = [
    "convert_function",
    "convert_functions",
    "convert_notes",
    "convert_type",
    "convert_value",
    "convert_values",
    "flatten_package",
]

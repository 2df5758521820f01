"""Builders for documentation model fixtures."""

from godocjson.docmodel import DocFunc, DocType, DocValue, FuncDecl, GenDecl
from godocjson.fileset import FileSet, SourceFile
from godocjson.syntax import Expr, FieldGroup, FuncType, Ident

# Line starts every 20 bytes: pos = base + 20 * (line - 1) is column 1 of that line.
LINE_WIDTH = 20


def make_file(name: str, base: int, line_count: int = 10) -> SourceFile:
    return SourceFile(
        name=name,
        base=base,
        size=LINE_WIDTH * line_count,
        lines=tuple(LINE_WIDTH * i for i in range(line_count)),
    )


def make_fileset(*names: str, line_count: int = 10) -> FileSet:
    """File set with one file per name, laid out back to back."""
    files = []
    base = 1
    for name in names:
        files.append(make_file(name, base, line_count))
        base += LINE_WIDTH * line_count + 1
    return FileSet(files=tuple(files))


def pos_of(fileset: FileSet, filename: str, line: int) -> int:
    for f in fileset.files:
        if f.name == filename:
            return f.base + LINE_WIDTH * (line - 1)
    raise KeyError(filename)


def group(typ: Expr, *names: str) -> FieldGroup:
    return FieldGroup(names=names, type=typ)


def ident(name: str) -> Ident:
    return Ident(name=name)


def make_func(
    name: str,
    pos: int,
    params: tuple[FieldGroup, ...] = (),
    results: tuple[FieldGroup, ...] | None = None,
    doc: str = "",
    recv: str = "",
    orig: str = "",
) -> DocFunc:
    return DocFunc(
        doc=doc,
        name=name,
        recv=recv,
        orig=orig,
        decl=FuncDecl(pos=pos, type=FuncType(params=params, results=results)),
    )


def make_value(tok: str, pos: int, *names: str, doc: str = "") -> DocValue:
    return DocValue(doc=doc, names=names, decl=GenDecl(tok=tok, tok_pos=pos))


def make_type(name: str, pos: int, doc: str = "", **associated) -> DocType:
    return DocType(doc=doc, name=name, decl=GenDecl(tok="type", tok_pos=pos), **associated)

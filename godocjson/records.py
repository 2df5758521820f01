"""JSON output records.

Field order and aliases define the wire format: existing consumers rely on
the exact key names (``packageImportPath``, ``parameters``, ``importPath``...)
and on the key order produced by ``dump_package``.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Record(BaseModel):
    """Base for output records. Immutable once produced."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class FuncParam(Record):
    """A single function parameter or result."""

    type: str
    name: str = ""


class Func(Record):
    """A function or method declaration."""

    doc: str
    name: str
    package_name: str
    package_import_path: str
    type: Literal["func"] = "func"
    filename: str
    line: int
    params: tuple[FuncParam, ...] = Field(default=(), alias="parameters")
    results: tuple[FuncParam, ...] = ()

    # methods only; empty for free functions
    recv: str = ""  # actual receiver "T" or "*T"
    orig: str = ""  # original receiver "T" or "*T"


class Value(Record):
    """A const or var declaration group."""

    package_name: str
    package_import_path: str
    doc: str
    names: tuple[str, ...]  # declaration order
    type: Literal["const", "var"]
    filename: str
    line: int


class Type(Record):
    """A type declaration with its associated declarations."""

    package_name: str
    package_import_path: str
    doc: str
    name: str
    type: Literal["type"] = "type"
    filename: str
    line: int

    consts: tuple[Value, ...] = ()
    vars: tuple[Value, ...] = ()
    funcs: tuple[Func, ...] = ()  # functions returning this type
    methods: tuple[Func, ...] = ()  # including promoted methods of embedded types


class Note(Record):
    """A marked comment."""

    pos: int
    end: int  # position range of the comment containing the marker
    uid: str  # uid found with the marker
    body: str  # note body text


class Package(Record):
    """Root record for one documented package."""

    type: Literal["package"] = "package"
    doc: str
    name: str
    import_path: str
    imports: tuple[str, ...] = ()
    filenames: tuple[str, ...] = ()
    notes: dict[str, tuple[Note, ...]] = Field(default_factory=dict)
    # Deprecated: still populated for older consumers, use notes instead.
    bugs: tuple[str, ...] = ()

    consts: tuple[Value, ...] = ()
    types: tuple[Type, ...] = ()
    vars: tuple[Value, ...] = ()
    funcs: tuple[Func, ...] = ()


def dump_package(package: Package, indent: int | None = 2) -> str:
    """Serialize a package record to JSON using the wire key names."""
    return package.model_dump_json(by_alias=True, indent=indent)


__all__ = ["Func", "FuncParam", "Note", "Package", "Type", "Value", "dump_package"]

"""Documentation model handed over by the upstream Go parser.

Mirrors the subset of ``go/doc`` the flattener reads: one package with its
consts, vars, funcs and types (each type with its own associated consts,
vars, funcs and methods), plus notes and bugs. Positions are raw file-set
offsets resolved through a ``FileSet``.

All models accept both camelCase keys (as emitted by the parser dump) and
snake_case field names.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from godocjson.syntax import FuncType


class DocModel(BaseModel):
    """Base for documentation model entries."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class FuncDecl(DocModel):
    """Function or method declaration."""

    pos: int
    type: FuncType = Field(default_factory=FuncType)


class GenDecl(DocModel):
    """Generic declaration (const, var or type block)."""

    tok: Literal["const", "var", "type"]
    tok_pos: int


class DocFunc(DocModel):
    """Documented function or method."""

    doc: str = ""
    name: str
    decl: FuncDecl
    recv: str = ""  # actual receiver "T" or "*T"
    orig: str = ""  # original receiver "T" or "*T"


class DocValue(DocModel):
    """Documented const or var declaration; one entry per declaration group."""

    doc: str = ""
    names: tuple[str, ...] = ()
    decl: GenDecl

    @field_validator("decl")
    @classmethod
    def validate_decl(cls, v: GenDecl) -> GenDecl:
        if v.tok == "type":
            raise ValueError("value declaration must be const or var")
        return v


class DocType(DocModel):
    """Documented type with its associated declarations."""

    doc: str = ""
    name: str
    decl: GenDecl
    consts: tuple[DocValue, ...] = ()
    vars: tuple[DocValue, ...] = ()
    funcs: tuple[DocFunc, ...] = ()
    methods: tuple[DocFunc, ...] = ()

    @field_validator("decl")
    @classmethod
    def validate_decl(cls, v: GenDecl) -> GenDecl:
        if v.tok != "type":
            raise ValueError(f"type declaration has keyword {v.tok!r}")
        return v


class DocNote(DocModel):
    """Marked comment such as ``BUG(uid): body``."""

    pos: int
    end: int
    uid: str = ""
    body: str = ""


class DocPackage(DocModel):
    """Documentation for a single package."""

    doc: str = ""
    name: str
    import_path: str = ""
    imports: tuple[str, ...] = ()
    filenames: tuple[str, ...] = ()
    notes: dict[str, tuple[DocNote, ...]] = Field(default_factory=dict)
    bugs: tuple[str, ...] = ()
    consts: tuple[DocValue, ...] = ()
    types: tuple[DocType, ...] = ()
    vars: tuple[DocValue, ...] = ()
    funcs: tuple[DocFunc, ...] = ()


__all__ = [
    "DocFunc",
    "DocNote",
    "DocPackage",
    "DocType",
    "DocValue",
    "FuncDecl",
    "GenDecl",
]

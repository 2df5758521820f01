"""Type-syntax node model.

A closed tagged union over the type expressions the upstream Go parser
emits. Every variant carries a ``kind`` discriminator named after the
``go/ast`` node it mirrors, so dumps validate straight into the right class.

Nodes are read-only: they are built once by the loader (or by tests) and
only ever inspected afterwards.
"""

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class ChanDir(StrEnum):
    """Channel direction."""

    SEND = "send"
    RECV = "recv"
    BOTH = "both"


class Node(BaseModel):
    """Base for all type-syntax nodes."""

    model_config = ConfigDict(frozen=True)


class Ident(Node):
    """Plain or predeclared identifier, e.g. ``int`` or ``Reader``."""

    kind: Literal["Ident"] = "Ident"
    name: str


class ArrayType(Node):
    """Slice or array type ``[]elt``."""

    kind: Literal["ArrayType"] = "ArrayType"
    elt: "Expr"


class StarExpr(Node):
    """Pointer type ``*x``."""

    kind: Literal["StarExpr"] = "StarExpr"
    x: "Expr"


class EllipsisType(Node):
    """Variadic parameter type ``...elt``."""

    kind: Literal["Ellipsis"] = "Ellipsis"
    elt: "Expr"


class FieldGroup(Node):
    """One or more names sharing a single type.

    Used for struct fields, interface methods and function parameter and
    result groups. Parameter and result groups may be unnamed.
    """

    kind: Literal["Field"] = "Field"
    names: tuple[str, ...] = ()
    type: "Expr"


class StructType(Node):
    """Struct type with its field groups in declared order."""

    kind: Literal["StructType"] = "StructType"
    fields: tuple[FieldGroup, ...] = ()


class InterfaceType(Node):
    """Interface type with its method groups in declared order."""

    kind: Literal["InterfaceType"] = "InterfaceType"
    methods: tuple[FieldGroup, ...] = ()


class SelectorExpr(Node):
    """Qualified name ``x.sel``, e.g. ``io.Reader``."""

    kind: Literal["SelectorExpr"] = "SelectorExpr"
    x: "Expr"
    sel: str


class FuncType(Node):
    """Function signature. ``results`` is None when nothing is returned."""

    kind: Literal["FuncType"] = "FuncType"
    params: tuple[FieldGroup, ...] = ()
    results: tuple[FieldGroup, ...] | None = None


class MapType(Node):
    """Map type ``map[key]value``."""

    kind: Literal["MapType"] = "MapType"
    key: "Expr"
    value: "Expr"


class ChanType(Node):
    """Channel type with its direction."""

    kind: Literal["ChanType"] = "ChanType"
    dir: ChanDir = ChanDir.BOTH
    value: "Expr"


class BadExpr(Node):
    """Placeholder the parser emits for source it could not parse."""

    kind: Literal["BadExpr"] = "BadExpr"
    text: str = ""


class ParenExpr(Node):
    """Parenthesized type ``(x)``."""

    kind: Literal["ParenExpr"] = "ParenExpr"
    x: "Expr"


class IndexExpr(Node):
    """Generic instantiation ``x[index]``."""

    kind: Literal["IndexExpr"] = "IndexExpr"
    x: "Expr"
    index: "Expr"


Expr = Annotated[
    Ident
    | ArrayType
    | StarExpr
    | EllipsisType
    | FieldGroup
    | StructType
    | InterfaceType
    | SelectorExpr
    | FuncType
    | MapType
    | ChanType
    | BadExpr
    | ParenExpr
    | IndexExpr,
    Field(discriminator="kind"),
]

for _model in (
    ArrayType,
    StarExpr,
    EllipsisType,
    FieldGroup,
    StructType,
    InterfaceType,
    SelectorExpr,
    FuncType,
    MapType,
    ChanType,
    ParenExpr,
    IndexExpr,
):
    _model.model_rebuild()


__all__ = [
    "ArrayType",
    "BadExpr",
    "ChanDir",
    "ChanType",
    "EllipsisType",
    "Expr",
    "FieldGroup",
    "FuncType",
    "Ident",
    "IndexExpr",
    "InterfaceType",
    "MapType",
    "Node",
    "ParenExpr",
    "SelectorExpr",
    "StarExpr",
    "StructType",
]

"""Canonical signatures for type expressions.

``type_of`` renders a type-syntax node as a deterministic string. The output
is part of the JSON contract consumed downstream, so a few historical quirks
are kept exactly:

- maps render as ``map [K]V`` (space before the bracket);
- function results follow the parameter list with no separator and are
  comma-joined without parentheses, e.g. ``func(int)string,error``;
- struct and interface members render as types only, without names.
"""

from godocjson.exceptions import UnsupportedTypeError
from godocjson.syntax import (
    ArrayType,
    ChanDir,
    ChanType,
    EllipsisType,
    FieldGroup,
    FuncType,
    Ident,
    InterfaceType,
    MapType,
    SelectorExpr,
    StarExpr,
    StructType,
)


def type_of(node: object) -> str:
    """Return the canonical signature of a type expression.

    Raises:
        UnsupportedTypeError: If ``node`` is not a renderable type expression.
    """
    match node:
        case Ident(name=name):
            return name
        case ArrayType(elt=elt):
            return "[]" + type_of(elt)
        case StarExpr(x=x):
            return "*" + type_of(x)
        case EllipsisType(elt=elt):
            return "..." + type_of(elt)
        case FieldGroup(names=names, type=typ):
            if not names:
                return type_of(typ)
            return names[0] + " " + type_of(typ)
        case StructType(fields=fields):
            return "struct{%s}" % ",".join(type_of(f.type) for f in fields)
        case InterfaceType(methods=methods):
            return "interface{%s}" % ",".join(type_of(m.type) for m in methods)
        case SelectorExpr(x=x, sel=sel):
            return type_of(x) + "." + sel
        case FuncType(params=params, results=results):
            rendered_params = ",".join(type_of(p.type) for p in params)
            rendered_results = ",".join(type_of(r.type) for r in results or ())
            return f"func({rendered_params}){rendered_results}"
        case MapType(key=key, value=value):
            return f"map [{type_of(key)}]{type_of(value)}"
        case ChanType(dir=ChanDir.SEND, value=value):
            return f"chan<- {type_of(value)}"
        case ChanType(dir=ChanDir.RECV, value=value):
            return f"<-chan {type_of(value)}"
        case ChanType(value=value):
            return f"chan {type_of(value)}"
        case _:
            raise UnsupportedTypeError(node)

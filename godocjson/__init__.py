"""godocjson - structural documentation for Go packages as JSON.

Converts the documentation model of one Go package (functions, types,
consts, vars, methods and notes) into a flat, self-contained JSON tree in
which every record carries its package identity and source position.

Quick Start:
    >>> from godocjson import FileSet, flatten_package, dump_package
    >>> from godocjson.loader import load_dump, select_package
    >>>
    >>> model = load_dump("pkg.json")
    >>> package = select_package(model, exclude_pattern=r"_test\\.go$")
    >>> print(dump_package(flatten_package(package, model.fileset)))
"""

from .docmodel import DocFunc, DocNote, DocPackage, DocType, DocValue, FuncDecl, GenDecl
from .exceptions import (
    FilterError,
    GoDocJSONError,
    ModelLoadError,
    MultiplePackagesError,
    PositionError,
    UnsupportedTypeError,
)
from .fileset import FileSet, Position, SourceFile
from .flatten import convert_function, convert_notes, convert_type, convert_value, flatten_package
from .records import Func, FuncParam, Note, Package, Type, Value, dump_package
from .typesig import type_of

__version__ = "0.3.0"

__all__ = [
    "DocFunc",
    "DocNote",
    "DocPackage",
    "DocType",
    "DocValue",
    "FileSet",
    "FilterError",
    "Func",
    "FuncDecl",
    "FuncParam",
    "GenDecl",
    "GoDocJSONError",
    "ModelLoadError",
    "MultiplePackagesError",
    "Note",
    "Package",
    "Position",
    "PositionError",
    "SourceFile",
    "Type",
    "UnsupportedTypeError",
    "Value",
    "convert_function",
    "convert_notes",
    "convert_type",
    "convert_value",
    "dump_package",
    "flatten_package",
    "type_of",
]

"""Exception hierarchy for godocjson.

This module defines the exception hierarchy used throughout godocjson.
All exceptions inherit from GoDocJSONError, providing a consistent error handling interface.
"""

from typing import Any


class GoDocJSONError(Exception):
    """Base exception for all godocjson errors."""


class UnsupportedTypeError(GoDocJSONError):
    """Raised when a type expression has a shape the signature formatter cannot render."""

    def __init__(self, node: Any):
        self.node = node
        self.raw = repr(node)
        super().__init__(f"Unsupported type expression {self.raw}")


class PositionError(GoDocJSONError):
    """Raised when a declaration's source position cannot be resolved to a file and line."""

    def __init__(self, pos: int, message: str | None = None):
        self.pos = pos
        super().__init__(message or f"Cannot resolve source position {pos}")


class MultiplePackagesError(GoDocJSONError):
    """Raised when more than one package is found in a single invocation."""


class ModelLoadError(GoDocJSONError):
    """Raised when a documentation model dump cannot be read or validated."""


class FilterError(GoDocJSONError):
    """Raised when the exclude filter pattern is not a valid regular expression."""

"""Source position resolution.

Declarations in the documentation model carry raw integer positions that are
only meaningful relative to the file set the parser used. Each file occupies
the offset range ``[base, base + size]``; offset 0 means "no position".
"""

from bisect import bisect_right
from dataclasses import dataclass
from typing import Protocol

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from godocjson.exceptions import PositionError

NO_POS = 0


@dataclass(frozen=True)
class Position:
    """Resolved source position."""

    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"


class PositionResolver(Protocol):
    """Anything that maps a raw position to a file and line."""

    def position(self, pos: int) -> Position: ...


class SourceFile(BaseModel):
    """A single file registered in a file set.

    ``lines`` holds the byte offset of each line start, relative to the file.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    base: int
    size: int
    lines: tuple[int, ...] = (0,)

    @field_validator("lines")
    @classmethod
    def validate_lines(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        if not v or v[0] != 0:
            raise ValueError("line table must start at offset 0")
        if any(b <= a for a, b in zip(v, v[1:])):
            raise ValueError("line offsets must be strictly increasing")
        return v

    @model_validator(mode="after")
    def validate_range(self) -> "SourceFile":
        if self.base < 1:
            raise ValueError(f"file {self.name!r} has invalid base {self.base}")
        if self.size < 0:
            raise ValueError(f"file {self.name!r} has negative size")
        return self

    def contains(self, pos: int) -> bool:
        return self.base <= pos <= self.base + self.size

    def position(self, pos: int) -> Position:
        offset = pos - self.base
        index = bisect_right(self.lines, offset) - 1
        return Position(filename=self.name, line=index + 1, column=offset - self.lines[index] + 1)


class FileSet(BaseModel):
    """Ordered collection of source files sharing one position space."""

    model_config = ConfigDict(frozen=True)

    files: tuple[SourceFile, ...] = ()

    @model_validator(mode="after")
    def validate_disjoint(self) -> "FileSet":
        ordered = sorted(self.files, key=lambda f: f.base)
        for prev, cur in zip(ordered, ordered[1:]):
            if cur.base <= prev.base + prev.size:
                raise ValueError(f"files {prev.name!r} and {cur.name!r} overlap")
        return self

    def file(self, pos: int) -> SourceFile:
        """Return the file containing ``pos``.

        Raises:
            PositionError: If ``pos`` is NO_POS or lies outside every file.
        """
        if pos == NO_POS:
            raise PositionError(pos, "Declaration has no source position")
        for f in self.files:
            if f.contains(pos):
                return f
        raise PositionError(pos)

    def position(self, pos: int) -> Position:
        return self.file(pos).position(pos)

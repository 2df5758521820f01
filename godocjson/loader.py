"""Load documentation model dumps.

The upstream Go parser writes one document holding the file set it used and
the documentation model of every package it found::

    {"files": [{"name": "dir/a.go", "base": 1, "size": 120, "lines": [0, 14]}],
     "packages": [{"name": "a", "importPath": "example.com/a", ...}]}

JSON and YAML are both accepted. After loading, source files can be excluded
by name, and exactly one package may remain.
"""

import json
import sys
from pathlib import Path, PurePosixPath
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from godocjson.docmodel import DocFunc, DocNote, DocPackage, DocType, DocValue
from godocjson.exceptions import ModelLoadError, MultiplePackagesError
from godocjson.fileset import FileSet
from godocjson.filters import FileFilter, get_exclude_filter
from godocjson.logging import get_logger

logger = get_logger(__name__)

YAML_SUFFIXES = frozenset({".yml", ".yaml"})
BUG_MARKER = "BUG"


class ModelDump(BaseModel):
    """Parsed model dump: a file set plus the packages found in it."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    fileset: FileSet = Field(default_factory=FileSet, alias="files")
    packages: tuple[DocPackage, ...] = ()

    @field_validator("fileset", mode="before")
    @classmethod
    def wrap_files(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple)):
            return {"files": v}
        return v


def parse_dump(text: str, fmt: str = "json") -> ModelDump:
    """Validate dump text in the given format ("json" or "yaml")."""
    try:
        data = yaml.safe_load(text) if fmt == "yaml" else json.loads(text)
        return ModelDump.model_validate(data)
    except (ValueError, yaml.YAMLError, ValidationError) as exc:
        raise ModelLoadError(f"Invalid model dump: {exc}") from exc


def load_dump(source: str | Path) -> ModelDump:
    """Read a model dump from a file, or JSON from stdin when ``source`` is "-"."""
    if str(source) == "-":
        return parse_dump(sys.stdin.read())
    path = Path(source)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ModelLoadError(f"Cannot read model dump {path}: {exc}") from exc
    fmt = "yaml" if path.suffix.lower() in YAML_SUFFIXES else "json"
    logger.info("Loading %s model dump from %s", fmt, path)
    return parse_dump(text, fmt)


def _basename(filename: str) -> str:
    return PurePosixPath(filename.replace("\\", "/")).name


def filter_package(package: DocPackage, fileset: FileSet, keep: FileFilter) -> DocPackage | None:
    """Drop everything declared in excluded files.

    Returns None when the package lists files and all of them are excluded.
    A type declared in an excluded file is dropped along with its associated
    declarations.
    """
    filenames = tuple(f for f in package.filenames if keep(_basename(f)))
    if package.filenames and not filenames:
        logger.info("Skipping package %s: all files excluded", package.name)
        return None

    def kept(pos: int) -> bool:
        return keep(_basename(fileset.file(pos).name))

    def funcs(docs: tuple[DocFunc, ...]) -> tuple[DocFunc, ...]:
        return tuple(d for d in docs if kept(d.decl.pos))

    def values(docs: tuple[DocValue, ...]) -> tuple[DocValue, ...]:
        return tuple(d for d in docs if kept(d.decl.tok_pos))

    def notes(group: tuple[DocNote, ...]) -> tuple[DocNote, ...]:
        return tuple(n for n in group if kept(n.pos))

    types: list[DocType] = []
    for t in package.types:
        if not kept(t.decl.tok_pos):
            continue
        types.append(
            t.model_copy(
                update={
                    "consts": values(t.consts),
                    "vars": values(t.vars),
                    "funcs": funcs(t.funcs),
                    "methods": funcs(t.methods),
                }
            )
        )

    kept_notes = {marker: notes(group) for marker, group in package.notes.items()}
    kept_notes = {marker: group for marker, group in kept_notes.items() if group}
    bugs = package.bugs
    if BUG_MARKER in package.notes:
        bugs = tuple(n.body for n in kept_notes.get(BUG_MARKER, ()))

    excluded = len(package.filenames) - len(filenames)
    if excluded:
        logger.info("Excluded %d of %d files from package %s", excluded, len(package.filenames), package.name)

    return package.model_copy(
        update={
            "filenames": filenames,
            "notes": kept_notes,
            "bugs": bugs,
            "consts": values(package.consts),
            "types": tuple(types),
            "vars": values(package.vars),
            "funcs": funcs(package.funcs),
        }
    )


def select_package(dump: ModelDump, exclude_pattern: str = "") -> DocPackage | None:
    """Apply the exclude filter and return the single remaining package.

    Returns None when no package remains.

    Raises:
        FilterError: If ``exclude_pattern`` is not a valid regular expression.
        MultiplePackagesError: If more than one package remains.
    """
    keep = get_exclude_filter(exclude_pattern)
    packages = list(dump.packages)
    if keep is not None:
        fileset = dump.fileset
        packages = [p for p in (filter_package(pkg, fileset, keep) for pkg in packages) if p is not None]

    if len(packages) > 1:
        names = ", ".join(p.name for p in packages)
        raise MultiplePackagesError(f"Multiple packages found: {names}")
    return packages[0] if packages else None

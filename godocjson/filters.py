"""Exclude source files by name."""

import re
from collections.abc import Callable

from godocjson.exceptions import FilterError

FileFilter = Callable[[str], bool]


def get_exclude_filter(pattern: str) -> FileFilter | None:
    """Build a predicate that keeps file names the pattern does not match.

    Returns None for an empty pattern, meaning every file is kept.

    Raises:
        FilterError: If ``pattern`` is not a valid regular expression.
    """
    if not pattern:
        return None
    try:
        compiled = re.compile(pattern)
    except re.error as exc:
        raise FilterError(f"Invalid exclude pattern {pattern!r}: {exc}") from exc

    def keep(filename: str) -> bool:
        return compiled.search(filename) is None

    return keep

"""Filesystem predicates and ancestor search."""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import Callable

# A predicate over an absolute directory path. May raise OSError.
FileChecker = Callable[[str], bool]


def has_file(*parts: str | Path) -> bool:
    """True if the joined path exists. Errors other than "missing" propagate."""
    try:
        os.stat(os.path.join(*parts))
    except FileNotFoundError:
        return False
    return True


def is_file(*parts: str | Path) -> bool:
    mode = _file_mode(*parts)
    return mode is not None and stat.S_ISREG(mode)


def is_folder(*parts: str | Path) -> bool:
    mode = _file_mode(*parts)
    return mode is not None and stat.S_ISDIR(mode)


def _file_mode(*parts: str | Path) -> int | None:
    try:
        return os.stat(os.path.join(*parts)).st_mode
    except OSError:
        return None


def or_predicates(*predicates: FileChecker) -> FileChecker:
    """Combine checkers; true as soon as one is true, first error stops."""

    def check(path: str) -> bool:
        return any(predicate(path) for predicate in predicates)

    return check


def find_ancestor(stop_when: FileChecker, path: str | Path) -> str | None:
    """Walk from *path* up towards the filesystem root.

    Returns the first absolute directory for which ``stop_when`` is true, or
    None once the filesystem root is reached (the root itself is not tested).
    """
    current = os.path.abspath(path)
    while True:
        parent = os.path.dirname(current)
        if parent == current:
            return None
        if stop_when(current):
            return current
        current = parent

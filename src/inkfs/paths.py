"""Path validation shared by every engine operation.

Each ``require_*`` helper checks existence and type of a local path and
raises the matching :mod:`inkfs.exceptions` error *before* anything on
disk is touched.  The checks are not atomic with the mutation that
follows them; a concurrent writer can still win the race.
"""

from __future__ import annotations

import os
from pathlib import Path

from .exceptions import (
    AlreadyExistsError,
    DestinationExistsError,
    InvalidPathError,
    PathNotFoundError,
    SourceMissingError,
    WrongTypeError,
    io_failure,
)

__all__ = [
    "to_path",
    "lexists",
    "require_file",
    "require_dir",
    "require_absent",
    "require_source",
    "require_free_destination",
    "ensure_parent",
    "is_within",
]


def to_path(path: str | os.PathLike[str], op: str) -> Path:
    """Return *path* as a :class:`~pathlib.Path`, rejecting unusable values.

    Raises:
        InvalidPathError: If *path* is empty, contains a NUL byte, or is
            not a text path.
    """
    try:
        raw = os.fspath(path)
    except TypeError:
        raise InvalidPathError(f"{op}: not a path: {path!r}", op=op) from None
    if not isinstance(raw, str):
        raise InvalidPathError(f"{op}: path must be text, got {type(raw).__name__}", op=op)
    if not raw:
        raise InvalidPathError(f"{op}: path must not be empty", op=op, path=raw)
    if "\0" in raw:
        raise InvalidPathError(f"{op}: path contains a NUL byte: {raw!r}", op=op, path=raw)
    return Path(raw)


def lexists(p: Path) -> bool:
    """Like :meth:`Path.exists` but true for dangling symlinks too."""
    return os.path.lexists(p)


def require_file(path: str | os.PathLike[str], op: str) -> Path:
    """Return *path* if it is an existing regular file (symlinks followed)."""
    p = to_path(path, op)
    if not p.exists():
        raise PathNotFoundError(f"{op}: file does not exist: {p}", op=op, path=p)
    if not p.is_file():
        raise WrongTypeError(f"{op}: path is not a file: {p}", op=op, path=p)
    return p


def require_dir(path: str | os.PathLike[str], op: str) -> Path:
    """Return *path* if it is an existing directory (symlinks followed)."""
    p = to_path(path, op)
    if not p.exists():
        raise PathNotFoundError(f"{op}: path does not exist: {p}", op=op, path=p)
    if not p.is_dir():
        raise WrongTypeError(f"{op}: path is not a directory: {p}", op=op, path=p)
    return p


def require_absent(path: str | os.PathLike[str], op: str) -> Path:
    """Return *path* if nothing exists there yet."""
    p = to_path(path, op)
    if lexists(p):
        raise AlreadyExistsError(f"{op}: path already exists: {p}", op=op, path=p)
    return p


def require_source(path: str | os.PathLike[str], op: str) -> Path:
    """Return *path* if it exists; a dangling symlink counts as existing."""
    p = to_path(path, op)
    if not lexists(p):
        raise SourceMissingError(f"{op}: source path does not exist: {p}", op=op, path=p)
    return p


def require_free_destination(src: Path, dest: Path, op: str) -> Path:
    """Return *dest* if nothing exists there; rename and move never overwrite."""
    if lexists(dest):
        raise DestinationExistsError(
            f"{op}: destination already exists: {dest}", op=op, path=src, dest=dest,
        )
    return dest


def ensure_parent(p: Path, op: str) -> None:
    """Create the parent directories of *p* if they are missing."""
    parent = p.parent
    if parent.is_dir():
        return
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise io_failure(op, exc, parent) from exc


def is_within(child: Path, parent: Path) -> bool:
    """Return True if *child* is *parent* or lies below it (after resolving)."""
    child_real = Path(os.path.realpath(child))
    parent_real = Path(os.path.realpath(parent))
    return child_real == parent_real or parent_real in child_real.parents

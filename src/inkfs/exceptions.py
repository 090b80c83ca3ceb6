"""Exceptions for inkfs.

Every failure raised by the engine is an :class:`FSError` carrying an
:class:`ErrorKind`, the operation name and the offending path(s).  The
concrete classes also derive from the matching builtin (``FileNotFoundError``,
``FileExistsError``, ``ValueError``, ``OSError``) so callers that only know
the standard exceptions still catch them.
"""

from __future__ import annotations

import os
from enum import Enum


class ErrorKind(str, Enum):
    """Kind of engine failure.

    Members: ``NOT_FOUND``, ``SOURCE_MISSING``, ``ALREADY_EXISTS``,
    ``DESTINATION_EXISTS``, ``WRONG_TYPE``, ``TOO_MANY_COLLISIONS``,
    ``INVALID_PATH``, ``INVALID_DATA``, ``IO_FAILURE``.
    """
    NOT_FOUND = "not_found"
    SOURCE_MISSING = "source_missing"
    ALREADY_EXISTS = "already_exists"
    DESTINATION_EXISTS = "destination_exists"
    WRONG_TYPE = "wrong_type"
    TOO_MANY_COLLISIONS = "too_many_collisions"
    INVALID_PATH = "invalid_path"
    INVALID_DATA = "invalid_data"
    IO_FAILURE = "io_failure"

    def __str__(self) -> str:          # noqa: D105
        return self.value


class FSError(Exception):
    """Base class for all engine errors.

    Attributes:
        kind: The :class:`ErrorKind` of the failure.
        op: Name of the operation that failed (e.g. ``"copy_file"``).
        path: The path the operation was applied to.
        dest: Second path for two-path operations, else ``None``.
    """

    kind: ErrorKind = ErrorKind.IO_FAILURE

    def __init__(self, message: str, *, op: str, path: str | os.PathLike[str] | None = None,
                 dest: str | os.PathLike[str] | None = None):
        Exception.__init__(self, message)
        self.message = message
        self.op = op
        self.path = os.fspath(path) if path is not None else None
        self.dest = os.fspath(dest) if dest is not None else None

    def __str__(self) -> str:
        return self.message


class PathNotFoundError(FSError, FileNotFoundError):
    """Raised when a path that must exist does not."""
    kind = ErrorKind.NOT_FOUND


class SourceMissingError(PathNotFoundError):
    """Raised when the source of a rename, move or copy does not exist."""
    kind = ErrorKind.SOURCE_MISSING


class AlreadyExistsError(FSError, FileExistsError):
    """Raised when creating a path that already exists."""
    kind = ErrorKind.ALREADY_EXISTS


class DestinationExistsError(AlreadyExistsError):
    """Raised when a rename or move target already exists.

    Rename and move never overwrite and never pick another name.
    """
    kind = ErrorKind.DESTINATION_EXISTS


class WrongTypeError(FSError, OSError):
    """Raised when a path exists but is a file where a directory is
    expected, or the other way around."""
    kind = ErrorKind.WRONG_TYPE


class TooManyCollisionsError(FSError):
    """Raised when every copy name up to the probe ceiling is taken."""
    kind = ErrorKind.TOO_MANY_COLLISIONS


class InvalidPathError(FSError, ValueError):
    """Raised for paths that cannot be represented or would be unsafe
    (empty, NUL bytes, copying a directory into itself)."""
    kind = ErrorKind.INVALID_PATH


class InvalidDataError(FSError, ValueError):
    """Raised when binary payloads are not valid base64."""
    kind = ErrorKind.INVALID_DATA


class IOFailureError(FSError, OSError):
    """Raised when the operating system rejects an operation.

    The original :class:`OSError` is chained as ``__cause__`` and its
    ``errno`` is kept on this exception.
    """
    kind = ErrorKind.IO_FAILURE

    def __init__(self, message: str, *, op: str, path: str | os.PathLike[str] | None = None,
                 dest: str | os.PathLike[str] | None = None, errno: int | None = None):
        super().__init__(message, op=op, path=path, dest=dest)
        self.errno = errno


def io_failure(op: str, exc: OSError, path: str | os.PathLike[str], dest: str | os.PathLike[str] | None = None) -> IOFailureError:
    """Wrap an :class:`OSError` raised while running *op* on *path*."""
    where = os.fspath(path)
    if dest is not None:
        where = f"{where} -> {os.fspath(dest)}"
    reason = exc.strerror or str(exc)
    return IOFailureError(f"{op} failed for {where}: {reason}", op=op, path=path, dest=dest, errno=exc.errno)

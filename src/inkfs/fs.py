"""FS: the filesystem operation surface handed to the GUI layer."""

from __future__ import annotations

import base64
import binascii
import logging
import os

from .copy._io import _write_bytes
from .copy._resolve import MAX_COPY_ATTEMPTS, plan_target
from .copy._types import CollisionPlan, TransferResult
from .exceptions import (
    AlreadyExistsError,
    InvalidDataError,
    InvalidPathError,
    IOFailureError,
    WrongTypeError,
    io_failure,
)
from .paths import ensure_parent, require_absent, require_file, to_path
from .tree import FileNode, read_directory as _read_directory

__all__ = [
    "FS",
    "read_directory", "read_file", "read_file_binary",
    "write_file", "write_file_binary",
    "create_file", "create_directory", "ensure_dir",
    "rename_path", "delete_path", "move_path", "copy_file",
    "path_exists", "resolve_target", "plan_copy",
]

logger = logging.getLogger(__name__)


class FS:
    """Synchronous filesystem operations on absolute OS paths.

    An ``FS`` holds no state besides its text *encoding*; every call goes
    straight to the filesystem, so instances may be shared between
    threads.  Calls touching overlapping paths are not serialized.

    All failures are :class:`~inkfs.exceptions.FSError` subclasses.
    """

    def __init__(self, *, encoding: str = "utf-8", max_copy_attempts: int = MAX_COPY_ATTEMPTS):
        self.encoding = encoding
        self.max_copy_attempts = max_copy_attempts

    def __repr__(self) -> str:
        return f"FS(encoding={self.encoding!r})"

    # --- Read operations ---

    def read_directory(self, path: str | os.PathLike[str], recursive: bool = False) -> list[FileNode]:
        """List directory *path*; see :func:`inkfs.tree.read_directory`."""
        return _read_directory(path, recursive)

    def read_file(self, path: str | os.PathLike[str]) -> str:
        """Read a text file.

        Raises:
            PathNotFoundError: If *path* does not exist.
            WrongTypeError: If *path* is not a file.
            IOFailureError: If the file cannot be read or decoded.
        """
        op = "read_file"
        p = require_file(path, op)
        try:
            data = p.read_bytes()
        except OSError as exc:
            raise io_failure(op, exc, p) from exc
        try:
            return data.decode(self.encoding)
        except UnicodeDecodeError as exc:
            raise IOFailureError(
                f"{op} failed for {p}: not valid {self.encoding} text ({exc.reason} at byte {exc.start})",
                op=op, path=p,
            ) from exc

    def read_file_binary(self, path: str | os.PathLike[str]) -> str:
        """Read a file and return its bytes as standard base64 text."""
        op = "read_file_binary"
        p = require_file(path, op)
        try:
            data = p.read_bytes()
        except OSError as exc:
            raise io_failure(op, exc, p) from exc
        return base64.b64encode(data).decode("ascii")

    def path_exists(self, path: str | os.PathLike[str]) -> bool:
        """Return ``True`` if *path* exists (symlinks followed).  Never raises."""
        try:
            p = to_path(path, "path_exists")
        except InvalidPathError:
            return False
        return p.exists()

    # --- Write operations ---

    def write_file(self, path: str | os.PathLike[str], content: str) -> None:
        """Write *content* to *path*, replacing any existing file.

        Missing parent directories are created.
        """
        op = "write_file"
        p = self._writable_file(path, op)
        _write_bytes(p, content.encode(self.encoding), op)
        logger.debug("wrote %s (%d chars)", p, len(content))

    def write_file_binary(self, path: str | os.PathLike[str], data: str) -> None:
        """Decode base64 *data* and write the bytes to *path*.

        The payload is validated before the file is touched.

        Raises:
            InvalidDataError: If *data* is not valid base64.
        """
        op = "write_file_binary"
        p = self._writable_file(path, op)
        try:
            raw = base64.b64decode(data, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise InvalidDataError(f"{op}: invalid base64 data for {p}: {exc}", op=op, path=p) from exc
        _write_bytes(p, raw, op)
        logger.debug("wrote %s (%d bytes)", p, len(raw))

    def create_file(self, path: str | os.PathLike[str]) -> None:
        """Create an empty file; fails if *path* already exists."""
        op = "create_file"
        p = require_absent(path, op)
        ensure_parent(p, op)
        try:
            with open(p, "xb"):
                pass
        except FileExistsError as exc:
            raise AlreadyExistsError(f"{op}: path already exists: {p}", op=op, path=p) from exc
        except OSError as exc:
            raise io_failure(op, exc, p) from exc
        logger.debug("created file %s", p)

    def create_directory(self, path: str | os.PathLike[str]) -> None:
        """Create a directory and any missing parents; fails if *path* exists."""
        op = "create_directory"
        p = require_absent(path, op)
        try:
            p.mkdir(parents=True)
        except FileExistsError as exc:
            raise AlreadyExistsError(f"{op}: path already exists: {p}", op=op, path=p) from exc
        except OSError as exc:
            raise io_failure(op, exc, p) from exc
        logger.debug("created directory %s", p)

    def ensure_dir(self, path: str | os.PathLike[str]) -> None:
        """Create directory *path* unless it already exists."""
        op = "ensure_dir"
        p = to_path(path, op)
        if p.is_dir():
            return
        if os.path.lexists(p):
            raise WrongTypeError(f"{op}: path is not a directory: {p}", op=op, path=p)
        try:
            p.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise io_failure(op, exc, p) from exc
        logger.debug("created directory %s", p)

    # --- Transfer operations ---

    def rename_path(self, old_path: str | os.PathLike[str], new_path: str | os.PathLike[str]) -> None:
        """Rename *old_path* to *new_path*.

        Raises:
            SourceMissingError: If *old_path* does not exist.
            DestinationExistsError: If *new_path* exists.
        """
        from .copy._ops import _rename
        _rename(old_path, new_path)

    def delete_path(self, path: str | os.PathLike[str]) -> None:
        """Permanently delete a file or a whole directory tree.

        Raises:
            PathNotFoundError: If *path* does not exist.
        """
        from .copy._ops import _delete
        _delete(path)

    def move_path(self, source: str | os.PathLike[str], destination: str | os.PathLike[str]) -> TransferResult:
        """Move *source* to *destination*, or into it if it is a directory.

        Raises:
            SourceMissingError: If *source* does not exist.
            DestinationExistsError: If the target already exists.
        """
        from .copy._ops import _move
        return _move(source, destination)

    def copy_file(self, source: str | os.PathLike[str], destination: str | os.PathLike[str]) -> TransferResult:
        """Copy a file or directory tree without ever overwriting.

        The returned :class:`~inkfs.copy.TransferResult` names the path
        actually written, which differs from the requested one when a
        ``"(copy N)"`` name had to be chosen.

        Raises:
            SourceMissingError: If *source* does not exist.
            TooManyCollisionsError: If no free copy name was found.
            IOFailureError: On the first file that fails to copy.
        """
        from .copy._ops import _copy
        return _copy(source, destination, max_attempts=self.max_copy_attempts)

    def resolve_target(self, path: str | os.PathLike[str]) -> str:
        """Return the first free path in the copy-name sequence for *path*.

        *path* itself when nothing exists there, else ``"<stem> (copy)<ext>"``,
        ``"<stem> (copy 2)<ext>"``, ...
        """
        return plan_target(path, max_attempts=self.max_copy_attempts).final

    def plan_copy(self, source: str | os.PathLike[str], destination: str | os.PathLike[str]) -> CollisionPlan:
        """Return where :meth:`copy_file` would put *source*, without copying."""
        from .copy._ops import _plan_copy
        _src, plan = _plan_copy(source, destination, max_attempts=self.max_copy_attempts, op="plan_copy")
        return plan

    # --- Helpers ---

    @staticmethod
    def _writable_file(path: str | os.PathLike[str], op: str):
        p = to_path(path, op)
        if p.is_dir():
            raise WrongTypeError(f"{op}: path is a directory: {p}", op=op, path=p)
        return p


_default_fs = FS()

read_directory = _default_fs.read_directory
read_file = _default_fs.read_file
read_file_binary = _default_fs.read_file_binary
write_file = _default_fs.write_file
write_file_binary = _default_fs.write_file_binary
create_file = _default_fs.create_file
create_directory = _default_fs.create_directory
ensure_dir = _default_fs.ensure_dir
rename_path = _default_fs.rename_path
delete_path = _default_fs.delete_path
move_path = _default_fs.move_path
copy_file = _default_fs.copy_file
path_exists = _default_fs.path_exists
resolve_target = _default_fs.resolve_target
plan_copy = _default_fs.plan_copy

"""Directory enumeration into :class:`FileNode` trees."""

from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator

from .exceptions import IOFailureError, io_failure
from .paths import require_dir

__all__ = ["FileNode", "read_directory", "walk_nodes"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FileNode:
    """One entry found while enumerating a directory.

    Attributes:
        name: Base name of the entry.
        path: Full OS path of the entry.
        is_directory: ``True`` for directories (symlinks followed; a
            dangling link is a non-directory).
        children: Entries of this directory when it was expanded, else
            ``None``.  ``None`` means "not expanded", not "empty".
        size: Size in bytes for files; always ``None`` for directories.
        modified: Modification time in whole seconds since the epoch, or
            ``None`` when the OS could not supply one.
    """

    name: str
    path: str
    is_directory: bool
    children: tuple[FileNode, ...] | None = None
    size: int | None = None
    modified: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready dict.

        ``children`` is left out entirely for nodes that were not
        expanded, and is an empty list for expanded empty directories.
        """
        d: dict[str, Any] = {
            "name": self.name,
            "path": self.path,
            "is_directory": self.is_directory,
        }
        if self.children is not None:
            d["children"] = [c.to_dict() for c in self.children]
        d["size"] = self.size
        d["modified"] = self.modified
        return d


def _sort_key(node: FileNode) -> tuple[bool, str, str]:
    return (not node.is_directory, node.name.lower(), node.name)


def _modified(st: os.stat_result) -> int | None:
    mtime = getattr(st, "st_mtime", None)
    if mtime is None or mtime < 0:
        return None
    try:
        return int(mtime)
    except (OverflowError, ValueError):
        return None


def _entry_stat(entry: os.DirEntry) -> os.stat_result:
    """Stat *entry* through symlinks; a dangling link is stat-ed itself."""
    try:
        return entry.stat()
    except FileNotFoundError:
        if not entry.is_symlink():
            raise
        return entry.stat(follow_symlinks=False)


def _read_level(dir_path: Path, recursive: bool) -> list[FileNode]:
    """Enumerate one directory; any unreadable entry fails the whole call."""
    nodes: list[FileNode] = []
    try:
        with os.scandir(dir_path) as it:
            for entry in it:
                try:
                    st = _entry_stat(entry)
                except OSError as exc:
                    raise io_failure("read_directory", exc, entry.path) from exc
                is_dir = stat.S_ISDIR(st.st_mode)
                children = None
                # Symlinked directories are listed but never descended into.
                if is_dir and recursive and not entry.is_symlink():
                    children = tuple(_read_level(Path(entry.path), recursive))
                nodes.append(FileNode(
                    name=entry.name,
                    path=entry.path,
                    is_directory=is_dir,
                    children=children,
                    size=None if is_dir else st.st_size,
                    modified=_modified(st),
                ))
    except IOFailureError:
        raise
    except OSError as exc:
        raise io_failure("read_directory", exc, dir_path) from exc
    nodes.sort(key=_sort_key)
    return nodes


def read_directory(path: str | os.PathLike[str], recursive: bool = False) -> list[FileNode]:
    """List the entries of directory *path*.

    Entries are ordered directories first, then case-insensitively by
    name.  With *recursive* set, every (non-symlink) subdirectory has its
    ``children`` filled in; otherwise ``children`` stays ``None`` so a
    caller can expand nodes lazily with a follow-up call.

    Raises:
        PathNotFoundError: If *path* does not exist.
        WrongTypeError: If *path* is not a directory.
        IOFailureError: If any entry cannot be read.  No partial listing
            is returned.
    """
    dir_path = require_dir(path, "read_directory")
    nodes = _read_level(dir_path, recursive)
    logger.debug("read_directory %s: %d entries (recursive=%s)", dir_path, len(nodes), recursive)
    return nodes


def walk_nodes(nodes: list[FileNode] | tuple[FileNode, ...], depth: int = 0) -> Iterator[tuple[int, FileNode]]:
    """Yield ``(depth, node)`` pairs depth-first, in listing order."""
    for node in nodes:
        yield depth, node
        if node.children:
            yield from walk_nodes(node.children, depth + 1)

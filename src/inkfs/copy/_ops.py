"""Copy/move/rename/delete operations (internal implementations)."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..exceptions import InvalidPathError, PathNotFoundError, io_failure
from ..paths import (
    ensure_parent,
    is_within,
    lexists,
    require_free_destination,
    require_source,
    to_path,
)
from ._io import _copy_file, _copy_tree, _remove_path
from ._resolve import MAX_COPY_ATTEMPTS, _effective_target, plan_target
from ._types import CollisionPlan, TransferResult

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Copy (permissive: picks a free name on collision)
# ---------------------------------------------------------------------------

def _plan_copy(
    source: str | os.PathLike[str],
    destination: str | os.PathLike[str],
    *,
    max_attempts: int = MAX_COPY_ATTEMPTS,
    op: str = "copy_file",
) -> tuple[Path, CollisionPlan]:
    """Validate a copy and work out its final target without writing."""
    src = require_source(source, op)
    dest = to_path(destination, op)
    is_dir = src.is_dir()
    plan = plan_target(_effective_target(src, dest, op), max_attempts=max_attempts, op=op,
                       is_directory=is_dir)

    # A symlinked source is checked by what it resolves to.
    if is_dir and is_within(Path(plan.final), src):
        raise InvalidPathError(
            f"{op}: cannot copy directory into itself: {src} -> {plan.final}",
            op=op, path=src, dest=plan.final,
        )
    return src, plan


def _copy(
    source: str | os.PathLike[str],
    destination: str | os.PathLike[str],
    *,
    max_attempts: int = MAX_COPY_ATTEMPTS,
) -> TransferResult:
    """Copy a file or directory tree; never overwrites.

    If *destination* is an existing directory the copy lands at
    ``destination/<name of source>``.  If that target exists, a
    ``"<stem> (copy N)<ext>"`` name is chosen instead.

    Directory copies are not atomic: on failure the files copied so far
    are left behind and the error is raised.
    """
    op = "copy_file"
    src, plan = _plan_copy(source, destination, max_attempts=max_attempts, op=op)
    final = Path(plan.final)

    if src.is_dir():
        files = _copy_tree(src, final, op)
    else:
        ensure_parent(final, op)
        _copy_file(src, final, op)
        files = 1

    logger.debug("copied %s -> %s (%d file(s))", src, final, files)
    return TransferResult(source=str(src), target=str(final), renamed=plan.renamed, files=files)


# ---------------------------------------------------------------------------
# Move / rename (strict: never overwrites, never renames)
# ---------------------------------------------------------------------------

def _move(source: str | os.PathLike[str], destination: str | os.PathLike[str]) -> TransferResult:
    """Move *source* to *destination* with a single OS rename.

    If *destination* is an existing directory the entry moves into it,
    keeping its name.  An existing target is an error.  Cross-device
    moves are not emulated; the OS error is raised as is.
    """
    op = "move_path"
    src = require_source(source, op)
    dest = to_path(destination, op)
    target = _effective_target(src, dest, op)
    require_free_destination(src, target, op)

    if src.is_dir() and not src.is_symlink() and is_within(target, src):
        raise InvalidPathError(
            f"{op}: cannot move directory into itself: {src} -> {target}",
            op=op, path=src, dest=target,
        )

    ensure_parent(target, op)
    try:
        os.rename(src, target)
    except OSError as exc:
        raise io_failure(op, exc, src, target) from exc

    logger.debug("moved %s -> %s", src, target)
    return TransferResult(source=str(src), target=str(target), files=1)


def _rename(old: str | os.PathLike[str], new: str | os.PathLike[str]) -> None:
    """Rename *old* to exactly *new*; fails if *new* exists."""
    op = "rename_path"
    src = require_source(old, op)
    target = require_free_destination(src, to_path(new, op), op)
    try:
        os.rename(src, target)
    except OSError as exc:
        raise io_failure(op, exc, src, target) from exc
    logger.debug("renamed %s -> %s", src, target)


# ---------------------------------------------------------------------------
# Delete
# ---------------------------------------------------------------------------

def _delete(path: str | os.PathLike[str]) -> None:
    """Permanently delete a file, symlink or whole directory tree."""
    op = "delete_path"
    p = to_path(path, op)
    if not lexists(p):
        raise PathNotFoundError(f"{op}: path does not exist: {p}", op=op, path=p)
    _remove_path(p, op)
    logger.debug("deleted %s", p)

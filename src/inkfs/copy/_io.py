"""File I/O helpers: single-file copy, recursive tree copy, removal, writes."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from ..exceptions import io_failure
from ..paths import ensure_parent


# ---------------------------------------------------------------------------
# Copying
# ---------------------------------------------------------------------------

def _copy_file(src: Path, dst: Path, op: str) -> None:
    """Copy file content and permission bits from *src* to *dst*."""
    try:
        shutil.copy(src, dst, follow_symlinks=True)
    except OSError as exc:
        raise io_failure(op, exc, src, dst) from exc


def _copy_symlink(src: Path, dst: Path, op: str) -> None:
    """Recreate symlink *src* at *dst* with the same target string."""
    try:
        os.symlink(os.readlink(src), dst, target_is_directory=src.is_dir())
    except OSError as exc:
        raise io_failure(op, exc, src, dst) from exc


def _copy_tree(src: Path, dst: Path, op: str) -> int:
    """Copy directory *src* to *dst* depth-first; return the number of files.

    Each destination directory is created before its children are
    copied.  Symlinks are recreated, never followed.  The first failure
    propagates; whatever was already copied stays in place.
    """
    try:
        dst.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise io_failure(op, exc, dst) from exc

    try:
        with os.scandir(src) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as exc:
        raise io_failure(op, exc, src) from exc

    count = 0
    for entry in entries:
        child_src = Path(entry.path)
        child_dst = dst / entry.name
        if entry.is_symlink():
            _copy_symlink(child_src, child_dst, op)
            count += 1
        elif entry.is_dir(follow_symlinks=False):
            count += _copy_tree(child_src, child_dst, op)
        else:
            _copy_file(child_src, child_dst, op)
            count += 1
    return count


# ---------------------------------------------------------------------------
# Removal
# ---------------------------------------------------------------------------

def _remove_path(p: Path, op: str) -> None:
    """Delete *p*: whole tree for a real directory, else the entry itself.

    A symlink to a directory is unlinked; its target is left alone.
    """
    try:
        if p.is_dir() and not p.is_symlink():
            shutil.rmtree(p)
        else:
            p.unlink()
    except OSError as exc:
        raise io_failure(op, exc, p) from exc


# ---------------------------------------------------------------------------
# Writing
# ---------------------------------------------------------------------------

def _write_bytes(p: Path, data: bytes, op: str) -> None:
    """Write *data* to *p*, creating missing parent directories first."""
    ensure_parent(p, op)
    try:
        p.write_bytes(data)
    except OSError as exc:
        raise io_failure(op, exc, p) from exc

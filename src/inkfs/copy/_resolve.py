"""Destination resolution and copy-name collision avoidance."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..exceptions import InvalidPathError, TooManyCollisionsError
from ..paths import lexists, to_path
from ._types import CollisionPlan

logger = logging.getLogger(__name__)

MAX_COPY_ATTEMPTS = 1000


# ---------------------------------------------------------------------------
# Name splitting
# ---------------------------------------------------------------------------

def _split_name(p: Path, is_directory: bool | None = None) -> tuple[Path, str, str]:
    """Split *p* into ``(parent, stem, ext)``.

    Only the last suffix counts as the extension (``a.tar.gz`` gives
    ``("a.tar", ".gz")``).  Dotfiles like ``.bashrc`` and directories have
    an empty extension.  *is_directory* names the kind of entry being
    placed; when ``None`` the entry already at *p* decides.
    """
    if is_directory is None:
        is_directory = p.is_dir()
    if is_directory:
        return p.parent, p.name, ""
    return p.parent, p.stem, p.suffix


def copy_names(stem: str, ext: str, limit: int = MAX_COPY_ATTEMPTS):
    """Yield the candidate copy names in probe order.

    ``"{stem} (copy){ext}"``, then ``"{stem} (copy 2){ext}"``,
    ``"{stem} (copy 3){ext}"``, ... for at most *limit* names.
    """
    if limit < 1:
        return
    yield f"{stem} (copy){ext}"
    for n in range(2, limit + 1):
        yield f"{stem} (copy {n}){ext}"


# ---------------------------------------------------------------------------
# Collision resolution
# ---------------------------------------------------------------------------

def plan_target(desired: str | os.PathLike[str], *, max_attempts: int = MAX_COPY_ATTEMPTS,
                op: str = "resolve_target", is_directory: bool | None = None) -> CollisionPlan:
    """Return a :class:`CollisionPlan` for copying onto *desired*.

    If *desired* is free it is used unchanged.  Otherwise names from
    :func:`copy_names` are probed in order and the first free one wins.
    Files and directories follow the same scheme.  Pass *is_directory*
    for the entry being copied so a file colliding with a directory of
    the same name still keeps its extension.

    Raises:
        TooManyCollisionsError: If all *max_attempts* names are taken.
    """
    p = to_path(desired, op)
    if not lexists(p):
        return CollisionPlan(desired=str(p), final=str(p))

    parent, stem, ext = _split_name(p, is_directory)
    attempts = 0
    for name in copy_names(stem, ext, max_attempts):
        attempts += 1
        candidate = parent / name
        if not lexists(candidate):
            logger.info("%s: %s exists, using %s", op, p, candidate)
            return CollisionPlan(desired=str(p), final=str(candidate), attempts=attempts)

    raise TooManyCollisionsError(
        f"{op}: too many copies already exist for {p} ({max_attempts} names tried)",
        op=op, path=p,
    )


def resolve_target(desired: str | os.PathLike[str], *, max_attempts: int = MAX_COPY_ATTEMPTS) -> str:
    """Return the path a copy onto *desired* should actually write to."""
    return plan_target(desired, max_attempts=max_attempts).final


# ---------------------------------------------------------------------------
# Effective destination
# ---------------------------------------------------------------------------

def _effective_target(src: Path, dest: Path, op: str) -> Path:
    """Return ``dest/<name of src>`` if *dest* is a directory, else *dest*."""
    if dest.is_dir():
        name = src.name
        if not name:
            raise InvalidPathError(f"{op}: source has no base name: {src}", op=op, path=src, dest=dest)
        return dest / name
    return dest

"""Data structures for copy/move operations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CollisionPlan:
    """Where a copy was asked to go and where it will actually go.

    Attributes:
        desired: The destination the caller asked for.
        final: The first free path in the copy-name sequence
            (equal to *desired* when that was free).
        attempts: Number of names probed after *desired* was found taken.
    """
    desired: str
    final: str
    attempts: int = 0

    @property
    def renamed(self) -> bool:
        """``True`` if the copy had to pick a ``(copy N)`` name."""
        return self.final != self.desired


@dataclass(frozen=True, slots=True)
class TransferResult:
    """Outcome of a successful copy or move.

    Attributes:
        source: The path that was copied or moved.
        target: The path the data ended up at.
        renamed: ``True`` if *target* is a collision-avoidance name.
        files: Number of files (and symlinks) written; ``1`` for a move.
    """
    source: str
    target: str
    renamed: bool = False
    files: int = 0

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-ready dict."""
        return {
            "source": self.source,
            "target": self.target,
            "renamed": self.renamed,
            "files": self.files,
        }

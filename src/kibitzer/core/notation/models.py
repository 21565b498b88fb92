"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass, field

from kibitzer.core.position import Position


@dataclass(slots=True)
class PgnReplay:
    """Outcome of replaying PGN movetext onto the initial position."""

    position: Position
    applied: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def tokens(self) -> int:
        """Number of move tokens consumed, applied or not."""
        return len(self.applied) + len(self.skipped)

"""Shared engine search models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from kibitzer.config import DEFAULT_SEARCH_DEPTH
from kibitzer.engine.evaluation import format_evaluation

if TYPE_CHECKING:
    from kibitzer.core.move import Move


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single computation. Depth is in plies."""

    max_depth: int = DEFAULT_SEARCH_DEPTH


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the minimax search (white-relative score)."""

    best_move: Move | None
    score_cp: int
    depth: int
    nodes: int


@dataclass(slots=True, frozen=True)
class ScoredMove:
    """A move with its heuristic score from the mover's point of view."""

    move: Move
    score: int

    @property
    def uci(self) -> str:
        return self.move.uci

    def __str__(self) -> str:
        return f"{self.uci} (eval: {self.score})"


@dataclass(slots=True, frozen=True)
class EngineAnalysis:
    """Combined heuristic ranking and minimax evaluation of one position."""

    position: str
    depth: int
    evaluation: int
    best_move: ScoredMove | None
    top_moves: tuple[ScoredMove, ...] = field(default_factory=tuple)
    search_move: Move | None = None
    nodes: int = 0

    def to_formatted_string(self) -> str:
        lines = [
            "Engine Analysis:",
            f"Position: {self.position}",
            f"Depth: {self.depth}",
            f"Evaluation: {format_evaluation(self.evaluation)} "
            f"({self.evaluation} centipawns)",
        ]
        if self.best_move is not None:
            lines.append(f"Best Move: {self.best_move.uci} ({self.best_move.score})")
        if self.search_move is not None:
            lines.append(f"Search Move: {self.search_move.uci} ({self.nodes} nodes)")
        lines.append("Top Moves:")
        for idx, scored in enumerate(self.top_moves, start=1):
            lines.append(f"{idx}. {scored.uci} (eval: {scored.score})")
        return "\n".join(lines) + "\n"

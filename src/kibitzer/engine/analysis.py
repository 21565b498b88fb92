"""FEN-in, results-out facade over the move generator and both searches."""

from __future__ import annotations

import logging

from kibitzer.config import EngineSettings
from kibitzer.core.attacks import is_square_attacked
from kibitzer.core.display import describe_position
from kibitzer.core.enums import Color
from kibitzer.core.move import Move
from kibitzer.core.move_generator import MoveGenerator
from kibitzer.core.notation import position_from_fen
from kibitzer.core.types import INVALID_SQUARE, Square, parse_square
from kibitzer.engine.evaluation import format_evaluation
from kibitzer.engine.heuristic import MoveScorer
from kibitzer.engine.minimax import MinimaxSearch
from kibitzer.engine.search import (
    EngineAnalysis,
    ScoredMove,
    SearchLimits,
    SearchResult,
)

_LOGGER = logging.getLogger(__name__)

ANALYSIS_TOP_MOVES = 5


class AnalysisEngine:
    """Stateless between calls: every operation parses its own position.

    Usage::

        engine = AnalysisEngine()
        best = engine.find_best_move(STARTING_FEN)
        report = engine.analyze_position(STARTING_FEN, depth=3)
        print(report.to_formatted_string())
    """

    __slots__ = ("_settings", "_search")

    def __init__(self, settings: EngineSettings | None = None) -> None:
        self._settings = settings if settings is not None else EngineSettings()
        self._search = MinimaxSearch()

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    # ── Move listing ─────────────────────────────────────────────────────

    def legal_moves(self, fen: str, *, pseudo: bool = False) -> list[str]:
        gen = MoveGenerator(position_from_fen(fen))
        moves = gen.generate_pseudo_legal_moves() if pseudo else gen.generate_legal_moves()
        return [move.uci for move in moves]

    # ── Heuristic ranking ────────────────────────────────────────────────

    def find_best_move(self, fen: str) -> ScoredMove | None:
        return MoveScorer(position_from_fen(fen)).best_move()

    def get_top_moves(self, fen: str, count: int | None = None) -> list[ScoredMove]:
        if count is None:
            count = self._settings.top_moves
        return MoveScorer(position_from_fen(fen)).top_moves(count)

    def would_hang_piece(self, fen: str, uci: str) -> bool:
        """False for malformed UCI text or an empty origin square."""
        position = position_from_fen(fen)
        try:
            move = Move.from_uci(uci)
        except ValueError:
            _LOGGER.debug("would_hang_piece: malformed move %r", uci)
            return False
        return MoveScorer(position).would_hang_piece(move)

    # ── Minimax ──────────────────────────────────────────────────────────

    def evaluate(self, fen: str, depth: int | None = None) -> SearchResult:
        if depth is None:
            depth = self._settings.search_depth
        limits = SearchLimits(max_depth=depth)
        return self._search.search(position_from_fen(fen), limits)

    def analyze_position(self, fen: str, depth: int | None = None) -> EngineAnalysis:
        """Heuristic best/top moves plus the minimax evaluation."""
        if depth is None:
            depth = self._settings.search_depth
        if depth < 1:
            raise ValueError(f"Search depth must be >= 1, got {depth}")

        scorer = MoveScorer(position_from_fen(fen))
        best = scorer.best_move()
        top = scorer.top_moves(min(self._settings.top_moves, ANALYSIS_TOP_MOVES))
        result = self.evaluate(fen, depth)

        return EngineAnalysis(
            position=fen,
            depth=depth,
            evaluation=result.score_cp,
            best_move=best,
            top_moves=tuple(top),
            search_move=result.best_move,
            nodes=result.nodes,
        )

    # ── Queries ──────────────────────────────────────────────────────────

    def is_square_attacked(
        self, fen: str, square: Square | str, by_white: bool
    ) -> bool:
        if isinstance(square, str):
            square = parse_square(square)
        if square == INVALID_SQUARE:
            return False
        board = position_from_fen(fen).board
        by_color = Color.WHITE if by_white else Color.BLACK
        return is_square_attacked(square, by_color, board)

    def describe_position(self, fen: str) -> str:
        return describe_position(position_from_fen(fen))

    @staticmethod
    def format_evaluation(centipawns: int) -> str:
        return format_evaluation(centipawns)

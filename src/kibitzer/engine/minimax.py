"""Depth-limited minimax with alpha-beta pruning (white maximises)."""

from __future__ import annotations

import logging

from kibitzer.core.enums import Color
from kibitzer.core.move import Move
from kibitzer.core.move_generator import MoveGenerator
from kibitzer.core.position import Position
from kibitzer.engine.evaluation import MATE_SCORE, evaluate, piece_value
from kibitzer.engine.search import SearchLimits, SearchResult

_LOGGER = logging.getLogger(__name__)

_INF_SCORE = 1_000_000


class MinimaxSearch:
    """Fixed-depth searcher over a single owned :class:`Position`.

    Moves are applied with ``make_move`` and reverted with ``unmake_move``;
    the position is left exactly as it was passed in. Scores are
    white-relative, mate is ``±(MATE_SCORE - ply)``.
    """

    __slots__ = ("_nodes",)

    def __init__(self) -> None:
        self._nodes = 0

    @property
    def nodes(self) -> int:
        return self._nodes

    def search(self, position: Position, limits: SearchLimits) -> SearchResult:
        if limits.max_depth <= 0:
            raise ValueError("Search depth must be >= 1")

        self._nodes = 0
        root_moves = MoveGenerator(position).generate_legal_moves()
        if not root_moves:
            score = self._terminal_score(position, ply=0)
            return SearchResult(None, score, 0, self._nodes)

        maximizing = position.side_to_move == Color.WHITE
        alpha = -_INF_SCORE
        beta = _INF_SCORE
        best_move: Move | None = None
        best_score = -_INF_SCORE if maximizing else _INF_SCORE

        for move in self._order_moves(position, root_moves):
            position.make_move(move)
            score = self._minimax(position, limits.max_depth - 1, alpha, beta, ply=1)
            position.unmake_move(move)

            if maximizing:
                if score > best_score:
                    best_score = score
                    best_move = move
                alpha = max(alpha, score)
            else:
                if score < best_score:
                    best_score = score
                    best_move = move
                beta = min(beta, score)

        _LOGGER.debug(
            "minimax depth=%d nodes=%d best=%s score=%d",
            limits.max_depth,
            self._nodes,
            best_move,
            best_score,
        )
        return SearchResult(best_move, best_score, limits.max_depth, self._nodes)

    def _minimax(
        self,
        position: Position,
        depth: int,
        alpha: int,
        beta: int,
        ply: int,
    ) -> int:
        self._nodes += 1
        if depth <= 0:
            return evaluate(position)

        moves = MoveGenerator(position).generate_legal_moves()
        if not moves:
            return self._terminal_score(position, ply)

        if position.side_to_move == Color.WHITE:
            best = -_INF_SCORE
            for move in self._order_moves(position, moves):
                position.make_move(move)
                score = self._minimax(position, depth - 1, alpha, beta, ply + 1)
                position.unmake_move(move)
                best = max(best, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break
            return best

        best = _INF_SCORE
        for move in self._order_moves(position, moves):
            position.make_move(move)
            score = self._minimax(position, depth - 1, alpha, beta, ply + 1)
            position.unmake_move(move)
            best = min(best, score)
            beta = min(beta, score)
            if beta <= alpha:
                break
        return best

    @staticmethod
    def _terminal_score(position: Position, ply: int) -> int:
        """Score of a position without legal moves: mate or stalemate."""
        gen = MoveGenerator(position)
        if not gen.is_in_check(position.side_to_move):
            return 0
        if position.side_to_move == Color.WHITE:
            return -(MATE_SCORE - ply)
        return MATE_SCORE - ply

    @staticmethod
    def _order_moves(position: Position, moves: list[Move]) -> list[Move]:
        """Captures first, most valuable victim / least valuable attacker."""
        board = position.board

        def capture_order(move: Move) -> int:
            victim = board[move.to_sq]
            if victim is None:
                return 0
            attacker = board[move.from_sq]
            assert attacker is not None
            return 10 * piece_value(victim.piece_type) - piece_value(attacker.piece_type)

        return sorted(moves, key=capture_order, reverse=True)

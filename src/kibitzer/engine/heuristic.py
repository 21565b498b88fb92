"""One-ply heuristic move ranking.

Each legal move gets a score from the mover's point of view built from
hanging-piece detection, capture trade balance, centre and development
bonuses, destination safety and a damped positional term.
"""

from __future__ import annotations

from kibitzer.core.attacks import is_square_attacked
from kibitzer.core.enums import Color, PieceType
from kibitzer.core.move import Move
from kibitzer.core.move_generator import MoveGenerator
from kibitzer.core.piece import Piece
from kibitzer.core.position import Position
from kibitzer.core.types import B1, B8, C1, C8, D4, D5, E4, E5, F1, F8, G1, G8
from kibitzer.engine.evaluation import material, piece_value, positional
from kibitzer.engine.search import ScoredMove

HANG_PENALTY_FACTOR = 10
CENTER_BONUS = 50
UNSAFE_DESTINATION_PENALTY = 100
SAFE_DESTINATION_BONUS = 10
POSITIONAL_DAMPING = 10

_CENTER_SQUARES = frozenset({D4, E4, D5, E5})
_DEVELOPMENT_BONUS: dict[PieceType, tuple[frozenset[int], int]] = {
    PieceType.KNIGHT: (frozenset({B1, G1, B8, G8}), 30),
    PieceType.BISHOP: (frozenset({C1, F1, C8, F8}), 25),
}


class MoveScorer:
    """Scores the legal moves of one :class:`Position`.

    The position is mutated while the positional term is computed but is
    always restored before a method returns.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def would_hang_piece(self, move: Move) -> bool:
        """After *move*, is the moved piece attacked and left undefended?"""
        piece = self._board[move.from_sq]
        if piece is None or not 0 <= move.to_sq < 64:
            return False

        after = self._board.copy()
        after[move.from_sq] = None
        if move.promotion is not None:
            piece = Piece(piece.color, move.promotion)
        after[move.to_sq] = piece

        attacked = is_square_attacked(move.to_sq, piece.color.opposite, after)
        defended = is_square_attacked(move.to_sq, piece.color, after)
        return attacked and not defended

    def score_move(self, move: Move) -> int:
        piece = self._board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")

        hangs = self.would_hang_piece(move)
        score = 0
        if hangs:
            score -= piece_value(piece.piece_type) * HANG_PENALTY_FACTOR

        score += self._capture_score(move, piece, hangs)

        if move.from_sq in _CENTER_SQUARES or move.to_sq in _CENTER_SQUARES:
            score += CENTER_BONUS

        development = _DEVELOPMENT_BONUS.get(piece.piece_type)
        if development is not None and move.from_sq in development[0]:
            score += development[1]

        score += self._safety_score(move, piece.color)
        score += self._positional_score(move)
        return score

    def rank_moves(self) -> list[ScoredMove]:
        """Every legal move with its score, in generation order."""
        legal = MoveGenerator(self._pos).generate_legal_moves()
        return [ScoredMove(move, self.score_move(move)) for move in legal]

    def best_move(self) -> ScoredMove | None:
        """Highest-scoring move; the first one generated wins ties."""
        best: ScoredMove | None = None
        for scored in self.rank_moves():
            if best is None or scored.score > best.score:
                best = scored
        return best

    def top_moves(self, count: int) -> list[ScoredMove]:
        ranked = sorted(self.rank_moves(), key=lambda s: s.score, reverse=True)
        return ranked[: max(count, 0)]

    # -- Score terms (private) ---------------------------------------------

    def _capture_score(self, move: Move, piece: Piece, hangs: bool) -> int:
        captured = self._board[move.to_sq]
        if captured is None:
            return 0

        capture_value = piece_value(captured.piece_type)
        capturing_value = piece_value(piece.piece_type)
        trade = capture_value - capturing_value

        if trade > 0:
            return capture_value + trade
        if trade == 0:
            return capture_value // 2
        if hangs:
            return trade * 2
        return capture_value

    def _safety_score(self, move: Move, color: Color) -> int:
        """Destination safety judged on the board before the move."""
        attacked = is_square_attacked(move.to_sq, color.opposite, self._board)
        if not attacked:
            return SAFE_DESTINATION_BONUS
        if not is_square_attacked(move.to_sq, color, self._board):
            return -UNSAFE_DESTINATION_PENALTY
        return 0

    def _positional_score(self, move: Move) -> int:
        """Damped material + table score after *move*, for the mover."""
        mover = self._pos.side_to_move
        self._pos.make_move(move)
        try:
            raw = material(self._board) + positional(self._board)
        finally:
            self._pos.unmake_move(move)
        damped = int(raw / POSITIONAL_DAMPING)
        return damped if mover == Color.WHITE else -damped

"""Pseudo-legal and legal move generation."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from kibitzer.core import attacks
from kibitzer.core.enums import Color, PieceType
from kibitzer.core.move import Move
from kibitzer.core.types import Square, file_of, make_square, rank_of

if TYPE_CHECKING:
    from kibitzer.core.position import Position


_PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)
# Start and last rank for each colour's pawns, indexed by Color.
_PAWN_START_RANK: tuple[int, int] = (1, 6)
_PAWN_LAST_RANK: tuple[int, int] = (7, 0)


class MoveGenerator:
    """Generates moves for the side to move of a :class:`Position`.

    Castling and en-passant captures are never produced. Strict legality
    (own king not left attacked) is layered on top of the pseudo-legal
    generator by :meth:`generate_legal_moves`, which mutates the position
    via ``make_move`` / ``unmake_move`` but always restores it.
    """

    __slots__ = ("_pos", "_board", "_dispatch")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board
        self._dispatch: dict[PieceType, Callable[[Square, Color, list[Move]], None]] = {
            PieceType.PAWN: self._gen_pawn,
            PieceType.KNIGHT: self._gen_knight,
            PieceType.BISHOP: self._gen_bishop,
            PieceType.ROOK: self._gen_rook,
            PieceType.QUEEN: self._gen_queen,
            PieceType.KING: self._gen_king,
        }

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self) -> list[Move]:
        """Pseudo-legal moves that do not leave the mover's king attacked."""
        legal: list[Move] = []
        moving_color = self._pos.side_to_move

        for move in self.generate_pseudo_legal_moves():
            self._pos.make_move(move)
            if not attacks.is_in_check(self._board, moving_color):
                legal.append(move)
            self._pos.unmake_move(move)
        return legal

    def generate_pseudo_legal_moves(self) -> list[Move]:
        """All pseudo-legal moves, in board order from a8 to h1."""
        moves: list[Move] = []
        color = self._pos.side_to_move
        board = self._board

        for sq in board.all_pieces(color):
            piece = board[sq]
            assert piece is not None
            self._dispatch[piece.piece_type](sq, color, moves)
        return moves

    def count_pseudo_legal_moves(self) -> int:
        return len(self.generate_pseudo_legal_moves())

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        return attacks.is_in_check(self._board, color)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        return attacks.is_square_attacked(sq, by_color, self._board)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Move]) -> None:
        board = self._board
        color_idx = int(color)
        step = attacks.PAWN_PUSH[color_idx]
        file_idx = file_of(sq)
        next_rank = rank_of(sq) + step
        if not 0 <= next_rank < 8:
            return
        promotes = next_rank == _PAWN_LAST_RANK[color_idx]

        one_step = make_square(file_idx, next_rank)
        if board.is_empty(one_step):
            self._add_pawn_move(sq, one_step, promotes, moves)
            if rank_of(sq) == _PAWN_START_RANK[color_idx]:
                two_step = make_square(file_idx, next_rank + step)
                if board.is_empty(two_step):
                    moves.append(Move(sq, two_step))

        for df in (-1, 1):
            cap_file = file_idx + df
            if not 0 <= cap_file < 8:
                continue
            cap_sq = make_square(cap_file, next_rank)
            target = board[cap_sq]
            if target is not None and target.color != color:
                self._add_pawn_move(sq, cap_sq, promotes, moves)

    @staticmethod
    def _add_pawn_move(
        from_sq: Square, to_sq: Square, promotes: bool, moves: list[Move]
    ) -> None:
        if promotes:
            for pt in _PROMOTION_TYPES:
                moves.append(Move(from_sq, to_sq, pt))
        else:
            moves.append(Move(from_sq, to_sq))

    def _gen_knight(self, sq: Square, color: Color, moves: list[Move]) -> None:
        self._gen_stepping(sq, color, attacks.KNIGHT_TARGETS[sq], moves)

    def _gen_king(self, sq: Square, color: Color, moves: list[Move]) -> None:
        self._gen_stepping(sq, color, attacks.KING_TARGETS[sq], moves)

    def _gen_bishop(self, sq: Square, color: Color, moves: list[Move]) -> None:
        self._gen_sliding(sq, color, attacks.BISHOP_RAYS[sq], moves)

    def _gen_rook(self, sq: Square, color: Color, moves: list[Move]) -> None:
        self._gen_sliding(sq, color, attacks.ROOK_RAYS[sq], moves)

    def _gen_queen(self, sq: Square, color: Color, moves: list[Move]) -> None:
        self._gen_sliding(sq, color, attacks.QUEEN_RAYS[sq], moves)

    def _gen_stepping(
        self,
        sq: Square,
        color: Color,
        targets: tuple[Square, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None or target.color != color:
                moves.append(Move(sq, to_sq))

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq))
                    continue
                if target.color != color:
                    moves.append(Move(sq, to_sq))
                break

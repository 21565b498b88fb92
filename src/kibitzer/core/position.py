"""Position: complete game state (board + metadata) with make/unmake."""

from __future__ import annotations

from dataclasses import dataclass

from kibitzer.core.board import Board
from kibitzer.core.enums import CastlingRights, Color, PieceType
from kibitzer.core.move import Move
from kibitzer.core.piece import Piece
from kibitzer.core.types import Square, file_of, make_square, rank_of


@dataclass(slots=True)
class _PositionState:
    """Snapshot saved before each move so we can undo it."""

    castling: CastlingRights
    en_passant: Square | None
    halfmove_clock: int
    captured_piece: Piece | None


class Position:
    """Full chess position: board + side to move + castling + en passant + clocks.

    Moves are applied in place with :meth:`make_move` and reverted with
    :meth:`unmake_move`, which pops a ply-indexed history stack. Castling and
    en-passant captures are not executed here; the rights and the en-passant
    target are only tracked.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "castling",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
        "_history",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.castling = castling
        self.en_passant = en_passant
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number
        self._history: list[_PositionState] = []

    # ── Core move operations ─────────────────────────────────────────────

    def make_move(self, move: Move) -> None:
        """Apply *move*, pushing undo state onto the history stack."""
        piece = self.board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")

        captured = self.board[move.to_sq]
        self._history.append(
            _PositionState(
                castling=self.castling,
                en_passant=self.en_passant,
                halfmove_clock=self.halfmove_clock,
                captured_piece=captured,
            )
        )

        self.board[move.from_sq] = None
        placed_piece = piece
        if move.promotion is not None:
            placed_piece = Piece(piece.color, move.promotion)
        self.board[move.to_sq] = placed_piece

        # En passant target for the opponent
        self.en_passant = None
        if piece.piece_type == PieceType.PAWN:
            from_rank = rank_of(move.from_sq)
            to_rank = rank_of(move.to_sq)
            if abs(to_rank - from_rank) == 2:
                self.en_passant = make_square(
                    file_of(move.from_sq), (from_rank + to_rank) // 2
                )

        self._update_castling(move, piece)

        # Clocks
        if piece.piece_type == PieceType.PAWN or captured is not None:
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1

        if self.side_to_move == Color.BLACK:
            self.fullmove_number += 1

        self.side_to_move = self.side_to_move.opposite

    def unmake_move(self, move: Move) -> None:
        """Undo the last :meth:`make_move`."""
        state = self._history.pop()

        self.side_to_move = self.side_to_move.opposite
        if self.side_to_move == Color.BLACK:
            self.fullmove_number -= 1

        piece = self.board[move.to_sq]
        assert piece is not None

        # Restore pawn for promotion
        if move.promotion is not None:
            piece = Piece(piece.color, PieceType.PAWN)

        self.board[move.from_sq] = piece
        self.board[move.to_sq] = state.captured_piece

        self.castling = state.castling
        self.en_passant = state.en_passant
        self.halfmove_clock = state.halfmove_clock

    # ── Castling bookkeeping ─────────────────────────────────────────────

    _ROOK_CORNERS: dict[Square, CastlingRights] = {
        make_square(0, 0): CastlingRights.WHITE_QUEENSIDE,
        make_square(7, 0): CastlingRights.WHITE_KINGSIDE,
        make_square(0, 7): CastlingRights.BLACK_QUEENSIDE,
        make_square(7, 7): CastlingRights.BLACK_KINGSIDE,
    }

    def _update_castling(self, move: Move, piece: Piece) -> None:
        if piece.piece_type == PieceType.KING:
            if piece.color == Color.WHITE:
                self.castling &= ~CastlingRights.WHITE_BOTH
            else:
                self.castling &= ~CastlingRights.BLACK_BOTH

        for sq in (move.from_sq, move.to_sq):
            if sq in self._ROOK_CORNERS:
                self.castling &= ~self._ROOK_CORNERS[sq]

    # ── Utilities ────────────────────────────────────────────────────────

    @property
    def ply_depth(self) -> int:
        """Number of moves currently on the undo stack."""
        return len(self._history)

    def copy(self) -> Position:
        """Deep copy without history."""
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling=self.castling,
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
        )

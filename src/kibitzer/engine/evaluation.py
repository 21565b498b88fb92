"""Static evaluation primitives shared by the heuristic and the minimax search.

All scores here are white-relative centipawns: positive favours White.
"""

from __future__ import annotations

from kibitzer.core.board import Board
from kibitzer.core.enums import Color, PieceType
from kibitzer.core.move_generator import MoveGenerator
from kibitzer.core.position import Position

MATE_SCORE = 100_000
# Anything beyond this magnitude is a mate sentinel, not a material score.
MATE_THRESHOLD = 10_000
MOBILITY_WEIGHT = 2

PIECE_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 100,
    PieceType.KNIGHT: 320,
    PieceType.BISHOP: 330,
    PieceType.ROOK: 500,
    PieceType.QUEEN: 900,
    PieceType.KING: 20_000,
}

# Piece-square tables from White's point of view, a8 first. Black reads the
# vertically mirrored square (``sq ^ 56``).
# fmt: off
_PAWN_TABLE: tuple[int, ...] = (
     0,  0,  0,  0,  0,  0,  0,  0,
    50, 50, 50, 50, 50, 50, 50, 50,
    10, 10, 20, 30, 30, 20, 10, 10,
     5,  5, 10, 25, 25, 10,  5,  5,
     0,  0,  0, 20, 20,  0,  0,  0,
     5, -5,-10,  0,  0,-10, -5,  5,
     5, 10, 10,-20,-20, 10, 10,  5,
     0,  0,  0,  0,  0,  0,  0,  0,
)

_KNIGHT_TABLE: tuple[int, ...] = (
    -50,-40,-30,-30,-30,-30,-40,-50,
    -40,-20,  0,  0,  0,  0,-20,-40,
    -30,  0, 10, 15, 15, 10,  0,-30,
    -30,  5, 15, 20, 20, 15,  5,-30,
    -30,  0, 15, 20, 20, 15,  0,-30,
    -30,  5, 10, 15, 15, 10,  5,-30,
    -40,-20,  0,  5,  5,  0,-20,-40,
    -50,-40,-30,-30,-30,-30,-40,-50,
)

_BISHOP_TABLE: tuple[int, ...] = (
    -20,-10,-10,-10,-10,-10,-10,-20,
    -10,  0,  0,  0,  0,  0,  0,-10,
    -10,  0,  5, 10, 10,  5,  0,-10,
    -10,  5,  5, 10, 10,  5,  5,-10,
    -10,  0, 10, 10, 10, 10,  0,-10,
    -10, 10, 10, 10, 10, 10, 10,-10,
    -10,  5,  0,  0,  0,  0,  5,-10,
    -20,-10,-10,-10,-10,-10,-10,-20,
)
# fmt: on

PIECE_SQUARE_TABLES: dict[PieceType, tuple[int, ...]] = {
    PieceType.PAWN: _PAWN_TABLE,
    PieceType.KNIGHT: _KNIGHT_TABLE,
    PieceType.BISHOP: _BISHOP_TABLE,
}


def piece_value(piece_type: PieceType) -> int:
    """Unsigned material value of *piece_type*."""
    return PIECE_VALUES[piece_type]


def material(board: Board) -> int:
    score = 0
    for _, piece in board:
        value = PIECE_VALUES[piece.piece_type]
        score += value if piece.color == Color.WHITE else -value
    return score


def piece_square_bonus(piece_type: PieceType, color: Color, sq: int) -> int:
    """Table bonus for *color*'s piece on *sq*, from that side's point of view."""
    table = PIECE_SQUARE_TABLES.get(piece_type)
    if table is None:
        return 0
    return table[sq if color == Color.WHITE else sq ^ 56]


def positional(board: Board) -> int:
    score = 0
    for sq, piece in board:
        bonus = piece_square_bonus(piece.piece_type, piece.color, sq)
        score += bonus if piece.color == Color.WHITE else -bonus
    return score


def mobility(position: Position) -> int:
    """``MOBILITY_WEIGHT`` per pseudo-legal move of the side to move."""
    count = MoveGenerator(position).count_pseudo_legal_moves()
    bonus = count * MOBILITY_WEIGHT
    return bonus if position.side_to_move == Color.WHITE else -bonus


def evaluate(position: Position) -> int:
    """Material + piece-square tables + mobility."""
    board = position.board
    return material(board) + positional(board) + mobility(position)


def is_mate_score(centipawns: int) -> bool:
    return abs(centipawns) > MATE_THRESHOLD


def format_evaluation(centipawns: int) -> str:
    """Render *centipawns* as pawns with two decimals, or as a mate verdict."""
    if is_mate_score(centipawns):
        return "Mate for White" if centipawns > 0 else "Mate for Black"
    return f"{centipawns / 100:.2f}"

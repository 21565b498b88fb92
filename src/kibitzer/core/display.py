"""Plain-text board renderings for logs, terminals and chat replies."""

from __future__ import annotations

from kibitzer.core.board import Board
from kibitzer.core.enums import Color
from kibitzer.core.move_generator import MoveGenerator
from kibitzer.core.notation.fen import position_to_fen
from kibitzer.core.position import Position

_FILES_LINE = "  a b c d e f g h"


def render_board(board: Board) -> str:
    """ASCII board, rank 8 on top, "." for empty squares."""
    lines = [_FILES_LINE]
    for row_idx in range(8):
        rank_label = 8 - row_idx
        cells = []
        for file in range(8):
            piece = board[row_idx * 8 + file]
            cells.append(str(piece) if piece is not None else ".")
        lines.append(f"{rank_label} {' '.join(cells)}  {rank_label}")
    lines.append(_FILES_LINE)
    return "\n".join(lines)


def describe_position(position: Position) -> str:
    """FEN, side to move, check flag, legal moves and the board."""
    gen = MoveGenerator(position)
    legal = gen.generate_legal_moves()
    in_check = gen.is_in_check(position.side_to_move)
    side = "White" if position.side_to_move == Color.WHITE else "Black"

    return "\n".join(
        [
            f"Current position (FEN): {position_to_fen(position)}",
            f"Active color: {side}",
            f"King in check: {'Yes' if in_check else 'No'}",
            f"Legal moves: {', '.join(move.uci for move in legal)}",
            "",
            "Board:",
            render_board(position.board),
        ]
    )

"""Core domain layer: pure chess logic with zero external dependencies.

Quick start::

    from kibitzer.core import MoveGenerator, position_from_fen, STARTING_FEN

    pos = position_from_fen(STARTING_FEN)
    gen = MoveGenerator(pos)
    for move in gen.generate_legal_moves():
        print(move)
"""

from kibitzer.core.attacks import is_in_check, is_square_attacked
from kibitzer.core.board import Board
from kibitzer.core.display import describe_position, render_board
from kibitzer.core.enums import CastlingRights, Color, PieceType
from kibitzer.core.move import Move
from kibitzer.core.move_generator import MoveGenerator
from kibitzer.core.notation import (
    STARTING_FEN,
    FenError,
    PgnReplay,
    extract_pgn_moves,
    position_from_fen,
    position_from_pgn,
    position_to_fen,
    replay_pgn,
)
from kibitzer.core.piece import Piece
from kibitzer.core.position import Position
from kibitzer.core.rules import Rules
from kibitzer.core.types import (
    INVALID_SQUARE,
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "CastlingRights",
    "Color",
    "PieceType",
    # Types / helpers
    "INVALID_SQUARE",
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    # Attacks
    "is_in_check",
    "is_square_attacked",
    # Display
    "describe_position",
    "render_board",
    # Notation
    "STARTING_FEN",
    "FenError",
    "PgnReplay",
    "extract_pgn_moves",
    "position_from_fen",
    "position_from_pgn",
    "position_to_fen",
    "replay_pgn",
]

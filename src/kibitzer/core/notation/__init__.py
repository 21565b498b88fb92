"""Notation package: FEN and PGN parsing and serialization."""

from kibitzer.core.notation.fen import (
    STARTING_FEN,
    FenError,
    position_from_fen,
    position_to_fen,
)
from kibitzer.core.notation.models import PgnReplay
from kibitzer.core.notation.pgn import (
    extract_pgn_moves,
    position_from_pgn,
    replay_pgn,
    strip_movetext,
)

__all__ = [
    "STARTING_FEN",
    "FenError",
    "PgnReplay",
    "position_from_fen",
    "position_to_fen",
    "extract_pgn_moves",
    "position_from_pgn",
    "replay_pgn",
    "strip_movetext",
]

"""Best-effort PGN movetext extraction and replay.

The replay does not resolve SAN against the legal move list: it only knows
the destination square and the moving piece kind, so origin squares are
never vacated and captures, disambiguation and promotion are ignored.
Positions built this way are fit for approximate display, not for
authoritative analysis.
"""

from __future__ import annotations

import logging
import re

from kibitzer.core.enums import Color, PieceType
from kibitzer.core.notation.fen import STARTING_FEN, position_from_fen
from kibitzer.core.notation.models import PgnReplay
from kibitzer.core.piece import Piece
from kibitzer.core.position import Position
from kibitzer.core.types import INVALID_SQUARE, parse_square

_LOGGER = logging.getLogger(__name__)

_PGN_HEADER_RE = re.compile(r'^\s*\[\w+\s+"(?:[^"\\]|\\.)*"\]\s*$', re.MULTILINE)
_COMMENT_RE = re.compile(r"\{[^}]*\}")
_LINE_COMMENT_RE = re.compile(r";[^\n]*")
_VARIATION_RE = re.compile(r"\([^()]*\)")
_RESULT_RE = re.compile(r"(?<!\S)(?:1-0|0-1|1/2-1/2|\*)(?!\S)")
_ANNOTATION_RE = re.compile(r"\$\d+|[!?]+")
_MOVE_PAIR_RE = re.compile(
    r"\d+\.(?:\.\.)?\s*([a-h1-8NBRQK\-O=+#x]+)(?!\S)"
    r"(?:\s+([a-h1-8NBRQK\-O=+#x]+)(?!\S))?"
)
_CHECK_RE = re.compile(r"[+#]")
_PROMOTION_SUFFIX_RE = re.compile(r"=[NBRQ]$")
_CASTLING_TOKENS = frozenset({"O-O", "O-O-O"})

_SAN_PIECES: dict[str, PieceType] = {
    "N": PieceType.KNIGHT,
    "B": PieceType.BISHOP,
    "R": PieceType.ROOK,
    "Q": PieceType.QUEEN,
    "K": PieceType.KING,
}


def strip_movetext(pgn: str) -> str:
    """Remove headers, comments, variations, annotations and result tokens."""
    text = _PGN_HEADER_RE.sub("", pgn)
    text = _COMMENT_RE.sub(" ", text)
    text = _LINE_COMMENT_RE.sub(" ", text)
    # Innermost variations first, so nested ones collapse too.
    while True:
        stripped = _VARIATION_RE.sub(" ", text)
        if stripped == text:
            break
        text = stripped
    text = _RESULT_RE.sub(" ", text)
    return _ANNOTATION_RE.sub("", text)


def extract_pgn_moves(pgn: str) -> list[str]:
    """SAN tokens of the mainline in playing order."""
    moves: list[str] = []
    for match in _MOVE_PAIR_RE.finditer(strip_movetext(pgn)):
        white_token, black_token = match.groups()
        if white_token:
            moves.append(white_token)
        if black_token:
            moves.append(black_token)
    return moves


def _end_turn(position: Position) -> None:
    position.side_to_move = position.side_to_move.opposite
    if position.side_to_move == Color.WHITE:
        position.fullmove_number += 1


def _apply_token(position: Position, token: str) -> bool:
    """Place the piece named by *token*; return False when nothing was placed."""
    clean = _CHECK_RE.sub("", token)
    if clean in _CASTLING_TOKENS:
        return True

    clean = _PROMOTION_SUFFIX_RE.sub("", clean)
    if len(clean) < 2:
        return False

    lead = clean[0]
    if lead in _SAN_PIECES:
        piece_type = _SAN_PIECES[lead]
    elif lead in "abcdefgh":
        piece_type = PieceType.PAWN
    else:
        return False

    dest = parse_square(clean[-2:])
    if dest == INVALID_SQUARE:
        return False

    position.board[dest] = Piece(position.side_to_move, piece_type)
    return True


def replay_pgn(pgn: str) -> PgnReplay:
    """Replay *pgn* onto the initial position, tracking skipped tokens.

    Every token consumes a turn, even when it could not be placed, so the
    side to move and move number stay aligned with the game.
    """
    replay = PgnReplay(position=position_from_fen(STARTING_FEN))
    for token in extract_pgn_moves(pgn):
        if _apply_token(replay.position, token):
            replay.applied.append(token)
        else:
            _LOGGER.debug("Skipping unrecognised PGN token %r", token)
            replay.skipped.append(token)
        _end_turn(replay.position)
    return replay


def position_from_pgn(pgn: str) -> Position:
    """Position reached by best-effort replay of *pgn*."""
    return replay_pgn(pgn).position

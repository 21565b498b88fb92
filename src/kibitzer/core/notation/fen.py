"""FEN parsing and serialization."""

from __future__ import annotations

from kibitzer.core.board import Board
from kibitzer.core.enums import CastlingRights, Color
from kibitzer.core.piece import Piece
from kibitzer.core.position import Position
from kibitzer.core.types import (
    INVALID_SQUARE,
    Square,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_CHARS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}


class FenError(ValueError):
    """Raised when a FEN string cannot be parsed."""


def _parse_clock(text: str, name: str, minimum: int) -> int:
    try:
        value = int(text)
    except ValueError:
        raise FenError(f"Invalid FEN {name}: {text!r}") from None
    if value < minimum:
        raise FenError(f"Invalid FEN {name}: {text!r}")
    return value


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`."""
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise FenError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Piece placement
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise FenError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise FenError(f"Invalid FEN digit {ch!r}: {fen!r}")
                file += step
            else:
                if file >= 8:
                    raise FenError(f"Invalid FEN rank width: {fen!r}")
                try:
                    board[make_square(file, rank)] = Piece.from_char(ch)
                except ValueError as exc:
                    raise FenError(f"{exc} in FEN {fen!r}") from None
                file += 1
            if file > 8:
                raise FenError(f"Invalid FEN rank width: {fen!r}")
        if file != 8:
            raise FenError(f"Invalid FEN rank width: {fen!r}")

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise FenError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling
    castling = CastlingRights.NONE
    if castling_part != "-":
        seen: set[str] = set()
        for ch in castling_part:
            right = _CASTLING_CHARS.get(ch)
            if right is None or ch in seen:
                raise FenError(f"Invalid FEN castling field: {castling_part!r}")
            seen.add(ch)
            castling |= right

    # 4. En passant
    ep: Square | None = None
    if ep_part != "-":
        ep = parse_square(ep_part)
        if ep == INVALID_SQUARE or rank_of(ep) not in (2, 5):
            raise FenError(f"Invalid FEN en-passant square: {ep_part!r}")

    # 5–6. Clocks (optional)
    halfmove = _parse_clock(parts[4], "halfmove clock", 0) if len(parts) > 4 else 0
    fullmove = _parse_clock(parts[5], "fullmove number", 1) if len(parts) > 5 else 1

    return Position(board, side, castling, ep, halfmove, fullmove)


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    # 1. Board
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = pos.board[make_square(file, rank)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if pos.side_to_move == Color.WHITE else "b"

    # 3. Castling
    castling_str = "".join(
        ch for ch, right in _CASTLING_CHARS.items() if pos.castling & right
    )
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep_str = square_name(pos.en_passant) if pos.en_passant is not None else "-"

    return f"{board_str} {side_str} {castling_str} {ep_str} {pos.halfmove_clock} {pos.fullmove_number}"

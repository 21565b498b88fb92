"""Move value object (UCI-style representation)."""

from __future__ import annotations

from dataclasses import dataclass

from kibitzer.core.enums import PieceType
from kibitzer.core.types import INVALID_SQUARE, Square, parse_square, square_name

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}
_PROMO_TYPES: dict[str, PieceType] = {v: k for k, v in _PROMO_CHARS.items()}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move."""

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)

    # ── Parsing ──────────────────────────────────────────────────────────

    @classmethod
    def from_uci(cls, text: str) -> Move:
        """Parse a 4–5 character UCI string such as ``e2e4`` or ``e7e8q``."""
        text = text.strip()
        if len(text) not in (4, 5):
            raise ValueError(f"Invalid UCI move: {text!r}")
        from_sq = parse_square(text[0:2])
        to_sq = parse_square(text[2:4])
        if from_sq == INVALID_SQUARE or to_sq == INVALID_SQUARE:
            raise ValueError(f"Invalid UCI move: {text!r}")
        promotion: PieceType | None = None
        if len(text) == 5:
            promotion = _PROMO_TYPES.get(text[4].lower())
            if promotion is None:
                raise ValueError(f"Invalid UCI promotion piece: {text!r}")
        return cls(from_sq, to_sq, promotion)

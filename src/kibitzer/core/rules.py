"""High-level rule queries: check, checkmate, stalemate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kibitzer.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from kibitzer.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    # Draw rules (repetition, 50-move, insufficient material) are not tracked.

    @staticmethod
    def is_in_check(position: Position) -> bool:
        gen = MoveGenerator(position)
        return gen.is_in_check(position.side_to_move)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        if not Rules.is_in_check(position):
            return False
        gen = MoveGenerator(position)
        return len(gen.generate_legal_moves()) == 0

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        if Rules.is_in_check(position):
            return False
        gen = MoveGenerator(position)
        return len(gen.generate_legal_moves()) == 0

"""Attack detection over arbitrary board snapshots.

Every query takes the :class:`Board` explicitly, so callers can ask about a
hypothetical post-move board without touching the real position.
"""

from __future__ import annotations

from kibitzer.core.board import Board
from kibitzer.core.enums import Color, PieceType
from kibitzer.core.types import Square, file_of, make_square, rank_of

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

# (file delta, rank delta)
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# Rank step of a pawn push, indexed by Color.
PAWN_PUSH: tuple[int, int] = (1, -1)


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in range(64):
        file_idx = file_of(sq)
        rank_idx = rank_of(sq)
        moves: list[Square] = []
        for df, dr in offsets:
            af = file_idx + df
            ar = rank_idx + dr
            if 0 <= af < 8 and 0 <= ar < 8:
                moves.append(make_square(af, ar))
        targets.append(tuple(moves))
    return tuple(targets)


def _build_attack_masks(targets: tuple[tuple[Square, ...], ...]) -> tuple[int, ...]:
    masks: list[int] = [0] * 64
    for sq in range(64):
        mask = 0
        for to_sq in targets[sq]:
            mask |= 1 << to_sq
        masks[sq] = mask
    return tuple(masks)


def _build_pawn_attacker_masks() -> tuple[tuple[int, ...], tuple[int, ...]]:
    """Squares a pawn of each colour must stand on to attack a given square.

    The attacker sits diagonally "behind" the target relative to its own
    push direction: one rank lower for White, one rank higher for Black.
    """
    per_color: list[tuple[int, ...]] = []
    for color in (Color.WHITE, Color.BLACK):
        behind = -PAWN_PUSH[int(color)]
        masks: list[int] = [0] * 64
        for sq in range(64):
            rank_idx = rank_of(sq) + behind
            if not 0 <= rank_idx < 8:
                continue
            mask = 0
            for df in (-1, 1):
                file_idx = file_of(sq) + df
                if 0 <= file_idx < 8:
                    mask |= 1 << make_square(file_idx, rank_idx)
            masks[sq] = mask
        per_color.append(tuple(masks))
    return (per_color[0], per_color[1])


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(64):
        file_idx = file_of(sq)
        rank_idx = rank_of(sq)
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            af = file_idx + df
            ar = rank_idx + dr
            ray: list[Square] = []
            while 0 <= af < 8 and 0 <= ar < 8:
                ray.append(make_square(af, ar))
                af += df
                ar += dr
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)
_KNIGHT_ATTACK_MASKS = _build_attack_masks(KNIGHT_TARGETS)
_KING_ATTACK_MASKS = _build_attack_masks(KING_TARGETS)
_PAWN_ATTACKER_MASKS = _build_pawn_attacker_masks()

BISHOP_RAYS = _build_rays(BISHOP_DIRS)
ROOK_RAYS = _build_rays(ROOK_DIRS)
QUEEN_RAYS = _build_rays(QUEEN_DIRS)

_DIAGONAL_ATTACKERS = (PieceType.BISHOP, PieceType.QUEEN)
_LINE_ATTACKERS = (PieceType.ROOK, PieceType.QUEEN)


# -- Queries ---------------------------------------------------------------


def _slider_attacks(
    board: Board,
    rays: tuple[tuple[Square, ...], ...],
    by_color: Color,
    kinds: tuple[PieceType, PieceType],
) -> bool:
    for ray in rays:
        for to_sq in ray:
            piece = board[to_sq]
            if piece is None:
                continue
            if piece.color == by_color and piece.piece_type in kinds:
                return True
            break
    return False


def is_square_attacked(sq: Square, by_color: Color, board: Board) -> bool:
    """Is *sq* attacked by any piece of *by_color* on *board*?"""
    if not 0 <= sq < 64:
        return False

    if (
        board.pieces_bitboard(by_color, PieceType.PAWN)
        & _PAWN_ATTACKER_MASKS[int(by_color)][sq]
    ):
        return True

    if board.pieces_bitboard(by_color, PieceType.KNIGHT) & _KNIGHT_ATTACK_MASKS[sq]:
        return True

    if board.pieces_bitboard(by_color, PieceType.BISHOP) or board.pieces_bitboard(
        by_color, PieceType.QUEEN
    ):
        if _slider_attacks(board, BISHOP_RAYS[sq], by_color, _DIAGONAL_ATTACKERS):
            return True

    if board.pieces_bitboard(by_color, PieceType.ROOK) or board.pieces_bitboard(
        by_color, PieceType.QUEEN
    ):
        if _slider_attacks(board, ROOK_RAYS[sq], by_color, _LINE_ATTACKERS):
            return True

    return bool(board.pieces_bitboard(by_color, PieceType.KING) & _KING_ATTACK_MASKS[sq])


def is_in_check(board: Board, color: Color) -> bool:
    """Is any king of *color* attacked by the opponent?

    A side without a king on the board is never in check.
    """
    opponent = color.opposite
    return any(
        is_square_attacked(king_sq, opponent, board)
        for king_sq in board.king_squares(color)
    )

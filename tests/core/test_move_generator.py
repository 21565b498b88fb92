"""Move-generator tests: perft counts and targeted positions.

Reference values: https://www.chessprogramming.org/Perft_Results
(the shallow start-position counts contain no castling or en-passant
captures, which this generator does not produce).
"""

import pytest

from kibitzer.core.enums import PieceType
from kibitzer.core.move import Move
from kibitzer.core.move_generator import MoveGenerator
from kibitzer.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from kibitzer.core.position import Position
from kibitzer.core.types import parse_square


def perft(position: Position, depth: int) -> int:
    """Count leaf nodes at *depth* using make/unmake."""
    if depth == 0:
        return 1
    gen = MoveGenerator(position)
    moves = gen.generate_legal_moves()
    nodes = 0
    for move in moves:
        position.make_move(move)
        nodes += perft(position, depth - 1)
        position.unmake_move(move)
    return nodes


def ucis(moves: list[Move]) -> set[str]:
    return {move.uci for move in moves}


# ── Starting position ────────────────────────────────────────────────────────


class TestPerftStarting:
    def test_depth_1(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert perft(pos, 1) == 20

    def test_depth_2(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert perft(pos, 2) == 400

    def test_depth_3(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert perft(pos, 3) == 8_902

    @pytest.mark.slow
    def test_depth_4(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert perft(pos, 4) == 197_281

    def test_perft_restores_position(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        perft(pos, 2)
        assert position_to_fen(pos) == STARTING_FEN
        assert pos.ply_depth == 0


class TestStartingMoves:
    def test_pseudo_legal_contains_openings(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        moves = ucis(MoveGenerator(pos).generate_pseudo_legal_moves())
        assert {"e2e4", "d2d4", "g1f3", "b1c3"} <= moves

    def test_black_replies(self) -> None:
        pos = position_from_fen(
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        )
        moves = ucis(MoveGenerator(pos).generate_legal_moves())
        assert {"e7e5", "g8f6", "d7d5"} <= moves
        assert not any(uci.startswith("e4") for uci in moves)
        assert len(moves) == 20

    def test_generation_order_starts_at_a8_side(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        moves = MoveGenerator(pos).generate_legal_moves()
        # Squares are visited from a8 onward, so White's a2 pawn comes first.
        assert moves[0].uci == "a2a3"
        assert moves[1].uci == "a2a4"


class TestPawnMoves:
    def test_blocked_pawn(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/4p3/4P3/4K3 w - - 0 1")
        moves = ucis(MoveGenerator(pos).generate_legal_moves())
        assert not any(uci.startswith("e2") for uci in moves)

    def test_double_push_blocked_on_far_square(self) -> None:
        pos = position_from_fen("4k3/8/8/8/4p3/8/4P3/4K3 w - - 0 1")
        moves = ucis(MoveGenerator(pos).generate_legal_moves())
        assert "e2e3" in moves
        assert "e2e4" not in moves

    def test_promotions_in_order(self) -> None:
        pos = position_from_fen("8/P6k/8/8/8/8/8/K7 w - - 0 1")
        moves = [
            m for m in MoveGenerator(pos).generate_legal_moves()
            if m.from_sq == parse_square("a7")
        ]
        assert [m.uci for m in moves] == ["a7a8q", "a7a8r", "a7a8b", "a7a8n"]
        assert moves[0].promotion == PieceType.QUEEN

    def test_capture_promotion(self) -> None:
        pos = position_from_fen("1n5k/P7/8/8/8/8/8/K7 w - - 0 1")
        moves = ucis(MoveGenerator(pos).generate_legal_moves())
        assert {"a7a8q", "a7b8q", "a7b8n"} <= moves

    def test_black_pawn_captures(self) -> None:
        pos = position_from_fen("4k3/8/8/3p4/2N1N3/8/8/4K3 b - - 0 1")
        moves = ucis(MoveGenerator(pos).generate_legal_moves())
        assert {"d5c4", "d5e4", "d5d4"} <= moves

    def test_no_en_passant_capture(self) -> None:
        pos = position_from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 2")
        moves = ucis(MoveGenerator(pos).generate_legal_moves())
        assert "e5d6" not in moves
        assert "e5e6" in moves


class TestSlidersAndSteppers:
    def test_lone_rook_mobility(self) -> None:
        pos = position_from_fen("7k/8/8/8/3R4/8/8/K7 w - - 0 1")
        moves = [
            m for m in MoveGenerator(pos).generate_legal_moves()
            if m.from_sq == parse_square("d4")
        ]
        assert len(moves) == 14

    def test_rook_stops_at_capture(self) -> None:
        pos = position_from_fen("3r3k/8/8/8/3R4/8/8/K7 w - - 0 1")
        moves = ucis(MoveGenerator(pos).generate_legal_moves())
        assert "d4d8" in moves

    def test_knight_in_corner(self) -> None:
        pos = position_from_fen("7k/8/8/8/8/8/8/N6K w - - 0 1")
        moves = ucis(
            m for m in MoveGenerator(pos).generate_legal_moves()
            if m.from_sq == parse_square("a1")
        )
        assert moves == {"a1b3", "a1c2"}

    def test_no_castling_generated(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        moves = ucis(MoveGenerator(pos).generate_legal_moves())
        assert "e1g1" not in moves
        assert "e1c1" not in moves


class TestLegality:
    def test_pinned_piece_cannot_move(self) -> None:
        pos = position_from_fen("4r2k/8/8/8/8/8/4B3/4K3 w - - 0 1")
        gen = MoveGenerator(pos)
        pseudo = ucis(gen.generate_pseudo_legal_moves())
        legal = ucis(gen.generate_legal_moves())
        assert "e2d3" in pseudo
        assert not any(uci.startswith("e2") for uci in legal)

    def test_king_cannot_step_into_attack(self) -> None:
        pos = position_from_fen("3r3k/8/8/8/8/8/8/4K3 w - - 0 1")
        legal = ucis(MoveGenerator(pos).generate_legal_moves())
        assert "e1d1" not in legal
        assert "e1d2" not in legal
        assert "e1e2" in legal

    def test_legal_is_subset_of_pseudo(self) -> None:
        pos = position_from_fen(
            "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"
        )
        gen = MoveGenerator(pos)
        assert set(gen.generate_legal_moves()) <= set(gen.generate_pseudo_legal_moves())

    def test_legal_generation_restores_position(self) -> None:
        fen = "4r2k/8/8/8/8/8/4B3/4K3 w - - 0 1"
        pos = position_from_fen(fen)
        MoveGenerator(pos).generate_legal_moves()
        assert position_to_fen(pos) == fen

    def test_count_pseudo_legal_moves(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert MoveGenerator(pos).count_pseudo_legal_moves() == 20

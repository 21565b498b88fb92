"""Tests for Rules: check, checkmate, stalemate."""

from kibitzer.core.notation import STARTING_FEN, position_from_fen
from kibitzer.core.rules import Rules

FOOLS_MATE = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        assert not Rules.is_in_check(position_from_fen(STARTING_FEN))

    def test_fools_mate_in_check(self) -> None:
        # After 1.f3 e5 2.g4 Qh4#, white is in check
        assert Rules.is_in_check(position_from_fen(FOOLS_MATE))


class TestCheckmate:
    def test_fools_mate(self) -> None:
        assert Rules.is_checkmate(position_from_fen(FOOLS_MATE))

    def test_back_rank_mate(self) -> None:
        # R on a8 checks black king d8; white king d6 covers all escapes
        pos = position_from_fen("R2k4/8/3K4/8/8/8/8/8 b - - 0 1")
        assert Rules.is_checkmate(pos)

    def test_not_checkmate_when_can_escape(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/r3K3 w - - 0 1")
        assert not Rules.is_checkmate(pos)

    def test_starting_not_checkmate(self) -> None:
        assert not Rules.is_checkmate(position_from_fen(STARTING_FEN))


class TestStalemate:
    def test_king_trapped(self) -> None:
        pos = position_from_fen("7k/5Q2/6K1/8/8/8/8/8 b - - 0 1")
        assert Rules.is_stalemate(pos)
        assert not Rules.is_checkmate(pos)

    def test_checkmate_is_not_stalemate(self) -> None:
        assert not Rules.is_stalemate(position_from_fen(FOOLS_MATE))

    def test_starting_not_stalemate(self) -> None:
        assert not Rules.is_stalemate(position_from_fen(STARTING_FEN))

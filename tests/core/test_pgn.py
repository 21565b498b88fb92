"""Tests for best-effort PGN extraction and replay."""

from kibitzer.core.enums import Color, PieceType
from kibitzer.core.notation import (
    STARTING_FEN,
    extract_pgn_moves,
    position_from_pgn,
    position_to_fen,
    replay_pgn,
    strip_movetext,
)
from kibitzer.core.piece import Piece
from kibitzer.core.types import parse_square

GAME = """[Event "Casual Game"]
[Site "Berlin GER"]
[Date "1852.??.??"]
[Result "1-0"]

1. e4 e5 2. Nf3 {Developing} Nc6 (2... d6 3. d4) 3. Bb5 a6 4. O-O Nf6 1-0
"""


class TestStripMovetext:
    def test_headers_removed(self) -> None:
        text = strip_movetext(GAME)
        assert "Event" not in text
        assert "1852" not in text

    def test_comments_and_variations_removed(self) -> None:
        text = strip_movetext("1. e4 {best by test} e5 (1... c5 (1... e6)) 2. Nf3")
        assert "best" not in text
        assert "c5" not in text
        assert "e6" not in text
        assert "(" not in text

    def test_result_removed(self) -> None:
        assert "1-0" not in strip_movetext("1. e4 e5 1-0")
        assert "1/2-1/2" not in strip_movetext("1. e4 e5 1/2-1/2")

    def test_annotations_removed(self) -> None:
        text = strip_movetext("1. e4! e5?! 2. Nf3 $1")
        assert "!" not in text
        assert "?" not in text
        assert "$" not in text


class TestExtractMoves:
    def test_mainline_tokens(self) -> None:
        assert extract_pgn_moves(GAME) == [
            "e4", "e5", "Nf3", "Nc6", "Bb5", "a6", "O-O", "Nf6",
        ]

    def test_checks_and_captures_kept(self) -> None:
        moves = extract_pgn_moves("1. e4 d5 2. exd5 Qxd5 3. Nc3 Qe5+")
        assert moves == ["e4", "d5", "exd5", "Qxd5", "Nc3", "Qe5+"]

    def test_compact_move_numbers(self) -> None:
        assert extract_pgn_moves("1.e4 e5 2.Nf3") == ["e4", "e5", "Nf3"]

    def test_double_digit_move_numbers(self) -> None:
        moves = extract_pgn_moves("9. Re1 Nd7 10. d4 Bf6 11. a4")
        assert moves == ["Re1", "Nd7", "d4", "Bf6", "a4"]

    def test_black_continuation_number(self) -> None:
        moves = extract_pgn_moves("10. Nf3 {comment} 10... Nc6 11. Bb5")
        assert moves == ["Nf3", "Nc6", "Bb5"]

    def test_empty_input(self) -> None:
        assert extract_pgn_moves("") == []


class TestReplay:
    def test_empty_pgn_is_starting_position(self) -> None:
        assert position_to_fen(position_from_pgn("")) == STARTING_FEN

    def test_places_destination_pieces(self) -> None:
        pos = position_from_pgn("1. e4 e5 2. Nf3 Nc6")
        board = pos.board
        assert board[parse_square("e4")] == Piece(Color.WHITE, PieceType.PAWN)
        assert board[parse_square("e5")] == Piece(Color.BLACK, PieceType.PAWN)
        assert board[parse_square("f3")] == Piece(Color.WHITE, PieceType.KNIGHT)
        assert board[parse_square("c6")] == Piece(Color.BLACK, PieceType.KNIGHT)

    def test_side_and_move_number(self) -> None:
        pos = position_from_pgn("1. e4 e5 2. Nf3")
        assert pos.side_to_move == Color.BLACK
        assert pos.fullmove_number == 2

    def test_castling_consumes_turn(self) -> None:
        replay = replay_pgn(GAME)
        assert replay.position.side_to_move == Color.WHITE
        assert replay.position.fullmove_number == 5
        assert "O-O" in replay.applied
        assert replay.skipped == []
        assert replay.tokens == 8

    def test_promotion_places_pawn_kind(self) -> None:
        pos = position_from_pgn("1. e8=Q+")
        assert pos.board[parse_square("e8")] == Piece(Color.WHITE, PieceType.PAWN)

    def test_unrecognised_token_is_skipped(self) -> None:
        replay = replay_pgn("1. e4 Ox 2. Nf3")
        assert replay.skipped == ["Ox"]
        assert replay.applied == ["e4", "Nf3"]
        assert replay.position.side_to_move == Color.BLACK

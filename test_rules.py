"""
Tests for the rules engine: board evaluation and move application.
"""

import pytest

from tictactoe.board import (
    GameStatus,
    Mark,
    Position,
    RejectReason,
    empty_board,
)
from tictactoe.move_validator import MoveValidator, apply_move, get_valid_moves, validate_move
from tictactoe.win_checker import WinChecker, evaluate

X, O = Mark.X, Mark.O


def board_from(text):
    """Build a board from 9 characters: X, O or '.' for empty."""
    cells = {"X": X, "O": O, ".": None}
    text = text.replace(" ", "")
    assert len(text) == 9
    return tuple(cells[ch] for ch in text)


class TestEvaluate:
    def test_empty_board_in_progress(self):
        result = evaluate(empty_board())

        assert result.status == GameStatus.IN_PROGRESS
        assert result.winner is None
        assert result.winning_line == ()
        assert not result.is_over

    @pytest.mark.parametrize("line", WinChecker.WINNING_LINES)
    @pytest.mark.parametrize("mark", [X, O])
    def test_single_line_wins(self, line, mark):
        cells = [None] * 9
        for index in line:
            cells[index] = mark

        result = evaluate(tuple(cells))

        assert result.status == GameStatus.WIN
        assert result.winner == mark
        assert result.winning_line == line
        assert result.is_over

    def test_winning_line_order_is_fixed(self):
        assert WinChecker.WINNING_LINES == (
            (0, 1, 2), (3, 4, 5), (6, 7, 8),
            (0, 3, 6), (1, 4, 7), (2, 5, 8),
            (0, 4, 8), (2, 4, 6),
        )

    def test_first_line_in_order_reported(self):
        # X wins on the top row and the left column at once
        board = board_from("XXX X.O XOO")

        assert evaluate(board).winning_line == (0, 1, 2)

    def test_win_on_full_board_is_not_draw(self):
        board = board_from("XOX OXO OXX")

        result = evaluate(board)

        assert result.status == GameStatus.WIN
        assert result.winner == X
        assert result.winning_line == (0, 4, 8)

    @pytest.mark.parametrize("text", [
        "XOX XOO OXX",
        "XXO OOX XOX",
        "OXO XXO XOX",
    ])
    def test_full_board_without_line_is_draw(self, text):
        result = evaluate(board_from(text))

        assert result.status == GameStatus.DRAW
        assert result.winner is None
        assert result.winning_line == ()
        assert result.is_over

    @pytest.mark.parametrize("text", [
        "X.. ... ...",
        "XO. XO. O..",
        "XOX XOO OX.",
    ])
    def test_open_board_without_line_in_progress(self, text):
        assert evaluate(board_from(text)).status == GameStatus.IN_PROGRESS

    def test_check_winner_and_draw_helpers(self):
        checker = WinChecker()

        assert checker.check_winner(board_from("OOO XX. X..")) == O
        assert checker.check_winner(board_from("XOX XOO OXX")) is None
        assert checker.check_draw(board_from("XOX XOO OXX"))
        assert not checker.check_draw(board_from("OOO XX. X.."))


class TestApplyMove:
    def test_places_mark_on_new_board(self):
        board = empty_board()

        result = apply_move(board, 4, X)

        assert result.is_valid
        assert result.reason is None
        assert result.board[4] == X
        assert result.board == board_from("... .X. ...")

    def test_input_board_not_mutated(self):
        board = board_from("X.. .O. ...")
        before = tuple(board)

        result = apply_move(board, 8, X)

        assert result.is_valid
        assert board == before
        assert result.board is not board
        assert isinstance(result.board, tuple)

    @pytest.mark.parametrize("index", [-1, 9, 100, "4", 4.0, None, True])
    def test_out_of_range_rejected(self, index):
        result = apply_move(empty_board(), index, X)

        assert not result.is_valid
        assert result.reason == RejectReason.OUT_OF_RANGE
        assert result.board is None
        assert result.error_message

    def test_occupied_cell_rejected(self):
        board = board_from("X.. ... ...")

        result = apply_move(board, 0, O)

        assert not result.is_valid
        assert result.reason == RejectReason.CELL_OCCUPIED
        assert "occupied" in result.error_message

    def test_move_after_win_rejected(self):
        board = board_from("XXX OO. ...")

        result = apply_move(board, 8, O)

        assert not result.is_valid
        assert result.reason == RejectReason.GAME_ALREADY_OVER

    def test_move_on_drawn_board_rejected(self):
        result = apply_move(board_from("XOX XOO OXX"), 0, X)

        assert result.reason == RejectReason.GAME_ALREADY_OVER

    def test_same_inputs_same_output(self):
        board = board_from("X.. .O. ...")

        assert apply_move(board, 2, X) == apply_move(board, 2, X)

    def test_rejected_iff_out_of_range_occupied_or_over(self):
        boards = [
            empty_board(),
            board_from("XO. ... ..."),
            board_from("XXX OO. ..."),
            board_from("XOX XOO OXX"),
        ]
        for board in boards:
            over = evaluate(board).is_over
            for index in range(-2, 11):
                expected_reject = not (0 <= index <= 8) or over or board[index] is not None
                assert (not apply_move(board, index, X).is_valid) == expected_reject


class TestMoveValidator:
    def test_validate_move_does_not_build_board(self):
        result = validate_move(empty_board(), 3)

        assert result.is_valid
        assert result.board is None

    def test_valid_moves_are_empty_cells(self):
        assert get_valid_moves(board_from("X.O .X. O..")) == [1, 3, 5, 7, 8]

    def test_no_valid_moves_after_win(self):
        assert get_valid_moves(board_from("XXX OO. ...")) == []

    def test_custom_checker_is_used(self):
        checker = WinChecker()
        validator = MoveValidator(checker)

        assert validator.win_checker is checker


class TestPosition:
    @pytest.mark.parametrize("index, row, col", [
        (0, 1, 1),
        (2, 1, 3),
        (4, 2, 2),
        (6, 3, 1),
        (8, 3, 3),
    ])
    def test_from_index_is_one_based(self, index, row, col):
        position = Position.from_index(index)

        assert position == Position(row=row, col=col)
        assert position.to_index() == index

"""
Tests for the console front end in main.py.
"""

import pytest

from main import ConsoleGame
from tictactoe.board import GameStatus, Mark


class FakeConsole:
    """Feeds input lines and records output."""

    def __init__(self, lines=()):
        self.lines = list(lines)
        self.output = []

    def input(self, prompt):
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)

    def print(self, text):
        self.output.append(text)

    @property
    def text(self):
        return "\n".join(self.output)


@pytest.fixture
def console():
    return FakeConsole()


@pytest.fixture
def game(console):
    return ConsoleGame(input_func=console.input, output=console.print)


class TestCommands:
    def test_play_uses_one_based_row_col(self, game):
        assert game.handle("1 3")

        assert game.history.current_board()[2] == Mark.X

    def test_jump(self, game, console):
        game.handle("2 2")
        game.handle("1 1")

        game.handle("jump 1")

        assert game.history.cursor == 1
        assert "Next player: O" in console.text

    def test_rejections_are_printed(self, game, console):
        game.handle("2 2")

        game.handle("2 2")
        game.handle("4 1")
        game.handle("jump 9")

        assert len(game.history) == 2
        assert "already occupied" in console.text
        assert "Invalid position (4, 1)" in console.text
        assert "Invalid move 9" in console.text

    def test_bad_input(self, game, console):
        game.handle("jump")
        game.handle("hello")

        assert "Usage: jump <n>" in console.text
        assert "Unknown command: hello" in console.text
        assert len(game.history) == 1

    def test_order_flips_move_list(self, game, console):
        game.handle("1 1")
        console.output.clear()

        game.handle("order")

        assert game.descending
        assert console.output == ["> 1. X played at (1, 1)", "  0. Go to game start"]

    def test_list_marks_current(self, game, console):
        game.handle("list")

        assert console.output == ["> 0. You are at game start"]

    def test_new_game(self, game):
        game.handle("1 1")

        game.handle("new")

        assert len(game.history) == 1

    def test_quit(self, game):
        assert not game.handle("quit")
        assert game.handle("")


class TestRun:
    def test_plays_until_end_of_input(self):
        console = FakeConsole(["1 1", "2 1", "1 2", "2 2", "1 3"])
        game = ConsoleGame(input_func=console.input, output=console.print)

        game.run()

        assert game.history.result().status == GameStatus.WIN
        assert "Winner: X" in console.text

    def test_stops_at_quit(self):
        console = FakeConsole(["1 1", "quit", "2 2"])
        game = ConsoleGame(input_func=console.input, output=console.print)

        game.run()

        assert len(game.history) == 2
        assert console.lines == ["2 2"]


class TestNonAsciiDigits:
    @pytest.mark.parametrize("line", ["² 1", "1 ²"])
    def test_superscript_digit_move_is_reported(self, game, console, line):
        assert game.handle(line)

        assert "Unknown command" in console.text
        assert len(game.history) == 1

    def test_superscript_digit_jump_is_reported(self, game, console):
        game.handle("1 1")

        assert game.handle("jump ²")

        assert "Usage: jump <n>" in console.text
        assert game.history.cursor == 1

    def test_session_continues_after_bad_digit(self):
        console = FakeConsole(["² 1", "jump ²", "2 2"])
        game = ConsoleGame(input_func=console.input, output=console.print)

        game.run()

        assert game.history.current_board()[4] == Mark.X

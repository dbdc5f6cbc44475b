"""
Main entry point for tic-tac-toe with move history.

Launches the Tkinter window by default. With --no-ui the game runs in
the console instead:

    <row> <col>   play at a cell (1-3 each)
    jump <n>      go back (or forward) to move n, 0 is game start
    list          show the move list
    order         flip the move list order
    new           start a new game
    help          show the commands
    quit          leave
"""

import logging
from typing import Callable, Optional

from tictactoe.config import GameConfig, UIConfig
from tictactoe.board import Position, in_range
from tictactoe.history import GameHistory
from tictactoe.presentation import build_move_list, render_board, status_text, winning_cells

HELP_TEXT = """Commands:
  <row> <col>   play at a cell (1-3 each)
  jump <n>      go to move n (0 is game start)
  list          show the move list
  order         flip the move list order
  new           start a new game
  help          show this help
  quit          leave"""


class ConsoleGame:
    """
    Console front end for a GameHistory.

    Game flow:
    1. Show the board and whose turn it is
    2. Read a command
    3. Play, jump or show the move list
    4. Repeat until the user quits
    """

    def __init__(
        self,
        history: Optional[GameHistory] = None,
        descending: bool = UIConfig.DEFAULT_DESCENDING,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print
    ):
        self.history = history or GameHistory()
        self.descending = descending
        self._input = input_func
        self._output = output

    def show(self):
        """Print the current board and status."""
        result = self.history.result()
        self._output(render_board(self.history.current_board(), winning_cells(result)))
        self._output(status_text(result, self.history.next_mark()))

    def show_moves(self):
        """Print the move list, marking the current entry."""
        for item in build_move_list(self.history, self.descending):
            marker = ">" if item.is_current else " "
            self._output(f"{marker} {item.move}. {item.text}")

    def handle(self, line: str) -> bool:
        """
        Run one command.

        Args:
            line: The raw input line.

        Returns:
            False when the user asked to quit, True otherwise.
        """
        parts = line.strip().lower().split()
        if not parts:
            return True

        command = parts[0]

        if command in ("quit", "exit", "q"):
            return False

        if command == "help":
            self._output(HELP_TEXT)
        elif command == "list":
            self.show_moves()
        elif command == "order":
            self.descending = not self.descending
            self.show_moves()
        elif command == "new":
            self.history.initialize()
            self.show()
        elif command == "jump":
            self._jump(parts[1:])
        else:
            self._play(parts)

        return True

    def _jump(self, args):
        if len(args) != 1 or not args[0].isdecimal():
            self._output("Usage: jump <n>")
            return

        result = self.history.jump_to(int(args[0]))
        if not result.is_valid:
            self._output(result.error_message)
            return
        self.show()

    def _play(self, args):
        if len(args) != 2 or not all(arg.isdecimal() for arg in args):
            self._output(f"Unknown command: {' '.join(args)} (type 'help')")
            return

        row, col = (int(arg) for arg in args)
        size = GameConfig.BOARD_SIZE
        if not (in_range(row - 1, size) and in_range(col - 1, size)):
            self._output(f"Invalid position ({row}, {col}). Must be 1-{size}.")
            return

        result = self.history.play(Position(row=row, col=col).to_index())
        if not result.is_valid:
            self._output(result.error_message)
            return
        self.show()

    def run(self):
        """Read commands until quit or end of input."""
        self.show()
        self._output("Type 'help' for commands.")

        while True:
            try:
                line = self._input(UIConfig.CONSOLE_PROMPT)
            except EOFError:
                break
            if not self.handle(line):
                break


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Tic-tac-toe with move history")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--descending",
        action="store_true",
        help="List the latest move first"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log every move, jump and rejection"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=GameConfig.DEBUG_LOG_LEVEL if args.debug else GameConfig.LOG_LEVEL,
        format=GameConfig.LOG_FORMAT
    )

    descending = args.descending or UIConfig.DEFAULT_DESCENDING

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(descending=descending)
        ui.run()
        return

    # Console mode (--no-ui)
    print("\n" + "="*40)
    print("   Tic-Tac-Toe")
    print("="*40 + "\n")

    game = ConsoleGame(descending=descending)

    try:
        game.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()

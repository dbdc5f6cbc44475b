"""
Win checker for tic-tac-toe.
Decides if a board is won, drawn or still in progress.
"""

from typing import Optional, Tuple

from .board import Board, Mark, GameResult, GameStatus, IN_PROGRESS, DRAW


class WinChecker:
    """
    Checks for win conditions in tic-tac-toe.

    Win condition: 3 identical marks in a row
    (horizontally, vertically, or diagonally)

    Lines are always checked in the order of WINNING_LINES, so the
    reported line is the same on every run.
    """

    # All possible winning lines (as board indices)
    WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    def evaluate(self, board: Board) -> GameResult:
        """
        Evaluate a board.

        Args:
            board: The board snapshot.

        Returns:
            WIN with the mark and the first winning line found,
            DRAW if every cell is filled without a line,
            IN_PROGRESS otherwise.
        """
        line = self.get_winning_line(board)
        if line is not None:
            return GameResult(GameStatus.WIN, winner=board[line[0]], winning_line=line)

        if all(cell is not None for cell in board):
            return DRAW

        return IN_PROGRESS

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board[line[0]]

    def check_draw(self, board: Board) -> bool:
        """True if the board is full and nobody has a line."""
        return self.evaluate(board).status == GameStatus.DRAW

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Returns:
            The first line (in WINNING_LINES order) holding three
            identical marks, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line):
                return line
        return None

    def _check_line(self, board: Board, line: Tuple[int, int, int]) -> bool:
        a, b, c = line
        return board[a] is not None and board[a] == board[b] == board[c]


_checker = WinChecker()

# Module-level shortcut for callers that don't need a checker instance
evaluate = _checker.evaluate

"""
Move validator for tic-tac-toe.
Validates moves and builds the board that results from them.
"""

import logging
from typing import List, Optional

from .board import Board, Mark, RejectReason, ValidationResult, in_range
from .config import GameConfig
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


class MoveValidator:
    """
    Validates tic-tac-toe moves.

    Rules:
    1. The index must be on the board (0-8)
    2. Game must not be over
    3. Can only place on empty cells
    """

    def __init__(self, win_checker: Optional[WinChecker] = None):
        self.win_checker = win_checker or WinChecker()

    def validate_move(self, board: Board, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            index: Cell to place the mark in (0-8).

        Returns:
            ValidationResult with is_valid, reason and error_message.
        """
        # Check if index is on the board
        if not in_range(index, GameConfig.CELL_COUNT):
            return ValidationResult.rejected(
                RejectReason.OUT_OF_RANGE,
                f"Invalid position {index!r}. Must be 0-{GameConfig.CELL_COUNT - 1}."
            )

        # Check if game is over
        if self.win_checker.evaluate(board).is_over:
            return ValidationResult.rejected(
                RejectReason.GAME_ALREADY_OVER,
                "Game is already over!"
            )

        # Check if cell is empty
        if board[index] is not None:
            return ValidationResult.rejected(
                RejectReason.CELL_OCCUPIED,
                f"Cell {index} is already occupied by {board[index].value}"
            )

        return ValidationResult.accepted()

    def apply_move(self, board: Board, index: int, mark: Mark) -> ValidationResult:
        """
        Place a mark on a copy of the board.

        The input board is left untouched.

        Args:
            board: Current board.
            index: Cell to place the mark in (0-8).
            mark: The mark to place.

        Returns:
            ValidationResult whose board is the new board on success.
        """
        validation = self.validate_move(board, index)
        if not validation.is_valid:
            logger.debug("Rejected %s at %r: %s", mark.value, index, validation.error_message)
            return validation

        cells = list(board)
        cells[index] = mark
        return ValidationResult.accepted(tuple(cells))

    def get_valid_moves(self, board: Board) -> List[int]:
        """
        Get all valid moves on a board.

        Returns:
            Indices of empty cells, or an empty list once the game is over.
        """
        if self.win_checker.evaluate(board).is_over:
            return []

        return [index for index, cell in enumerate(board) if cell is None]


_validator = MoveValidator()

# Module-level shortcuts
validate_move = _validator.validate_move
apply_move = _validator.apply_move
get_valid_moves = _validator.get_valid_moves

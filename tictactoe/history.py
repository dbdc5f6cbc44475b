"""
Game history for tic-tac-toe.
Tracks every board snapshot and which one is currently shown.
"""

import logging
from typing import List, Optional, Tuple
from dataclasses import dataclass

from .board import (
    Board,
    GameResult,
    HistoryEntry,
    Mark,
    Position,
    RejectReason,
    ValidationResult,
    empty_board,
    in_range,
)
from .move_validator import MoveValidator
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveLabel:
    """
    What the move list shows for one history entry.
    """
    move: int                       # History index
    mark: Optional[Mark]            # Who made the move, None at game start
    position: Optional[Position]    # Where it was made, None at game start

    @property
    def is_game_start(self) -> bool:
        return self.move == 0


class GameHistory:
    """
    The history of one game plus the time cursor.

    Tracks:
    - Every board snapshot, starting with the empty board
    - The cursor: which snapshot is current
    Whose turn it is and whether the game is over are derived from the
    current snapshot on every call, never stored.

    Playing from a past snapshot throws away every snapshot after it.
    """

    def __init__(
        self,
        validator: Optional[MoveValidator] = None,
        win_checker: Optional[WinChecker] = None
    ):
        # play() and result() must judge boards with the same checker
        if validator is not None:
            self.validator = validator
            self.win_checker = validator.win_checker
        else:
            self.win_checker = win_checker or WinChecker()
            self.validator = MoveValidator(self.win_checker)
        self._history: List[HistoryEntry] = []
        self._cursor = 0
        self.initialize()

    def initialize(self) -> None:
        """Start a new game: one empty snapshot, cursor at it."""
        self._history = [HistoryEntry(board=empty_board(), last_move=None)]
        self._cursor = 0
        logger.info("New game started")

    # ==================== READ ACCESSORS ====================

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def entries(self) -> Tuple[HistoryEntry, ...]:
        """All snapshots, oldest first."""
        return tuple(self._history)

    def __len__(self) -> int:
        return len(self._history)

    def current_board(self) -> Board:
        """The board at the cursor."""
        return self._history[self._cursor].board

    def next_mark(self) -> Mark:
        """X moves on even cursors, O on odd ones."""
        return Mark.X if self._cursor % 2 == 0 else Mark.O

    def result(self) -> GameResult:
        """Evaluate the board at the cursor."""
        return self.win_checker.evaluate(self.current_board())

    def is_game_over(self) -> bool:
        return self.result().is_over

    def move_label(self, move: int) -> MoveLabel:
        """
        Describe one history entry for the move list.

        Args:
            move: History index.

        Returns:
            MoveLabel for the entry. Entry 1 was made by X, entry 2 by O,
            and so on.

        Raises:
            IndexError: If there is no entry at move.
        """
        if not in_range(move, len(self._history)):
            raise IndexError(f"No history entry {move!r}")

        if move == 0:
            return MoveLabel(move=0, mark=None, position=None)

        mark = Mark.O if move % 2 == 0 else Mark.X
        return MoveLabel(move=move, mark=mark, position=self._history[move].last_move)

    def move_labels(self) -> List[MoveLabel]:
        """Labels for every entry, oldest first."""
        return [self.move_label(move) for move in range(len(self._history))]

    # ==================== TRANSITIONS ====================

    def play(self, index: int) -> ValidationResult:
        """
        Play the next mark at the given cell.

        Args:
            index: Cell index (0-8).

        Returns:
            ValidationResult. On rejection nothing changes.
        """
        mark = self.next_mark()
        outcome = self.validator.apply_move(self.current_board(), index, mark)
        if not outcome.is_valid:
            return outcome

        # Drop any future left over from a jump back in time
        del self._history[self._cursor + 1:]

        position = Position.from_index(index)
        self._history.append(HistoryEntry(board=outcome.board, last_move=position))
        self._cursor = len(self._history) - 1

        logger.info("Move %d: %s at (%d, %d)", self._cursor, mark.value, position.row, position.col)
        return outcome

    def jump_to(self, move: int) -> ValidationResult:
        """
        Move the cursor to a history entry.

        The history itself is not changed.

        Args:
            move: History index (0 is game start).

        Returns:
            ValidationResult whose board is the board now current.
        """
        if not in_range(move, len(self._history)):
            logger.debug("Rejected jump to %r", move)
            return ValidationResult.rejected(
                RejectReason.OUT_OF_RANGE,
                f"Invalid move {move!r}. Must be 0-{len(self._history) - 1}."
            )

        self._cursor = move
        logger.info("Jumped to move %d", move)
        return ValidationResult.accepted(self.current_board())

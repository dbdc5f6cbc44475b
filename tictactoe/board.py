"""
Board model for tic-tac-toe.
Marks, immutable board snapshots, history entries and engine results.

A board is a tuple of 9 cells in row-major order. A cell is a Mark or
None (empty). Boards are never changed in place: every move builds a
new tuple.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass

from .config import GameConfig


class Mark(Enum):
    """The two marks in the game. X always moves first."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the other player's mark."""
        return Mark.O if self == Mark.X else Mark.X


Cell = Optional[Mark]
Board = Tuple[Cell, ...]


def empty_board() -> Board:
    """Create a board with every cell empty."""
    return (None,) * GameConfig.CELL_COUNT


def is_index(value) -> bool:
    """True if value is an int usable as a board index (bools excluded)."""
    return isinstance(value, int) and not isinstance(value, bool)


def in_range(index, size: int = GameConfig.CELL_COUNT) -> bool:
    """Check that index is an int in [0, size)."""
    return is_index(index) and 0 <= index < size


@dataclass(frozen=True)
class Position:
    """
    A board position for display, 1-based.
    """
    row: int    # Row (1-3)
    col: int    # Column (1-3)

    @classmethod
    def from_index(cls, index: int) -> "Position":
        """Convert a board index (0-8) to a 1-based (row, col)."""
        size = GameConfig.BOARD_SIZE
        return cls(row=index // size + 1, col=index % size + 1)

    def to_index(self) -> int:
        """Convert back to a board index (0-8)."""
        size = GameConfig.BOARD_SIZE
        return (self.row - 1) * size + (self.col - 1)


@dataclass(frozen=True)
class HistoryEntry:
    """
    One snapshot in the game history.
    """
    board: Board                    # Board after the move
    last_move: Optional[Position]   # Where the move was made, None at game start


class GameStatus(Enum):
    """State of a board."""
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class GameResult:
    """Result of evaluating a board."""
    status: GameStatus
    winner: Optional[Mark] = None
    winning_line: Tuple[int, ...] = ()

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS


IN_PROGRESS = GameResult(GameStatus.IN_PROGRESS)
DRAW = GameResult(GameStatus.DRAW)


class RejectReason(Enum):
    """Why a move or a jump was rejected."""
    OUT_OF_RANGE = "out_of_range"
    CELL_OCCUPIED = "cell_occupied"
    GAME_ALREADY_OVER = "game_already_over"


@dataclass(frozen=True)
class ValidationResult:
    """
    Result of a move or jump.

    Rejections are ordinary results, not exceptions: is_valid is False,
    reason says why and nothing was changed. On success board holds the
    board that is now current.
    """
    is_valid: bool
    reason: Optional[RejectReason] = None
    error_message: Optional[str] = None
    board: Optional[Board] = None

    @classmethod
    def rejected(cls, reason: RejectReason, error_message: str) -> "ValidationResult":
        return cls(is_valid=False, reason=reason, error_message=error_message)

    @classmethod
    def accepted(cls, board: Optional[Board] = None) -> "ValidationResult":
        return cls(is_valid=True, board=board)

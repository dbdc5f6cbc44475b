"""
Tic-tac-toe with move history.
Rules engine, game history with time-travel, and presentation helpers.
"""

__version__ = "1.0.0"

from .config import GameConfig, UIConfig
from .board import (
    Board,
    Cell,
    GameResult,
    GameStatus,
    HistoryEntry,
    Mark,
    Position,
    RejectReason,
    ValidationResult,
    empty_board,
)
from .win_checker import WinChecker, evaluate
from .move_validator import MoveValidator, apply_move, validate_move, get_valid_moves
from .history import GameHistory, MoveLabel

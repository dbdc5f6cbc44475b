"""
Configuration for the tic-tac-toe game.
Board constants, logging and the look of the Tkinter window.
"""

import logging


class GameConfig:
    """
    Configuration class for the game core.
    """

    # ==================== BOARD SETTINGS ====================
    # Tic-tac-toe is a 3x3 grid
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells, row-major

    # ==================== LOGGING SETTINGS ====================
    LOG_LEVEL = logging.WARNING
    DEBUG_LOG_LEVEL = logging.DEBUG
    LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


class UIConfig:
    """
    Configuration class for the views.
    Change these values to restyle the window.
    """

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "Tic-Tac-Toe"
    BACKGROUND = '#1a1a2e'
    FONT_FAMILY = 'Segoe UI'

    # ==================== BOARD SETTINGS ====================
    CELL_FONT_SIZE = 24
    CELL_WIDTH = 4
    CELL_HEIGHT = 2
    CELL_BG = '#16213e'
    CELL_FG = 'white'
    WINNING_CELL_BG = '#065f46'
    WINNING_CELL_FG = '#10b981'
    MARK_COLORS = {
        "X": '#ff6b6b',
        "O": '#00ff88',
    }

    # ==================== MOVE LIST SETTINGS ====================
    # False lists moves from game start downwards
    DEFAULT_DESCENDING = False

    # ==================== TEXT ====================
    GAME_START_TEXT = "Go to game start"
    AT_GAME_START_TEXT = "You are at game start"
    MOVE_TEXT = "{mark} played at ({row}, {col})"
    NEXT_PLAYER_TEXT = "Next player: {mark}"
    WINNER_TEXT = "Winner: {mark}"
    DRAW_TEXT = "It's a draw!"
    SORT_ASCENDING_TEXT = "Sort ascending"
    SORT_DESCENDING_TEXT = "Sort descending"
    CONSOLE_PROMPT = "> "

"""
Tic-Tac-Toe UI
A graphical interface for the game using Tkinter.

Shows:
- The 3x3 board (winning line highlighted)
- Game status and next player
- The move list, where every earlier move can be jumped to
"""

import logging
import tkinter as tk
from tkinter import ttk
from typing import List, Optional

from tictactoe.config import GameConfig, UIConfig
from tictactoe.history import GameHistory
from tictactoe.presentation import (
    build_move_list,
    cell_text,
    grid_position,
    order_toggle_text,
    status_text,
    winning_cells,
)

logger = logging.getLogger(__name__)


class TicTacToeUI:
    """
    Main UI class for the game.

    The window never keeps game state of its own: after every click it
    re-reads the GameHistory and redraws.
    """

    def __init__(self, history: Optional[GameHistory] = None, descending: bool = UIConfig.DEFAULT_DESCENDING):
        """Initialize the UI."""
        self.history = history or GameHistory()
        self.descending = descending

        # Create UI
        self._create_ui()
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(UIConfig.WINDOW_TITLE)
        self.root.configure(bg=UIConfig.BACKGROUND)
        self.root.minsize(560, 360)

        # Main container
        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        font = UIConfig.FONT_FAMILY
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=UIConfig.BACKGROUND)
        style.configure('TLabel', background=UIConfig.BACKGROUND, foreground='white', font=(font, 11))
        style.configure('Title.TLabel', font=(font, 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=(font, 12), foreground='#ffd700')
        style.configure('Current.TLabel', font=(font, 11, 'bold'), foreground='#00ff88')
        style.configure('TButton', font=(font, 10, 'bold'))

        # Left panel - board
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, fill=tk.Y, padx=(0, 10))

        self.status_label = ttk.Label(left_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=(0, 10))

        self.board_frame = ttk.Frame(left_frame)
        self.board_frame.pack(pady=10)

        self.board_cells: List[tk.Button] = []
        for index in range(GameConfig.CELL_COUNT):
            cell = tk.Button(
                self.board_frame,
                text="",
                font=(font, UIConfig.CELL_FONT_SIZE, 'bold'),
                width=UIConfig.CELL_WIDTH,
                height=UIConfig.CELL_HEIGHT,
                bg=UIConfig.CELL_BG,
                fg=UIConfig.CELL_FG,
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell_click(i)
            )
            row, col = grid_position(index)
            cell.grid(row=row, column=col, padx=2, pady=2)
            self.board_cells.append(cell)

        self.error_label = ttk.Label(left_frame, text="")
        self.error_label.pack(pady=5)

        tk.Button(
            left_frame,
            text="New Game",
            font=(font, 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._new_game
        ).pack(pady=5)

        # Right panel - move list
        right_frame = ttk.Frame(main_frame, width=280)
        right_frame.pack(side=tk.RIGHT, fill=tk.BOTH, expand=True, padx=(10, 0))

        ttk.Label(right_frame, text="Moves", style='Title.TLabel').pack(pady=(0, 5))

        self.order_btn = tk.Button(
            right_frame,
            text=order_toggle_text(self.descending),
            font=(font, 10),
            width=18,
            command=self._toggle_order
        )
        self.order_btn.pack(pady=5)

        self.moves_frame = ttk.Frame(right_frame)
        self.moves_frame.pack(fill=tk.BOTH, expand=True)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_click(self, index: int):
        """Play the next mark in a cell."""
        result = self.history.play(index)
        self.error_label.configure(text="" if result.is_valid else result.error_message)
        self._refresh()

    def _jump_to(self, move: int):
        """Jump back (or forward) to a move."""
        result = self.history.jump_to(move)
        self.error_label.configure(text="" if result.is_valid else result.error_message)
        self._refresh()

    def _toggle_order(self):
        """Flip the move list between ascending and descending."""
        self.descending = not self.descending
        self.order_btn.configure(text=order_toggle_text(self.descending))
        self._refresh_moves()

    def _new_game(self):
        """Throw away the history and start over."""
        self.history.initialize()
        self.error_label.configure(text="")
        self._refresh()

    def _refresh(self):
        """Redraw everything from the history."""
        self._refresh_board()
        self._refresh_moves()

    def _refresh_board(self):
        """Update the board grid and the status line."""
        board = self.history.current_board()
        result = self.history.result()
        highlight = winning_cells(result)

        self.status_label.configure(text=status_text(result, self.history.next_mark()))

        for index, cell in enumerate(board):
            button = self.board_cells[index]
            text = cell_text(cell)

            if index in highlight:
                bg, fg = UIConfig.WINNING_CELL_BG, UIConfig.WINNING_CELL_FG
            else:
                bg, fg = UIConfig.CELL_BG, UIConfig.MARK_COLORS.get(text, UIConfig.CELL_FG)

            # Filled cells and finished games take no more clicks
            state = 'disabled' if cell is not None or result.is_over else 'normal'
            button.configure(text=text, bg=bg, fg=fg, disabledforeground=fg, state=state)

    def _refresh_moves(self):
        """Rebuild the move list."""
        for child in self.moves_frame.winfo_children():
            child.destroy()

        for item in build_move_list(self.history, self.descending):
            row = ttk.Frame(self.moves_frame)
            row.pack(fill=tk.X, pady=1)

            ttk.Label(row, text=f"{item.move + 1}.", width=4).pack(side=tk.LEFT)

            if item.is_current:
                ttk.Label(row, text=item.text, style='Current.TLabel').pack(side=tk.LEFT)
            else:
                tk.Button(
                    row,
                    text=item.text,
                    font=(UIConfig.FONT_FAMILY, 10),
                    command=lambda m=item.move: self._jump_to(m)
                ).pack(side=tk.LEFT)

    def _quit(self):
        """Close the window."""
        logger.info("Closing window")
        self.root.destroy()

    def run(self):
        """Run the Tk event loop."""
        self.root.mainloop()


if __name__ == "__main__":
    TicTacToeUI().run()

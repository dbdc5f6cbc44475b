"""
Presentation helpers shared by the Tkinter window and the console mode.

Everything here is derived from a GameHistory on demand; nothing is
written back to it.
"""

from typing import FrozenSet, Iterable, List, Tuple
from dataclasses import dataclass

from .board import Board, Cell, GameResult, GameStatus, Mark
from .config import GameConfig, UIConfig
from .history import GameHistory, MoveLabel


@dataclass(frozen=True)
class MoveListItem:
    """One row of the move list."""
    move: int           # History index to jump to
    text: str
    is_current: bool    # The current entry is shown as plain text, not a jump button


def cell_text(cell: Cell) -> str:
    return "" if cell is None else cell.value


def status_text(result: GameResult, next_mark: Mark) -> str:
    """Status line shown above the board."""
    if result.status == GameStatus.WIN:
        return UIConfig.WINNER_TEXT.format(mark=result.winner.value)
    if result.status == GameStatus.DRAW:
        return UIConfig.DRAW_TEXT
    return UIConfig.NEXT_PLAYER_TEXT.format(mark=next_mark.value)


def describe_move(label: MoveLabel) -> str:
    """
    Text for a move list entry.

    Args:
        label: The entry's MoveLabel.

    Returns:
        "Go to game start" for move 0, else e.g. "X played at (1, 3)".
    """
    if label.is_game_start:
        return UIConfig.GAME_START_TEXT
    return UIConfig.MOVE_TEXT.format(
        mark=label.mark.value,
        row=label.position.row,
        col=label.position.col
    )


def build_move_list(history: GameHistory, descending: bool = False) -> List[MoveListItem]:
    """
    Build the move list for a game.

    Args:
        history: The game.
        descending: List the latest move first.

    Returns:
        One MoveListItem per history entry.
    """
    items = []
    for label in history.move_labels():
        is_current = label.move == history.cursor
        if is_current and label.is_game_start:
            text = UIConfig.AT_GAME_START_TEXT
        else:
            text = describe_move(label)
        items.append(MoveListItem(move=label.move, text=text, is_current=is_current))

    if descending:
        items.reverse()
    return items


def order_toggle_text(descending: bool) -> str:
    """Label of the button that flips the move list order."""
    return UIConfig.SORT_ASCENDING_TEXT if descending else UIConfig.SORT_DESCENDING_TEXT


def grid_position(index: int) -> Tuple[int, int]:
    """Zero-based (row, col) of a board index, for laying out widgets."""
    return divmod(index, GameConfig.BOARD_SIZE)


def winning_cells(result: GameResult) -> FrozenSet[int]:
    """Indices to highlight on the board."""
    return frozenset(result.winning_line)


def render_board(board: Board, highlight: Iterable[int] = ()) -> str:
    """
    Render a board as text for the console.

    Rows and columns are numbered from 1. Highlighted cells are wrapped
    in asterisks.
    """
    size = GameConfig.BOARD_SIZE
    highlight = set(highlight)

    lines = ["    " + "   ".join(str(col + 1) for col in range(size))]
    lines.append("  ┌" + "┬".join("───" for _ in range(size)) + "┐")

    for row in range(size):
        row_str = "│"
        for col in range(size):
            index = row * size + col
            text = cell_text(board[index]) or " "
            if index in highlight:
                row_str += f"*{text}*│"
            else:
                row_str += f" {text} │"
        lines.append(f"{row + 1} {row_str}")

        if row < size - 1:
            lines.append("  ├" + "┼".join("───" for _ in range(size)) + "┤")

    lines.append("  └" + "┴".join("───" for _ in range(size)) + "┘")
    return "\n".join(lines)

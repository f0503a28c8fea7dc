"""
Board representation for TicTacToe.
A board is a flat sequence of 9 cells in row-major order.
"""

from enum import Enum
from typing import List, Optional, Sequence, Tuple

import numpy as np


class Mark(Enum):
    """The two marks that can be placed on the board."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.O if self == Mark.X else Mark.X


# A cell is either empty (None) or holds a mark
Cell = Optional[Mark]
Board = Sequence[Cell]

BOARD_SIZE = 3
NUM_CELLS = BOARD_SIZE * BOARD_SIZE

# All winning lines, in the order they are scanned
LINES: Tuple[Tuple[int, int, int], ...] = (
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

# Characters accepted as an empty cell by board_from_string
EMPTY_CHARS = ".-_ "


def empty_board() -> Tuple[Cell, ...]:
    """Create a board with all 9 cells empty."""
    return (None,) * NUM_CELLS


def empty_cells(board: Board) -> List[int]:
    """
    Get all empty cells on the board.

    Args:
        board: The board to inspect.

    Returns:
        Indices of empty cells, lowest first.
    """
    return [index for index, cell in enumerate(board) if cell is None]


def is_full(board: Board) -> bool:
    """True if every cell holds a mark."""
    return all(cell is not None for cell in board)


def swap_marks(board: Board) -> Tuple[Cell, ...]:
    """
    Exchange X and O on a board.

    Useful for callers that want to run the search with the default
    maximizing mark when the computer actually plays the other one.
    """
    return tuple(None if cell is None else cell.opposite() for cell in board)


def board_from_string(text: str) -> Tuple[Cell, ...]:
    """
    Parse a board from a 9 character string such as "XO.X..O..".

    Args:
        text: One character per cell. X and O (any case) are marks,
            '.', '-', '_' and space are empty cells.

    Returns:
        The parsed board as a tuple.

    Raises:
        ValueError: If the string has the wrong length or an unknown character.
    """
    if len(text) != NUM_CELLS:
        raise ValueError(f"Board must have {NUM_CELLS} cells, got {len(text)}: {text!r}")

    cells = []
    for char in text:
        if char in EMPTY_CHARS:
            cells.append(None)
        elif char.upper() in ("X", "O"):
            cells.append(Mark(char.upper()))
        else:
            raise ValueError(f"Invalid cell {char!r} in board {text!r}")
    return tuple(cells)


def board_to_grid(board: Board) -> np.ndarray:
    """Get the board as a 3x3 array of "X", "O" and "" strings."""
    flat = ["" if cell is None else cell.value for cell in board]
    return np.array(flat, dtype=object).reshape(BOARD_SIZE, BOARD_SIZE)


def format_board(board: Board) -> str:
    """
    Render the board as a text grid.

    Empty cells show their 1-based cell number so a player can
    type it to move there.
    """
    grid = board_to_grid(board)
    lines = []
    for row in range(BOARD_SIZE):
        cells = []
        for col in range(BOARD_SIZE):
            value = grid[row, col]
            cells.append(f" {value or row * BOARD_SIZE + col + 1} ")
        lines.append("|".join(cells))
        if row < BOARD_SIZE - 1:
            lines.append("---+---+---")
    return "\n".join(lines)

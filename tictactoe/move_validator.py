"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from .board import NUM_CELLS, empty_cells

if TYPE_CHECKING:
    from .game_session import GameSession


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Cell must be on the board
    3. Can only place on empty cells
    4. Against the computer, the human may only move on their own turn

    Error messages number cells from `cell_base`, so a front-end that
    shows cells as 1-9 can pass cell_base=1.
    """

    def __init__(self, cell_base: int = 0):
        self.cell_base = cell_base

    def validate_move(self, session: "GameSession", index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            session: Current game session.
            index: Cell to place the current player's mark on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if session.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if index is in valid range
        if not 0 <= index < NUM_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Invalid cell {index + self.cell_base}. "
                    f"Must be {self.cell_base}-{NUM_CELLS - 1 + self.cell_base}."
                )
            )

        # Check if cell is empty
        occupant = session.board[index]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index + self.cell_base} is already occupied by {occupant.value}"
            )

        # Check it isn't the computer's turn
        if session.current_player == session.computer_player:
            return ValidationResult(
                is_valid=False,
                error_message=f"It's the computer's turn ({session.current_player.value})!"
            )

        # All checks passed!
        return ValidationResult(is_valid=True)

    def get_valid_moves(self, session: "GameSession") -> List[int]:
        """
        Get all cells the current player may move to.

        Args:
            session: Current game session.

        Returns:
            List of empty cell indices, or an empty list once the game is over.
        """
        if session.is_game_over:
            return []

        return empty_cells(session.board)

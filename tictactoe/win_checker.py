"""
Win checker for TicTacToe.
Checks if a mark has completed a line or if the game is a draw.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .board import LINES, Board, Mark, is_full


class OutcomeStatus(Enum):
    """Where a game stands after a move."""
    ONGOING = "ongoing"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Result of evaluating a board.

    Only a WIN carries a winner and the completed line.
    """
    status: OutcomeStatus = OutcomeStatus.ONGOING
    winner: Optional[Mark] = None
    line: Optional[Tuple[int, int, int]] = None

    @property
    def is_win(self) -> bool:
        return self.status == OutcomeStatus.WIN

    @property
    def is_draw(self) -> bool:
        return self.status == OutcomeStatus.DRAW

    @property
    def is_over(self) -> bool:
        return self.status != OutcomeStatus.ONGOING

    def describe(self) -> str:
        """Short text for the player."""
        if self.is_win:
            return f"{self.winner.value} WINS!"
        if self.is_draw:
            return "It's a DRAW!"
        return "Game in progress"


ONGOING = Outcome()
DRAW = Outcome(status=OutcomeStatus.DRAW)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 cells with the same mark in a row
    (horizontally, vertically, or diagonally)

    The board is never validated: if several lines are complete the
    first one in LINES order is reported.
    """

    WINNING_LINES = LINES

    def evaluate(self, board: Board) -> Outcome:
        """
        Evaluate a board.

        Args:
            board: The 9 cell board.

        Returns:
            A WIN outcome with the first completed line, DRAW if the board
            is full without one, otherwise ONGOING.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return Outcome(status=OutcomeStatus.WIN, winner=winner, line=line)

        if is_full(board):
            return DRAW

        return ONGOING

    def check_winner(self, board: Board) -> Optional[Mark]:
        """Get the winning mark, or None if no line is complete."""
        return self.evaluate(board).winner

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """Get the first completed line, or None."""
        return self.evaluate(board).line

    def check_draw(self, board: Board) -> bool:
        """True if the board is full and nobody has won."""
        return self.evaluate(board).is_draw

    def _check_line(self, board: Board, line: Tuple[int, int, int]) -> Optional[Mark]:
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return board[a]
        return None


_default_checker = WinChecker()


def evaluate(board: Board) -> Outcome:
    """Evaluate a board with the default WinChecker."""
    return _default_checker.evaluate(board)


# Quick test
if __name__ == "__main__":
    from .board import board_from_string, format_board

    print("Testing WinChecker...")

    for text in ("XXX.OO...", "XOXOXOOXO", "XO..X...."):
        board = board_from_string(text)
        print(format_board(board))
        print(f"-> {evaluate(board)}\n")

    print("WinChecker test done!")

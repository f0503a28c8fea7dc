"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

import logging
from typing import List, Optional, Tuple

import numpy as np

from .board import NUM_CELLS, Board, Cell, Mark, board_to_grid, empty_cells
from .config import GameConfig
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).

    The search is exhaustive (no pruning, no depth limit) and scores
    terminal positions by depth, so faster wins and slower losses are
    preferred. Moves are tried in cell order and the first of several
    equally good moves is kept, which makes the choice reproducible.
    """

    def __init__(self, player: Mark = Mark.O):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI maximizes for (default: O)
        """
        self.player = player
        self.opponent = player.opposite()
        self.win_checker = WinChecker()

        # How many positions the last search visited (for debugging)
        self.positions_evaluated = 0

    def get_best_move(self, board: Board) -> Optional[int]:
        """
        Get the best move for the current position.

        The caller's board is left untouched; the search runs on a copy.

        Args:
            board: Current board. It is assumed to be our mark's turn.

        Returns:
            Index (0-8) of the best move, or None if no cell is empty.
        """
        best_score = float('-inf')
        best_move = None

        for index, score in self._score_moves(board):
            if score > best_score:
                best_score = score
                best_move = index

        if best_move is None:
            logger.debug("No moves available for %s", self.player.value)
        else:
            logger.debug(
                "AI (%s) evaluated %d positions. Best move: %d (score: %d)",
                self.player.value, self.positions_evaluated, best_move, best_score
            )

        return best_move

    def get_move_scores(self, board: Board) -> np.ndarray:
        """
        Get the minimax score of every move.

        Args:
            board: Current board.

        Returns:
            Array of 9 floats, NaN for occupied cells. Higher is better
            for this AI's mark.
        """
        scores = np.full(NUM_CELLS, np.nan)
        for index, score in self._score_moves(board):
            scores[index] = score
        return scores

    def get_move_suggestion(self, board: Board) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            board: Current board.

        Returns:
            A string describing the suggested move.
        """
        move = self.get_best_move(board)

        if move is None:
            return "No moves available!"

        return f"Place {self.player.value} on cell {move + 1}"

    def _score_moves(self, board: Board) -> List[Tuple[int, int]]:
        """Score each empty cell, in cell order."""
        self.positions_evaluated = 0

        # Scratch copy: marks are placed and removed again while searching
        scratch: List[Cell] = list(board)
        results = []

        for index in empty_cells(scratch):
            scratch[index] = self.player
            score = self._minimax(scratch, depth=0, is_maximizing=False)
            scratch[index] = None
            results.append((index, score))

        return results

    def _minimax(self, board: List[Cell], depth: int, is_maximizing: bool) -> int:
        """
        Minimax algorithm.

        Args:
            board: Board to evaluate. Restored before returning.
            depth: How many moves below the top-level move we are.
            is_maximizing: True if it's our mark's turn.

        Returns:
            The score of the position.
        """
        self.positions_evaluated += 1

        # Check terminal states
        outcome = self.win_checker.evaluate(board)

        if outcome.winner == self.player:
            return GameConfig.WIN_SCORE - depth  # Win (prefer faster wins)
        elif outcome.winner == self.opponent:
            return depth - GameConfig.WIN_SCORE  # Loss (prefer slower losses)
        elif outcome.is_draw:
            return GameConfig.DRAW_SCORE

        if is_maximizing:
            max_score = float('-inf')
            for index in empty_cells(board):
                board[index] = self.player
                score = self._minimax(board, depth + 1, False)
                board[index] = None
                max_score = max(max_score, score)
            return max_score
        else:
            min_score = float('inf')
            for index in empty_cells(board):
                board[index] = self.opponent
                score = self._minimax(board, depth + 1, True)
                board[index] = None
                min_score = min(min_score, score)
            return min_score


def best_move(board: Board, player: Mark = Mark.O) -> Optional[int]:
    """
    Find the best move for `player` on `board`.

    Returns:
        Index (0-8) of the move, or None if the board is full.
    """
    return AIPlayer(player).get_best_move(board)


# Quick test
if __name__ == "__main__":
    from .board import board_from_string, format_board

    print("Testing AIPlayer...")

    ai = AIPlayer(Mark.O)

    # Test 1: AI should block a winning move
    board = board_from_string("XX.......")
    print(format_board(board))
    print("\nAI is O. X is about to win on cell 3!")

    move = ai.get_best_move(board)
    print(f"AI's move: {move}")
    assert move == 2, f"Expected 2, got {move}"
    print("AI correctly blocks the win!")

    # Test 2: AI should take a winning move over blocking
    board = board_from_string("XX.OO.X..")
    print(format_board(board))
    print(board_to_grid(board))
    print(f"\nScores: {ai.get_move_scores(board)}")

    move = ai.get_best_move(board)
    print(f"AI's move: {move}")
    assert move == 5, f"Expected 5, got {move}"
    print("AI correctly takes the win!")

    print("\nAIPlayer test done!")

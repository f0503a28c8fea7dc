"""
TicTacToe
=========
Tic-tac-toe against a friend or against a computer that cannot be beaten.

Handles the board, win/draw detection, the minimax opponent and the
game session (turns, scores, mode).
"""

from .board import Mark, LINES, empty_board, board_from_string, format_board, swap_marks
from .win_checker import WinChecker, Outcome, OutcomeStatus, evaluate
from .ai_player import AIPlayer, best_move
from .move_validator import MoveValidator, ValidationResult
from .game_session import GameSession, GameMode
from .config import GameConfig

__version__ = "1.0.0"

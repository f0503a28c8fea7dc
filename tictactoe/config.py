"""
Game configuration for TicTacToe.
All the settings for turn order, the computer opponent and the console.
"""

import logging


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tune the game!
    """

    # ==================== RULES ====================
    # X always moves first, in every mode
    STARTING_PLAYER = "X"

    # "impossible" = play against the computer, "friend" = two players
    DEFAULT_MODE = "impossible"

    # Mark the human controls against the computer
    DEFAULT_HUMAN_PLAYER = "X"

    # ==================== MINIMAX SCORING ====================
    # Win is scored WIN_SCORE - depth, loss depth - WIN_SCORE
    WIN_SCORE = 10
    DRAW_SCORE = 0

    # ==================== CONSOLE ====================
    # Pause before the computer's move is shown (seconds)
    AI_MOVE_DELAY_S = 0.5

    # ==================== LOGGING ====================
    LOG_LEVEL = logging.INFO
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

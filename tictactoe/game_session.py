"""
Game session for TicTacToe.
Tracks the board, whose turn it is, scores and the game mode.

A GameSession is an immutable value: every operation returns a new
session and leaves the old one as it was.
"""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple

from .ai_player import AIPlayer
from .board import Cell, Mark, empty_board, format_board
from .config import GameConfig
from .move_validator import MoveValidator
from .win_checker import ONGOING, Outcome, evaluate

logger = logging.getLogger(__name__)


class GameMode(Enum):
    """Who is playing."""
    IMPOSSIBLE = "impossible"   # Human vs computer
    FRIEND = "friend"           # Two humans


_validator = MoveValidator()


@dataclass(frozen=True)
class GameSession:
    """
    The complete state of a TicTacToe session.

    Tracks:
    - The board (9 cells, row-major)
    - Current player
    - Wins for each mark, kept across rounds
    - Game mode and which mark the human plays against the computer
    - Whether the round has started, and its outcome
    """

    board: Tuple[Cell, ...] = field(default_factory=empty_board)
    current_player: Mark = Mark(GameConfig.STARTING_PLAYER)
    x_score: int = 0
    o_score: int = 0
    mode: GameMode = GameMode(GameConfig.DEFAULT_MODE)
    human_player: Mark = Mark(GameConfig.DEFAULT_HUMAN_PLAYER)
    is_started: bool = False
    outcome: Outcome = ONGOING

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_over

    @property
    def winner(self) -> Optional[Mark]:
        return self.outcome.winner

    @property
    def computer_player(self) -> Optional[Mark]:
        """The computer's mark, or None when two humans are playing."""
        if self.mode != GameMode.IMPOSSIBLE:
            return None
        return self.human_player.opposite()

    @property
    def is_computer_turn(self) -> bool:
        return (
            self.computer_player is not None
            and self.is_started
            and not self.is_game_over
            and self.current_player == self.computer_player
        )

    def score(self, mark: Mark) -> int:
        """Get how many rounds a mark has won."""
        return self.x_score if mark == Mark.X else self.o_score

    def make_move(self, index: int) -> "GameSession":
        """
        Place the current player's mark.

        Args:
            index: Cell index (0-8).

        Returns:
            The updated session, or this session if the move was rejected.
        """
        result = _validator.validate_move(self, index)
        if not result.is_valid:
            logger.warning("Move rejected: %s", result.error_message)
            return self

        return self._place(index)

    def make_computer_move(self, ai: Optional[AIPlayer] = None) -> "GameSession":
        """
        Let the computer play its best move.

        Args:
            ai: Player to ask for the move. Defaults to a fresh AIPlayer
                for the computer's mark.

        Returns:
            The updated session, or this session if it isn't the
            computer's turn or no move is available.
        """
        if not self.is_computer_turn:
            logger.debug("Not the computer's turn, ignoring")
            return self

        ai = ai or AIPlayer(self.computer_player)
        move = ai.get_best_move(self.board)

        if move is None:
            logger.warning("AI could not find a move!")
            return self

        logger.info("Computer (%s) plays cell %d", self.computer_player.value, move)
        return self._place(move)

    def restart(self) -> "GameSession":
        """Start a new round. Scores are kept, the human goes back to X."""
        return replace(
            self,
            board=empty_board(),
            current_player=Mark(GameConfig.STARTING_PLAYER),
            human_player=Mark(GameConfig.DEFAULT_HUMAN_PLAYER),
            is_started=False,
            outcome=ONGOING,
        )

    def with_mode(self, mode: GameMode) -> "GameSession":
        """Switch game mode. Scores are reset and a new round starts."""
        logger.info("Game mode set to %s", mode.value)
        return replace(self, mode=mode, x_score=0, o_score=0).restart()

    def with_human_player(self, mark: Mark) -> "GameSession":
        """
        Choose the human's mark against the computer.

        Only allowed before the round has started. Picking a mark starts
        the round on a fresh board; X still moves first, so choosing O
        hands the first move to the computer.
        """
        if self.mode != GameMode.IMPOSSIBLE or self.is_game_over or self.is_started:
            logger.warning("Can't change sides now")
            return self

        return replace(
            self,
            board=empty_board(),
            current_player=Mark(GameConfig.STARTING_PLAYER),
            human_player=mark,
            is_started=True,
            outcome=ONGOING,
        )

    def _place(self, index: int) -> "GameSession":
        """Put the current mark on a cell and work out the result."""
        board = list(self.board)
        board[index] = self.current_player
        board = tuple(board)

        outcome = evaluate(board)
        x_score, o_score = self.x_score, self.o_score

        if outcome.winner == Mark.X:
            x_score += 1
        elif outcome.winner == Mark.O:
            o_score += 1

        if outcome.is_over:
            logger.info("Game over: %s", outcome.describe())
            next_player = self.current_player
        else:
            next_player = self.current_player.opposite()

        return replace(
            self,
            board=board,
            current_player=next_player,
            x_score=x_score,
            o_score=o_score,
            is_started=True,
            outcome=outcome,
        )

    def render(self) -> str:
        """Board plus status text for the console."""
        lines = [format_board(self.board), ""]

        if self.is_game_over:
            lines.append(self.outcome.describe())
            if self.outcome.line is not None:
                cells = ", ".join(str(index + 1) for index in self.outcome.line)
                lines.append(f"Winning line: cells {cells}")
        elif self.computer_player is not None and not self.is_started:
            lines.append("Choose your side (x/o) or make the first move")
        else:
            turn = f"Current turn: {self.current_player.value}"
            if self.computer_player is not None:
                turn += " (Computer)" if self.current_player == self.computer_player else " (You)"
            lines.append(turn)

        lines.append(f"Score  X: {self.x_score}  O: {self.o_score}")
        return "\n".join(lines)

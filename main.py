"""
Console front-end for TicTacToe.

This script ties together:
- The game session (turns, scores, mode)
- The win checker
- The minimax AI opponent

Run this script to play TicTacToe against a friend or the computer!
"""

import logging
import time
from typing import Callable, Optional

import numpy as np

from tictactoe.ai_player import AIPlayer
from tictactoe.board import Mark, board_from_string, format_board
from tictactoe.config import GameConfig
from tictactoe.game_session import GameMode, GameSession
from tictactoe.move_validator import MoveValidator

HELP_TEXT = """Commands:
  1-9  place your mark on that cell
  x/o  choose your side against the computer (before the first move)
  m    switch between playing the computer and playing a friend
  r    restart the round (scores are kept)
  h    show this help
  q    quit"""


class TicTacToeConsole:
    """
    Main controller for a console game.

    Game flow:
    1. Human types a cell number
    2. Move is validated and placed
    3. In impossible mode, the computer replies with its best move
    4. Repeat until someone wins or it's a draw, then restart or quit
    """

    def __init__(
        self,
        session: Optional[GameSession] = None,
        delay: float = GameConfig.AI_MOVE_DELAY_S,
        show_hints: bool = False,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        """
        Initialize the console game.

        Args:
            session: Session to start from (default: a new one).
            delay: Seconds to wait before showing the computer's move.
            show_hints: If True, print move scores before each human move.
            input_fn: Reads a line from the player.
            output_fn: Writes a line to the player.
        """
        self.session = session or GameSession()
        self.delay = delay
        self.show_hints = show_hints
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.validator = MoveValidator(cell_base=1)
        self.is_running = False

    def start(self):
        """Start the game."""
        self.output_fn("\n" + "=" * 40)
        self.output_fn("   TicTacToe")
        self.output_fn("=" * 40)
        self._show_mode()
        self.output_fn(HELP_TEXT + "\n")

        self.is_running = True
        self._game_loop()

    def _game_loop(self):
        """Main game loop."""
        self._show_board()

        while self.is_running:
            if self.session.is_computer_turn:
                self._computer_move()
                continue

            if self.session.is_game_over:
                prompt = "Game over - 'r' to play again, 'q' to quit: "
            else:
                if self.show_hints:
                    self._show_hints()
                prompt = f"{self.session.current_player.value} to move: "

            self._handle_command(self.input_fn(prompt).strip().lower())

    def _handle_command(self, command: str):
        """Run one line of player input."""
        if command == "q":
            self.output_fn("\nGame quit by user.")
            self.is_running = False
        elif command == "r":
            self.session = self.session.restart()
            self.output_fn("\nGame reset!")
            self._show_board()
        elif command == "m":
            new_mode = GameMode.FRIEND if self.session.mode == GameMode.IMPOSSIBLE else GameMode.IMPOSSIBLE
            self.session = self.session.with_mode(new_mode)
            self._show_mode()
            self._show_board()
        elif command in ("x", "o"):
            self._choose_side(Mark(command.upper()))
        elif command in ("h", "?"):
            self.output_fn(HELP_TEXT)
        elif command.isdecimal():
            self._human_move(int(command) - 1)
        else:
            self.output_fn(f"Unknown command {command!r}. Type 'h' for help.")

    def _human_move(self, index: int):
        """
        Process a human move.

        Args:
            index: Cell index (0-8).
        """
        result = self.validator.validate_move(self.session, index)
        if not result.is_valid:
            self.output_fn(result.error_message)
            return

        self.session = self.session.make_move(index)
        self._show_board()

    def _computer_move(self):
        """Let the computer play."""
        self.output_fn("\n>>> Computer is thinking...")
        if self.delay > 0:
            time.sleep(self.delay)

        previous = self.session
        self.session = self.session.make_computer_move()

        if self.session is previous:
            self.output_fn("ERROR: Computer could not find a move!")
            self.is_running = False
            return

        self._show_board()

    def _choose_side(self, mark: Mark):
        """Pick the human's mark against the computer."""
        if self.session.mode != GameMode.IMPOSSIBLE:
            self.output_fn("Sides can only be chosen against the computer.")
            return

        updated = self.session.with_human_player(mark)
        if updated is self.session:
            self.output_fn("Pick a side before the first move (restart with 'r').")
            return

        self.session = updated
        self.output_fn(f"\nYou play {mark.value}.")
        self._show_board()

    def _show_board(self):
        self.output_fn("\n" + self.session.render() + "\n")

    def _show_mode(self):
        if self.session.mode == GameMode.IMPOSSIBLE:
            self.output_fn("Mode: you vs the computer (impossible)")
        else:
            self.output_fn("Mode: play against a friend")

    def _show_hints(self):
        """Print the minimax score of every free cell for the side to move."""
        ai = AIPlayer(self.session.current_player)
        scores = ai.get_move_scores(self.session.board).reshape(3, 3)

        self.output_fn("Move scores (higher is better):")
        for row in scores:
            self.output_fn(" ".join("  ." if np.isnan(score) else f"{int(score):+3d}" for score in row))


def suggest_move(board_text: str, player: Mark, output_fn: Callable[[str], None] = print) -> Optional[int]:
    """
    Print the best move for a position.

    Args:
        board_text: 9 character board, e.g. "XX.O.....".
        player: Mark to find the move for.
        output_fn: Writes a line to the player.

    Returns:
        The chosen index, or None if the board is full.
    """
    board = board_from_string(board_text)
    ai = AIPlayer(player)

    move = ai.get_best_move(board)

    output_fn(format_board(board))
    if move is None:
        output_fn("No moves available!")
    else:
        output_fn(f"Best move for {player.value}: cell {move + 1} (index {move})")

    return move


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--friend",
        action="store_true",
        help="Play against a friend instead of the computer"
    )
    parser.add_argument(
        "--play-as",
        choices=["X", "O", "x", "o"],
        default=None,
        help="Mark you play against the computer (X moves first)"
    )
    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Show the computer's move immediately"
    )
    parser.add_argument(
        "--hint",
        action="store_true",
        help="Show minimax scores for each free cell before your move"
    )
    parser.add_argument(
        "--suggest",
        metavar="BOARD",
        help="Print the best move for a 9 character board (e.g. 'XX.O.....') and exit"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else GameConfig.LOG_LEVEL,
        format=GameConfig.LOG_FORMAT,
    )

    if args.friend and args.play_as and args.suggest is None:
        parser.error("--play-as only applies against the computer, not with --friend")

    # One-shot analysis mode
    if args.suggest is not None:
        player = Mark(args.play_as.upper()) if args.play_as else Mark.O
        try:
            suggest_move(args.suggest, player)
        except ValueError as e:
            parser.error(str(e))
        return

    session = GameSession()
    if args.friend:
        session = session.with_mode(GameMode.FRIEND)
    elif args.play_as:
        session = session.with_human_player(Mark(args.play_as.upper()))

    game = TicTacToeConsole(
        session=session,
        delay=0 if args.no_delay else GameConfig.AI_MOVE_DELAY_S,
        show_hints=args.hint,
    )

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()

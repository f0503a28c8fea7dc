"""Tests for the game session and move validation."""

import pytest

from tictactoe.ai_player import AIPlayer
from tictactoe.board import Mark, empty_board
from tictactoe.game_session import GameMode, GameSession
from tictactoe.move_validator import MoveValidator


def _play(session, *indices):
    for index in indices:
        session = session.make_move(index)
    return session


@pytest.fixture
def friend_session():
    return GameSession().with_mode(GameMode.FRIEND)


def test_new_session_defaults():
    session = GameSession()

    assert session.board == empty_board()
    assert session.current_player == Mark.X
    assert session.mode == GameMode.IMPOSSIBLE
    assert session.human_player == Mark.X
    assert session.computer_player == Mark.O
    assert session.x_score == 0 and session.o_score == 0
    assert not session.is_started
    assert not session.is_game_over
    assert not session.is_computer_turn


def test_moves_alternate_in_friend_mode(friend_session):
    session = _play(friend_session, 4, 0)

    assert session.board[4] == Mark.X
    assert session.board[0] == Mark.O
    assert session.current_player == Mark.X
    assert session.is_started
    assert session.computer_player is None


def test_make_move_returns_new_session(friend_session):
    session = friend_session.make_move(4)

    assert friend_session.board == empty_board()
    assert session is not friend_session


def test_win_updates_score(friend_session):
    # X takes the top row
    session = _play(friend_session, 0, 3, 1, 4, 2)

    assert session.is_game_over
    assert session.winner == Mark.X
    assert session.outcome.line == (0, 1, 2)
    assert session.score(Mark.X) == 1
    assert session.score(Mark.O) == 0
    # Turn doesn't pass once the game is over
    assert session.current_player == Mark.X


def test_draw_leaves_scores(friend_session):
    session = _play(friend_session, 0, 1, 2, 4, 3, 5, 7, 6, 8)

    assert session.outcome.is_draw
    assert session.x_score == 0 and session.o_score == 0


def test_rejected_moves_leave_session_unchanged(friend_session):
    session = friend_session.make_move(4)

    assert session.make_move(4) is session
    assert session.make_move(9) is session
    assert session.make_move(-1) is session

    finished = _play(friend_session, 0, 3, 1, 4, 2)
    assert finished.make_move(8) is finished


def test_restart_keeps_scores(friend_session):
    session = _play(friend_session, 0, 3, 1, 4, 2).restart()

    assert session.board == empty_board()
    assert session.current_player == Mark.X
    assert not session.is_game_over
    assert not session.is_started
    assert session.x_score == 1
    assert session.mode == GameMode.FRIEND


def test_changing_mode_resets_scores(friend_session):
    session = _play(friend_session, 0, 3, 1, 4, 2).with_mode(GameMode.IMPOSSIBLE)

    assert session.mode == GameMode.IMPOSSIBLE
    assert session.x_score == 0
    assert session.board == empty_board()


def test_computer_replies_to_human():
    session = GameSession().make_move(0)

    assert session.is_computer_turn
    session = session.make_computer_move()

    # Center is the only reply to a corner that doesn't lose
    assert session.board[4] == Mark.O
    assert session.current_player == Mark.X
    assert not session.is_computer_turn


def test_human_cannot_move_for_computer():
    session = GameSession().make_move(0)

    assert session.make_move(1) is session


def test_computer_waits_for_its_turn():
    session = GameSession()

    assert session.make_computer_move() is session


def test_choosing_o_lets_computer_start():
    session = GameSession().with_human_player(Mark.O)

    assert session.is_started
    assert session.human_player == Mark.O
    assert session.computer_player == Mark.X
    assert session.is_computer_turn

    session = session.make_computer_move()
    assert session.board.count(Mark.X) == 1
    assert session.current_player == Mark.O


def test_side_locked_after_start():
    session = GameSession().make_move(4)

    assert session.with_human_player(Mark.O) is session


def test_side_choice_needs_computer_mode(friend_session):
    assert friend_session.with_human_player(Mark.O) is friend_session


def test_restart_puts_human_back_on_x():
    session = GameSession().with_human_player(Mark.O).restart()

    assert session.human_player == Mark.X
    assert not session.is_started


def test_make_computer_move_uses_given_ai():
    class FirstFreeCell(AIPlayer):
        def get_best_move(self, board):
            return board.index(None)

    session = GameSession().make_move(4).make_computer_move(FirstFreeCell(Mark.O))

    assert session.board[0] == Mark.O


def test_computer_never_loses_to_first_free_cell():
    session = GameSession()
    while not session.is_game_over:
        if session.is_computer_turn:
            session = session.make_computer_move()
        else:
            session = session.make_move(session.board.index(None))

    assert session.winner != Mark.X
    assert session.x_score == 0


def test_render_shows_turn_and_score():
    text = GameSession().make_move(4).render()

    assert " X " in text
    assert "Current turn: O (Computer)" in text
    assert "Score  X: 0  O: 0" in text


def test_render_before_first_move_asks_for_side():
    text = GameSession().render()

    assert "Choose your side (x/o) or make the first move" in text
    assert "Current turn" not in text


def test_render_shows_winning_line(friend_session):
    text = _play(friend_session, 0, 3, 1, 4, 2).render()

    assert "X WINS!" in text
    assert "Winning line: cells 1, 2, 3" in text


def test_render_draw_has_no_winning_line(friend_session):
    text = _play(friend_session, 0, 1, 2, 4, 3, 5, 7, 6, 8).render()

    assert "DRAW" in text
    assert "Winning line" not in text


class TestMoveValidator:
    def test_valid_move(self):
        result = MoveValidator().validate_move(GameSession(), 4)

        assert result.is_valid
        assert result.error_message is None

    def test_occupied_cell(self):
        result = MoveValidator().validate_move(GameSession().make_move(4), 4)

        assert not result.is_valid
        assert "occupied" in result.error_message

    def test_out_of_range(self):
        result = MoveValidator().validate_move(GameSession(), 9)

        assert not result.is_valid
        assert "Invalid cell" in result.error_message

    def test_computer_turn(self):
        result = MoveValidator().validate_move(GameSession().make_move(4), 0)

        assert not result.is_valid
        assert "computer" in result.error_message

    def test_game_over(self):
        session = _play(GameSession().with_mode(GameMode.FRIEND), 0, 3, 1, 4, 2)
        validator = MoveValidator()

        assert not validator.validate_move(session, 8).is_valid
        assert validator.get_valid_moves(session) == []

    def test_valid_moves(self):
        session = GameSession().with_mode(GameMode.FRIEND).make_move(4)

        assert MoveValidator().get_valid_moves(session) == [0, 1, 2, 3, 5, 6, 7, 8]

    def test_messages_use_cell_base(self):
        session = GameSession().with_mode(GameMode.FRIEND).make_move(4)
        validator = MoveValidator(cell_base=1)

        assert validator.validate_move(session, 4).error_message == "Cell 5 is already occupied by X"
        assert validator.validate_move(session, 9).error_message == "Invalid cell 10. Must be 1-9."
        assert MoveValidator().validate_move(session, 9).error_message == "Invalid cell 9. Must be 0-8."

from __future__ import annotations

from baghchal import Game, Piece, Winner
from baghchal.cli import main, play


def _reader(*answers):
    answers = iter(answers)
    return lambda prompt: next(answers)


def test_two_players_capture_then_quit(capsys):
    game = Game()
    result = play(game, None, _reader("1", "0", "2", "q"))
    assert result is Winner.NONE
    assert game.board.captured_goats == 1
    assert game.board.cells[2] is Piece.TIGER
    out = capsys.readouterr().out
    assert "Game abandoned." in out
    assert "Captured goats: 1" in out


def test_invalid_input_reprompts(capsys):
    game = Game()
    play(game, None, _reader("abc", "30", "0", "12", "quit"))
    out = capsys.readouterr().out
    assert "Please enter a valid position" in out
    assert "Invalid move! Try again." in out
    assert game.board.cells[12] is Piece.GOAT


def test_undo_returns_turn():
    game = Game()
    play(game, None, _reader("12", "u", "q"))
    assert game.board.cells[12] is Piece.EMPTY
    assert game.board.goats_in_hand == 20
    assert not game.can_undo()


def test_end_of_input_quits():
    game = Game()

    def read(prompt):
        raise EOFError

    assert play(game, None, read) is Winner.NONE


def test_computer_tiger_replies():
    game = Game(time_limit_s=1.0)
    play(game, Piece.TIGER, _reader("12", "q"))
    assert len(game.board.history) == 2
    assert game.board.count(Piece.TIGER) == 4


def test_main_rejects_bad_time_limit():
    assert main(["--ai", "none", "--time-limit", "20"]) == 2

from __future__ import annotations

from baghchal import Board, Evaluator, Piece


def test_start_position_is_neutral():
    assert Evaluator.evaluate(Board()) == 0


def test_strategic_goat_penalty():
    board = Board()
    board.cells[12] = Piece.GOAT
    board.cells[2] = Piece.GOAT
    assert Evaluator.evaluate(board) == -10


def test_capture_threat_bonus():
    board = Board()
    board.cells[1] = Piece.GOAT
    assert Evaluator.evaluate(board) == 20


def test_captured_goats_count():
    board = Board()
    board.captured_goats = 2
    assert Evaluator.evaluate(board) == 200


def test_trapped_tiger_penalty():
    board = Board()
    for pos in (1, 2, 5, 6, 10, 12):
        board.cells[pos] = Piece.GOAT
    board.goats_in_hand = 14
    # Tiger on 0 is boxed in; goats on 6 and 12 hold strategic cells
    assert Evaluator.evaluate(board) == -50 - 20


def test_terminal_scores():
    board = Board()
    board.captured_goats = 5
    assert Evaluator.evaluate(board) == Evaluator.WIN_SCORE

    board = Board()
    for pos in range(25):
        board.cells[pos] = Piece.EMPTY
    for pos in (0, 1, 2, 3):
        board.cells[pos] = Piece.TIGER
    for pos in range(4, 15):
        board.cells[pos] = Piece.GOAT
    assert Evaluator.evaluate(board) == -Evaluator.WIN_SCORE


def test_evaluate_has_no_side_effects():
    board = Board()
    board.cells[1] = Piece.GOAT
    before = board.copy()
    Evaluator.evaluate(board)
    assert board == before

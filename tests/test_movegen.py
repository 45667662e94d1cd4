from __future__ import annotations

from baghchal import Board, Move, Piece
from baghchal.movegen import all_legal_moves, jump_targets, legal_moves_for


def test_corner_tiger_moves():
    board = Board()
    assert sorted(legal_moves_for(board, Piece.TIGER, 0)) == [1, 5, 6]
    assert sorted(legal_moves_for(board, Piece.TIGER, 24)) == [18, 19, 23]


def test_requires_matching_piece():
    board = Board()
    assert legal_moves_for(board, Piece.GOAT, 0) == []
    assert legal_moves_for(board, Piece.TIGER, 12) == []
    assert legal_moves_for(board, Piece.TIGER, 25) == []
    assert legal_moves_for(board, Piece.EMPTY, 12) == []


def test_no_diagonals_from_ineligible_intersection():
    board = Board()
    board.cells[0] = Piece.EMPTY
    board.cells[7] = Piece.TIGER
    assert sorted(legal_moves_for(board, Piece.TIGER, 7)) == [2, 6, 8, 12]

    board.cells[7] = Piece.GOAT
    moves = legal_moves_for(board, Piece.GOAT, 7)
    assert not {1, 3, 11, 13} & set(moves)


def test_tiger_jumps_from_ineligible_intersection_stay_orthogonal():
    board = Board()
    board.cells[0] = Piece.EMPTY
    board.cells[7] = Piece.TIGER
    for pos in (2, 6, 8, 12):
        board.cells[pos] = Piece.GOAT
    assert sorted(legal_moves_for(board, Piece.TIGER, 7)) == [5, 9, 17]


def test_diagonal_jump():
    board = Board()
    board.cells[6] = Piece.GOAT
    assert 12 in legal_moves_for(board, Piece.TIGER, 0)
    board.cells[12] = Piece.GOAT
    assert 12 not in legal_moves_for(board, Piece.TIGER, 0)


def test_no_wrap_around_edges():
    board = Board()
    board.cells[4] = Piece.EMPTY
    board.cells[9] = Piece.TIGER
    moves = legal_moves_for(board, Piece.TIGER, 9)
    assert 10 not in moves
    assert sorted(moves) == [4, 8, 14]


def test_goats_never_jump():
    board = Board()
    board.cells[12] = Piece.GOAT
    board.cells[13] = Piece.GOAT
    assert 14 not in legal_moves_for(board, Piece.GOAT, 12)


def test_jump_targets():
    board = Board()
    board.cells[1] = Piece.GOAT
    board.cells[5] = Piece.GOAT
    assert sorted(jump_targets(board, 0)) == [2, 10]


def test_aggregate_tiger_moves():
    board = Board()
    moves = all_legal_moves(board, Piece.TIGER)
    assert len(moves) == 12
    assert Move(0, 6) in moves
    assert all(not move.is_placement for move in moves)


def test_goats_only_place_while_in_hand():
    board = Board()
    board.cells[12] = Piece.GOAT
    board.goats_in_hand = 19
    moves = all_legal_moves(board, Piece.GOAT)
    assert len(moves) == 20
    assert all(move.is_placement for move in moves)
    assert Move(12, 12) not in moves


def test_goats_move_once_hand_is_empty():
    board = Board()
    board.cells[12] = Piece.GOAT
    board.goats_in_hand = 0
    moves = all_legal_moves(board, Piece.GOAT)
    assert {(m.source, m.target) for m in moves} == {(12, t) for t in (6, 7, 8, 11, 13, 16, 17, 18)}


def test_queries_are_idempotent():
    board = Board()
    board.cells[6] = Piece.GOAT
    board.goats_in_hand = 19
    before = list(board.cells)
    assert all_legal_moves(board, Piece.TIGER) == all_legal_moves(board, Piece.TIGER)
    assert all_legal_moves(board, Piece.GOAT) == all_legal_moves(board, Piece.GOAT)
    assert board.cells == before


def test_move_str():
    assert str(Move(12, 12)) == "12"
    assert str(Move(0, 2)) == "0-2"
    assert Move(0, 2).is_jump
    assert not Move(0, 1).is_jump

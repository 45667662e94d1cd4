"""Win detection, game phases and the unchecked make/unmake pair.

``make_move`` and ``unmake_move`` only touch cells and counters. They do
no validation and leave ``Board.history`` and ``Board.selected`` alone, so
the search can apply and revert thousands of candidates cheaply while
``Game`` wraps the same pair with legality checks and history bookkeeping.
"""

from __future__ import annotations

from enum import Enum

from .board import TOTAL_GOATS, Board, HistoryEntry, MoveGoat, MoveTiger, Piece, PlaceGoat
from .movegen import Move, legal_moves_for
from .topology import captured_position

CAPTURES_TO_WIN = 5


class Winner(Enum):
    TIGERS = "tigers"
    GOATS = "goats"
    NONE = "none"


class Phase(Enum):
    SETUP = "setup"
    PLACEMENT = "placement"
    MOVEMENT = "movement"
    TERMINAL = "terminal"


def tigers_can_move(board: Board) -> bool:
    return any(legal_moves_for(board, Piece.TIGER, pos) for pos in board.positions(Piece.TIGER))


def winner(board: Board) -> Winner:
    if board.captured_goats >= CAPTURES_TO_WIN:
        return Winner.TIGERS
    if not tigers_can_move(board):
        return Winner.GOATS
    return Winner.NONE


def phase(board: Board) -> Phase:
    if winner(board) is not Winner.NONE:
        return Phase.TERMINAL
    if board.goats_in_hand == TOTAL_GOATS:
        return Phase.SETUP
    if board.goats_in_hand > 0:
        return Phase.PLACEMENT
    return Phase.MOVEMENT


def make_move(board: Board, side: Piece, move: Move) -> HistoryEntry:
    cells = board.cells
    if side is Piece.GOAT:
        if move.is_placement:
            cells[move.target] = Piece.GOAT
            board.goats_in_hand -= 1
            return PlaceGoat(move.target)
        cells[move.source] = Piece.EMPTY
        cells[move.target] = Piece.GOAT
        return MoveGoat(move.source, move.target)

    captured = captured_position(move.source, move.target)
    if captured is not None:
        cells[captured] = Piece.EMPTY
        board.captured_goats += 1
    cells[move.source] = Piece.EMPTY
    cells[move.target] = Piece.TIGER
    return MoveTiger(move.source, move.target, captured)


def unmake_move(board: Board, entry: HistoryEntry) -> None:
    cells = board.cells
    if isinstance(entry, PlaceGoat):
        cells[entry.position] = Piece.EMPTY
        board.goats_in_hand += 1
    elif isinstance(entry, MoveGoat):
        cells[entry.target] = Piece.EMPTY
        cells[entry.source] = Piece.GOAT
    else:
        cells[entry.target] = Piece.EMPTY
        cells[entry.source] = Piece.TIGER
        if entry.captured is not None:
            cells[entry.captured] = Piece.GOAT
            board.captured_goats -= 1

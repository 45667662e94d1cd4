from __future__ import annotations

from typing import Dict, List, Optional

import logging

from .ai import DEFAULT_TIME_LIMIT_S, MAX_TIME_LIMIT_S, MIN_TIME_LIMIT_S, AIPlayer
from .board import Board, HistoryEntry, MoveGoat, Piece, PlaceGoat
from .movegen import Move, all_legal_moves, legal_moves_for
from .rules import Phase, Winner, make_move, phase, unmake_move, winner
from .topology import in_range

logger = logging.getLogger(__name__)


class Game:
    """Owns the board and exposes the rule-checked operations of a game.

    Every mutator returns a bool; a False result means the request broke a
    rule and the board was left untouched. Whose turn it is belongs to the
    caller: the game only checks that the requested move is legal for the
    piece that makes it.
    """

    def __init__(self, time_limit_s: float = DEFAULT_TIME_LIMIT_S, ai: Optional[AIPlayer] = None) -> None:
        self.board = Board()
        self.ai = ai or AIPlayer()
        self.time_limit_s = DEFAULT_TIME_LIMIT_S
        self.set_time_limit(time_limit_s)

    def reset(self) -> None:
        self.board = Board()

    # Queries

    def legal_moves_for(self, kind: Piece, pos: int) -> List[int]:
        return legal_moves_for(self.board, kind, pos)

    def all_legal_moves(self, side: Piece) -> List[Move]:
        return all_legal_moves(self.board, side)

    def get_winner(self) -> Winner:
        return winner(self.board)

    def is_game_over(self) -> bool:
        return self.get_winner() is not Winner.NONE

    def phase(self) -> Phase:
        return phase(self.board)

    def can_undo(self) -> bool:
        return bool(self.board.history)

    def last_move(self) -> Optional[HistoryEntry]:
        return self.board.history[-1] if self.board.history else None

    # Moves

    def place_goat(self, pos: int) -> bool:
        board = self.board
        if not in_range(pos) or board.cells[pos] is not Piece.EMPTY or board.goats_in_hand == 0:
            logger.debug("rejected goat placement at %r", pos)
            return False
        self._record(make_move(board, Piece.GOAT, Move(pos, pos)))
        return True

    def move_goat(self, source: int, target: int) -> bool:
        return self._move_piece(Piece.GOAT, source, target)

    def move_tiger(self, source: int, target: int) -> bool:
        return self._move_piece(Piece.TIGER, source, target)

    def undo(self) -> bool:
        board = self.board
        if not board.history:
            return False
        unmake_move(board, board.history.pop())
        board.selected = None
        return True

    def _move_piece(self, kind: Piece, source: int, target: int) -> bool:
        board = self.board
        if (
            not in_range(source)
            or not in_range(target)
            or board.cells[source] is not kind
            or board.cells[target] is not Piece.EMPTY
            or target not in legal_moves_for(board, kind, source)
        ):
            logger.debug("rejected %s move %r -> %r", kind.label, source, target)
            return False
        self._record(make_move(board, kind, Move(source, target)))
        return True

    def _record(self, entry: HistoryEntry) -> None:
        self.board.history.append(entry)

    # Computer opponent

    def set_time_limit(self, seconds: float) -> bool:
        try:
            seconds = float(seconds)
        except (TypeError, ValueError):
            return False
        if not MIN_TIME_LIMIT_S <= seconds <= MAX_TIME_LIMIT_S:
            return False
        self.time_limit_s = seconds
        return True

    def ai_move_tiger(self) -> bool:
        move = self.ai.choose_move(self.board, Piece.TIGER, time_limit_s=self.time_limit_s)
        if move is None:
            return False
        return self.move_tiger(move.source, move.target)

    def ai_move_goat(self) -> bool:
        move = self.ai.choose_move(self.board, Piece.GOAT, time_limit_s=self.time_limit_s)
        if move is None:
            return False
        if move.is_placement:
            return self.place_goat(move.target)
        return self.move_goat(move.source, move.target)

    # Front-end hints

    def select_position(self, pos: int) -> bool:
        if not in_range(pos):
            return False
        self.board.selected = pos
        return True

    def clear_selection(self) -> None:
        self.board.selected = None

    def snapshot(self) -> Dict[str, object]:
        board = self.board
        result = self.get_winner()
        last = self.last_move()
        return {
            "cells": [cell.value for cell in board.cells],
            "goats_in_hand": board.goats_in_hand,
            "captured_goats": board.captured_goats,
            "selected": board.selected,
            "phase": phase(board).value,
            "winner": result.value,
            "game_over": result is not Winner.NONE,
            "can_undo": self.can_undo(),
            "last_move": _describe(last) if last is not None else None,
            "tiger_moves": [str(move) for move in self.all_legal_moves(Piece.TIGER)],
            "goat_moves": [str(move) for move in self.all_legal_moves(Piece.GOAT)],
            "time_limit": self.time_limit_s,
        }


def _describe(entry: HistoryEntry) -> Dict[str, object]:
    if isinstance(entry, PlaceGoat):
        return {"piece": "goat", "source": entry.position, "target": entry.position, "captured": None}
    if isinstance(entry, MoveGoat):
        return {"piece": "goat", "source": entry.source, "target": entry.target, "captured": None}
    return {"piece": "tiger", "source": entry.source, "target": entry.target, "captured": entry.captured}

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import logging
import time

from .board import Board, Piece
from .evaluator import Evaluator
from .movegen import Move, all_legal_moves
from .rules import Winner, make_move, unmake_move, winner

logger = logging.getLogger(__name__)

DEFAULT_TIME_LIMIT_S = 2.0
MIN_TIME_LIMIT_S = 1.0
MAX_TIME_LIMIT_S = 10.0

_INF = 10**9


@dataclass
class SearchResult:
    best_move: Optional[Move]
    score: int
    nodes: int
    depth: int = 0


class AIPlayer:
    """Iterative-deepening minimax with alpha-beta pruning and a time budget.

    The tigers maximize ``Evaluator.evaluate`` and the goats minimize it.
    The board handed to ``choose_move`` is searched in place and is back in
    its original state when the call returns, timeout included.
    """

    def __init__(self, max_depth: Optional[int] = None) -> None:
        self.max_depth = max_depth
        self.last_result: Optional[SearchResult] = None
        self._deadline_ts: Optional[float] = None
        self._nodes = 0
        self._depth_cutoff = False

    def choose_move(
        self,
        board: Board,
        side: Piece,
        time_limit_s: Optional[float] = DEFAULT_TIME_LIMIT_S,
    ) -> Optional[Move]:
        """Return the best move for ``side`` or None when it has no legal move.

        Depth 1, 2, 3, ... are searched until the budget runs out; a depth
        interrupted by the clock is thrown away and the move of the last
        completed depth is returned. ``time_limit_s=None`` disables the
        clock, in which case ``max_depth`` bounds the search.
        """
        moves = all_legal_moves(board, side)
        if not moves:
            self.last_result = None
            return None
        if time_limit_s is None and self.max_depth is None:
            time_limit_s = DEFAULT_TIME_LIMIT_S

        started = time.monotonic()
        self._deadline_ts = (started + time_limit_s) if time_limit_s is not None else None

        # Quick fallback in case no depth finishes before the deadline
        fallback_move = self._choose_quick_fallback_move(moves)

        completed: Optional[SearchResult] = None
        nodes_total = 0
        depth = 1
        try:
            while self.max_depth is None or depth <= self.max_depth:
                self._nodes = 0
                self._depth_cutoff = False
                try:
                    result = self._alphabeta_root(board, side, depth)
                except _SearchTimeout:
                    nodes_total += self._nodes
                    logger.debug("depth %d abandoned after %d nodes", depth, self._nodes)
                    break
                nodes_total += result.nodes
                completed = result
                logger.debug(
                    "depth %d: %s scores %d (%d nodes)", depth, result.best_move, result.score, result.nodes
                )
                if not self._depth_cutoff:
                    # Every line ended in a decided game or a blocked side; deeper passes add nothing.
                    break
                depth += 1
        finally:
            self._deadline_ts = None

        if completed is None or completed.best_move is None:
            completed = SearchResult(best_move=fallback_move, score=Evaluator.evaluate(board), nodes=0)
        completed.nodes = nodes_total
        self.last_result = completed

        logger.info(
            "%s plays %s (depth %d, score %d, %d nodes, %.2fs)",
            side.label,
            completed.best_move,
            completed.depth,
            completed.score,
            nodes_total,
            time.monotonic() - started,
        )
        return completed.best_move

    def _alphabeta_root(self, board: Board, side: Piece, depth: int) -> SearchResult:
        maximizing = side is Piece.TIGER
        best_move: Optional[Move] = None
        best_score = -_INF if maximizing else _INF
        alpha, beta = -_INF, _INF

        for move in self._ordered(all_legal_moves(board, side), side):
            self._guard_time()
            entry = make_move(board, side, move)
            try:
                score = self._alphabeta(board, _opponent(side), depth - 1, alpha, beta)
            finally:
                unmake_move(board, entry)
            # Strict comparison keeps the first-found move on ties
            if maximizing and score > best_score:
                best_score, best_move = score, move
                alpha = max(alpha, score)
            elif not maximizing and score < best_score:
                best_score, best_move = score, move
                beta = min(beta, score)

        return SearchResult(best_move=best_move, score=best_score, nodes=self._nodes, depth=depth)

    def _alphabeta(self, board: Board, side: Piece, depth: int, alpha: int, beta: int) -> int:
        self._guard_time()
        self._nodes += 1

        if winner(board) is not Winner.NONE:
            return Evaluator.evaluate(board)
        if depth == 0:
            self._depth_cutoff = True
            return Evaluator.evaluate(board)

        moves = all_legal_moves(board, side)
        if not moves:
            return Evaluator.evaluate(board)

        if side is Piece.TIGER:
            value = -_INF
            for move in self._ordered(moves, side):
                self._guard_time()
                entry = make_move(board, side, move)
                try:
                    score = self._alphabeta(board, Piece.GOAT, depth - 1, alpha, beta)
                finally:
                    unmake_move(board, entry)
                value = max(value, score)
                alpha = max(alpha, value)
                if alpha >= beta:
                    break
            return value
        else:
            value = _INF
            for move in moves:
                self._guard_time()
                entry = make_move(board, side, move)
                try:
                    score = self._alphabeta(board, Piece.TIGER, depth - 1, alpha, beta)
                finally:
                    unmake_move(board, entry)
                value = min(value, score)
                beta = min(beta, value)
                if alpha >= beta:
                    break
            return value

    @staticmethod
    def _ordered(moves: List[Move], side: Piece) -> List[Move]:
        # Captures first for the tigers; sorted() is stable for the rest
        if side is Piece.TIGER:
            return sorted(moves, key=lambda m: not m.is_jump)
        return moves

    def _guard_time(self) -> None:
        if self._deadline_ts is None:
            return
        if time.monotonic() >= self._deadline_ts:
            raise _SearchTimeout()

    @staticmethod
    def _choose_quick_fallback_move(moves: List[Move]) -> Move:
        """Pick a legal move without searching: any capture, else the first move."""
        for move in moves:
            if move.is_jump:
                return move
        return moves[0]


def _opponent(side: Piece) -> Piece:
    return Piece.GOAT if side is Piece.TIGER else Piece.TIGER


class _SearchTimeout(Exception):
    pass

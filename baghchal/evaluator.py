from __future__ import annotations

from .board import Board, Piece
from .movegen import jump_targets, legal_moves_for
from .rules import Winner, winner


class Evaluator:
    """Static evaluation for Bagh-Chal positions.

    Positive scores favor the tigers, negative scores favor the goats.
    """

    WIN_SCORE = 10000

    CAPTURE_BONUS = 100
    TRAPPED_TIGER_PENALTY = 50
    STRATEGIC_GOAT_PENALTY = 10
    JUMP_BONUS = 20

    # Centre, its diagonal neighbours and its orthogonal neighbours.
    STRATEGIC_CELLS = frozenset({6, 7, 8, 11, 12, 13, 16, 17, 18})

    @classmethod
    def evaluate(cls, board: Board) -> int:
        result = winner(board)
        if result is Winner.TIGERS:
            return cls.WIN_SCORE
        if result is Winner.GOATS:
            return -cls.WIN_SCORE

        score = cls.CAPTURE_BONUS * board.captured_goats

        for pos in board.positions(Piece.TIGER):
            if not legal_moves_for(board, Piece.TIGER, pos):
                score -= cls.TRAPPED_TIGER_PENALTY
            score += cls.JUMP_BONUS * len(jump_targets(board, pos))

        for pos in cls.STRATEGIC_CELLS:
            if board.cells[pos] is Piece.GOAT:
                score -= cls.STRATEGIC_GOAT_PENALTY

        return score

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .board import Board, Piece
from .topology import (
    captured_position,
    directions_from,
    in_range,
    index_of,
    is_diagonal_eligible,
    row_col,
)


@dataclass(frozen=True)
class Move:
    """A placement (source == target) or a step/jump from source to target."""

    source: int
    target: int

    @property
    def is_placement(self) -> bool:
        return self.source == self.target

    @property
    def is_jump(self) -> bool:
        return captured_position(self.source, self.target) is not None

    def __str__(self) -> str:
        if self.is_placement:
            return str(self.target)
        return f"{self.source}-{self.target}"


def legal_moves_for(board: Board, kind: Piece, pos: int) -> List[int]:
    """Destinations reachable by the ``kind`` piece standing on ``pos``.

    Every legality decision in the package goes through this function:
    aggregate enumeration, move validation and the evaluator.
    """
    if kind is Piece.EMPTY or not in_range(pos) or board.cells[pos] is not kind:
        return []

    cells = board.cells
    row, col = row_col(pos)
    destinations: List[int] = []
    for dr, dc in directions_from(pos):
        diagonal = dr != 0 and dc != 0
        step = index_of(row + dr, col + dc)
        if step is None or (diagonal and not is_diagonal_eligible(step)):
            continue
        if cells[step] is Piece.EMPTY:
            destinations.append(step)
        elif kind is Piece.TIGER and cells[step] is Piece.GOAT:
            landing = index_of(row + 2 * dr, col + 2 * dc)
            if landing is None or (diagonal and not is_diagonal_eligible(landing)):
                continue
            if cells[landing] is Piece.EMPTY:
                destinations.append(landing)
    return destinations


def jump_targets(board: Board, pos: int) -> List[int]:
    return [
        target
        for target in legal_moves_for(board, Piece.TIGER, pos)
        if captured_position(pos, target) is not None
    ]


def tiger_moves(board: Board) -> List[Move]:
    return [
        Move(source, target)
        for source in board.positions(Piece.TIGER)
        for target in legal_moves_for(board, Piece.TIGER, source)
    ]


def goat_moves(board: Board) -> List[Move]:
    # Placement and movement are never offered together.
    if board.goats_in_hand > 0:
        return [Move(pos, pos) for pos in board.positions(Piece.EMPTY)]
    return [
        Move(source, target)
        for source in board.positions(Piece.GOAT)
        for target in legal_moves_for(board, Piece.GOAT, source)
    ]


def all_legal_moves(board: Board, side: Piece) -> List[Move]:
    if side is Piece.TIGER:
        return tiger_moves(board)
    if side is Piece.GOAT:
        return goat_moves(board)
    return []

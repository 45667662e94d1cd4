from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

from .topology import NUM_CELLS, SIZE

TIGER_START_POSITIONS = (0, 4, 20, 24)
TOTAL_GOATS = 20


class Piece(Enum):
    TIGER = "T"
    GOAT = "G"
    EMPTY = "."

    @property
    def label(self) -> str:
        return {Piece.TIGER: "tiger", Piece.GOAT: "goat", Piece.EMPTY: "empty"}[self]


@dataclass(frozen=True)
class PlaceGoat:
    position: int


@dataclass(frozen=True)
class MoveGoat:
    source: int
    target: int


@dataclass(frozen=True)
class MoveTiger:
    source: int
    target: int
    captured: Optional[int] = None


HistoryEntry = Union[PlaceGoat, MoveGoat, MoveTiger]


def starting_cells() -> List[Piece]:
    cells = [Piece.EMPTY] * NUM_CELLS
    for pos in TIGER_START_POSITIONS:
        cells[pos] = Piece.TIGER
    return cells


@dataclass
class Board:
    """Occupancy of the 25 intersections plus the goat counters.

    ``history`` holds the entries of accepted moves, oldest first, and
    ``selected`` is a front-end hint with no effect on the rules.
    """

    cells: List[Piece] = field(default_factory=starting_cells)
    goats_in_hand: int = TOTAL_GOATS
    captured_goats: int = 0
    selected: Optional[int] = None
    history: List[HistoryEntry] = field(default_factory=list)

    def count(self, piece: Piece) -> int:
        return sum(1 for cell in self.cells if cell is piece)

    def positions(self, piece: Piece) -> List[int]:
        return [pos for pos, cell in enumerate(self.cells) if cell is piece]

    def copy(self) -> "Board":
        return Board(
            cells=list(self.cells),
            goats_in_hand=self.goats_in_hand,
            captured_goats=self.captured_goats,
            selected=self.selected,
            history=list(self.history),
        )

    def __str__(self) -> str:
        symbols = {Piece.TIGER: "T", Piece.GOAT: "G", Piece.EMPTY: "·"}
        rows = []
        for row in range(SIZE):
            cells = self.cells[row * SIZE:(row + 1) * SIZE]
            rows.append("   " + " ".join(symbols[cell] for cell in cells))
        return "\n".join(rows)

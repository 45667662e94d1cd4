from __future__ import annotations

from typing import Optional, Tuple

SIZE = 5
NUM_CELLS = SIZE * SIZE

# Intersections that carry diagonal lines (row + col even).
DIAGONAL_POSITIONS = frozenset({
    0, 2, 4,
    6, 8,
    10, 12, 14,
    16, 18,
    20, 22, 24,
})

ORTHOGONAL_DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
DIAGONAL_DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def in_range(pos: object) -> bool:
    return isinstance(pos, int) and not isinstance(pos, bool) and 0 <= pos < NUM_CELLS


def is_diagonal_eligible(pos: int) -> bool:
    return pos in DIAGONAL_POSITIONS


def row_col(pos: int) -> Tuple[int, int]:
    return divmod(pos, SIZE)


def index_of(row: int, col: int) -> Optional[int]:
    if 0 <= row < SIZE and 0 <= col < SIZE:
        return row * SIZE + col
    return None


def directions_from(pos: int) -> Tuple[Tuple[int, int], ...]:
    if is_diagonal_eligible(pos):
        return ORTHOGONAL_DIRECTIONS + DIAGONAL_DIRECTIONS
    return ORTHOGONAL_DIRECTIONS


def captured_position(source: int, target: int) -> Optional[int]:
    """Return the intersection jumped over by a source -> target move.

    Only straight lines of length two (orthogonal or diagonal) count as
    jumps; anything else yields None.
    """
    r0, c0 = row_col(source)
    r1, c1 = row_col(target)
    dr, dc = r1 - r0, c1 - c0
    if max(abs(dr), abs(dc)) != 2:
        return None
    if dr not in (-2, 0, 2) or dc not in (-2, 0, 2):
        return None
    return index_of(r0 + dr // 2, c0 + dc // 2)

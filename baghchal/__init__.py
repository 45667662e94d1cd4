"""Bagh-Chal engine package providing game state, evaluation, and AI search.

Modules:
- topology: the 5x5 grid and its diagonal-eligible intersections
- board: piece occupancy, goat counters and move history
- movegen: legal destinations and per-side move lists
- rules: win detection, phases and the make/unmake pair
- game: rule-checked game operations for front ends
- evaluator: Heuristic evaluation function for positions
- ai: Iterative-deepening minimax with alpha-beta pruning
"""

from .board import Board, Piece
from .movegen import Move
from .rules import Phase, Winner
from .game import Game
from .ai import AIPlayer
from .evaluator import Evaluator

__all__ = ["Board", "Piece", "Move", "Phase", "Winner", "Game", "AIPlayer", "Evaluator"]

from __future__ import annotations

import argparse
import logging
from typing import Callable, List, Optional

from .ai import DEFAULT_TIME_LIMIT_S
from .board import Piece
from .game import Game
from .rules import Winner

logger = logging.getLogger(__name__)

POSITION_GUIDE = """\
Board positions are numbered 0-24, left to right, top to bottom:
  0  1  2  3  4
  5  6  7  8  9
 10 11 12 13 14
 15 16 17 18 19
 20 21 22 23 24
T = Tiger, G = Goat, · = Empty
Enter 'u' to undo the last move, 'q' or 'quit' to exit."""

QUIT = "quit"
UNDO = "undo"


class _Quit(Exception):
    pass


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Bagh-Chal in the terminal.")
    parser.add_argument(
        "--ai",
        choices=["tiger", "goat", "none"],
        default="tiger",
        help="Side played by the computer (default: tiger)",
    )
    parser.add_argument(
        "--time-limit",
        type=float,
        default=DEFAULT_TIME_LIMIT_S,
        help="Seconds the computer may think per move (1-10)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log search details")
    return parser.parse_args(argv)


def read_command(prompt: str, read: Callable[[str], str]) -> object:
    """Read a position 0-24, 'u' or 'q'; re-prompt on anything else."""
    while True:
        try:
            text = read(prompt).strip().lower()
        except EOFError:
            raise _Quit()
        if text in ("q", "quit"):
            raise _Quit()
        if text in ("u", "undo"):
            return UNDO
        if text.isdigit() and int(text) < 25:
            return int(text)
        print("Please enter a valid position (0-24), 'u' to undo or 'q' to quit")


def human_turn(game: Game, side: Piece, read: Callable[[str], str]) -> Optional[str]:
    """Play one human move for ``side``; return UNDO if the player asked for it."""
    while True:
        if side is Piece.GOAT and game.board.goats_in_hand > 0:
            pos = read_command("Enter position to place goat (0-24): ", read)
            if pos == UNDO:
                return UNDO
            if game.place_goat(pos):
                return None
            print("Invalid move! Try again.")
            continue

        source = read_command(f"Enter {side.label} position to move from (0-24): ", read)
        if source == UNDO:
            return UNDO
        game.select_position(source)
        target = read_command("Enter position to move to (0-24): ", read)
        game.clear_selection()
        if target == UNDO:
            return UNDO
        moved = game.move_tiger(source, target) if side is Piece.TIGER else game.move_goat(source, target)
        if moved:
            return None
        print(f"Invalid {side.label} move! Try again.")


def play(game: Game, ai_side: Optional[Piece], read: Callable[[str], str] = input) -> Winner:
    """Alternate turns, goats first, until the game ends or the player quits."""
    print(POSITION_GUIDE)
    turn = Piece.GOAT
    try:
        while not game.is_game_over():
            print(f"\n{game.board}\n")
            print(f"Goats in hand: {game.board.goats_in_hand}  Captured goats: {game.board.captured_goats}")
            print(f"{turn.label.capitalize()}'s turn")

            if turn is ai_side:
                moved = game.ai_move_tiger() if turn is Piece.TIGER else game.ai_move_goat()
                if not moved:
                    print(f"The {turn.label}s have no legal move.")
                    break
            elif human_turn(game, turn, read) == UNDO:
                turn = _undo_turns(game, turn, ai_side)
                continue
            turn = Piece.TIGER if turn is Piece.GOAT else Piece.GOAT
    except (_Quit, KeyboardInterrupt):
        print("\nGame abandoned.")

    print("\nFinal board:")
    print(game.board)
    print(f"Captured goats: {game.board.captured_goats}")
    result = game.get_winner()
    if result is not Winner.NONE:
        print(f"{result.value.capitalize()} win!")
    return result


def _undo_turns(game: Game, turn: Piece, ai_side: Optional[Piece]) -> Piece:
    # Against the computer, take back its reply together with the player's move
    steps = 2 if ai_side is not None else 1
    for _ in range(steps):
        if not game.undo():
            break
        turn = Piece.TIGER if turn is Piece.GOAT else Piece.GOAT
    return turn


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s")

    game = Game()
    if not game.set_time_limit(args.time_limit):
        logger.error("Time limit must be between 1 and 10 seconds, got %s", args.time_limit)
        return 2
    ai_side = {"tiger": Piece.TIGER, "goat": Piece.GOAT, "none": None}[args.ai]
    play(game, ai_side)
    return 0

#!/usr/bin/env python3
"""
Terminal-based draughts game client.

Two players share the keyboard, entering moves as square indices (0-63).
"""

from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from typing import Callable

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from checkers.core.board import Board
from checkers.core.config import RulesConfig

InputFn = Callable[[str], str]


def print_board(board: Board, show_bitboards: bool = True) -> None:
    """Print the board and, optionally, the raw bitboards."""
    print()
    print(board.format_board())
    print("  b/w=man  B/W=king")

    if show_bitboards:
        print("\nBitboards:")
        for name, (binary, hexadecimal) in board.bitboard_strings().items():
            print(f"  {name:<6} {binary}")
            print(f"  {'':<6} 0x{hexadecimal.upper()}")
    print()


def read_position(prompt: str, input_fn: InputFn = input) -> int:
    """Prompt until the user enters a square index between 0 and 63."""
    while True:
        raw = input_fn(prompt).strip()
        try:
            position = int(raw)
        except ValueError:
            print("Invalid input. Please enter a valid integer.")
            continue
        if 0 <= position <= 63:
            return position
        print("Invalid position. Please enter a number between 0 and 63.")


def read_continue(input_fn: InputFn = input) -> bool:
    """Prompt until the user answers y or n."""
    while True:
        answer = input_fn("Continue playing? (y/n): ").strip().lower()
        if answer == 'y':
            return True
        if answer == 'n':
            return False
        print("Invalid input. Please enter 'y' or 'n'.")


def play(board: Board, input_fn: InputFn | None = None, show_bitboards: bool = True) -> Board:
    """
    Run the game loop until a player declines to continue or input ends.

    White moves first. A rejected move leaves the turn with the same side.
    """
    input_fn = input_fn or input
    is_white_turn = True

    print("\n=== Draughts ===")
    print("Enter moves as square numbers: row * 8 + col")

    try:
        while True:
            print("Current board state:")
            print_board(board, show_bitboards)
            print(f"{'White' if is_white_turn else 'Black'}'s turn")

            from_sq = read_position("Enter the starting position (0-63): ", input_fn)
            to_sq = read_position("Enter the ending position (0-63): ", input_fn)

            if board.make_move(from_sq, to_sq, is_white_turn):
                print("Move successful!")
                print(f"Evaluation: {board.evaluate_position():+d}")
                is_white_turn = not is_white_turn
            else:
                print("Invalid move. Please try again.")

            if not read_continue(input_fn):
                break
    except EOFError:
        print()

    print("Game ended. Final board state:")
    print_board(board, show_bitboards)
    return board


def main():
    parser = argparse.ArgumentParser(description='Draughts Terminal Client')
    parser.add_argument('--loose-captures', action='store_true',
                        help='Use the historical capture generator (no origin check)')
    parser.add_argument('--king-bonus', type=int, default=2,
                        help='Extra value of a king in the evaluation')
    parser.add_argument('--no-bitboards', action='store_true',
                        help='Hide the binary/hex bitboard dump')
    parser.add_argument('--verbose', action='store_true', help='Debug logging')

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = RulesConfig(
        strict_captures=not args.loose_captures,
        king_bonus=args.king_bonus,
    )
    play(Board(config), show_bitboards=not args.no_bitboards)


if __name__ == '__main__':
    main()

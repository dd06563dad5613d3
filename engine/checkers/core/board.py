"""
Board state for English draughts.

Three 64-bit bitboards describe the whole position: black pieces, white
pieces, and kings (a subset of the union of the other two). All move
generation goes through checkers.core.moves; bits are mutated through the
fixed-width helpers in checkers.core.bitutils.
"""

from __future__ import annotations
from enum import IntEnum
from typing import Optional
import logging

import numpy as np

from .bitboard import (
    ROWS, COLS, NUM_SQUARES, TOP_ROW, BOTTOM_ROW,
    WHITE_START, BLACK_START,
    bit, is_valid_sq, rowcol_to_sq, to_word, from_word
)
from .bitutils import (
    set_bit, clear_bit, get_bit, count_bits, to_binary_string, to_hex_string
)
from .config import RulesConfig
from .moves import MoveGenerator, generator_for

logger = logging.getLogger(__name__)


class Occupant(IntEnum):
    """What stands on a square."""
    EMPTY = 0
    BLACK_MAN = 1
    BLACK_KING = 2
    WHITE_MAN = 3
    WHITE_KING = 4


OCCUPANT_SYMBOLS = {
    Occupant.EMPTY: ".",
    Occupant.BLACK_MAN: "b",
    Occupant.BLACK_KING: "B",
    Occupant.WHITE_MAN: "w",
    Occupant.WHITE_KING: "W",
}


def _side(is_white: bool) -> str:
    return "White" if is_white else "Black"


class Board:
    """
    A draughts position.

    Attributes:
        black_pieces: Bitboard of black pieces
        white_pieces: Bitboard of white pieces
        kings: Bitboard of crowned pieces of either colour
        config: Rules in force for move generation and evaluation
    """

    def __init__(self, config: Optional[RulesConfig] = None):
        self.config = config or RulesConfig()
        self.generator: MoveGenerator = generator_for(self.config)
        self.black_pieces = 0
        self.white_pieces = 0
        self.kings = 0
        self.reset()

    @classmethod
    def from_squares(
        cls,
        white: tuple[int, ...] = (),
        black: tuple[int, ...] = (),
        kings: tuple[int, ...] = (),
        config: Optional[RulesConfig] = None,
    ) -> Board:
        """
        Build a position from square lists.

        Raises:
            ValueError: if a square is out of range, occupied twice, or a king
                square holds no piece.
        """
        board = cls(config)
        board.white_pieces = 0
        board.black_pieces = 0
        board.kings = 0

        for sq in white:
            board._check_square(sq)
            board.white_pieces |= bit(sq)
        for sq in black:
            board._check_square(sq)
            if board.white_pieces & bit(sq):
                raise ValueError(f"Square {sq} is occupied by both sides")
            board.black_pieces |= bit(sq)
        for sq in kings:
            board._check_square(sq)
            if not (board.white_pieces | board.black_pieces) & bit(sq):
                raise ValueError(f"King on empty square {sq}")
            board.kings |= bit(sq)

        return board

    @staticmethod
    def _check_square(sq: int) -> None:
        if not is_valid_sq(sq):
            raise ValueError(f"Square out of range: {sq} (expected 0-{NUM_SQUARES - 1})")

    def reset(self) -> None:
        """Put every piece back on its starting square and remove all crowns."""
        self.black_pieces = BLACK_START
        self.white_pieces = WHITE_START
        self.kings = 0

    def copy(self) -> Board:
        """Independent copy sharing the same rules."""
        other = Board(self.config)
        other.black_pieces = self.black_pieces
        other.white_pieces = self.white_pieces
        other.kings = self.kings
        return other

    def _sides(self, is_white: bool) -> tuple[int, int]:
        if is_white:
            return self.white_pieces, self.black_pieces
        return self.black_pieces, self.white_pieces

    def calculate_all_moves(self, is_white: bool) -> int:
        """Bitboard of every destination square available to the side."""
        pieces, opponents = self._sides(is_white)
        return self.generator.all_moves(pieces, opponents, self.kings, is_white)

    def targets_from(self, sq: int, is_white: bool) -> int:
        """Bitboard of destinations for the piece standing on sq."""
        self._check_square(sq)
        pieces, opponents = self._sides(is_white)
        return self.generator.targets_from(sq, pieces, opponents, self.kings, is_white)

    def is_legal(self, from_sq: int, to_sq: int, is_white: bool) -> bool:
        """Check a move without applying it."""
        self._check_square(from_sq)
        self._check_square(to_sq)
        if self.config.strict_captures:
            return bool(self.targets_from(from_sq, is_white) & bit(to_sq))
        return bool(self.calculate_all_moves(is_white) & bit(to_sq))

    def make_move(self, from_sq: int, to_sq: int, is_white: bool) -> bool:
        """
        Move a piece, removing a jumped piece and crowning on the far row.

        A move whose destination is not available leaves the board untouched.

        Args:
            from_sq: Origin square (0-63)
            to_sq: Destination square (0-63)
            is_white: True if white is moving

        Returns:
            True if the move was applied, False if it was rejected.
        """
        if not self.is_legal(from_sq, to_sq, is_white):
            logger.info(f"{_side(is_white)} move {from_sq}->{to_sq} is not valid")
            return False

        pieces, _ = self._sides(is_white)
        own = to_word(pieces)
        kings = to_word(self.kings)

        # The crown travels with the piece
        if get_bit(own, from_sq) and get_bit(kings, from_sq):
            kings = set_bit(clear_bit(kings, from_sq), to_sq)

        own = from_word(set_bit(clear_bit(own, from_sq), to_sq))
        if is_white:
            self.white_pieces = own
        else:
            self.black_pieces = own

        if abs(to_sq - from_sq) > 9:
            captured = (from_sq + to_sq) // 2
            if is_white:
                self.black_pieces = from_word(clear_bit(to_word(self.black_pieces), captured))
            else:
                self.white_pieces = from_word(clear_bit(to_word(self.white_pieces), captured))
            kings = clear_bit(kings, captured)
            logger.debug(f"{_side(is_white)} captured on {captured}")

        promotion_row = TOP_ROW if is_white else BOTTOM_ROW
        if promotion_row & bit(to_sq) and not get_bit(kings, to_sq):
            kings = set_bit(kings, to_sq)
            logger.debug(f"{_side(is_white)} crowned on {to_sq}")

        self.kings = from_word(kings)
        logger.debug(f"{_side(is_white)} moved {from_sq}->{to_sq}")
        return True

    def evaluate_position(self) -> int:
        """Material balance, positive when white is ahead. Kings count extra."""
        bonus = self.config.king_bonus
        white_score = (count_bits(to_word(self.white_pieces))
                       + bonus * count_bits(to_word(self.white_pieces & self.kings)))
        black_score = (count_bits(to_word(self.black_pieces))
                       + bonus * count_bits(to_word(self.black_pieces & self.kings)))
        return white_score - black_score

    # Rendering hook

    def occupant(self, sq: int) -> Occupant:
        """Classify the piece on sq."""
        self._check_square(sq)
        kings = to_word(self.kings)
        if get_bit(to_word(self.black_pieces), sq):
            return Occupant.BLACK_KING if get_bit(kings, sq) else Occupant.BLACK_MAN
        if get_bit(to_word(self.white_pieces), sq):
            return Occupant.WHITE_KING if get_bit(kings, sq) else Occupant.WHITE_MAN
        return Occupant.EMPTY

    def occupant_grid(self) -> np.ndarray:
        """
        Occupants as an (8, 8) int8 array indexed [row, col].

        Values are Occupant codes.
        """
        grid = np.zeros((ROWS, COLS), dtype=np.int8)
        for row in range(ROWS):
            for col in range(COLS):
                grid[row, col] = self.occupant(rowcol_to_sq(row, col))
        return grid

    def bitboard_strings(self) -> dict[str, tuple[str, str]]:
        """Binary (64 chars) and hex text of each bitboard, keyed by name."""
        words = {
            "black": to_word(self.black_pieces),
            "white": to_word(self.white_pieces),
            "kings": to_word(self.kings),
        }
        return {
            name: (to_binary_string(word), to_hex_string(word))
            for name, word in words.items()
        }

    def format_board(self) -> str:
        """Text grid, row 7 on top: b/B black man/king, w/W white man/king."""
        grid = self.occupant_grid()
        lines = []
        for row in range(ROWS - 1, -1, -1):
            rank = f"{row} |"
            for col in range(COLS):
                rank += " " + OCCUPANT_SYMBOLS[Occupant(int(grid[row, col]))]
            lines.append(rank)
        lines.append("  +" + "-" * (COLS * 2))
        lines.append("    " + " ".join(str(c) for c in range(COLS)))
        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return False
        return (
            self.black_pieces == other.black_pieces and
            self.white_pieces == other.white_pieces and
            self.kings == other.kings
        )

    def __hash__(self) -> int:
        return hash((self.black_pieces, self.white_pieces, self.kings))

    def __repr__(self) -> str:
        return self.format_board()

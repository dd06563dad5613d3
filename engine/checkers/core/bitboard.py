"""
Bitboard geometry for English draughts.

Board layout (8 x 8 = 64 squares, one bit each in a 64-bit word):

  7 | 56 57 58 59 60 61 62 63     <- TOP_ROW (white promotes here)
  6 | 48 49 50 51 52 53 54 55
  5 | 40 41 42 43 44 45 46 47
  4 | 32 33 34 35 36 37 38 39
  3 | 24 25 26 27 28 29 30 31
  2 | 16 17 18 19 20 21 22 23
  1 |  8  9 10 11 12 13 14 15
  0 |  0  1  2  3  4  5  6  7     <- BOTTOM_ROW (black promotes here)
    +------------------------
       0  1  2  3  4  5  6  7

Square index = row * 8 + col. Playable (dark) squares have row + col even.
White starts on rows 0-2 and moves toward higher indices (left shifts),
black starts on rows 5-7 and moves toward lower indices (right shifts).

Bitboards are plain Python ints kept in [0, 2**64). Shifts must therefore be
truncated with FULL_MASK; to_word/from_word convert to and from the np.int64
words used by the bit utilities.
"""

from typing import Iterator

import numpy as np

from .bitutils import INT64

# Board dimensions
ROWS = 8
COLS = 8
NUM_SQUARES = ROWS * COLS  # 64

FULL_MASK = (1 << NUM_SQUARES) - 1

# Dark squares only
VALID_SQUARES = 0xAA55AA55AA55AA55

TOP_ROW = 0xFF00000000000000
BOTTOM_ROW = 0x00000000000000FF

# Starting positions
WHITE_START = 0x000000000055AA55  # rows 0-2
BLACK_START = 0xAA55AA0000000000  # rows 5-7

# Diagonal shift amounts
NORTHWEST = 7   # +1 row, -1 col
NORTHEAST = 9   # +1 row, +1 col
SOUTHWEST = -9  # -1 row, -1 col
SOUTHEAST = -7  # -1 row, +1 col

# Source masks: squares that can shift one step in the direction without
# leaving the board or wrapping onto the opposite edge.
NORTHWEST_MASK = 0x00FEFEFEFEFEFEFE
NORTHEAST_MASK = 0x007F7F7F7F7F7F7F
SOUTHWEST_MASK = 0xFEFEFEFEFEFEFE00
SOUTHEAST_MASK = 0x7F7F7F7F7F7F7F00

DIRECTION_MASKS = {
    NORTHWEST: NORTHWEST_MASK,
    NORTHEAST: NORTHEAST_MASK,
    SOUTHWEST: SOUTHWEST_MASK,
    SOUTHEAST: SOUTHEAST_MASK,
}

WHITE_FORWARD = (NORTHWEST, NORTHEAST)
BLACK_FORWARD = (SOUTHEAST, SOUTHWEST)
ALL_DIRECTIONS = (NORTHWEST, NORTHEAST, SOUTHWEST, SOUTHEAST)


def sq_to_rowcol(sq: int) -> tuple[int, int]:
    """Convert square index to (row, col)."""
    return sq // COLS, sq % COLS


def rowcol_to_sq(row: int, col: int) -> int:
    """Convert (row, col) to square index."""
    return row * COLS + col


def is_valid_sq(sq: int) -> bool:
    """Check if a square index is on the board."""
    return 0 <= sq < NUM_SQUARES


def is_dark(sq: int) -> bool:
    """Check if a square is playable."""
    return bool(VALID_SQUARES & bit(sq))


def bit(sq: int) -> int:
    """Return bitboard with single bit set at square."""
    return 1 << sq


def shift(bb: int, amount: int) -> int:
    """Logical shift toward higher indices (amount > 0) or lower (amount < 0)."""
    if amount >= 0:
        return (bb << amount) & FULL_MASK
    return bb >> -amount


def step(bb: int, direction: int) -> int:
    """Move every square one diagonal step, dropping squares that would wrap."""
    return shift(bb & DIRECTION_MASKS[direction], direction)


def lsb(bb: int) -> int:
    """Return index of least significant bit (or -1 if empty)."""
    bb = int(bb)
    if bb == 0:
        return -1
    return (bb & -bb).bit_length() - 1


def iter_bits(bb: int) -> Iterator[int]:
    """Iterate over indices of set bits."""
    bb = int(bb) & FULL_MASK
    while bb:
        sq = lsb(bb)
        yield sq
        bb &= bb - 1  # Clear LSB


def bb_to_squares(bb: int) -> list[int]:
    """Convert bitboard to list of square indices."""
    return list(iter_bits(bb))


def squares_to_bb(squares) -> int:
    """Build a bitboard from an iterable of square indices."""
    bb = 0
    for sq in squares:
        if not is_valid_sq(sq):
            raise ValueError(f"Square out of range: {sq}")
        bb |= bit(sq)
    return bb


def to_word(bb: int) -> np.int64:
    """Reinterpret an unsigned bitboard as a signed 64-bit word."""
    return INT64.box(bb)


def from_word(word) -> int:
    """Unsigned bitboard from a signed 64-bit word."""
    return INT64.unsigned(word)


def format_bitboard(bb: int, label: str = "") -> str:
    """Render a bitboard as an 8x8 grid of 1s and dots, row 7 on top."""
    lines = [f"{label}:"] if label else []
    for row in range(ROWS - 1, -1, -1):
        rank = f"{row} |"
        for col in range(COLS):
            rank += " 1" if bb & bit(rowcol_to_sq(row, col)) else " ."
        lines.append(rank)
    lines.append("  +" + "-" * (COLS * 2))
    lines.append("    " + " ".join(str(c) for c in range(COLS)))
    return "\n".join(lines)

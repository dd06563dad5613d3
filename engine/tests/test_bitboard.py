"""Tests for board geometry."""

import pytest
import sys
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent))

from checkers.core.bitboard import (
    NUM_SQUARES, FULL_MASK, VALID_SQUARES, TOP_ROW, BOTTOM_ROW,
    WHITE_START, BLACK_START,
    NORTHWEST, NORTHEAST, SOUTHWEST, SOUTHEAST,
    sq_to_rowcol, rowcol_to_sq, is_dark, bit, shift, step,
    iter_bits, bb_to_squares, squares_to_bb, to_word, from_word,
    format_bitboard
)


class TestSquareConversion:
    def test_sq_to_rowcol(self):
        assert sq_to_rowcol(0) == (0, 0)
        assert sq_to_rowcol(33) == (4, 1)
        assert sq_to_rowcol(63) == (7, 7)

    def test_roundtrip(self):
        for sq in range(NUM_SQUARES):
            row, col = sq_to_rowcol(sq)
            assert rowcol_to_sq(row, col) == sq


class TestMasks:
    def test_valid_squares_are_dark(self):
        squares = bb_to_squares(VALID_SQUARES)
        assert len(squares) == 32
        for sq in squares:
            row, col = sq_to_rowcol(sq)
            assert (row + col) % 2 == 0

    def test_is_dark(self):
        assert is_dark(0)
        assert not is_dark(1)
        assert is_dark(63)

    def test_rows(self):
        assert bb_to_squares(TOP_ROW) == list(range(56, 64))
        assert bb_to_squares(BOTTOM_ROW) == list(range(8))


class TestStartingPosition:
    def test_white(self):
        assert bb_to_squares(WHITE_START) == [0, 2, 4, 6, 9, 11, 13, 15, 16, 18, 20, 22]

    def test_black(self):
        assert bb_to_squares(BLACK_START) == [41, 43, 45, 47, 48, 50, 52, 54, 57, 59, 61, 63]

    def test_on_dark_squares(self):
        assert WHITE_START & ~VALID_SQUARES == 0
        assert BLACK_START & ~VALID_SQUARES == 0
        assert WHITE_START & BLACK_START == 0


class TestShifts:
    def test_shift_truncates_to_64_bits(self):
        assert shift(FULL_MASK, 1) == FULL_MASK - 1
        assert shift(bit(63), 9) == 0
        assert shift(bit(5), -9) == 0

    def test_step_inside_board(self):
        assert step(bit(16), NORTHEAST) == bit(25)
        assert step(bit(9), SOUTHWEST) == bit(0)
        assert step(bit(9), SOUTHEAST) == bit(2)
        assert step(bit(18), NORTHWEST) == bit(25)

    def test_step_does_not_wrap(self):
        assert step(bit(16), NORTHWEST) == 0  # column 0
        assert step(bit(31), NORTHEAST) == 0  # column 7
        assert step(bit(63), NORTHEAST) == 0  # top row
        assert step(bit(7), SOUTHEAST) == 0   # bottom row


class TestBitHelpers:
    def test_iter_bits(self):
        assert list(iter_bits(0b1010101)) == [0, 2, 4, 6]

    def test_iter_bits_numpy_int64(self):
        assert list(iter_bits(np.int64(-1))) == list(range(64))

    def test_squares_to_bb(self):
        assert squares_to_bb([0, 63]) == 1 | (1 << 63)
        with pytest.raises(ValueError):
            squares_to_bb([64])

    def test_word_conversion(self):
        assert to_word(BLACK_START) < 0
        assert to_word(WHITE_START) == np.int64(WHITE_START)
        assert from_word(to_word(BLACK_START)) == BLACK_START

    def test_format_bitboard(self):
        lines = format_bitboard(bit(0), "origin").splitlines()
        assert lines[0] == "origin:"
        assert lines[8] == "0 | 1 . . . . . . ."

"""Tests for bitwise move generation."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from checkers.core.moves import (
    MoveGenerator, LooseMoveGenerator, empty_squares, generator_for
)
from checkers.core.config import RulesConfig
from checkers.core.bitboard import (
    VALID_SQUARES, WHITE_START, BLACK_START, bit, squares_to_bb
)


@pytest.fixture
def strict():
    return MoveGenerator()


@pytest.fixture
def loose():
    return LooseMoveGenerator()


class TestEmptySquares:
    def test_start(self):
        empty = empty_squares(WHITE_START, BLACK_START)
        assert empty == squares_to_bb([25, 27, 29, 31, 32, 34, 36, 38])

    def test_only_dark_squares(self):
        assert empty_squares(0, 0) == VALID_SQUARES


class TestRegularMoves:
    def test_white_moves_up(self, strict):
        empty = empty_squares(bit(18), 0)
        assert strict.regular_moves(bit(18), empty, True) == squares_to_bb([25, 27])

    def test_black_moves_down(self, strict):
        empty = empty_squares(bit(41), 0)
        assert strict.regular_moves(bit(41), empty, False) == squares_to_bb([32, 34])

    def test_edge_column(self, strict):
        empty = empty_squares(bit(31), 0)
        assert strict.regular_moves(bit(31), empty, True) == bit(38)

    def test_whole_side_at_once(self, strict):
        empty = empty_squares(WHITE_START, BLACK_START)
        assert strict.regular_moves(WHITE_START, empty, True) == squares_to_bb([25, 27, 29, 31])


class TestCaptureMoves:
    def test_tied_to_origin(self, strict):
        empty = empty_squares(bit(18), bit(27))
        assert strict.capture_moves(bit(18), bit(27), empty, True) == bit(36)

    def test_no_opponent_no_capture(self, strict):
        empty = empty_squares(bit(18), 0)
        assert strict.capture_moves(bit(18), 0, empty, True) == 0

    def test_blocked_landing(self, strict):
        opponents = bit(27) | bit(36)
        empty = empty_squares(bit(18), opponents)
        assert strict.capture_moves(bit(18), opponents, empty, True) == 0

    def test_opponent_on_edge_cannot_be_jumped(self, strict):
        # 31 is on column 7; the landing would wrap onto column 0
        opponents = bit(31)
        empty = empty_squares(bit(22), opponents)
        assert strict.capture_moves(bit(22), opponents, empty, True) == 0

    def test_black_captures_down(self, strict):
        empty = empty_squares(bit(34), bit(25))
        assert strict.capture_moves(bit(34), bit(25), empty, False) == bit(16)

    def test_loose_ignores_opponents(self, loose):
        empty = empty_squares(bit(18), 0)
        assert loose.capture_moves(bit(18), 0, empty, True) == squares_to_bb([32, 36])


class TestKingMoves:
    def test_four_directions(self, strict):
        empty = empty_squares(bit(36), 0)
        assert strict.king_moves(bit(36), empty) == squares_to_bb([27, 29, 43, 45])

    def test_corner(self, strict):
        empty = empty_squares(bit(0), 0)
        assert strict.king_moves(bit(0), empty) == bit(9)

    def test_king_captures_all_directions(self, strict):
        opponents = bit(27) | bit(45)
        empty = empty_squares(bit(36), opponents)
        assert strict.king_captures(bit(36), opponents, empty) == squares_to_bb([18, 54])

    def test_loose_king_capture_pairing(self, strict, loose):
        # Opponent at 43 (north-west of the king): the historical formula
        # lands on the opposite side, 29, instead of beyond the opponent, 50.
        empty = empty_squares(bit(36), bit(43))
        assert loose.king_captures(bit(36), bit(43), empty) == bit(29)
        assert strict.king_captures(bit(36), bit(43), empty) == bit(50)


class TestAllMoves:
    def test_kings_excluded_from_men(self, strict):
        # A king on the top row still moves backward
        moves = strict.all_moves(bit(63), 0, bit(63), True)
        assert moves == bit(54)

    def test_targets_from_empty_square(self, strict):
        assert strict.targets_from(25, WHITE_START, BLACK_START, 0, True) == 0

    def test_targets_from_single_piece(self, strict):
        assert strict.targets_from(18, WHITE_START, BLACK_START, 0, True) == squares_to_bb([25, 27])

    def test_targets_from_king(self, strict):
        targets = strict.targets_from(36, bit(36), bit(27), bit(36), True)
        assert targets == squares_to_bb([18, 29, 43, 45])


class TestGeneratorFor:
    def test_strict_default(self):
        assert type(generator_for(RulesConfig())) is MoveGenerator

    def test_loose(self):
        assert type(generator_for(RulesConfig(strict_captures=False))) is LooseMoveGenerator

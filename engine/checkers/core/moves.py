"""
Move generation for English draughts.

Every generator works on a whole side at once: a bitboard of pieces is shifted
one or two diagonal steps and masked against opponents or empty squares, so a
single expression yields all destinations for that direction.

Two generators are provided. MoveGenerator masks every shift with the
direction masks and requires each capture landing to come from one origin
square: piece, then adjacent opponent, then empty landing square on the same
diagonal. LooseMoveGenerator keeps the historical one-shot formulation, where
a jump landing only has to be empty and two steps ahead of some piece.
"""

from __future__ import annotations

from .bitboard import (
    VALID_SQUARES, FULL_MASK,
    WHITE_FORWARD, BLACK_FORWARD, ALL_DIRECTIONS,
    bit, shift, step
)
from .config import RulesConfig


def empty_squares(white: int, black: int) -> int:
    """Bitboard of unoccupied playable squares."""
    return ~(white | black) & VALID_SQUARES & FULL_MASK


class MoveGenerator:
    """Generates destination bitboards with origin-checked captures."""

    def men(self, pieces: int, kings: int) -> int:
        """Pieces that move as men (forward only)."""
        return pieces & ~kings

    def regular_moves(self, pieces: int, empty: int, is_white: bool) -> int:
        """Single forward diagonal steps onto empty squares."""
        moves = 0
        for direction in WHITE_FORWARD if is_white else BLACK_FORWARD:
            moves |= step(pieces, direction) & empty
        return moves

    def capture_moves(self, pieces: int, opponents: int, empty: int, is_white: bool) -> int:
        """Landing squares of forward jumps over an adjacent opponent."""
        captures = 0
        for direction in WHITE_FORWARD if is_white else BLACK_FORWARD:
            captures |= step(step(pieces, direction) & opponents, direction) & empty
        return captures

    def king_moves(self, king_pieces: int, empty: int) -> int:
        """Single diagonal steps in all four directions."""
        moves = 0
        for direction in ALL_DIRECTIONS:
            moves |= step(king_pieces, direction) & empty
        return moves & VALID_SQUARES

    def king_captures(self, king_pieces: int, opponents: int, empty: int) -> int:
        """Landing squares of jumps in all four directions."""
        captures = 0
        for direction in ALL_DIRECTIONS:
            captures |= step(step(king_pieces, direction) & opponents, direction) & empty
        return captures & VALID_SQUARES

    def all_moves(self, pieces: int, opponents: int, kings: int, is_white: bool) -> int:
        """
        Every square reachable by the side in one ply.

        Args:
            pieces: Bitboard of the moving side
            opponents: Bitboard of the other side
            kings: Bitboard of all kings (both colours)
            is_white: True if white is moving
        """
        empty = empty_squares(pieces, opponents)
        men = self.men(pieces, kings)

        moves = self.regular_moves(men, empty, is_white)
        moves |= self.capture_moves(men, opponents, empty, is_white)

        king_pieces = pieces & kings
        if king_pieces:
            moves |= self.king_moves(king_pieces, empty)
            moves |= self.king_captures(king_pieces, opponents, empty)

        return moves

    def targets_from(self, sq: int, pieces: int, opponents: int, kings: int,
                     is_white: bool) -> int:
        """Destinations available to the single piece on sq (0 if none there)."""
        origin = bit(sq)
        if not pieces & origin:
            return 0
        empty = empty_squares(pieces, opponents)
        if kings & origin:
            return self.king_moves(origin, empty) | self.king_captures(origin, opponents, empty)
        return (self.regular_moves(origin, empty, is_white)
                | self.capture_moves(origin, opponents, empty, is_white))


class LooseMoveGenerator(MoveGenerator):
    """
    Historical generator, reproduced bit for bit.

    Men and kings both use the forward generators, jump landings are not tied
    to an adjacent opponent, and king captures pair each king with an opponent
    on the opposite side of the landing square. Only VALID_SQUARES guards
    against wraparound.
    """

    def men(self, pieces: int, kings: int) -> int:
        return pieces

    def regular_moves(self, pieces: int, empty: int, is_white: bool) -> int:
        sign = 1 if is_white else -1
        forward = shift(pieces, 7 * sign) | shift(pieces, 9 * sign)
        return forward & empty

    def capture_moves(self, pieces: int, opponents: int, empty: int, is_white: bool) -> int:
        sign = 1 if is_white else -1
        forward = shift(pieces, 7 * sign) | shift(pieces, 9 * sign)
        jumps = shift(pieces, 14 * sign) | shift(pieces, 18 * sign)

        captures = (forward & opponents) & empty
        captures |= jumps & empty
        return captures

    def king_moves(self, king_pieces: int, empty: int) -> int:
        moves = 0
        for amount in (-7, -9, 7, 9):
            moves |= shift(king_pieces, amount) & empty
        return moves & VALID_SQUARES

    def king_captures(self, king_pieces: int, opponents: int, empty: int) -> int:
        captures = 0
        for amount in (-7, -9, 7, 9):
            captures |= shift(king_pieces & shift(opponents, amount), amount) & empty
        return captures & VALID_SQUARES


def generator_for(config: RulesConfig) -> MoveGenerator:
    """Pick the generator matching the capture rules in config."""
    if config.strict_captures:
        return MoveGenerator()
    return LooseMoveGenerator()

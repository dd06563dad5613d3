"""Rule configuration for the board engine."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class RulesConfig:
    """Configuration for move generation and evaluation."""
    strict_captures: bool = True  # Tie each capture to one origin square
    king_bonus: int = 2  # Extra material a king is worth on top of a man

    def __post_init__(self):
        if self.king_bonus < 0:
            raise ValueError(f"king_bonus must be non-negative, got {self.king_bonus}")

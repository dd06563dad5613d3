"""Core game logic: bit utilities, bitboards, board state, and move generation."""

from .bitboard import *
from .board import Board, Occupant
from .config import RulesConfig
from .moves import MoveGenerator, LooseMoveGenerator

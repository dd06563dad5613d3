"""Bitboard rule engine for English draughts."""

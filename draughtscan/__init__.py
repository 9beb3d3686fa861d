"""Draughts engine building blocks: geometry, positions, move notation, scores, transposition table and settings."""

__version__ = "0.1.0"
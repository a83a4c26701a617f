"""Counterpick - lane matchup advantage ranking."""

__version__ = "0.1.0"

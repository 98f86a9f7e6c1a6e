"""Rankboard - terminal leaderboard viewer/editor."""

__version__ = "0.1.0"

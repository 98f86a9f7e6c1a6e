"""Screens package - contains all screen definitions.

Screens:
- LeaderboardScreen: Ranked table with edit mode
"""

from rankboard.screens.main import LeaderboardScreen

__all__ = ["LeaderboardScreen"]

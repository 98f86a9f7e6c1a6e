"""Leaderboard services: entry type and snapshot synchronization."""

from rankboard.services.leaderboard.entry import (
    Entry,
    coerce_score,
    is_ranked,
    parse_score,
    score_rank,
    sort_entries,
)
from rankboard.services.leaderboard.synchronizer import (
    AddOutcome,
    LeaderboardSynchronizer,
)

__all__ = [
    "AddOutcome",
    "Entry",
    "LeaderboardSynchronizer",
    "coerce_score",
    "is_ranked",
    "parse_score",
    "score_rank",
    "sort_entries",
]

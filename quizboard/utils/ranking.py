"""
Ranking rule for the trivia leaderboard.

Entries rank by score descending, then by date descending (most recent
first). Entries equal on both keys keep the order they were given in.
"""

from datetime import datetime, timezone
from typing import Iterable, List, Tuple


class RankingUtility:
    """Shared ranking logic used by the leaderboard service and its display."""
    
    @staticmethod
    def sort_key(entry) -> Tuple[int, float]:
        """Ascending sort key that yields score desc, date desc."""
        return (-entry.score, -RankingUtility.to_epoch(entry.date))
    
    @staticmethod
    def rank_entries(entries: Iterable) -> List:
        """Return a new list ordered by the ranking rule. Stable for full ties."""
        return sorted(entries, key=RankingUtility.sort_key)
    
    @staticmethod
    def to_epoch(value: datetime) -> float:
        """Seconds since the epoch, treating naive datetimes as UTC."""
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.timestamp()
    
    @staticmethod
    def normalize_timestamp(value: datetime) -> datetime:
        """Convert to the naive UTC form stored in the leaderboard table."""
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

"""
Leaderboard data models.

Immutable data transfer objects returned by the leaderboard service. Callers
only ever see these, never live ORM rows.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from quizboard.utils.leaderboard_exceptions import LeaderboardException


@dataclass(frozen=True)
class LeaderboardEntry:
    """Single stored game result."""
    id: int
    player_name: str
    score: int
    date: datetime

    @classmethod
    def from_record(cls, record) -> "LeaderboardEntry":
        return cls(
            id=record.id,
            player_name=record.player_name,
            score=record.score,
            date=record.date,
        )


@dataclass(frozen=True)
class RecordResult:
    """Outcome of recording a score. `entry` is set only on success."""
    success: bool
    entry: Optional[LeaderboardEntry] = None
    error: Optional[LeaderboardException] = None

    @classmethod
    def ok(cls, entry: LeaderboardEntry) -> "RecordResult":
        return cls(success=True, entry=entry)

    @classmethod
    def failed(cls, error: LeaderboardException) -> "RecordResult":
        return cls(success=False, error=error)


@dataclass(frozen=True)
class RankedResult:
    """Outcome of fetching the ranked leaderboard. `entries` is empty on failure."""
    success: bool
    entries: List[LeaderboardEntry] = field(default_factory=list)
    error: Optional[LeaderboardException] = None

    @classmethod
    def ok(cls, entries: List[LeaderboardEntry]) -> "RankedResult":
        return cls(success=True, entries=list(entries))

    @classmethod
    def failed(cls, error: LeaderboardException) -> "RankedResult":
        return cls(success=False, entries=[], error=error)

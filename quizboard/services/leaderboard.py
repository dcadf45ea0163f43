"""
Leaderboard service for the trivia quiz.

Records one row per finished game and returns every row ranked by score,
most recent first on ties. Both operations always resolve to a result
object; validation and storage failures are logged and reported through
the result, never raised.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator, Callable, Optional, Tuple
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from quizboard.data_models.leaderboard import LeaderboardEntry, RecordResult, RankedResult
from quizboard.database.models import ScoreRecord
from quizboard.utils.leaderboard_exceptions import (
    DatabaseError,
    InvalidDateError,
    LeaderboardValidationError,
    MissingPlayerNameError,
    MissingScoreError,
    ScoreValidationError,
)
from quizboard.utils.ranking import RankingUtility

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class LeaderboardService:
    """Append-only score store with ranked retrieval."""
    
    def __init__(self, session_factory, clock: Optional[Callable[[], datetime]] = None):
        """
        Args:
            session_factory: Async session factory, usually Database.session_factory
            clock: Returns the current time; used when a game has no date
        """
        self.session_factory = session_factory
        self._clock = clock or _utc_now
    
    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Commit on success, roll back and re-raise on error."""
        session = self.session_factory()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
    
    async def record(
        self,
        player_name: Optional[str] = None,
        score: Optional[int] = None,
        date: Optional[datetime] = None
    ) -> RecordResult:
        """
        Append one game result.
        
        When `date` is omitted the current time is stamped. A score of 0 is
        a valid result; only an absent score is rejected.
        """
        try:
            player_name, score, date = self._validate(player_name, score, date)
        except LeaderboardValidationError as e:
            logger.warning(f"Rejected leaderboard entry: {e}")
            return RecordResult.failed(e)
        
        try:
            async with self.get_session() as session:
                record = ScoreRecord(player_name=player_name, score=score, date=date)
                session.add(record)
                await session.flush()
                entry = LeaderboardEntry.from_record(record)
        except Exception as e:
            logger.error(f"Database connection error while recording score for '{player_name}': {e}", exc_info=True)
            return RecordResult.failed(DatabaseError("record score", str(e)))
        
        logger.info(f"Recorded score {entry.score} for '{entry.player_name}' (entry {entry.id})")
        return RecordResult.ok(entry)
    
    async def fetch_ranked(self) -> RankedResult:
        """Return every stored entry ordered by score desc, then date desc."""
        try:
            async with self.get_session() as session:
                result = await session.execute(
                    select(ScoreRecord).order_by(ScoreRecord.id)
                )
                entries = [LeaderboardEntry.from_record(row) for row in result.scalars().all()]
        except Exception as e:
            logger.error(f"Database connection error while fetching leaderboard: {e}", exc_info=True)
            return RankedResult.failed(DatabaseError("fetch leaderboard", str(e)))
        
        return RankedResult.ok(RankingUtility.rank_entries(entries))
    
    def _validate(self, player_name, score, date) -> Tuple[str, int, datetime]:
        if not isinstance(player_name, str) or not player_name.strip():
            raise MissingPlayerNameError()
        
        # Explicit None check: 0 is a legitimate score
        if score is None:
            raise MissingScoreError()
        if isinstance(score, bool) or not isinstance(score, int):
            raise ScoreValidationError(score, "Score must be a whole number.")
        if score < 0:
            raise ScoreValidationError(score, "Score cannot be negative.")
        
        if date is None:
            date = self._clock()
        elif not isinstance(date, datetime):
            raise InvalidDateError(date)
        
        return player_name.strip(), score, RankingUtility.normalize_timestamp(date)

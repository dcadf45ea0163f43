"""
Services package for quizboard.
"""

from .leaderboard import LeaderboardService

__all__ = ['LeaderboardService']

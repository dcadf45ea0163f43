"""
Centralized error embeds for consistent error handling across the quiz bot.
"""

import discord

from quizboard.utils.leaderboard_exceptions import LeaderboardException, DatabaseError


class ErrorEmbeds:
    """Centralized error embed factory for consistent error handling."""
    
    @staticmethod
    def invalid_input(message: str) -> discord.Embed:
        """Create embed for invalid user input."""
        return discord.Embed(
            title="Invalid Input",
            description=message,
            color=discord.Color.red()
        )
    
    @staticmethod
    def database_error() -> discord.Embed:
        """Create embed for database-related errors."""
        return discord.Embed(
            title="Database Error",
            description="A database error occurred. Please try again later or contact an administrator.",
            color=discord.Color.red()
        )
    
    @staticmethod
    def from_exception(error: LeaderboardException) -> discord.Embed:
        """Pick the embed matching a failed leaderboard result."""
        if isinstance(error, DatabaseError):
            return ErrorEmbeds.database_error()
        return ErrorEmbeds.invalid_input(error.user_message)

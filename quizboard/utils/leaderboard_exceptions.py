"""
Custom exceptions for the leaderboard with user-friendly error messages.

The leaderboard service never raises these across its public boundary; they
travel inside failed results so callers can inspect what went wrong.
"""

class LeaderboardException(Exception):
    """Base exception for leaderboard-related errors."""
    def __init__(self, message: str, user_message: str = None):
        super().__init__(message)
        self.user_message = user_message or message

class LeaderboardValidationError(LeaderboardException):
    """Raised when input is rejected before any storage access."""
    pass

class MissingPlayerNameError(LeaderboardValidationError):
    """Raised when the player name is absent or blank."""
    def __init__(self):
        super().__init__(
            "Player name is required",
            "❌ A player name is required to record a score!"
        )

class MissingScoreError(LeaderboardValidationError):
    """Raised when no score was supplied. A score of 0 is not missing."""
    def __init__(self):
        super().__init__(
            "Score is required",
            "❌ A score is required to record a result!"
        )

class ScoreValidationError(LeaderboardValidationError):
    """Raised when score validation fails."""
    def __init__(self, score, reason: str):
        super().__init__(
            f"Invalid score {score!r}: {reason}",
            f"❌ {reason}"
        )

class InvalidDateError(LeaderboardValidationError):
    """Raised when a supplied date is not a datetime."""
    def __init__(self, date):
        super().__init__(
            f"Invalid date {date!r}: expected a datetime",
            "❌ The game date could not be understood."
        )

class DatabaseError(LeaderboardException):
    """Raised when database operations fail."""
    def __init__(self, operation: str, details: str = None):
        super().__init__(
            f"Database error during {operation}: {details}",
            "❌ Database error occurred. Please try again later."
        )
        self.operation = operation

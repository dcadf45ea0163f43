"""
quizboard - trivia quiz leaderboard service and Discord bot.
"""

__version__ = "0.1.0"

"""
Shared embed utilities for the quiz bot.
"""

import discord
from typing import List

from quizboard.data_models.leaderboard import LeaderboardEntry

MEDALS = {1: "🥇", 2: "🥈", 3: "🥉"}


def build_leaderboard_embed(entries: List[LeaderboardEntry], limit: int = 10) -> discord.Embed:
    """
    Build the ranked leaderboard embed.
    
    `entries` must already be ranked. Only the first `limit` rows are shown;
    the footer reports how many games are stored in total.
    """
    embed = discord.Embed(
        title="🏆 Trivia Leaderboard",
        color=discord.Color.gold()
    )
    
    if not entries:
        embed.description = "No scores yet. Finish a quiz to claim the top spot!"
        return embed
    
    lines = []
    for position, entry in enumerate(entries[:limit], start=1):
        marker = MEDALS.get(position, f"**#{position}**")
        lines.append(
            f"{marker} {discord.utils.escape_markdown(entry.player_name)} - "
            f"**{entry.score}** ({entry.date.strftime('%Y-%m-%d %H:%M')} UTC)"
        )
    embed.description = "\n".join(lines)
    
    shown = min(limit, len(entries))
    embed.set_footer(text=f"Showing {shown} of {len(entries)} games")
    return embed


def build_score_recorded_embed(entry: LeaderboardEntry) -> discord.Embed:
    """Confirmation shown after a game result has been stored."""
    embed = discord.Embed(
        title="✅ Score Recorded",
        description=f"{discord.utils.escape_markdown(entry.player_name)} scored **{entry.score}**.",
        color=discord.Color.green()
    )
    embed.set_footer(text=f"Entry #{entry.id}")
    return embed

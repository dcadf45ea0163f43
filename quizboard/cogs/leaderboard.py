import discord
from discord import app_commands
from discord.ext import commands
from typing import Optional
import logging

from quizboard.config import Config
from quizboard.services.leaderboard import LeaderboardService
from quizboard.utils.embeds import build_leaderboard_embed, build_score_recorded_embed
from quizboard.utils.error_embeds import ErrorEmbeds

logger = logging.getLogger(__name__)

class LeaderboardCog(commands.Cog):
    """Trivia leaderboard commands"""
    
    def __init__(self, bot, leaderboard_service: Optional[LeaderboardService] = None):
        self.bot = bot
        self.leaderboard_service = leaderboard_service or LeaderboardService(bot.db.session_factory)
    
    @app_commands.command(name="leaderboard", description="View the trivia leaderboard")
    async def leaderboard(self, interaction: discord.Interaction):
        """Display the ranked trivia leaderboard."""
        await interaction.response.defer()
        
        result = await self.leaderboard_service.fetch_ranked()
        if not result.success:
            await interaction.followup.send(embed=ErrorEmbeds.from_exception(result.error))
            return
        
        embed = build_leaderboard_embed(result.entries, limit=Config.LEADERBOARD_DISPLAY_LIMIT)
        await interaction.followup.send(embed=embed)
    
    @app_commands.command(name="record-score", description="Record the result of a finished quiz")
    @app_commands.describe(
        score="Number of questions answered correctly",
        player_name="Name to show on the leaderboard (defaults to your display name)"
    )
    async def record_score(
        self,
        interaction: discord.Interaction,
        score: app_commands.Range[int, 0],
        player_name: Optional[str] = None
    ):
        """Record a finished game for the invoking member or a named player."""
        await interaction.response.defer()
        
        name = player_name if player_name is not None else interaction.user.display_name
        result = await self.leaderboard_service.record(name, score)
        if not result.success:
            await interaction.followup.send(embed=ErrorEmbeds.from_exception(result.error))
            return
        
        await interaction.followup.send(embed=build_score_recorded_embed(result.entry))

async def setup(bot):
    await bot.add_cog(LeaderboardCog(bot))

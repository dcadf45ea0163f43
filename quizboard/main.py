import asyncio
from typing import Optional

import discord
from discord.ext import commands
from discord import app_commands

from quizboard.config import Config
from quizboard.database.database import Database
from quizboard.utils.logger import setup_logger

class QuizBot(commands.Bot):
    def __init__(self, database: Optional[Database] = None):
        intents = discord.Intents.default()
        intents.guilds = True
        
        super().__init__(
            command_prefix=Config.COMMAND_PREFIX,
            intents=intents,
            help_command=None
        )
        
        # Attach app command error handler
        self.tree.on_error = self.on_app_command_error
        
        self.db: Optional[Database] = database
        self.logger = setup_logger(__name__)
        
    async def setup_hook(self):
        """Called when the bot is starting up"""
        self.logger.info("Setting up Quiz Bot...")
        
        if self.db is None:
            self.db = Database()
        await self.db.initialize()
        
        await self.load_cogs()
        await self._sync_commands()
        
        self.logger.info("Quiz Bot setup complete!")
        
    async def load_cogs(self):
        """Load all cogs"""
        cogs_to_load = [
            'quizboard.cogs.leaderboard',
        ]
        
        for cog in cogs_to_load:
            try:
                await self.load_extension(cog)
                self.logger.info(f"Loaded cog: {cog}")
            except Exception as e:
                self.logger.error(f"Failed to load cog {cog}: {e}", exc_info=True)
    
    async def _sync_commands(self):
        """Sync slash commands with Discord"""
        if not self.tree.get_commands():
            self.logger.warning("No application commands found to sync. Check for cog loading errors.")
            return
            
        try:
            guild_ids = Config.get_guild_ids()
            
            if guild_ids:
                # Guild-specific sync (instant updates)
                for guild_id in guild_ids:
                    try:
                        guild = discord.Object(id=guild_id)
                        self.tree.copy_global_to(guild=guild)
                        synced = await self.tree.sync(guild=guild)
                        self.logger.info(f"Synced {len(synced)} command(s) to guild {guild_id}")
                    except discord.errors.Forbidden:
                        self.logger.error(f"Permission error syncing to guild {guild_id}. Ensure the bot has the 'application.commands' scope and is in the guild.", exc_info=True)
                    except discord.errors.HTTPException as e:
                        self.logger.error(f"HTTP error syncing to guild {guild_id}. Status: {e.status}, Response: {e.text}", exc_info=True)
            else:
                # Global sync (can take up to 1 hour to propagate)
                synced = await self.tree.sync()
                self.logger.info(f"Synced {len(synced)} command(s) globally")
        except Exception as e:
            self.logger.error(f"Failed to sync commands: {e}", exc_info=True)
                
    async def on_ready(self):
        """Called when the bot is ready"""
        self.logger.info(f'{self.user} has connected to Discord!')
        await self.change_presence(activity=discord.Game(name="Trivia | /leaderboard"))
    
    async def on_app_command_error(self, interaction: discord.Interaction, error: app_commands.AppCommandError):
        """Global error handler for slash commands"""
        command_name = interaction.command.name if interaction.command else 'Unknown'
        if isinstance(error, app_commands.CheckFailure):
            self.logger.info(f"Permission denied for command '{command_name}' by user {interaction.user}")
            title = "❌ Permission Denied"
        else:
            self.logger.error(f"Error in app command '{command_name}': {error}", exc_info=True)
            title = "❌ An unexpected error occurred while processing your command."
        
        error_embed = discord.Embed(title=title, color=discord.Color.red())
        try:
            if interaction.response.is_done():
                await interaction.followup.send(embed=error_embed, ephemeral=True)
            else:
                await interaction.response.send_message(embed=error_embed, ephemeral=True)
        except Exception as e:
            self.logger.error(f"Failed to send error response: {e}")
    
    async def close(self):
        """Close the bot and its database connection"""
        if self.db:
            await self.db.close()
        await super().close()

async def run_bot():
    Config.validate()
    bot = QuizBot()
    async with bot:
        await bot.start(Config.DISCORD_TOKEN)

def main():
    """Console entry point"""
    logger = setup_logger(__name__)
    try:
        asyncio.run(run_bot())
    except KeyboardInterrupt:
        logger.info("Quiz Bot stopped")

if __name__ == "__main__":
    main()

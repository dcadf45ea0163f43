"""
Slash command tests for LeaderboardCog using mocked interactions.
"""

from datetime import datetime
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from quizboard.cogs.leaderboard import LeaderboardCog


def make_interaction(display_name="Quizzer"):
    interaction = MagicMock()
    interaction.response.defer = AsyncMock()
    interaction.followup.send = AsyncMock()
    interaction.user.display_name = display_name
    return interaction


def sent_embed(interaction):
    return interaction.followup.send.call_args.kwargs["embed"]


@pytest.fixture
def cog(service):
    return LeaderboardCog(SimpleNamespace(db=None), leaderboard_service=service)


@pytest.mark.asyncio
async def test_record_score_defaults_to_display_name(cog, service):
    interaction = make_interaction("Alice")

    await cog.record_score.callback(cog, interaction, 8)

    assert sent_embed(interaction).title == "✅ Score Recorded"
    board = await service.fetch_ranked()
    assert [(e.player_name, e.score) for e in board.entries] == [("Alice", 8)]


@pytest.mark.asyncio
async def test_record_score_with_explicit_name(cog, service):
    interaction = make_interaction("Alice")

    await cog.record_score.callback(cog, interaction, 0, "Bob")

    board = await service.fetch_ranked()
    assert [(e.player_name, e.score) for e in board.entries] == [("Bob", 0)]


@pytest.mark.asyncio
async def test_record_score_blank_name_reports_invalid_input(cog, service):
    interaction = make_interaction()

    await cog.record_score.callback(cog, interaction, 3, "  ")

    assert sent_embed(interaction).title == "Invalid Input"
    assert (await service.fetch_ranked()).entries == []


@pytest.mark.asyncio
async def test_leaderboard_command_lists_ranked_entries(cog, service):
    await service.record("Low", 2, date=datetime(2024, 1, 1))
    await service.record("High", 9, date=datetime(2024, 1, 1))
    interaction = make_interaction()

    await cog.leaderboard.callback(cog, interaction)

    interaction.response.defer.assert_awaited_once()
    lines = sent_embed(interaction).description.split("\n")
    assert lines[0].startswith("🥇 High")
    assert lines[1].startswith("🥈 Low")


@pytest.mark.asyncio
async def test_leaderboard_command_reports_database_error(broken_service):
    cog = LeaderboardCog(SimpleNamespace(db=None), leaderboard_service=broken_service)
    interaction = make_interaction()

    await cog.leaderboard.callback(cog, interaction)

    assert sent_embed(interaction).title == "Database Error"

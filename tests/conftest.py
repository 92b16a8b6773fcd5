"""Global pytest fixtures for the gateway test suite.

Centralizes:
 - Project root path insertion (so tests run without an editable install)
 - Settings that never read a local .env
 - Reusable Steam routes and community page HTML (doubles live in tests/fakes.py)
"""

import sys
from pathlib import Path

import pytest

# Ensure project root (containing steam_gateway/) is on sys.path once
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from steam_gateway.core.config import Settings  # noqa: E402
from tests.fakes import (  # noqa: E402
    PLAYER_ID,
    DummyResponse,
    friend_list_payload,
    games_page,
    json_response,
    player_achievements_payload,
    rg_games,
    schema_payload,
    summaries_route,
)


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        steam_api_key="test-key",
        static_dir=str(tmp_path / "no-static"),
    )


@pytest.fixture
def sample_games_html():
    return games_page(rg_games(15))


@pytest.fixture
def steam_routes():
    """Routes for a fully public profile: 8 friends, 15 games, 20 achievements each."""
    return {
        "ResolveVanityURL": json_response({"response": {"steamid": PLAYER_ID, "success": 1}}),
        "GetPlayerSummaries": summaries_route,
        "GetFriendList": json_response(friend_list_payload(8)),
        "GetPlayerAchievements": json_response(player_achievements_payload(20)),
        "GetSchemaForGame": json_response(schema_payload(20, reverse=True)),
        "/games/": DummyResponse(body=games_page(rg_games(15))),
    }

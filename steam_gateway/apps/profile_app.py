"""
Steam Profile App - Aggregations-Orchestrator

Koordiniert Normalizer, Collector, Games-Provider und Enricher zu den zwei
öffentlichen Operationen ``resolve_vanity`` und ``aggregate_profile``.
"""

import asyncio
import logging
from typing import Any

from ..common.errors import InvalidInput
from ..common.identifiers import normalize_identifier, require_steam64
from ..core.config import Settings, SteamAPIConfig
from ..data_collection.collectors.base import GamesListProvider
from ..data_collection.collectors.steam_web_api_collector import SteamWebAPICollector
from ..data_collection.scrapers.steam_games_scraper import SteamCommunityGamesScraper
from ..domain.contracts import (
    INVALID_ID_MESSAGE,
    VANITY_NOT_FOUND_MESSAGE,
    AggregatedProfile,
    GameSummary,
    Profile,
    error_body,
    is_error,
)
from .enrichers import FriendsEnricher, GamesEnricher


class SteamProfileApp:
    """Hauptanwendung für die Profil-Aggregation"""

    def __init__(
        self,
        settings: Settings,
        collector: SteamWebAPICollector,
        games_provider: GamesListProvider,
    ):
        self.settings = settings
        self.collector = collector
        self.games_provider = games_provider
        self.friends_enricher = FriendsEnricher(collector, limit=settings.friends_limit)
        self.games_enricher = GamesEnricher(collector)
        # Work abandoned by a short-circuit keeps running until it finishes;
        # the set holds a reference so the tasks are not garbage collected.
        self._detached: set[asyncio.Task] = set()
        self.logger = logging.getLogger("steam_profile_app")

    async def resolve_vanity(self, raw_id: str) -> dict[str, Any]:
        """Vanity name -> ``{"steamId": ...}``; numeric input is a no-op (``{}``)."""
        identifier = normalize_identifier(raw_id)
        if identifier.is_numeric:
            return {}
        if not identifier.is_valid:
            self.logger.info(f"Empty vanity username after normalizing raw id {raw_id!r}")
            return error_body(VANITY_NOT_FOUND_MESSAGE)

        response = await self.collector.resolve_vanity_name(identifier.value)
        if response.get("success") == 1 and response.get("steamid"):
            return {"steamId": response["steamid"]}
        return error_body(VANITY_NOT_FOUND_MESSAGE)

    async def aggregate_profile(self, raw_id: str) -> dict[str, Any]:
        """Profile, friends and recent games for a Steam64 id.

        The friends fetch starts before the profile lookup; the games fetch
        needs ``profileurl`` and starts once the profile is known. A profile
        error is returned alone.
        """
        try:
            steam_id = require_steam64(raw_id)
        except InvalidInput as e:
            self.logger.info(f"Rejected profile request: {e}")
            return error_body(INVALID_ID_MESSAGE)

        friends_task = asyncio.create_task(self.fetch_friends(steam_id))
        player = await self.collector.get_profile(steam_id)

        if is_error(player):
            self._detach(friends_task)
            return player

        games_task = asyncio.create_task(self.fetch_games(player, steam_id))
        friends, games = await asyncio.gather(friends_task, games_task)
        return AggregatedProfile(player=player, friends=friends, games=games).to_dict()

    async def fetch_friends(self, steam_id: str) -> list[Profile]:
        raw_friends = await self.collector.get_friend_list(steam_id)
        return await self.friends_enricher.enrich(raw_friends, steam_id)

    async def fetch_games(self, player: Profile, steam_id: str) -> list[GameSummary]:
        games = await self.games_provider.recent_games(player.get("profileurl") or "", steam_id)
        return await self.games_enricher.enrich(games, steam_id)

    def _detach(self, task: asyncio.Task) -> None:
        """Let ``task`` run to completion without anyone awaiting its result."""
        self._detached.add(task)
        task.add_done_callback(self._on_detached_done)

    def _on_detached_done(self, task: asyncio.Task) -> None:
        self._detached.discard(task)
        if not task.cancelled() and task.exception() is not None:
            self.logger.error(f"Discarded background fetch failed: {task.exception()!r}")

    async def drain(self) -> None:
        """Wait for all detached work; used on shutdown."""
        if self._detached:
            await asyncio.gather(*list(self._detached), return_exceptions=True)


def build_profile_app(settings: Settings, session) -> SteamProfileApp:
    """Wire collector, games provider and app around a shared aiohttp session."""
    collector = SteamWebAPICollector(session, SteamAPIConfig.from_settings(settings), settings)
    if settings.games_source == "api":
        games_provider: GamesListProvider = collector
    else:
        games_provider = SteamCommunityGamesScraper(session, settings)
    return SteamProfileApp(settings, collector, games_provider)

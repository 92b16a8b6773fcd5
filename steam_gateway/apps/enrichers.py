"""
Enrichers - erweitern rohe Upstream-Listen um Detaildaten

Both enrichers fan out concurrently with ``asyncio.gather`` and join before
returning, preserving input order. Individual failures never abort the batch:
the collector already turned them into sentinels.
"""

import asyncio
import logging
from typing import Any

from ..data_collection.collectors.steam_web_api_collector import SteamWebAPICollector
from ..domain.contracts import GameRef, GameSummary, Profile


class FriendsEnricher:
    """Lädt vollständige Profile für die ersten N Freunde"""

    def __init__(self, collector: SteamWebAPICollector, limit: int = 5):
        self.collector = collector
        self.limit = limit
        self.logger = logging.getLogger("enricher.friends")

    async def enrich(self, raw_friends: Any, steam_id: str) -> list[Profile]:
        if isinstance(raw_friends, dict) and not raw_friends:
            # private friend list or no friends at all
            self.logger.info(
                f"Friends list for profileId={steam_id} is set to private or they have no friends"
            )
            return []

        friends = None
        if isinstance(raw_friends, dict):
            friendslist = raw_friends.get("friendslist")
            if isinstance(friendslist, dict):
                friends = friendslist.get("friends")
        if not isinstance(friends, list) or not friends:
            self.logger.error(f"Generic error encountered processing friends list for profileId={steam_id}")
            return []

        # upstream order is kept, no re-sorting
        selected = friends[: self.limit]
        profiles = await asyncio.gather(
            *(
                self.collector.get_profile(ref.get("steamid") if isinstance(ref, dict) else None)
                for ref in selected
            )
        )
        return list(profiles)


class GamesEnricher:
    """Ergänzt jedes Spiel um die zuletzt freigeschalteten Achievements"""

    def __init__(self, collector: SteamWebAPICollector):
        self.collector = collector
        self.logger = logging.getLogger("enricher.games")

    async def enrich(self, games: Any, steam_id: str) -> list[GameSummary]:
        if isinstance(games, (list, tuple)) and not games:
            self.logger.info(
                f"Games list for profileId={steam_id} is set to private or they don't own any games"
            )
            return []
        if not isinstance(games, (list, tuple)) or not all(isinstance(g, GameRef) for g in games):
            self.logger.error(f"Generic error encountered processing games list for profileId={steam_id}")
            return []

        return list(await asyncio.gather(*(self._summarize(game, steam_id) for game in games)))

    async def _summarize(self, game: GameRef, steam_id: str) -> GameSummary:
        achievements = await self.collector.get_achievements(game.app_id, steam_id)
        return GameSummary(
            app_id=game.app_id, name=game.name, logo=game.logo, achievements=achievements
        )

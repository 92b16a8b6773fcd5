"""
Steam Web API Collector
Sammelt Profil-, Freundes- und Achievement-Daten von api.steampowered.com

Every public coroutine performs a single attempt per upstream call and never
raises: failures are logged and turned into the sentinel documented on each
method.
"""

import asyncio
from typing import Any, Union

from ...common.errors import MalformedUpstreamData, UpstreamError
from ...common.http import build_headers, fetch_json
from ...common.identifiers import is_steam64
from ...core.config import Settings, SteamAPIConfig
from ...domain.contracts import AchievementRecord, GameRef, Profile, profile_not_found
from ...domain.utils import merge_achievements, most_recent
from .base import GamesListProvider, UpstreamCollector

ICON_URL = "https://media.steampowered.com/steamcommunity/public/images/apps/{appid}/{icon}.jpg"


def _dig(payload: Any, *keys: str, url: str = "") -> Any:
    """Walk nested mappings, raising MalformedUpstreamData on a missing level."""
    current = payload
    for key in keys:
        if not isinstance(current, dict) or key not in current:
            raise MalformedUpstreamData(f"missing '{key}' in response", url=url)
        current = current[key]
    return current


class SteamWebAPICollector(UpstreamCollector, GamesListProvider):
    """Datensammler für die Steam Web API"""

    def __init__(self, session, api_config: SteamAPIConfig, settings: Settings):
        super().__init__("steam_web_api", session)
        self.api_config = api_config
        self.games_limit = settings.games_limit
        self.achievements_limit = settings.achievements_limit

    async def _make_request(self, endpoint: str, params: dict) -> dict:
        """Macht einen API Request (ein Versuch, API-Key im Query-String)"""
        url = self.api_config.url_for(endpoint)
        query = dict(params)
        if self.api_config.api_key:
            query["key"] = self.api_config.api_key
        headers = build_headers(self.api_config.headers["User-Agent"], accept_json=True)

        data = await fetch_json(self.session, url, params=query, headers=headers)
        if not isinstance(data, dict):
            raise MalformedUpstreamData("expected a JSON object", url=url)
        return data

    async def resolve_vanity_name(self, name: str) -> dict:
        """Resolve a vanity name. Returns ``{steamid, success}`` or ``{}``."""
        try:
            data = await self._make_request("resolve_vanity_url", {"vanityurl": name})
            response = _dig(data, "response")
            if not isinstance(response, dict):
                raise MalformedUpstreamData("'response' is not an object")
            return response
        except UpstreamError as e:
            self.log_upstream_failure(e, "profile id", vanity_username=name)
            return {}

    async def get_profile(self, steam_id: str) -> Profile:
        """Player summary for ``steam_id`` or ``{"error": ...}`` when unavailable."""
        if not is_steam64(str(steam_id)):
            self.logger.error(f"Refusing profile lookup for invalid profileId={steam_id}")
            return profile_not_found(steam_id)
        try:
            data = await self._make_request("player_summaries", {"steamids": steam_id})
            players = _dig(data, "response", "players")
            if not isinstance(players, list):
                raise MalformedUpstreamData("'players' is not a list")
        except UpstreamError as e:
            self.log_upstream_failure(e, "profile data", profileId=steam_id)
            return profile_not_found(steam_id)

        if not players or not isinstance(players[0], dict):
            self.logger.warning(f"No profile data returned from Steam API for profileId={steam_id}")
            return profile_not_found(steam_id)
        return players[0]

    async def get_friend_list(self, steam_id: str) -> Union[dict, list]:
        """Raw ``GetFriendList`` payload.

        Returns the upstream mapping (``{}`` when Steam has no data) or ``[]``
        when the call itself failed, including the private-list case.
        """
        if not is_steam64(str(steam_id)):
            self.logger.error(f"Refusing friend list lookup for invalid profileId={steam_id}")
            return []
        try:
            return await self._make_request(
                "friend_list", {"relationship": "friend", "steamid": steam_id}
            )
        except UpstreamError as e:
            self.log_upstream_failure(e, "Friends list", profileId=steam_id)
            return []

    async def get_achievements(self, app_id: Any, steam_id: str) -> list[AchievementRecord]:
        """Most recently unlocked achievements of ``steam_id`` in ``app_id``.

        Player progress and the game schema are requested concurrently and
        joined by achievement id. Returns at most ``achievements_limit``
        records, newest unlock first, or ``[]``.
        """
        if app_id in (None, "") or not is_steam64(str(steam_id)):
            self.logger.error(
                f"Refusing achievement lookup for gameId={app_id} profileId={steam_id}"
            )
            return []

        player_data, schema_data = await asyncio.gather(
            self._make_request("player_achievements", {"appid": app_id, "steamid": steam_id}),
            self._make_request("game_schema", {"appid": app_id}),
            return_exceptions=True,
        )
        for result in (player_data, schema_data):
            if isinstance(result, UpstreamError):
                self.log_upstream_failure(result, "achievement data", gameId=app_id)
                return []
            if isinstance(result, BaseException):
                raise result

        try:
            stats = _dig(player_data, "playerstats")
            if not isinstance(stats, dict):
                raise MalformedUpstreamData("'playerstats' is not an object")
        except UpstreamError as e:
            self.log_upstream_failure(e, "achievement data", gameId=app_id)
            return []

        player_records = stats.get("achievements") or []
        if not player_records:
            self.logger.debug(f"No achievements for gameId={app_id} profileId={steam_id}")
            return []
        game = schema_data.get("game")
        stats_block = game.get("availableGameStats") if isinstance(game, dict) else None
        schema_records = (stats_block.get("achievements") or []) if isinstance(stats_block, dict) else []

        return merge_achievements(player_records, schema_records, limit=self.achievements_limit)

    async def recent_games(self, profile_url: str, steam_id: str) -> list[GameRef]:
        """Recently played games from ``IPlayerService/GetOwnedGames``.

        ``profile_url`` is unused; it is part of the provider interface.
        """
        try:
            data = await self._make_request(
                "owned_games",
                {"steamid": steam_id, "include_appinfo": 1, "include_played_free_games": 1},
            )
            response = _dig(data, "response")
        except UpstreamError as e:
            self.log_upstream_failure(e, "Games list", profileId=steam_id)
            return []

        games = response.get("games") if isinstance(response, dict) else None
        if not isinstance(games, list):
            self.logger.info(f"Games list for profileId={steam_id} is private or empty")
            return []

        refs = []
        for game in games:
            if not isinstance(game, dict) or game.get("appid") is None:
                continue
            icon = game.get("img_icon_url")
            refs.append(
                GameRef(
                    app_id=int(game["appid"]),
                    name=game.get("name"),
                    logo=ICON_URL.format(appid=game["appid"], icon=icon) if icon else None,
                    last_played=int(game.get("rtime_last_played") or 0),
                )
            )
        return most_recent(refs, key=lambda g: g.last_played, limit=self.games_limit)

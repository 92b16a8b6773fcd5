"""
Steam Community Games Scraper für das Steam Profile Gateway

Liest die "Games"-Seite eines Community-Profils und extrahiert das
eingebettete ``rgGames`` JSON-Array. Die Seite wird nur als Daten behandelt,
kein Script wird ausgeführt.
"""

import json
import re
from typing import Any, Optional

from bs4 import BeautifulSoup

from ...common.errors import MalformedUpstreamData, PermissionDenied, UpstreamError
from ...core.config import Settings
from ...domain.contracts import GameRef
from ...domain.utils import most_recent
from ..collectors.base import GamesListProvider
from .base import BaseScraper, ScrapingConfig

GAMES_VARIABLE = "rgGames"
GAMES_ASSIGNMENT = re.compile(r"var\s+rgGames\s*=\s*")

_decoder = json.JSONDecoder()


def find_games_script(soup: BeautifulSoup) -> Optional[str]:
    """Body of the first inline <script> that assigns ``var rgGames``."""
    for script in soup.find_all("script"):
        text = script.string or script.get_text()
        if text and GAMES_VARIABLE in text and GAMES_ASSIGNMENT.search(text):
            return text
    return None


def extract_games_json(script_text: str) -> list[dict[str, Any]]:
    """Decode the array assigned to ``var rgGames`` inside ``script_text``."""
    match = GAMES_ASSIGNMENT.search(script_text)
    if not match:
        raise MalformedUpstreamData("no 'var rgGames =' assignment in script")
    try:
        games, _ = _decoder.raw_decode(script_text, match.end())
    except ValueError as e:
        raise MalformedUpstreamData(f"rgGames is not valid JSON: {e}") from e
    if not isinstance(games, list):
        raise MalformedUpstreamData("rgGames is not an array")
    return games


class SteamCommunityGamesScraper(BaseScraper, GamesListProvider):
    """Scraper für die Spieleliste eines Steam-Community-Profils"""

    def __init__(self, session, settings: Settings):
        config = ScrapingConfig(
            user_agent=settings.user_agent,
            params={"tab": "all"},
            limit=settings.games_limit,
        )
        super().__init__(config, session, "steam_community_games")

    async def recent_games(self, profile_url: str, steam_id: str) -> list[GameRef]:
        return await self.scrape_data(profile_url, steam_id=steam_id)

    async def scrape_data(self, url: str, **context: Any) -> list[GameRef]:
        """Scrapt die zuletzt gespielten Spiele; ``[]`` bei jedem Fehler"""
        steam_id = context.get("steam_id")
        if not url:
            self.logger.error(f"No profile URL to scrape games for profileId={steam_id}")
            return []

        games_url = f"{url.rstrip('/')}/games/"
        try:
            html = await self.fetch_page(games_url, params=self.config.params)
            return self.parse_games(html)
        except UpstreamError as e:
            if isinstance(e, PermissionDenied):
                self.logger.warning(f"Games list for profileId={steam_id} is set to private")
            else:
                self.logger.error(
                    f"Error retrieving games data by scraping Steam for profileId={steam_id}: {e}"
                )
            return []

    def parse_games(self, html: str) -> list[GameRef]:
        """Extract, sort by ``last_played`` (newest first) and truncate."""
        script = find_games_script(self.parse_html(html))
        if script is None:
            raise MalformedUpstreamData(f"no script block containing {GAMES_VARIABLE}")

        refs = []
        for item in extract_games_json(script):
            try:
                refs.append(GameRef.from_scraped(item))
            except (KeyError, TypeError, ValueError) as e:
                self.logger.debug(f"Skipping malformed rgGames entry {item!r}: {e}")
        return most_recent(refs, key=lambda g: g.last_played, limit=self.config.limit)

"""
Unit tests for SteamCommunityGamesScraper
"""

import logging

import aiohttp
import pytest

from steam_gateway.common.errors import MalformedUpstreamData
from steam_gateway.data_collection.scrapers.steam_games_scraper import (
    SteamCommunityGamesScraper,
    extract_games_json,
)
from tests.fakes import PLAYER_ID, PROFILE_URL, DummyResponse, DummySession, games_page, rg_games


class TestSteamCommunityGamesScraper:
    """Test cases for SteamCommunityGamesScraper"""

    @pytest.fixture
    def scraper(self, settings):
        return SteamCommunityGamesScraper(DummySession(), settings)

    def test_parse_games_keeps_ten_most_recent(self, scraper, sample_games_html):
        games = scraper.parse_games(sample_games_html)

        expected = sorted(rg_games(15), key=lambda g: g["last_played"], reverse=True)[:10]
        assert [g.app_id for g in games] == [g["appid"] for g in expected]
        assert games[0].name == expected[0]["name"]
        assert games[0].logo == expected[0]["logo"]

    def test_parse_games_without_script_raises(self, scraper):
        with pytest.raises(MalformedUpstreamData):
            scraper.parse_games("<html><body><script>var x = 1;</script></body></html>")

    def test_extract_ignores_trailing_statements(self):
        script = 'var rgGames = [{"appid": 1, "name": "a;b]"}]; var rgOther = [1];'
        assert extract_games_json(script) == [{"appid": 1, "name": "a;b]"}]

    def test_extract_invalid_json_raises(self):
        with pytest.raises(MalformedUpstreamData):
            extract_games_json("var rgGames = [{appid: 1}];")

    def test_entries_without_appid_are_skipped(self, scraper):
        html = games_page([{"name": "broken"}, {"appid": 7, "name": "ok", "last_played": 1}])
        assert [g.app_id for g in scraper.parse_games(html)] == [7]

    @pytest.mark.asyncio
    async def test_recent_games_requests_all_tab(self, settings, sample_games_html):
        session = DummySession({"/games/": DummyResponse(body=sample_games_html)})
        scraper = SteamCommunityGamesScraper(session, settings)

        games = await scraper.recent_games(PROFILE_URL, PLAYER_ID)

        assert len(games) == 10
        url, params = session.calls[0]
        assert url == "https://steamcommunity.com/id/gaben/games/"
        assert params == {"tab": "all"}

    @pytest.mark.asyncio
    async def test_private_page_returns_empty(self, settings, caplog):
        session = DummySession({"/games/": DummyResponse(status=401)})
        scraper = SteamCommunityGamesScraper(session, settings)

        with caplog.at_level(logging.WARNING, logger="scraper.steam_community_games"):
            assert await scraper.recent_games(PROFILE_URL, PLAYER_ID) == []
        assert "set to private" in caplog.text

    @pytest.mark.asyncio
    async def test_transport_error_returns_empty(self, settings):
        session = DummySession({"/games/": aiohttp.ClientConnectionError("reset")})
        scraper = SteamCommunityGamesScraper(session, settings)
        assert await scraper.recent_games(PROFILE_URL, PLAYER_ID) == []

    @pytest.mark.asyncio
    async def test_page_without_blob_returns_empty(self, settings):
        session = DummySession({"/games/": DummyResponse(body="<html><body>nothing</body></html>")})
        scraper = SteamCommunityGamesScraper(session, settings)
        assert await scraper.recent_games(PROFILE_URL, PLAYER_ID) == []

    @pytest.mark.asyncio
    async def test_broken_json_returns_empty(self, settings):
        body = "<html><body><script>var rgGames = [{broken</script></body></html>"
        session = DummySession({"/games/": DummyResponse(body=body)})
        scraper = SteamCommunityGamesScraper(session, settings)
        assert await scraper.recent_games(PROFILE_URL, PLAYER_ID) == []

    @pytest.mark.asyncio
    async def test_undecodable_page_returns_empty(self, settings):
        body = b"<html><body><script>var rgGames = [];</script>\xff\xfe</body></html>"
        session = DummySession({"/games/": DummyResponse(body=body)})
        scraper = SteamCommunityGamesScraper(session, settings)
        assert await scraper.recent_games(PROFILE_URL, PLAYER_ID) == []

    @pytest.mark.asyncio
    async def test_missing_profile_url_makes_no_request(self, settings):
        session = DummySession()
        scraper = SteamCommunityGamesScraper(session, settings)
        assert await scraper.recent_games("", PLAYER_ID) == []
        assert session.calls == []

    def test_games_limit_comes_from_settings(self, settings):
        settings.games_limit = 3
        scraper = SteamCommunityGamesScraper(DummySession(), settings)
        html = games_page(rg_games(15))
        assert len(scraper.parse_games(html)) == 3

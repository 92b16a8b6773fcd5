"""
Zentrale Konfiguration für das Steam Profile Gateway
Basiert auf Pydantic Settings mit Environment Variable Support
"""

from typing import Literal, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application Settings mit Environment Variable Support

    Wird genau einmal beim Start erzeugt (main.py / CLI) und explizit an
    Collector, Scraper, App und FastAPI-Factory weitergereicht.
    """

    # Steam Web API
    steam_api_key: Optional[str] = None
    steam_api_base_url: str = "https://api.steampowered.com"

    # Upstream HTTP
    request_timeout_seconds: float = 15.0
    connection_pool_size: int = 100
    user_agent: str = "steam-profile-gateway/1.0"

    # Aggregation limits
    friends_limit: int = 5
    games_limit: int = 10
    achievements_limit: int = 6
    # "scrape": community games page, "api": IPlayerService/GetOwnedGames
    games_source: Literal["scrape", "api"] = "scrape"

    # API
    api_host: str = "0.0.0.0"
    host_port: int = 4000
    static_dir: str = "public"
    cors_origins: list[str] = ["*"]

    # Monitoring
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"

    # Application
    environment: str = "development"  # development, staging, production

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


class SteamAPIConfig:
    """Konfiguration für die Steam Web API"""

    ENDPOINTS = {
        "resolve_vanity_url": "/ISteamUser/ResolveVanityURL/v1/",
        "player_summaries": "/ISteamUser/GetPlayerSummaries/v0002/",
        "friend_list": "/ISteamUser/GetFriendList/v0001/",
        "player_achievements": "/ISteamUserStats/GetPlayerAchievements/v1/",
        "game_schema": "/ISteamUserStats/GetSchemaForGame/v2/",
        "owned_games": "/IPlayerService/GetOwnedGames/v1/",
    }

    def __init__(
        self,
        name: str,
        base_url: str,
        api_key: Optional[str],
        headers: dict[str, str],
        endpoints: dict[str, str],
    ):
        self.name = name
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.headers = headers
        self.endpoints = endpoints

    @classmethod
    def from_settings(cls, settings: Settings) -> "SteamAPIConfig":
        return cls(
            name="steam_web_api",
            base_url=settings.steam_api_base_url,
            api_key=settings.steam_api_key,
            headers={"User-Agent": settings.user_agent},
            endpoints=dict(cls.ENDPOINTS),
        )

    def url_for(self, endpoint: str) -> str:
        return f"{self.base_url}{self.endpoints[endpoint]}"

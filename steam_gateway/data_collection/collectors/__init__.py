"""
Data Collection Collectors Package

Enthält die Datensammler für die Steam Web API.
"""

from .base import GamesListProvider, UpstreamCollector
from .steam_web_api_collector import SteamWebAPICollector

__all__ = ["UpstreamCollector", "GamesListProvider", "SteamWebAPICollector"]

"""
Scrapers Package

Enthält die HTML-Scraper für Steam-Community-Profilseiten.
"""

from .base import BaseScraper, ScrapingConfig
from .steam_games_scraper import SteamCommunityGamesScraper

__all__ = ["BaseScraper", "ScrapingConfig", "SteamCommunityGamesScraper"]

"""
Base classes and utilities for web scraping.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from bs4 import BeautifulSoup

from ...common.http import build_headers, fetch_text

# =============================================================================
# 1. SCRAPING CONFIGURATION
# =============================================================================


@dataclass
class ScrapingConfig:
    """Konfiguration für Web Scraping"""

    user_agent: str
    params: dict[str, str] = field(default_factory=dict)
    limit: int = 10


# =============================================================================
# 2. BASE SCRAPER CLASSES
# =============================================================================


class BaseScraper(ABC):
    """Abstrakte Basisklasse für alle Scraper

    The aiohttp session is owned by the application and shared with the
    collectors; scrapers never open or close it.
    """

    def __init__(self, config: ScrapingConfig, session, name: str):
        self.config = config
        self.session = session
        self.name = name
        self.logger = logging.getLogger(f"scraper.{name}")

    @abstractmethod
    async def scrape_data(self, url: str, **context: Any) -> list:
        """Hauptmethode zum Scrapen von Daten"""
        pass

    async def fetch_page(self, url: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Lädt eine Webseite herunter (ein Versuch)"""
        headers = build_headers(self.config.user_agent, accept_json=False)
        return await fetch_text(self.session, url, params=params, headers=headers)

    def parse_html(self, html: str) -> BeautifulSoup:
        """Parst HTML mit BeautifulSoup"""
        return BeautifulSoup(html, "html.parser")

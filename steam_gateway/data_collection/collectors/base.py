"""
Base classes for upstream collectors in the Steam Profile Gateway.
"""

import logging
from abc import ABC, abstractmethod

from ...common.errors import PermissionDenied, UpstreamError
from ...domain.contracts import GameRef


class UpstreamCollector(ABC):
    """Abstract base class for all collectors talking to a Steam upstream."""

    def __init__(self, name: str, session):
        self.name = name
        self.session = session
        self.logger = logging.getLogger(f"collector.{name}")

    def log_upstream_failure(self, error: UpstreamError, what: str, **context) -> None:
        """Log a swallowed upstream failure, keeping the private case distinct."""
        ctx = " ".join(f"{k}={v}" for k, v in context.items())
        if isinstance(error, PermissionDenied):
            self.logger.warning(f"{what} for {ctx} is set to private")
        else:
            self.logger.error(f"Error retrieving {what} from {self.name} for {ctx}: {error}")


class GamesListProvider(ABC):
    """Source of a player's most recently played games.

    Implemented by the community page scraper and by the Web API collector so
    that either can feed the games enricher.
    """

    @abstractmethod
    async def recent_games(self, profile_url: str, steam_id: str) -> list[GameRef]:
        """Return up to ``games_limit`` games, most recently played first.

        Never raises; failures yield an empty list.
        """
        pass

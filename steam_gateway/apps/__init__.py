"""
Applications Package für das Steam Profile Gateway

Enthält die Aggregations-App, die Enricher und die CLI.
"""

from .enrichers import FriendsEnricher, GamesEnricher
from .profile_app import SteamProfileApp, build_profile_app

__all__ = ["SteamProfileApp", "build_profile_app", "FriendsEnricher", "GamesEnricher"]

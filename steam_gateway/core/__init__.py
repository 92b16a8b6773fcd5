"""
Core Module
Zentrale Konfiguration und Settings
"""

from .config import Settings, SteamAPIConfig

__all__ = ["Settings", "SteamAPIConfig"]

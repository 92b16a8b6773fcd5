"""
API Models
Pydantic Models für die API-Dokumentation

The steam endpoints return upstream payloads unchanged, so these models
document the response shapes without filtering them.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class VanityResolutionResponse(BaseModel):
    """Aufgelöste Steam64 id; leer bei numerischer Eingabe"""

    steam_id: Optional[str] = Field(default=None, alias="steamId")


class GameResponse(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: Optional[str] = None
    app_id: int = Field(alias="appId")
    logo: Optional[str] = None
    achievements: list[dict[str, Any]] = []


class AggregatedProfileResponse(BaseModel):
    """Spieler, bis zu 5 Freunde und bis zu 10 Spiele"""

    player: dict[str, Any]
    friends: list[dict[str, Any]] = []
    games: list[GameResponse] = []


class HealthResponse(BaseModel):
    """Health check response model"""

    status: str
    timestamp: datetime

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# Typed data transfer objects shared across layers.
# Profiles and achievement records are opaque upstream mappings passed
# through to the front-end unchanged, so they stay plain dicts.

Profile = Dict[str, Any]
AchievementRecord = Dict[str, Any]

INVALID_ID_MESSAGE = (
    "An invalid id value was provided to the server. "
    "Please either provide a Steam64 id or vanity username."
)
VANITY_NOT_FOUND_MESSAGE = (
    "We're sorry, we are unable to find your user profile. "
    "Please ensure your Steam64 id or vanity username are entered correctly."
)


def error_body(message: str) -> Dict[str, str]:
    return {"error": message}


def profile_not_found(steam_id: str) -> Profile:
    return error_body(f"User with Steam64 id of {steam_id} cannot be found!")


def is_error(payload: Any) -> bool:
    return isinstance(payload, dict) and bool(payload.get("error"))


@dataclass
class GameRef:
    app_id: int
    name: Optional[str] = None
    logo: Optional[str] = None
    last_played: int = 0

    @classmethod
    def from_scraped(cls, item: Dict[str, Any]) -> "GameRef":
        """Build from one ``rgGames`` entry; raises KeyError/ValueError on bad shape."""
        return cls(
            app_id=int(item["appid"]),
            name=item.get("name"),
            logo=item.get("logo"),
            last_played=int(item.get("last_played") or 0),
        )


@dataclass
class GameSummary:
    app_id: int
    name: Optional[str]
    logo: Optional[str]
    achievements: List[AchievementRecord] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "appId": self.app_id,
            "logo": self.logo,
            "achievements": self.achievements,
        }


@dataclass
class AggregatedProfile:
    player: Profile
    friends: List[Profile] = field(default_factory=list)
    games: List[GameSummary] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player": self.player,
            "friends": self.friends,
            "games": [g.to_dict() for g in self.games],
        }

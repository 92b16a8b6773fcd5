from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Callable, Dict, List, TypeVar

from .contracts import AchievementRecord

T = TypeVar("T")


def most_recent(items: Iterable[T], key: Callable[[T], Any], limit: int) -> List[T]:
    """Sort descending by ``key`` and keep the first ``limit`` entries (stable)."""
    return sorted(items, key=key, reverse=True)[: max(limit, 0)]


def _unlock_time(record: Dict[str, Any]) -> int:
    try:
        return int(record.get("unlocktime") or 0)
    except (TypeError, ValueError):
        return 0


def merge_achievements(
    player_records: Sequence[Dict[str, Any]],
    schema_records: Sequence[Dict[str, Any]],
    *,
    limit: int,
) -> List[AchievementRecord]:
    """Join player unlock records with the game schema by achievement id.

    Player records carry ``apiname``; schema records carry the same value as
    ``name``. A player record without a schema entry is kept as-is; schema
    entries the player has no record for are dropped. On key collisions the
    player's fields win. Output is sorted by ``unlocktime`` descending.
    """
    schema_by_id = {
        s["name"]: s for s in schema_records if isinstance(s, dict) and s.get("name") is not None
    }
    merged: List[AchievementRecord] = []
    for record in player_records:
        if not isinstance(record, dict):
            continue
        schema = schema_by_id.get(record.get("apiname"), {})
        merged.append({**schema, **record})
    return most_recent(merged, key=_unlock_time, limit=limit)


__all__ = ["most_recent", "merge_achievements"]

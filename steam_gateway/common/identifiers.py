"""Steam identifier cleaning and Steam64 / vanity classification."""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from .errors import InvalidInput

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]+")
_DIGITS = re.compile(r"[0-9]+")

UINT64_MAX = 2**64 - 1


class IdentifierKind(str, Enum):
    NUMERIC = "numeric"
    VANITY = "vanity"


@dataclass(frozen=True)
class SteamIdentifier:
    value: str
    kind: IdentifierKind

    @property
    def is_numeric(self) -> bool:
        return self.kind is IdentifierKind.NUMERIC

    @property
    def is_valid(self) -> bool:
        """False for the empty identifier; it can never resolve upstream."""
        return bool(self.value)


def clean_identifier(raw: str | None) -> str:
    """Drop every character outside ``[A-Za-z0-9]``."""
    return _NON_ALNUM.sub("", raw or "")


def is_steam64(value: str) -> bool:
    """True only if the *whole* string is an unsigned 64-bit integer literal."""
    return bool(_DIGITS.fullmatch(value)) and int(value) <= UINT64_MAX


def normalize_identifier(raw: str | None) -> SteamIdentifier:
    """
    Clean a raw path segment and classify it as a Steam64 id or a vanity name.

    Prefixes ("123abc"), exponents ("1e5") and empty input are all VANITY.
    """
    value = clean_identifier(raw)
    kind = IdentifierKind.NUMERIC if is_steam64(value) else IdentifierKind.VANITY
    return SteamIdentifier(value=value, kind=kind)


def require_steam64(raw: str | None) -> str:
    """Cleaned Steam64 id for ``raw``; raises InvalidInput for anything else."""
    identifier = normalize_identifier(raw)
    if not identifier.is_numeric:
        raise InvalidInput(f"not a Steam64 id: {raw!r}")
    return identifier.value


__all__ = [
    "IdentifierKind",
    "SteamIdentifier",
    "clean_identifier",
    "is_steam64",
    "normalize_identifier",
    "require_steam64",
]

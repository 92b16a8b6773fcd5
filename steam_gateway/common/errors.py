"""Upstream error taxonomy.

Raised by the HTTP helpers in ``steam_gateway.common.http`` and caught at the
boundary of every collector/scraper, which log them and return a sentinel.
"""
from __future__ import annotations

from typing import Optional


class UpstreamError(RuntimeError):
    """Base class for failures talking to a Steam upstream."""

    def __init__(self, message: str, *, url: Optional[str] = None, status: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status = status


class UpstreamUnavailable(UpstreamError):
    """Transport failure or an HTTP error status from the upstream."""


class PermissionDenied(UpstreamError):
    """The upstream reports the resource as private (HTTP 401/403)."""


class NotFound(UpstreamError):
    """The identifier does not resolve to any account or resource."""


class MalformedUpstreamData(UpstreamError):
    """The response body could not be parsed or lacks required fields."""


class InvalidInput(ValueError):
    """A caller-supplied identifier failed validation."""


__all__ = [
    "UpstreamError",
    "UpstreamUnavailable",
    "PermissionDenied",
    "NotFound",
    "MalformedUpstreamData",
    "InvalidInput",
]

"""Shared aiohttp helpers for the Steam upstreams.

One ``aiohttp.ClientSession`` is created per process (see ``create_session``)
and shared by the Web API collector and the community page scraper. Each
helper performs exactly one request and maps every failure onto the
``steam_gateway.common.errors`` taxonomy.
"""
from __future__ import annotations

import asyncio
import json
from typing import TYPE_CHECKING, Any, Mapping, Optional

import aiohttp

from .errors import MalformedUpstreamData, NotFound, PermissionDenied, UpstreamUnavailable

if TYPE_CHECKING:
    from steam_gateway.core.config import Settings

ACCEPT_JSON = "application/json, text/plain, */*"
ACCEPT_HTML = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"

PERMISSION_STATUSES = (401, 403)


def build_headers(user_agent: str, *, accept_json: bool = False) -> dict[str, str]:
    return {
        "User-Agent": user_agent,
        "Accept": ACCEPT_JSON if accept_json else ACCEPT_HTML,
    }


def create_session(settings: "Settings") -> aiohttp.ClientSession:
    """Build the process-wide client session. Must be called inside a running loop."""
    connector = aiohttp.TCPConnector(limit=settings.connection_pool_size)
    return aiohttp.ClientSession(
        headers={"User-Agent": settings.user_agent},
        connector=connector,
        timeout=aiohttp.ClientTimeout(total=settings.request_timeout_seconds),
    )


def _raise_for_status(url: str, status: int) -> None:
    if status in PERMISSION_STATUSES:
        raise PermissionDenied(f"HTTP {status} (private resource)", url=url, status=status)
    if status == 404:
        raise NotFound(f"HTTP {status}", url=url, status=status)
    if status >= 400:
        raise UpstreamUnavailable(f"HTTP {status}", url=url, status=status)


async def fetch_text(
    session: aiohttp.ClientSession,
    url: str,
    *,
    params: Optional[Mapping[str, Any]] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> str:
    """GET ``url`` once and return the body as text."""
    try:
        async with session.get(url, params=params, headers=headers) as response:
            _raise_for_status(url, response.status)
            return await response.text()
    except UnicodeDecodeError as e:
        raise MalformedUpstreamData(f"undecodable body: {e}", url=url) from e
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        raise UpstreamUnavailable(f"request failed: {e!r}", url=url) from e


async def fetch_json(
    session: aiohttp.ClientSession,
    url: str,
    *,
    params: Optional[Mapping[str, Any]] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> Any:
    """GET ``url`` once and decode the body as JSON.

    Steam occasionally answers with an HTML error page and a 200 status, so the
    body is decoded regardless of the declared content type.
    """
    body = await fetch_text(session, url, params=params, headers=headers)
    try:
        return json.loads(body)
    except ValueError as e:
        raise MalformedUpstreamData(f"invalid JSON body: {e}", url=url) from e


__all__ = [
    "build_headers",
    "create_session",
    "fetch_text",
    "fetch_json",
]

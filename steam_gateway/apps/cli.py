"""
Command-line interface for the Steam Profile Gateway.
Usage examples:
  steam-gateway serve --port 4000
  steam-gateway profile 76561197960287930
  steam-gateway resolve gaben
"""

import asyncio
import json
import logging
from typing import Any, Awaitable, Callable, Optional

import click
import uvicorn

from steam_gateway.api.main import create_fastapi_app
from steam_gateway.apps.profile_app import SteamProfileApp, build_profile_app
from steam_gateway.common.http import create_session
from steam_gateway.common.logging_utils import configure_logging
from steam_gateway.core.config import Settings


def run_server(settings: Settings, host: Optional[str] = None, port: Optional[int] = None) -> None:
    """Start uvicorn with the gateway app; logging must already be configured."""
    app = create_fastapi_app(settings)
    port = port or settings.host_port
    logging.getLogger("steam_gateway").info(f"Listening on port {port}")
    uvicorn.run(app, host=host or settings.api_host, port=port, log_config=None)


async def _run_with_app(
    settings: Settings, operation: Callable[[SteamProfileApp], Awaitable[dict[str, Any]]]
) -> dict[str, Any]:
    async with create_session(settings) as session:
        app = build_profile_app(settings, session)
        result = await operation(app)
        await app.drain()
        return result


@click.group()
@click.pass_context
def cli(ctx: click.Context):
    settings = Settings()
    configure_logging(settings, service="steam-gateway-cli")
    ctx.obj = settings


@cli.command()
@click.option("--host", default=None, help="Bind address (default: settings.api_host)")
@click.option("--port", type=int, default=None, help="Listen port (default: HOST_PORT or 4000)")
@click.pass_obj
def serve(settings: Settings, host: Optional[str], port: Optional[int]):
    """Run the HTTP gateway"""
    run_server(settings, host=host, port=port)


@cli.command()
@click.argument("userid")
@click.pass_obj
def profile(settings: Settings, userid: str):
    """Print the aggregated profile for a Steam64 id"""
    result = asyncio.run(_run_with_app(settings, lambda app: app.aggregate_profile(userid)))
    click.echo(json.dumps(result, indent=2, ensure_ascii=False))
    raise SystemExit(1 if "error" in result else 0)


@cli.command()
@click.argument("name")
@click.pass_obj
def resolve(settings: Settings, name: str):
    """Resolve a vanity username to its Steam64 id"""
    result = asyncio.run(_run_with_app(settings, lambda app: app.resolve_vanity(name)))
    click.echo(json.dumps(result, indent=2, ensure_ascii=False))
    raise SystemExit(1 if "error" in result else 0)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()

"""
Steam Profile Gateway - Hauptanwendung

Zentraler Einstiegspunkt: lädt die Settings einmalig, konfiguriert Logging
und startet den HTTP-Server.
"""

import asyncio
import sys

# Windows-specific asyncio policy to avoid 'Event loop is closed' and transport warnings
if sys.platform.startswith("win"):
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

from steam_gateway.apps.cli import run_server  # noqa: E402
from steam_gateway.common.logging_utils import configure_logging  # noqa: E402
from steam_gateway.core.config import Settings  # noqa: E402


def main() -> None:
    settings = Settings()
    configure_logging(settings, service="steam-gateway")
    run_server(settings)


if __name__ == "__main__":
    main()

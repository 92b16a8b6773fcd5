"""
API Dependencies
Dependency Injection für FastAPI
"""

from fastapi import Request

from steam_gateway.apps.profile_app import SteamProfileApp


async def get_profile_app(request: Request) -> SteamProfileApp:
    """Dependency für die Profil-App (geteilt über App-Lebenszyklus)"""
    return request.app.state.profile_app

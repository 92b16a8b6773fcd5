"""
Steam API Endpoints
API Routen für Profil-Aggregation und Vanity-Auflösung

Both routes always answer HTTP 200; errors are reported in the body.
"""

from typing import Any

from fastapi import APIRouter, Depends

from steam_gateway.api.dependencies import get_profile_app
from steam_gateway.api.models import AggregatedProfileResponse, VanityResolutionResponse
from steam_gateway.apps.profile_app import SteamProfileApp

router = APIRouter(prefix="/steam/user")


@router.get(
    "/{userid}/profile",
    responses={
        200: {
            "model": AggregatedProfileResponse,
            "description": 'Aggregated profile, or {"error": ...} for invalid/unknown ids',
        }
    },
)
async def get_user_profile(
    userid: str, profile_app: SteamProfileApp = Depends(get_profile_app)
) -> dict[str, Any]:
    """Player profile, friends and recently played games with achievements"""
    return await profile_app.aggregate_profile(userid)


@router.get(
    "/{userid}/vanityurl",
    responses={
        200: {
            "model": VanityResolutionResponse,
            "description": '{"steamId": ...}, {"error": ...}, or {} for numeric ids',
        }
    },
)
async def resolve_vanity_url(
    userid: str, profile_app: SteamProfileApp = Depends(get_profile_app)
) -> dict[str, Any]:
    """Convert a vanity username into its Steam64 id"""
    return await profile_app.resolve_vanity(userid)

"""
Aggregated API router.
"""

from fastapi import APIRouter

from steam_gateway.api.endpoints import steam

api_router = APIRouter()

# Register endpoint routers here to keep create_fastapi_app clean
api_router.include_router(steam.router, tags=["steam"])

"""
API Module
FastAPI Anwendung, Endpoints und Models
"""

from .dependencies import get_profile_app
from .main import create_fastapi_app
from .models import AggregatedProfileResponse, HealthResponse, VanityResolutionResponse

__all__ = [
    "create_fastapi_app",
    "get_profile_app",
    "AggregatedProfileResponse",
    "HealthResponse",
    "VanityResolutionResponse",
]

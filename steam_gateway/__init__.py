"""
Steam Profile Gateway
Aggregiert Steam Web API und Community-Profilseiten zu einer JSON-Antwort
"""

__version__ = "1.0.0"
__author__ = "Steam Gateway Team"

# NOTE:
# Avoid importing configuration or the FastAPI app at package import time so
# that "import steam_gateway" stays side-effect free for unit tests that only
# need the normalizer or the scraper parsing helpers.

__all__ = []

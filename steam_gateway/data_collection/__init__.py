"""
Data Collection Module
Collectors (Steam Web API) und Scrapers (Steam Community) für die Aggregation

Note: do not import subpackages here to keep package import side-effect free.
Import needed classes directly from their modules.
"""

__all__: list[str] = []

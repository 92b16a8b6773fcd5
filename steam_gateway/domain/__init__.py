"""
Domain Module
DTOs und reine Hilfsfunktionen für die Aggregation
"""

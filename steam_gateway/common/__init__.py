"""
Common Module
HTTP-Helfer, Fehlerklassen, Logging und Identifier-Normalisierung
"""

"""
API Endpoints
"""

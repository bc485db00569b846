"""
API Routers.

FastAPI route definitions, grouped by API version.
"""

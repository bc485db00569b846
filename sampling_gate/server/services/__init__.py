"""Dependency providers shared by the API routers."""

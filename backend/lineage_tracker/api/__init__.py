"""
API route handlers.

This module exports all API routers used in the application.
"""

from lineage_tracker.api.routes import router

__all__ = ["router"]


"""
Tubeline API package.

Provides the FastAPI application for account, session and subscription management.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]

"""Web API for pt-manager."""

from .app import create_app

__all__ = ["create_app"]

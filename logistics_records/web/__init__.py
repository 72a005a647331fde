"""HTTP front-end for the logistics record tables."""

from .app import create_app

__all__ = ["create_app"]

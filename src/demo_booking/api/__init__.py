"""
API package for the Book-a-Demo service.

This package contains the FastAPI contact proxy the landing page modal
posts to.
"""

from .api import app

__all__ = ["app"]

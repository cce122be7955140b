"""
HTTP API for the shopping demo.

This package provides a single FastAPI application that exposes:
- The full shopping demo run
- Direct access to each pattern component
"""

from api.main import app

__all__ = ["app"]

"""
FastAPI Application Module

Provides REST API for shareholder letter search.
"""

from .main import app

__all__ = ["app"]

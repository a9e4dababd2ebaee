"""API endpoints."""

from . import brd, health

__all__ = ["brd", "health"]

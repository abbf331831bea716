"""API Routes"""

from . import health, rooms

__all__ = ["health", "rooms"]

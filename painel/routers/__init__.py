"""API routers module."""

from . import dashboard, health

__all__ = [
    "dashboard",
    "health",
]

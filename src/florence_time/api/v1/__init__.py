# src/florence_time/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    clock_router,
    convert_router,
    system_router,
    timezones_router,
)

__all__ = [
    "clock_router",
    "convert_router",
    "system_router",
    "timezones_router",
]

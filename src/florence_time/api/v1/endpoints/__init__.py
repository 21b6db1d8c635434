# src/florence_time/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .clock import router as clock_router
from .convert import router as convert_router
from .system import router as system_router
from .timezones import router as timezones_router

__all__ = [
    "clock_router",
    "convert_router",
    "system_router",
    "timezones_router",
]

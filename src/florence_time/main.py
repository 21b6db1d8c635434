# src/florence_time/main.py
"""Main entry point for the Florence Time application."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import HTMLResponse

from florence_time.api.v1 import (
    clock_router,
    convert_router,
    system_router,
    timezones_router,
)
from florence_time.core.settings import settings
from florence_time.services.ticker import get_clock_ticker
from florence_time.services.timezones import get_timezone_table

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

PAGE_PATH = Path(__file__).resolve().parent / "static" / "index.html"

# Initialize FastAPI app
app = FastAPI(
    title="Florence Time API",
    description="Universal Florence Hexadecimal Mean Time clock and converter",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

# Include API routers
app.include_router(clock_router, prefix="/api/v1")
app.include_router(convert_router, prefix="/api/v1")
app.include_router(timezones_router, prefix="/api/v1")
app.include_router(system_router, prefix="/api/v1")


@app.on_event("startup")
async def on_startup() -> None:
    logger.info("Starting %s %s", settings.app_name, settings.app_version)
    await get_timezone_table().load()
    if settings.clock_ticker_enabled:
        await get_clock_ticker().start()


@app.on_event("shutdown")
async def on_shutdown() -> None:
    await get_clock_ticker().stop()


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/", response_class=HTMLResponse)
async def web_interface() -> str:
    """Serve the clock and converter page."""
    try:
        return PAGE_PATH.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("Failed to read %s: %s", PAGE_PATH, exc)
        return """
        <h1>Error: index.html not found</h1>
        <p>You can access the API documentation at <a href="/docs">/docs</a></p>
        """


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("florence_time.main:app", host="0.0.0.0", port=8000, reload=settings.debug)

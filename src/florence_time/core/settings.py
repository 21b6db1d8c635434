"""Application settings and configuration.

This module defines all configuration options for the Florence Time service.
Settings are loaded from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="Florence Time", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Timezone table source; the packaged table is used when both are unset
    timezone_table_path: str | None = Field(default=None, alias="TIMEZONE_TABLE_PATH")
    timezone_table_url: str | None = Field(default=None, alias="TIMEZONE_TABLE_URL")
    timezone_fetch_timeout_seconds: float = Field(
        default=10.0,
        alias="TIMEZONE_FETCH_TIMEOUT_SECONDS",
    )

    # Passive clock display
    clock_tick_interval_ms: int = Field(default=300, alias="CLOCK_TICK_INTERVAL_MS")
    clock_ticker_enabled: bool = Field(default=True, alias="CLOCK_TICKER_ENABLED")
    clock_resolution: int = Field(default=4, alias="CLOCK_RESOLUTION")

    # Interactive converter
    converter_resolution: int = Field(default=2, alias="CONVERTER_RESOLUTION")
    initial_fraction: float = Field(default=0.5, ge=0.0, lt=1.0, alias="INITIAL_FRACTION")

    # CORS configuration for web frontend access
    cors_origins: list[str] = Field(
        default=["*"],
        alias="CORS_ORIGINS",
    )
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(
        default=["*"],
        alias="CORS_ALLOW_HEADERS",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def timezone_source(self) -> str:
        """Describe where the timezone table is loaded from.

        Returns:
            ``"url"``, ``"path"`` or ``"packaged"``
        """
        if self.timezone_table_url:
            return "url"
        if self.timezone_table_path:
            return "path"
        return "packaged"


settings = Settings()

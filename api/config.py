"""
Configuration management for the SailFrisco API.
Loads environment variables and provides typed configuration.
"""
from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ========================================================================
    # API Configuration
    # ========================================================================
    api_host: str = "0.0.0.0"
    api_port: int = 5174

    # ========================================================================
    # CORS Configuration
    # ========================================================================
    cors_origins: str = "http://localhost:5173"

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ========================================================================
    # Application Configuration
    # ========================================================================
    environment: str = "development"
    log_level: str = "info"

    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.environment.lower() == "development"

    # ========================================================================
    # Cache Configuration
    # ========================================================================
    cache_ttl_ms: int = Field(default=60_000, gt=0)
    cache_max_items: int = Field(default=500, gt=0)

    # ========================================================================
    # Upstream Providers
    # ========================================================================
    # Open-Meteo forecast (no key required)
    open_meteo_url: str = "https://api.open-meteo.com/v1/forecast"

    # NOAA CO-OPS tide predictions
    noaa_tides_url: str = "https://api.tidesandcurrents.noaa.gov/api/prod/datagetter"
    noaa_application: str = "sailfrisco"

    upstream_timeout_seconds: float = Field(default=15.0, gt=0)

    # ========================================================================
    # Tides
    # ========================================================================
    default_tide_station: str = "9414290"  # San Francisco
    station_timezone: str = "America/Los_Angeles"
    tide_grace_minutes: float = Field(default=5.0, ge=0)

    # ========================================================================
    # Pydantic Settings Configuration
    # ========================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Application settings
    """
    return Settings()

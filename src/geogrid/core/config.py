"""
Configuration settings for geogrid.
"""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Library settings with environment variable support.

    Attributes:
        environment: Deployment environment, drives logging defaults
        log_level: Explicit log level; derived from environment when unset
        json_logs: Whether file logs are written as JSON
        default_mgrs_precision: Digits per axis produced by to_mgrs()
        wgs_format_decimals: Rounding applied to DDM/DMS components
        band_tolerance_south_deg: Degrees a UTM point may sit south of its band
        band_tolerance_north_deg: Degrees a UTM point may sit north of its band
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="GEOGRID_",
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "staging", "production"] = "development"

    # Logging
    log_level: Optional[str] = None
    json_logs: bool = False

    # Conversion defaults
    default_mgrs_precision: int = Field(default=5, ge=0, le=5)
    wgs_format_decimals: int = Field(default=10, ge=0, le=15)

    # UTM band consistency; the south allowance covers MGRS square corners
    band_tolerance_south_deg: float = Field(default=1.0, ge=0.0)
    band_tolerance_north_deg: float = Field(default=1e-4, ge=0.0)

    @property
    def resolved_log_level(self) -> str:
        """Get the log level, defaulting by environment."""
        if self.log_level:
            return self.log_level.upper()
        return "DEBUG" if self.environment == "development" else "INFO"


# Global settings instance
settings = Settings()

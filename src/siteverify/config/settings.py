"""Harness settings using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from siteverify.core.exceptions import ConfigurationError


class TimeoutConfig(BaseModel):
    """Named wait budgets, in milliseconds.

    Every bounded wait in the harness uses exactly one of these entries.
    Built once from Settings and passed to each component at construction.
    """

    model_config = ConfigDict(frozen=True)

    navigation: float = Field(default=30_000, gt=0, description="Page load budget")
    network_idle: float = Field(default=5_000, gt=0, description="Network idle budget")
    visibility: float = Field(default=10_000, gt=0, description="Element visibility budget")
    animation: float = Field(default=1_000, gt=0, description="Animation settle pause")


class Settings(BaseSettings):
    """siteverify configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # Application
    app_name: str = Field(default="siteverify", description="Bound to every log event as `app`")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Minimum log level"
    )

    # Target site
    base_url: str = Field(
        default="https://www.lucanet.com/en/", description="Homepage URL under test"
    )

    # Browser viewport used by the test tooling
    viewport_width: int = Field(default=1280, ge=1, description="Viewport width in px")
    viewport_height: int = Field(default=720, ge=1, description="Viewport height in px")

    # Timeouts (milliseconds)
    navigation_timeout_ms: float = Field(default=30_000, gt=0)
    network_idle_timeout_ms: float = Field(default=5_000, gt=0)
    visibility_timeout_ms: float = Field(default=10_000, gt=0)
    animation_timeout_ms: float = Field(default=1_000, gt=0)

    # Viewport classification: widths up to and including this value are mobile
    mobile_max_width: int = Field(default=1023, gt=0, description="Mobile breakpoint in px")

    # Per-rule wait when confirming the primary call-to-action navigation
    cta_pattern_timeout_ms: float = Field(default=5_000, gt=0)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base URL format and normalize the trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Base URL must start with http:// or https://")
        return v if v.endswith("/") else f"{v}/"

    def timeout_config(self) -> TimeoutConfig:
        """Build the immutable timeout table from the flat settings."""
        return TimeoutConfig(
            navigation=self.navigation_timeout_ms,
            network_idle=self.network_idle_timeout_ms,
            visibility=self.visibility_timeout_ms,
            animation=self.animation_timeout_ms,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Raises:
        ConfigurationError: If the environment or .env holds invalid values.
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid siteverify settings: {e}") from e

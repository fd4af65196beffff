"""Application settings using Pydantic."""
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Public anonymous key of the hosted scoring service gateway
HOSTED_ANON_TOKEN = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
    "eyJpc3MiOiJzdXBhYmFzZSIsInJlZiI6ImNpbGd3Z3plbmdrZGdlcmR6dGR4Iiwicm9sZSI6ImFub24iLCJpYXQiOjE3NTUxNjI5NjgsImV4cCI6MjA3MDczODk2OH0."
    "EA-ZvV2NLo3Whnge3dI1wDzmmB1qNVvEZOXldRChx1w"
)


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LEGITMATE_",
        extra="ignore",
    )

    # Custom backend
    api_base: str = Field(
        default="",
        description="Base URL of a custom prediction API; empty uses the built-in tiers",
    )
    api_key: Optional[str] = Field(
        default=None,
        description="Account API key forwarded to the hosted scoring service",
    )

    # Hosted scoring service
    hosted_service_token: Optional[str] = Field(
        default=HOSTED_ANON_TOKEN,
        description="Bearer token for the hosted scoring service gateway",
    )

    # Resolution
    request_timeout_seconds: float = Field(
        default=15.0,
        gt=0,
        description="Deadline for each remote resolution tier",
    )
    fallback_delay_seconds: float = Field(
        default=0.65,
        ge=0,
        description="Artificial delay before a local job prediction is returned",
    )
    link_fallback_delay_seconds: float = Field(
        default=0.5,
        ge=0,
        description="Artificial delay before a local link prediction is returned",
    )
    local_scoring_strategy: Literal["quick", "full"] = Field(
        default="quick",
        description="Heuristic used by the local fallback tier",
    )
    lexicon_path: Optional[Path] = Field(
        default=None,
        description="YAML file overriding the built-in keyword and domain tables",
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_file: Optional[str] = Field(
        default=None,
        description="Optional rotating log file path",
    )
    log_format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        description="logging.Formatter format string",
    )


# Global settings instance
settings = Settings()

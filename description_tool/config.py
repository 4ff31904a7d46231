"""Configuration settings for the description tool."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All variables use the ``DESCRIPTION_TOOL_`` prefix, e.g.
    ``DESCRIPTION_TOOL_STRATEGY=markdown``.
    """

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    # Which synthesis strategy backs the default tool
    strategy: Literal["natural", "markdown", "summary"] = "natural"

    # Include exception text in failure envelopes (non-production only)
    debug: bool = False

    class Config:
        env_prefix = "DESCRIPTION_TOOL_"
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

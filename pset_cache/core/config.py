"""Library configuration using Pydantic Settings.

Environment variables are loaded with the PSET_CACHE_ prefix.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pset_cache.core.constants import (
    DEFAULT_ENVIRONMENT,
    DEFAULT_EPS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOOKUP_MAX_DEPTH,
)


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    A session reads these once when it is opened; changing the
    environment afterwards does not affect open sessions.
    """

    # Service configuration
    service_name: str = "pset-cache"
    environment: str = Field(default=DEFAULT_ENVIRONMENT, description="Runtime environment")
    log_level: str = Field(default=DEFAULT_LOG_LEVEL, description="Logging level")

    # Quantization
    eps: float = Field(
        default=DEFAULT_EPS,
        gt=0.0,
        lt=1e-2,
        description="Tolerance used when snapping values to canonical buckets",
    )

    # String interning
    cache_all_label_strings: bool = Field(
        default=False,
        description="Intern every label value, not only the empty string",
    )

    # Parameter lookup
    lookup_max_depth: int = Field(
        default=DEFAULT_LOOKUP_MAX_DEPTH,
        ge=1,
        description="Maximum number of sources visited by a lookup chain",
    )

    model_config = SettingsConfigDict(
        env_prefix="PSET_CACHE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Library settings singleton
    """
    return Settings()

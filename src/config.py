"""Runtime settings for the combinations service."""

import os
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field

ENV_PREFIX = "COMBINATIONS_"


class Settings(BaseModel):
    """Service configuration."""

    word_bits: int = Field(default=64, ge=8, le=1024, description="Width of the unsigned word counts must fit in")
    max_results: int = Field(
        default=1_000_000,
        ge=1,
        description="Maximum number of combinations returned or materialized by one request"
    )
    chunk_size: int = Field(default=10_000, ge=1, description="Default number of ranks per chunk")
    max_n: int = Field(default=10_000, ge=0, description="Largest set size a request may use")
    max_cache_size: int = Field(
        default=100_000,
        ge=0,
        description="Memoized counts kept between requests; the shared counter is cleared above this"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Root logging level"
    )


def load_settings() -> Settings:
    """
    Build settings from defaults overridden by COMBINATIONS_* environment variables.

    Example: COMBINATIONS_MAX_RESULTS=5000 sets max_results.
    """
    overrides = {}
    for name in Settings.model_fields:
        value = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
        if value is not None:
            overrides[name] = value.upper() if name == "log_level" else value
    return Settings(**overrides)


@lru_cache()
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once."""
    return load_settings()

"""Runtime configuration using Pydantic Settings.

Settings come from environment variables prefixed with ``RANGEFILTER_``:

- RANGEFILTER_SEPARATOR=" "
- RANGEFILTER_LOG_LEVEL=DEBUG
- RANGEFILTER_LOG_FILE=/tmp/rangefilter.log
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class RangeFilterConfig(BaseSettings):
    """Application configuration.

    ``separator`` is written after every value on both streams. The default
    empty string produces the bare concatenation of values.

    Log records go to standard error unless ``log_file`` is set. Standard
    error also carries the out-of-range values, so set ``log_file`` when
    raising ``log_level`` above the default.
    """

    model_config = SettingsConfigDict(env_prefix="RANGEFILTER_")

    separator: str = ""
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_file: Path | None = None


@lru_cache(maxsize=1)
def get_config() -> RangeFilterConfig:
    """Return the cached configuration, loading it on first use."""
    return RangeFilterConfig()


def reset_config() -> None:
    """Drop the cached configuration so the next call re-reads the environment."""
    get_config.cache_clear()

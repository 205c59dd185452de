"""Config models and loader.

This module defines Pydantic models for file- and environment-based
configuration. JSON parsing prefers `orjson` when available and falls back to
the Python standard library's `json` module otherwise.
"""

from __future__ import annotations

import json as _json
from pathlib import Path
from typing import Any, Callable, Optional

try:
    import orjson as _orjson_mod  # type: ignore[assignment]
except ImportError:  # pragma: no cover - optional dependency
    _orjson_mod = None  # type: ignore[assignment]
    _loads_orjson: Optional[Callable[[bytes], Any]] = None
else:

    def _loads_orjson(buf: bytes) -> Any:
        loader = getattr(_orjson_mod, "loads")  # type: ignore[assignment]
        return loader(buf)


from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# 8,640,000 ms is 2.4 hours, not one day (86,400,000 ms). Kept as shipped
# until product confirms the intended value.
MAX_CACHE_AGE_MS = 8_640_000


class CacheConfig(BaseModel):
    """Cache behavior settings.

    Attributes
    ----------
    max_age_ms: int
        Maximum age in milliseconds of a cached batch that `load()` still
        returns. Older batches are deleted and reported as not found.
    """

    max_age_ms: int = Field(
        MAX_CACHE_AGE_MS, ge=0, description="Maximum cache age in milliseconds"
    )


class AppConfig(BaseModel):
    """Top-level application configuration.

    Attributes
    ----------
    cache: CacheConfig
        Cache expiry settings.
    """

    cache: CacheConfig = Field(default_factory=CacheConfig)

    @staticmethod
    def load(path: Path) -> "AppConfig":
        """Load application config from a JSON file."""
        raw = path.read_bytes()
        if _loads_orjson is not None:
            data = _loads_orjson(raw)
        else:
            data = _json.loads(raw.decode("utf-8"))
        return AppConfig.model_validate(data)


class EnvSettings(BaseSettings):
    """Environment-driven settings and .env support.

    Attributes
    ----------
    log_level: str
        Logging level name (e.g., "DEBUG", "INFO"). Defaults to "INFO".
    cache_max_age_ms: int
        Maximum cache age in milliseconds. Defaults to 8,640,000.
    """

    model_config = SettingsConfigDict(env_file=".env", env_prefix="CRYPTOFEED_")

    log_level: str = Field("INFO")
    cache_max_age_ms: int = Field(
        MAX_CACHE_AGE_MS,
        ge=0,
        description="Maximum age of a cached batch in milliseconds",
    )

    def cache_config(self) -> CacheConfig:
        """Return the cache section built from environment values."""
        return CacheConfig(max_age_ms=self.cache_max_age_ms)

"""Crypto feed cache: use case, store port, and stored models."""

from __future__ import annotations

from .errors import CacheError, DatabaseError, NotFound
from .memory_store import InMemoryCryptoFeedStore
from .models import (
    CachedCryptoFeed,
    LocalCoinInfo,
    LocalCryptoFeed,
    LocalRaw,
    LocalUsd,
)
from .policy import MAX_CACHE_AGE_MS, cache_age_ms, is_cache_valid
from .store import CryptoFeedStore
from .use_case import CacheCryptoFeedUseCase

__all__ = [
    "CacheCryptoFeedUseCase",
    "CacheError",
    "CachedCryptoFeed",
    "CryptoFeedStore",
    "DatabaseError",
    "InMemoryCryptoFeedStore",
    "LocalCoinInfo",
    "LocalCryptoFeed",
    "LocalRaw",
    "LocalUsd",
    "MAX_CACHE_AGE_MS",
    "NotFound",
    "cache_age_ms",
    "is_cache_valid",
]

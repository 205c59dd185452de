"""Cache use case for the crypto price feed.

Loads the cached feed when it is present and fresh, deletes it when it has
expired, and replaces it wholesale on save. All persistence goes through an
injected :class:`~cryptofeed.cache.store.CryptoFeedStore`; the reference time
comes from an injected clock so expiry is deterministic.

Notes
-----
- Store exceptions never escape: every operation returns a ``Success`` or a
  ``Failure``. ``asyncio.CancelledError`` is not an ``Exception`` and still
  propagates to the caller.
- Operations on one instance are serialized so overlapping saves cannot
  interleave their delete/insert steps.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Callable, Iterable, Optional

from ..config.models import EnvSettings
from ..domain.models import CryptoFeed
from ..domain.results import Failure, LoadCryptoFeedResult, SaveResult, Success
from .errors import DatabaseError, NotFound
from .mapping import to_local, to_models
from .policy import MAX_CACHE_AGE_MS, cache_age_ms, is_cache_valid
from .store import CryptoFeedStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class CacheCryptoFeedUseCase:
    """Load and save the crypto feed through a persistence store.

    Parameters
    ----------
    store: CryptoFeedStore
        Persistence store holding the cached batch.
    clock: Callable[[], datetime]
        Returns the reference time used for expiry checks and insert
        timestamps.
    max_age_ms: int
        Maximum age of a cached batch that `load()` still returns.
    """

    def __init__(
        self,
        store: CryptoFeedStore,
        clock: Clock,
        *,
        max_age_ms: int = MAX_CACHE_AGE_MS,
    ) -> None:
        self._store = store
        self._clock = clock
        self._max_age_ms = max_age_ms
        self._lock = asyncio.Lock()

    @classmethod
    def from_settings(
        cls,
        store: CryptoFeedStore,
        clock: Clock,
        settings: Optional[EnvSettings] = None,
    ) -> "CacheCryptoFeedUseCase":
        """Build a use case whose expiry threshold comes from `settings`.

        When `settings` is omitted they are read from the environment.
        """
        settings = settings or EnvSettings()  # type: ignore[call-arg]
        return cls(store, clock, max_age_ms=settings.cache_config().max_age_ms)

    @property
    def max_age_ms(self) -> int:
        return self._max_age_ms

    async def load(self) -> LoadCryptoFeedResult:
        """Return the cached feed if it exists and has not expired.

        Returns
        -------
        LoadCryptoFeedResult
            ``Success`` with the cached entries, ``Failure(DatabaseError)``
            when the store fails, or ``Failure(NotFound)`` when nothing
            usable is cached. Expired batches are deleted before
            ``NotFound`` is returned; a failed deletion is logged and
            otherwise ignored.
        """
        async with self._lock:
            try:
                cached = await self._store.load()
            except Exception as exc:
                logger.warning(
                    "cache.load.database_error",
                    extra={"error": str(exc), "error_type": type(exc).__name__},
                )
                return Failure(DatabaseError())

            if cached is None or not cached.feeds:
                logger.debug("cache.load.empty")
                return Failure(NotFound())

            now = self._clock()
            age_ms = cache_age_ms(cached.timestamp, now)
            if is_cache_valid(cached.timestamp, now, self._max_age_ms):
                logger.debug(
                    "cache.load.hit",
                    extra={"count": len(cached.feeds), "age_ms": age_ms},
                )
                return Success(to_models(cached.feeds))

            logger.info(
                "cache.load.expired",
                extra={"age_ms": age_ms, "max_age_ms": self._max_age_ms},
            )
            try:
                await self._store.delete_cache()
            except Exception as exc:
                logger.warning(
                    "cache.load.cleanup_failed",
                    extra={"error": str(exc), "error_type": type(exc).__name__},
                )
            return Failure(NotFound())

    async def save(self, feeds: Iterable[CryptoFeed]) -> SaveResult:
        """Replace the cached feed with `feeds`.

        The existing cache is deleted first. If deletion fails, the store's
        exception is returned and nothing is inserted. Otherwise the entries
        are inserted stamped with the clock's current time, and the insert
        outcome is returned.
        """
        async with self._lock:
            try:
                await self._store.delete_cache()
            except Exception as exc:
                logger.warning(
                    "cache.save.delete_failed",
                    extra={"error": str(exc), "error_type": type(exc).__name__},
                )
                return Failure(exc)

            records = to_local(feeds)
            timestamp = self._clock()
            try:
                await self._store.insert(records, timestamp)
            except Exception as exc:
                logger.warning(
                    "cache.save.insert_failed",
                    extra={"error": str(exc), "error_type": type(exc).__name__},
                )
                return Failure(exc)

            logger.info(
                "cache.save.completed",
                extra={"count": len(records), "timestamp": timestamp.isoformat()},
            )
            return Success(None)

"""In-memory crypto feed store.

Holds a single cached batch in process memory. Useful for wiring the cache
use case in demos and tests without a real database. Nothing survives a
process restart.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from .models import CachedCryptoFeed, LocalCryptoFeed

logger = logging.getLogger(__name__)


class InMemoryCryptoFeedStore:
    """Store implementation backed by a single in-memory record.

    Parameters
    ----------
    cached: Optional[CachedCryptoFeed]
        Initial batch to serve from :meth:`load`.

    Attributes
    ----------
    load_calls, delete_calls, insert_calls: int
        Number of times each operation has been invoked.
    load_error, delete_error, insert_error: Optional[Exception]
        When set, the matching operation raises this exception instead of
        touching the stored batch.
    """

    def __init__(self, cached: Optional[CachedCryptoFeed] = None) -> None:
        self._cached: Optional[CachedCryptoFeed] = (
            cached.model_copy(deep=True) if cached is not None else None
        )
        self.load_calls = 0
        self.delete_calls = 0
        self.insert_calls = 0
        self.load_error: Optional[Exception] = None
        self.delete_error: Optional[Exception] = None
        self.insert_error: Optional[Exception] = None

    @property
    def cached(self) -> Optional[CachedCryptoFeed]:
        """Copy of the currently stored batch, if any."""
        if self._cached is None:
            return None
        return self._cached.model_copy(deep=True)

    async def load(self) -> Optional[CachedCryptoFeed]:
        self.load_calls += 1
        if self.load_error is not None:
            raise self.load_error
        return self.cached

    async def delete_cache(self) -> None:
        self.delete_calls += 1
        if self.delete_error is not None:
            raise self.delete_error
        self._cached = None
        logger.debug("memory_store.deleted")

    async def insert(self, feeds: List[LocalCryptoFeed], timestamp: datetime) -> None:
        self.insert_calls += 1
        if self.insert_error is not None:
            raise self.insert_error
        self._cached = CachedCryptoFeed(
            feeds=[feed.model_copy(deep=True) for feed in feeds],
            timestamp=timestamp,
        )
        logger.debug(
            "memory_store.inserted",
            extra={"count": len(feeds), "timestamp": timestamp.isoformat()},
        )

"""Persistence store port for the crypto feed cache."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Protocol

from .models import CachedCryptoFeed, LocalCryptoFeed


class CryptoFeedStore(Protocol):
    """Protocol for crypto feed persistence stores.

    Implementations hold at most one batch of feed entries together with the
    time it was inserted. Every method completes exactly once: it returns
    normally or raises an exception describing the store failure.
    """

    async def load(self) -> Optional[CachedCryptoFeed]:
        """Return the cached batch, or None when nothing has been inserted."""
        raise NotImplementedError

    async def delete_cache(self) -> None:
        """Remove the cached batch. Deleting an empty cache is not an error."""
        raise NotImplementedError

    async def insert(self, feeds: List[LocalCryptoFeed], timestamp: datetime) -> None:
        """Store `feeds` as the cached batch, stamped with `timestamp`."""
        raise NotImplementedError

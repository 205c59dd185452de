"""Stored representation of the crypto feed.

These models mirror :mod:`cryptofeed.domain.models` field for field. They are
kept as separate types so that the shape handed to the persistence store can
evolve independently of the domain model.
"""

from __future__ import annotations

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field


class LocalCoinInfo(BaseModel):
    id: str
    name: str
    full_name: str
    image_url: str


class LocalUsd(BaseModel):
    price: float
    change_pct_day: float


class LocalRaw(BaseModel):
    usd: LocalUsd


class LocalCryptoFeed(BaseModel):
    """Feed entry as persisted by a :class:`~cryptofeed.cache.store.CryptoFeedStore`."""

    coin_info: LocalCoinInfo
    raw: LocalRaw


class CachedCryptoFeed(BaseModel):
    """Batch of stored feed entries returned by the store.

    Attributes
    ----------
    feeds: List[LocalCryptoFeed]
        Entries saved by the last insert, possibly empty.
    timestamp: datetime
        Time the batch was inserted. Applies to every entry in ``feeds``.
    """

    feeds: List[LocalCryptoFeed] = Field(default_factory=list)
    timestamp: datetime

"""Canonical domain model for the crypto price feed.

These Pydantic models are what the feed fetcher produces and what the
application layer consumes. The cache layer keeps its own stored
representation (see :mod:`cryptofeed.cache.models`) and maps to and from
these types at its boundary.
"""

from __future__ import annotations

from pydantic import BaseModel


class CoinInfo(BaseModel):
    """Descriptive information about a coin.

    Attributes
    ----------
    id: str
        Identifier of the coin in the upstream price feed.
    name: str
        Ticker-style short name (e.g., "BTC").
    full_name: str
        Human-readable name (e.g., "Bitcoin").
    image_url: str
        URL of the coin's logo.
    """

    id: str
    name: str
    full_name: str
    image_url: str


class Usd(BaseModel):
    """USD quote for a coin.

    Attributes
    ----------
    price: float
        Last traded price in USD.
    change_pct_day: float
        Price change over the trading day, in percent.
    """

    price: float
    change_pct_day: float


class Raw(BaseModel):
    """Raw quote block keyed by currency."""

    usd: Usd


class CryptoFeed(BaseModel):
    """Single entry of the crypto price feed."""

    coin_info: CoinInfo
    raw: Raw

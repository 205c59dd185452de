"""Pytest configuration for test suite.

Ensures the project root is on ``sys.path`` so imports like
``import cryptofeed`` resolve correctly regardless of the working directory
pytest chooses, and provides shared feed fixtures.
"""

from __future__ import annotations

import sys
import uuid
from datetime import datetime, timezone
from pathlib import Path

import pytest


def _ensure_project_root_on_syspath() -> None:
    project_root = Path(__file__).resolve().parents[1]
    project_root_str = str(project_root)
    if project_root_str not in sys.path:
        # Prepend to prefer local sources over site-packages
        sys.path.insert(0, project_root_str)


_ensure_project_root_on_syspath()

from cryptofeed.cache.models import (  # noqa: E402
    LocalCoinInfo,
    LocalCryptoFeed,
    LocalRaw,
    LocalUsd,
)
from cryptofeed.domain.models import CoinInfo, CryptoFeed, Raw, Usd  # noqa: E402

NOW = datetime(2025, 10, 15, 12, 0, 0, tzinfo=timezone.utc)


def make_feed(name: str, price: float, change: float) -> CryptoFeed:
    """Build a domain feed entry with a unique id."""
    return CryptoFeed(
        coin_info=CoinInfo(
            id=str(uuid.uuid4()),
            name=name,
            full_name=f"{name} coin",
            image_url=f"https://img.example/{name.lower()}.png",
        ),
        raw=Raw(usd=Usd(price=price, change_pct_day=change)),
    )


def to_local_fixture(feed: CryptoFeed) -> LocalCryptoFeed:
    """Build the stored entry expected for `feed`, independent of the mapper."""
    return LocalCryptoFeed(
        coin_info=LocalCoinInfo(
            id=feed.coin_info.id,
            name=feed.coin_info.name,
            full_name=feed.coin_info.full_name,
            image_url=feed.coin_info.image_url,
        ),
        raw=LocalRaw(
            usd=LocalUsd(
                price=feed.raw.usd.price, change_pct_day=feed.raw.usd.change_pct_day
            )
        ),
    )


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def unique_items() -> tuple[list[CryptoFeed], list[LocalCryptoFeed]]:
    """Two domain feed entries and their stored counterparts."""
    feeds = [make_feed("BTC", 1.0, 1.0), make_feed("ETH", 2.0, -2.5)]
    return feeds, [to_local_fixture(feed) for feed in feeds]

"""Conversions between domain and stored feed entries.

Both directions copy every field unchanged, so ``to_models(to_local(x)) == x``.
"""

from __future__ import annotations

from typing import Iterable, List

from ..domain.models import CoinInfo, CryptoFeed, Raw, Usd
from .models import LocalCoinInfo, LocalCryptoFeed, LocalRaw, LocalUsd


def to_local(feeds: Iterable[CryptoFeed]) -> List[LocalCryptoFeed]:
    """Map domain feed entries to their stored representation."""
    return [
        LocalCryptoFeed(
            coin_info=LocalCoinInfo(
                id=feed.coin_info.id,
                name=feed.coin_info.name,
                full_name=feed.coin_info.full_name,
                image_url=feed.coin_info.image_url,
            ),
            raw=LocalRaw(
                usd=LocalUsd(
                    price=feed.raw.usd.price,
                    change_pct_day=feed.raw.usd.change_pct_day,
                )
            ),
        )
        for feed in feeds
    ]


def to_models(local_feeds: Iterable[LocalCryptoFeed]) -> List[CryptoFeed]:
    """Map stored feed entries back to domain feed entries."""
    return [
        CryptoFeed(
            coin_info=CoinInfo(
                id=local.coin_info.id,
                name=local.coin_info.name,
                full_name=local.coin_info.full_name,
                image_url=local.coin_info.image_url,
            ),
            raw=Raw(
                usd=Usd(
                    price=local.raw.usd.price,
                    change_pct_day=local.raw.usd.change_pct_day,
                )
            ),
        )
        for local in local_feeds
    ]

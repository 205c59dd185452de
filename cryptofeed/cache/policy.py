"""
Cache expiry policy.

A cached batch is usable while its age, measured against the injected
reference time, does not exceed a fixed maximum age in milliseconds.
"""

from datetime import datetime, timezone

from ..config.models import MAX_CACHE_AGE_MS


def _as_utc(dt: datetime) -> datetime:
    """Return `dt` as an aware datetime, treating naive values as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def cache_age_ms(cached_at: datetime, now: datetime) -> float:
    """
    Age of a cached batch in milliseconds.

    Parameters
    ----------
    cached_at : datetime
        Timestamp stored alongside the batch
    now : datetime
        Reference time supplied by the caller's clock

    Returns
    -------
    float
        ``now - cached_at`` in milliseconds. Negative when the batch is
        timestamped in the future relative to ``now``.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> start = datetime(2025, 10, 15, 12, 0, 0, tzinfo=timezone.utc)
    >>> end = datetime(2025, 10, 15, 12, 10, 0, tzinfo=timezone.utc)
    >>> cache_age_ms(start, end)
    600000.0
    """
    delta = _as_utc(now) - _as_utc(cached_at)
    return delta.total_seconds() * 1000.0


def is_cache_valid(
    cached_at: datetime, now: datetime, max_age_ms: int = MAX_CACHE_AGE_MS
) -> bool:
    """Return True when the batch is at most `max_age_ms` old (inclusive)."""
    return cache_age_ms(cached_at, now) <= max_age_ms

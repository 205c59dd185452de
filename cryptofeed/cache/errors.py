"""Error taxonomy surfaced by the cache use case."""


class CacheError(Exception):
    """Base class for failures reported by the cache use case."""


class NotFound(CacheError):
    """No usable cached data: nothing stored, an empty batch, or expired."""


class DatabaseError(CacheError):
    """The persistence store failed while loading the cache."""

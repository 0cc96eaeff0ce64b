"""Cache errors."""


class CacheError(Exception):
    """Base error for cache operations."""

    def __init__(self, message: str = "Cache error"):
        self.message = message
        super().__init__(self.message)


class CacheDecodeError(CacheError):
    """Cached text is not valid JSON."""


class CacheEncodeError(CacheError):
    """Value cannot be serialized to JSON."""

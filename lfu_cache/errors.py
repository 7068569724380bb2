"""Exceptions raised by the cache."""


class CacheError(Exception):
    pass


class KeyNotFoundError(CacheError, KeyError):
    """Raised when deleting a key that is not in the cache."""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self):
        return f"Key not found: {self.key!r}"

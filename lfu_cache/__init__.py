"""In-memory LFU cache with TTL expiration and background sweeping."""

from lfu_cache.backend import CacheBackend
from lfu_cache.config import CacheConfig
from lfu_cache.errors import CacheError, KeyNotFoundError
from lfu_cache.factory import create_cache
from lfu_cache.lfuCache import CacheEntry, LFUCache

__all__ = [
    'CacheBackend',
    'CacheConfig',
    'CacheError',
    'KeyNotFoundError',
    'create_cache',
    'CacheEntry',
    'LFUCache',
]

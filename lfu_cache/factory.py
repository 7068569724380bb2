"""Factory for creating caches."""

from typing import Optional
from lfu_cache.backend import CacheBackend
from lfu_cache.config import CacheConfig


def create_cache(config: Optional[CacheConfig] = None) -> CacheBackend:
    """
    Create a cache instance.
    
    The environment is never read here. To configure from LFU_CACHE_*
    variables, pass ``CacheConfig.from_env()`` explicitly.
    
    Args:
        config: CacheConfig instance (if None, uses CacheConfig defaults)
        
    Returns:
        CacheBackend instance
    """
    if config is None:
        config = CacheConfig()
    
    from lfu_cache.lfuCache import LFUCache
    return LFUCache(
        capacity=config.capacity,
        default_ttl=config.default_ttl,
        sweep_interval=config.sweep_interval,
    )

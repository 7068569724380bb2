"""LFU (Least Frequently Used) cache with per-entry expiration."""

import logging
import threading
import time
import weakref
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

from lfu_cache.backend import CacheBackend
from lfu_cache.errors import KeyNotFoundError
from lfu_cache.frequency import FrequencyIndex
from lfu_cache.sweeper import Sweeper

logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    """A cached value with its expiry time and access count."""
    
    value: Any
    expiration: float
    frequency: int = 0
    
    def is_expired(self, now: float) -> bool:
        return now > self.expiration


def _weak_sweep(cache_ref):
    """Sweep callback that does not keep the cache alive."""
    def tick() -> int:
        cache = cache_ref()
        if cache is None:
            return 0
        return cache.sweep()
    return tick


class LFUCache(CacheBackend):
    """
    Thread-safe LFU cache with size limit and TTL.
    
    Evicts an entry from the least frequently used bucket when the cache is
    full. Ties within a bucket are broken arbitrarily. Expired entries are
    never returned, but they keep their slot until a sweep removes them or a
    later set() overwrites the key.
    """
    
    def __init__(
        self,
        capacity: int = 100,
        default_ttl: float = 300.0,
        sweep_interval: float = 0,
        clock: Callable[[], float] = time.monotonic
    ):
        """
        Initialize LFU cache.
        
        Args:
            capacity: Maximum number of entries (<= 0 disables the cache)
            default_ttl: TTL in seconds used when set()/update() get ttl <= 0
            sweep_interval: Seconds between background sweeps
                (<= 0 means no background sweeper is started)
            clock: Monotonic time source in seconds
        """
        self.capacity = capacity
        self.default_ttl = default_ttl
        self.sweep_interval = sweep_interval
        self.clock = clock
        self.items: Dict[str, CacheEntry] = {}
        self.freq_index = FrequencyIndex()
        self._lock = threading.Lock()
        self._sweeper: Optional[Sweeper] = None
        self._finalizer: Optional[weakref.finalize] = None
        
        if sweep_interval > 0:
            self._sweeper = Sweeper(sweep_interval, _weak_sweep(weakref.ref(self)))
            self._sweeper.start()
            # Stops the thread if the cache is collected without close()
            self._finalizer = weakref.finalize(self, self._sweeper.stop)
    
    @property
    def min_freq(self) -> int:
        return self.freq_index.min_freq
    
    def _expiration(self, ttl: float) -> float:
        if ttl <= 0:
            ttl = self.default_ttl
        return self.clock() + ttl
    
    def _bump(self, key: str, entry: CacheEntry):
        entry.frequency = self.freq_index.bump(key, entry.frequency)
    
    def _remove(self, key: str, entry: CacheEntry) -> bool:
        """Drop a key from both maps. True if the minimum bucket emptied."""
        del self.items[key]
        return self.freq_index.discard(key, entry.frequency)
    
    def _evict(self):
        victim = self.freq_index.victim()
        if victim is None:
            return
        entry = self.items[victim]
        self._remove(victim, entry)
        logger.debug("Evicted %r (frequency=%d)", victim, entry.frequency)
    
    def set(self, key: str, value: Any, ttl: float = 0) -> None:
        """
        Add or overwrite an entry.
        
        An overwrite keeps the key's access count and bumps it once. A new
        key starts at frequency 0 and is bumped to 1 before returning.
        """
        if self.capacity <= 0:
            return
        
        with self._lock:
            expiration = self._expiration(ttl)
            
            entry = self.items.get(key)
            if entry is not None:
                entry.value = value
                entry.expiration = expiration
                self._bump(key, entry)
                return
            
            if len(self.items) >= self.capacity:
                self._evict()
            
            entry = CacheEntry(value=value, expiration=expiration)
            self.items[key] = entry
            self.freq_index.add(key, entry.frequency)
            self._bump(key, entry)
    
    def get(self, key: str) -> Tuple[Optional[Any], bool]:
        """
        Get item from cache and update frequency.
        
        Expired entries report a miss but are left in place. The expiration
        time is not refreshed.
        """
        with self._lock:
            entry = self.items.get(key)
            if entry is None or entry.is_expired(self.clock()):
                return None, False
            
            self._bump(key, entry)
            return entry.value, True
    
    def delete(self, key: str) -> None:
        with self._lock:
            entry = self.items.get(key)
            if entry is None:
                raise KeyNotFoundError(key)
            
            if self._remove(key, entry):
                self.freq_index.recompute_min()
    
    def update(
        self,
        predicate: Callable[[Any], bool],
        mutator: Callable[[Any], None],
        ttl: float = 0
    ) -> None:
        """
        Apply mutator to every live value that satisfies predicate.
        
        The mutator changes the value in place; its return value is ignored.
        Each match gets a fresh expiration and one frequency bump. This is a
        full scan under the lock.
        
        All predicates run before any value is touched, so a predicate that
        raises leaves the cache unchanged. A mutator that raises stops the
        pass: entries already mutated keep their new expiration and bump,
        the rest are left as they were. Neither callback may call back into
        this cache.
        """
        with self._lock:
            expiration = self._expiration(ttl)
            now = self.clock()
            
            matches = [
                (key, entry) for key, entry in self.items.items()
                if not entry.is_expired(now) and predicate(entry.value)
            ]
            
            for key, entry in matches:
                mutator(entry.value)
                entry.expiration = expiration
                self._bump(key, entry)
    
    def sweep(self) -> int:
        """
        Remove all expired entries.
        
        Returns:
            Number of entries removed
        """
        with self._lock:
            now = self.clock()
            expired = [
                (key, entry) for key, entry in self.items.items()
                if entry.is_expired(now)
            ]
            
            min_changed = False
            for key, entry in expired:
                min_changed = self._remove(key, entry) or min_changed
            
            if min_changed:
                self.freq_index.recompute_min()
            
            return len(expired)
    
    def frequency(self, key: str) -> Optional[int]:
        """Current access count for a key, without bumping it."""
        with self._lock:
            entry = self.items.get(key)
            return entry.frequency if entry is not None else None
    
    def contains(self, key: str) -> bool:
        """Check if a live entry exists, without bumping it."""
        with self._lock:
            entry = self.items.get(key)
            return entry is not None and not entry.is_expired(self.clock())
    
    def size(self) -> int:
        """Get current cache size (expired entries not yet swept included)."""
        with self._lock:
            return len(self.items)
    
    def clear(self):
        """Clear all items from cache."""
        with self._lock:
            self.items.clear()
            self.freq_index.clear()
    
    def close(self):
        """
        Stop the background sweeper, if one is running.
        
        Also happens automatically when an unclosed cache is garbage
        collected, but closing explicitly (or using ``with``) stops the
        thread deterministically.
        """
        if self._finalizer is not None:
            self._finalizer()
            self._finalizer = None
        self._sweeper = None
    
    def __enter__(self):
        """Context manager entry."""
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

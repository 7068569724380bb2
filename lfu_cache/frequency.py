"""Frequency buckets for LFU eviction."""

import logging
from typing import Dict, Optional, Set

logger = logging.getLogger(__name__)


class FrequencyIndex:
    """
    Maps each access count to the set of keys currently at that count.
    
    Tracks the lowest non-empty count so an eviction candidate can be found
    without scanning. Not thread-safe on its own; the owning cache holds the
    lock.
    """
    
    def __init__(self):
        self.groups: Dict[int, Set[str]] = {}
        self.min_freq = 0
    
    def add(self, key: str, freq: int = 0):
        """Place a new key in a bucket. The bucket becomes the minimum."""
        self.groups.setdefault(freq, set()).add(key)
        self.min_freq = freq
    
    def discard(self, key: str, freq: int) -> bool:
        """
        Remove a key from its bucket.
        
        Args:
            key: Cache key
            freq: The key's current frequency
            
        Returns:
            True if this emptied the minimum bucket
        """
        group = self.groups.get(freq)
        if group is None:
            return False
        group.discard(key)
        if group:
            return False
        del self.groups[freq]
        return freq == self.min_freq
    
    def bump(self, key: str, freq: int) -> int:
        """
        Move a key from bucket freq to bucket freq + 1.
        
        Returns:
            The key's new frequency
        """
        new_freq = freq + 1
        if self.discard(key, freq):
            # Nothing can sit below freq + 1 once the old minimum is gone
            self.min_freq = new_freq
        self.groups.setdefault(new_freq, set()).add(key)
        return new_freq
    
    def recompute_min(self) -> int:
        """Rescan all buckets for the lowest count (0 when empty)."""
        self.min_freq = min(self.groups, default=0)
        return self.min_freq
    
    def victim(self) -> Optional[str]:
        """Pick an arbitrary key from the minimum bucket."""
        group = self.groups.get(self.min_freq)
        if not group:
            return None
        return next(iter(group))
    
    def clear(self):
        self.groups.clear()
        self.min_freq = 0
    
    def __len__(self) -> int:
        return len(self.groups)

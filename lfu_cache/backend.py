"""Abstract base class for cache backends."""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Tuple


class CacheBackend(ABC):
    """
    Abstract base class for cache backends.
    
    Exposes the four operations callers rely on. Eviction and expiration
    housekeeping are left to the implementation.
    """
    
    @abstractmethod
    def set(self, key: str, value: Any, ttl: float = 0) -> None:
        """
        Store a value.
        
        Args:
            key: Cache key
            value: Value to cache (stored by reference, not copied)
            ttl: Time-to-live in seconds (<= 0 uses the default TTL)
        """
        pass
    
    @abstractmethod
    def get(self, key: str) -> Tuple[Optional[Any], bool]:
        """
        Look up a value.
        
        Args:
            key: Cache key
            
        Returns:
            (value, True) on a live hit, (None, False) otherwise
        """
        pass
    
    @abstractmethod
    def delete(self, key: str) -> None:
        """
        Remove a key.
        
        Args:
            key: Cache key
            
        Raises:
            KeyNotFoundError: If the key is not in the cache
        """
        pass
    
    @abstractmethod
    def update(
        self,
        predicate: Callable[[Any], bool],
        mutator: Callable[[Any], None],
        ttl: float = 0
    ) -> None:
        """
        Mutate every live value matching a predicate.
        
        Args:
            predicate: Called with each live value; True selects it
            mutator: Called with each selected value to modify it in place;
                its return value is ignored
            ttl: New time-to-live in seconds for updated entries
                (<= 0 uses the default TTL)
        """
        pass

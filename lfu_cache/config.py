"""Cache configuration management."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv


def _env_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


@dataclass
class CacheConfig:
    """Configuration for the LFU cache."""
    
    capacity: int = 100
    default_ttl: float = 300.0  # seconds
    sweep_interval: float = 60.0  # seconds, <= 0 disables the sweeper
    
    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> 'CacheConfig':
        """
        Create config from environment variables.
        
        Optional: the cache itself never reads the environment, and
        create_cache() only uses this when handed its result.
        
        Reads LFU_CACHE_CAPACITY, LFU_CACHE_DEFAULT_TTL and
        LFU_CACHE_SWEEP_INTERVAL. Variables already set in the environment
        take precedence over the .env file.
        
        Args:
            env_file: Path to a .env file (default: nearest .env from cwd)
            
        Returns:
            CacheConfig instance
            
        Raises:
            ValueError: If a variable is set but not numeric
        """
        env_path = env_file or find_dotenv(usecwd=True)
        if env_path:
            load_dotenv(env_path, override=False)
        
        return cls(
            capacity=_env_number('LFU_CACHE_CAPACITY', cls.capacity, int),
            default_ttl=_env_number('LFU_CACHE_DEFAULT_TTL', cls.default_ttl, float),
            sweep_interval=_env_number('LFU_CACHE_SWEEP_INTERVAL', cls.sweep_interval, float),
        )
    
    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            'capacity': self.capacity,
            'default_ttl': self.default_ttl,
            'sweep_interval': self.sweep_interval,
        }

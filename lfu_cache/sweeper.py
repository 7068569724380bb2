"""Background thread that periodically purges expired cache entries."""

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class Sweeper:
    """
    Calls a callback on a fixed period until stopped.
    
    The thread is a daemon so a forgotten cache never blocks interpreter
    exit; call stop() to end it explicitly.
    """
    
    def __init__(self, interval: float, callback: Callable[[], int]):
        """
        Args:
            interval: Seconds between ticks (must be > 0)
            callback: Called each tick; returns the number of entries removed
        """
        if interval <= 0:
            raise ValueError(f"Sweep interval must be positive, got {interval}")
        self.interval = interval
        self.callback = callback
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
    
    def start(self):
        if self._thread is not None:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._run, name="lfu-cache-sweeper", daemon=True
        )
        self._thread.start()
        logger.info("Started cache sweeper (interval=%ss)", self.interval)
    
    def stop(self, timeout: Optional[float] = 1.0):
        """Signal the thread to exit and wait for it. Safe to call twice."""
        self._stop_event.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout=timeout)
        if self._thread is not None:
            logger.info("Stopped cache sweeper")
            self._thread = None
    
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()
    
    def _run(self):
        while not self._stop_event.wait(self.interval):
            try:
                removed = self.callback()
            except Exception:
                logger.exception("Cache sweep failed")
                continue
            if removed:
                logger.debug("Swept %d expired entries", removed)

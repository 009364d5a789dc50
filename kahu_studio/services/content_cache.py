"""Short-lived memoisation of Notion query results.

Catalog pages revalidate once a minute: within the TTL every request for
the same query key is served from memory, after it the query runs again.
"""

import threading
import time
from collections.abc import Callable
from typing import Any, NamedTuple

from loguru import logger

from kahu_studio.config import CONTENT_CACHE_TTL


class _Entry(NamedTuple):
    expires_at: float
    value: Any


class ContentCache:
    """Thread-safe TTL cache keyed by query name (``products:all``, ...).

    A computation that raises leaves the cache untouched, so the next
    request retries the upstream call. A TTL of 0 disables storage.
    """

    def __init__(self, ttl: int = CONTENT_CACHE_TTL):
        self.ttl = ttl
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.Lock()

    def _lookup(self, key: str) -> _Entry | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None and entry.expires_at <= time.monotonic():
                del self._entries[key]
                return None
            return entry

    def get_or_compute(self, key: str, compute_fn: Callable[[], Any]) -> Any:
        entry = self._lookup(key)
        if entry is not None:
            logger.debug("Content cache hit: {}", key)
            return entry.value

        logger.debug("Content cache miss: {}", key)
        value = compute_fn()
        if self.ttl > 0:
            with self._lock:
                self._entries[key] = _Entry(time.monotonic() + self.ttl, value)
        return value

    def invalidate(self, prefix: str = "") -> int:
        """Drop entries whose key starts with *prefix* (all when empty)."""
        with self._lock:
            doomed = [k for k in self._entries if k.startswith(prefix)]
            for k in doomed:
                del self._entries[k]
        if doomed:
            logger.info("Content cache invalidated {} entries (prefix={!r})", len(doomed), prefix)
        return len(doomed)

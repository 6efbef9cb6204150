"""Bounded in-memory cache for classification results.

Entries are evicted in insertion order once ``max_size`` is reached: the
oldest stored key goes first, regardless of how often it has been read.
Every read and write happens under a single lock so that concurrent callers
can never push the cache past its bound. The cache only ever stores results
that a fresh evaluation would also produce, so a lost race costs at most a
recomputation.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

import structlog
from cachetools import FIFOCache

from absolute_url.config import DEFAULT_CACHE_MAX_SIZE
from absolute_url.models.cache import CacheStats

if TYPE_CHECKING:
    from absolute_url.models.cache import CacheKey

log = structlog.get_logger()


class ResultCache:
    """Thread-safe FIFO cache implementing ResultCacheProtocol."""

    def __init__(self, max_size: int = DEFAULT_CACHE_MAX_SIZE) -> None:
        if max_size < 1:
            raise ValueError(f"max_size must be at least 1, got {max_size}")
        self._entries: FIFOCache[CacheKey, bool] = FIFOCache(maxsize=max_size)
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    @property
    def max_size(self) -> int:
        return int(self._entries.maxsize)

    def get(self, key: CacheKey) -> bool | None:
        """Return the stored result, or ``None`` on a miss."""
        with self._lock:
            result = self._entries.get(key)
            if result is None:
                self._misses += 1
            else:
                self._hits += 1
            return result

    def set(self, key: CacheKey, result: bool) -> None:
        """Store a result, evicting the oldest entry when full."""
        with self._lock:
            self._entries[key] = result

    def clear(self) -> None:
        """Drop every entry and reset the hit/miss counters."""
        with self._lock:
            dropped = len(self._entries)
            self._entries.clear()
            self._hits = 0
            self._misses = 0
        log.info("cache_cleared", entries=dropped)

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                size=len(self._entries),
                max_size=self.max_size,
                hits=self._hits,
                misses=self._misses,
            )

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

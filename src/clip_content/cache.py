"""Caching layer for classification results."""

import logging
import time
from collections import OrderedDict
from dataclasses import dataclass
from threading import RLock
from typing import Any, Dict, Optional

import xxhash

from .models import DetectedContent

logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    """A single cache entry with metadata."""

    result: DetectedContent
    timestamp: float

    def is_valid(self, max_age_seconds: int) -> bool:
        """Check if cache entry is still valid based on age."""
        return time.time() - self.timestamp < max_age_seconds


@dataclass
class CacheStatistics:
    """Statistics for cache performance monitoring."""

    hits: int = 0
    misses: int = 0
    evictions: int = 0
    puts: int = 0

    @property
    def total_requests(self) -> int:
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate."""
        total = self.total_requests
        if total == 0:
            return 0.0
        return self.hits / total


class ClassificationCache:
    """
    Thread-safe LRU cache for classification results.

    Keys are xxhash digests of the classified text; the stored result keeps
    the full text, so a hit is only served when the texts are equal.
    """

    def __init__(self, max_size: int = 256, max_age_seconds: int = 3600):
        """
        Initialize the cache.

        Args:
            max_size: Maximum number of entries to cache
            max_age_seconds: Maximum age of cache entries in seconds
        """
        self.max_size = max_size
        self.max_age_seconds = max_age_seconds
        self._cache: "OrderedDict[str, CacheEntry]" = OrderedDict()
        self._lock = RLock()
        self.statistics = CacheStatistics()

        logger.info(
            f"Initialized ClassificationCache with max_size={max_size}, "
            f"max_age_seconds={max_age_seconds}"
        )

    @staticmethod
    def make_key(content: str) -> str:
        """Hash ``content`` into a cache key."""
        return xxhash.xxh64(content.encode("utf-8", "surrogatepass")).hexdigest()

    def get(self, content: str) -> Optional[DetectedContent]:
        """
        Retrieve a cached result.

        Args:
            content: The text to look up

        Returns:
            Cached DetectedContent or None if missing or expired
        """
        key = self.make_key(content)

        with self._lock:
            entry = self._cache.get(key)
            if entry is not None:
                if entry.is_valid(self.max_age_seconds) and entry.result.original == content:
                    self._cache.move_to_end(key)
                    self.statistics.hits += 1
                    logger.debug(f"Cache hit for key={key[:8]}...")
                    return entry.result
                del self._cache[key]
                logger.debug(f"Dropped stale entry for key={key[:8]}...")

            self.statistics.misses += 1
            return None

    def put(self, result: DetectedContent) -> None:
        """
        Store a classification result.

        Args:
            result: The result to cache, keyed by its original text
        """
        key = self.make_key(result.original)

        with self._lock:
            if key in self._cache:
                del self._cache[key]
            elif len(self._cache) >= self.max_size:
                oldest_key, _ = self._cache.popitem(last=False)
                self.statistics.evictions += 1
                logger.debug(f"Evicted oldest entry: key={oldest_key[:8]}...")

            self._cache[key] = CacheEntry(result=result, timestamp=time.time())
            self.statistics.puts += 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def clear(self) -> None:
        """Clear all entries from the cache."""
        with self._lock:
            self._cache.clear()
            logger.info("Cache cleared")

    def reset_statistics(self) -> None:
        """Reset cache statistics."""
        with self._lock:
            self.statistics = CacheStatistics()

    def get_info(self) -> Dict[str, Any]:
        """
        Get cache information and statistics.

        Returns:
            Dictionary with cache info and statistics
        """
        with self._lock:
            return {
                "size": len(self._cache),
                "max_size": self.max_size,
                "max_age_seconds": self.max_age_seconds,
                "hit_rate": self.statistics.hit_rate,
                "statistics": {
                    "hits": self.statistics.hits,
                    "misses": self.statistics.misses,
                    "evictions": self.statistics.evictions,
                    "puts": self.statistics.puts,
                    "total_requests": self.statistics.total_requests,
                },
            }

    def cleanup_expired(self) -> int:
        """
        Remove expired entries from the cache.

        Returns:
            Number of entries removed
        """
        with self._lock:
            expired_keys = [
                key for key, entry in self._cache.items() if not entry.is_valid(self.max_age_seconds)
            ]
            for key in expired_keys:
                del self._cache[key]

            if expired_keys:
                logger.info(f"Cleaned up {len(expired_keys)} expired cache entries")

            return len(expired_keys)

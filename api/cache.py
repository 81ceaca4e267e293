"""
Thread-safe expiring LRU cache for normalized marine data.

Provides:
- Canonical cache keys independent of parameter order
- Bounded size with LRU eviction (exactly one entry per insert when full)
- Per-entry TTL, checked lazily on access
- Hit/miss/eviction counters for the stats endpoint

The store does not collapse concurrent misses: two requests missing the same
key both fetch upstream and both call ``set``; the later write wins.
"""
import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional

logger = logging.getLogger(__name__)


def build_key(prefix: str, params: Mapping[str, Any]) -> str:
    """
    Build a canonical cache key.

    Parameter names are sorted so that insertion order does not matter:
    ``build_key("marine", {"lat": 1, "lon": 2})`` and
    ``build_key("marine", {"lon": 2, "lat": 1})`` are both
    ``"marine?lat=1&lon=2"``.
    """
    pairs = "&".join(f"{name}={params[name]}" for name in sorted(params))
    return f"{prefix}?{pairs}"


@dataclass
class CacheEntry:
    """Single cache entry with metadata (times from the cache clock, in seconds)."""
    value: Any
    created_at: float
    expires_at: Optional[float]
    access_count: int = 0

    def is_expired(self, now: float) -> bool:
        return self.expires_at is not None and now >= self.expires_at


class BoundedLRUCache:
    """
    Thread-safe LRU cache with bounded size and TTL support.

    Usage:
        cache = BoundedLRUCache(max_size=500, default_ttl_ms=60_000)
        cache.set("marine?lat=37.8&lon=-122.4", reading)
        result = cache.get("marine?lat=37.8&lon=-122.4")
    """

    def __init__(
        self,
        max_size: int = 500,
        default_ttl_ms: Optional[int] = 60_000,
        name: str = "default",
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize cache.

        Args:
            max_size: Maximum number of entries before LRU eviction
            default_ttl_ms: Default TTL for entries in milliseconds (None = no expiration)
            name: Cache name for logging/stats
            clock: Monotonic time source in seconds
        """
        if max_size < 1:
            raise ValueError(f"max_size must be at least 1, got {max_size}")

        self.max_size = max_size
        self.default_ttl_ms = default_ttl_ms
        self.name = name
        self._clock = clock

        self._cache: "OrderedDict[str, CacheEntry]" = OrderedDict()
        self._lock = threading.RLock()

        # Metrics
        self._hits = 0
        self._misses = 0
        self._evictions = 0
        self._expirations = 0

    def get(self, key: str) -> Optional[Any]:
        """
        Get value from cache.

        Returns:
            Cached value or None if not found/expired
        """
        with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                self._misses += 1
                return None

            if entry.is_expired(self._clock()):
                del self._cache[key]
                self._expirations += 1
                self._misses += 1
                return None

            entry.access_count += 1
            self._cache.move_to_end(key)
            self._hits += 1
            return entry.value

    def set(self, key: str, value: Any, ttl_ms: Optional[int] = None) -> None:
        """
        Insert or overwrite a value, restarting its TTL.

        Args:
            key: Cache key
            value: Value to cache
            ttl_ms: TTL for this entry (None = use default)
        """
        with self._lock:
            now = self._clock()
            ttl = ttl_ms if ttl_ms is not None else self.default_ttl_ms
            expires_at = now + ttl / 1000.0 if ttl else None

            entry = CacheEntry(value=value, created_at=now, expires_at=expires_at)

            if key in self._cache:
                self._cache[key] = entry
                self._cache.move_to_end(key)
                return

            if len(self._cache) >= self.max_size:
                self._evict_oldest()
            self._cache[key] = entry

    def delete(self, key: str) -> bool:
        """Delete an entry; True if it was present."""
        with self._lock:
            if key in self._cache:
                del self._cache[key]
                return True
            return False

    def clear(self) -> int:
        """
        Clear all entries from cache.

        Returns:
            Number of entries cleared
        """
        with self._lock:
            count = len(self._cache)
            self._cache.clear()
            logger.info(f"Cache '{self.name}' cleared: {count} entries removed")
            return count

    def _evict_oldest(self) -> None:
        """Evict the least recently used entry. Caller holds the lock."""
        if self._cache:
            oldest_key, _ = self._cache.popitem(last=False)
            self._evictions += 1
            logger.debug(f"Cache '{self.name}' evicted: {oldest_key}")

    def cleanup_expired(self) -> int:
        """
        Remove all expired entries.

        Returns:
            Number of entries removed
        """
        with self._lock:
            now = self._clock()
            expired_keys = [key for key, entry in self._cache.items() if entry.is_expired(now)]

            for key in expired_keys:
                del self._cache[key]
                self._expirations += 1

            if expired_keys:
                logger.debug(f"Cache '{self.name}' cleanup: {len(expired_keys)} expired entries removed")

            return len(expired_keys)

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        with self._lock:
            total_requests = self._hits + self._misses
            hit_rate = self._hits / total_requests if total_requests > 0 else 0.0

            return {
                'name': self.name,
                'size': len(self._cache),
                'max_size': self.max_size,
                'hits': self._hits,
                'misses': self._misses,
                'hit_rate': round(hit_rate, 4),
                'evictions': self._evictions,
                'expirations': self._expirations,
                'default_ttl_ms': self.default_ttl_ms,
            }

    def __len__(self) -> int:
        """Number of stored entries, including expired ones not yet swept."""
        with self._lock:
            return len(self._cache)

    def __contains__(self, key: str) -> bool:
        """Check if key is live (without updating recency)."""
        with self._lock:
            entry = self._cache.get(key)
            return entry is not None and not entry.is_expired(self._clock())

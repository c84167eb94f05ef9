import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from ..models.features import Features

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    features: Features
    timestamp: float  # milliseconds on the cache clock


class FeatureCache:
    """Short-lived in-process cache of validated feature bundles.

    One entry per ``network:address`` key. An entry is served only while its
    age is below the TTL; refreshes replace the entry outright.
    """

    def __init__(self, ttl_ms: int = 30_000, clock: Optional[Callable[[], float]] = None):
        """Initialize the cache

        Args:
            ttl_ms: Maximum entry age in milliseconds
            clock: Callable returning the current time in seconds,
                ``time.monotonic`` by default
        """
        if ttl_ms <= 0:
            raise ValueError(f"ttl_ms must be positive, got {ttl_ms}")

        self.ttl_ms = ttl_ms
        self._clock = clock or time.monotonic
        self._entries: Dict[str, CacheEntry] = {}

        self.stats = {
            "hits": 0,
            "misses": 0,
            "sets": 0,
            "expired": 0
        }

    @staticmethod
    def key(network: str, address: str) -> str:
        network = getattr(network, "value", network)
        return f"{network}:{address}"

    def _now_ms(self) -> float:
        return self._clock() * 1000

    def get(self, network: str, address: str) -> Optional[Features]:
        """Get cached features, or None on a miss"""
        key = self.key(network, address)
        entry = self._entries.get(key)

        if entry is None:
            self.stats["misses"] += 1
            return None

        if self._now_ms() - entry.timestamp >= self.ttl_ms:
            del self._entries[key]
            self.stats["expired"] += 1
            self.stats["misses"] += 1
            logger.debug(f"Cache entry expired for {key}")
            return None

        self.stats["hits"] += 1
        return entry.features

    def set(self, network: str, address: str, features: Features) -> None:
        """Store features, replacing any existing entry"""
        self._entries[self.key(network, address)] = CacheEntry(
            features=features,
            timestamp=self._now_ms()
        )
        self.stats["sets"] += 1

    def delete(self, network: str, address: str) -> bool:
        """Delete an entry"""
        return self._entries.pop(self.key(network, address), None) is not None

    def clear(self) -> int:
        """Drop every entry and return how many were removed"""
        count = len(self._entries)
        self._entries.clear()
        return count

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def get_stats(self) -> Dict:
        """Get cache statistics"""
        total_ops = self.stats["hits"] + self.stats["misses"]
        hit_rate = self.stats["hits"] / total_ops if total_ops > 0 else 0

        return {
            **self.stats,
            "entries": len(self._entries),
            "ttl_ms": self.ttl_ms,
            "hit_rate": hit_rate
        }

"""In-memory runtime cache."""

import threading
from collections import OrderedDict
from typing import Any, Dict, Optional

from infrastructure.cache.base import RuntimeCache
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class InMemoryRuntimeCache(RuntimeCache):
    """Thread-safe in-memory implementation of RuntimeCache.

    Suitable for request-scoped use (one instance per resolver) or as a
    process-wide cache shared between resolvers.

    Attributes:
        max_entries: Capacity limit. When reached, the oldest entry is
            dropped before a new key is stored. 0 disables the limit.
    """

    def __init__(self, max_entries: int = 0) -> None:
        if max_entries < 0:
            raise ValueError("max_entries must be >= 0")
        self.max_entries = max_entries
        self._store: "OrderedDict[str, Any]" = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            if key in self._store:
                self._hits += 1
                return self._store[key]
            self._misses += 1
            return None

    def set(self, key: str, value: Any) -> None:
        if value is None:
            raise ValueError("None cannot be cached, it is the miss sentinel")
        with self._lock:
            if key in self._store:
                self._store[key] = value
                return
            if self.max_entries and len(self._store) >= self.max_entries:
                evicted, _ = self._store.popitem(last=False)
                self._evictions += 1
                logger.debug("runtime_cache_evicted", key=evicted)
            self._store[key] = value

    def clear(self) -> None:
        with self._lock:
            self._store.clear()
        logger.debug("runtime_cache_cleared")

    def get_stats(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "backend": "memory",
                "entries": len(self._store),
                "max_entries": self.max_entries,
                "hits": self._hits,
                "misses": self._misses,
                "evictions": self._evictions,
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._store

"""Runtime cache abstract base class."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class RuntimeCache(ABC):
    """Abstract base class for runtime cache implementations.

    A runtime cache lives for one request or process. Entries are never
    evicted explicitly by callers; any TTL or capacity policy belongs to the
    implementation. ``None`` is the miss sentinel, so ``None`` itself cannot
    be cached.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Get the cached value for a key.

        Args:
            key: Cache key (see CacheKeyBuilder).

        Returns:
            Cached value or None if not found.
        """
        pass

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Cache a value under the given key.

        Args:
            key: Cache key.
            value: Value to cache. Must not be None.
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Clear all cached entries."""
        pass

    @abstractmethod
    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dict with cache statistics (implementation-specific).
        """
        pass

"""Runtime cache infrastructure.

Provides the request/process scoped key-value store used by the label
resolver to remember resolved labels and merged label files.

Usage:

    from infrastructure.cache import InMemoryRuntimeCache, build_label_key

    cache = InMemoryRuntimeCache()
    key = build_label_key("default", reference=ref, debug=False)

    cached = cache.get(key)
    if cached is None:
        cached = compute(...)
        cache.set(key, cached)
"""

from infrastructure.cache.base import RuntimeCache
from infrastructure.cache.key_builder import (
    CacheKeyBuilder,
    build_label_file_key,
    build_label_key,
)
from infrastructure.cache.memory import InMemoryRuntimeCache

__all__ = [
    "RuntimeCache",
    "CacheKeyBuilder",
    "build_label_key",
    "build_label_file_key",
    "InMemoryRuntimeCache",
]

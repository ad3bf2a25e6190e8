"""Cache key builder for consistent key generation."""

import hashlib
from typing import Any


class CacheKeyBuilder:
    """Build deterministic cache keys.

    Provides a consistent key format with namespace isolation. Components are
    sorted by name so keyword order never changes the key.

    Example:
        >>> builder = CacheKeyBuilder(namespace="labels")
        >>> key = builder.build(
        ...     operation="de",
        ...     reference="LLL:EXT:core/labels.yml:save",
        ...     debug=False,
        ... )
        >>> key
        'labels:de:3f0c5a1e9b2d4c7a'
    """

    def __init__(self, namespace: str):
        """Initialize key builder.

        Args:
            namespace: Namespace for key isolation (e.g., "labels")
        """
        self.namespace = namespace

    def build(self, operation: str, **components: Any) -> str:
        """Build cache key from components.

        Args:
            operation: Key segment kept readable in the key (e.g. a language key)
            **components: Key components that get hashed

        Returns:
            Cache key string
        """
        sorted_components = sorted(components.items())

        key_parts = [self.namespace, operation]
        key_parts.extend(f"{k}={v}" for k, v in sorted_components)
        key_string = "|".join(str(part) for part in key_parts)

        key_hash = hashlib.sha256(key_string.encode()).hexdigest()[:16]

        return f"{self.namespace}:{operation}:{key_hash}"


LABELS_NAMESPACE = "labels"
LABEL_FILES_NAMESPACE = "labels_file"

_label_keys = CacheKeyBuilder(namespace=LABELS_NAMESPACE)
_label_file_keys = CacheKeyBuilder(namespace=LABEL_FILES_NAMESPACE)


def build_label_key(language_key: str, reference: str, debug: bool) -> str:
    """Key of a resolved label.

    Debug and plain output of the same reference are cached apart.

    Args:
        language_key: Active language.
        reference: Trimmed label reference.
        debug: Whether debug decoration is on.
    """
    return _label_keys.build(language_key, reference=reference, debug=int(debug))


def build_label_file_key(language_key: str, file_locator: str) -> str:
    """Key of a label file merged along the language's dependency chain."""
    return _label_file_keys.build(language_key, file_locator=file_locator)

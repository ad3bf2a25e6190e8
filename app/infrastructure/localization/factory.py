"""Factory functions for creating label resolution components.

Provides convenience functions for building resolvers with configurations
taken from the application settings. A resolver is created per logical
request and handed to every call site that needs labels; there is no
process-wide "current" resolver.
"""

from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from infrastructure.cache import InMemoryRuntimeCache, RuntimeCache
from infrastructure.configuration import LocalizationSettings, settings
from infrastructure.localization.catalog import LocaleCatalog
from infrastructure.localization.loader import LabelFileLoader, YAMLLabelFileLoader
from infrastructure.localization.models import DEFAULT_LANGUAGE
from infrastructure.localization.resolver import LabelResolver
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def create_locale_catalog(
    localization_settings: Optional[LocalizationSettings] = None,
) -> LocaleCatalog:
    """Create a LocaleCatalog with the configured extra languages.

    Args:
        localization_settings: Settings to read extra locales and
            dependencies from (default: application settings).

    Returns:
        LocaleCatalog with built-in and configured languages.
    """
    config = localization_settings or settings.localization
    catalog = LocaleCatalog()
    for language_key, label in config.LABELS_EXTRA_LOCALES.items():
        catalog.register(language_key, label=label)
    for language_key, dependencies in config.LABELS_LOCALE_DEPENDENCIES.items():
        catalog.register(language_key, dependencies=dependencies)
    return catalog


def create_label_file_loader(
    localization_settings: Optional[LocalizationSettings] = None,
) -> YAMLLabelFileLoader:
    """Create a YAML label file loader from settings.

    Args:
        localization_settings: Settings to read directories and caching
            from (default: application settings).

    Returns:
        YAMLLabelFileLoader for the configured directories.
    """
    config = localization_settings or settings.localization
    base_dir = Path(config.LABELS_BASE_DIR)
    extensions_dir = Path(config.LABELS_EXTENSIONS_DIR)
    if not extensions_dir.is_absolute():
        extensions_dir = base_dir / extensions_dir
    return YAMLLabelFileLoader(
        base_dir=base_dir,
        extensions_dir=extensions_dir,
        use_cache=config.LABELS_FILE_CACHE,
    )


@lru_cache
def get_locale_catalog() -> LocaleCatalog:
    """Get application-scoped locale catalog singleton."""
    return create_locale_catalog()


@lru_cache
def get_label_file_loader() -> YAMLLabelFileLoader:
    """Get application-scoped label file loader singleton."""
    return create_label_file_loader()


def create_label_resolver(
    language_key: Optional[str] = None,
    *,
    cache: Optional[RuntimeCache] = None,
    loader: Optional[LabelFileLoader] = None,
    catalog: Optional[LocaleCatalog] = None,
    debug: Optional[bool] = None,
) -> LabelResolver:
    """Create and configure a LabelResolver instance.

    Args:
        language_key: Language to activate. Unknown keys leave the resolver
            on ``default``.
        cache: Runtime cache to share (default: a new request-scoped
            in-memory cache).
        loader: Label file loader (default: YAML loader from settings).
        catalog: Locale catalog (default: catalog from settings).
        debug: Show label keys in resolved labels (default: LABELS_DEBUG).

    Returns:
        LabelResolver: Configured resolver instance

    Usage:
        resolver = create_label_resolver("de")
        resolver.resolve("LLL:EXT:core/labels.yml:labels.save")
    """
    config = settings.localization
    if cache is None:
        cache = InMemoryRuntimeCache(max_entries=config.LABELS_CACHE_MAX_ENTRIES)

    resolver = LabelResolver(
        catalog=catalog or get_locale_catalog(),
        loader=loader or get_label_file_loader(),
        cache=cache,
        debug=config.LABELS_DEBUG if debug is None else debug,
    )
    if language_key is not None:
        resolver.activate(language_key)

    logger.info(
        "label_resolver_created",
        requested_language=language_key,
        language=resolver.language,
        debug=resolver.debug,
    )
    return resolver


def create_from_user_preferences(preferences: Any, **kwargs: Any) -> LabelResolver:
    """Create a LabelResolver for a user's preferred language.

    Args:
        preferences: Mapping or object with a ``lang`` entry/attribute.
            None or an empty language selects ``default``.
        **kwargs: Passed on to create_label_resolver().

    Returns:
        LabelResolver with the user's language activated.
    """
    if preferences is None:
        language_key = None
    elif isinstance(preferences, Mapping):
        language_key = preferences.get("lang")
    else:
        language_key = getattr(preferences, "lang", None)

    return create_label_resolver(language_key or DEFAULT_LANGUAGE, **kwargs)

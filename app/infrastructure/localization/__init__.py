"""Label resolution system.

Resolves label references like ``LLL:EXT:core/labels.yml:labels.save`` to
localized strings for the active language, with fallback through the
language's dependency chain and request-scoped caching.

Main components:
- models: LabelReference, PlainLabel, IndirectLabel, constants
- catalog: LocaleCatalog with language keys and their dependencies
- loader: LabelFileLoader, YAMLLabelFileLoader and InMemoryLabelFileLoader
- resolver: LabelResolver
- factory: create_label_resolver and settings-based providers
"""

from infrastructure.localization.catalog import LocaleCatalog
from infrastructure.localization.exceptions import (
    LabelFileError,
    LabelFileNotFoundError,
    LabelFileParseError,
    LocalizationError,
    UnknownLanguageError,
)
from infrastructure.localization.factory import (
    create_from_user_preferences,
    create_label_resolver,
)
from infrastructure.localization.loader import (
    InMemoryLabelFileLoader,
    LabelFileLoader,
    YAMLLabelFileLoader,
)
from infrastructure.localization.models import (
    DEFAULT_LANGUAGE,
    IndirectLabel,
    LabelReference,
    PlainLabel,
)
from infrastructure.localization.resolver import LabelResolver

__all__ = [
    "DEFAULT_LANGUAGE",
    "LabelReference",
    "PlainLabel",
    "IndirectLabel",
    "LocaleCatalog",
    "LabelFileLoader",
    "YAMLLabelFileLoader",
    "InMemoryLabelFileLoader",
    "LabelResolver",
    "create_label_resolver",
    "create_from_user_preferences",
    "LocalizationError",
    "UnknownLanguageError",
    "LabelFileError",
    "LabelFileNotFoundError",
    "LabelFileParseError",
]

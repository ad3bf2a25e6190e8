"""Label resolution infrastructure settings."""

from typing import Any, Dict, List

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings


class LocalizationSettings(InfrastructureSettings):
    """Label file lookup and runtime cache configuration.

    Environment Variables:
        LABELS_DEBUG: Append the lookup key to every resolved label (default: False)
        LABELS_BASE_DIR: Directory that plain (non ``EXT:``) label file locators
            are resolved against (default: current directory)
        LABELS_EXTENSIONS_DIR: Directory holding one sub-directory per extension,
            used for ``EXT:<extension>/<path>`` locators (default: "extensions")
        LABELS_FILE_CACHE: Keep parsed label files in memory (default: True)
        LABELS_CACHE_MAX_ENTRIES: Capacity of the in-memory runtime cache,
            0 means unbounded (default: 0)
        LABELS_EXTRA_LOCALES: JSON dict of additional language keys to their
            display labels, e.g. ``{"de_LU": "German (Luxembourg)"}``
        LABELS_LOCALE_DEPENDENCIES: JSON dict of language key to the list of
            language keys it falls back to, e.g. ``{"de_LU": ["de"]}``

    Example:
        ```python
        from infrastructure.configuration import settings

        if settings.localization.LABELS_DEBUG:
            # Show label keys in the output...
        ```
    """

    LABELS_DEBUG: bool = Field(default=False, alias="LABELS_DEBUG")
    LABELS_BASE_DIR: str = Field(default=".", alias="LABELS_BASE_DIR")
    LABELS_EXTENSIONS_DIR: str = Field(
        default="extensions", alias="LABELS_EXTENSIONS_DIR"
    )
    LABELS_FILE_CACHE: bool = Field(default=True, alias="LABELS_FILE_CACHE")
    LABELS_CACHE_MAX_ENTRIES: int = Field(
        default=0, ge=0, alias="LABELS_CACHE_MAX_ENTRIES"
    )
    LABELS_EXTRA_LOCALES: Dict[str, str] = Field(
        default_factory=dict, alias="LABELS_EXTRA_LOCALES"
    )
    LABELS_LOCALE_DEPENDENCIES: Dict[str, List[str]] = Field(
        default_factory=dict, alias="LABELS_LOCALE_DEPENDENCIES"
    )

    @field_validator(
        "LABELS_EXTRA_LOCALES", "LABELS_LOCALE_DEPENDENCIES", mode="before"
    )
    @classmethod
    def validate_mappings(cls, v: Any) -> Any:
        """Treat empty or null values as an empty mapping."""
        if v is None or v == "":
            return {}
        return v

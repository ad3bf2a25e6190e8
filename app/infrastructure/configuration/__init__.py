"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the label
service using Pydantic BaseSettings with domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    LocalizationSettings: Label resolution settings class (for testing)

Example:
    ```python
    from infrastructure.configuration import settings

    debug = settings.localization.LABELS_DEBUG
    base_dir = settings.localization.LABELS_BASE_DIR
    ```
"""

from infrastructure.configuration.infrastructure.localization import (
    LocalizationSettings,
)
from infrastructure.configuration.settings import Settings, settings

__all__ = ["Settings", "LocalizationSettings", "settings"]

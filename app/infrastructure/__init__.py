"""Infrastructure modules for the label service.

Centralized infrastructure components:
- configuration: Settings management (settings, Settings)
- logging: Structured logging (get_module_logger, logger)
- cache: Runtime cache (RuntimeCache, InMemoryRuntimeCache)
- localization: Label resolution (LabelResolver, create_label_resolver)
"""

# Configuration
from infrastructure.configuration import settings

# Observability
from infrastructure.logging import get_module_logger, logger

__all__ = [
    # Configuration
    "settings",
    # Observability
    "get_module_logger",
    "logger",
]

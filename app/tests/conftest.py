import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.localization`) works during pytest collection
# regardless of how pytest was invoked.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402

from infrastructure.cache import InMemoryRuntimeCache  # noqa: E402
from infrastructure.localization.factory import (  # noqa: E402
    get_label_file_loader,
    get_locale_catalog,
)


@pytest.fixture
def runtime_cache():
    """Fresh request-scoped runtime cache."""
    return InMemoryRuntimeCache()


@pytest.fixture(autouse=True)
def reset_localization_providers():
    """Drop cached catalog/loader singletons between tests."""
    get_locale_catalog.cache_clear()
    get_label_file_loader.cache_clear()
    yield
    get_locale_catalog.cache_clear()
    get_label_file_loader.cache_clear()

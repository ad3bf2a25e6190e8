"""Feature-level fixtures for label resolution tests.

Provides label files, loaders and resolvers for fallback scenarios.
"""

import pytest

from infrastructure.localization import YAMLLabelFileLoader
from tests.factories.localization import (
    make_catalog,
    make_memory_loader,
    make_resolver,
    write_label_file,
)


@pytest.fixture
def catalog():
    """LocaleCatalog with fr_CA -> fr and de_AT_vienna -> de_AT -> de chains."""
    return make_catalog()


@pytest.fixture
def memory_loader():
    """InMemoryLabelFileLoader holding the default test label files."""
    return make_memory_loader()


@pytest.fixture
def resolver(catalog, memory_loader, runtime_cache):
    """LabelResolver on the base language."""
    return make_resolver(
        loader=memory_loader, cache=runtime_cache, catalog=catalog
    )


@pytest.fixture
def labels_dir(tmp_path):
    """Create a directory with YAML label files.

    Returns a directory structure like:
    - extensions/core/labels.yml        (base language)
    - extensions/core/de.labels.yml     (German)
    - extensions/core/de_AT.labels.yml  (Austrian German)
    - local/form.yml                    (base language, no translations)
    """
    core = tmp_path / "extensions" / "core"
    write_label_file(
        core / "labels.yml",
        {
            "labels.save": "Save",
            "labels.cancel": "Cancel",
            "labels.depth_0": "This page",
            "labels.indirect": [{"source": "Close", "target": "Close"}],
        },
    )
    write_label_file(
        core / "de.labels.yml",
        {
            "labels.save": "Speichern",
            "labels.cancel": [{"source": "Cancel", "target": "Abbrechen"}],
            "labels.depth_0": "",
        },
    )
    write_label_file(
        core / "de_AT.labels.yml",
        {
            "labels.save": "Sichern",
        },
    )
    write_label_file(tmp_path / "local" / "form.yml", {"form.title": "Form"})
    return tmp_path


@pytest.fixture
def yaml_loader(labels_dir):
    """YAMLLabelFileLoader for the temporary label directory, no caching."""
    return YAMLLabelFileLoader(
        base_dir=labels_dir,
        extensions_dir=labels_dir / "extensions",
        use_cache=False,
    )

"""Test data factories for deterministic test data generation."""

from tests.factories.localization import (
    make_catalog,
    make_label_files,
    make_memory_loader,
    make_resolver,
    write_label_file,
)

__all__ = [
    "make_catalog",
    "make_label_files",
    "make_memory_loader",
    "make_resolver",
    "write_label_file",
]

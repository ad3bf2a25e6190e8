"""Tests for infrastructure.localization.models module."""

import pytest

from infrastructure.localization.models import (
    IndirectLabel,
    LabelReference,
    PlainLabel,
    label_text,
    parse_label_value,
)

pytestmark = pytest.mark.unit


class TestLabelReference:
    """Tests for LabelReference parsing."""

    def test_parse_extension_reference(self):
        """EXT: locators keep their prefix and split off the label key."""
        ref = LabelReference.parse(
            "LLL:EXT:core/Resources/Private/Language/labels.yml:labels.depth_0"
        )

        assert ref.file_locator == "EXT:core/Resources/Private/Language/labels.yml"
        assert ref.label_key == "labels.depth_0"
        assert ref.is_extension is True

    def test_parse_local_reference(self):
        """Plain locators are not extension references."""
        ref = LabelReference.parse("LLL:local/form.yml:form.title")

        assert ref.file_locator == "local/form.yml"
        assert ref.label_key == "form.title"
        assert ref.is_extension is False

    def test_parse_missing_label_key_defaults_to_empty(self):
        """A reference without a key gets an empty label key."""
        ref = LabelReference.parse("LLL:EXT:foo/bar.yml")

        assert ref.file_locator == "EXT:foo/bar.yml"
        assert ref.label_key == ""

    def test_parse_splits_on_first_delimiter_only(self):
        """Colons after the first one stay in the label key."""
        ref = LabelReference.parse("LLL:EXT:foo/bar.yml:a:b")

        assert ref.file_locator == "EXT:foo/bar.yml"
        assert ref.label_key == "a:b"

    def test_parse_trims_surrounding_whitespace(self):
        """Surrounding whitespace is ignored."""
        ref = LabelReference.parse("  LLL:EXT:foo/bar.yml:labels.save  ")

        assert ref.file_locator == "EXT:foo/bar.yml"
        assert ref.label_key == "labels.save"

    @pytest.mark.parametrize(
        "value", ["Save", "lll:EXT:foo/bar.yml:x", "EXT:foo/bar.yml:x", ""]
    )
    def test_parse_non_reference_returns_none(self, value):
        """Strings without the case-sensitive LLL: prefix are not references."""
        assert LabelReference.parse(value) is None
        assert LabelReference.is_reference(value) is False

    def test_str_round_trips_reference(self):
        """str() renders the reference format."""
        raw = "LLL:EXT:foo/bar.yml:labels.save"
        assert str(LabelReference.parse(raw)) == raw


class TestLabelValue:
    """Tests for label value classification."""

    def test_plain_string(self):
        """Strings are plain labels."""
        assert parse_label_value("Save") == PlainLabel("Save")

    def test_indirect_structure(self):
        """One-element lists with a target are indirect labels."""
        value = parse_label_value([{"source": "Save", "target": "Speichern"}])

        assert value == IndirectLabel(target="Speichern", source="Save")

    def test_both_shapes_have_same_text(self):
        """Plain and indirect labels resolve to the same text."""
        assert label_text("Save") == label_text([{"target": "Save"}]) == "Save"

    @pytest.mark.parametrize("raw", [None, [], [{}], [{"source": "x"}], {"a": "b"}, 3])
    def test_unsupported_shapes(self, raw):
        """Unsupported shapes have no text."""
        assert parse_label_value(raw) is None
        assert label_text(raw) is None

    def test_parsed_values_pass_through(self):
        """Already parsed values are returned unchanged."""
        value = IndirectLabel(target="Save")
        assert parse_label_value(value) is value
        assert label_text(value) == "Save"

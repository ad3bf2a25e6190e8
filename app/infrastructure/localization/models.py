"""Label models for the label resolution system.

Defines label references, label values and the constants of the reference
format ``LLL:[EXT:]<file-locator>:<label-key>``.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

DEFAULT_LANGUAGE = "default"
"""Language key of the base language (English)."""

LABEL_SCHEME = "LLL:"
EXTENSION_PREFIX = "EXT:"
KEY_DELIMITER = ":"

LabelMapping = Dict[str, Dict[str, Any]]
"""Language key -> (label key -> label value)."""


@dataclass(frozen=True)
class PlainLabel:
    """A label stored directly as a string."""

    text: str


@dataclass(frozen=True)
class IndirectLabel:
    """A label stored as a one-element list carrying a ``target`` attribute.

    This is the shape richer label file formats produce, e.g.
    ``[{"source": "Save", "target": "Speichern"}]``.
    """

    target: str
    source: Optional[str] = None


LabelValue = Union[PlainLabel, IndirectLabel]


def parse_label_value(raw: Any) -> Optional[LabelValue]:
    """Classify a raw label file value.

    Args:
        raw: Value as found in a parsed label file.

    Returns:
        PlainLabel or IndirectLabel, or None for unsupported shapes.
    """
    if isinstance(raw, (PlainLabel, IndirectLabel)):
        return raw
    if isinstance(raw, str):
        return PlainLabel(raw)
    if isinstance(raw, (list, tuple)) and raw:
        first = raw[0]
        if isinstance(first, Mapping) and first.get("target") is not None:
            source = first.get("source")
            return IndirectLabel(
                target=str(first["target"]),
                source=None if source is None else str(source),
            )
    return None


def label_text(raw: Any) -> Optional[str]:
    """Return the display text of a raw or parsed label value.

    Plain strings and ``target`` indirections resolve identically.
    """
    value = parse_label_value(raw)
    if isinstance(value, PlainLabel):
        return value.text
    if isinstance(value, IndirectLabel):
        return value.target
    return None


@dataclass(frozen=True)
class LabelReference:
    """A parsed ``LLL:`` label reference.

    Attributes:
        file_locator: Label file locator, including the ``EXT:`` prefix when
            the file lives in an extension.
        label_key: Key of the label inside the file ("" when absent).
        is_extension: Whether the locator addresses an extension.
    """

    file_locator: str
    label_key: str = ""
    is_extension: bool = False

    @staticmethod
    def is_reference(value: str) -> bool:
        """Check whether a string is a label reference (case-sensitive)."""
        return value.strip().startswith(LABEL_SCHEME)

    @classmethod
    def parse(cls, value: str) -> Optional["LabelReference"]:
        """Parse a label reference string.

        Resolves strings like
        ``LLL:EXT:core/Resources/Private/Language/labels.yml:labels.depth_0``
        into the locator ``EXT:core/Resources/Private/Language/labels.yml``
        and the key ``labels.depth_0``.

        Args:
            value: Raw reference string.

        Returns:
            LabelReference, or None if the value is not a label reference.
        """
        trimmed = value.strip()
        if not trimmed.startswith(LABEL_SCHEME):
            return None

        rest = trimmed[len(LABEL_SCHEME) :].strip()
        is_extension = rest.startswith(EXTENSION_PREFIX)
        if is_extension:
            rest = rest[len(EXTENSION_PREFIX) :].strip()

        file_locator, _, label_key = rest.partition(KEY_DELIMITER)
        if is_extension:
            file_locator = EXTENSION_PREFIX + file_locator

        return cls(
            file_locator=file_locator,
            label_key=label_key,
            is_extension=is_extension,
        )

    def __str__(self) -> str:
        return f"{LABEL_SCHEME}{self.file_locator}{KEY_DELIMITER}{self.label_key}"

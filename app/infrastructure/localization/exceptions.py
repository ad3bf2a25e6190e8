"""Custom exceptions for the label resolution system.

Missing files and missing keys are not errors for callers of the resolver:
it degrades to empty labels. These exceptions travel between the loader and
the resolver, and are raised to callers only by explicit ``require`` style
APIs.
"""

from typing import Optional


class LocalizationError(Exception):
    """Base exception for all label resolution errors."""

    pass


class UnknownLanguageError(LocalizationError):
    """Raised when a language key is not registered in the locale catalog.

    Example:
        >>> catalog.require("xx")
        Traceback (most recent call last):
        ...
        UnknownLanguageError: Unknown language key: xx
    """

    def __init__(self, language_key: str):
        self.language_key = language_key
        super().__init__(f"Unknown language key: {language_key}")


class LabelFileError(LocalizationError):
    """Base exception for label file problems.

    Attributes:
        file_locator: The locator the loader was asked for.
        path: Resolved file system path, if resolution got that far.
    """

    def __init__(
        self,
        message: str,
        file_locator: str,
        path: Optional[str] = None,
    ):
        self.file_locator = file_locator
        self.path = path
        super().__init__(message)


class LabelFileNotFoundError(LabelFileError):
    """Raised when a label file locator cannot be resolved to a file."""

    pass


class LabelFileParseError(LabelFileError):
    """Raised when a label file exists but cannot be parsed."""

    pass

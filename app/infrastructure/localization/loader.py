"""Label file loading interface and implementations.

A loader parses one label file for one language. The result always carries a
``default`` section (base language labels) and, when a translation exists,
a section named after the requested language.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from infrastructure.localization.exceptions import (
    LabelFileNotFoundError,
    LabelFileParseError,
)
from infrastructure.localization.models import (
    DEFAULT_LANGUAGE,
    EXTENSION_PREFIX,
    LabelMapping,
    label_text,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class LabelYAMLLoader(yaml.SafeLoader):
    """SafeLoader that keeps every scalar except null as text.

    Labels such as ``No``, ``on`` or ``1.10`` stay exactly as written instead
    of turning into booleans or numbers.
    """


LabelYAMLLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp)
        for tag, regexp in resolvers
        if tag in ("tag:yaml.org,2002:null", "tag:yaml.org,2002:merge")
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def normalize_section(
    data: Mapping, file_locator: str = "", language_key: str = ""
) -> Dict[str, Any]:
    """Normalize every label value of a section to a plain string.

    Plain strings and ``target`` indirections both become strings. Nested
    mappings are normalized recursively. Numbers are converted to strings,
    anything else is dropped with a warning.

    Args:
        data: Raw section as parsed from the file.
        file_locator: Source locator (for logging).
        language_key: Section language (for logging).

    Returns:
        Normalized section.
    """
    section: Dict[str, Any] = {}
    for key, value in data.items():
        key = str(key)
        if isinstance(value, Mapping):
            section[key] = normalize_section(value, file_locator, language_key)
            continue
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            section[key] = str(value)
            continue
        text = label_text(value)
        if text is None:
            logger.warning(
                "unsupported_label_value",
                file_locator=file_locator,
                language_key=language_key,
                label_key=key,
                value_type=type(value).__name__,
            )
            continue
        section[key] = text
    return section


class LabelFileLoader(ABC):
    """Abstract base for label file loaders."""

    @abstractmethod
    def parse(self, file_locator: str, language_key: str) -> LabelMapping:
        """Parse a label file for one language.

        Args:
            file_locator: Locator of the label file (``EXT:`` or plain path).
            language_key: Language to load the translation for.

        Returns:
            Mapping with a ``default`` section and, when available, a
            section for ``language_key``.

        Raises:
            LabelFileNotFoundError: If the locator does not resolve to a file.
            LabelFileParseError: If the file cannot be parsed.
        """
        pass


class YAMLLabelFileLoader(LabelFileLoader):
    """Loader for YAML label files.

    The base file holds the base language labels as a flat ``key: value``
    mapping. The translation for language ``xx`` sits beside it as
    ``xx.<file name>``::

        extensions/core/labels.yml      -> default section
        extensions/core/de.labels.yml   -> "de" section

    Values are strings or one-element lists with a ``target`` attribute.

    Attributes:
        base_dir: Directory plain locators are resolved against.
        extensions_dir: Directory with one sub-directory per extension.
        use_cache: Whether parsed files are kept in memory.
        cache: Parsed files keyed by (path, language).
    """

    def __init__(
        self,
        base_dir: Path,
        extensions_dir: Optional[Path] = None,
        use_cache: bool = True,
    ):
        """Initialize YAML label file loader.

        Args:
            base_dir: Directory for plain (non ``EXT:``) locators.
            extensions_dir: Directory for ``EXT:<extension>/<path>`` locators.
                Defaults to ``base_dir / "extensions"``.
            use_cache: Whether to cache parsed files in memory.
        """
        self.base_dir = Path(base_dir)
        self.extensions_dir = (
            Path(extensions_dir)
            if extensions_dir is not None
            else self.base_dir / "extensions"
        )
        self.use_cache = use_cache
        self.cache: Dict[Tuple[str, str], LabelMapping] = {}

        logger.info(
            "initialized_yaml_label_loader",
            base_dir=str(self.base_dir),
            extensions_dir=str(self.extensions_dir),
            use_cache=use_cache,
        )

    def resolve_path(self, file_locator: str) -> Path:
        """Resolve a label file locator to a file system path.

        Args:
            file_locator: ``EXT:<extension>/<path>`` or a plain path.

        Returns:
            Path of the base language file.

        Raises:
            LabelFileNotFoundError: If an ``EXT:`` locator names no file
                inside the extension.
        """
        locator = file_locator.strip()
        if locator.startswith(EXTENSION_PREFIX):
            extension, _, relative = locator[len(EXTENSION_PREFIX) :].partition("/")
            if not extension or not relative:
                raise LabelFileNotFoundError(
                    f"Invalid extension locator: {file_locator}",
                    file_locator=file_locator,
                )
            return self.extensions_dir / extension / relative

        path = Path(locator)
        if not path.is_absolute():
            path = self.base_dir / path
        return path

    def parse(self, file_locator: str, language_key: str) -> LabelMapping:
        path = self.resolve_path(file_locator)
        cache_key = (str(path), language_key)
        if self.use_cache and cache_key in self.cache:
            return self.cache[cache_key]

        if not path.is_file():
            raise LabelFileNotFoundError(
                f"Label file not found: {path}",
                file_locator=file_locator,
                path=str(path),
            )

        result: LabelMapping = {
            DEFAULT_LANGUAGE: self._read_section(path, file_locator, DEFAULT_LANGUAGE)
        }

        if language_key != DEFAULT_LANGUAGE:
            localized_path = path.with_name(f"{language_key}.{path.name}")
            if localized_path.is_file():
                result[language_key] = self._read_section(
                    localized_path, file_locator, language_key
                )

        logger.debug(
            "parsed_label_file",
            file_locator=file_locator,
            language_key=language_key,
            sections=list(result),
        )

        if self.use_cache:
            self.cache[cache_key] = result

        return result

    def _read_section(
        self, path: Path, file_locator: str, language_key: str
    ) -> Dict[str, Any]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.load(f, Loader=LabelYAMLLoader)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            raise LabelFileParseError(
                f"Failed to parse {path}: {e}",
                file_locator=file_locator,
                path=str(path),
            ) from e
        except UnicodeDecodeError as e:
            logger.error("label_file_decode_error", file=str(path), error=str(e))
            raise LabelFileParseError(
                f"Label file is not valid UTF-8: {path}",
                file_locator=file_locator,
                path=str(path),
            ) from e
        except OSError as e:
            logger.error("label_file_read_error", file=str(path), error=str(e))
            raise LabelFileNotFoundError(
                f"Label file not readable: {path}",
                file_locator=file_locator,
                path=str(path),
            ) from e

        if data is None:
            return {}
        if not isinstance(data, Mapping):
            logger.warning("invalid_label_file_format", file=str(path), expected="dict")
            return {}
        return normalize_section(data, file_locator, language_key)

    def clear_cache(self) -> None:
        """Clear all cached label files."""
        self.cache.clear()
        logger.info("cleared_label_file_cache")


class InMemoryLabelFileLoader(LabelFileLoader):
    """Dict-backed loader for embedding and tests.

    Holds ``{file_locator: {language_key: {label_key: value}}}`` and
    records every ``parse`` call in ``calls``.
    """

    def __init__(self, files: Optional[Mapping[str, Mapping[str, Mapping]]] = None):
        self.files: Dict[str, Dict[str, Mapping]] = {
            locator: dict(sections) for locator, sections in (files or {}).items()
        }
        self.calls: List[Tuple[str, str]] = []

    def add_file(self, file_locator: str, sections: Mapping[str, Mapping]) -> None:
        self.files[file_locator] = dict(sections)

    def parse(self, file_locator: str, language_key: str) -> LabelMapping:
        self.calls.append((file_locator, language_key))
        sections = self.files.get(file_locator)
        if sections is None:
            raise LabelFileNotFoundError(
                f"Label file not registered: {file_locator}",
                file_locator=file_locator,
            )

        result: LabelMapping = {
            DEFAULT_LANGUAGE: normalize_section(
                sections.get(DEFAULT_LANGUAGE, {}), file_locator, DEFAULT_LANGUAGE
            )
        }
        if language_key != DEFAULT_LANGUAGE and language_key in sections:
            result[language_key] = normalize_section(
                sections[language_key], file_locator, language_key
            )
        return result

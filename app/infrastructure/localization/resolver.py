"""Label resolver: resolves ``LLL:`` label references to localized strings.

One resolver serves one logical request. It is not safe to share a resolver
between threads; the runtime cache it is given may be shared.
"""

import copy
from collections.abc import Mapping
from typing import Any, List, Optional, Tuple

from infrastructure.cache import RuntimeCache, build_label_file_key, build_label_key
from infrastructure.localization.catalog import LocaleCatalog
from infrastructure.localization.exceptions import LabelFileError
from infrastructure.localization.loader import LabelFileLoader
from infrastructure.localization.merge import merge_recursive_with_override
from infrastructure.localization.models import (
    DEFAULT_LANGUAGE,
    LabelMapping,
    LabelReference,
    label_text,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class LabelResolver:
    """Resolves label references for the active language.

    Resolve strings like
    ``LLL:EXT:core/Resources/Private/Language/labels.yml:labels.depth_0``:
    the label file is looked up in the ``core`` extension and the label
    ``labels.depth_0`` is returned in the active language, falling back
    through the language's dependency chain down to ``default``.

    Missing languages, files and keys are not errors. Unknown languages are
    ignored on activation and missing labels resolve to "".

    Attributes:
        catalog: LocaleCatalog with known languages and their dependencies.
        loader: LabelFileLoader used to parse label files.
        cache: RuntimeCache for resolved labels and merged label files.
        debug: When True, resolved labels get their lookup key appended.
        language: Active language key.
        dependencies: Dependency chain of the active language, most specific
            first.
        labels: Labels merged in through include_file().
    """

    def __init__(
        self,
        catalog: LocaleCatalog,
        loader: LabelFileLoader,
        cache: RuntimeCache,
        debug: bool = False,
    ):
        self.catalog = catalog
        self.loader = loader
        self.cache = cache
        self.debug = debug
        self.language: str = DEFAULT_LANGUAGE
        self.dependencies: Tuple[str, ...] = ()
        self.labels: LabelMapping = {}

    def activate(self, language_key: str) -> None:
        """Activate the language labels are resolved for.

        Unknown language keys are ignored and leave the resolver unchanged.
        Each activation replaces the dependency chain of the previous one.

        Args:
            language_key: Language key, e.g. "de" or "pt_BR".
        """
        if not isinstance(language_key, str) or not self.catalog.is_known(
            language_key
        ):
            logger.debug("language_not_recognized", language_key=language_key)
            return

        self.language = language_key
        self.dependencies = (language_key, *self.catalog.dependencies_of(language_key))
        logger.debug(
            "language_activated",
            language_key=language_key,
            dependencies=list(self.dependencies),
        )

    @property
    def dependency_chain(self) -> Tuple[str, ...]:
        """Dependency chain of the active language, most specific first."""
        return self.dependencies or (self.language,)

    def debug_decoration(self, value: str) -> str:
        """Return ``[value]`` in debug mode, "" otherwise."""
        return f"[{value}]" if self.debug else ""

    def resolve(self, reference: str) -> str:
        """Resolve a label reference to the label in the active language.

        Strings that are not ``LLL:`` references are returned unchanged.

        Args:
            reference: Label reference or constant label.

        Returns:
            Localized label, "" if it does not exist. In debug mode the
            reference is appended in brackets.
        """
        # Empty input never touches the cache or the label files
        if reference == "":
            return reference

        trimmed = reference.strip()
        if not LabelReference.is_reference(trimmed):
            return reference

        cache_key = build_label_key(self.language, trimmed, self.debug)
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached

        parsed = LabelReference.parse(trimmed)
        mapping = self.load_merged_mapping(parsed.file_locator)
        output = self.lookup(mapping, parsed.label_key)
        output += self.debug_decoration(trimmed)

        self.cache.set(cache_key, output)
        return output

    def lookup(self, mapping: Mapping, label_key: str) -> str:
        """Look up a label key in a label mapping.

        Uses the active language section first, then ``default``.

        Args:
            mapping: LabelMapping (language key -> labels).
            label_key: Key of the label.

        Returns:
            Label text, or "" when neither section has the key.
        """
        if not isinstance(mapping, Mapping):
            return ""
        for language_key in (self.language, DEFAULT_LANGUAGE):
            section = mapping.get(language_key)
            if isinstance(section, Mapping) and label_key in section:
                text = label_text(section[label_key])
                if text is not None:
                    return text
        return ""

    def get_label(self, label_key: str) -> str:
        """Return a label from the labels merged in through include_file().

        Args:
            label_key: Key of the label.

        Returns:
            Label text ("" if missing), with ``[label_key]`` appended in
            debug mode.
        """
        return self.lookup(self.labels, label_key) + self.debug_decoration(label_key)

    def include_file(self, file_reference: str) -> LabelMapping:
        """Load a label file and merge it into the resolver's labels.

        Later files override labels of earlier files on key collisions.

        Args:
            file_reference: Label file locator.

        Returns:
            The labels of the loaded file (not the merged labels).
        """
        mapping = self.load_merged_mapping(file_reference)
        if mapping:
            self.labels = merge_recursive_with_override(self.labels, mapping)
        return mapping

    def include_file_raw(self, file_reference: str) -> LabelMapping:
        """Load a label file with the active language folded onto ``default``.

        The active language section is merged onto ``default`` and removed,
        so ``default`` alone holds the fallback-applied labels.

        Args:
            file_reference: Label file locator.

        Returns:
            Label mapping with only a ``default`` section for derived languages.
        """
        labels = copy.deepcopy(self.load_merged_mapping(file_reference))
        if (
            self.language != DEFAULT_LANGUAGE
            and isinstance(labels.get(self.language), dict)
            and isinstance(labels.get(DEFAULT_LANGUAGE), dict)
        ):
            labels[DEFAULT_LANGUAGE] = {
                **labels[DEFAULT_LANGUAGE],
                **labels.pop(self.language),
            }
        return labels

    def load_merged_mapping(self, file_locator: str) -> LabelMapping:
        """Load a label file with the dependency chain applied.

        Files are read from the most general ancestor to the active
        language. Every language's translation is merged onto the labels
        collected so far, so the most specific translation wins per key and
        ``default`` stays available as the last fallback.

        Args:
            file_locator: Label file locator.

        Returns:
            Mapping with a ``default`` section and a section for the active
            language.
        """
        cache_key = build_label_file_key(self.language, file_locator)
        cached = self.cache.get(cache_key)
        if isinstance(cached, dict):
            return cached

        if self.language == DEFAULT_LANGUAGE:
            languages: List[str] = [DEFAULT_LANGUAGE]
        else:
            languages = list(reversed(self.dependency_chain))

        result: LabelMapping = {}
        for language_key in languages:
            data = self._parse(file_locator, language_key)
            default_section = data.get(DEFAULT_LANGUAGE)
            if isinstance(default_section, dict):
                result[DEFAULT_LANGUAGE] = copy.deepcopy(default_section)
            else:
                result[DEFAULT_LANGUAGE] = {}
            if self.language not in result:
                result[self.language] = copy.deepcopy(result[DEFAULT_LANGUAGE])
            if self.language != DEFAULT_LANGUAGE and isinstance(
                data.get(language_key), Mapping
            ):
                # Empty translations keep the label inherited from an ancestor
                result[self.language] = merge_recursive_with_override(
                    result[self.language],
                    data[language_key],
                    include_empty_values=False,
                )

        logger.debug(
            "merged_label_file",
            file_locator=file_locator,
            language_key=self.language,
            languages=languages,
        )
        self.cache.set(cache_key, result)
        return result

    def _parse(self, file_locator: str, language_key: str) -> Mapping[str, Any]:
        try:
            data: Optional[Any] = self.loader.parse(file_locator, language_key)
        except LabelFileError as e:
            logger.warning(
                "label_file_unavailable",
                file_locator=file_locator,
                language_key=language_key,
                error=str(e),
            )
            return {}
        return data if isinstance(data, Mapping) else {}

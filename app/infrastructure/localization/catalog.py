"""Locale catalog: the registry of language keys and their dependencies.

Language keys are not strict ISO codes. English is the base language and
uses the key ``default``. Regional variants depend on their main language,
e.g. Brazilian Portuguese (``pt_BR``) falls back to Portuguese (``pt``).
"""

from typing import Dict, Iterable, List, Mapping, Optional

from infrastructure.localization.exceptions import UnknownLanguageError
from infrastructure.localization.models import DEFAULT_LANGUAGE
from infrastructure.logging import get_module_logger

logger = get_module_logger()

BUILTIN_LOCALES: Dict[str, str] = {
    DEFAULT_LANGUAGE: "English",
    "af": "Afrikaans",
    "ar": "Arabic",
    "bg": "Bulgarian",
    "bs": "Bosnian",
    "ca": "Catalan",
    "ch": "Chinese (Simplified)",
    "cs": "Czech",
    "cy": "Welsh",
    "da": "Danish",
    "de": "German",
    "de_AT": "German (Austria)",
    "de_CH": "German (Switzerland)",
    "el": "Greek",
    "eo": "Esperanto",
    "es": "Spanish",
    "es_MX": "Spanish (Mexico)",
    "et": "Estonian",
    "eu": "Basque",
    "fa": "Persian",
    "fi": "Finnish",
    "fo": "Faroese",
    "fr": "French",
    "fr_CA": "French (Canada)",
    "gl": "Galician",
    "he": "Hebrew",
    "hi": "Hindi",
    "hr": "Croatian",
    "hu": "Hungarian",
    "is": "Icelandic",
    "it": "Italian",
    "ja": "Japanese",
    "ka": "Georgian",
    "kl": "Greenlandic",
    "km": "Khmer",
    "ko": "Korean",
    "lb": "Luxembourgish",
    "lt": "Lithuanian",
    "lv": "Latvian",
    "mi": "Maori",
    "mk": "Macedonian",
    "ms": "Malay",
    "nl": "Dutch",
    "no": "Norwegian",
    "pl": "Polish",
    "pt": "Portuguese",
    "pt_BR": "Brazilian Portuguese",
    "ro": "Romanian",
    "ru": "Russian",
    "rw": "Kinyarwanda",
    "sk": "Slovak",
    "sl": "Slovenian",
    "sn": "Shona",
    "sq": "Albanian",
    "sr": "Serbian",
    "sv": "Swedish",
    "th": "Thai",
    "tr": "Turkish",
    "uk": "Ukrainian",
    "vi": "Vietnamese",
    "zh": "Chinese (Traditional)",
}

BUILTIN_DEPENDENCIES: Dict[str, List[str]] = {
    "de_AT": ["de"],
    "de_CH": ["de"],
    "es_MX": ["es"],
    "fr_CA": ["fr"],
    "pt_BR": ["pt"],
}


class LocaleCatalog:
    """Registry mapping language keys to their fallback dependencies.

    Attributes:
        dependencies: Direct dependencies per language key, most specific
            first. ``dependencies_of`` expands them transitively.
    """

    def __init__(
        self,
        locales: Optional[Mapping[str, str]] = None,
        dependencies: Optional[Mapping[str, Iterable[str]]] = None,
    ):
        """Initialize the catalog.

        Args:
            locales: Language key -> display label. Defaults to the built-in
                language list.
            dependencies: Language key -> direct dependencies. Defaults to
                the built-in regional variant dependencies.
        """
        self._locales: Dict[str, str] = dict(
            BUILTIN_LOCALES if locales is None else locales
        )
        self._locales.setdefault(DEFAULT_LANGUAGE, BUILTIN_LOCALES[DEFAULT_LANGUAGE])
        self.dependencies: Dict[str, List[str]] = {}
        source = BUILTIN_DEPENDENCIES if dependencies is None else dependencies
        for language_key, language_dependencies in source.items():
            self.dependencies[language_key] = list(language_dependencies)

    def locales(self) -> List[str]:
        """Return all known language keys."""
        return list(self._locales)

    def is_known(self, language_key: str) -> bool:
        return language_key in self._locales

    def require(self, language_key: str) -> str:
        """Return the language key if known.

        Raises:
            UnknownLanguageError: If the key is not registered.
        """
        if not self.is_known(language_key):
            raise UnknownLanguageError(language_key)
        return language_key

    def label_of(self, language_key: str) -> Optional[str]:
        return self._locales.get(language_key)

    def register(
        self,
        language_key: str,
        label: Optional[str] = None,
        dependencies: Iterable[str] = (),
    ) -> None:
        """Register a language key, or extend an existing one.

        Args:
            language_key: Key to register.
            label: Display label. Keeps the existing label when omitted.
            dependencies: Direct dependencies, most specific first. Replaces
                existing dependencies when given.
        """
        if label is not None or language_key not in self._locales:
            self._locales[language_key] = label or language_key
        dependencies = list(dependencies)
        if dependencies:
            self.dependencies[language_key] = dependencies
        logger.debug(
            "language_registered",
            language_key=language_key,
            dependencies=dependencies,
        )

    def dependencies_of(self, language_key: str) -> List[str]:
        """Return the fallback languages of a language key.

        Dependencies are expanded transitively, breadth first, so the list
        goes from the most specific to the most general ancestor. The key
        itself and repeated entries are left out, which also stops cycles.

        Args:
            language_key: Language key to expand.

        Returns:
            Ordered list of dependency language keys (may be empty).
        """
        result: List[str] = []
        queue = list(self.dependencies.get(language_key, []))
        while queue:
            dependency = queue.pop(0)
            if dependency == language_key or dependency in result:
                continue
            result.append(dependency)
            queue.extend(self.dependencies.get(dependency, []))
        return result

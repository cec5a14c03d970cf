"""Translation service for retrieving and interpolating translated messages.

Looks strings up by dotted key in the tree merged from a language
preference chain, then substitutes named variables into them.
"""

import re
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from langfall.i18n.loader import TranslationLoader
from langfall.i18n.merge import lookup, resolve
from langfall.i18n.models import LanguageDescriptor, TranslationKey, TranslationTree
from langfall.i18n.resolvers import LocaleResolver
from langfall.i18n.store import TranslationStore
from langfall.logging import get_module_logger

logger = get_module_logger()

# "{{name}}" must be tried before "{name}"
PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*(?P<double>\w+)\s*\}\}|\{(?P<single>\w+)\}")


class Translator:
    """Service for translating messages with variable interpolation.

    Holds the current TranslationStore. Loading or reloading builds a new
    store and swaps the reference, so lookups running concurrently keep
    reading the store they started with.

    Attributes:
        loader: TranslationLoader for loading translation files.
        fallback_language: Language appended to every lookup chain.
    """

    def __init__(
        self,
        loader: TranslationLoader,
        fallback_language: str = "en",
    ):
        """Initialize Translator.

        Args:
            loader: TranslationLoader instance for loading translations.
            fallback_language: Language used when a key is missing from every
                preferred language (default: en).
        """
        self.loader = loader
        self.fallback_language = fallback_language.lower()
        self.resolver = LocaleResolver(fallback_language=self.fallback_language)
        self._store = TranslationStore()
        logger.info("initialized_translator", fallback_language=self.fallback_language)

    @property
    def store(self) -> TranslationStore:
        """The TranslationStore currently in use."""
        return self._store

    def load_all(self) -> None:
        """Load all available languages from the loader."""
        self._store = self.loader.load_all()
        logger.info("loaded_all_translations", language_count=len(self._store))

    def load_language(self, code: str) -> None:
        """Load one language from the loader into a new store.

        Raises:
            FileNotFoundError: If translation files not found.
        """
        self._store = self._store.replace(code, self.loader.load(code))
        logger.info("loaded_language_translations", language=code)

    def reload(self) -> None:
        """Reload all translations from the loader."""
        self.loader.clear_cache()
        self.load_all()
        logger.info("reloaded_all_translations")

    def get_available_languages(self) -> List[str]:
        """Get the codes of the loaded languages."""
        return self._store.languages()

    def localize(self, preferences: Sequence[LanguageDescriptor]) -> TranslationTree:
        """Merge the trees of the given languages, most preferred first."""
        return resolve(self._store, preferences)

    def lookup(
        self,
        key: Union[str, TranslationKey],
        preferences: Sequence[LanguageDescriptor],
    ) -> Optional[str]:
        """Return the string at ``key`` for the preference chain.

        The fallback language is consulted after the given preferences.

        Returns:
            The string, or None when the key is absent or not a string.
        """
        chain = self.resolver.with_fallback(preferences)
        value = lookup(resolve(self._store, chain), key)
        return value if isinstance(value, str) else None

    def translate(
        self,
        key: Union[str, TranslationKey],
        preferences: Iterable[LanguageDescriptor],
        variables: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Retrieve and interpolate a translated message.

        Args:
            key: Dotted key or TranslationKey identifying the message.
            preferences: Preferred languages, most preferred first.
            variables: Optional dict of variables for interpolation.

        Returns:
            Translated and interpolated message string.

        Raises:
            KeyError: If key not found in any language of the chain.
            ValueError: If a placeholder has no matching variable.
        """
        preferences = list(preferences)
        message = self.lookup(key, preferences)
        if message is None:
            logger.error(
                "translation_not_found",
                key=str(key),
                languages=[p.tag for p in preferences],
                fallback_language=self.fallback_language,
            )
            raise KeyError(f"Translation not found for key {key}")

        return self._interpolate(message, variables or {})

    def _interpolate(self, message: str, variables: Dict[str, Any]) -> str:
        """Replace {{name}} and {name} placeholders with variable values.

        Raises:
            ValueError: If a placeholder has no matching variable.
        """
        names = []
        for match in PLACEHOLDER_PATTERN.finditer(message):
            name = match.group("double") or match.group("single")
            if name not in names:
                names.append(name)

        missing = [name for name in names if name not in variables]
        if missing:
            logger.error(
                "missing_interpolation_variable",
                variables=missing,
                available_variables=list(variables.keys()),
            )
            raise ValueError(f"Missing interpolation variable: {missing[0]}")

        return PLACEHOLDER_PATTERN.sub(
            lambda m: str(variables[m.group("double") or m.group("single")]),
            message,
        )

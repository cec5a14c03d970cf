"""Factory functions for creating i18n components.

Builds loaders and translators from explicit arguments, falling back to
``settings.i18n`` for anything not given.
"""

from pathlib import Path
from typing import Optional

import structlog

from langfall.configuration import Settings, get_settings
from langfall.i18n.loader import YAMLTranslationLoader
from langfall.i18n.resolvers import LocaleResolver
from langfall.i18n.translator import Translator

logger = structlog.get_logger()


def create_translator(
    translations_dir: Optional[Path] = None,
    pattern: Optional[str] = None,
    fallback_language: Optional[str] = None,
    use_cache: Optional[bool] = None,
    preload: bool = True,
    settings: Optional[Settings] = None,
) -> Translator:
    """Create and configure a Translator instance.

    Args:
        translations_dir: Directory of YAML translation files
            (default: settings.i18n.translations_dir)
        pattern: Glob selecting translation files (default: settings.i18n.translations_pattern)
        fallback_language: Language appended to lookup chains
            (default: settings.i18n.fallback_language)
        use_cache: Whether the loader caches parsed YAML (default: settings.i18n.use_cache)
        preload: Whether to load all languages immediately (default: True)
        settings: Settings to read defaults from (default: get_settings())

    Returns:
        Translator: Configured translator instance

    Raises:
        ValueError: If translations_dir does not exist

    Usage:
        # Defaults from the environment, preload all
        translator = create_translator()

        # Lazy loading from a custom directory
        translator = create_translator(translations_dir=Path("l10n"), preload=False)
        translator.load_language("de")
    """
    i18n = (settings or get_settings()).i18n
    translations_dir = Path(translations_dir or i18n.translations_dir)

    loader = YAMLTranslationLoader(
        translations_dir=translations_dir,
        pattern=pattern or i18n.translations_pattern,
        use_cache=i18n.use_cache if use_cache is None else use_cache,
    )
    translator = Translator(
        loader=loader,
        fallback_language=fallback_language or i18n.fallback_language,
    )

    if preload:
        translator.load_all()
        logger.info(
            "translator_created_with_preload",
            translations_dir=str(translations_dir),
            language_count=len(translator.get_available_languages()),
        )
    else:
        logger.info(
            "translator_created_lazy",
            translations_dir=str(translations_dir),
        )

    return translator


def create_locale_resolver(settings: Optional[Settings] = None) -> LocaleResolver:
    """Create a LocaleResolver configured from settings.i18n."""
    i18n = (settings or get_settings()).i18n
    return LocaleResolver(
        fallback_language=i18n.fallback_language,
        sort_by_quality=i18n.sort_by_quality,
    )

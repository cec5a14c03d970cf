"""Localization feature settings."""

from pydantic import Field, field_validator

from langfall.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Translation loading and language negotiation configuration.

    Environment Variables:
        I18N_TRANSLATIONS_DIR: Directory holding the translation files (default: locales)
        I18N_TRANSLATIONS_PATTERN: Glob, relative to the directory, selecting
            translation files (default: *.yml). Use **/*.yml to recurse.
        I18N_FALLBACK_LANGUAGE: Language appended to every preference chain (default: en)
        I18N_SORT_BY_QUALITY: Reorder negotiated languages by quality (default: False)
        I18N_USE_CACHE: Cache parsed YAML per language in the loader (default: True)

    Example:
        ```python
        from langfall.configuration import get_settings

        settings = get_settings()
        fallback = settings.i18n.fallback_language
        ```
    """

    translations_dir: str = Field(
        default="locales",
        alias="I18N_TRANSLATIONS_DIR",
        description="Directory holding the translation files",
    )
    translations_pattern: str = Field(
        default="*.yml",
        alias="I18N_TRANSLATIONS_PATTERN",
        description="Glob selecting translation files inside the directory",
    )
    fallback_language: str = Field(
        default="en",
        alias="I18N_FALLBACK_LANGUAGE",
        description="Language code appended to every preference chain",
    )
    sort_by_quality: bool = Field(
        default=False,
        alias="I18N_SORT_BY_QUALITY",
        description="Sort negotiated languages by descending quality",
    )
    use_cache: bool = Field(
        default=True,
        alias="I18N_USE_CACHE",
        description="Cache parsed translation trees in the loader",
    )

    @field_validator("fallback_language", mode="before")
    @classmethod
    def validate_fallback_language(cls, v: str) -> str:
        """Normalize the fallback language code to lowercase."""
        if not isinstance(v, str) or not v.strip():
            raise ValueError("I18N_FALLBACK_LANGUAGE must be a non-empty string")
        return v.strip().lower()

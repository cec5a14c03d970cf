"""Configuration module - public API.

Centralized configuration for langfall using Pydantic BaseSettings.

Exports:
    get_settings: Cached Settings singleton accessor
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation settings class (for testing)

Example:
    ```python
    from langfall.configuration import get_settings

    settings = get_settings()
    fallback = settings.i18n.fallback_language
    ```
"""

from langfall.configuration.i18n import I18nSettings
from langfall.configuration.settings import Settings, get_settings

__all__ = ["Settings", "I18nSettings", "get_settings"]

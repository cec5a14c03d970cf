"""Langfall configuration settings - main aggregator."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from langfall.configuration.i18n import I18nSettings


class Settings(BaseSettings):
    """Langfall configuration settings - main aggregator.

    Aggregates the domain-specific settings into a single configuration object.

    Environment Variables:
        PREFIX: Environment prefix; empty means production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Git commit SHA for deployment tracking

    Example:
        ```python
        from langfall.configuration import get_settings

        settings = get_settings()
        translations_dir = settings.i18n.translations_dir

        if settings.is_production:
            # Production-specific logic...
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "i18n": I18nSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.
    Tests that change the environment call ``get_settings.cache_clear()``.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()

"""Feature-level fixtures for i18n system tests.

Provides temporary translation directories and sample headers.
"""

import pytest
import yaml

from langfall.i18n import YAMLTranslationLoader


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML translation files.

    Returns a directory structure like:
    - en.yml
    - de.yml
    """
    en = {
        "greeting": "hi",
        "secret": "pancakes",
        "thankyou": "Thanks for playing {{team}}!",
        "errors": {
            "not_found": "{item} was not found",
            "forbidden": "Access denied",
        },
        "tags": ["a", "b"],
    }
    with open(tmp_path / "en.yml", "w", encoding="utf-8") as f:
        yaml.dump(en, f, allow_unicode=True)

    de = {
        "greeting": "moin moin",
        "errors": {"not_found": "{item} wurde nicht gefunden"},
        "tags": ["c"],
    }
    with open(tmp_path / "de.yml", "w", encoding="utf-8") as f:
        yaml.dump(de, f, allow_unicode=True)

    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLTranslationLoader for temporary translations directory."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=False)


@pytest.fixture
def yaml_loader_with_cache(temp_translations_dir):
    """Create YAMLTranslationLoader with caching enabled."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=True)


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "simple_en": "en",
        "specific_en_us": "en-US",
        "multi": "en-US,en;q=0.7,de-DE;q=0.3",
        "spaced": "en-US, en;q=0.7, de-DE;q=0.3",
        "ascending": "de;q=0.3,fr;q=0.9,en",
        "invalid_quality": "en;q=invalid,fr",
        "with_garbage": "en,;;;,de",
    }

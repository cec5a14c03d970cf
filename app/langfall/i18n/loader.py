"""Translation loading interface and implementations.

Defines the contract for loading translation trees and provides a YAML
loader where each file's stem is its language code (``de.yml`` -> ``de``).
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List

import structlog
import yaml

from langfall.i18n.merge import merge
from langfall.i18n.models import TranslationTree
from langfall.i18n.store import TranslationStore

logger = structlog.get_logger()


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations define how translation trees are found and parsed.
    """

    @abstractmethod
    def load(self, code: str) -> TranslationTree:
        """Load the translation tree for one language.

        Args:
            code: Language code (e.g., "en").

        Returns:
            Parsed translation tree.

        Raises:
            FileNotFoundError: If no translations exist for the language.
            ValueError: If translation format is invalid.
        """
        pass

    @abstractmethod
    def load_all(self) -> TranslationStore:
        """Load every available language into a store."""
        pass

    def clear_cache(self) -> None:
        """Drop any cached trees. Loaders without a cache do nothing."""
        pass


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML translation files.

    Files are selected with a glob relative to the translations directory.
    When several files share a stem (e.g. ``app/de.yml`` and ``emails/de.yml``
    under a ``**/*.yml`` pattern) their trees are merged in sorted path order.

    Attributes:
        translations_dir: Directory containing YAML files.
        pattern: Glob used to select files.
        cache: Loaded trees by language code, when caching is enabled.
    """

    def __init__(
        self,
        translations_dir: Path,
        pattern: str = "*.yml",
        use_cache: bool = True,
    ):
        """Initialize YAML translation loader.

        Args:
            translations_dir: Directory with YAML translation files.
            pattern: Glob selecting translation files (default: "*.yml").
            use_cache: Whether to cache loaded trees in memory.

        Raises:
            ValueError: If translations_dir does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.pattern = pattern
        self.use_cache = use_cache
        self.cache: Dict[str, TranslationTree] = {}

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            pattern=pattern,
            use_cache=use_cache,
        )

    def _files_by_language(self) -> Dict[str, List[Path]]:
        files: Dict[str, List[Path]] = {}
        for path in sorted(self.translations_dir.glob(self.pattern)):
            if path.is_file():
                files.setdefault(path.stem, []).append(path)
        return files

    def _read(self, path: Path) -> TranslationTree:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            raise ValueError(f"Failed to parse {path}: {e}") from e
        return {} if data is None else data

    def load(self, code: str) -> TranslationTree:
        """Load and merge every file whose stem is ``code``.

        Args:
            code: Language code to load.

        Returns:
            Translation tree for the language.

        Raises:
            FileNotFoundError: If no YAML file exists for the language.
            ValueError: If YAML parsing fails.
        """
        if self.use_cache and code in self.cache:
            logger.debug("loaded_from_cache", language=code)
            return self.cache[code]

        paths = self._files_by_language().get(code)
        if not paths:
            raise FileNotFoundError(
                f"No translation files found for language {code} in {self.translations_dir}"
            )

        tree = self._load_paths(code, paths)
        if self.use_cache:
            self.cache[code] = tree
        return tree

    def _load_paths(self, code: str, paths: List[Path]) -> TranslationTree:
        tree: TranslationTree = {}
        for path in paths:
            tree = merge(tree, self._read(path))

        logger.info("loaded_translations", language=code, file_count=len(paths))
        return tree

    def load_all(self) -> TranslationStore:
        """Load every language found by the glob.

        Returns:
            TranslationStore keyed by language code.

        Raises:
            ValueError: If no translation files are found at all.
        """
        files = self._files_by_language()
        if not files:
            raise ValueError(f"No translation files found in {self.translations_dir}")

        translations = {}
        for code, paths in files.items():
            if self.use_cache and code in self.cache:
                translations[code] = self.cache[code]
                continue
            translations[code] = self._load_paths(code, paths)
            if self.use_cache:
                self.cache[code] = translations[code]

        return TranslationStore(translations, source=str(self.translations_dir))

    def clear_cache(self) -> None:
        """Clear all cached translations."""
        self.cache.clear()
        logger.info("cleared_translation_cache")

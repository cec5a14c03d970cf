"""Read-only store of translation trees keyed by language code."""

import copy
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Optional

from langfall.i18n.models import TranslationTree


class TranslationStore(Mapping):
    """Immutable mapping from language code to its loaded translation tree.

    The store deep-copies the trees it is given and exposes no mutators.
    Reloading produces a new store; holders swap their reference to it, so
    resolvers already working with the old store are unaffected.

    Attributes:
        source: Optional description of where the trees came from (for logs).
    """

    def __init__(
        self,
        translations: Optional[Mapping] = None,
        source: Optional[str] = None,
    ):
        trees: Dict[str, Any] = {
            str(code): copy.deepcopy(tree)
            for code, tree in (translations or {}).items()
        }
        self._translations = MappingProxyType(trees)
        self.source = source

    def __getitem__(self, code: str) -> TranslationTree:
        return self._translations[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._translations)

    def __len__(self) -> int:
        return len(self._translations)

    def __repr__(self) -> str:
        return f"TranslationStore(languages={self.languages()!r})"

    def languages(self) -> List[str]:
        """Return the codes of all loaded languages, sorted."""
        return sorted(self._translations)

    def replace(self, code: str, tree: TranslationTree) -> "TranslationStore":
        """Return a new store with the tree for ``code`` set to ``tree``."""
        translations = dict(self._translations)
        translations[code] = tree
        return TranslationStore(translations, source=self.source)

    def merged_with(self, other: Mapping) -> "TranslationStore":
        """Return a new store where languages from ``other`` take precedence."""
        translations = dict(self._translations)
        translations.update(other)
        return TranslationStore(translations, source=self.source)

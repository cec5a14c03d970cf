"""Hierarchical merge of translation trees across a fallback chain.

Resolution takes the trees of every preferred language present in the store
and folds them, lowest priority first, into an empty map. Higher priority
languages therefore override lower ones key by key, with one exception:
when both sides hold a sequence under the same key, the items are
concatenated (lower priority items first) instead of replaced.

Example:
    store = TranslationStore({
        "en": {"greeting": "hi", "secret": "pancakes"},
        "de": {"greeting": "moin moin"},
    })
    resolve(store, [LanguageDescriptor("de"), LanguageDescriptor("en")])
    # {"greeting": "moin moin", "secret": "pancakes"}

Merging only ever mutates the accumulator. Values taken from the store are
deep-copied on the way in, so the store's trees are never aliased or
modified and concurrent resolutions against one store are safe.
"""

import copy
from collections.abc import Mapping
from typing import Any, Iterable, Optional, Union

from langfall.i18n.models import (
    LanguageDescriptor,
    TranslationKey,
    TranslationTree,
    is_map_like,
    is_sequence_like,
)


def merge(destination: TranslationTree, source: TranslationTree) -> TranslationTree:
    """Merge ``source`` into ``destination``.

    When both values are maps, ``destination`` is updated in place and
    returned. Otherwise ``source`` wins outright and a copy of it is
    returned, so callers must always use the return value.

    Args:
        destination: Accumulated tree (lower priority).
        source: Tree to apply on top (higher priority). Never modified.

    Returns:
        The merged value.
    """
    if not (is_map_like(destination) and is_map_like(source)):
        return copy.deepcopy(source)

    for key, value in source.items():
        if (
            is_sequence_like(value)
            and key in destination
            and is_sequence_like(destination[key])
        ):
            destination[key] = list(destination[key]) + copy.deepcopy(list(value))
        elif key not in destination:
            destination[key] = copy.deepcopy(value)
        else:
            destination[key] = merge(destination[key], value)
    return destination


def resolve(
    store: Mapping,
    preferences: Iterable[LanguageDescriptor],
) -> TranslationTree:
    """Build one tree from the store following a language preference list.

    Languages absent from the store are skipped silently; that is the
    normal fallback case, not an error.

    Args:
        store: Mapping of language code to translation tree.
        preferences: Descriptors in priority order, most preferred first.

    Returns:
        A fresh merged tree; an empty dict when no language matched.
    """
    trees = [store[p.code] for p in preferences if p.code in store]

    merged: TranslationTree = {}
    for tree in reversed(trees):
        merged = merge(merged, tree)
    return merged


def lookup(
    tree: TranslationTree,
    key: Union[str, TranslationKey],
) -> Optional[Any]:
    """Return the value at a dotted key path, or None if any step is missing."""
    if isinstance(key, str):
        key = TranslationKey.from_string(key)

    node: Any = tree
    for part in key.parts:
        if not is_map_like(node) or part not in node:
            return None
        node = node[part]
    return node

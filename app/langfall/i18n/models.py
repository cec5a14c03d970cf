"""Translation models for the i18n system.

Defines the language descriptor produced by header negotiation, the dotted
translation key used for lookups, and the helpers that classify tree values.
"""

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

UNKNOWN_LANGUAGE_CODE = "unknown"
DEFAULT_QUALITY = 1.0
REJECTED_QUALITY = 0.0

# Parsed YAML/JSON: maps, sequences and scalars, nested arbitrarily.
TranslationTree = Union[Dict[str, Any], List[Any], str, int, float, bool, None]


def is_map_like(value: Any) -> bool:
    """Return True for mapping values (YAML maps, dicts)."""
    return isinstance(value, Mapping)


def is_sequence_like(value: Any) -> bool:
    """Return True for sequence values.

    Strings and bytes are sequences to Python but scalars in a translation
    tree, so they are excluded.
    """
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )


@dataclass(frozen=True)
class LanguageDescriptor:
    """One negotiated language preference.

    Built once per parsed header segment and never modified. Frozen to keep
    preference lists safe to share and hashable for de-duplication.

    Attributes:
        code: Primary language subtag, lowercase (e.g., "en").
        region: Region subtag (e.g., "US"), or None when not given.
        quality: Preference weight in [0.0, 1.0]; higher is more preferred.
    """

    code: str
    region: Optional[str] = None
    quality: float = DEFAULT_QUALITY

    def __post_init__(self) -> None:
        if not self.code:
            object.__setattr__(self, "code", UNKNOWN_LANGUAGE_CODE)
        if not isinstance(self.quality, (int, float)) or isinstance(
            self.quality, bool
        ):
            raise ValueError(f"Quality must be a number: {self.quality!r}")
        if not math.isfinite(self.quality) or not 0.0 <= self.quality <= 1.0:
            raise ValueError(f"Quality must be within [0, 1]: {self.quality!r}")
        object.__setattr__(self, "quality", float(self.quality))

    @property
    def tag(self) -> str:
        """Language tag without the quality clause (e.g., "en-US")."""
        if self.region:
            return f"{self.code}-{self.region}"
        return self.code

    def __str__(self) -> str:
        return self.tag

    @classmethod
    def from_string(cls, segment: str) -> "LanguageDescriptor":
        """Create a LanguageDescriptor from a single header segment.

        Args:
            segment: Segment such as "en", "en-US" or "de;q=0.5".

        Returns:
            Parsed LanguageDescriptor.

        Raises:
            LanguageParseError: If the segment holds no language code.
        """
        from langfall.i18n.parser import parse_segment

        return parse_segment(segment)


@dataclass(frozen=True)
class TranslationKey:
    """Dotted path to a value inside a translation tree.

    Keys are hierarchical (e.g., "greeting", "errors.not_found").

    Attributes:
        parts: Path segments from the tree root, in order.
    """

    parts: Tuple[str, ...]

    def __str__(self) -> str:
        """Return full dot-separated key path."""
        return ".".join(self.parts)

    @classmethod
    def from_string(cls, key_string: str) -> "TranslationKey":
        """Create TranslationKey from a dot-separated string.

        Args:
            key_string: Dot-separated key (e.g., "errors.not_found").

        Returns:
            TranslationKey instance.

        Raises:
            ValueError: If the key is empty or has an empty segment.
        """
        parts = tuple(key_string.split("."))
        if not key_string or any(not part for part in parts):
            raise ValueError(f"Invalid translation key: {key_string!r}")
        return cls(parts=parts)

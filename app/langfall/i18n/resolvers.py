"""Locale resolution at the application boundary.

Turns a raw Accept-Language value into the preference chain handed to the
merge engine. This is where dropped segments are reported and where the
configured fallback language and ordering policy are applied; the parser
and merge functions themselves stay silent and policy-free.
"""

from typing import Iterable, List, Optional

from langfall.i18n.errors import LanguageParseError
from langfall.i18n.models import LanguageDescriptor
from langfall.i18n.parser import parse_preference_header, parse_segment, sort_by_quality
from langfall.logging import get_module_logger

logger = get_module_logger()


class LocaleResolver:
    """Builds language preference chains from header values.

    Chain construction:
    1. Header segments in header order (or by descending quality when
       ``sort_by_quality`` is set)
    2. Fallback language, unless its code is already in the chain
    """

    def __init__(self, fallback_language: str = "en", sort_by_quality: bool = False):
        """Initialize locale resolver.

        Args:
            fallback_language: Language appended to every chain.
            sort_by_quality: Reorder parsed languages by descending quality.
        """
        self.fallback_language = fallback_language.lower()
        self.sort_by_quality = sort_by_quality
        self.log = logger.bind(fallback_language=self.fallback_language)

    def _report_dropped(self, segment: str, error: LanguageParseError) -> None:
        self.log.warning("dropped_language_segment", segment=segment, error=str(error))

    def resolve_preferences(
        self, accept_language: Optional[str]
    ) -> List[LanguageDescriptor]:
        """Resolve a preference chain from an Accept-Language header value.

        Args:
            accept_language: Header value, possibly empty or None.

        Returns:
            Descriptors, most preferred first, always ending with the
            fallback language when it was not requested explicitly.
        """
        preferences = parse_preference_header(
            accept_language, on_malformed=self._report_dropped
        )
        if not preferences and accept_language:
            self.log.info("no_usable_language_in_header", header=accept_language)

        if self.sort_by_quality:
            preferences = sort_by_quality(preferences)

        chain = self.with_fallback(preferences)
        self.log.debug("resolved_preferences", languages=[p.tag for p in chain])
        return chain

    def with_fallback(
        self, preferences: Iterable[LanguageDescriptor]
    ) -> List[LanguageDescriptor]:
        """Append the fallback language to a chain that does not contain it."""
        chain = list(preferences)
        if all(p.code != self.fallback_language for p in chain):
            chain.append(LanguageDescriptor(code=self.fallback_language))
        return chain

    def resolve_from_string(self, tag: str) -> LanguageDescriptor:
        """Parse a single language tag (e.g., "de-DE").

        Raises:
            LanguageParseError: If the tag holds no language code.
        """
        try:
            return parse_segment(tag)
        except LanguageParseError:
            self.log.warning("invalid_language_tag", tag=tag)
            raise


class LanguageNegotiator:
    """Picks a single language out of a preference chain."""

    @staticmethod
    def find_best_match(
        preferences: Iterable[LanguageDescriptor],
        available: Iterable[str],
        default: Optional[str] = None,
    ) -> Optional[str]:
        """Find the first preferred language that is available.

        Matching is on the primary language code, so "en-GB" matches an
        available "en".

        Args:
            preferences: Descriptors in preference order.
            available: Available language codes.
            default: Returned when nothing matches.

        Returns:
            Matching available code, or default.
        """
        available_codes = {code.lower(): code for code in available}
        for preference in preferences:
            if preference.code in available_codes:
                return available_codes[preference.code]
        return default

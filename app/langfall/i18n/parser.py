"""Language tag parsing for Accept-Language style headers.

A header is a comma-separated list of segments, each following the grammar
``<code>[-<region>][;q=<quality>]`` where ``<quality>`` is a decimal number.
Parsing is lenient: the leading capture is searched for rather than matched
against the whole segment, so stray surrounding content (including whitespace
left over after a comma, or text after the quality number) does not reject a
segment.

Usage:
    from langfall.i18n.parser import parse_preference_header

    preferences = parse_preference_header("en-US,en;q=0.7,de-DE;q=0.3")
    [p.tag for p in preferences]  # ["en-US", "en", "de-DE"]

These functions are pure. They never log; callers that want to observe
dropped segments pass ``on_malformed``.
"""

import math
import re
from typing import Callable, Iterable, List, Optional

from langfall.i18n.errors import LanguageParseError
from langfall.i18n.models import (
    DEFAULT_QUALITY,
    REJECTED_QUALITY,
    UNKNOWN_LANGUAGE_CODE,
    LanguageDescriptor,
)

LANGUAGE_TAG_PATTERN = re.compile(
    r"(?P<code>\w+)(?:-(?P<region>\w+))?"
    r"(?P<quality_clause>;q=(?P<quality>[-+]?(?:\d*\.)?\d+)?)?"
)

MalformedSegmentHandler = Callable[[str, LanguageParseError], None]


def _parse_quality(match: "re.Match[str]") -> float:
    if match.group("quality_clause") is None:
        return DEFAULT_QUALITY
    raw = match.group("quality")
    if raw is None:
        return REJECTED_QUALITY
    quality = float(raw)
    # a long digit run overflows to inf
    if not math.isfinite(quality):
        return REJECTED_QUALITY
    return min(max(quality, 0.0), 1.0)


def parse_segment(text: str) -> LanguageDescriptor:
    """Parse a single language segment.

    Args:
        text: Segment without commas (e.g., "en", "en-US", "de-DE;q=0.3").

    Returns:
        LanguageDescriptor. Quality is 1.0 when the ``;q=`` clause is
        omitted and 0.0 when it is present but not a usable number.

    Raises:
        LanguageParseError: If no language code can be found in the segment.
    """
    match = LANGUAGE_TAG_PATTERN.search(text)
    if match is None:
        raise LanguageParseError(text)

    code = match.group("code") or UNKNOWN_LANGUAGE_CODE
    return LanguageDescriptor(
        code=code.lower(),
        region=match.group("region"),
        quality=_parse_quality(match),
    )


def parse_preference_header(
    header: Optional[str],
    on_malformed: Optional[MalformedSegmentHandler] = None,
) -> List[LanguageDescriptor]:
    """Parse a full preference header into descriptors, in header order.

    Segments are split on literal commas and not trimmed. Empty segments are
    skipped and malformed ones are dropped, so one bad tag never rejects the
    whole header. The result is not sorted by quality; see
    :func:`sort_by_quality`.

    Args:
        header: Raw header value (e.g., "en-US,en;q=0.7,de-DE;q=0.3").
        on_malformed: Optional callback invoked with each dropped segment and
            its parse error.

    Returns:
        List of LanguageDescriptor, empty when nothing could be parsed.
    """
    if not header:
        return []

    results = []
    for segment in header.split(","):
        if not segment:
            continue
        try:
            results.append(parse_segment(segment))
        except LanguageParseError as e:
            if on_malformed is not None:
                on_malformed(segment, e)
    return results


def sort_by_quality(
    preferences: Iterable[LanguageDescriptor],
) -> List[LanguageDescriptor]:
    """Order preferences by descending quality.

    The sort is stable, so descriptors of equal quality keep header order.
    """
    return sorted(preferences, key=lambda p: p.quality, reverse=True)

"""i18n system - localized text resolution by language fallback.

Parses Accept-Language style preference headers, merges per-language
translation trees along the resulting fallback chain, and looks up and
interpolates strings from the merged tree.

Main components:
- models: LanguageDescriptor, TranslationKey
- parser: parse_segment, parse_preference_header, sort_by_quality
- merge: merge, resolve, lookup
- store: TranslationStore
- loader: TranslationLoader and YAMLTranslationLoader
- translator: Translator service with message interpolation
- resolvers: LocaleResolver and LanguageNegotiator
"""

from langfall.i18n.errors import I18nError, LanguageParseError
from langfall.i18n.loader import TranslationLoader, YAMLTranslationLoader
from langfall.i18n.merge import lookup, merge, resolve
from langfall.i18n.models import (
    UNKNOWN_LANGUAGE_CODE,
    LanguageDescriptor,
    TranslationKey,
)
from langfall.i18n.parser import (
    parse_preference_header,
    parse_segment,
    sort_by_quality,
)
from langfall.i18n.resolvers import LanguageNegotiator, LocaleResolver
from langfall.i18n.store import TranslationStore
from langfall.i18n.translator import Translator

__all__ = [
    "UNKNOWN_LANGUAGE_CODE",
    "LanguageDescriptor",
    "TranslationKey",
    "I18nError",
    "LanguageParseError",
    "parse_segment",
    "parse_preference_header",
    "sort_by_quality",
    "merge",
    "resolve",
    "lookup",
    "TranslationStore",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "Translator",
    "LocaleResolver",
    "LanguageNegotiator",
]

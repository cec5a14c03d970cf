"""Custom exceptions for the i18n system.

Only malformed language segments are errors. Unparseable quality values,
languages missing from the store and every merge input are absorbed by the
core and never raise.
"""


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            descriptor = parse_segment(tag)
        except I18nError as e:
            logger.warning("i18n_error", error=str(e))
    """

    pass


class LanguageParseError(I18nError, ValueError):
    """Raised when a language segment does not match the tag grammar at all.

    Example:
        >>> parse_segment("*")
        Traceback (most recent call last):
        ...
        LanguageParseError: Malformed language segment: '*'
    """

    def __init__(self, segment: str):
        self.segment = segment
        super().__init__(f"Malformed language segment: {segment!r}")

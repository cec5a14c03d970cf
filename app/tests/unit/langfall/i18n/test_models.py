"""Tests for langfall.i18n.models module."""

import dataclasses

import pytest

from langfall.i18n import UNKNOWN_LANGUAGE_CODE, LanguageDescriptor, TranslationKey
from langfall.i18n.models import is_map_like, is_sequence_like
from tests.factories.i18n import make_language_descriptor


@pytest.mark.unit
class TestLanguageDescriptor:
    """Tests for LanguageDescriptor model."""

    def test_defaults(self):
        """LanguageDescriptor defaults to no region and full quality."""
        lang = LanguageDescriptor(code="en")
        assert lang.region is None
        assert lang.quality == 1.0

    def test_tag_with_region(self):
        """tag joins code and region with a hyphen."""
        lang = make_language_descriptor(code="en", region="US")
        assert lang.tag == "en-US"
        assert str(lang) == "en-US"

    def test_tag_without_region(self):
        """tag is the bare code when there is no region."""
        assert make_language_descriptor(code="de").tag == "de"

    def test_empty_code_falls_back_to_sentinel(self):
        """An empty code is replaced by the unknown sentinel."""
        assert LanguageDescriptor(code="").code == UNKNOWN_LANGUAGE_CODE

    def test_is_immutable(self):
        """LanguageDescriptor is frozen."""
        lang = make_language_descriptor()
        with pytest.raises(dataclasses.FrozenInstanceError):
            lang.quality = 0.5

    def test_is_hashable(self):
        """Equal descriptors hash equally."""
        first = make_language_descriptor(code="en", region="US", quality=0.5)
        second = make_language_descriptor(code="en", region="US", quality=0.5)
        assert len({first, second}) == 1

    def test_integer_quality_stored_as_float(self):
        """Integral quality values are stored as floats."""
        quality = LanguageDescriptor(code="en", quality=1).quality
        assert isinstance(quality, float)

    @pytest.mark.parametrize("quality", [1.5, -0.1, float("nan"), float("inf")])
    def test_out_of_range_quality_rejected(self, quality):
        """Quality outside [0, 1] is rejected at construction."""
        with pytest.raises(ValueError):
            LanguageDescriptor(code="en", quality=quality)

    def test_non_numeric_quality_rejected(self):
        """Quality must be a number."""
        with pytest.raises(ValueError):
            LanguageDescriptor(code="en", quality="0.5")

    def test_from_string(self):
        """from_string() parses a header segment."""
        lang = LanguageDescriptor.from_string("de-DE;q=0.3")
        assert lang == LanguageDescriptor(code="de", region="DE", quality=0.3)

    def test_from_string_malformed(self):
        """from_string() raises ValueError for malformed segments."""
        with pytest.raises(ValueError):
            LanguageDescriptor.from_string("*")


@pytest.mark.unit
class TestTranslationKey:
    """Tests for TranslationKey model."""

    def test_from_string_single(self):
        """from_string() accepts a single segment."""
        assert TranslationKey.from_string("greeting").parts == ("greeting",)

    def test_from_string_nested(self):
        """from_string() splits on every dot."""
        key = TranslationKey.from_string("errors.http.not_found")
        assert key.parts == ("errors", "http", "not_found")
        assert str(key) == "errors.http.not_found"

    @pytest.mark.parametrize("key", ["", ".", "errors.", ".errors", "a..b"])
    def test_from_string_invalid(self, key):
        """from_string() rejects empty keys and empty segments."""
        with pytest.raises(ValueError):
            TranslationKey.from_string(key)


@pytest.mark.unit
class TestValueKinds:
    """Tests for tree value classification."""

    @pytest.mark.parametrize("value", [{}, {"a": 1}])
    def test_map_like(self, value):
        """Dicts are map-like."""
        assert is_map_like(value)
        assert not is_sequence_like(value)

    @pytest.mark.parametrize("value", [[], [1], (1, 2)])
    def test_sequence_like(self, value):
        """Lists and tuples are sequence-like."""
        assert is_sequence_like(value)
        assert not is_map_like(value)

    @pytest.mark.parametrize("value", ["text", b"bytes", 1, 1.5, True, None])
    def test_scalars(self, value):
        """Strings, bytes, numbers, booleans and None are scalars."""
        assert not is_map_like(value)
        assert not is_sequence_like(value)

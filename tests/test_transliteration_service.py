"""
Transliteration Service Tests

Dictionary lookup, partial matches and the FIFO result cache.
Run with: pytest tests/test_transliteration_service.py -v
"""
import pytest

from models.options import TransliterationOptions
from services.transliteration_service import Transliterator
from services.name_search_engine import transliterate_to_amharic, get_name_search_engine
from utils.exceptions import ValidationError, ErrorCode


EXACT_ONLY = TransliterationOptions(include_partial_matches=False)
NO_CACHE = TransliterationOptions(enable_cache=False)


class TestTransliterate:
    """Latin -> Amharic lookups."""

    def test_known_name(self):
        assert "አማኑኤል" in transliterate_to_amharic("amanuel")

    def test_case_and_whitespace_are_ignored(self):
        assert transliterate_to_amharic("  AMANUEL ") == transliterate_to_amharic("amanuel")

    def test_prefix_is_a_partial_match(self):
        assert "አማኑኤል" in transliterate_to_amharic("aman")

    def test_exact_only_skips_partial_matches(self):
        assert transliterate_to_amharic("aman", EXACT_ONLY) == []
        assert transliterate_to_amharic("amanuel", EXACT_ONLY) == ["አማኑኤል"]

    def test_exact_match_comes_first(self):
        variants = transliterate_to_amharic("selam")
        assert variants[0] == "ሰላም"
        assert "ሰላማዊት" in variants

    def test_no_duplicates(self):
        variants = transliterate_to_amharic("selam")
        assert len(variants) == len(set(variants))

    def test_unknown_name(self):
        assert transliterate_to_amharic("qqq") == []

    def test_special_characters_do_not_raise(self):
        assert isinstance(transliterate_to_amharic("amanuel!@#$"), list)

    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    def test_empty_input_returns_empty_list(self, text):
        assert transliterate_to_amharic(text) == []

    def test_none_raises(self):
        with pytest.raises(ValidationError) as exc_info:
            transliterate_to_amharic(None)
        assert exc_info.value.code == ErrorCode.INVALID_INPUT_TYPE
        assert exc_info.value.details["field"] == "text"

    def test_too_long_raises(self):
        with pytest.raises(ValidationError) as exc_info:
            transliterate_to_amharic("a" * 1001)
        assert exc_info.value.code == ErrorCode.INPUT_TOO_LONG
        assert exc_info.value.details["max_length"] == 1000

    def test_control_characters_only_raises(self):
        with pytest.raises(ValidationError) as exc_info:
            transliterate_to_amharic("\x00\x01\x02")
        assert exc_info.value.code == ErrorCode.INVALID_CHARACTERS


class TestCache:
    """Result cache behaviour."""

    def test_cached_and_uncached_results_agree(self):
        for text in ["amanuel", "aman", "sel", "xamanuel", "qqq"]:
            cached = transliterate_to_amharic(text)
            uncached = transliterate_to_amharic(text, NO_CACHE)
            again = transliterate_to_amharic(text)
            assert set(cached) == set(uncached) == set(again)

    def test_results_are_cached(self, transliterator):
        transliterator.transliterate("amanuel")
        transliterator.transliterate("amanuel")
        assert transliterator.cached_entries == 1

    def test_partial_flag_is_part_of_the_key(self, transliterator):
        transliterator.transliterate("aman")
        transliterator.transliterate("aman", EXACT_ONLY)
        assert transliterator.cached_entries == 2

    def test_disabled_cache_stores_nothing(self, transliterator):
        transliterator.transliterate("amanuel", NO_CACHE)
        assert transliterator.cached_entries == 0

    def test_returned_list_is_a_copy(self, transliterator):
        first = transliterator.transliterate("amanuel")
        first.append("mutated")
        assert "mutated" not in transliterator.transliterate("amanuel")

    def test_clear_cache(self, transliterator):
        transliterator.transliterate("amanuel")
        transliterator.clear_cache()
        assert transliterator.cached_entries == 0

    def test_eviction_is_first_in_first_out(self, trie):
        """Reading an entry does not protect it from eviction."""
        small = Transliterator(trie, cache_size=2)
        small.transliterate("abebe")
        small.transliterate("kebede")
        small.transliterate("abebe")  # hit, order unchanged
        small.transliterate("selam")

        assert small.cached_entries == 2
        assert "abebe:true" not in small._cache
        assert "kebede:true" in small._cache
        assert "selam:true" in small._cache

    def test_default_engine_cache_size(self):
        engine = get_name_search_engine()
        transliterate_to_amharic("amanuel")
        assert engine.cache_size == 1

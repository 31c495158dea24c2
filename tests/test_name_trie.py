"""
Name Trie Tests

Run with: pytest tests/test_name_trie.py -v
"""
import pytest

from services.name_trie import NameTrie
from utils.name_dictionary import ENGLISH_TO_AMHARIC


class TestInsertAndExact:
    """Building the trie and exact lookups."""

    def test_size_counts_distinct_keys(self, small_trie):
        assert len(small_trie) == 5

    def test_reinserting_key_does_not_grow_size(self):
        trie = NameTrie()
        trie.insert("selam", "ሰላም")
        trie.insert("Selam", "ሰላም")
        assert len(trie) == 1

    def test_exact_match(self, small_trie):
        assert small_trie.search_exact("amanuel") == {"አማኑኤል"}

    def test_exact_match_is_case_insensitive(self, small_trie):
        assert small_trie.search_exact("AMANUEL") == {"አማኑኤል"}

    def test_prefix_is_not_an_exact_match(self, small_trie):
        """'aman' is on the path to 'amanuel' but is not a key itself."""
        assert small_trie.search_exact("aman") == set()

    def test_unknown_key(self, small_trie):
        assert small_trie.search_exact("john") == set()

    def test_one_key_can_hold_several_renderings(self):
        trie = NameTrie()
        trie.insert("mariam", "ማርያም")
        trie.insert("mariam", "ማሪያም")
        assert trie.search_exact("mariam") == {"ማርያም", "ማሪያም"}

    def test_contains_operator(self, small_trie):
        assert "selam" in small_trie
        assert "sel" not in small_trie

    def test_full_dictionary_size(self, trie):
        assert len(trie) == len(ENGLISH_TO_AMHARIC)


class TestPrefixSearch:
    """search_prefix collects every key below the prefix node."""

    def test_prefix_collects_descendants(self, small_trie):
        assert small_trie.search_prefix("sel") == {"ሰላም", "ሰላማዊት"}

    def test_prefix_includes_key_equal_to_prefix(self, small_trie):
        assert "ሰላም" in small_trie.search_prefix("selam")

    def test_missing_prefix(self, small_trie):
        assert small_trie.search_prefix("xyz") == set()

    def test_shared_rendering_is_returned_once(self, small_trie):
        """amanuel and emanuel map to the same rendering."""
        assert small_trie.search_prefix("") == {"አማኑኤል", "ሰላም", "ሰላማዊት", "አበበ"}


class TestContainsSearch:
    """search_contains anchors on suffixes of the query, not on infixes of keys."""

    def test_noise_before_known_name(self, small_trie):
        assert "አማኑኤል" in small_trie.search_contains("xamanuel")

    def test_suffix_of_query_matches_key_prefix(self, small_trie):
        """'man' -> suffixes 'man', 'an', 'n'; no key starts with any of them."""
        assert small_trie.search_contains("man") == set()

    def test_infix_of_key_is_not_found(self, small_trie):
        """'ela' sits inside 'selam' but no suffix of 'ela' starts that key."""
        assert "ሰላም" not in small_trie.search_contains("ela")

    def test_single_letter_suffix(self, small_trie):
        """'xa' has suffix 'a', which prefixes amanuel and abebe."""
        assert small_trie.search_contains("xa") == {"አማኑኤል", "አበበ"}

    def test_empty_query(self, small_trie):
        assert small_trie.search_contains("") == set()


class TestDictionary:
    """The bundled English -> Amharic table."""

    def test_keys_are_lowercase(self):
        assert all(key == key.lower() and key for key in ENGLISH_TO_AMHARIC)

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            ENGLISH_TO_AMHARIC["john"] = "ጆን"

"""
Name Search Engine.

Single entry point for the bilingual name search library. Owns the name
trie, the transliteration cache, the query expander and the match engine,
and validates every public input before handing it on.

Usage:
    from services.name_search_engine import matches_name, expand_search_query

    matches_name("አማኑኤል", "Amanuel")   # True
    expand_search_query("amanuel")        # ["amanuel", "አማኑኤል"]
"""
import logging
from typing import List, Mapping, Optional

from models.options import MatchOptions, TransliterationOptions
from services.name_matching_service import MatchEngine
from services.name_trie import NameTrie
from services.transliteration_service import Transliterator, QueryExpander
from utils.config import MAX_INPUT_LENGTH, TRANSLITERATION_CACHE_SIZE
from utils.logging_config import log_execution_time
from utils.name_dictionary import ENGLISH_TO_AMHARIC
from utils.validation import validate_and_sanitize_input, validate_search_query

logger = logging.getLogger(__name__)

__all__ = [
    "ENGLISH_TO_AMHARIC",
    "NameSearchEngine",
    "get_name_search_engine",
    "transliterate_to_amharic",
    "matches_name",
    "expand_search_query",
    "clear_cache",
]


class NameSearchEngine:
    """Bundles the lookup structures behind the public name search operations."""

    def __init__(
        self,
        mappings: Mapping[str, str] = ENGLISH_TO_AMHARIC,
        cache_size: int = TRANSLITERATION_CACHE_SIZE
    ):
        self.trie = _build_trie(mappings)
        self.transliterator = Transliterator(self.trie, cache_size=cache_size)
        self.expander = QueryExpander(self.transliterator)
        self.match_engine = MatchEngine(self.transliterator, tuple(mappings.items()))

    @property
    def dictionary_size(self) -> int:
        """Number of Latin keys in the trie."""
        return len(self.trie)

    @property
    def cache_size(self) -> int:
        """Number of cached transliteration results."""
        return self.transliterator.cached_entries

    def transliterate_to_amharic(
        self,
        text,
        options: Optional[TransliterationOptions] = None
    ) -> List[str]:
        """
        Convert a Latin name to its known Amharic renderings.

        Args:
            text: Latin text, e.g. "amanuel" or "aman"
            options: TransliterationOptions (defaults apply when None)

        Returns:
            Amharic variants; empty when nothing in the dictionary fits or
            when text is empty or whitespace only.

        Raises:
            ValidationError: If text is not a string, is too long, or holds
                nothing but control characters.
        """
        if isinstance(text, str) and not text.strip():
            return []

        sanitized = validate_and_sanitize_input(text, MAX_INPUT_LENGTH, field_name="text")
        return self.transliterator.transliterate(sanitized, options)

    def matches_name(
        self,
        name,
        query,
        options: Optional[MatchOptions] = None
    ) -> bool:
        """
        Check whether a stored name matches a search query.

        Either side may be Ethiopic or Latin. A missing, empty or
        all-control-character query never matches.

        Raises:
            ValidationError: If name is invalid, or query is too long or not
                a string.
        """
        sanitized_name = validate_and_sanitize_input(name, MAX_INPUT_LENGTH, field_name="name")
        sanitized_query = validate_search_query(query)
        if not sanitized_query:
            return False

        return self.match_engine.matches(sanitized_name, sanitized_query, options)

    def expand_search_query(self, query) -> List[str]:
        """Return the query followed by its Amharic variants."""
        return self.expander.expand(query)

    def clear_cache(self) -> None:
        """Empty the transliteration cache."""
        self.transliterator.clear_cache()


@log_execution_time
def _build_trie(mappings: Mapping[str, str]) -> NameTrie:
    return NameTrie.from_mappings(mappings)


# Singleton instance
_engine: Optional[NameSearchEngine] = None


def get_name_search_engine() -> NameSearchEngine:
    """Get or create the shared engine built from the bundled dictionary."""
    global _engine
    if _engine is None:
        _engine = NameSearchEngine()
        logger.info(f"Name search engine ready ({_engine.dictionary_size} dictionary keys)")
    return _engine


def transliterate_to_amharic(text, options: Optional[TransliterationOptions] = None) -> List[str]:
    return get_name_search_engine().transliterate_to_amharic(text, options)


def matches_name(name, query, options: Optional[MatchOptions] = None) -> bool:
    return get_name_search_engine().matches_name(name, query, options)


def expand_search_query(query) -> List[str]:
    return get_name_search_engine().expand_search_query(query)


def clear_cache() -> None:
    get_name_search_engine().clear_cache()

"""
Transliteration Service for English to Amharic name conversion.

Looks Latin input up in the name trie:
1. Exact key match (always)
2. Keys starting with the input (partial matches)
3. Keys starting with any suffix of the input (partial matches)

Results are memoized in a bounded in-memory cache. The cache evicts the
earliest-inserted key once full; reading an entry does not refresh it.
"""
import logging
import threading
from collections import OrderedDict
from typing import List, Optional

from models.options import TransliterationOptions
from services.name_trie import NameTrie
from utils.config import TRANSLITERATION_CACHE_SIZE, MIN_EXPANSION_VARIANT_LENGTH
from utils.validation import validate_search_query

logger = logging.getLogger(__name__)

_DEFAULT_OPTIONS = TransliterationOptions()


class Transliterator:
    """English -> Amharic variant lookup with a FIFO result cache."""

    def __init__(self, trie: NameTrie, cache_size: int = TRANSLITERATION_CACHE_SIZE):
        self.trie = trie
        self.cache_size = cache_size
        self._cache: "OrderedDict[str, List[str]]" = OrderedDict()
        self._lock = threading.Lock()

    @property
    def cached_entries(self) -> int:
        """Number of entries currently held in the cache."""
        return len(self._cache)

    def clear_cache(self) -> None:
        """Drop every cached result."""
        with self._lock:
            self._cache.clear()
        logger.debug("Transliteration cache cleared")

    def transliterate(
        self,
        text: str,
        options: Optional[TransliterationOptions] = None
    ) -> List[str]:
        """
        Convert Latin text to the list of matching Amharic renderings.

        Args:
            text: Already validated Latin text
            options: TransliterationOptions (defaults apply when None)

        Returns:
            Variants in discovery order: exact matches, then prefix matches,
            then suffix-anchored matches. Duplicates keep their first position.
        """
        options = options or _DEFAULT_OPTIONS

        normalized = text.lower().strip()
        if not normalized:
            return []

        cache_key = f"{normalized}:{str(options.include_partial_matches).lower()}"

        if options.enable_cache:
            with self._lock:
                cached = self._cache.get(cache_key)
            if cached is not None:
                return list(cached)

        variants = sorted(self.trie.search_exact(normalized))
        if options.include_partial_matches:
            variants += sorted(self.trie.search_prefix(normalized))
            variants += sorted(self.trie.search_contains(normalized))

        # dict.fromkeys keeps the first occurrence of each variant
        result = list(dict.fromkeys(variants))

        if options.enable_cache:
            self._store(cache_key, result)

        return list(result)

    def _store(self, key: str, value: List[str]) -> None:
        with self._lock:
            if key not in self._cache and len(self._cache) >= self.cache_size:
                evicted, _ = self._cache.popitem(last=False)
                logger.debug(f"Evicted '{evicted}' from transliteration cache")
            self._cache[key] = value


class QueryExpander:
    """Builds the list of search terms for a user query."""

    def __init__(self, transliterator: Transliterator):
        self.transliterator = transliterator

    def expand(self, query) -> List[str]:
        """
        Expand a query with its Amharic variants.

        The sanitized query always comes first. Single-character variants are
        dropped unless the query itself is a single character.

        Example:
            expand("amanuel") -> ["amanuel", "አማኑኤል"]
        """
        sanitized = validate_search_query(query)
        if not sanitized:
            return []

        terms = [sanitized]
        for variant in self.transliterator.transliterate(sanitized):
            if len(variant) >= MIN_EXPANSION_VARIANT_LENGTH or len(sanitized) == 1:
                if variant not in terms:
                    terms.append(variant)

        return terms

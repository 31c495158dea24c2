"""
Name Matching Service for bilingual (Ethiopic / Latin) name search.

Decides whether a stored name matches a search query. Stages run from the
cheapest and most specific to the most expensive; the first stage that
matches wins:

 1. Empty query           -> no match
 2. Whole-word mode       -> exact comparison only, nothing else runs
 3. Direct containment    (either direction)
 4. Prefix variant       (query vs name prefix, vowel-tolerant)
 5. Fuzzy whole-string    (Levenshtein, only with fuzzy=True)
 6. Phonetic hash         (only with phonetic=True)
 7. Ethiopic name, Latin query    -> romanize the name
 8. Latin name, Ethiopic query    -> romanize the query
 9. Dictionary transliteration of the query
10. Exhaustive dictionary cross-check
"""
import logging
from typing import Iterable, Optional, Tuple

from models.options import MatchOptions
from services.transliteration_core import (
    romanize_amharic_to_ascii,
    levenshtein_distance,
    transliteration_aware_distance,
    matches_transliteration_variant,
    is_phonetically_similar,
)
from services.transliteration_service import Transliterator
from utils.config import (
    FUZZY_CONTAINMENT_MIN_LENGTH_RATIO,
    FUZZY_SAME_SCRIPT_THRESHOLDS,
    FUZZY_ETHIOPIC_NAME_THRESHOLDS,
    FUZZY_ETHIOPIC_QUERY_THRESHOLDS,
    VARIANT_MAX_DISTANCE,
    WORD_VARIANT_MAX_DISTANCE,
    WORD_PREFIX_MAX_EDITS,
    QUERY_PREFIX_MAX_EDITS,
    MIN_FUZZY_PREFIX_LENGTH,
    SINGLE_WORD_VARIANT_MAX_DISTANCE,
)
from utils.name_dictionary import DICTIONARY_PAIRS
from utils.text_normalization import contains_amharic, normalize_for_match, split_words

logger = logging.getLogger(__name__)

_DEFAULT_OPTIONS = MatchOptions()


def _length_ratio(s1: str, s2: str) -> float:
    """min(len) / max(len); 1.0 for two empty strings."""
    max_len = max(len(s1), len(s2))
    if max_len == 0:
        return 1.0
    return min(len(s1), len(s2)) / max_len


def _fuzzy_whole_string(
    s1: str,
    s2: str,
    max_distance: float,
    thresholds: Tuple[float, float]
) -> bool:
    """
    Whole-string Levenshtein check.

    All three must hold: distance <= max_distance, distance / max_len within
    the normalized limit, and the length ratio at or above the minimum.
    """
    max_normalized, min_ratio = thresholds
    max_len = max(len(s1), len(s2))
    if max_len == 0:
        return True

    distance = levenshtein_distance(s1, s2)
    return (
        distance <= max_distance
        and distance / max_len <= max_normalized
        and _length_ratio(s1, s2) >= min_ratio
    )


def _within_distance(s1: str, s2: str, max_distance: float) -> bool:
    """Levenshtein budget check that never accepts two strings with nothing in common."""
    distance = levenshtein_distance(s1, s2)
    return distance <= max_distance and distance < max(len(s1), len(s2))


class MatchEngine:
    """
    Cascade matcher for names written in Ethiopic or Latin script.

    Inputs are expected to be validated already; the engine itself never
    raises for string inputs.
    """

    def __init__(
        self,
        transliterator: Transliterator,
        dictionary_pairs: Iterable[Tuple[str, str]] = DICTIONARY_PAIRS
    ):
        self.transliterator = transliterator
        self.dictionary_pairs = tuple(dictionary_pairs)
        self._stages = (
            ("direct_containment", self._direct_containment),
            ("prefix_variant", self._prefix_variant),
            ("fuzzy", self._fuzzy),
            ("phonetic", self._phonetic),
            ("romanized_name", self._romanized_name),
            ("romanized_query", self._romanized_query),
            ("transliteration", self._transliteration),
            ("dictionary_scan", self._dictionary_scan),
        )

    def matches(self, name: str, query: str, options: Optional[MatchOptions] = None) -> bool:
        """
        Check if name matches query.

        Args:
            name: The stored name (Ethiopic or Latin)
            query: The search query (Ethiopic or Latin)
            options: MatchOptions (defaults apply when None)

        Returns:
            True as soon as one stage matches, False otherwise
        """
        options = options or _DEFAULT_OPTIONS

        name_n = normalize_for_match(name, options.case_sensitive)
        query_n = normalize_for_match(query, options.case_sensitive)

        if not query_n:
            return False

        if options.whole_word:
            return name_n == query_n

        for stage, check in self._stages:
            if check(name_n, query_n, options):
                logger.debug(
                    f"Name match via {stage}: '{name_n}' ~ '{query_n}'",
                    extra={"stage": stage}
                )
                return True

        return False

    # -------------------------------------------------------------------------
    # Stages 3-6: same-string comparisons
    # -------------------------------------------------------------------------

    def _direct_containment(self, name: str, query: str, options: MatchOptions) -> bool:
        # In fuzzy mode a short string inside a much longer one is not evidence
        if options.fuzzy and _length_ratio(name, query) < FUZZY_CONTAINMENT_MIN_LENGTH_RATIO:
            return False
        return query in name or name in query

    def _prefix_variant(self, name: str, query: str, options: MatchOptions) -> bool:
        if options.case_sensitive:
            return False
        if len(query) < 2 or len(name) < len(query):
            return False
        return matches_transliteration_variant(name[:len(query)], query, VARIANT_MAX_DISTANCE)

    def _fuzzy(self, name: str, query: str, options: MatchOptions) -> bool:
        if not options.fuzzy:
            return False
        return _fuzzy_whole_string(name, query, options.max_distance, FUZZY_SAME_SCRIPT_THRESHOLDS)

    def _phonetic(self, name: str, query: str, options: MatchOptions) -> bool:
        return options.phonetic and is_phonetically_similar(name, query)

    # -------------------------------------------------------------------------
    # Stages 7-8: cross-script via romanization
    # -------------------------------------------------------------------------

    def _romanized_name(self, name: str, query: str, options: MatchOptions) -> bool:
        if not contains_amharic(name) or contains_amharic(query):
            return False

        romanized = romanize_amharic_to_ascii(name)
        latin = query.lower()
        if not romanized or not latin:
            return False

        if romanized == latin or latin in romanized or romanized in latin:
            return True

        name_words = split_words(romanized)
        query_words = split_words(latin)
        if len(query_words) > 1:
            # Every query word must find a partner among the romanized words
            if all(
                any(self._word_matches(q_word, n_word) for n_word in name_words)
                for q_word in query_words
            ):
                return True
        elif any(self._vowel_variant_prefix(latin, n_word) for n_word in name_words):
            return True

        if options.fuzzy:
            return _fuzzy_whole_string(
                romanized, latin, options.max_distance, FUZZY_ETHIOPIC_NAME_THRESHOLDS
            )
        return False

    @staticmethod
    def _word_matches(query_word: str, name_word: str) -> bool:
        if query_word in name_word or name_word in query_word:
            return True
        if name_word.startswith(query_word) or query_word.startswith(name_word):
            return True

        length = min(len(query_word), len(name_word))
        if length < MIN_FUZZY_PREFIX_LENGTH:
            return False

        q_prefix = query_word[:length]
        n_prefix = name_word[:length]
        return (
            matches_transliteration_variant(q_prefix, n_prefix, WORD_VARIANT_MAX_DISTANCE)
            or levenshtein_distance(q_prefix, n_prefix) <= WORD_PREFIX_MAX_EDITS
        )

    @staticmethod
    def _vowel_variant_prefix(query_word: str, name_word: str) -> bool:
        """'tes' vs 'tasfaye': one vowel apart on the query's length."""
        if len(query_word) < MIN_FUZZY_PREFIX_LENGTH:
            return False
        prefix = name_word[:len(query_word)]
        return transliteration_aware_distance(query_word, prefix) < SINGLE_WORD_VARIANT_MAX_DISTANCE

    def _romanized_query(self, name: str, query: str, options: MatchOptions) -> bool:
        if not contains_amharic(query) or contains_amharic(name):
            return False

        romanized = romanize_amharic_to_ascii(query)
        latin = name.lower()
        if not romanized or not latin:
            return False

        if romanized == latin or romanized in latin or latin in romanized:
            return True

        # Compare against the whole name and against each of its words
        for candidate in [latin] + split_words(latin):
            length = min(len(romanized), len(candidate))
            if length < MIN_FUZZY_PREFIX_LENGTH:
                continue
            r_prefix = romanized[:length]
            c_prefix = candidate[:length]
            if matches_transliteration_variant(c_prefix, r_prefix, VARIANT_MAX_DISTANCE):
                return True
            if levenshtein_distance(c_prefix, r_prefix) <= QUERY_PREFIX_MAX_EDITS:
                return True

        if options.fuzzy:
            return _fuzzy_whole_string(
                latin, romanized, options.max_distance, FUZZY_ETHIOPIC_QUERY_THRESHOLDS
            )
        return False

    # -------------------------------------------------------------------------
    # Stages 9-10: dictionary-backed fallbacks
    # -------------------------------------------------------------------------

    def _transliteration(self, name: str, query: str, options: MatchOptions) -> bool:
        for variant in self.transliterator.transliterate(query):
            if variant in name:
                return True
            if options.fuzzy and _within_distance(name, variant, options.max_distance):
                return True
        return False

    def _dictionary_scan(self, name: str, query: str, options: MatchOptions) -> bool:
        for english, amharic in self.dictionary_pairs:
            if self._side_matches(name, english, options) and self._side_matches(query, amharic, options):
                return True
            if self._side_matches(name, amharic, options) and self._side_matches(query, english, options):
                return True
        return False

    @staticmethod
    def _side_matches(text: str, target: str, options: MatchOptions) -> bool:
        if target in text:
            return True
        if options.fuzzy and _within_distance(text, target, options.max_distance):
            return True
        if options.phonetic and is_phonetically_similar(text, target):
            return True
        return False

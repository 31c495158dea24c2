"""
Option value objects for the name search library.

Both are immutable: pass a new instance (or use dataclasses.replace) to
change a setting.
"""
from dataclasses import dataclass

from utils.config import DEFAULT_MAX_DISTANCE


@dataclass(frozen=True)
class TransliterationOptions:
    """Options for English -> Amharic transliteration."""
    include_partial_matches: bool = True  # "aman" also yields "አማኑኤል"
    enable_cache: bool = True


@dataclass(frozen=True)
class MatchOptions:
    """
    Options for name matching.

    Defaults favour lenient matching: case-insensitive, substring allowed,
    no fuzzy or phonetic fallbacks.
    """
    case_sensitive: bool = False
    whole_word: bool = False
    fuzzy: bool = False
    max_distance: float = DEFAULT_MAX_DISTANCE
    phonetic: bool = False

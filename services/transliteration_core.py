"""
Transliteration Core - romanization, edit distances and phonetic hashing.

Building blocks shared by the transliterator and the name matcher:
1. Ethiopic -> ASCII romanization (lossy, for comparison only)
2. Levenshtein distance and similarity ratio
3. Transliteration-aware distance (cheap vowel and s/z, t/d substitutions)
4. Phonetic hash for coarse sound-alike grouping

The romanization follows the Amharic Romanization Table (2011), simplified to
plain ASCII so the output looks like what people type ("amanuel", "selam").
"""
import logging
from typing import Dict, FrozenSet

from utils.config import (
    VARIANT_MAX_DISTANCE,
    VOWEL_SUBSTITUTION_COST,
    CONSONANT_VARIANT_COST,
    PHONETIC_HASH_LENGTH,
    PHONETIC_SIMILARITY_THRESHOLD,
)
from utils.text_normalization import normalize_ascii

logger = logging.getLogger(__name__)

# =============================================================================
# STEP 1: ETHIOPIC -> ASCII ROMANIZATION
# =============================================================================

# One row per consonant series, orders 1..7 (ä, u, i, a, e, ə, o).
# Special consonants collapse to their closest plain Latin spelling
# (ḥ -> h, š -> sh, č -> ch, ṣ -> ts), long vowels collapse to a/e.
AMHARIC_TO_ASCII: Dict[str, str] = {
    # ሀ series (ha)
    'ሀ': 'ha', 'ሁ': 'hu', 'ሂ': 'hi', 'ሃ': 'ha', 'ሄ': 'he', 'ህ': 'h', 'ሆ': 'ho',
    # ለ series (la)
    'ለ': 'la', 'ሉ': 'lu', 'ሊ': 'li', 'ላ': 'la', 'ሌ': 'le', 'ል': 'l', 'ሎ': 'lo',
    # ሐ series (emphatic ha)
    'ሐ': 'ha', 'ሑ': 'hu', 'ሒ': 'hi', 'ሓ': 'ha', 'ሔ': 'he', 'ሕ': 'h', 'ሖ': 'ho',
    # መ series (ma)
    'መ': 'ma', 'ሙ': 'mu', 'ሚ': 'mi', 'ማ': 'ma', 'ሜ': 'me', 'ም': 'm', 'ሞ': 'mo',
    # ሠ series (sa)
    'ሠ': 'sa', 'ሡ': 'su', 'ሢ': 'si', 'ሣ': 'sa', 'ሤ': 'se', 'ሥ': 's', 'ሦ': 'so',
    # ረ series (ra)
    'ረ': 'ra', 'ሩ': 'ru', 'ሪ': 'ri', 'ራ': 'ra', 'ሬ': 're', 'ር': 'r', 'ሮ': 'ro',
    # ሰ series (sa)
    'ሰ': 'sa', 'ሱ': 'su', 'ሲ': 'si', 'ሳ': 'sa', 'ሴ': 'se', 'ስ': 's', 'ሶ': 'so',
    # ሸ series (sha)
    'ሸ': 'sha', 'ሹ': 'shu', 'ሺ': 'shi', 'ሻ': 'sha', 'ሼ': 'she', 'ሽ': 'sh', 'ሾ': 'sho',
    # ቀ series (qa)
    'ቀ': 'qa', 'ቁ': 'qu', 'ቂ': 'qi', 'ቃ': 'qa', 'ቄ': 'qe', 'ቅ': 'q', 'ቆ': 'qo',
    # በ series (ba)
    'በ': 'ba', 'ቡ': 'bu', 'ቢ': 'bi', 'ባ': 'ba', 'ቤ': 'be', 'ብ': 'b', 'ቦ': 'bo',
    # ቨ series (va)
    'ቨ': 'va', 'ቩ': 'vu', 'ቪ': 'vi', 'ቫ': 'va', 'ቬ': 've', 'ቭ': 'v', 'ቮ': 'vo',
    # ተ series (ta)
    'ተ': 'ta', 'ቱ': 'tu', 'ቲ': 'ti', 'ታ': 'ta', 'ቴ': 'te', 'ት': 't', 'ቶ': 'to',
    # ቸ series (cha)
    'ቸ': 'cha', 'ቹ': 'chu', 'ቺ': 'chi', 'ቻ': 'cha', 'ቼ': 'che', 'ች': 'ch', 'ቾ': 'cho',
    # ኀ series (ha variant)
    'ኀ': 'ha', 'ኁ': 'hu', 'ኂ': 'hi', 'ኃ': 'ha', 'ኄ': 'he', 'ኅ': 'h', 'ኆ': 'ho',
    # ነ series (na)
    'ነ': 'na', 'ኑ': 'nu', 'ኒ': 'ni', 'ና': 'na', 'ኔ': 'ne', 'ን': 'n', 'ኖ': 'no',
    # ኘ series (nya)
    'ኘ': 'nya', 'ኙ': 'nyu', 'ኚ': 'nyi', 'ኛ': 'nya', 'ኜ': 'nye', 'ኝ': 'ny', 'ኞ': 'nyo',
    # አ series (glottal a)
    'አ': 'a', 'ኡ': 'u', 'ኢ': 'i', 'ኣ': 'a', 'ኤ': 'e', 'እ': 'e', 'ኦ': 'o',
    # ከ series (ka)
    'ከ': 'ka', 'ኩ': 'ku', 'ኪ': 'ki', 'ካ': 'ka', 'ኬ': 'ke', 'ክ': 'k', 'ኮ': 'ko',
    # ኸ series (xa)
    'ኸ': 'ha', 'ኹ': 'hu', 'ኺ': 'hi', 'ኻ': 'ha', 'ኼ': 'he', 'ኽ': 'h', 'ኾ': 'ho',
    # ወ series (wa)
    'ወ': 'wa', 'ዉ': 'wu', 'ዊ': 'wi', 'ዋ': 'wa', 'ዌ': 'we', 'ው': 'w', 'ዎ': 'wo',
    # ዐ series (pharyngeal a)
    'ዐ': 'a', 'ዑ': 'u', 'ዒ': 'i', 'ዓ': 'a', 'ዔ': 'e', 'ዕ': 'e', 'ዖ': 'o',
    # ዘ series (za)
    'ዘ': 'za', 'ዙ': 'zu', 'ዚ': 'zi', 'ዛ': 'za', 'ዜ': 'ze', 'ዝ': 'z', 'ዞ': 'zo',
    # ዠ series (zha)
    'ዠ': 'zha', 'ዡ': 'zhu', 'ዢ': 'zhi', 'ዣ': 'zha', 'ዤ': 'zhe', 'ዥ': 'zh', 'ዦ': 'zho',
    # የ series (ya)
    'የ': 'ya', 'ዩ': 'yu', 'ዪ': 'yi', 'ያ': 'ya', 'ዬ': 'ye', 'ይ': 'y', 'ዮ': 'yo',
    # ደ series (da)
    'ደ': 'da', 'ዱ': 'du', 'ዲ': 'di', 'ዳ': 'da', 'ዴ': 'de', 'ድ': 'd', 'ዶ': 'do',
    # ጀ series (ja)
    'ጀ': 'ja', 'ጁ': 'ju', 'ጂ': 'ji', 'ጃ': 'ja', 'ጄ': 'je', 'ጅ': 'j', 'ጆ': 'jo',
    # ገ series (ga)
    'ገ': 'ga', 'ጉ': 'gu', 'ጊ': 'gi', 'ጋ': 'ga', 'ጌ': 'ge', 'ግ': 'g', 'ጎ': 'go',
    # ጠ series (emphatic ta)
    'ጠ': 'ta', 'ጡ': 'tu', 'ጢ': 'ti', 'ጣ': 'ta', 'ጤ': 'te', 'ጥ': 't', 'ጦ': 'to',
    # ጨ series (emphatic cha)
    'ጨ': 'cha', 'ጩ': 'chu', 'ጪ': 'chi', 'ጫ': 'cha', 'ጬ': 'che', 'ጭ': 'ch', 'ጮ': 'cho',
    # ጰ series (emphatic pa)
    'ጰ': 'pa', 'ጱ': 'pu', 'ጲ': 'pi', 'ጳ': 'pa', 'ጴ': 'pe', 'ጵ': 'p', 'ጶ': 'po',
    # ጸ series (tsa)
    'ጸ': 'tsa', 'ጹ': 'tsu', 'ጺ': 'tsi', 'ጻ': 'tsa', 'ጼ': 'tse', 'ጽ': 'ts', 'ጾ': 'tso',
    # ፀ series (tsa variant)
    'ፀ': 'tsa', 'ፁ': 'tsu', 'ፂ': 'tsi', 'ፃ': 'tsa', 'ፄ': 'tse', 'ፅ': 'ts', 'ፆ': 'tso',
    # ፈ series (fa)
    'ፈ': 'fa', 'ፉ': 'fu', 'ፊ': 'fi', 'ፋ': 'fa', 'ፌ': 'fe', 'ፍ': 'f', 'ፎ': 'fo',
    # ፐ series (pa)
    'ፐ': 'pa', 'ፑ': 'pu', 'ፒ': 'pi', 'ፓ': 'pa', 'ፔ': 'pe', 'ፕ': 'p', 'ፖ': 'po',
}


def romanize_amharic_to_ascii(text: str) -> str:
    """
    Romanize Ethiopic text to a simple ASCII form.

    One-way only. Characters without a table entry are kept when they are
    ASCII letters or digits, and turned into a separator space otherwise.

    Example:
        "አማኑኤል" -> "amanuel"

    Args:
        text: Ethiopic (or mixed) text

    Returns:
        Lowercase ASCII string with single spaces between words
    """
    if not text or not isinstance(text, str):
        return ""

    result = []
    for char in text:
        if char in AMHARIC_TO_ASCII:
            result.append(AMHARIC_TO_ASCII[char])
        elif char == ' ':
            result.append(' ')
        elif char.isascii() and char.isalnum():
            result.append(char.lower())
        else:
            result.append(' ')

    return normalize_ascii(''.join(result))


# =============================================================================
# STEP 2: LEVENSHTEIN DISTANCE
# =============================================================================

def levenshtein_distance(s1: str, s2: str) -> int:
    """
    Classic edit distance with unit insertion, deletion and substitution costs.

    Case-sensitive; callers normalize case beforehand.
    """
    len1, len2 = len(s1), len(s2)

    matrix = [[0] * (len2 + 1) for _ in range(len1 + 1)]
    for i in range(len1 + 1):
        matrix[i][0] = i
    for j in range(len2 + 1):
        matrix[0][j] = j

    for i in range(1, len1 + 1):
        for j in range(1, len2 + 1):
            cost = 0 if s1[i - 1] == s2[j - 1] else 1
            matrix[i][j] = min(
                matrix[i - 1][j] + 1,         # deletion
                matrix[i][j - 1] + 1,         # insertion
                matrix[i - 1][j - 1] + cost,  # substitution
            )

    return matrix[len1][len2]


def similarity_ratio(s1: str, s2: str) -> float:
    """
    Similarity in [0.0, 1.0] derived from the Levenshtein distance.

    Two empty strings are identical (1.0).
    """
    max_length = max(len(s1), len(s2))
    if max_length == 0:
        return 1.0
    return 1 - levenshtein_distance(s1, s2) / max_length


# =============================================================================
# STEP 3: TRANSLITERATION-AWARE DISTANCE
# =============================================================================

VOWELS: FrozenSet[str] = frozenset('aeiuo')

# Consonants that are commonly swapped when names are written by ear
CONSONANT_VARIANTS: Dict[str, FrozenSet[str]] = {
    's': frozenset('z'),
    'z': frozenset('s'),
    't': frozenset('d'),
    'd': frozenset('t'),
}


def _substitution_cost(c1: str, c2: str) -> float:
    if c1 == c2:
        return 0.0
    if c1 in VOWELS and c2 in VOWELS:
        return VOWEL_SUBSTITUTION_COST
    if c2 in CONSONANT_VARIANTS.get(c1, ()):
        return CONSONANT_VARIANT_COST
    return 1.0


def transliteration_aware_distance(s1: str, s2: str) -> float:
    """
    Edit distance that discounts common transliteration disagreements.

    Substitution costs:
    - 0.0 for identical characters
    - 0.3 for a vowel swapped with another vowel ("selam" vs "salam")
    - 0.5 for s/z and t/d swaps
    - 1.0 otherwise
    Insertion and deletion always cost 1.

    Returns:
        Fractional distance; 0.0 means identical after lowercasing
    """
    if not s1 or not s2:
        return float(max(len(s1 or ''), len(s2 or '')))

    s1 = s1.lower()
    s2 = s2.lower()

    if s1 == s2:
        return 0.0

    len1, len2 = len(s1), len(s2)

    matrix = [[0.0] * (len2 + 1) for _ in range(len1 + 1)]
    for i in range(len1 + 1):
        matrix[i][0] = float(i)
    for j in range(len2 + 1):
        matrix[0][j] = float(j)

    for i in range(1, len1 + 1):
        for j in range(1, len2 + 1):
            matrix[i][j] = min(
                matrix[i - 1][j] + 1,
                matrix[i][j - 1] + 1,
                matrix[i - 1][j - 1] + _substitution_cost(s1[i - 1], s2[j - 1]),
            )

    return matrix[len1][len2]


def matches_transliteration_variant(
    s1: str,
    s2: str,
    max_distance: float = VARIANT_MAX_DISTANCE
) -> bool:
    """
    Check whether two Latin spellings are plausibly the same name.

    Handles cases like "tas" vs "tes" (both can stand for "ተስ") and
    "salam" vs "selam".
    """
    if not s1 or not s2:
        return False

    s1 = s1.lower()
    s2 = s2.lower()

    if s1 == s2:
        return True

    if s1 in s2 or s2 in s1:
        return True

    return transliteration_aware_distance(s1, s2) <= max_distance


# =============================================================================
# STEP 4: PHONETIC HASH
# =============================================================================

# Coarse consonant-class codes for common syllables. Deliberately smaller
# than AMHARIC_TO_ASCII: it groups sounds rather than spelling them.
AMHARIC_PHONETIC_MAP: Dict[str, str] = {
    'አ': 'A', 'ኡ': 'U', 'ኢ': 'I', 'ኤ': 'E', 'ኦ': 'O',
    'በ': 'B', 'ቡ': 'BU', 'ቢ': 'BI', 'ቤ': 'BE', 'ቦ': 'BO',
    'ተ': 'T', 'ቱ': 'TU', 'ቲ': 'TI', 'ቴ': 'TE', 'ቶ': 'TO',
    'ሀ': 'H', 'ሁ': 'HU', 'ሂ': 'HI', 'ሄ': 'HE', 'ሆ': 'HO',
    'መ': 'M', 'ሙ': 'MU', 'ሚ': 'MI', 'ሜ': 'ME', 'ሞ': 'MO',
    'ረ': 'R', 'ሩ': 'RU', 'ሪ': 'RI', 'ሬ': 'RE', 'ሮ': 'RO',
    'ሰ': 'S', 'ሱ': 'SU', 'ሲ': 'SI', 'ሴ': 'SE', 'ሶ': 'SO',
    'የ': 'Y', 'ዩ': 'YU', 'ዪ': 'YI', 'ዬ': 'YE', 'ዮ': 'YO',
}


def phonetic_hash(text: str) -> str:
    """
    Reduce text to a short Soundex-like code.

    Ethiopic syllables go through AMHARIC_PHONETIC_MAP, ASCII letters are
    uppercased, everything else is dropped. Only the first occurrence of each
    letter is kept and the code is cut to PHONETIC_HASH_LENGTH characters.

    Returns:
        The code, the uppercased head of the input when nothing mapped,
        or "" for empty/non-string input
    """
    if not text or not isinstance(text, str):
        return ""

    normalized = text.lower().strip()
    if not normalized:
        return ""

    parts = []
    for char in normalized:
        if char in AMHARIC_PHONETIC_MAP:
            parts.append(AMHARIC_PHONETIC_MAP[char])
        elif 'a' <= char <= 'z':
            parts.append(char.upper())

    unique = ''.join(dict.fromkeys(''.join(parts)))[:PHONETIC_HASH_LENGTH]

    return unique or normalized[:PHONETIC_HASH_LENGTH].upper()


def is_phonetically_similar(s1: str, s2: str) -> bool:
    """True when the phonetic hashes are equal or at least 70% similar."""
    hash1 = phonetic_hash(s1)
    hash2 = phonetic_hash(s2)

    if not hash1 or not hash2:
        return False

    if hash1 == hash2:
        return True

    return similarity_ratio(hash1, hash2) >= PHONETIC_SIMILARITY_THRESHOLD

"""Configuration settings for the Ethiopic name search service."""
import os


# Input limits
# Names longer than this are rejected outright by the strict validator.
MAX_INPUT_LENGTH = int(os.environ.get("MAX_INPUT_LENGTH", "1000"))
MAX_QUERY_LENGTH = int(os.environ.get("MAX_QUERY_LENGTH", "500"))

# Transliteration cache (FIFO, evicts earliest-inserted key)
TRANSLITERATION_CACHE_SIZE = int(os.environ.get("TRANSLITERATION_CACHE_SIZE", "1000"))

# API Security (API Key Authentication)
# Comma-separated list of valid API keys. If empty, auth is disabled.
API_KEYS = [k.strip() for k in os.environ.get("API_KEYS", "").split(",") if k.strip()]

# Logging configuration
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_JSON_FORMAT = os.environ.get("LOG_JSON_FORMAT", "true").lower() == "true"


# =============================================================================
# MATCHING THRESHOLDS
# =============================================================================

# Default Levenshtein budget for fuzzy matching
DEFAULT_MAX_DISTANCE = 2

# Transliteration-aware distance thresholds
VARIANT_MAX_DISTANCE = 1.5       # same-script prefix check, Ethiopic query prefix check
WORD_VARIANT_MAX_DISTANCE = 2.0  # per-word check against a romanized Ethiopic name

# Substitution costs used by the transliteration-aware distance
VOWEL_SUBSTITUTION_COST = 0.3
CONSONANT_VARIANT_COST = 0.5

# Direct containment is skipped in fuzzy mode when lengths diverge below this ratio
FUZZY_CONTAINMENT_MIN_LENGTH_RATIO = 0.7

# Whole-string fuzzy thresholds: (max normalized distance, min length ratio)
FUZZY_SAME_SCRIPT_THRESHOLDS = (0.25, 0.6)
FUZZY_ETHIOPIC_NAME_THRESHOLDS = (0.35, 0.5)
FUZZY_ETHIOPIC_QUERY_THRESHOLDS = (0.4, 0.4)

# Plain Levenshtein budget for per-word prefix comparisons
WORD_PREFIX_MAX_EDITS = 2          # query word vs romanized Ethiopic name word
QUERY_PREFIX_MAX_EDITS = 1         # Latin name vs romanized Ethiopic query

# Fuzzy prefix comparisons need at least this many characters to be meaningful
MIN_FUZZY_PREFIX_LENGTH = 3

# Single-word query vs romanized Ethiopic word prefix: at most one vowel
# disagreement ("tes" ~ "tas"); compared with a strict less-than
SINGLE_WORD_VARIANT_MAX_DISTANCE = 0.5

# Phonetic hashing
PHONETIC_HASH_LENGTH = 6
PHONETIC_SIMILARITY_THRESHOLD = 0.7

# Query expansion drops variants shorter than this (unless the query itself is one char)
MIN_EXPANSION_VARIANT_LENGTH = 2

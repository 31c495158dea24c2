"""
Text Normalization Utilities for Ethiopic and Latin names.

Provides functions for:
- Script detection (Ethiopic block)
- Case folding and whitespace normalization used by the matcher
"""
import re

# =============================================================================
# SCRIPT DETECTION
# =============================================================================

# Ethiopic Unicode block
ETHIOPIC_BLOCK_START = 0x1200
ETHIOPIC_BLOCK_END = 0x137F

_WHITESPACE_RE = re.compile(r'\s+')


def is_ethiopic_char(char: str) -> bool:
    """Check if a single character lies in the Ethiopic block."""
    return len(char) == 1 and ETHIOPIC_BLOCK_START <= ord(char) <= ETHIOPIC_BLOCK_END


def contains_amharic(text: str) -> bool:
    """Check if text contains any character from the Ethiopic block."""
    if not text or not isinstance(text, str):
        return False
    return any(is_ethiopic_char(char) for char in text)


# =============================================================================
# NORMALIZATION
# =============================================================================

def normalize_ascii(text: str) -> str:
    """
    Normalize a romanized string for comparison.

    Steps:
    1. Lowercase
    2. Collapse whitespace runs to one space
    3. Trim
    """
    if not text:
        return ""
    return _WHITESPACE_RE.sub(' ', text.lower()).strip()


def normalize_for_match(text: str, case_sensitive: bool = False) -> str:
    """Trim, and case-fold unless case_sensitive is set."""
    if not text:
        return ""
    folded = text if case_sensitive else text.lower()
    return folded.strip()


def split_words(text: str) -> list:
    """Split on whitespace, dropping empty tokens."""
    return [t for t in text.split() if t]

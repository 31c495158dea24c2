"""
Input validation and sanitization for names and search queries.

Two entry points:
- validate_and_sanitize_input: strict, raises ValidationError on any problem.
- validate_search_query: lenient, turns "nothing left after stripping" into an
  empty query instead of raising.

The dangerous-pattern check is optional and is not part of the matching path.
"""
import re
import logging

from utils.config import MAX_INPUT_LENGTH, MAX_QUERY_LENGTH
from utils.exceptions import ValidationError, SecurityError, ErrorCode

logger = logging.getLogger(__name__)

# C0 and C1 control characters
CONTROL_CHARACTERS_RE = re.compile(r'[\x00-\x1F\x7F-\x9F]')

# SQL injection heuristics
_SQL_PATTERNS = [
    re.compile(r'\b(SELECT|INSERT|UPDATE|DELETE|DROP|CREATE|ALTER|EXEC|EXECUTE)\b', re.IGNORECASE),
    re.compile(r'(--|/\*|\*/|;)'),
    re.compile(r'\b(UNION|OR|AND)\b.*\b(SELECT|INSERT|UPDATE|DELETE)\b', re.IGNORECASE),
]

# XSS heuristics
_XSS_PATTERNS = [
    re.compile(r'<script[^>]*>.*?</script>', re.IGNORECASE | re.DOTALL),
    re.compile(r'javascript:', re.IGNORECASE),
    re.compile(r'on\w+\s*=', re.IGNORECASE),
    re.compile(r'<iframe[^>]*>', re.IGNORECASE),
]


def strip_control_characters(text: str) -> str:
    """Remove control characters and surrounding whitespace."""
    return CONTROL_CHARACTERS_RE.sub('', text).strip()


def validate_and_sanitize_input(
    value,
    max_length: int = MAX_INPUT_LENGTH,
    field_name: str = "input"
) -> str:
    """
    Validate and sanitize a single input string.

    Args:
        value: Raw input (anything; only str is accepted)
        max_length: Maximum allowed length before sanitization
        field_name: Name used in error messages and error details

    Returns:
        Sanitized string (control characters removed, trimmed)

    Raises:
        ValidationError: with code INVALID_INPUT_TYPE, INPUT_EMPTY,
            INPUT_TOO_LONG or INVALID_CHARACTERS
    """
    if not isinstance(value, str):
        raise ValidationError(
            f"{field_name} must be a string, received {type(value).__name__}",
            code=ErrorCode.INVALID_INPUT_TYPE,
            field=field_name
        )

    if len(value) == 0:
        raise ValidationError(
            f"{field_name} cannot be empty",
            code=ErrorCode.INPUT_EMPTY,
            field=field_name
        )

    if len(value) > max_length:
        raise ValidationError(
            f"{field_name} exceeds maximum length of {max_length} characters",
            code=ErrorCode.INPUT_TOO_LONG,
            field=field_name,
            details={"max_length": max_length, "length": len(value)}
        )

    sanitized = strip_control_characters(value)

    if not sanitized:
        raise ValidationError(
            f"{field_name} contains only invalid characters",
            code=ErrorCode.INVALID_CHARACTERS,
            field=field_name
        )

    return sanitized


def validate_search_query(query, field_name: str = "query") -> str:
    """
    Validate a search query leniently.

    None, empty and whitespace-only queries become "". A query that reduces to
    nothing after stripping control characters also becomes "". Every other
    failure (wrong type, too long) is raised like the strict validator.
    """
    if query is None or query == "":
        return ""

    if isinstance(query, str) and not query.strip():
        return ""

    try:
        return validate_and_sanitize_input(query, MAX_QUERY_LENGTH, field_name)
    except ValidationError as e:
        if e.code == ErrorCode.INVALID_CHARACTERS:
            logger.debug(f"Treating {field_name} with only invalid characters as empty")
            return ""
        raise


def contains_dangerous_patterns(text: str) -> bool:
    """Check text against SQL and script injection heuristics."""
    return any(pattern.search(text) for pattern in _SQL_PATTERNS + _XSS_PATTERNS)


def sanitize_input(text: str) -> str:
    """
    Reject dangerous input, otherwise strip control characters and trim.

    Raises:
        SecurityError: if a dangerous pattern is detected
    """
    if contains_dangerous_patterns(text):
        logger.warning("Rejected input containing a dangerous pattern")
        raise SecurityError("Input contains potentially dangerous patterns")

    return strip_control_characters(text)

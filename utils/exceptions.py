"""
Custom Application Exceptions.

Provides a hierarchy of exceptions for consistent error handling.

Usage:
    from utils.exceptions import ValidationError, ErrorCode

    # In validators
    raise ValidationError("name cannot be empty", code=ErrorCode.INPUT_EMPTY, field="name")

    # In lenient callers
    except ValidationError as e:
        if e.code == ErrorCode.INVALID_CHARACTERS:
            ...
"""
from enum import Enum
from typing import Optional, Dict, Any


class ErrorCode(str, Enum):
    """Machine-readable error codes raised by the validation layer."""
    INVALID_INPUT_TYPE = "INVALID_INPUT_TYPE"
    INPUT_TOO_LONG = "INPUT_TOO_LONG"
    INPUT_EMPTY = "INPUT_EMPTY"
    INVALID_CHARACTERS = "INVALID_CHARACTERS"
    SECURITY_VIOLATION = "SECURITY_VIOLATION"


class AppError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (e.g., "INPUT_TOO_LONG")
        status_code: HTTP status code to return
        details: Additional context for debugging
    """
    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to API response format."""
        code = self.code.value if isinstance(self.code, Enum) else self.code
        return {
            "status": "error",
            "code": code,
            "message": self.message,
            "details": self.details
        }


# =============================================================================
# TRANSLITERATION LIBRARY EXCEPTIONS (400-level errors)
# =============================================================================

class TransliterationError(AppError):
    """
    Base class for errors raised by the name search library.

    Use for: Generic library failures not covered by the subclasses below.
    """
    def __init__(
        self,
        message: str,
        code: str = "TRANSLITERATION_ERROR",
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, code, status_code=status_code, details=details)


class ValidationError(TransliterationError):
    """
    Input validation failed.

    Use for: Wrong input type, empty input, input too long, or input that
    contains nothing but control characters.
    """
    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INPUT_EMPTY,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        _details = details or {}
        if field:
            _details["field"] = field
        super().__init__(message, code, status_code=422, details=_details)


class SecurityError(TransliterationError):
    """
    Input matched a dangerous pattern (SQL or script injection heuristics).
    """
    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message,
            ErrorCode.SECURITY_VIOLATION,
            status_code=400,
            details=details
        )

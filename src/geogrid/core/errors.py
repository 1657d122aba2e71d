"""
Exception hierarchy for geogrid.

Every failure raised by the parsers, validators and factories derives from
GeoGridException so callers can catch one type and present the message
verbatim.
"""

from typing import Any, Dict, List, Optional


class GeoGridException(Exception):
    """
    Base exception for all geogrid errors.

    Attributes:
        error_code: String identifier for the error type
        message: User-friendly error message
        details: Technical details for logging/debugging
        suggestions: Optional list of resolution suggestions
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize GeoGridException.

        Args:
            message: User-friendly error message
            error_code: String identifier for the error type
            details: Technical details for logging
            suggestions: List of suggestions for resolution
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.suggestions = suggestions or []

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to a serializable dictionary.

        Returns:
            Dictionary representation of the error
        """
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "suggestions": self.suggestions,
        }

    def __str__(self) -> str:
        """String representation of the exception."""
        return f"{self.error_code}: {self.message}"

    def __repr__(self) -> str:
        """Detailed string representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"error_code='{self.error_code}', "
            f"message='{self.message}')"
        )


class ParseError(GeoGridException):
    """
    Raised when coordinate text cannot be turned into a valid coordinate.

    Covers structural failures (the text has no recognizable shape), range
    violations and grid legality violations. The first failing validator
    message is used as the error message; WGS refinement failures also list
    every itemized problem in ``errors``.
    """

    def __init__(
        self,
        message: str,
        raw: Optional[Any] = None,
        errors: Optional[List[str]] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
        error_code: str = "PARSE_ERROR",
    ):
        """
        Initialize ParseError.

        Args:
            message: User-friendly error message
            raw: The raw input that failed to parse
            errors: Itemized error messages, when more than one was found
            details: Technical details about the parsing failure
            suggestions: List of suggestions for fixing the input
            error_code: String identifier for the error type
        """
        error_details = details or {}
        if raw is not None:
            error_details["raw"] = raw
        self.raw = raw
        self.errors = list(errors) if errors else [message]
        error_details["errors"] = self.errors

        default_suggestions = [
            'Use decimal degrees ("40.7128N 74.0060W") or DMS ("40°42\'46\\"N 74°0\'22\\"W")',
            'Use UTM as "<zone><band> <easting> <northing>" ("31U 448251 5411932")',
            'Use MGRS as "<zone><band><square><digits>" ("33VVE7220287839")',
        ]

        super().__init__(
            message=message,
            error_code=error_code,
            details=error_details,
            suggestions=suggestions or default_suggestions,
        )


class EmptyInputError(ParseError):
    """
    Raised when no value was supplied at all.

    Distinguishes "nothing to parse" (None, non-strings, blank strings) from
    a present but invalid coordinate.
    """

    def __init__(self, raw: Optional[Any] = None):
        """
        Initialize EmptyInputError.

        Args:
            raw: The offending input value
        """
        super().__init__(
            message="Input must be a non-empty string",
            raw=raw,
            suggestions=["Provide coordinate text such as \"31U 448251 5411932\""],
            error_code="EMPTY_INPUT",
        )


class ValidationError(GeoGridException):
    """
    Raised when caller-supplied options are invalid.

    Used for unknown coordinate orders or systems, MGRS precision outside
    0..5 and other option values rejected by the option models.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize ValidationError.

        Args:
            message: User-friendly error message
            field: Name of the option that failed validation
            details: Technical details about the validation failure
            suggestions: List of suggestions for fixing the options
        """
        error_details = details or {}
        if field:
            error_details["field"] = field

        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            details=error_details,
            suggestions=suggestions or ["Check the option values and try again"],
        )


class InvariantViolationError(GeoGridException):
    """
    Raised when an internal invariant is broken.

    These states are unreachable for inputs that passed the earlier
    validators; seeing one means a validator upstream let something through.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize InvariantViolationError.

        Args:
            message: Description of the broken invariant
            details: Values involved when the invariant broke
        """
        super().__init__(
            message=message,
            error_code="INVARIANT_VIOLATION",
            details=details,
            suggestions=["Report this input; an earlier validator should have rejected it"],
        )

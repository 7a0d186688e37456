"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization derived from the diagnostic code range.

    Categories:
        PATTERN: Pattern cannot be compiled or derived
        MATCH: Input does not follow the compiled pattern
        CALENDAR: Extracted fields do not form a real calendar date
    """

    PATTERN = "pattern"
    MATCH = "match"
    CALENDAR = "calendar"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Pattern errors (compilation and locale derivation)
        2000-2999: Match errors (input scan against the compiled pattern)
        3000-3999: Calendar errors (range checks and normalization)
    """

    # Pattern errors (1000-1999)
    PATTERN_MISSING = 1001
    PATTERN_NO_DATE_FIELDS = 1002
    PATTERN_LOCALE_UNKNOWN = 1003
    PATTERN_NOT_NUMERIC = 1004
    PATTERN_LITERAL_AMBIGUOUS = 1005

    # Match errors (2000-2999)
    PARSE_INPUT_INVALID = 2001
    UNEXPECTED_END_OF_INPUT = 2002
    EXPECTED_LITERAL = 2003
    EXPECTED_DIGIT = 2004
    NUMERIC_OVERFLOW = 2005
    TRAILING_CHARACTERS = 2006

    # Calendar errors (3000-3999)
    ILLEGAL_DAY = 3001
    ILLEGAL_MONTH = 3002
    ILLEGAL_YEAR = 3003

    @property
    def category(self) -> ErrorCategory:
        """Category implied by the code's numeric range."""
        if self.value < 2000:
            return ErrorCategory.PATTERN
        if self.value < 3000:
            return ErrorCategory.MATCH
        return ErrorCategory.CALENDAR


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        reason: Short failure reason without input/pattern context
        index: Character offset into the input (None for whole-value errors)
        hint: Suggestion for fixing the error
    """

    code: DiagnosticCode
    message: str
    reason: str = ""
    index: int | None = None
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping (log injection prevention).

        Example output:
            error[ILLEGAL_DAY]: Unparseable date "31-4-2022" using pattern "d-m-y". Illegal day 31
              = help: The day does not exist in the given month and year

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)

"""strictdate exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["DateParseError", "InvalidPatternError", "StrictDateError"]


class StrictDateError(Exception):
    """Base exception for all strictdate errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize StrictDateError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def code(self) -> DiagnosticCode | None:
        """Diagnostic code, if the error carries a diagnostic."""
        return self.diagnostic.code if self.diagnostic is not None else None


class InvalidPatternError(StrictDateError, ValueError):
    """Pattern cannot be used for parsing.

    Raised once, when a pattern is compiled or derived from locale data.
    Not recoverable by retry: the caller must fix the pattern.

    Attributes:
        pattern: The rejected pattern (empty if it was not a string)
    """

    def __init__(self, message: str | Diagnostic, *, pattern: str = "") -> None:
        super().__init__(message)
        self.pattern = pattern


class DateParseError(StrictDateError, ValueError):
    """Input string does not describe a date in the compiled pattern.

    A failed parse leaves the parser fully usable for further calls.

    Attributes:
        input_value: The string that failed to parse
        pattern: Normalized pattern used for parsing
        index: Character index where the failure was detected, or None for
            whole-value failures (illegal day, month or year)

    Example:
        >>> try:
        ...     DateParser("d-m-y").parse("1-11/1974")
        ... except DateParseError as error:
        ...     print(error.reason, error.index)
        Expected '-' 4
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        pattern: str = "",
        index: int | None = None,
    ) -> None:
        """Initialize DateParseError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The string that failed to parse
            pattern: Normalized pattern used for parsing
            index: Failure index into input_value, if any
        """
        super().__init__(message)
        self.input_value = input_value
        self.pattern = pattern
        self.index = index

    @property
    def reason(self) -> str:
        """Short failure reason (e.g., "Illegal day 31")."""
        if self.diagnostic is not None:
            return self.diagnostic.reason
        return str(self)

"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases

    Match and calendar messages share one shape:
        Unparseable date "<input>" using pattern "<pattern>". <reason>[ at index <i>]
    """

    @staticmethod
    def _unparseable(
        code: DiagnosticCode,
        value: str,
        pattern: str,
        reason: str,
        index: int | None,
        hint: str | None,
    ) -> Diagnostic:
        msg = f'Unparseable date "{value}" using pattern "{pattern}". {reason}'
        if index is not None:
            msg += f" at index {index}"
        return Diagnostic(code=code, message=msg, reason=reason, index=index, hint=hint)

    # ------------------------------------------------------------------
    # Pattern errors
    # ------------------------------------------------------------------

    @staticmethod
    def pattern_missing(pattern: object) -> Diagnostic:
        """Pattern is None or not a string.

        Args:
            pattern: The rejected pattern object

        Returns:
            Diagnostic for PATTERN_MISSING
        """
        reason = f"Pattern must be a string, got {type(pattern).__name__}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_MISSING,
            message=reason,
            reason=reason,
            hint="Pass a pattern such as 'dd-mm-yyyy'",
        )

    @staticmethod
    def pattern_no_date_fields(pattern: str) -> Diagnostic:
        """Pattern contains no day, month or year marker.

        Args:
            pattern: The rejected pattern

        Returns:
            Diagnostic for PATTERN_NO_DATE_FIELDS
        """
        reason = "Format should contain d, m or y"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_NO_DATE_FIELDS,
            message=f'Invalid pattern "{pattern}". {reason}',
            reason=reason,
            hint="Use 'd', 'm' or 'y' (any case) to mark date fields",
        )

    @staticmethod
    def pattern_locale_unknown(locale_code: str) -> Diagnostic:
        """Locale has no CLDR data.

        Args:
            locale_code: The locale that could not be loaded

        Returns:
            Diagnostic for PATTERN_LOCALE_UNKNOWN
        """
        reason = f"Unknown locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_LOCALE_UNKNOWN,
            message=reason,
            reason=reason,
            hint="Use a BCP 47 or POSIX locale code known to Babel (e.g., 'en_US')",
        )

    @staticmethod
    def pattern_not_numeric(
        locale_code: str,
        style: str,
        cldr_pattern: str,
        token: str,
    ) -> Diagnostic:
        """CLDR date format uses a field the mini-language cannot express.

        Args:
            locale_code: Locale the format was taken from
            style: CLDR format style
            cldr_pattern: The CLDR date pattern
            token: The offending CLDR field token

        Returns:
            Diagnostic for PATTERN_NOT_NUMERIC
        """
        reason = f"CLDR field '{token}' is not a numeric day, month or year"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_NOT_NUMERIC,
            message=(
                f"Cannot derive pattern from {style} date format "
                f"'{cldr_pattern}' of locale '{locale_code}': {reason}"
            ),
            reason=reason,
            hint="Try the 'short' style or pass an explicit pattern",
        )

    @staticmethod
    def pattern_literal_ambiguous(
        locale_code: str,
        style: str,
        cldr_pattern: str,
        literal: str,
    ) -> Diagnostic:
        """CLDR literal text would be read as date markers.

        Args:
            locale_code: Locale the format was taken from
            style: CLDR format style
            cldr_pattern: The CLDR date pattern
            literal: Literal text containing d, m or y

        Returns:
            Diagnostic for PATTERN_LITERAL_AMBIGUOUS
        """
        reason = f"Literal '{literal}' contains d, m or y and cannot be escaped"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_LITERAL_AMBIGUOUS,
            message=(
                f"Cannot derive pattern from {style} date format "
                f"'{cldr_pattern}' of locale '{locale_code}': {reason}"
            ),
            reason=reason,
            hint="Pass an explicit pattern instead",
        )

    # ------------------------------------------------------------------
    # Match errors
    # ------------------------------------------------------------------

    @staticmethod
    def input_invalid(value: object, pattern: str) -> Diagnostic:
        """Input is not a string.

        Args:
            value: The rejected input object
            pattern: Normalized pattern

        Returns:
            Diagnostic for PARSE_INPUT_INVALID
        """
        return ErrorTemplate._unparseable(
            DiagnosticCode.PARSE_INPUT_INVALID,
            str(value),
            pattern,
            f"Expected string, got {type(value).__name__}",
            None,
            None,
        )

    @staticmethod
    def unexpected_end_of_input(value: str, pattern: str, index: int) -> Diagnostic:
        """Input ended before every pattern token was consumed.

        Returns:
            Diagnostic for UNEXPECTED_END_OF_INPUT
        """
        return ErrorTemplate._unparseable(
            DiagnosticCode.UNEXPECTED_END_OF_INPUT,
            value,
            pattern,
            "Unexpected end of input",
            index,
            "The input is shorter than the pattern requires",
        )

    @staticmethod
    def expected_literal(value: str, pattern: str, index: int, expected: str) -> Diagnostic:
        """Input character differs from a pattern delimiter.

        Returns:
            Diagnostic for EXPECTED_LITERAL
        """
        return ErrorTemplate._unparseable(
            DiagnosticCode.EXPECTED_LITERAL,
            value,
            pattern,
            f"Expected '{expected}'",
            index,
            "Delimiters must match the pattern exactly",
        )

    @staticmethod
    def expected_digit(value: str, pattern: str, index: int) -> Diagnostic:
        """Date field needs a digit that is missing.

        Returns:
            Diagnostic for EXPECTED_DIGIT
        """
        return ErrorTemplate._unparseable(
            DiagnosticCode.EXPECTED_DIGIT,
            value,
            pattern,
            "Expected digit",
            index,
            "Repeated markers (e.g. 'dd') require exactly that many digits",
        )

    @staticmethod
    def numeric_overflow(value: str, pattern: str, index: int) -> Diagnostic:
        """Digit run exceeds the accumulator bound.

        Returns:
            Diagnostic for NUMERIC_OVERFLOW
        """
        return ErrorTemplate._unparseable(
            DiagnosticCode.NUMERIC_OVERFLOW,
            value,
            pattern,
            "Number overflow",
            index,
            None,
        )

    @staticmethod
    def trailing_characters(value: str, pattern: str, index: int) -> Diagnostic:
        """Input continues after the pattern is exhausted.

        Returns:
            Diagnostic for TRAILING_CHARACTERS
        """
        return ErrorTemplate._unparseable(
            DiagnosticCode.TRAILING_CHARACTERS,
            value,
            pattern,
            f"Unexpected trailing string '{value[index:]}'",
            index,
            "Leading and trailing whitespace is not stripped",
        )

    # ------------------------------------------------------------------
    # Calendar errors
    # ------------------------------------------------------------------

    @staticmethod
    def illegal_day(value: str, pattern: str, day: int) -> Diagnostic:
        """Day is out of range or does not exist in the month.

        Returns:
            Diagnostic for ILLEGAL_DAY
        """
        return ErrorTemplate._unparseable(
            DiagnosticCode.ILLEGAL_DAY,
            value,
            pattern,
            f"Illegal day {day}",
            None,
            "The day does not exist in the given month and year",
        )

    @staticmethod
    def illegal_month(value: str, pattern: str, month: int) -> Diagnostic:
        """Month is outside 1-12.

        Returns:
            Diagnostic for ILLEGAL_MONTH
        """
        return ErrorTemplate._unparseable(
            DiagnosticCode.ILLEGAL_MONTH,
            value,
            pattern,
            f"Illegal month {month}",
            None,
            None,
        )

    @staticmethod
    def illegal_year(value: str, pattern: str, year: int) -> Diagnostic:
        """Year is outside the supported calendar range.

        Returns:
            Diagnostic for ILLEGAL_YEAR
        """
        return ErrorTemplate._unparseable(
            DiagnosticCode.ILLEGAL_YEAR,
            value,
            pattern,
            f"Illegal year {year}",
            None,
            None,
        )

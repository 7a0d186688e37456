"""Strict single-pass date parser.

DateParser walks the compiled pattern tokens and the input characters in
lockstep. Both cursors only move forward; there is no backtracking, so a
parse is linear in the length of the input.

Matching rules:
    - Before every token the input must not be exhausted.
    - Delimiter: the next input character must equal it.
    - Field of width 1: one mandatory ASCII digit, then every following
      ASCII digit (greedy).
    - Field of width n > 1: exactly n ASCII digits.
    - After the last token the input must be exhausted.

Fields missing from the pattern default to 1. A field kind that appears
more than once keeps the value of its last occurrence.

Examples:
    >>> DateParser("d-m-y").parse("1-11-1974")
    ParsedDate(year=1974, month=11, day=1)
    >>> DateParser("yyyymmdd").parse_date("19741101")
    datetime.date(1974, 11, 1)
    >>> DateParser("y").parse("1974")
    ParsedDate(year=1974, month=1, day=1)

Thread Safety:
    Thread-safe. A DateParser holds only an immutable CompiledPattern;
    every parse() call keeps its state in local variables.

Python 3.13+.
"""

from __future__ import annotations

from datetime import date
from typing import NamedTuple, NoReturn

from strictdate.calendar_rules import validate_date
from strictdate.constants import DEFAULT_FIELD_VALUE, MAX_FIELD_VALUE
from strictdate.diagnostics import DateParseError, Diagnostic, ErrorTemplate
from strictdate.pattern import (
    CompiledPattern,
    FieldKind,
    FieldToken,
    LiteralToken,
    compile_pattern,
)

__all__ = ["DateParser", "ParsedDate"]


class ParsedDate(NamedTuple):
    """Validated calendar date; compares equal to (year, month, day)."""

    year: int
    month: int
    day: int

    def to_date(self) -> date:
        """Convert to datetime.date."""
        return date(self.year, self.month, self.day)


def _is_digit(char: str) -> bool:
    # str.isdigit() also accepts non-ASCII digits
    return "0" <= char <= "9"


class DateParser:
    """Parse date strings with a fixed pattern.

    Build once, call parse() many times.

    Args:
        pattern: Pattern string (e.g., "dd.mm.yyyy") or a CompiledPattern

    Raises:
        InvalidPatternError: If the pattern has no d, m or y marker or is
            not a string

    Example:
        >>> parser = DateParser("dd/mm-yyyy")
        >>> parser.parse("01/11-1974")
        ParsedDate(year=1974, month=11, day=1)
    """

    __slots__ = ("_compiled",)

    def __init__(self, pattern: str | CompiledPattern) -> None:
        if isinstance(pattern, CompiledPattern):
            self._compiled = pattern
        else:
            self._compiled = compile_pattern(pattern)

    @classmethod
    def for_locale(cls, locale_code: str, style: str | None = None) -> DateParser:
        """Create a parser from a locale's numeric CLDR date format.

        Args:
            locale_code: BCP 47 or POSIX locale code (e.g., "de-DE")
            style: CLDR style ("short", "medium", "long", "full");
                defaults to "short"

        Raises:
            InvalidPatternError: If the locale is unknown or its format
                uses month/weekday names

        Example:
            >>> DateParser.for_locale("de_DE").pattern
            'dd.mm.yyyy'
        """
        from strictdate.locale_patterns import pattern_for_locale  # noqa: PLC0415

        if style is None:
            return cls(pattern_for_locale(locale_code))
        return cls(pattern_for_locale(locale_code, style))

    @property
    def compiled(self) -> CompiledPattern:
        """The compiled pattern shared by every parse call."""
        return self._compiled

    @property
    def pattern(self) -> str:
        """Normalized pattern string."""
        return self._compiled.normalized

    def __repr__(self) -> str:
        return f"DateParser({self._compiled.source!r})"

    def parse(self, value: str) -> ParsedDate:
        """Parse a date string.

        Args:
            value: Input string; must match the pattern exactly

        Returns:
            ParsedDate (year, month, day), guaranteed calendar-valid

        Raises:
            DateParseError: If the input does not match the pattern or
                encodes an impossible date
        """
        pattern = self._compiled.normalized

        if not isinstance(value, str):
            raise DateParseError(
                ErrorTemplate.input_invalid(value, pattern),
                input_value=str(value),
                pattern=pattern,
            )

        fields = {
            FieldKind.DAY: DEFAULT_FIELD_VALUE,
            FieldKind.MONTH: DEFAULT_FIELD_VALUE,
            FieldKind.YEAR: DEFAULT_FIELD_VALUE,
        }
        length = len(value)
        pos = 0

        for token in self._compiled.tokens:
            if pos == length:
                self._fail(ErrorTemplate.unexpected_end_of_input(value, pattern, pos), value, pos)

            match token:
                case LiteralToken(char=char):
                    if value[pos] != char:
                        self._fail(
                            ErrorTemplate.expected_literal(value, pattern, pos, char), value, pos
                        )
                    pos += 1

                case FieldToken(kind=kind, width=width):
                    if not _is_digit(value[pos]):
                        self._fail(ErrorTemplate.expected_digit(value, pattern, pos), value, pos)
                    number = int(value[pos])
                    pos += 1

                    if width > 1:
                        for _ in range(width - 1):
                            if pos == length or not _is_digit(value[pos]):
                                self._fail(
                                    ErrorTemplate.expected_digit(value, pattern, pos), value, pos
                                )
                            number = number * 10 + int(value[pos])
                            if number > MAX_FIELD_VALUE:
                                self._fail(
                                    ErrorTemplate.numeric_overflow(value, pattern, pos), value, pos
                                )
                            pos += 1
                    else:
                        while pos < length and _is_digit(value[pos]):
                            number = number * 10 + int(value[pos])
                            if number > MAX_FIELD_VALUE:
                                self._fail(
                                    ErrorTemplate.numeric_overflow(value, pattern, pos), value, pos
                                )
                            pos += 1

                    fields[kind] = number

        if pos < length:
            self._fail(ErrorTemplate.trailing_characters(value, pattern, pos), value, pos)

        year, month, day = validate_date(
            fields[FieldKind.YEAR],
            fields[FieldKind.MONTH],
            fields[FieldKind.DAY],
            input_value=value,
            pattern=pattern,
        )
        return ParsedDate(year, month, day)

    def parse_date(self, value: str) -> date:
        """Parse a date string into datetime.date.

        Raises:
            DateParseError: Same conditions as parse()
        """
        return self.parse(value).to_date()

    def is_match(self, value: str) -> bool:
        """Check whether value parses to a valid date."""
        try:
            self.parse(value)
        except DateParseError:
            return False
        return True

    def _fail(self, diagnostic: Diagnostic, value: str, index: int) -> NoReturn:
        raise DateParseError(
            diagnostic,
            input_value=value,
            pattern=self._compiled.normalized,
            index=index,
        )

"""Never-raising date parsing with a cached pattern compiler.

- parse_date() returns tuple[date | None, tuple[StrictDateError, ...]]
- Invalid patterns are reported in the error tuple, not raised
- Compiled patterns are cached, so hot loops may pass pattern strings

Use DateParser directly when exceptions are preferred.

Thread-safe. Uses functools.lru_cache (internally locked).

Python 3.13+.
"""

import functools
from datetime import date

from strictdate.constants import MAX_PATTERN_CACHE_SIZE
from strictdate.diagnostics import DateParseError, InvalidPatternError, StrictDateError
from strictdate.parser import DateParser
from strictdate.pattern import CompiledPattern

__all__ = ["clear_pattern_cache", "get_parser", "parse_date"]


@functools.lru_cache(maxsize=MAX_PATTERN_CACHE_SIZE)
def get_parser(pattern: str) -> DateParser:
    """Get a cached DateParser for a pattern string.

    Raises:
        InvalidPatternError: If the pattern cannot be compiled
    """
    return DateParser(pattern)


def clear_pattern_cache() -> None:
    """Drop every cached DateParser."""
    get_parser.cache_clear()


def parse_date(
    value: str,
    pattern: str | CompiledPattern,
) -> tuple[date | None, tuple[StrictDateError, ...]]:
    """Parse a date string with a pattern, returning errors instead of raising.

    Args:
        value: Date string (e.g., "01.11.1974")
        pattern: Pattern string (e.g., "dd.mm.yyyy") or CompiledPattern

    Returns:
        Tuple of (result, errors):
        - result: Parsed date, or None if parsing failed
        - errors: Tuple holding one StrictDateError, either an
          InvalidPatternError or a DateParseError (empty tuple on success)

    Examples:
        >>> parse_date("1-11-1974", "d-m-y")
        (datetime.date(1974, 11, 1), ())

        >>> result, errors = parse_date("31-4-2022", "d-m-y")
        >>> result is None
        True
        >>> errors[0].reason
        'Illegal day 31'
    """
    try:
        parser = get_parser(pattern) if isinstance(pattern, str) else DateParser(pattern)
    except InvalidPatternError as e:
        return (None, (e,))

    try:
        return (parser.parse_date(value), ())
    except DateParseError as e:
        return (None, (e,))

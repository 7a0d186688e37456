"""Never-raising parsing API: errors are returned, not raised.

- parse_date() returns tuple[date | None, tuple[StrictDateError, ...]]
- is_valid_date() narrows the result for mypy

All parsing functions are thread-safe.

Public API:
    Parsing Functions:
        parse_date - Returns tuple[date | None, tuple[StrictDateError, ...]]
        get_parser - Cached DateParser for a pattern string
        clear_pattern_cache - Drop cached parsers

    Type Guards:
        is_valid_date - TypeIs guard for date (not None)

Example:
    >>> from strictdate.parsing import parse_date, is_valid_date
    >>> result, errors = parse_date("01.11.1974", "dd.mm.yyyy")
    >>> if is_valid_date(result):
    ...     print(result.isoformat())
    1974-11-01

Python 3.13+.
"""

from .dates import clear_pattern_cache, get_parser, parse_date
from .guards import is_valid_date

__all__ = [
    # Type guards
    "is_valid_date",
    # Parsing functions
    "clear_pattern_cache",
    "get_parser",
    "parse_date",
]

"""Type guard functions for parsing result type narrowing.

parse_date() returns tuple[date | None, tuple[StrictDateError, ...]].
The guard checks the result component to narrow types for mypy.

Python 3.13+ with TypeIs support (PEP 742).

Note: The guard accepts None and returns False. This simplifies the pattern
from `if not errors and is_valid_date(result)` to just `if is_valid_date(result)`.
"""

from datetime import date
from typing import TypeIs

__all__ = ["is_valid_date"]


def is_valid_date(value: date | None) -> TypeIs[date]:
    """Type guard: Check if parsed date is valid (not None).

    Safe to call directly on parse_date() result without checking errors first.

    Args:
        value: Date from parse_date() result tuple (may be None on error)

    Returns:
        True if value is a date object, False otherwise

    Example:
        >>> result, errors = parse_date("01.11.1974", "dd.mm.yyyy")
        >>> if is_valid_date(result):
        ...     # Type-safe: mypy knows result is date
        ...     year = result.year
    """
    return isinstance(value, date)

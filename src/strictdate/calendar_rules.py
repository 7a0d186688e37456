"""Calendar validation for extracted day/month/year fields.

Range checks run first, in a fixed order (day, month, year), so each
failure maps to exactly one error. The surviving day is then compared with
the length of its month in the proleptic Gregorian calendar; a day that
would roll over into the next month (31 April, 29 February of a common
year) is rejected rather than corrected.

Month lengths come from calendar.monthrange, a pure function of
(year, month). No calendar object is kept between calls.

Python 3.13+. Zero external dependencies.
"""

import calendar

from strictdate.constants import (
    MAX_DAY_OF_MONTH,
    MAX_YEAR,
    MIN_DAY_OF_MONTH,
    MIN_MONTH,
    MIN_YEAR,
    MONTHS_PER_YEAR,
)
from strictdate.diagnostics import DateParseError, ErrorTemplate

__all__ = ["days_in_month", "validate_date"]


def days_in_month(year: int, month: int) -> int:
    """Number of days in a month of the proleptic Gregorian calendar."""
    return calendar.monthrange(year, month)[1]


def validate_date(
    year: int,
    month: int,
    day: int,
    *,
    input_value: str,
    pattern: str,
) -> tuple[int, int, int]:
    """Validate extracted fields as a real calendar date.

    Args:
        year: Extracted year
        month: Extracted month
        day: Extracted day
        input_value: Original input (for error reporting)
        pattern: Normalized pattern (for error reporting)

    Returns:
        The validated (year, month, day)

    Raises:
        DateParseError: ILLEGAL_DAY, ILLEGAL_MONTH or ILLEGAL_YEAR
    """
    if not MIN_DAY_OF_MONTH <= day <= MAX_DAY_OF_MONTH:
        raise DateParseError(
            ErrorTemplate.illegal_day(input_value, pattern, day),
            input_value=input_value,
            pattern=pattern,
        )

    if not MIN_MONTH <= month <= MONTHS_PER_YEAR:
        raise DateParseError(
            ErrorTemplate.illegal_month(input_value, pattern, month),
            input_value=input_value,
            pattern=pattern,
        )

    if not MIN_YEAR <= year <= MAX_YEAR:
        raise DateParseError(
            ErrorTemplate.illegal_year(input_value, pattern, year),
            input_value=input_value,
            pattern=pattern,
        )

    if day > days_in_month(year, month):
        raise DateParseError(
            ErrorTemplate.illegal_day(input_value, pattern, day),
            input_value=input_value,
            pattern=pattern,
        )

    return (year, month, day)

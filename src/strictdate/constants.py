"""Shared constants for strictdate.

Centralized configuration constants used across the pattern compiler,
the matcher, and the calendar rules. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Numeric limits: Accumulator bounds for digit runs
- Calendar limits: Ranges checked before calendar normalization
- Cache limits: Memory bounds for caching subsystems
- Locale defaults: CLDR style used when deriving patterns

Python 3.13+. Zero external dependencies.
"""

from datetime import MAXYEAR

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Numeric limits
    "MAX_FIELD_VALUE",
    # Calendar limits
    "MIN_YEAR",
    "MAX_YEAR",
    "MIN_DAY_OF_MONTH",
    "MAX_DAY_OF_MONTH",
    "MIN_MONTH",
    "MONTHS_PER_YEAR",
    # Field defaults
    "DEFAULT_FIELD_VALUE",
    # Cache limits
    "MAX_PATTERN_CACHE_SIZE",
    "MAX_LOCALE_CACHE_SIZE",
    # Locale defaults
    "DEFAULT_LOCALE_STYLE",
    "LOCALE_STYLES",
]

# ============================================================================
# NUMERIC LIMITS
# ============================================================================

# Upper bound for a single day/month/year accumulator.
# Python integers never wrap, so the bound is enforced explicitly: a digit
# run whose value exceeds a signed 32-bit integer is a numeric overflow.
MAX_FIELD_VALUE: int = 2**31 - 1

# ============================================================================
# CALENDAR LIMITS
# ============================================================================

# Proleptic Gregorian calendar as implemented by datetime.date.
MIN_YEAR: int = 1
MAX_YEAR: int = MAXYEAR

MIN_DAY_OF_MONTH: int = 1
MAX_DAY_OF_MONTH: int = 31
MIN_MONTH: int = 1
MONTHS_PER_YEAR: int = 12

# ============================================================================
# FIELD DEFAULTS
# ============================================================================

# Value used for day, month or year when the pattern has no marker for it.
DEFAULT_FIELD_VALUE: int = 1

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Compiled patterns cached by the module-level parse_date() function.
MAX_PATTERN_CACHE_SIZE: int = 128

# Patterns derived from CLDR data, keyed by (locale_code, style).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

DEFAULT_LOCALE_STYLE: str = "short"
LOCALE_STYLES: tuple[str, ...] = ("short", "medium", "long", "full")

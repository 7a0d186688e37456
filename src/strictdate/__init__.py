"""strictdate - Strict date parsing with a day/month/year pattern language.

Converts a date string into a calendar date using a compact pattern such as
"dd.mm.yyyy" or "d-m-y". Input that does not match the pattern exactly, or
that names an impossible date (31 April, 29 February 2023), is rejected.

Public API:
    DateParser - Compile a pattern once, parse many strings
    ParsedDate - Validated (year, month, day) result
    compile_pattern - Compile a pattern string into a CompiledPattern
    parse_date - Never-raising convenience parser (result, errors)
    is_valid_date - TypeIs guard for parse_date() results
    pattern_for_locale - Pattern from a locale's numeric CLDR date format

Exceptions:
    StrictDateError - Base exception class
    InvalidPatternError - Pattern cannot be compiled
    DateParseError - Input does not match, or is not a real date

Submodules:
    strictdate.pattern - Pattern compiler and token types
    strictdate.parser - Single-pass matcher
    strictdate.calendar_rules - Range checks and calendar normalization
    strictdate.parsing - Never-raising API with pattern cache
    strictdate.locale_patterns - CLDR (Babel) pattern derivation
    strictdate.diagnostics - Error codes, templates and formatter

Example:
    >>> from strictdate import DateParser
    >>> DateParser("d-m-y").parse("1-11-1974")
    ParsedDate(year=1974, month=11, day=1)
"""

from .diagnostics import DateParseError, InvalidPatternError, StrictDateError
from .locale_patterns import pattern_for_locale
from .parser import DateParser, ParsedDate
from .parsing import is_valid_date, parse_date
from .pattern import CompiledPattern, compile_pattern

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("strictdate")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CompiledPattern",
    "DateParseError",
    "DateParser",
    "InvalidPatternError",
    "ParsedDate",
    "StrictDateError",
    "__version__",
    "compile_pattern",
    "is_valid_date",
    "parse_date",
    "pattern_for_locale",
]

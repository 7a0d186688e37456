"""Derive mini-language patterns from CLDR numeric date formats.

Babel exposes each locale's CLDR date formats ("M/d/yy" for en_US short,
"dd.MM.yy" for de_DE short). Numeric formats translate directly into the
day/month/year mini-language; formats that spell out month or weekday names
are rejected.

Token mapping:
    CLDR            | Pattern | Notes
    ----------------|---------|------------------------------------------
    d / dd          | d / dd  | width preserved
    M / MM, L / LL  | m / mm  | format and stand-alone month
    y, u, yyyy      | y       | any year; "yyyy" if next to another field
    yy              | yyyy    | four-digit year required
    anything else   | -       | InvalidPatternError (PATTERN_NOT_NUMERIC)

Two-digit CLDR years ("yy") are widened to exactly four digits: the
mini-language has no century pivot, so "1/28/2025" parses with the en_US
short format and "1/28/25" is rejected instead of being read as year 25.

Literal text is copied through. Literals containing d, m or y cannot be
expressed (the mini-language has no escaping) and are rejected.

Thread-safe. Results are cached per (locale_code, style).

Python 3.13+. Uses Babel CLDR patterns.
"""

import functools
import logging

from babel import UnknownLocaleError

from strictdate.constants import (
    DEFAULT_LOCALE_STYLE,
    LOCALE_STYLES,
    MAX_LOCALE_CACHE_SIZE,
)
from strictdate.diagnostics import ErrorTemplate, InvalidPatternError
from strictdate.locale_utils import get_babel_locale, normalize_locale

__all__ = ["cldr_to_pattern", "pattern_for_locale"]

logger = logging.getLogger(__name__)

_CLDR_DAY_TOKENS: dict[str, str] = {"d": "d", "dd": "dd"}
_CLDR_MONTH_TOKENS: dict[str, str] = {"M": "m", "MM": "mm", "L": "m", "LL": "mm"}
_CLDR_YEAR_LETTERS: frozenset[str] = frozenset({"y", "u"})
_FIELD_LETTERS: frozenset[str] = frozenset("dmyDMY")
# CLDR "yy" truncates the year; parsing it back needs a century pivot
_CLDR_TWO_DIGIT_YEAR_WIDTH = 2


def _tokenize_cldr_pattern(pattern: str) -> list[tuple[str, bool]]:
    """Split a CLDR pattern into (text, is_field) tokens.

    CLDR quote escaping rules:
    - Single quotes delimit literal text: 'de' produces "de"
    - Two consecutive single quotes '' produce a literal single quote
    - '' inside quoted text also produces a literal single quote

    Examples:
        "dd.MM.yy" -> [("dd", True), (".", False), ("MM", True), (".", False), ("yy", True)]
        "d 'de' MMMM" -> [("d", True), (" ", False), ("de", False), (" ", False), ("MMMM", True)]
    """
    tokens: list[tuple[str, bool]] = []
    i = 0
    n = len(pattern)

    while i < n:
        char = pattern[i]

        if char == "'":
            if i + 1 < n and pattern[i + 1] == "'":
                tokens.append(("'", False))
                i += 2
                continue

            i += 1  # Skip opening quote
            literal_chars: list[str] = []
            while i < n:
                if pattern[i] == "'":
                    if i + 1 < n and pattern[i + 1] == "'":
                        literal_chars.append("'")
                        i += 2
                    else:
                        i += 1
                        break
                else:
                    literal_chars.append(pattern[i])
                    i += 1

            if literal_chars:
                tokens.append(("".join(literal_chars), False))
            continue

        if char.isascii() and char.isalpha():
            j = i + 1
            while j < n and pattern[j] == char:
                j += 1
            tokens.append((pattern[i:j], True))
            i = j
            continue

        tokens.append((char, False))
        i += 1

    return tokens


def cldr_to_pattern(cldr_pattern: str, *, locale_code: str = "", style: str = "") -> str:
    """Translate a numeric CLDR date pattern into a mini-language pattern.

    Args:
        cldr_pattern: CLDR date pattern (e.g., "dd.MM.yy")
        locale_code: Locale the pattern came from (error reporting only)
        style: CLDR style the pattern came from (error reporting only)

    Returns:
        Mini-language pattern (e.g., "dd.mm.yyyy")

    Raises:
        InvalidPatternError: If the CLDR pattern uses non-numeric fields or
            a literal that would be read as a date marker

    Example:
        >>> cldr_to_pattern("M/d/yy")
        'm/d/yyyy'
        >>> cldr_to_pattern("yyyyMMdd")
        'yyyymmdd'
    """
    tokens = _tokenize_cldr_pattern(cldr_pattern)
    parts: list[str] = []

    for i, (text, is_field) in enumerate(tokens):
        if not is_field:
            if any(char in _FIELD_LETTERS for char in text):
                raise InvalidPatternError(
                    ErrorTemplate.pattern_literal_ambiguous(locale_code, style, cldr_pattern, text),
                    pattern=cldr_pattern,
                )
            parts.append(text)
        elif text in _CLDR_DAY_TOKENS:
            parts.append(_CLDR_DAY_TOKENS[text])
        elif text in _CLDR_MONTH_TOKENS:
            parts.append(_CLDR_MONTH_TOKENS[text])
        elif text[0] in _CLDR_YEAR_LETTERS:
            # A variable-width year would swallow an adjacent field's digits
            next_to_field = (i > 0 and tokens[i - 1][1]) or (
                i + 1 < len(tokens) and tokens[i + 1][1]
            )
            if len(text) == _CLDR_TWO_DIGIT_YEAR_WIDTH or next_to_field:
                parts.append("yyyy")
            else:
                parts.append("y")
        else:
            raise InvalidPatternError(
                ErrorTemplate.pattern_not_numeric(locale_code, style, cldr_pattern, text),
                pattern=cldr_pattern,
            )

    return "".join(parts)


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _pattern_for_locale(locale_code: str, style: str) -> str:
    try:
        locale = get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError, TypeError) as e:
        raise InvalidPatternError(ErrorTemplate.pattern_locale_unknown(locale_code)) from e

    cldr_pattern = locale.date_formats[style].pattern
    try:
        pattern = cldr_to_pattern(cldr_pattern, locale_code=locale_code, style=style)
    except InvalidPatternError:
        logger.debug("Rejected %s date format %r of locale %s", style, cldr_pattern, locale_code)
        raise

    logger.debug(
        "Derived pattern %r from %s date format %r of locale %s",
        pattern,
        style,
        cldr_pattern,
        locale_code,
    )
    return pattern


def pattern_for_locale(locale_code: str, style: str = DEFAULT_LOCALE_STYLE) -> str:
    """Get the mini-language pattern for a locale's CLDR date format.

    Args:
        locale_code: BCP 47 or POSIX locale code (e.g., "en-US", "lv_LV")
        style: CLDR format style: "short" (default), "medium", "long", "full"

    Returns:
        Pattern string accepted by compile_pattern()

    Raises:
        InvalidPatternError: If the locale is unknown, or the format for
            this style is not purely numeric
        ValueError: If style is not a CLDR format style

    Example:
        >>> pattern_for_locale("en_US")
        'm/d/yyyy'
        >>> pattern_for_locale("de-DE")
        'dd.mm.yyyy'
    """
    if style not in LOCALE_STYLES:
        msg = f"Unknown CLDR date format style '{style}', expected one of {LOCALE_STYLES}"
        raise ValueError(msg)
    if not isinstance(locale_code, str):
        raise InvalidPatternError(ErrorTemplate.pattern_locale_unknown(str(locale_code)))
    return _pattern_for_locale(normalize_locale(locale_code), style)

"""Pattern compiler for the day/month/year mini-language.

A pattern is read once and turned into an immutable CompiledPattern:

    Symbol        | Meaning       | Width rule
    --------------|---------------|------------------------------------------
    d/D (run n)   | day of month  | n == 1: variable width, n > 1: n digits
    m/M (run n)   | month         | same
    y/Y (run n)   | year          | same
    anything else | delimiter     | must match the input exactly

There is no escaping: every character that is not d, m or y (in any case)
is a delimiter.

Examples:
    >>> compile_pattern("dd/mm-yyyy").tokens
    (FieldToken(kind=<FieldKind.DAY: 'd'>, width=2), LiteralToken(char='/'), ...)

Thread-safe. CompiledPattern is a frozen dataclass.

Python 3.13+. Zero external dependencies.
"""

import logging
from dataclasses import dataclass
from enum import StrEnum

from strictdate.diagnostics import ErrorTemplate, InvalidPatternError

__all__ = [
    "CompiledPattern",
    "DateField",
    "Delimiter",
    "FieldKind",
    "FieldToken",
    "LiteralToken",
    "PatternSymbol",
    "PatternToken",
    "compile_pattern",
]

logger = logging.getLogger(__name__)


class FieldKind(StrEnum):
    """Date field marked by a pattern letter (canonical lowercase)."""

    DAY = "d"
    MONTH = "m"
    YEAR = "y"


_FIELD_KINDS: dict[str, FieldKind] = {kind.value: kind for kind in FieldKind}


# ============================================================================
# SYMBOLS (one per pattern character)
# ============================================================================


@dataclass(frozen=True, slots=True)
class DateField:
    """Day, month or year marker."""

    kind: FieldKind


@dataclass(frozen=True, slots=True)
class Delimiter:
    """Literal character that must appear verbatim in the input."""

    char: str


type PatternSymbol = DateField | Delimiter


# ============================================================================
# TOKENS (runs resolved at compile time)
# ============================================================================


@dataclass(frozen=True, slots=True)
class FieldToken:
    """Run of identical date markers.

    Attributes:
        kind: Field the digits are stored into
        width: Run length; 1 means variable width, >1 means exactly
            that many digits
    """

    kind: FieldKind
    width: int

    @property
    def is_fixed_width(self) -> bool:
        """True if the field consumes exactly `width` digits."""
        return self.width > 1


@dataclass(frozen=True, slots=True)
class LiteralToken:
    """Single delimiter character."""

    char: str


type PatternToken = FieldToken | LiteralToken


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """Immutable, validated pattern shared by all parse calls.

    Attributes:
        source: Pattern exactly as given by the caller
        symbols: One symbol per character of source
        tokens: Symbols with adjacent identical markers merged
    """

    source: str
    symbols: tuple[PatternSymbol, ...]
    tokens: tuple[PatternToken, ...]

    @property
    def normalized(self) -> str:
        """Pattern with date markers folded to lowercase."""
        return "".join(
            symbol.kind.value if isinstance(symbol, DateField) else symbol.char
            for symbol in self.symbols
        )

    @property
    def field_kinds(self) -> frozenset[FieldKind]:
        """Date fields that appear at least once in the pattern."""
        return frozenset(
            token.kind for token in self.tokens if isinstance(token, FieldToken)
        )

    def __str__(self) -> str:
        return self.normalized


def _classify(char: str) -> PatternSymbol:
    kind = _FIELD_KINDS.get(char.lower())
    if kind is None:
        return Delimiter(char)
    return DateField(kind)


def _merge_runs(symbols: tuple[PatternSymbol, ...]) -> tuple[PatternToken, ...]:
    """Merge adjacent identical date markers into sized field tokens."""
    tokens: list[PatternToken] = []
    i = 0
    n = len(symbols)

    while i < n:
        symbol = symbols[i]
        match symbol:
            case DateField(kind=kind):
                j = i + 1
                while j < n and symbols[j] == symbol:
                    j += 1
                tokens.append(FieldToken(kind, j - i))
                i = j
            case Delimiter(char=char):
                tokens.append(LiteralToken(char))
                i += 1

    return tuple(tokens)


def compile_pattern(pattern: str) -> CompiledPattern:
    """Compile a pattern string.

    Args:
        pattern: Pattern such as "d-m-y" or "yyyymmdd"

    Returns:
        CompiledPattern ready for DateParser

    Raises:
        InvalidPatternError: If pattern is not a string or contains no
            d, m or y marker (case-insensitive)

    Example:
        >>> compile_pattern("D.M.Y").normalized
        'd.m.y'
    """
    if not isinstance(pattern, str):
        raise InvalidPatternError(ErrorTemplate.pattern_missing(pattern))

    symbols = tuple(_classify(char) for char in pattern)
    if not any(isinstance(symbol, DateField) for symbol in symbols):
        raise InvalidPatternError(
            ErrorTemplate.pattern_no_date_fields(pattern), pattern=pattern
        )

    compiled = CompiledPattern(source=pattern, symbols=symbols, tokens=_merge_runs(symbols))
    logger.debug("Compiled pattern %r into %d tokens", pattern, len(compiled.tokens))
    return compiled

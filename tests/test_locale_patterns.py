"""Tests for CLDR (Babel) pattern derivation."""

import logging
from datetime import date

import pytest

from strictdate import DateParseError, DateParser, InvalidPatternError, pattern_for_locale
from strictdate.diagnostics import DiagnosticCode
from strictdate.locale_patterns import _tokenize_cldr_pattern, cldr_to_pattern
from strictdate.locale_utils import normalize_locale


class TestCldrTokenizer:
    """CLDR tokenizer quote handling."""

    def test_fields_and_literals(self) -> None:
        """Letter runs are fields; punctuation is literal."""
        assert _tokenize_cldr_pattern("dd.MM.yy") == [
            ("dd", True),
            (".", False),
            ("MM", True),
            (".", False),
            ("yy", True),
        ]

    def test_quoted_literal(self) -> None:
        """Quoted text is a single literal token."""
        assert ("de", False) in _tokenize_cldr_pattern("d 'de' MMMM")

    def test_escaped_quote_outside_quoted_section(self) -> None:
        """Two quotes outside a quoted section produce a literal quote."""
        assert ("'", False) in _tokenize_cldr_pattern("y''MM")

    def test_escaped_quote_inside_quoted_section(self) -> None:
        """Two quotes inside quoted text produce a literal quote."""
        assert ("o'clock", False) in _tokenize_cldr_pattern("'o''clock'")


class TestCldrToPattern:
    """Translation of CLDR patterns into the mini-language."""

    @pytest.mark.parametrize(
        ("cldr", "expected"),
        [
            ("M/d/yy", "m/d/yyyy"),
            ("dd.MM.yy", "dd.mm.yyyy"),
            ("dd/MM/y", "dd/mm/y"),
            ("y-MM-dd", "y-mm-dd"),
            ("yyyyMMdd", "yyyymmdd"),
            ("LL/dd/yyyy", "mm/dd/y"),
            ("y. M. d.", "y. m. d."),
        ],
    )
    def test_numeric_patterns(self, cldr: str, expected: str) -> None:
        """Numeric day, month and year fields translate directly."""
        assert cldr_to_pattern(cldr) == expected

    @pytest.mark.parametrize("cldr", ["MMM d, y", "EEEE, d MMMM y", "d.M.y G", "h:mm a"])
    def test_names_rejected(self, cldr: str) -> None:
        """Month names, weekdays, eras and times cannot be expressed."""
        with pytest.raises(InvalidPatternError) as exc_info:
            cldr_to_pattern(cldr)
        assert exc_info.value.code is DiagnosticCode.PATTERN_NOT_NUMERIC

    def test_ambiguous_literal_rejected(self) -> None:
        """Literal text containing d, m or y would be read as markers."""
        with pytest.raises(InvalidPatternError) as exc_info:
            cldr_to_pattern("d 'de' M 'de' y")
        assert exc_info.value.code is DiagnosticCode.PATTERN_LITERAL_AMBIGUOUS


class TestPatternForLocale:
    """Locale lookups through Babel."""

    def test_en_us_short(self) -> None:
        """en_US short date format is month/day/year."""
        assert pattern_for_locale("en_US") == "m/d/yyyy"

    def test_bcp47_code(self) -> None:
        """Hyphenated BCP 47 codes are accepted."""
        assert pattern_for_locale("de-DE") == pattern_for_locale("de_DE") == "dd.mm.yyyy"

    def test_medium_style_with_names_rejected(self) -> None:
        """en_US medium format spells out the month."""
        with pytest.raises(InvalidPatternError) as exc_info:
            pattern_for_locale("en_US", "medium")
        assert exc_info.value.code is DiagnosticCode.PATTERN_NOT_NUMERIC

    def test_unknown_locale(self) -> None:
        """Locales without CLDR data are rejected."""
        with pytest.raises(InvalidPatternError) as exc_info:
            pattern_for_locale("xx_XX")
        assert exc_info.value.code is DiagnosticCode.PATTERN_LOCALE_UNKNOWN

    def test_unknown_style(self) -> None:
        """Styles other than the CLDR ones are a ValueError."""
        with pytest.raises(ValueError, match="Unknown CLDR date format style"):
            pattern_for_locale("en_US", "tiny")

    def test_debug_log(self, caplog: pytest.LogCaptureFixture) -> None:
        """A derived pattern is logged at DEBUG level."""
        with caplog.at_level(logging.DEBUG, logger="strictdate.locale_patterns"):
            pattern_for_locale("en_US")
        assert any("m/d/yyyy" in record.getMessage() for record in caplog.records)

    def test_debug_log_for_rejected_style(self, caplog: pytest.LogCaptureFixture) -> None:
        """A style whose format spells out names is logged before raising."""
        with (
            caplog.at_level(logging.DEBUG, logger="strictdate.locale_patterns"),
            pytest.raises(InvalidPatternError),
        ):
            pattern_for_locale("en_US", "medium")
        messages = [record.getMessage() for record in caplog.records]
        assert any(
            message.startswith("Rejected medium date format") and "en_US" in message
            for message in messages
        )

    def test_full_style_accepted_but_not_numeric(self) -> None:
        """The full CLDR style is valid; en_US spells out the weekday in it."""
        with pytest.raises(InvalidPatternError) as exc_info:
            pattern_for_locale("en_US", "full")
        assert exc_info.value.code is DiagnosticCode.PATTERN_NOT_NUMERIC

    def test_normalize_locale(self) -> None:
        """BCP 47 separators are converted for Babel."""
        assert normalize_locale("pt-BR") == "pt_BR"


class TestDateParserForLocale:
    """DateParser.for_locale() builds a parser from CLDR data."""

    def test_parse_us_date(self) -> None:
        """US dates parse month first."""
        parser = DateParser.for_locale("en_US")
        assert parser.parse_date("1/28/2025") == date(2025, 1, 28)

    def test_parse_german_date(self) -> None:
        """German short format requires two-digit day and month."""
        parser = DateParser.for_locale("de_DE", "short")
        assert parser.parse_date("28.01.2025") == date(2025, 1, 28)
        assert not parser.is_match("28.1.2025")

    def test_two_digit_year_rejected(self) -> None:
        """A two-digit year is not silently read as a first-century year."""
        parser = DateParser.for_locale("en_US")
        assert parser.pattern == "m/d/yyyy"
        assert not parser.is_match("1/28/25")
        with pytest.raises(DateParseError) as exc_info:
            parser.parse("1/28/25")
        assert exc_info.value.code is DiagnosticCode.EXPECTED_DIGIT
        assert exc_info.value.index == len("1/28/25")

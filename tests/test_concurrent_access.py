"""Concurrent access tests.

A DateParser and its CompiledPattern are immutable; parse() keeps all state
in locals. These tests check that concurrent calls never see each other's
values or errors.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from datetime import date, timedelta

from strictdate import DateParseError, DateParser, parse_date


class TestConcurrentParse:
    """Shared parser used from many threads."""

    def test_shared_parser_results(self) -> None:
        """Each thread gets its own date back."""
        parser = DateParser("yyyy-mm-dd")
        start = date(2000, 1, 1)
        days = [start + timedelta(days=i) for i in range(400)]

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lambda d: parser.parse_date(d.isoformat()), days))

        assert results == days

    def test_errors_do_not_leak(self) -> None:
        """Failures in some threads leave other threads' results intact."""
        parser = DateParser("d-m-y")
        inputs = ["31-4-2022", "30-4-2022", "29-2-2023", "29-2-2024"] * 50

        def attempt(value: str) -> str:
            try:
                return parser.parse_date(value).isoformat()
            except DateParseError as e:
                return e.reason

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(attempt, inputs))

        assert results == ["Illegal day 31", "2022-04-30", "Illegal day 29", "2024-02-29"] * 50

    def test_cached_parse_date(self) -> None:
        """The cached module-level API is safe to call concurrently."""
        inputs = [f"{day}.1.2001" for day in range(1, 32)] * 10

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lambda v: parse_date(v, "d.m.y"), inputs))

        assert all(not errors for _, errors in results)
        assert [result for result, _ in results[:31]] == [date(2001, 1, d) for d in range(1, 32)]

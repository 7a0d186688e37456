"""Quickstart example for strictdate.

This example demonstrates pattern compilation, strict parsing, the
never-raising parse_date() API, and locale-derived patterns.

Note: Examples print errors for illustration. In production, always check
the errors tuple (or catch DateParseError) and report invalid input.
"""

from strictdate import DateParseError, DateParser, is_valid_date, parse_date
from strictdate.diagnostics import DiagnosticFormatter, OutputFormat

# Example 1: Variable and fixed width fields
print("=" * 50)
print("Example 1: Parsing")
print("=" * 50)

print(DateParser("d-m-y").parse("1-11-1974"))
# Output: ParsedDate(year=1974, month=11, day=1)

print(DateParser("yyyymmdd").parse_date("19741101"))
# Output: 1974-11-01

print(DateParser("y").parse("1974"))
# Output: ParsedDate(year=1974, month=1, day=1)

# Example 2: Strict rejection
print("\n" + "=" * 50)
print("Example 2: Rejected Input")
print("=" * 50)

parser = DateParser("d-m-y")
for value in (" 19-11-1974", "1-11/1974", "31-4-2022", "29-2-2023"):
    try:
        parser.parse(value)
    except DateParseError as e:
        print(f"{value!r}: {e.reason} (index {e.index})")

# Example 3: Never-raising API
print("\n" + "=" * 50)
print("Example 3: parse_date()")
print("=" * 50)

result, errors = parse_date("01.11.1974", "dd.mm.yyyy")
if is_valid_date(result):
    print(result.isoformat())

result, errors = parse_date("01.13.1974", "dd.mm.yyyy")
formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
for error in errors:
    if error.diagnostic is not None:
        print(formatter.format(error.diagnostic))

# Example 4: Locale patterns (Babel CLDR data)
print("\n" + "=" * 50)
print("Example 4: Locale Patterns")
print("=" * 50)

for locale_code in ("en_US", "de_DE"):
    locale_parser = DateParser.for_locale(locale_code)
    print(f"{locale_code}: {locale_parser.pattern}")

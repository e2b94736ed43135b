"""
Parsers for the typed columns of the status book.

Every parser accepts a cleaned cell and returns a ParseResult, so callers can
tell a blank cell (EMPTY) apart from one holding text of the wrong shape
(INVALID) without catching exceptions.
"""

import re
from datetime import date, timedelta

from nfip_status.models.parse_result import ParseResult

# Two-digit years at or below this are read as 20xx, the rest as 19xx
CENTURY_CUTOFF = 22

DIGIT_RUN = re.compile(r'[0-9]+')
INTEGER = re.compile(r'[+-]?[0-9]+')


def expand_year(year: int) -> int:
    """Map a two-digit year onto a century."""
    if year <= CENTURY_CUTOFF:
        return 2000 + year
    return 1900 + year


def parse_date(value: str) -> ParseResult:
    """
    Parse a month/day/two-digit-year date.

    The first three runs of digits are read as month, day and year, so any
    separator is accepted. The day is not checked against the month: it is
    counted forward from the first of the month, so 2/31/21 becomes
    2021-03-03 and day 0 is the last day of the previous month.

    Args:
        value: Cleaned cell text

    Returns:
        ParseResult holding a ``datetime.date``
    """
    if not value:
        return ParseResult.empty()

    matches = DIGIT_RUN.findall(value)[:3]
    if len(matches) < 3:
        return ParseResult.invalid(f"invalid date string {value!r}")

    month, day, year = (int(m) for m in matches)
    if not 1 <= month <= 12:
        return ParseResult.invalid(f"invalid month {month} in date string {value!r}")

    try:
        parsed = date(expand_year(year), month, 1) + timedelta(days=day - 1)
    except (ValueError, OverflowError):
        return ParseResult.invalid(f"date out of range {value!r}")

    return ParseResult.of(parsed)


def parse_yes_no(value: str) -> ParseResult:
    """Parse a case-insensitive Yes/No flag into a bool."""
    value = value.strip()
    if not value:
        return ParseResult.empty()

    normalized = value.lower()
    if normalized == 'yes':
        return ParseResult.of(True)
    if normalized == 'no':
        return ParseResult.of(False)

    return ParseResult.invalid(f"failed to parse bool from string {value!r}")


def parse_identifier(value: str) -> ParseResult:
    """
    Parse a community identifier.

    A blank identifier is a degenerate but valid record and parses as 0
    rather than EMPTY.
    """
    if not value:
        return ParseResult.of(0)

    if not INTEGER.fullmatch(value):
        return ParseResult.invalid(f"invalid community identifier {value!r}")

    return ParseResult.of(int(value))

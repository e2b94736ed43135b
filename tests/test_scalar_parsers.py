from datetime import date

import pytest

from nfip_status.models.enums import ParseOutcome
from nfip_status.utils.scalar_parsers import (
    CENTURY_CUTOFF,
    expand_year,
    parse_date,
    parse_identifier,
    parse_yes_no,
)


@pytest.mark.parametrize("text, expected", [
    ("3/4/22", date(2022, 3, 4)),
    ("3/4/23", date(1923, 3, 4)),
    ("03/04/00", date(2000, 3, 4)),
    ("12/31/99", date(1999, 12, 31)),
    ("07-15-85", date(1985, 7, 15)),
])
def test_parse_date_two_digit_year_century(text, expected):
    result = parse_date(text)

    assert result.outcome is ParseOutcome.VALUE
    assert result.value == expected


def test_century_cutoff_is_fixed():
    assert CENTURY_CUTOFF == 22
    assert expand_year(22) == 2022
    assert expand_year(23) == 1923


def test_parse_date_uses_first_three_digit_runs():
    assert parse_date("Eff. 5/6/07 (rev 2/2/10)").value == date(2007, 5, 6)


def test_parse_date_empty():
    assert parse_date("").outcome is ParseOutcome.EMPTY


@pytest.mark.parametrize("text", ["N/A", "(NSFHA)", "5/6", "E"])
def test_parse_date_too_few_digit_runs_is_invalid(text):
    result = parse_date(text)

    assert result.outcome is ParseOutcome.INVALID
    assert result.value is None
    assert result.error


@pytest.mark.parametrize("text", ["13/01/90", "0/01/90"])
def test_parse_date_bad_month_is_invalid(text):
    assert parse_date(text).is_invalid


def test_parse_date_day_is_not_checked_against_month():
    assert parse_date("2/31/21").value == date(2021, 3, 3)
    assert parse_date("3/0/21").value == date(2021, 2, 28)


def test_parse_date_out_of_range_is_invalid():
    assert parse_date("1/1/999999").is_invalid


@pytest.mark.parametrize("text", ["Yes", "YES", "yes", " yes "])
def test_parse_yes_no_true(text):
    result = parse_yes_no(text)

    assert result.has_value
    assert result.value is True


def test_parse_yes_no_false():
    result = parse_yes_no("no")

    assert result.has_value
    assert result.value is False


def test_parse_yes_no_empty_and_invalid():
    assert parse_yes_no("").is_empty
    assert parse_yes_no("maybe").is_invalid
    assert parse_yes_no("maybe").value_or(False) is False


def test_parse_identifier():
    assert parse_identifier("060001").value == 60001
    assert parse_identifier("-5").value == -5


def test_parse_identifier_empty_is_zero():
    result = parse_identifier("")

    assert result.outcome is ParseOutcome.VALUE
    assert result.value == 0


@pytest.mark.parametrize("text", ["abc", "12a", "1_000", "1.5"])
def test_parse_identifier_invalid(text):
    assert parse_identifier(text).is_invalid

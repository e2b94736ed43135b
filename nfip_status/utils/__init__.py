"""Utility modules for cleaning and parsing status book cells."""

from .field_cleaner import clean_field, clean_row
from .scalar_parsers import (
    CENTURY_CUTOFF,
    expand_year,
    parse_date,
    parse_identifier,
    parse_yes_no,
)

__all__ = [
    'clean_field',
    'clean_row',
    'CENTURY_CUTOFF',
    'expand_year',
    'parse_date',
    'parse_identifier',
    'parse_yes_no',
]

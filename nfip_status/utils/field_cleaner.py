"""Cleanup of the spreadsheet decoration FEMA wraps around cell values."""

import string
from typing import List, Sequence

# Numeric-looking cells are exported as ="0123" so spreadsheets keep leading zeros
DECORATION = '"='


def clean_field(value: str) -> str:
    """Strip surrounding whitespace, quotes and equals signs from a cell."""
    return value.strip(DECORATION + string.whitespace)


def clean_row(row: Sequence[str]) -> List[str]:
    """Clean every cell of a CSV row."""
    return [clean_field(cell) for cell in row]

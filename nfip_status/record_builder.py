"""Builds CommunityStatus records from raw CSV rows."""

import logging
from typing import Sequence

from nfip_status.errors import RowParseError, RowStructureError
from nfip_status.models.community_status import CommunityStatus
from nfip_status.models.enums import FieldKind
from nfip_status.schema import COLUMNS, COLUMN_COUNT
from nfip_status.utils.field_cleaner import clean_row

logger = logging.getLogger(__name__)

# Field value used when a typed cell is blank or malformed
DEFAULTS = {
    FieldKind.DATE: None,
    FieldKind.YES_NO: False,
}


def build_record(row: Sequence[str], row_number: int) -> CommunityStatus:
    """
    Build one record from a raw CSV row.

    Blank or malformed dates and flags leave the field at its default; only
    a malformed identifier or a row of the wrong width is fatal.

    Args:
        row: Raw cells in status book column order
        row_number: 1-based CSV record number, used in error messages

    Returns:
        CommunityStatus for the row

    Raises:
        RowStructureError: If the row does not have one cell per column
        RowParseError: If the community identifier is not an integer
    """
    if len(row) != COLUMN_COUNT:
        raise RowStructureError(
            row_number,
            f"expected {COLUMN_COUNT} columns, found {len(row)}"
        )

    cells = clean_row(row)
    values = {}

    for column in COLUMNS:
        cell = cells[column.index]

        if column.kind == FieldKind.TEXT:
            values[column.field] = cell
            continue

        result = column.parser(cell)

        if result.is_invalid:
            if column.kind == FieldKind.IDENTIFIER:
                raise RowParseError(row_number, column.title, result.error)
            logger.debug(f"Row {row_number}: ignoring {column.title}: {result.error}")

        values[column.field] = result.value_or(DEFAULTS.get(column.kind))

    return CommunityStatus(**values)

"""
Column layout of the FEMA Community Status Book CSV.

The export has no stable header names, so columns are matched by position.
COLUMNS is the only place that knows the order.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from nfip_status.models.enums import FieldKind
from nfip_status.models.parse_result import ParseResult
from nfip_status.utils.scalar_parsers import parse_date, parse_identifier, parse_yes_no

NFIP_STATUS_BOOK_FILENAME = "nation.csv"
NFIP_STATUS_BOOK_URL = "https://www.fema.gov/cis/nation.csv"


@dataclass(frozen=True)
class Column:
    """One position in the CSV layout."""
    index: int
    field: str
    kind: FieldKind
    title: str

    @property
    def parser(self) -> Optional[Callable[[str], ParseResult]]:
        return PARSERS.get(self.kind)


PARSERS: Dict[FieldKind, Callable[[str], ParseResult]] = {
    FieldKind.IDENTIFIER: parse_identifier,
    FieldKind.DATE: parse_date,
    FieldKind.YES_NO: parse_yes_no,
}

COLUMNS: Tuple[Column, ...] = (
    Column(0, 'id', FieldKind.IDENTIFIER, 'CID'),
    Column(1, 'name', FieldKind.TEXT, 'Community Name'),
    Column(2, 'county', FieldKind.TEXT, 'County'),
    Column(3, 'flood_hazard_identified', FieldKind.DATE, 'Init FHBM Identified'),
    Column(4, 'firm_identified', FieldKind.DATE, 'Init FIRM Identified'),
    Column(5, 'current_effective_map_date', FieldKind.DATE, 'Curr Eff Map Date'),
    Column(6, 'regular_emergency_date', FieldKind.DATE, 'Reg-Emer Date'),
    Column(7, 'tribal', FieldKind.YES_NO, 'Tribal'),
    Column(8, 'crs_entry_date', FieldKind.TEXT, 'CRS Entry Date'),
    Column(9, 'current_effective_date', FieldKind.TEXT, 'Current Effective Date'),
    Column(10, 'current_class', FieldKind.TEXT, 'Current Class'),
    Column(11, 'percent_discount_sfha', FieldKind.TEXT, '% Discount for SFHA'),
    Column(12, 'percent_non_sfha', FieldKind.TEXT, '% Discount for Non-SFHA'),
    Column(13, 'program', FieldKind.TEXT, 'Program'),
    Column(14, 'participating_community', FieldKind.YES_NO, 'Participating in NFIP'),
)

COLUMN_COUNT = len(COLUMNS)

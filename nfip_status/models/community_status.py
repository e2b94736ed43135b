"""Community status data model representing a row from the status book CSV."""

from dataclasses import dataclass, fields
from datetime import date
from typing import Optional, Dict, Any

DATE_FIELDS = (
    'flood_hazard_identified',
    'firm_identified',
    'current_effective_map_date',
    'regular_emergency_date',
)


@dataclass(frozen=True)
class CommunityStatus:
    """NFIP status of a single community."""
    id: int = 0
    name: str = ''
    county: str = ''

    # Map dates, None when the source cell was blank or unparseable
    flood_hazard_identified: Optional[date] = None
    firm_identified: Optional[date] = None
    current_effective_map_date: Optional[date] = None
    regular_emergency_date: Optional[date] = None

    tribal: bool = False

    # Mixed numeric/descriptive values, kept as cleaned text
    crs_entry_date: str = ''
    current_effective_date: str = ''
    current_class: str = ''
    percent_discount_sfha: str = ''
    percent_non_sfha: str = ''
    program: str = ''

    participating_community: bool = False

    @property
    def display_name(self) -> str:
        """Human-readable name for logging."""
        if self.county:
            return f"{self.name}, {self.county} (CID {self.id})"
        return f"{self.name} (CID {self.id})"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name in DATE_FIELDS:
                value = value.isoformat() if value else None
            data[f.name] = value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CommunityStatus":
        """Rebuild a record from the output of ``to_dict``."""
        kwargs = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            value = data[f.name]
            if f.name in DATE_FIELDS:
                value = date.fromisoformat(value) if value else None
            kwargs[f.name] = value
        return cls(**kwargs)

"""Ordered, read-only collection of community status records."""

import json
from typing import Any, Dict, Iterable, Iterator, List, Optional, TextIO

from .community_status import CommunityStatus, DATE_FIELDS


class CommunityStatusCollection:
    """
    The records of one status book load, in source row order.

    Provides:
    - Case-insensitive substring search over name, county and CID
    - Lookup by community identifier
    - JSON export and re-import
    - Summary statistics
    """

    def __init__(self, records: Iterable[CommunityStatus] = ()):
        self._records = tuple(records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CommunityStatus]:
        return iter(self._records)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return CommunityStatusCollection(self._records[index])
        return self._records[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, CommunityStatusCollection):
            return NotImplemented
        return self._records == other._records

    def __repr__(self) -> str:
        return f"CommunityStatusCollection({len(self._records)} records)"

    def search(self, term: str) -> "CommunityStatusCollection":
        """
        Find communities whose name, county or CID contains ``term``.

        Args:
            term: Text to look for, matched case-insensitively

        Returns:
            New collection with the matches in their original order
        """
        term = term.lower()
        return CommunityStatusCollection(
            r for r in self._records
            if term in r.name.lower()
            or term in r.county.lower()
            or term in str(r.id)
        )

    def get_by_id(self, cid: int) -> "CommunityStatusCollection":
        """Get all records for a specific community identifier."""
        return CommunityStatusCollection(r for r in self._records if r.id == cid)

    def to_list(self) -> List[Dict[str, Any]]:
        return [r.to_dict() for r in self._records]

    def to_json(self, fp: Optional[TextIO] = None, indent: Optional[int] = None) -> str:
        """
        Serialize every record as a JSON array.

        Args:
            fp: Optional text stream to write the JSON to
            indent: Indentation passed through to ``json``

        Returns:
            The JSON text
        """
        text = json.dumps(self.to_list(), indent=indent)
        if fp is not None:
            fp.write(text)
            fp.write('\n')
        return text

    export = to_json

    @classmethod
    def from_json(cls, text: str) -> "CommunityStatusCollection":
        """Rebuild a collection from ``to_json`` output."""
        return cls(CommunityStatus.from_dict(item) for item in json.loads(text))

    def get_statistics(self) -> Dict[str, Any]:
        """Get statistics about the loaded records."""
        stats = {
            'total_records': len(self._records),
            'unique_communities': len(set(r.id for r in self._records)),
            'tribal': 0,
            'participating': 0,
            'by_program': {},
            'dates_present': {name: 0 for name in DATE_FIELDS},
        }

        for record in self._records:
            if record.tribal:
                stats['tribal'] += 1
            if record.participating_community:
                stats['participating'] += 1

            program = record.program or 'UNKNOWN'
            stats['by_program'][program] = stats['by_program'].get(program, 0) + 1

            for name in DATE_FIELDS:
                if getattr(record, name) is not None:
                    stats['dates_present'][name] += 1

        return stats

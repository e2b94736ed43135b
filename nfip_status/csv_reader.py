"""CSV file reader and community status parser."""

import csv
from pathlib import Path
from typing import Iterator
import logging

from nfip_status.errors import RowStructureError
from nfip_status.models.community_status import CommunityStatus
from nfip_status.models.community_status_collection import CommunityStatusCollection
from nfip_status.record_builder import build_record

logger = logging.getLogger(__name__)


class CommunityStatusReader:
    """
    Reader for the FEMA Community Status Book CSV.

    The first record is a header and is discarded. Data rows are matched to
    fields by position (see ``nfip_status.schema``). Quoting is read
    permissively since cells arrive as ="value".
    """

    def __init__(self, csv_path: str, encoding: str = 'utf-8-sig'):
        self.csv_path = Path(csv_path)
        self.encoding = encoding

        if not self.csv_path.exists():
            raise FileNotFoundError(f"Status book not found: {csv_path}")

    def read_all(self) -> CommunityStatusCollection:
        """
        Read all records from the CSV file.

        Returns:
            CommunityStatusCollection in file order

        Raises:
            StatusBookError: On the first fatal row; no partial result is returned
        """
        communities = CommunityStatusCollection(self.iter_records())
        logger.info(f"Read {len(communities)} community statuses from {self.csv_path}")
        return communities

    def iter_records(self) -> Iterator[CommunityStatus]:
        """
        Iterate over records in file order.

        Yields:
            CommunityStatus objects
        """
        with open(self.csv_path, 'r', encoding=self.encoding, newline='') as f:
            reader = csv.reader(f, strict=False)
            row_number = 0

            while True:
                row_number += 1
                try:
                    row = next(reader)
                except StopIteration:
                    break
                except (csv.Error, UnicodeDecodeError) as e:
                    raise RowStructureError(row_number, str(e)) from e

                # Skip blank lines without counting them as records
                if not row:
                    row_number -= 1
                    continue

                if row_number == 1:
                    logger.debug(f"Skipping header: {row}")
                    continue

                yield build_record(row, row_number)

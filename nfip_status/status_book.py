"""Loads the NFIP Community Status Book into memory."""

import logging
from typing import Optional

from nfip_status.config import Settings
from nfip_status.csv_reader import CommunityStatusReader
from nfip_status.errors import AcquisitionError
from nfip_status.fetcher import StatusBookFetcher
from nfip_status.models.community_status_collection import CommunityStatusCollection
from nfip_status.models.fetch_result import FetchResult

logger = logging.getLogger(__name__)


class StatusBook:
    """
    Orchestrates acquisition and parsing of the status book.

    Usage:
        communities = await StatusBook(Settings.from_env()).load()
        matches = communities.search("ana")
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self.fetcher = StatusBookFetcher(
            url=self.settings.url,
            path=self.settings.path,
            timeout=self.settings.timeout,
        )
        self.last_fetch: Optional[FetchResult] = None

    async def load(self) -> CommunityStatusCollection:
        """
        Fetch the CSV if it is missing, then parse every row.

        Returns:
            CommunityStatusCollection in file order

        Raises:
            AcquisitionError: If the file is missing and could not be downloaded
            StatusBookError: If a row is fatally malformed
        """
        self.last_fetch = await self.fetcher.ensure_local_copy()
        if not self.last_fetch.ok:
            raise AcquisitionError(self.last_fetch)

        reader = CommunityStatusReader(self.settings.path, encoding=self.settings.encoding)
        return reader.read_all()

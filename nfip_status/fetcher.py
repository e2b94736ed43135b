"""Download-if-missing acquisition of the status book CSV."""

import asyncio
from datetime import datetime
from pathlib import Path
import aiohttp
import logging

from nfip_status.config import parse_timeout
from nfip_status.models.enums import FetchStatus, FailureReason
from nfip_status.models.fetch_result import FetchResult

logger = logging.getLogger(__name__)


class StatusBookFetcher:
    """
    Makes sure a local copy of the status book exists.

    An existing file is used as-is. Otherwise the CSV is downloaded once,
    bounded by ``timeout``, with no retry. Failures are reported through the
    returned FetchResult.
    """

    def __init__(self, url: str, path: str, timeout: float = 60.0):
        """
        Initialize fetcher.

        Args:
            url: Remote location of the CSV
            path: Local file the CSV is read from and saved to
            timeout: Total seconds allowed for the download, must be positive

        Raises:
            ValueError: If timeout is not a positive number
        """
        self.url = url
        self.path = Path(path)
        self.timeout = parse_timeout(timeout)

    async def ensure_local_copy(self) -> FetchResult:
        """Download the status book unless it is already on disk."""
        started_at = datetime.now()

        if self.path.exists():
            logger.debug(f"Using existing status book at {self.path}")
            return self._result(FetchStatus.ALREADY_PRESENT, started_at)

        logger.info(f"Status book {self.path} does not exist. Downloading from {self.url}")

        try:
            async with aiohttp.ClientSession() as session:
                async with session.get(self.url, timeout=aiohttp.ClientTimeout(total=self.timeout)) as response:
                    if response.status != 200:
                        logger.error(f"Failed to download status book: HTTP {response.status}")
                        return self._result(
                            FetchStatus.FAILED,
                            started_at,
                            failure_reason=FailureReason.HTTP_ERROR,
                            http_status=response.status,
                            error_message=f"HTTP {response.status}",
                        )
                    content = await response.read()
                    http_status = response.status
        except asyncio.TimeoutError:
            logger.error(f"Timed out after {self.timeout}s downloading {self.url}")
            return self._result(
                FetchStatus.FAILED,
                started_at,
                failure_reason=FailureReason.TIMEOUT,
                error_message=f"timed out after {self.timeout} seconds",
            )
        except aiohttp.ClientError as e:
            logger.error(f"Error downloading status book: {e}")
            return self._result(
                FetchStatus.FAILED,
                started_at,
                failure_reason=FailureReason.NETWORK_ERROR,
                error_message=str(e) or type(e).__name__,
            )

        try:
            self._write(content)
        except OSError as e:
            logger.error(f"Could not save status book to {self.path}: {e}")
            return self._result(
                FetchStatus.FAILED,
                started_at,
                failure_reason=FailureReason.WRITE_ERROR,
                http_status=http_status,
                error_message=str(e),
            )

        logger.info(f"Downloaded {len(content)} bytes to {self.path}")
        return self._result(
            FetchStatus.DOWNLOADED,
            started_at,
            http_status=http_status,
            bytes_written=len(content),
        )

    def _write(self, content: bytes):
        """Write via a temporary sibling so a failed write leaves no partial file."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + '.part')
        try:
            tmp_path.write_bytes(content)
            tmp_path.replace(self.path)
        finally:
            if tmp_path.exists():
                tmp_path.unlink()

    def _result(self, status: FetchStatus, started_at: datetime, **kwargs) -> FetchResult:
        return FetchResult(
            path=self.path,
            url=self.url,
            status=status,
            started_at=started_at,
            completed_at=datetime.now(),
            **kwargs
        )

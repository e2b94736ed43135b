"""Environment-driven settings."""

import os
from dataclasses import dataclass

from nfip_status.schema import NFIP_STATUS_BOOK_FILENAME, NFIP_STATUS_BOOK_URL


def parse_timeout(value) -> float:
    """
    Convert a download timeout to seconds.

    Raises:
        ValueError: If the value is not a positive number
    """
    try:
        seconds = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"download timeout must be a number of seconds, got {value!r}") from None

    if not seconds > 0:
        raise ValueError(f"download timeout must be greater than zero, got {value!r}")
    return seconds


@dataclass
class Settings:
    """Where the status book comes from and how it is read."""
    url: str = NFIP_STATUS_BOOK_URL
    path: str = NFIP_STATUS_BOOK_FILENAME
    timeout: float = 60.0
    encoding: str = 'utf-8-sig'

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from NFIP_* environment variables, falling back to defaults.

        Raises:
            ValueError: If NFIP_DOWNLOAD_TIMEOUT is not a positive number
        """
        return cls(
            url=os.getenv('NFIP_STATUS_BOOK_URL', NFIP_STATUS_BOOK_URL),
            path=os.getenv('NFIP_STATUS_BOOK_PATH', NFIP_STATUS_BOOK_FILENAME),
            timeout=parse_timeout(os.getenv('NFIP_DOWNLOAD_TIMEOUT', '60')),
            encoding=os.getenv('NFIP_CSV_ENCODING', 'utf-8-sig'),
        )

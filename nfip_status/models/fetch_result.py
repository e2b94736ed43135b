"""Fetch result data model for tracking status book acquisition."""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional, Dict, Any

from .enums import FetchStatus, FailureReason


@dataclass
class FetchResult:
    """Result of making the status book available locally."""
    path: Path
    url: str

    # Status tracking
    status: FetchStatus
    failure_reason: FailureReason = FailureReason.NONE

    # Timing
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    # Download details
    http_status: Optional[int] = None
    bytes_written: int = 0

    # Error details
    error_message: Optional[str] = None

    @property
    def ok(self) -> bool:
        """Whether a usable local copy exists after this attempt."""
        return self.status != FetchStatus.FAILED

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for reporting."""
        return {
            'path': str(self.path),
            'url': self.url,
            'status': self.status.value,
            'failure_reason': self.failure_reason.value,
            'started_at': self.started_at.isoformat() if self.started_at else None,
            'completed_at': self.completed_at.isoformat() if self.completed_at else None,
            'http_status': self.http_status,
            'bytes_written': self.bytes_written,
            'error_message': self.error_message,
        }

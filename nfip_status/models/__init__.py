"""Data models for the NFIP community status book."""

from .enums import ParseOutcome, FieldKind, FetchStatus, FailureReason
from .parse_result import ParseResult
from .community_status import CommunityStatus
from .community_status_collection import CommunityStatusCollection
from .fetch_result import FetchResult

__all__ = [
    'ParseOutcome',
    'FieldKind',
    'FetchStatus',
    'FailureReason',
    'ParseResult',
    'CommunityStatus',
    'CommunityStatusCollection',
    'FetchResult',
]

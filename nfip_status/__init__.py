"""NFIP Community Status Book loader, search and JSON export."""

from .config import Settings
from .errors import AcquisitionError, RowParseError, RowStructureError, StatusBookError
from .models import CommunityStatus, CommunityStatusCollection, FetchResult
from .status_book import StatusBook

__all__ = [
    'Settings',
    'AcquisitionError',
    'RowParseError',
    'RowStructureError',
    'StatusBookError',
    'CommunityStatus',
    'CommunityStatusCollection',
    'FetchResult',
    'StatusBook',
]

"""Enums for parse outcomes and fetch statuses."""

from enum import Enum, auto


class ParseOutcome(Enum):
    """Outcome of parsing a single cleaned cell."""
    VALUE = auto()      # Cell parsed into a typed value
    EMPTY = auto()      # Cell was blank - not an error
    INVALID = auto()    # Cell had content of the wrong shape


class FieldKind(Enum):
    """How a column's cleaned text is turned into a record field."""
    IDENTIFIER = "identifier"
    TEXT = "text"
    DATE = "date"
    YES_NO = "yes_no"


class FetchStatus(Enum):
    """Status of a status book acquisition attempt."""
    ALREADY_PRESENT = "already_present"
    DOWNLOADED = "downloaded"
    FAILED = "failed"


class FailureReason(Enum):
    """Detailed failure classification for acquisition."""
    NONE = "none"
    TIMEOUT = "timeout"
    NETWORK_ERROR = "network_error"
    HTTP_ERROR = "http_error"
    WRITE_ERROR = "write_error"

"""Fatal errors that abort a status book load."""

from typing import Optional


class StatusBookError(Exception):
    """Base class for errors that abort a status book load."""


class RowStructureError(StatusBookError):
    """A CSV record could not be read or has the wrong number of columns."""

    def __init__(self, row_number: int, reason: str):
        self.row_number = row_number
        self.reason = reason
        super().__init__(f"{reason} on row {row_number}")


class RowParseError(StatusBookError):
    """A column whose value is required could not be parsed."""

    def __init__(self, row_number: int, column: str, reason: str):
        self.row_number = row_number
        self.column = column
        self.reason = reason
        super().__init__(f"{reason} in column '{column}' on row {row_number}")


class AcquisitionError(StatusBookError):
    """The status book is missing locally and could not be downloaded."""

    def __init__(self, fetch_result, message: Optional[str] = None):
        self.fetch_result = fetch_result
        if message is None:
            message = (
                f"Could not download status book from {fetch_result.url}: "
                f"{fetch_result.error_message or fetch_result.failure_reason.value}"
            )
        super().__init__(message)

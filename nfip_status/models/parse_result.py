"""Tagged result returned by the scalar parsers."""

from dataclasses import dataclass
from typing import Any, Optional

from .enums import ParseOutcome


@dataclass(frozen=True)
class ParseResult:
    """Result of parsing one cell: a value, an intentional blank, or malformed input."""
    outcome: ParseOutcome
    value: Any = None
    error: Optional[str] = None

    @classmethod
    def of(cls, value: Any) -> "ParseResult":
        return cls(ParseOutcome.VALUE, value)

    @classmethod
    def empty(cls) -> "ParseResult":
        return cls(ParseOutcome.EMPTY)

    @classmethod
    def invalid(cls, error: str) -> "ParseResult":
        return cls(ParseOutcome.INVALID, error=error)

    @property
    def has_value(self) -> bool:
        return self.outcome is ParseOutcome.VALUE

    @property
    def is_empty(self) -> bool:
        return self.outcome is ParseOutcome.EMPTY

    @property
    def is_invalid(self) -> bool:
        return self.outcome is ParseOutcome.INVALID

    def value_or(self, default: Any) -> Any:
        """Return the parsed value, or ``default`` for EMPTY and INVALID outcomes."""
        return self.value if self.has_value else default

"""
Result and error types shared by the Swedish identifier validators.

Invalid input is reported as data rather than raised: every parse and
format function returns a ``Result`` holding either a value or an
``InvalidIdentifier`` describing why the input was rejected.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class InvalidReason(str, Enum):
    """Why an identifier was rejected."""

    MALFORMED_FORMAT = "malformed_format"
    CHECKSUM_MISMATCH = "checksum_mismatch"
    COORDINATION_NUMBER_DISALLOWED = "coordination_number_disallowed"
    INVALID_CALENDAR_DATE = "invalid_calendar_date"
    NOT_AN_ORGANISATION = "not_an_organisation"


# Swedish error messages
ERROR_MESSAGES = {
    InvalidReason.MALFORMED_FORMAT: "Numret har ett okänt format.",
    InvalidReason.CHECKSUM_MISMATCH: "Kontrollsiffran stämmer inte.",
    InvalidReason.COORDINATION_NUMBER_DISALLOWED: "Samordningsnummer är inte tillåtna.",
    InvalidReason.INVALID_CALENDAR_DATE: "Datumet finns inte.",
    InvalidReason.NOT_AN_ORGANISATION: "Numret är inte ett organisationsnummer.",
}


@dataclass(frozen=True)
class InvalidIdentifier:
    """A rejected identifier and the first check it failed."""

    value: str
    reason: InvalidReason

    @property
    def message(self) -> str:
        return ERROR_MESSAGES[self.reason]


class IdentifierError(ValueError):
    """Raised by ``Result.unwrap`` when the result holds an error."""

    def __init__(self, error: InvalidIdentifier):
        super().__init__(f"Invalid identifier ({error.reason.value}): {error.message}")
        self.error = error

    @property
    def reason(self) -> InvalidReason:
        return self.error.reason


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a parsed value or the reason parsing failed."""

    value: Optional[T] = None
    error: Optional[InvalidIdentifier] = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, value: str, reason: InvalidReason) -> "Result[T]":
        return cls(error=InvalidIdentifier(value=value, reason=reason))

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def reason(self) -> Optional[InvalidReason]:
        return self.error.reason if self.error else None

    def unwrap(self) -> T:
        """Return the value, raising ``IdentifierError`` on failure."""
        if self.error is not None:
            raise IdentifierError(self.error)
        return self.value

"""
Swedish personnummer (personal identity number) validation and parsing.

Format: YYMMDD-XXXX or YYYYMMDD-XXXX
- First 6/8 digits: birth date
- 7th-9th digits: birth number (odd for male, even for female)
- 10th digit: Luhn checksum

Coordination numbers (samordningsnummer) add 60 to the day.

Ten-digit numbers carry no century, so it is inferred from the date the
number is read on. That date is always passed in as ``today``; nothing in
this module reads the system clock.
"""

import logging
import re
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from sweid.swedish.luhn import luhn, luhn_checksum
from sweid.swedish.results import InvalidReason, Result

logger = logging.getLogger(__name__)

COORDINATION_OFFSET = 60

LONG_PATTERN = re.compile(r"^([0-9]{4})([0-9]{2})([0-9]{2})([-+]?)([0-9]{4})$")
SHORT_PATTERN = re.compile(r"^([0-9]{2})([0-9]{2})([0-9]{2})([-+]?)([0-9]{4})$")

FORMAT_STYLES = ("long", "short")


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


@dataclass(frozen=True)
class NormalizedPersonnummer:
    """A recognized personnummer before checksum and date validation."""

    century: int  # e.g. 19 or 20
    six_digit_date: str  # YYMMDD, DD may carry the +60 coordination offset
    separator: str  # '-' or '+'
    last4: str  # birth number + check digit


@dataclass(frozen=True)
class Personnummer:
    """A validated personnummer."""

    year: int
    month: int
    day: int  # real day, coordination offset removed
    sequence_number: int
    check_digit: int
    is_coordination_number: bool

    @property
    def gender(self) -> Gender:
        return Gender.FEMALE if self.sequence_number % 2 == 0 else Gender.MALE

    @property
    def birth_date(self) -> date:
        return date(self.year, self.month, self.day)

    def _day_field(self) -> int:
        if self.is_coordination_number:
            return self.day + COORDINATION_OFFSET
        return self.day

    def _suffix(self) -> str:
        return f"{self.sequence_number:03d}{self.check_digit}"

    def to_long(self) -> str:
        """Serialize as YYYYMMDDXXXX."""
        return f"{self.year:04d}{self.month:02d}{self._day_field():02d}{self._suffix()}"

    def to_short(self, today: date) -> str:
        """
        Serialize as YYMMDD-XXXX.

        The separator is '+' once the birth year is 100 or more years before
        ``today``, regardless of the separator the number was read with.
        """
        separator = "+" if today.year - self.year >= 100 else "-"
        return (
            f"{self.year % 100:02d}{self.month:02d}{self._day_field():02d}"
            f"{separator}{self._suffix()}"
        )


def _infer_century(yy: int, separator: str, today: date) -> int:
    current_century = today.year // 100
    candidate_year = current_century * 100 + yy

    if separator == "+":
        # '+' means born at least 100 years ago
        if candidate_year - 100 <= today.year:
            return current_century - 1
        return current_century - 2

    if candidate_year > today.year:
        return current_century - 1
    return current_century


def normalize(pnr: str, today: date) -> Optional[NormalizedPersonnummer]:
    """
    Recognize one of the supported personnummer shapes.

    Accepts formats:
    - YYYYMMDDXXXX
    - YYYYMMDD-XXXX (separator kept but does not affect the century)
    - YYMMDDXXXX
    - YYMMDD-XXXX or YYMMDD+XXXX ('+' for people aged 100 or more)

    Returns None if the input matches none of them.
    """
    pnr = re.sub(r"\s", "", pnr)

    match = LONG_PATTERN.match(pnr)
    if match:
        yyyy, mm, dd, separator, last4 = match.groups()
        return NormalizedPersonnummer(
            century=int(yyyy) // 100,
            six_digit_date=yyyy[2:] + mm + dd,
            separator=separator or "-",
            last4=last4,
        )

    match = SHORT_PATTERN.match(pnr)
    if match:
        yy, mm, dd, separator, last4 = match.groups()
        separator = separator or "-"
        return NormalizedPersonnummer(
            century=_infer_century(int(yy), separator, today),
            six_digit_date=yy + mm + dd,
            separator=separator,
            last4=last4,
        )

    return None


def _reject(pnr: str, reason: InvalidReason) -> Result[Personnummer]:
    logger.debug("Rejected personnummer: %s", reason.value)
    return Result.failure(pnr, reason)


def parse_personnummer(
    pnr: str, today: date, allow_coordination_number: bool = True
) -> Result[Personnummer]:
    """
    Validate and parse a Swedish personnummer.

    Checks run in order and the first failure is reported:
    format, Luhn checksum, coordination number policy, calendar date.

    Args:
        pnr: The personnummer in any supported format
        today: Date used to infer the century of 10-digit numbers
        allow_coordination_number: Accept samordningsnummer (day + 60)

    Returns:
        Result holding a Personnummer or the reason it was rejected
    """
    normalized = normalize(pnr, today)
    if normalized is None:
        return _reject(pnr, InvalidReason.MALFORMED_FORMAT)

    # Luhn covers the 10 significant digits, never the century
    if not luhn(normalized.six_digit_date + normalized.last4):
        return _reject(pnr, InvalidReason.CHECKSUM_MISMATCH)

    yymmdd = normalized.six_digit_date
    year = normalized.century * 100 + int(yymmdd[:2])
    month = int(yymmdd[2:4])
    day = int(yymmdd[4:6])

    is_coordination = day > COORDINATION_OFFSET
    if is_coordination:
        if not allow_coordination_number:
            return _reject(pnr, InvalidReason.COORDINATION_NUMBER_DISALLOWED)
        day -= COORDINATION_OFFSET

    try:
        date(year, month, day)
    except ValueError:
        return _reject(pnr, InvalidReason.INVALID_CALENDAR_DATE)

    return Result.success(
        Personnummer(
            year=year,
            month=month,
            day=day,
            sequence_number=int(normalized.last4[:3]),
            check_digit=int(normalized.last4[3]),
            is_coordination_number=is_coordination,
        )
    )


def is_valid_personnummer(
    pnr: str, today: date, allow_coordination_number: bool = True
) -> bool:
    """Check a personnummer. Same rules as ``parse_personnummer``."""
    return parse_personnummer(pnr, today, allow_coordination_number).ok


def format_personnummer(pnr: str, today: date, style: str = "short") -> Result[str]:
    """
    Format a personnummer.

    Args:
        pnr: The personnummer to format
        today: Date used for century inference and the short-form separator
        style: 'long' for YYYYMMDDXXXX, 'short' for YYMMDD-XXXX

    Returns:
        Result holding the formatted string or the reason it was rejected
    """
    if style not in FORMAT_STYLES:
        raise ValueError(f"Unknown format style: {style!r}")

    result = parse_personnummer(pnr, today)
    if not result.ok:
        return Result(error=result.error)

    personnummer = result.value
    if style == "long":
        return Result.success(personnummer.to_long())
    return Result.success(personnummer.to_short(today))


def generate_personnummer(
    birth_date: date,
    gender: Gender = Gender.MALE,
    sequence_number: int = 1,
    coordination: bool = False,
) -> str:
    """
    Generate a valid personnummer for testing purposes.

    Args:
        birth_date: Date of birth
        gender: Gender.MALE or Gender.FEMALE
        sequence_number: Birth number (0-999), bumped to match the gender
        coordination: Produce a samordningsnummer (day + 60)

    Returns:
        A valid personnummer in YYYYMMDDXXXX format
    """
    # Adjust birth number for gender (odd for male, even for female)
    if (gender == Gender.MALE) != (sequence_number % 2 == 1):
        sequence_number += 1
    if not 0 <= sequence_number <= 999:
        raise ValueError("Sequence number must be between 0 and 999")

    day = birth_date.day + (COORDINATION_OFFSET if coordination else 0)
    date_part = f"{birth_date.year:04d}{birth_date.month:02d}{day:02d}"
    birth_str = f"{sequence_number:03d}"

    # Calculate checksum on 10-digit format
    checksum = luhn_checksum(date_part[2:] + birth_str)

    return f"{date_part}{birth_str}{checksum}"

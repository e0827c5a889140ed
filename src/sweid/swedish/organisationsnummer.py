"""
Swedish organisationsnummer (organization number) validation.

Format: NNNNNN-NNNN (10 digits)
- First digit: Organization type (see ORGANIZATION_TYPES)
- Third digit: >= 2 (to distinguish from personnummer)
- Last digit: Luhn checksum
"""

import logging
import random
import re
from dataclasses import dataclass
from typing import Optional

from sweid.swedish.luhn import luhn, luhn_checksum
from sweid.swedish.results import InvalidReason, Result

logger = logging.getLogger(__name__)

ORGANIZATION_TYPES = {
    1: "Dödsbokoncern",
    2: "Stat/kommun/landsting",
    3: "Utländskt företag",
    5: "Aktiebolag",
    6: "Enskild firma",
    7: "Ekonomisk förening",
    8: "Ideell förening/stiftelse",
    9: "Handelsbolag/kommanditbolag",
}
UNKNOWN_ORGANIZATION_TYPE = "Okänd"


@dataclass(frozen=True)
class Organisationsnummer:
    """Parsed organisationsnummer."""

    number: str  # 10 digits, no separator
    group_digit: int
    check_digit: int

    @property
    def organization_type(self) -> str:
        return ORGANIZATION_TYPES.get(self.group_digit, UNKNOWN_ORGANIZATION_TYPE)


def _extract_digits(orgnr: str) -> Optional[str]:
    # Remove whitespace and separators
    orgnr = re.sub(r"[\s\-]", "", orgnr)
    if not re.match(r"^[0-9]+$", orgnr):
        return None

    if len(orgnr) == 10:
        return orgnr
    # 16NNNNNNNNNN: any two leading digits are dropped, not only "16"
    if len(orgnr) == 12:
        return orgnr[2:]
    return None


def _reject(orgnr: str, reason: InvalidReason) -> Result[Organisationsnummer]:
    logger.debug("Rejected organisationsnummer: %s", reason.value)
    return Result.failure(orgnr, reason)


def parse_organisationsnummer(orgnr: str) -> Result[Organisationsnummer]:
    """
    Validate and parse a Swedish organisationsnummer.

    Accepts formats:
    - NNNNNN-NNNN
    - NNNNNNNNNN
    - 16NNNNNN-NNNN (with prefix)
    - 16NNNNNNNNNN (with prefix)
    """
    digits = _extract_digits(orgnr)
    if digits is None:
        return _reject(orgnr, InvalidReason.MALFORMED_FORMAT)

    if int(digits[2]) < 2:
        return _reject(orgnr, InvalidReason.NOT_AN_ORGANISATION)

    if not luhn(digits):
        return _reject(orgnr, InvalidReason.CHECKSUM_MISMATCH)

    return Result.success(
        Organisationsnummer(
            number=digits,
            group_digit=int(digits[0]),
            check_digit=int(digits[9]),
        )
    )


def is_valid_organisationsnummer(orgnr: str) -> bool:
    return parse_organisationsnummer(orgnr).ok


def format_organisationsnummer(orgnr: str, separator: str = "-") -> Result[str]:
    """
    Format organisationsnummer as NNNNNN-NNNN.

    Args:
        orgnr: The organisationsnummer to format
        separator: The separator to use (default: '-')
    """
    result = parse_organisationsnummer(orgnr)
    if not result.ok:
        return Result(error=result.error)
    number = result.value.number
    return Result.success(f"{number[:6]}{separator}{number[6:]}")


def format_with_prefix(orgnr: str, separator: str = "-") -> Result[str]:
    """Format organisationsnummer with 16 prefix as 16NNNNNN-NNNN."""
    result = format_organisationsnummer(orgnr, separator)
    if not result.ok:
        return result
    return Result.success(f"16{result.value}")


def is_aktiebolag(orgnr: str) -> bool:
    """Check if the organisationsnummer belongs to an Aktiebolag (AB)."""
    result = parse_organisationsnummer(orgnr)
    return result.ok and result.value.group_digit == 5


def generate_organisationsnummer(
    group_digit: int = 5, rng: Optional[random.Random] = None
) -> str:
    """
    Generate a valid organisationsnummer for testing purposes.

    Args:
        group_digit: Organization type digit (default: 5 for Aktiebolag)
        rng: Random source, for reproducible test data

    Returns:
        A valid organisationsnummer in NNNNNNNNNN format
    """
    if not 1 <= group_digit <= 9:
        raise ValueError("Group digit must be between 1 and 9")
    rng = rng or random.Random()

    first_nine = (
        f"{group_digit}{rng.randint(0, 9)}{rng.randint(2, 9)}"
        f"{rng.randint(0, 999999):06d}"
    )
    return f"{first_nine}{luhn_checksum(first_nine)}"

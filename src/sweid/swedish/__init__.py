"""Swedish validators for personnummer, organisationsnummer and public holidays."""

from sweid.swedish.luhn import luhn, luhn_checksum
from sweid.swedish.results import (
    IdentifierError,
    InvalidIdentifier,
    InvalidReason,
    Result,
)
from sweid.swedish.personnummer import (
    Gender,
    NormalizedPersonnummer,
    Personnummer,
    format_personnummer,
    generate_personnummer,
    is_valid_personnummer,
    normalize,
    parse_personnummer,
)
from sweid.swedish.organisationsnummer import (
    ORGANIZATION_TYPES,
    Organisationsnummer,
    format_organisationsnummer,
    format_with_prefix,
    generate_organisationsnummer,
    is_aktiebolag,
    is_valid_organisationsnummer,
    parse_organisationsnummer,
)
from sweid.swedish.helgdagar import (
    Holiday,
    HolidayType,
    easter,
    holidays,
    is_business_day,
    is_holiday,
)

__all__ = [
    # Luhn
    "luhn",
    "luhn_checksum",
    # Results
    "IdentifierError",
    "InvalidIdentifier",
    "InvalidReason",
    "Result",
    # Personnummer
    "Gender",
    "NormalizedPersonnummer",
    "Personnummer",
    "format_personnummer",
    "generate_personnummer",
    "is_valid_personnummer",
    "normalize",
    "parse_personnummer",
    # Organisationsnummer
    "ORGANIZATION_TYPES",
    "Organisationsnummer",
    "format_organisationsnummer",
    "format_with_prefix",
    "generate_organisationsnummer",
    "is_aktiebolag",
    "is_valid_organisationsnummer",
    "parse_organisationsnummer",
    # Helgdagar
    "Holiday",
    "HolidayType",
    "easter",
    "holidays",
    "is_business_day",
    "is_holiday",
]

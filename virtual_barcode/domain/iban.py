"""IBAN validation for Finnish account numbers (ISO 13616 / ISO 7064 mod-97)"""

import re

from virtual_barcode.domain.checksums import MOD97_VALID_REMAINDER, mod97
from virtual_barcode.domain.exceptions import InvalidIban
from virtual_barcode.domain.models import NormalizedIban

IBAN_PATTERN = re.compile(r"^[A-Z]{2}[0-9]{2}[A-Z0-9]+$")
FINNISH_COUNTRY_CODE = "FI"
FINNISH_IBAN_LENGTH = 18  # FI + 2 check digits + 14-digit BBAN


def clean_iban(raw_text: str) -> str:
    """Remove all whitespace and uppercase"""
    return re.sub(r"\s+", "", raw_text).upper()


def has_valid_checksum(iban: str) -> bool:
    """Move country and check digits to the end; valid when the remainder is 1"""
    rearranged = iban[4:] + iban[:4]
    return mod97(rearranged) == MOD97_VALID_REMAINDER


def validate_iban(raw_text: str) -> NormalizedIban:
    """
    Validate and canonicalize a Finnish IBAN.

    Checks run cheapest first so the reason tells the user what to fix:
    - format: charset or structure wrong, or the BBAN holds non-digits
    - unsupported_country: well-formed but not a Finnish account
    - length: not exactly 18 characters
    - checksum: mod-97 remainder is not 1

    Raises:
        InvalidIban: carrying one of the reasons above
    """
    if not isinstance(raw_text, str):
        raise InvalidIban("IBAN must be given as text", reason="type")

    iban = clean_iban(raw_text)
    if not IBAN_PATTERN.match(iban):
        raise InvalidIban(f"IBAN has an invalid format: {iban!r}", reason="format")

    if iban[:2] != FINNISH_COUNTRY_CODE:
        raise InvalidIban(f"Only Finnish IBANs are supported, got country {iban[:2]}", reason="unsupported_country")

    if not iban[4:].isdigit():
        raise InvalidIban("Finnish BBAN must contain digits only", reason="format")

    if len(iban) != FINNISH_IBAN_LENGTH:
        raise InvalidIban(
            f"Finnish IBAN must be {FINNISH_IBAN_LENGTH} characters, got {len(iban)}",
            reason="length",
        )

    if not has_valid_checksum(iban):
        raise InvalidIban("IBAN check digits do not match", reason="checksum")

    return NormalizedIban(country=iban[:2], check_digits=iban[2:4], bban=iban[4:])


def format_iban(raw_text: str) -> str:
    """Validated IBAN grouped by four for display"""
    return validate_iban(raw_text).formatted

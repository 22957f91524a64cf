"""Finnish national creditor reference (viitenumero) with the 7-3-1 check digit"""

import re

from virtual_barcode.domain.checksums import weighted_check_digit
from virtual_barcode.domain.exceptions import InvalidReference
from virtual_barcode.domain.models import NormalizedReference

MIN_REFERENCE_LENGTH = 2  # one payload digit plus the check digit
MAX_REFERENCE_LENGTH = 23  # width of the barcode reference field


def clean_reference(raw_reference: str) -> str:
    return re.sub(r"\s+", "", raw_reference)


def compute_check_digit(digits: str) -> int:
    """
    Check digit for a reference payload.

    Raises:
        InvalidReference: if the payload is empty or holds non-digits
    """
    if not isinstance(digits, str) or not digits.isdigit() or not digits.isascii():
        raise InvalidReference(f"Reference payload must be digits: {digits!r}", reason="format")
    return weighted_check_digit(digits)


def validate_reference(raw_reference: str) -> NormalizedReference:
    """
    Validate a full reference (payload + trailing check digit).

    Whitespace is removed and the length rule is applied to what remains. Leading
    zeros are then dropped down to the two-digit minimum: they carry no weight in
    the checksum and are indistinguishable from record padding.

    Raises:
        InvalidReference: reason format, length or checksum
    """
    if not isinstance(raw_reference, str):
        raise InvalidReference("Reference must be given as text", reason="type")

    reference = clean_reference(raw_reference)
    if not reference.isdigit() or not reference.isascii():
        raise InvalidReference(f"Reference must contain digits only: {reference!r}", reason="format")

    if not MIN_REFERENCE_LENGTH <= len(reference) <= MAX_REFERENCE_LENGTH:
        raise InvalidReference(
            f"Reference must be {MIN_REFERENCE_LENGTH}-{MAX_REFERENCE_LENGTH} digits, got {len(reference)}",
            reason="length",
        )

    significant = reference.lstrip("0").zfill(MIN_REFERENCE_LENGTH)
    payload, supplied = significant[:-1], int(significant[-1])
    expected = weighted_check_digit(payload)
    if expected != supplied:
        raise InvalidReference(
            f"Reference check digit is {supplied}, expected {expected}",
            reason="checksum",
        )

    return NormalizedReference(digits=payload, check_digit=supplied)


def generate_reference(base: str) -> NormalizedReference:
    """Append the computed check digit to a base number, e.g. an invoice number"""
    payload = clean_reference(base) if isinstance(base, str) else base
    check_digit = compute_check_digit(payload)
    return validate_reference(f"{payload}{check_digit}")


def format_reference(raw_reference: str) -> str:
    """Validated reference grouped by five from the right"""
    return validate_reference(raw_reference).formatted

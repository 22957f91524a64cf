"""Virtual barcode codec - fixed-width positional encoding of payment fields"""

from datetime import date
from typing import List, Optional, Tuple

from virtual_barcode.domain.amount import MAX_AMOUNT_CENTS, AmountInput, parse_amount
from virtual_barcode.domain.exceptions import DecodingError, EncodingError
from virtual_barcode.domain.iban import FINNISH_COUNTRY_CODE, validate_iban
from virtual_barcode.domain.models import BarcodeRecord, NormalizedIban, NormalizedReference
from virtual_barcode.domain.reference import validate_reference
from virtual_barcode.utils.date_utils import DateInput, decode_yymmdd, encode_yymmdd, parse_due_date

# Version 4: national creditor reference. The version digit doubles as the
# reference-type marker, so the layout has no separate marker position.
VERSION_NATIONAL_REFERENCE = 4

# (field, width) in record order
RECORD_LAYOUT: List[Tuple[str, int]] = [
    ("version", 1),
    ("iban", 16),
    ("amount", 8),
    ("reference", 23),
    ("due_date", 6),
]
RECORD_LENGTH = sum(width for _, width in RECORD_LAYOUT)  # 54
FIELD_WIDTHS = dict(RECORD_LAYOUT)


def _fit(field: str, value: str) -> str:
    """Left-pad a digit string to its field width, refusing to truncate"""
    width = FIELD_WIDTHS[field]
    if len(value) > width:
        raise EncodingError(
            f"{field} needs {len(value)} digits but the field holds {width}",
            reason="overflow",
            field=field,
        )
    return value.zfill(width)


def encode_barcode(
    iban: NormalizedIban,
    amount_cents: int,
    reference: NormalizedReference,
    due_date: Optional[date] = None,
    century: int | None = None,
) -> str:
    """
    Concatenate already-validated fields into the 54-digit version 4 record.

    Layout: version(1) iban(16) amount(8) reference(23) due_date(6).
    Nothing is truncated; a field that does not fit raises instead.

    Raises:
        EncodingError: wrong input types, or a field overflowing its width
    """
    if not isinstance(iban, NormalizedIban):
        raise EncodingError("IBAN must be validated before encoding", reason="type", field="iban")
    if not isinstance(reference, NormalizedReference):
        raise EncodingError("Reference must be validated before encoding", reason="type", field="reference")
    if isinstance(amount_cents, bool) or not isinstance(amount_cents, int):
        raise EncodingError("Amount must be an integer number of cents", reason="type", field="amount")
    if amount_cents < 0:
        raise EncodingError(f"Amount must not be negative, got {amount_cents}", reason="negative", field="amount")
    if amount_cents > MAX_AMOUNT_CENTS:
        raise EncodingError(
            f"Amount {amount_cents} cents exceeds {MAX_AMOUNT_CENTS}",
            reason="overflow",
            field="amount",
        )
    if iban.country != FINNISH_COUNTRY_CODE:
        raise EncodingError(f"Cannot encode {iban.country} IBAN", reason="unsupported_country", field="iban")
    if due_date is not None and not isinstance(due_date, date):
        raise EncodingError("Due date must be a date before encoding", reason="type", field="due_date")

    fields = [
        str(VERSION_NATIONAL_REFERENCE),
        _fit("iban", iban.barcode_digits),
        _fit("amount", str(amount_cents)),
        _fit("reference", reference.value),
        encode_yymmdd(due_date, century),
    ]
    code = "".join(fields)

    if len(code) != RECORD_LENGTH:
        raise EncodingError(
            f"Record is {len(code)} digits, expected {RECORD_LENGTH}",
            reason="length",
            field="record",
        )
    return code


def split_record(code: str) -> dict:
    """Slice a record into its named raw fields"""
    fields = {}
    offset = 0
    for name, width in RECORD_LAYOUT:
        fields[name] = code[offset:offset + width]
        offset += width
    return fields


def decode_barcode(code: str, century: int | None = None) -> BarcodeRecord:
    """
    Parse a record back into validated fields.

    Padding is stripped and the IBAN and reference are re-validated, so a
    decoded record is as trustworthy as a freshly built one.

    Raises:
        DecodingError: wrong length, non-digit characters, or unknown version
        InvalidIban, InvalidReference, InvalidDate: a field fails re-validation
    """
    if not isinstance(code, str):
        raise DecodingError("Barcode must be given as text", reason="type")

    code = code.strip()
    if len(code) != RECORD_LENGTH:
        raise DecodingError(f"Barcode must be {RECORD_LENGTH} digits, got {len(code)}", reason="length")
    if not code.isdigit() or not code.isascii():
        raise DecodingError("Barcode must contain digits only", reason="format")

    fields = split_record(code)
    if int(fields["version"]) != VERSION_NATIONAL_REFERENCE:
        raise DecodingError(f"Unsupported barcode version {fields['version']}", reason="version")

    iban = validate_iban(f"{FINNISH_COUNTRY_CODE}{fields['iban']}")
    reference = validate_reference(fields["reference"])
    due_date = decode_yymmdd(fields["due_date"], century)

    return BarcodeRecord(
        code=code,
        version=VERSION_NATIONAL_REFERENCE,
        iban=iban,
        amount_cents=int(fields["amount"]),
        reference=reference,
        due_date=due_date,
    )


def create_virtual_barcode(
    iban: str,
    amount: AmountInput,
    reference: str,
    due_date: DateInput = None,
    century: int | None = None,
) -> BarcodeRecord:
    """
    Main entry point: validate raw form input and encode it.

    Each field is validated in turn; the first failure is raised and no record
    is produced.

    Raises:
        InvalidIban, InvalidAmount, InvalidReference, InvalidDate, EncodingError
    """
    normalized_iban = validate_iban(iban)
    amount_cents = parse_amount(amount)
    normalized_reference = validate_reference(reference)
    parsed_due_date = parse_due_date(due_date)

    code = encode_barcode(normalized_iban, amount_cents, normalized_reference, parsed_due_date, century)

    return BarcodeRecord(
        code=code,
        version=VERSION_NATIONAL_REFERENCE,
        iban=normalized_iban,
        amount_cents=amount_cents,
        reference=normalized_reference,
        due_date=parsed_due_date,
    )

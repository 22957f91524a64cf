"""Monetary amount parsing - decimal major units to integer minor units (cents)"""

from decimal import Decimal, InvalidOperation
from typing import Union

from virtual_barcode.domain.exceptions import InvalidAmount

AmountInput = Union[Decimal, int, float, str]

CENT = Decimal("0.01")
MAX_AMOUNT_CENTS = 99_999_999  # 8-digit barcode field
MAX_AMOUNT = Decimal(MAX_AMOUNT_CENTS) / 100  # 999 999.99


def to_decimal(value: AmountInput) -> Decimal:
    """
    Coerce user input to Decimal without passing through binary floating point.

    Floats go through their shortest repr, so 12.5 becomes Decimal("12.5") rather
    than the exact binary expansion. Strings may use a comma as decimal separator
    and spaces as thousands separators ("1 234,50").
    """
    if isinstance(value, bool):
        raise InvalidAmount("Amount must be a number, not a boolean", reason="type")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(repr(value))
    if isinstance(value, str):
        text = "".join(value.split()).replace(",", ".")
        if "_" in text:
            raise InvalidAmount(f"Amount is not numeric: {value!r}", reason="format")
        try:
            return Decimal(text)
        except InvalidOperation as e:
            raise InvalidAmount(f"Amount is not numeric: {value!r}", reason="format") from e
    raise InvalidAmount(f"Unsupported amount type: {type(value).__name__}", reason="type")


def parse_amount(value: AmountInput) -> int:
    """
    Convert an amount in euros to cents.

    Requirements:
    - finite and non-negative (zero is allowed)
    - at most two significant fractional digits (1234.5 -> 123450, 1234.567 rejected)
    - fits the 8-digit field, i.e. at most 999 999.99

    Returns:
        Amount in minor units

    Raises:
        InvalidAmount: reason format, type, not_finite, negative, overflow or precision
    """
    amount = to_decimal(value)

    if not amount.is_finite():
        raise InvalidAmount(f"Amount must be finite, got {amount}", reason="not_finite")

    if amount < 0:
        raise InvalidAmount(f"Amount must not be negative, got {amount}", reason="negative")

    if amount > MAX_AMOUNT:
        raise InvalidAmount(f"Amount exceeds the maximum of {MAX_AMOUNT}", reason="overflow")

    if amount != amount.quantize(CENT):
        raise InvalidAmount(f"Amount has more than two decimal places: {amount}", reason="precision")

    return int(amount.quantize(CENT) * 100)


def format_cents(amount_cents: int) -> str:
    """Cents as a euro string with two decimals: 1250 -> '12.50'"""
    euros, cents = divmod(amount_cents, 100)
    return f"{euros}.{cents:02d}"

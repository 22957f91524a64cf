"""Domain models - immutable value objects passed between validators and the codec"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


def group_left(value: str, size: int) -> str:
    """Split into blocks of `size` counted from the left: FI41 1220 3500 0065 95"""
    return " ".join(value[i:i + size] for i in range(0, len(value), size))


def group_right(value: str, size: int) -> str:
    """Split into blocks of `size` counted from the right: 55958 22432 94671"""
    head = len(value) % size
    blocks = [value[:head]] if head else []
    blocks += [value[i:i + size] for i in range(head, len(value), size)]
    return " ".join(blocks)


@dataclass(frozen=True)
class NormalizedIban:
    """Checksum-verified account identifier"""

    country: str
    check_digits: str
    bban: str

    @property
    def electronic(self) -> str:
        """Contiguous machine form, e.g. FI4112203500006595"""
        return f"{self.country}{self.check_digits}{self.bban}"

    @property
    def formatted(self) -> str:
        """Print form grouped by four"""
        return group_left(self.electronic, 4)

    @property
    def barcode_digits(self) -> str:
        """Numeric payload with the country prefix stripped"""
        return f"{self.check_digits}{self.bban}"

    def __str__(self) -> str:
        return self.electronic


@dataclass(frozen=True)
class NormalizedReference:
    """Creditor reference with a verified 7-3-1 check digit"""

    digits: str  # payload without the check digit
    check_digit: int

    @property
    def value(self) -> str:
        return f"{self.digits}{self.check_digit}"

    @property
    def formatted(self) -> str:
        """Print form grouped by five from the right"""
        return group_right(self.value, 5)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BarcodeRecord:
    """Encoded virtual barcode together with the fields it was built from"""

    code: str
    version: int
    iban: NormalizedIban
    amount_cents: int
    reference: NormalizedReference
    due_date: Optional[date]

    def __str__(self) -> str:
        return self.code

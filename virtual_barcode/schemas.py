"""Pydantic schemas for data crossing the presentation-layer boundary"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional, Union

from pydantic import BaseModel, Field, StrictBool

from virtual_barcode.domain.amount import format_cents
from virtual_barcode.domain.exceptions import DomainException
from virtual_barcode.domain.models import BarcodeRecord


class PaymentRequest(BaseModel):
    """Raw form values; field rules are enforced by the domain validators"""

    iban: str = Field(..., description="Account number, spaces and mixed case allowed")
    # StrictBool keeps booleans intact so the amount parser rejects them
    amount: Union[StrictBool, Decimal, int, float, str] = Field(..., description="Amount in euros")
    reference: str = Field(..., description="National creditor reference with check digit")
    due_date: Union[datetime, date, str, None] = Field(default=None, description="Due date, omitted means none")


class ErrorDetail(BaseModel):
    """One rejected field"""

    field: str
    reason: str
    message: str

    @classmethod
    def from_exception(cls, exc: DomainException) -> "ErrorDetail":
        return cls(**exc.to_detail())


class ValidationReport(BaseModel):
    """All field errors for a request"""

    valid: bool
    errors: List[ErrorDetail] = []


class BarcodeResponse(BaseModel):
    """Encoded barcode plus display forms of its inputs"""

    barcode: str
    version: int
    iban: str
    iban_formatted: str
    amount_cents: int
    amount: str
    reference: str
    reference_formatted: str
    due_date: Optional[date] = None

    @classmethod
    def from_record(cls, record: BarcodeRecord) -> "BarcodeResponse":
        return cls(
            barcode=record.code,
            version=record.version,
            iban=record.iban.electronic,
            iban_formatted=record.iban.formatted,
            amount_cents=record.amount_cents,
            amount=format_cents(record.amount_cents),
            reference=record.reference.value,
            reference_formatted=record.reference.formatted,
            due_date=record.due_date,
        )

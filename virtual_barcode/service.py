"""Barcode service - entry point for the presentation layer"""

import time
from typing import Callable, List

from virtual_barcode.domain.amount import parse_amount
from virtual_barcode.domain.barcode import create_virtual_barcode, decode_barcode
from virtual_barcode.domain.exceptions import DomainException
from virtual_barcode.domain.iban import validate_iban
from virtual_barcode.domain.reference import validate_reference
from virtual_barcode.infrastructure.observability.logging import log_barcode_result
from virtual_barcode.infrastructure.observability.metrics import (
    record_decode,
    record_encode,
    record_validation_failure,
)
from virtual_barcode.schemas import BarcodeResponse, ErrorDetail, PaymentRequest, ValidationReport
from virtual_barcode.utils.date_utils import encode_yymmdd, parse_due_date


def generate_barcode(request: PaymentRequest) -> BarcodeResponse:
    """
    Validate a payment request and encode it.

    Flow:
    1. Validate IBAN, amount, reference and due date
    2. Encode the 54-digit record
    3. Record metrics and log the outcome

    Raises:
        DomainException: the first rejected field; no partial record is returned
    """
    start_time = time.perf_counter()

    try:
        record = create_virtual_barcode(
            iban=request.iban,
            amount=request.amount,
            reference=request.reference,
            due_date=request.due_date,
        )
    except DomainException as e:
        duration = time.perf_counter() - start_time
        record_validation_failure(e.field, e.reason)
        record_encode(False, duration)
        log_barcode_result("encode", False, duration * 1000, failed_field=e.field, failure_reason=e.reason)
        raise

    duration = time.perf_counter() - start_time
    record_encode(True, duration)
    log_barcode_result("encode", True, duration * 1000, iban=record.iban.electronic)

    return BarcodeResponse.from_record(record)


def parse_barcode(code: str) -> BarcodeResponse:
    """
    Decode a record back into its fields (round-trip self-check).

    Raises:
        DomainException: DecodingError for layout problems, or the validator
            error of the field that fails re-validation
    """
    start_time = time.perf_counter()

    try:
        record = decode_barcode(code)
    except DomainException as e:
        record_decode(False)
        log_barcode_result(
            "decode",
            False,
            (time.perf_counter() - start_time) * 1000,
            failed_field=e.field,
            failure_reason=e.reason,
        )
        raise

    record_decode(True)
    log_barcode_result("decode", True, (time.perf_counter() - start_time) * 1000, iban=record.iban.electronic)

    return BarcodeResponse.from_record(record)


def collect_errors(request: PaymentRequest) -> ValidationReport:
    """
    Run every field validator and report all failures at once.

    Unlike generate_barcode this does not stop at the first rejected field, so a
    form can flag every invalid input in one pass.
    """
    checks: List[Callable[[], object]] = [
        lambda: validate_iban(request.iban),
        lambda: parse_amount(request.amount),
        lambda: validate_reference(request.reference),
        lambda: encode_yymmdd(parse_due_date(request.due_date)),
    ]

    errors: List[ErrorDetail] = []
    for check in checks:
        try:
            check()
        except DomainException as e:
            record_validation_failure(e.field, e.reason)
            errors.append(ErrorDetail.from_exception(e))

    return ValidationReport(valid=not errors, errors=errors)

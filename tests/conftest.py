"""Pytest fixtures for testing"""

import pytest
from datetime import date
from virtual_barcode.domain.iban import validate_iban
from virtual_barcode.domain.models import NormalizedIban, NormalizedReference
from virtual_barcode.domain.reference import validate_reference
from virtual_barcode.schemas import PaymentRequest


# Example from the Finnish Bankers' Association barcode guide
GUIDE_IBAN = "FI58 1017 1000 0001 22"
GUIDE_REFERENCE = "55958 22432 94671"


@pytest.fixture
def iban() -> NormalizedIban:
    return validate_iban(GUIDE_IBAN)


@pytest.fixture
def reference() -> NormalizedReference:
    return validate_reference(GUIDE_REFERENCE)


@pytest.fixture
def payment_request() -> PaymentRequest:
    """Valid form input"""
    return PaymentRequest(
        iban="FI41 1220 3500 0065 95",
        amount="12.50",
        reference=GUIDE_REFERENCE,
        due_date=date(2024, 3, 15),
    )

"""Unit tests for IBAN validation"""

import pytest
from stdnum import iban as stdnum_iban
from virtual_barcode.domain.checksums import mod97
from virtual_barcode.domain.exceptions import InvalidIban
from virtual_barcode.domain.iban import format_iban, has_valid_checksum, validate_iban

VALID_IBANS = [
    "FI2112345600000785",
    "FI2912203500657875",
    "FI7944052020036082",
    "FI5810171000000122",
    "FI4950009420028730",
    "FI4112203500006595",
]


@pytest.mark.parametrize("raw", VALID_IBANS)
def test_validate_iban_accepts_valid(raw):
    """Test known-good Finnish accounts pass, agreeing with python-stdnum"""
    result = validate_iban(raw)

    assert result.electronic == raw
    assert stdnum_iban.is_valid(raw)


def test_validate_iban_normalizes_whitespace_and_case():
    """Test spaces, tabs and lowercase are accepted"""
    result = validate_iban("  fi58 1017\t1000 0001 22 ")

    assert result.country == "FI"
    assert result.check_digits == "58"
    assert result.bban == "10171000000122"
    assert result.electronic == "FI5810171000000122"


def test_validate_iban_idempotent():
    """Test re-validating both normalized forms gives the same value"""
    first = validate_iban("FI58 1017 1000 0001 22")

    assert validate_iban(first.electronic) == first
    assert validate_iban(first.formatted) == first


def test_normalized_iban_display_forms():
    """Test grouped display form and the numeric barcode payload"""
    result = validate_iban("FI4112203500006595")

    assert result.formatted == "FI41 1220 3500 0065 95"
    assert result.barcode_digits == "4112203500006595"
    assert str(result) == "FI4112203500006595"
    assert format_iban("fi4112203500006595") == "FI41 1220 3500 0065 95"


def test_validate_iban_checksum_mismatch():
    """Test well-formed IBAN with wrong check digits is a checksum failure"""
    with pytest.raises(InvalidIban) as exc_info:
        validate_iban("FI2112203500006595")

    assert exc_info.value.reason == "checksum"
    assert exc_info.value.field == "iban"


@pytest.mark.parametrize(
    "altered",
    [
        "FI5810171000000123",  # last digit changed
        "FI5810171000001022",  # adjacent digits swapped
        "FI5801171000000122",  # swap inside bank code
        "FI8510171000000122",  # check digits swapped
        "FI5810171000000112",  # adjacent swap near the end
    ],
)
def test_validate_iban_detects_single_digit_errors(altered):
    """Test altered or transposed digits are caught by mod-97"""
    with pytest.raises(InvalidIban) as exc_info:
        validate_iban(altered)

    assert exc_info.value.reason == "checksum"


def test_validate_iban_non_digit_bban_is_format_error():
    """Test letters in a Finnish BBAN are reported as format, not checksum"""
    with pytest.raises(InvalidIban) as exc_info:
        validate_iban("FI21XXXX3500006595")

    assert exc_info.value.reason == "format"


@pytest.mark.parametrize(
    "raw, reason",
    [
        ("", "format"),
        ("FI", "format"),
        ("12FI12345600000785", "format"),
        ("FI21-1234-5600-0007-85", "format"),
        ("DE89370400440532013000", "unsupported_country"),
        ("FI211234560000078", "length"),
        ("FI21123456000007850", "length"),
    ],
)
def test_validate_iban_rejections(raw, reason):
    """Test structural rejections carry the failing sub-check"""
    with pytest.raises(InvalidIban) as exc_info:
        validate_iban(raw)

    assert exc_info.value.reason == reason


def test_validate_iban_rejects_non_text():
    """Test non-string input is rejected rather than crashing"""
    with pytest.raises(InvalidIban) as exc_info:
        validate_iban(5810171000000122)

    assert exc_info.value.reason == "type"


def test_mod97_running_remainder():
    """Test letters expand to two digits in the running remainder"""
    # "FI00" -> 151800
    assert mod97("FI00") == 151800 % 97
    assert mod97("12345600000785FI21") == 1
    assert has_valid_checksum("FI2112345600000785")

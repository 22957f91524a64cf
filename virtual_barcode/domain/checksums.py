"""Checksum primitives shared by the IBAN and reference validators"""

from itertools import cycle
from typing import Tuple

MOD97_VALID_REMAINDER = 1
REFERENCE_WEIGHTS: Tuple[int, ...] = (7, 3, 1)


def letter_value(char: str) -> int:
    """A=10 ... Z=35, digits map to themselves"""
    if char.isdigit():
        return int(char)
    return ord(char) - ord("A") + 10


def mod97(text: str) -> int:
    """
    Remainder of the alphanumeric string read as a base-10 integer modulo 97.

    Letters expand to two digits (A=10 ... Z=35). The remainder is carried digit
    by digit so the full integer is never materialized.
    """
    remainder = 0
    for char in text:
        value = letter_value(char)
        if value >= 10:
            remainder = (remainder * 100 + value) % 97
        else:
            remainder = (remainder * 10 + value) % 97
    return remainder


def weighted_check_digit(digits: str) -> int:
    """
    7-3-1 check digit of a Finnish creditor reference payload.

    Digits are weighted 7, 3, 1, 7, ... starting from the rightmost one; the check
    digit brings the weighted sum up to the next multiple of ten.
    """
    total = sum(int(digit) * weight for digit, weight in zip(reversed(digits), cycle(REFERENCE_WEIGHTS)))
    return (10 - total % 10) % 10

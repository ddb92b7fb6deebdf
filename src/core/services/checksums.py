"""Check-digit arithmetic for DNI (mod 10) and RNC (mod 11).

Both functions take the payload only (without the check digit) and return
`None` when the payload is malformed instead of raising.
"""

from __future__ import annotations

DNI_PAYLOAD_LENGTH = 10
DNI_MULTIPLIERS = (1, 2, 1, 2, 1, 2, 1, 2, 1, 2)

RNC_PAYLOAD_LENGTH = 8
RNC_MULTIPLIERS = (7, 9, 8, 6, 5, 4, 3, 2)
RNC_DIVISOR = 11
RNC_ZERO_REMAINDER_DIGIT = 2

_ASCII_DIGITS = "0123456789"


def to_digits(text: str) -> list[int] | None:
    """Parse each character as an ASCII decimal digit.

    Unicode digits such as full-width `４` are rejected: `str.isdigit` would
    accept them.
    """

    digits: list[int] = []
    for char in text:
        value = _ASCII_DIGITS.find(char)
        if value < 0:
            return None
        digits.append(value)
    return digits


def dni_check_digit(payload: str) -> int | None:
    """Expected 11th digit for a 10-digit cédula payload."""

    if len(payload) != DNI_PAYLOAD_LENGTH:
        return None
    digits = to_digits(payload)
    if digits is None:
        return None

    total = 0
    for digit, multiplier in zip(digits, DNI_MULTIPLIERS):
        product = digit * multiplier
        # products never exceed 18, so one fold is enough
        total += product if product < 10 else (product // 10) + (product % 10)

    return (10 - (total % 10)) % 10


def rnc_check_digit(payload: str) -> int | None:
    """Expected 9th digit for an 8-digit RNC payload.

    May return 10, which no single digit can match: such prefixes have no
    valid RNC.
    """

    if len(payload) != RNC_PAYLOAD_LENGTH:
        return None
    digits = to_digits(payload)
    if digits is None:
        return None

    total = sum(d * m for d, m in zip(digits, RNC_MULTIPLIERS))
    remainder = total % RNC_DIVISOR
    if remainder == 0:
        return RNC_ZERO_REMAINDER_DIGIT
    return RNC_DIVISOR - remainder

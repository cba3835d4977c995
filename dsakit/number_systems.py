"""Conversions between decimal and binary written with decimal digits."""

from __future__ import annotations


def binary_to_decimal(number: int) -> int:
    """Read the decimal digits of ``number`` as a base-2 numeral."""
    result = 0
    weight = 1
    while number > 0:
        number, digit = divmod(number, 10)
        result += digit * weight
        weight *= 2
    return result


def decimal_to_binary(number: int) -> int:
    """The binary form of ``number`` written as a decimal integer, e.g. 5 -> 101."""
    result = 0
    weight = 1
    while number > 0:
        number, bit = divmod(number, 2)
        result += bit * weight
        weight *= 10
    return result
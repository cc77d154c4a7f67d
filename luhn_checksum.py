"""
Luhn (mod 10) checksum helpers
Used for the trailing check digit of 13-digit national ID numbers
"""
from typing import Optional
from id_errors import MalformedNumberError


def _require_non_negative(payload) -> int:
    # bool is an int subclass but never a meaningful payload
    if isinstance(payload, bool) or not isinstance(payload, int):
        raise MalformedNumberError(
            f"{payload!r} is not valid format for Luhn check", param_name="payload"
        )
    if payload < 0:
        raise MalformedNumberError(
            f"{payload} is not valid format for Luhn check", param_name="payload"
        )
    return payload


def sum_of_payload(payload: int) -> int:
    """
    Calculate the Luhn sum of a non-negative integer

    Digits are read from the right starting at position 1. Every even
    position is doubled, and 9 is subtracted when the doubled value
    exceeds 9.

    Args:
        payload: Non-negative integer

    Returns:
        Luhn sum of the payload's digits

    Raises:
        MalformedNumberError: If payload is negative or not an integer
    """
    payload = _require_non_negative(payload)
    if payload == 0:
        return 0

    total = 0
    for position, char in enumerate(reversed(str(payload)), start=1):
        digit = int(char)
        if position % 2 == 0:
            doubled = digit * 2
            total += doubled - 9 if doubled > 9 else doubled
        else:
            total += digit
    return total


def checksum_digit(payload: int) -> int:
    """
    Digit that brings the payload's Luhn sum up to a multiple of 10

    Args:
        payload: Non-negative integer

    Returns:
        Checksum digit in range 0-9
    """
    present_sum = sum_of_payload(payload)
    if present_sum % 10 == 0:
        return 0
    return 10 - (present_sum % 10)


generate_checksum = checksum_digit


def is_valid(value: int, check_digit: Optional[int] = None) -> bool:
    """
    Validate a number against the Luhn checksum

    With only value given, value is the full number with its check digit
    already in the rightmost position. With check_digit given, value is
    the payload and check_digit is compared with its checksum digit.

    Args:
        value: Full number, or payload when check_digit is given
        check_digit: Optional checksum digit to test against the payload

    Returns:
        True if the checksum holds
    """
    if check_digit is None:
        return sum_of_payload(value) % 10 == 0
    return check_digit == checksum_digit(value)

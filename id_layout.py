"""
Fixed-width layout of 13-digit national ID numbers (Eswatini PIN, South African ID)
"""
import re
from dataclasses import dataclass
from datetime import date
from id_config import config
from id_errors import ErrorKind, InvalidPinFormatError

ID_NUMBER_LAYOUT = {
    "length": config.ID_NUMBER_LENGTH,
    # field: (start, end) character positions
    "fields": {
        "year": (0, 2),             # two-digit year, century resolved per format
        "month": (2, 4),
        "day": (4, 6),
        "sex_code": (6, 10),
        "trailing_group": (10, 13)  # serial, or citizenship/spacer/check digit
    }
}

_DIGITS = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class DecodedFields:
    """Integer fields sliced out of an ID number"""

    year: int
    month: int
    day: int
    sex_code: int
    trailing_group: int


def _slice(id_number: str, field: str) -> int:
    start, end = ID_NUMBER_LAYOUT["fields"][field]
    return int(id_number[start:end])


def extract(id_number: str) -> DecodedFields:
    """
    Split a 13-digit ID number into its fields

    No validation is done here: the caller must already have confirmed
    the value is exactly 13 ASCII digits. The year is returned as the
    two digits found in the number.

    Args:
        id_number: 13-digit string

    Returns:
        DecodedFields with a two-digit year
    """
    return DecodedFields(
        year=_slice(id_number, "year"),
        month=_slice(id_number, "month"),
        day=_slice(id_number, "day"),
        sex_code=_slice(id_number, "sex_code"),
        trailing_group=_slice(id_number, "trailing_group"),
    )


def resolve_century(two_digit_year: int, pivot: int) -> int:
    """Years up to and including the pivot are 2000s, the rest 1900s"""
    if two_digit_year <= pivot:
        return 2000 + two_digit_year
    return 1900 + two_digit_year


def is_valid_date(year: int, month: int, day: int) -> bool:
    """Check that year/month/day form a real calendar date"""
    try:
        date(year, month, day)
        return True
    except (ValueError, TypeError):
        return False


def check_structure(value, param_name: str, document_name: str) -> str:
    """
    Run the structural checks shared by both ID formats

    Args:
        value: Raw input
        param_name: Argument name reported in errors
        document_name: Human-readable format name for messages

    Returns:
        The input with surrounding whitespace removed

    Raises:
        InvalidPinFormatError: EmptyInput, NonNumericInput or BadLength
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidPinFormatError(
            f"No value given for {document_name}",
            ErrorKind.EMPTY_INPUT,
            param_name,
        )
    if not isinstance(value, str):
        raise InvalidPinFormatError(
            f"{document_name} must be given as a string of digits, got {type(value).__name__}",
            ErrorKind.NON_NUMERIC_INPUT,
            param_name,
        )

    cleaned = value.strip()
    if not _DIGITS.fullmatch(cleaned):
        raise InvalidPinFormatError(
            f"The specified value `{cleaned}` contains non-numeric characters and is not a valid {document_name}",
            ErrorKind.NON_NUMERIC_INPUT,
            param_name,
        )
    if len(cleaned) != ID_NUMBER_LAYOUT["length"]:
        raise InvalidPinFormatError(
            f"Value failed length requirement for {document_name}: "
            f"expected {ID_NUMBER_LAYOUT['length']} digits, got {len(cleaned)}",
            ErrorKind.BAD_LENGTH,
            param_name,
        )
    return cleaned

"""
South African national ID number

Layout: YYMMDD SSSS C A Z
    YYMMDD  date of birth, years up to 26 are 2000s
    SSSS    sex code, below 5000 female, 5000 and up male
    C       citizenship: 0 citizen, 1 permanent resident, 2 refugee
    A       spacer digit
    Z       Luhn check digit of the whole number
"""
import logging
from dataclasses import dataclass, replace
from datetime import date
from enum import Enum
from typing import Optional, Tuple

import luhn_checksum
from gender import Gender
from id_config import config
from id_errors import ErrorKind, IdNumberError, InvalidPinFormatError
from id_layout import DecodedFields, check_structure, extract, is_valid_date, resolve_century

logger = logging.getLogger(__name__)

DOCUMENT_NAME = "South African National ID number"


class CitizenshipStatus(Enum):
    FULL_CITIZEN = 0
    PERMANENT_RESIDENT = 1
    REFUGEE = 2
    UNKNOWN = 3


@dataclass(frozen=True)
class SouthAfricanIdInfo:
    """
    The trailing 3-digit group read digit by digit

    The checksum digit is the last digit of the ID number, so it is also
    the Luhn check digit of the whole number.
    """

    citizenship: int
    spacer: int
    checksum: int

    @classmethod
    def from_trailing_group(cls, trailing_group: int) -> "SouthAfricanIdInfo":
        digits = f"{trailing_group:03d}"
        return cls(
            citizenship=int(digits[0]),
            spacer=int(digits[-2]),
            checksum=int(digits[-1]),
        )

    @property
    def citizenship_status(self) -> CitizenshipStatus:
        if self.citizenship in config.SA_CITIZENSHIP_CODES:
            return CitizenshipStatus(self.citizenship)
        return CitizenshipStatus.UNKNOWN


def gender_from_sex_code(sex_code: int) -> Gender:
    low, high = config.SA_SEX_CODE_RANGE
    if not low <= sex_code <= high:
        return Gender.UNKNOWN
    if sex_code < config.SA_MALE_SEX_CODE_THRESHOLD:
        return Gender.FEMALE
    return Gender.MALE


def _reject(message: str, kind: ErrorKind, param_name: str):
    logger.debug("Rejected %s (%s): %s", DOCUMENT_NAME, kind.value, message)
    raise InvalidPinFormatError(message, kind, param_name)


def validate_pin_and_extract_parts(id_number: str) -> Tuple[DecodedFields, SouthAfricanIdInfo]:
    """
    Validate a South African ID number and decode it

    Args:
        id_number: Raw ID number string

    Returns:
        Tuple of (DecodedFields with full year, SouthAfricanIdInfo)

    Raises:
        InvalidPinFormatError: On the first failed check
    """
    id_number = check_structure(id_number, "id_number", DOCUMENT_NAME)

    if not luhn_checksum.is_valid(int(id_number)):
        _reject(
            f"ID number `{id_number}` failed the checksum",
            ErrorKind.CHECKSUM_MISMATCH,
            "id_number",
        )

    parts = extract(id_number)
    parts = replace(parts, year=resolve_century(parts.year, config.SA_CENTURY_PIVOT))

    if not is_valid_date(parts.year, parts.month, parts.day):
        _reject(
            f"ID number `{id_number}` does not start with a valid date of birth "
            f"({parts.year:04d}-{parts.month:02d}-{parts.day:02d})",
            ErrorKind.INVALID_DATE,
            "id_number",
        )
    if gender_from_sex_code(parts.sex_code) is Gender.UNKNOWN:
        _reject(
            f"ID number `{id_number}` has unknown sex code {parts.sex_code:04d}",
            ErrorKind.INVALID_SEX_CODE,
            "id_number",
        )

    info = SouthAfricanIdInfo.from_trailing_group(parts.trailing_group)
    if info.citizenship_status is CitizenshipStatus.UNKNOWN:
        _reject(
            f"ID number `{id_number}` has citizenship code {info.citizenship}, expected 0, 1 or 2",
            ErrorKind.INVALID_CITIZENSHIP_CODE,
            "id_number",
        )
    # Always a single digit when read from the string; kept as a format check
    if info.spacer > 9:
        _reject(
            f"ID number `{id_number}` has spacer digit {info.spacer} out of range",
            ErrorKind.INVALID_SERIAL,
            "id_number",
        )
    low, high = config.SERIAL_RANGE
    if not low <= parts.trailing_group <= high:
        _reject(
            f"ID number `{id_number}` has trailing group {parts.trailing_group} out of range",
            ErrorKind.INVALID_SERIAL,
            "id_number",
        )
    return parts, info


@dataclass(frozen=True, eq=False, repr=False)
class SAIdNumber:
    """
    Decoded South African ID number

    Instances are created with parse() or try_parse() and are immutable.
    Two ID numbers are equal when date of birth, serial number, gender and
    citizenship status match.
    """

    _pin_parts: DecodedFields
    _pin_info: SouthAfricanIdInfo

    country_code = "ZAF"

    @property
    def date_of_birth(self) -> date:
        return date(self._pin_parts.year, self._pin_parts.month, self._pin_parts.day)

    @property
    def gender(self) -> Gender:
        return gender_from_sex_code(self._pin_parts.sex_code)

    @property
    def citizenship_status(self) -> CitizenshipStatus:
        return self._pin_info.citizenship_status

    @property
    def serial_number(self) -> int:
        """Spacer digit and check digit read as a two-digit number"""
        return self._pin_info.spacer * 10 + self._pin_info.checksum

    @property
    def check_digit(self) -> int:
        return self._pin_info.checksum

    @property
    def sex_code(self) -> int:
        return self._pin_parts.sex_code

    @property
    def info(self) -> SouthAfricanIdInfo:
        return self._pin_info

    @classmethod
    def parse(cls, id_number: str) -> "SAIdNumber":
        """
        Parse a South African ID number

        Args:
            id_number: 13-digit ID number, surrounding whitespace is ignored

        Returns:
            SAIdNumber

        Raises:
            InvalidPinFormatError: If the ID number is not valid
        """
        parts, info = validate_pin_and_extract_parts(id_number)
        return cls(parts, info)

    @classmethod
    def try_parse(cls, id_number: str) -> Tuple[bool, Optional["SAIdNumber"]]:
        """
        Parse without raising

        Returns:
            (True, SAIdNumber) on success, (False, None) otherwise
        """
        try:
            return True, cls.parse(id_number)
        except IdNumberError as e:
            logger.debug("try_parse failed for %r: %s", id_number, e)
            return False, None
        except Exception:
            # try_parse never raises; anything else is unexpected
            logger.exception("Unexpected error while parsing %s %r", DOCUMENT_NAME, id_number)
            return False, None

    def _key(self):
        return (self.date_of_birth, self.serial_number, self.gender, self.citizenship_status)

    def __eq__(self, other):
        if not isinstance(other, SAIdNumber):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self):
        return (
            f"{self.date_of_birth:%y%m%d}{self.sex_code:04d}"
            f"{self._pin_info.citizenship}{self.serial_number:02d}"
        )

    def __repr__(self):
        return f"SAIdNumber('{self}')"

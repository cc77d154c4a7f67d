"""
Eswatini national identification number (PIN)

Layout: YYMMDD SSSS NNN
    YYMMDD  date of birth, years up to 30 are 2000s
    SSSS    sex code, 1100-6100 female, 6100-9999 male
    NNN     serial number
"""
import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Optional, Tuple

import luhn_checksum
from gender import Gender
from id_config import config
from id_errors import ErrorKind, IdNumberError, InvalidPinFormatError
from id_layout import DecodedFields, check_structure, extract, is_valid_date, resolve_century

logger = logging.getLogger(__name__)

DOCUMENT_NAME = "Eswatini National ID"


def gender_from_sex_code(sex_code: int) -> Gender:
    """
    Classify an Eswatini sex code

    The female and male ranges share 6100; the female range is checked
    first, so 6100 is female.
    """
    female_low, female_high = config.ESWATINI_FEMALE_SEX_CODES
    male_low, male_high = config.ESWATINI_MALE_SEX_CODES
    if female_low <= sex_code <= female_high:
        return Gender.FEMALE
    if male_low <= sex_code <= male_high:
        return Gender.MALE
    return Gender.UNKNOWN


def _is_valid_serial(serial: int) -> bool:
    low, high = config.SERIAL_RANGE
    return low <= serial <= high


def _reject(message: str, kind: ErrorKind, param_name: str):
    logger.debug("Rejected %s (%s): %s", DOCUMENT_NAME, kind.value, message)
    raise InvalidPinFormatError(message, kind, param_name)


def validate_pin_and_extract_parts(pin: str, enforce_checksum: bool = False) -> DecodedFields:
    """
    Validate an Eswatini PIN and return its fields with the full year

    Args:
        pin: Raw PIN string
        enforce_checksum: Also require the full number to pass Luhn

    Returns:
        DecodedFields

    Raises:
        InvalidPinFormatError: On the first failed check
    """
    pin = check_structure(pin, "pin", DOCUMENT_NAME)

    if enforce_checksum and not luhn_checksum.is_valid(int(pin)):
        _reject(f"PIN `{pin}` failed the checksum", ErrorKind.CHECKSUM_MISMATCH, "pin")

    parts = extract(pin)
    parts = replace(parts, year=resolve_century(parts.year, config.ESWATINI_CENTURY_PIVOT))

    if not is_valid_date(parts.year, parts.month, parts.day):
        _reject(
            f"PIN `{pin}` does not start with a valid date of birth "
            f"({parts.year:04d}-{parts.month:02d}-{parts.day:02d})",
            ErrorKind.INVALID_DATE,
            "pin",
        )
    if gender_from_sex_code(parts.sex_code) is Gender.UNKNOWN:
        _reject(
            f"PIN `{pin}` has unknown sex code {parts.sex_code:04d}",
            ErrorKind.INVALID_SEX_CODE,
            "pin",
        )
    if not _is_valid_serial(parts.trailing_group):
        _reject(
            f"PIN `{pin}` has serial {parts.trailing_group} out of range",
            ErrorKind.INVALID_SERIAL,
            "pin",
        )
    return parts


@dataclass(frozen=True, eq=False, repr=False)
class SwaziPin:
    """
    Decoded Eswatini PIN

    Instances are created with parse() or try_parse() and are immutable.
    Two PINs are equal when date of birth, gender and serial number match.
    """

    _pin_data: DecodedFields

    country_code = "SWZ"

    @property
    def date_of_birth(self) -> date:
        return date(self._pin_data.year, self._pin_data.month, self._pin_data.day)

    @property
    def gender(self) -> Gender:
        return gender_from_sex_code(self._pin_data.sex_code)

    @property
    def serial_number(self) -> int:
        """The last 3 digits of the PIN"""
        return self._pin_data.trailing_group

    @property
    def sex_code(self) -> int:
        return self._pin_data.sex_code

    @classmethod
    def parse(cls, pin: str, enforce_checksum: Optional[bool] = None) -> "SwaziPin":
        """
        Parse an Eswatini PIN

        Args:
            pin: 13-digit PIN, surrounding whitespace is ignored
            enforce_checksum: Require a Luhn-valid PIN; defaults to
                config.ESWATINI_ENFORCE_CHECKSUM

        Returns:
            SwaziPin

        Raises:
            InvalidPinFormatError: If the PIN is not valid
        """
        if enforce_checksum is None:
            enforce_checksum = config.ESWATINI_ENFORCE_CHECKSUM
        return cls(validate_pin_and_extract_parts(pin, enforce_checksum))

    @classmethod
    def try_parse(cls, pin: str, enforce_checksum: Optional[bool] = None) -> Tuple[bool, Optional["SwaziPin"]]:
        """
        Parse without raising

        Returns:
            (True, SwaziPin) on success, (False, None) otherwise
        """
        try:
            return True, cls.parse(pin, enforce_checksum)
        except IdNumberError as e:
            logger.debug("try_parse failed for %r: %s", pin, e)
            return False, None
        except Exception:
            # try_parse never raises; anything else is unexpected
            logger.exception("Unexpected error while parsing %s %r", DOCUMENT_NAME, pin)
            return False, None

    def _key(self):
        return (self.date_of_birth, self.gender, self.serial_number)

    def __eq__(self, other):
        if not isinstance(other, SwaziPin):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self):
        return f"{self.date_of_birth:%y%m%d}{self.sex_code:04d}{self.serial_number:03d}"

    def __repr__(self):
        return f"SwaziPin('{self}')"

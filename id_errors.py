"""
Error taxonomy for national ID number decoding
"""
from enum import Enum


class ErrorKind(str, Enum):
    """Why an ID number (or a Luhn payload) was rejected"""

    EMPTY_INPUT = "EmptyInput"
    NON_NUMERIC_INPUT = "NonNumericInput"
    BAD_LENGTH = "BadLength"
    CHECKSUM_MISMATCH = "ChecksumMismatch"
    INVALID_DATE = "InvalidDate"
    INVALID_SEX_CODE = "InvalidSexCode"
    INVALID_CITIZENSHIP_CODE = "InvalidCitizenshipCode"
    INVALID_SERIAL = "InvalidSerial"
    MALFORMED_NUMBER = "MalformedNumber"


class IdNumberError(ValueError):
    """
    Base class for every decoding failure

    Attributes:
        kind: ErrorKind describing the failed check
        param_name: Name of the argument holding the offending value
    """

    def __init__(self, message: str, kind: ErrorKind, param_name: str = ""):
        self.kind = kind
        self.param_name = param_name
        if param_name:
            message = f"{message}. Value given in {param_name}"
        super().__init__(message)


class InvalidPinFormatError(IdNumberError):
    """Raised when an ID number does not follow its national format"""


class MalformedNumberError(IdNumberError):
    """Raised when the Luhn engine is given something other than a non-negative integer"""

    def __init__(self, message: str, param_name: str = ""):
        super().__init__(message, ErrorKind.MALFORMED_NUMBER, param_name)

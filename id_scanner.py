"""
Scan entry point: decode an ID number for a given issuing country
"""
import logging
from typing import Dict, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from country_code import to_alpha3
from id_config import config
from id_errors import IdNumberError
from national_identity import to_identity_data
from sa_id_number import SAIdNumber
from swazi_pin import SwaziPin

logger = logging.getLogger(__name__)

DECODERS = {
    "SWZ": SwaziPin,
    "ZAF": SAIdNumber,
}


class IdScanRequest(BaseModel):
    """Request model for decoding a national ID number"""
    id_number: str = Field(..., description="13-digit national ID number")
    country_code: str = Field(default_factory=lambda: config.DEFAULT_COUNTRY,
                              description="Issuing country, alpha-2 or alpha-3 (SWZ/SZ, ZAF/ZA)",
                              validate_default=True)

    @field_validator('country_code')
    @classmethod
    def validate_country_code(cls, v):
        alpha3 = to_alpha3(v)
        if alpha3 not in config.SUPPORTED_COUNTRIES:
            raise ValueError(f'country_code must be one of {config.SUPPORTED_COUNTRIES}')
        return alpha3


class IdScanResult(BaseModel):
    """Result of decoding a national ID number"""
    success: bool
    country_code: str = ""
    id_data: Dict = {}
    error: str = ""
    error_kind: Optional[str] = None


def scan_id_number(id_number: str, country_code: Optional[str] = None) -> Dict:
    """
    Decode and validate a national ID number

    Args:
        id_number: 13-digit ID number
        country_code: Issuing country; defaults to config.DEFAULT_COUNTRY

    Returns:
        Dictionary with success flag, decoded id_data and error details.
        Decoding failures are reported, never raised.
    """
    request_fields = {"id_number": id_number if isinstance(id_number, str) else ""}
    if country_code is not None:
        request_fields["country_code"] = country_code

    try:
        request = IdScanRequest(**request_fields)
    except ValidationError as e:
        message = "; ".join(err["msg"] for err in e.errors())
        logger.info("Rejected scan request: %s", message)
        return IdScanResult(success=False, error=message).model_dump()

    decoder = DECODERS[request.country_code]
    try:
        identity = decoder.parse(id_number)
    except IdNumberError as e:
        logger.info("%s decode failed (%s): %s", request.country_code, e.kind.value, e)
        return IdScanResult(
            success=False,
            country_code=request.country_code,
            error=str(e),
            error_kind=e.kind.value,
        ).model_dump()

    return IdScanResult(
        success=True,
        country_code=request.country_code,
        id_data=to_identity_data(identity).model_dump(),
    ).model_dump()

"""
What the Eswatini and South African decoders have in common

Both decode to a date of birth, a gender and a serial number. They share
no base class; NationalIdentity describes the shape structurally.
"""
from datetime import date
from typing import Optional, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from country_code import get_country_info
from gender import Gender


@runtime_checkable
class NationalIdentity(Protocol):
    country_code: str

    @property
    def date_of_birth(self) -> date: ...

    @property
    def gender(self) -> Gender: ...

    @property
    def serial_number(self) -> int: ...


class IdentityData(BaseModel):
    """Decoded national ID summary"""
    model_config = ConfigDict(frozen=True)

    document_type: str = "national_id"
    country_code: str = ""
    country_name: str = ""
    nationality: str = ""
    id_number: str = Field("", description="Canonical digits rebuilt from the decoded fields")
    date_of_birth: str = Field("", description="YYYY-MM-DD")
    sex: str = Field("<", description="MRZ notation: F, M or <")
    serial_number: int = 0
    citizenship_status: Optional[str] = None


def to_identity_data(identity: NationalIdentity) -> IdentityData:
    """
    Build the summary record for a decoded ID number

    Args:
        identity: SwaziPin, SAIdNumber or anything shaped like them

    Returns:
        IdentityData
    """
    country = get_country_info(identity.country_code)
    citizenship = getattr(identity, "citizenship_status", None)

    return IdentityData(
        country_code=country.get("alpha3", identity.country_code),
        country_name=country.get("name", ""),
        nationality=country.get("nationality", ""),
        id_number=str(identity),
        date_of_birth=identity.date_of_birth.isoformat(),
        sex=identity.gender.sex_field,
        serial_number=identity.serial_number,
        citizenship_status=citizenship.name if citizenship is not None else None,
    )

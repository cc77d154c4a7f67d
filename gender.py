"""
Gender decoded from the sex code of a national ID number
"""
from enum import Enum


class Gender(Enum):
    FEMALE = 1
    MALE = 2
    UNKNOWN = 3

    @property
    def sex_field(self) -> str:
        """
        Gender in MRZ sex field notation

        Returns:
            'F', 'M' or '<' (unspecified)
        """
        if self is Gender.FEMALE:
            return 'F'
        if self is Gender.MALE:
            return 'M'
        return '<'

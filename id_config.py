"""
Configuration settings for the national ID decoder
"""
import logging
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    """Read an on/off switch from the environment"""
    value = os.getenv(name, "").strip().lower()
    if value in ["on", "true", "1", "enabled"]:
        return True
    if value in ["off", "false", "0", "disabled"]:
        return False
    return default


class Config:
    """Application configuration"""

    # Supported issuing countries (ISO 3166-1 alpha-3)
    SUPPORTED_COUNTRIES = ["SWZ", "ZAF"]
    DEFAULT_COUNTRY = os.getenv("ID_DEFAULT_COUNTRY", "SWZ").strip().upper()

    # Layout shared by both formats
    ID_NUMBER_LENGTH = 13
    SERIAL_RANGE = (0, 999)

    # Eswatini PIN
    ESWATINI_CENTURY_PIVOT = 30
    ESWATINI_FEMALE_SEX_CODES = (1100, 6100)
    ESWATINI_MALE_SEX_CODES = (6100, 9999)
    ESWATINI_ENFORCE_CHECKSUM = _env_flag("ESWATINI_ENFORCE_CHECKSUM", False)

    # South African ID number
    SA_CENTURY_PIVOT = 26
    SA_SEX_CODE_RANGE = (0, 9999)
    SA_MALE_SEX_CODE_THRESHOLD = 5000
    SA_CITIZENSHIP_CODES = (0, 1, 2)

    # Logging
    LOG_LEVEL = os.getenv("ID_LOG_LEVEL", "WARNING").strip().upper()

    @classmethod
    def configure_logging(cls):
        """Set up root logging for scripts; the library modules never call this"""
        logging.basicConfig(
            level=cls.LOG_LEVEL,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


# Create global config instance
config = Config()

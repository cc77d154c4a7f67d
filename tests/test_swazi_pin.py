from datetime import date

import pytest

from gender import Gender
from id_errors import ErrorKind, InvalidPinFormatError
from swazi_pin import SwaziPin, gender_from_sex_code

THE_PIN = "0210052100360"


def test_parse_valid_pin():
    pin = SwaziPin.parse("0507112100245")
    assert pin.date_of_birth == date(2005, 7, 11)
    assert pin.serial_number == 245
    assert pin.gender is Gender.FEMALE


def test_pin_properties():
    pin = SwaziPin.parse("0001282100635")
    assert pin.date_of_birth == date(2000, 1, 28)
    assert pin.gender is Gender.FEMALE
    assert pin.serial_number == 635
    assert pin.sex_code == 2100


def test_parse_ignores_surrounding_whitespace():
    assert SwaziPin.parse("  0507112100245 ") == SwaziPin.parse("0507112100245")


@pytest.mark.parametrize("pin, expected_year", [
    ("3001012100123", 2030),
    ("3101012100123", 1931),
    ("0001012100123", 2000),
    ("9912312100123", 1999),
])
def test_century_pivot(pin, expected_year):
    assert SwaziPin.parse(pin).date_of_birth.year == expected_year


@pytest.mark.parametrize("code, expected", [
    (1099, Gender.UNKNOWN),
    (1100, Gender.FEMALE),
    (6099, Gender.FEMALE),
    (6100, Gender.FEMALE),
    (6101, Gender.MALE),
    (9999, Gender.MALE),
    (0, Gender.UNKNOWN),
])
def test_gender_from_sex_code(code, expected):
    assert gender_from_sex_code(code) is expected


def test_boundary_sex_code_is_female():
    assert SwaziPin.parse("0204196100236").gender is Gender.FEMALE
    assert SwaziPin.parse("9811256105250").gender is Gender.MALE


@pytest.mark.parametrize("pin, kind", [
    ("", ErrorKind.EMPTY_INPUT),
    ("   ", ErrorKind.EMPTY_INPUT),
    (None, ErrorKind.EMPTY_INPUT),
    ("0507AB100245", ErrorKind.NON_NUMERIC_INPUT),
    ("05071100245", ErrorKind.BAD_LENGTH),
    ("0802306100511", ErrorKind.INVALID_DATE),
    ("0513012100245", ErrorKind.INVALID_DATE),
    ("0204191099236", ErrorKind.INVALID_SEX_CODE),
    ("0204190000236", ErrorKind.INVALID_SEX_CODE),
])
def test_parse_rejections(pin, kind):
    with pytest.raises(InvalidPinFormatError) as excinfo:
        SwaziPin.parse(pin)
    assert excinfo.value.kind is kind
    assert isinstance(excinfo.value, ValueError)


def test_checksum_not_required_by_default():
    # the reference PINs above do not satisfy Luhn
    assert SwaziPin.parse("0507112100245", enforce_checksum=False).serial_number == 245


def test_checksum_enforced_on_request():
    with pytest.raises(InvalidPinFormatError) as excinfo:
        SwaziPin.parse("0507112100245", enforce_checksum=True)
    assert excinfo.value.kind is ErrorKind.CHECKSUM_MISMATCH

    pin = SwaziPin.parse("0507112100247", enforce_checksum=True)
    assert pin.serial_number == 247


def test_checksum_is_checked_before_fields():
    # Feb 30 with a bad checksum reports the checksum
    with pytest.raises(InvalidPinFormatError) as excinfo:
        SwaziPin.parse("0802306100512", enforce_checksum=True)
    assert excinfo.value.kind is ErrorKind.CHECKSUM_MISMATCH


def test_try_parse():
    ok, pin = SwaziPin.try_parse("0507112100245")
    assert ok is True
    assert pin == SwaziPin.parse("0507112100245")

    for bad in ["", None, "0507AB100245", "05071100245", "0802306100511"]:
        ok, pin = SwaziPin.try_parse(bad)
        assert ok is False
        assert pin is None


def test_equality_and_hash():
    pin1 = SwaziPin.parse(THE_PIN)
    pin2 = SwaziPin.parse(THE_PIN)
    assert pin1 == pin2
    assert not (pin1 != pin2)
    assert hash(pin1) == hash(pin2)
    assert len({pin1, pin2}) == 1


def test_different_pins_are_not_equal():
    pin = SwaziPin.parse(THE_PIN)
    assert pin != SwaziPin.parse("0607116100567")
    assert pin != SwaziPin.parse("9811256105250")
    # same date and gender, different serial
    assert pin != SwaziPin.parse("0210052100361")


def test_equality_ignores_sex_code_within_band():
    # both codes classify as female; equality is over derived fields
    assert SwaziPin.parse("0210052100360") == SwaziPin.parse("0210053100360")


def test_not_equal_to_other_types():
    assert SwaziPin.parse(THE_PIN) != THE_PIN


@pytest.mark.parametrize("pin", ["6810236100520", "0204191120236", THE_PIN])
def test_str_rebuilds_pin(pin):
    parsed = SwaziPin.parse(pin)
    assert str(parsed) == pin
    assert SwaziPin.parse(str(parsed)) == parsed
    assert repr(parsed) == f"SwaziPin('{pin}')"


def test_is_immutable():
    pin = SwaziPin.parse(THE_PIN)
    with pytest.raises(AttributeError):
        pin.serial_number = 1
    with pytest.raises(AttributeError):
        pin._pin_data = None


def test_enforce_checksum_follows_config(monkeypatch):
    from id_config import config

    monkeypatch.setattr(config, "ESWATINI_ENFORCE_CHECKSUM", True)
    ok, _ = SwaziPin.try_parse("0507112100245")
    assert ok is False
    ok, _ = SwaziPin.try_parse("0507112100245", enforce_checksum=False)
    assert ok is True


def test_copy_and_pickle_round_trip():
    import copy
    import pickle

    pin = SwaziPin.parse("0001282100635")
    for clone in (copy.copy(pin), copy.deepcopy(pin), pickle.loads(pickle.dumps(pin))):
        assert clone == pin
        assert hash(clone) == hash(pin)
        assert str(clone) == "0001282100635"
        assert clone.gender is Gender.FEMALE


def test_try_parse_never_raises(monkeypatch):
    import swazi_pin

    def broken(pin, enforce_checksum=False):
        raise RuntimeError("boom")

    monkeypatch.setattr(swazi_pin, "validate_pin_and_extract_parts", broken)
    assert SwaziPin.try_parse("0001282100635") == (False, None)

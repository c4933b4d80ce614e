import pytest

from nomina.validation import (
    format_name,
    in_open_range,
    is_alphabetic,
    is_alphabetic_with_spaces,
    is_cuit,
    is_dni,
    is_float_text,
    is_int_text,
    is_name,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("123", True),
        ("-45", True),
        ("-", True),
        ("", False),
        ("12a", False),
        ("1-2", False),
        ("1.5", False),
        (" 12", False),
    ],
)
def test_is_int_text(text, expected):
    assert is_int_text(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1.5", True),
        ("1,5", True),
        ("-3.25", True),
        ("42", True),
        ("", False),
        ("1.2.3", False),
        ("1,2.3", False),
        ("1.a", False),
        ("2-", False),
    ],
)
def test_is_float_text(text, expected):
    assert is_float_text(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("Juan", True), ("", False), ("Juan Perez", False), ("abc1", False)],
)
def test_is_alphabetic(text, expected):
    assert is_alphabetic(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("Juan Perez", True), ("Ana\tMaria", True), ("", False), ("Juan 2", False)],
)
def test_is_alphabetic_with_spaces(text, expected):
    assert is_alphabetic_with_spaces(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("20-12345678-9", True),
        ("2012345678-9", False),
        ("20-1234567-", False),
        ("20-12345678-9-", False),
        ("", False),
    ],
)
def test_is_cuit(text, expected):
    assert is_cuit(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1234567", True),
        ("12345678", True),
        ("123456", False),
        ("123456789", False),
        ("1234a67", False),
    ],
)
def test_is_dni(text, expected):
    assert is_dni(text) is expected


def test_in_open_range_excludes_bounds():
    assert in_open_range(3, 1, 5) is True
    assert in_open_range(1, 1, 5) is False
    assert in_open_range(5, 1, 5) is False
    assert in_open_range(2.5, 1.0, 999999.0) is True


def test_is_name():
    assert is_name("Perez") is True
    assert is_name("Perez2") is False
    assert is_name("De la") is False


def test_format_name():
    assert format_name("jUAN") == "Juan"
    assert format_name("PEREZ") == "Perez"
    assert format_name("") == ""


def test_format_name_is_idempotent():
    once = format_name("mARIA")
    assert format_name(once) == once
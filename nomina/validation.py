"""Pure checks on text typed by the user."""

from __future__ import annotations

import string

_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)
_SPACES = frozenset(" \t\n\v\f\r")
_DECIMAL_MARKS = frozenset(".,")


def _is_signed_digits(text: str, extra: frozenset[str] = frozenset()) -> bool:
    """True when every character is a digit or in *extra*, a '-' being allowed first."""
    return all(
        char in _DIGITS or char in extra or (position == 0 and char == "-")
        for position, char in enumerate(text)
    )


def is_int_text(text: str) -> bool:
    """True for a non-empty run of digits, optionally preceded by '-'."""
    return bool(text) and _is_signed_digits(text)


def is_float_text(text: str) -> bool:
    """True for digits with at most one '.' or ',' and an optional leading '-'."""
    if not text or not _is_signed_digits(text, _DECIMAL_MARKS):
        return False
    return sum(char in _DECIMAL_MARKS for char in text) <= 1


def is_alphabetic(text: str) -> bool:
    """True for a non-empty string made only of ASCII letters."""
    return bool(text) and all(char in _LETTERS for char in text)


def is_alphabetic_with_spaces(text: str) -> bool:
    """True for a non-empty string made of ASCII letters and whitespace."""
    return bool(text) and all(char in _LETTERS or char in _SPACES for char in text)


def is_cuit(text: str) -> bool:
    """True when the text holds at least ten digits and exactly two hyphens."""
    digits = sum(char in _DIGITS for char in text)
    hyphens = text.count("-")
    return digits >= 10 and hyphens == 2


def is_dni(text: str) -> bool:
    """True for an integer text seven or eight characters long."""
    return 7 <= len(text) <= 8 and is_int_text(text)


def in_open_range(number: float, minimum: float, maximum: float) -> bool:
    """True when *number* lies strictly between *minimum* and *maximum*."""
    return minimum < number < maximum


def is_name(text: str) -> bool:
    """True when the text has no character other than an ASCII letter."""
    return all(char in _LETTERS for char in text)


def format_name(name: str) -> str:
    """Lower-case the name and capitalise its first letter."""
    return name[:1].upper() + name[1:].lower()
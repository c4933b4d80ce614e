"""Helpers for fixed-size integer arrays in which zero marks a free slot."""

from __future__ import annotations


def new_int_array(size: int) -> list[int]:
    """Return *size* free (zero) slots."""
    return [0] * size


def place_first_free(values: list[int], value: int) -> int:
    """Store *value* in the first free slot and return its index."""
    try:
        position = values.index(0)
    except ValueError:
        raise ValueError("no free slot left") from None
    values[position] = value
    return position


def place_at(values: list[int], value: int, position: int) -> None:
    """Store *value* at *position*, which must exist and be free."""
    if not 0 <= position < len(values):
        raise IndexError(f"position {position} out of range")
    if values[position] != 0:
        raise ValueError(f"position {position} is already taken")
    values[position] = value


def format_int_array(values: list[int], label: str) -> str:
    """Render each value with its index, one per line."""
    return "".join(
        f"\nID: {index} - {label}: {value}" for index, value in enumerate(values)
    )


def bubble_sort_descending(values: list[int]) -> int:
    """Sort *values* in place from largest to smallest; return the comparisons made."""
    comparisons = 0
    swapped = True
    while swapped:
        swapped = False
        for index in range(len(values) - 1):
            if values[index] < values[index + 1]:
                values[index], values[index + 1] = values[index + 1], values[index]
                swapped = True
            comparisons += 1
    return comparisons
"""Employee records, their table rendering and ordering."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Callable, Iterable

NAME_CAPACITY = 128
"""Bytes reserved for a name in a stored record, terminator included."""

_RULE = "+" + "-" * 71 + "+"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

Compare = Callable[["Employee", "Employee"], int]


def _to_int(text: str) -> int:
    """Read the integer at the start of *text*; 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _check_positive(label: str, value: int) -> None:
    if value <= 0:
        raise ValueError(f"{label} must be greater than zero, not {value}")


def _check_name(name: str) -> None:
    if len(name.encode("utf-8")) >= NAME_CAPACITY:
        raise ValueError(f"name longer than {NAME_CAPACITY - 1} bytes")


@dataclass
class Employee:
    """One employee: id, name, hours worked and salary."""

    id: int
    name: str
    hours_worked: int
    salary: int

    def __post_init__(self) -> None:
        _check_positive("id", self.id)
        _check_name(self.name)
        _check_positive("hours worked", self.hours_worked)
        _check_positive("salary", self.salary)

    @classmethod
    def from_fields(
        cls, id_text: str, name: str, hours_text: str, salary_text: str
    ) -> Employee:
        """Build an employee from the text fields of a record."""
        return cls(_to_int(id_text), name, _to_int(hours_text), _to_int(salary_text))

    def rename(self, name: str) -> None:
        """Replace the name."""
        _check_name(name)
        self.name = name

    def set_hours_worked(self, hours_worked: int) -> None:
        """Replace the hours worked; they must be greater than zero."""
        _check_positive("hours worked", hours_worked)
        self.hours_worked = hours_worked

    def set_salary(self, salary: int) -> None:
        """Replace the salary; it must be greater than zero."""
        _check_positive("salary", salary)
        self.salary = salary

    def format_row(self) -> str:
        """Render the employee as one table row."""
        return (
            f"|{self.id:10d} | {self.name:>20} | {self.hours_worked:20d} |"
            f" {self.salary:10d}  |\n"
        )


def format_header() -> str:
    """Render the ruled header that precedes employee rows."""
    title = f"|{'ID':>10}  {'NOMBRE':>20}  {'HORAS':>20}  {'SUELDO':>10}     | \n"
    return f"{_RULE}\n{title}{_RULE}\n"


def format_rule() -> str:
    """Render the line that separates table rows."""
    return f"{_RULE}\n"


def _sign(a: int, b: int) -> int:
    return (a > b) - (a < b)


def compare_by_id(a: Employee, b: Employee) -> int:
    """1 when *a* has the larger id, -1 when *b* has, 0 when equal."""
    return _sign(a.id, b.id)


def compare_by_hours(a: Employee, b: Employee) -> int:
    """1 when *a* worked more hours, -1 when *b* did, 0 when equal."""
    return _sign(a.hours_worked, b.hours_worked)


def compare_by_salary(a: Employee, b: Employee) -> int:
    """1 when *a* earns more, -1 when *b* does, 0 when equal."""
    return _sign(a.salary, b.salary)


def sort_employees(
    employees: Iterable[Employee], compare: Compare, ascending: bool
) -> list[Employee]:
    """Return the employees ordered by *compare*; equal ones keep their order."""
    if ascending:
        key = cmp_to_key(compare)
    else:
        key = cmp_to_key(lambda a, b: -compare(a, b))
    return sorted(employees, key=key)
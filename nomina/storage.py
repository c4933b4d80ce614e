"""Reading and writing employees as CSV text or fixed-size binary records."""

from __future__ import annotations

import struct
from pathlib import Path
from typing import BinaryIO, Iterable, TextIO

from nomina.employee import NAME_CAPACITY, Employee

TEXT_HEADER = "id,nombre,horasTrabajadas,Sueldo"
_RECORD = struct.Struct(f"<i{NAME_CAPACITY}sii")


def parse_text(stream: TextIO) -> list[Employee]:
    """Read employees from CSV text whose first line is a header."""
    lines = iter(stream)
    next(lines, None)
    employees = []
    for number, line in enumerate(lines, start=2):
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        fields = line.split(",", 3)
        if len(fields) != 4:
            raise ValueError(f"line {number}: expected 4 fields, got {len(fields)}")
        try:
            employees.append(Employee.from_fields(*fields))
        except ValueError as error:
            raise ValueError(f"line {number}: {error}") from None
    return employees


def write_text(stream: TextIO, employees: Iterable[Employee]) -> None:
    """Write employees as CSV text preceded by the header line."""
    stream.write(f"{TEXT_HEADER}\n")
    for employee in employees:
        stream.write(
            f"{employee.id},{employee.name},{employee.hours_worked},{employee.salary}\n"
        )


def parse_binary(stream: BinaryIO) -> list[Employee]:
    """Read fixed-size employee records; a trailing partial record is ignored."""
    employees = []
    while True:
        chunk = stream.read(_RECORD.size)
        if len(chunk) < _RECORD.size:
            return employees
        id_, raw_name, hours, salary = _RECORD.unpack(chunk)
        name = raw_name.split(b"\0", 1)[0].decode("utf-8", errors="replace")
        employees.append(Employee(id_, name, hours, salary))


def write_binary(stream: BinaryIO, employees: Iterable[Employee]) -> None:
    """Write each employee as one fixed-size record."""
    for employee in employees:
        stream.write(
            _RECORD.pack(
                employee.id,
                employee.name.encode("utf-8"),
                employee.hours_worked,
                employee.salary,
            )
        )


def _require_some(employees: Iterable[Employee]) -> list[Employee]:
    employees = list(employees)
    if not employees:
        raise ValueError("no employees to save")
    return employees


def load_text(path: str | Path) -> list[Employee]:
    """Read employees from a CSV file."""
    with open(path, encoding="utf-8", newline="") as stream:
        return parse_text(stream)


def save_text(path: str | Path, employees: Iterable[Employee]) -> None:
    """Write employees to a CSV file; there must be at least one."""
    employees = _require_some(employees)
    with open(path, "w", encoding="utf-8", newline="") as stream:
        write_text(stream, employees)


def load_binary(path: str | Path) -> list[Employee]:
    """Read employees from a binary file."""
    with open(path, "rb") as stream:
        return parse_binary(stream)


def save_binary(path: str | Path, employees: Iterable[Employee]) -> None:
    """Write employees to a binary file; there must be at least one."""
    employees = _require_some(employees)
    with open(path, "wb") as stream:
        write_binary(stream, employees)
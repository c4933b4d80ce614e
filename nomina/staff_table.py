"""A fixed-size staff table with a console menu to register and report staff."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

from nomina.prompts import Prompter
from nomina.validation import format_name

_TABLE_RULE = "*" * 79
_REPORT_RULE = "*" * 86
_NAME_ERROR = "Error, sin numeros"

_MAIN_MENU = (
    "--Menu Principal-- \n\n"
    "-1- Nuevo Empleado\n"
    "-2- Modificar Empleado\n"
    "-3- Eliminar Empleado\n"
    "-4- Informar Empleados \n"
    "-5- Salir\n"
    "Opcion: -->"
)
_MODIFY_MENU = (
    "Que campo desea modificar?\n"
    "-1- Nombre\n"
    "-2- Apellido\n"
    "-3- Salario\n"
    "-4- Sector\n"
    "-5- Salir\n"
    "Ingrese Opcion: -->"
)
_REPORT_MENU = (
    "-1- Lista de Empleados.\n"
    "-2- Total y Promedio, Empleados por encima del promedio.\n"
    "-3- Volver al menu anterior.\n"
    "--Opcion: "
)


@dataclass
class StaffMember:
    """One person on the payroll."""

    id: int
    name: str
    last_name: str
    salary: float
    sector: int

    def format_row(self) -> str:
        return (
            f"|{self.id:10d}|  {self.name:>20}|  {self.last_name:>20}|"
            f"  {self.salary:10.2f}| {self.sector:6d}| \n"
        )


@dataclass(frozen=True)
class SalaryReport:
    """Payroll totals: the mean salary, the sum, and how many earn above the mean."""

    average: float
    total: float
    above_average: int


class TableFull(Exception):
    """Raised when a staff table has no free slot left."""


class StaffTable:
    """A table with a fixed number of slots, each free or holding one member."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("a staff table needs at least one slot")
        self._slots: list[StaffMember | None] = [None] * size

    @property
    def size(self) -> int:
        return len(self._slots)

    def free_slot(self) -> int | None:
        """Index of the first free slot, or None when the table is full."""
        return next(
            (index for index, slot in enumerate(self._slots) if slot is None), None
        )

    def max_id(self) -> int:
        """Largest id in use, or -1 when the table is empty."""
        return max((member.id for member in self.members()), default=-1)

    def occupied_count(self) -> int:
        """Number of slots holding a member."""
        return sum(slot is not None for slot in self._slots)

    def members(self) -> list[StaffMember]:
        """Members in slot order."""
        return [slot for slot in self._slots if slot is not None]

    def add(
        self, member_id: int, name: str, last_name: str, salary: float, sector: int
    ) -> StaffMember:
        """Store a new member in the first free slot."""
        index = self.free_slot()
        if index is None:
            raise TableFull("No hay lugares Disponibles para nuevos empleados.")
        member = StaffMember(member_id, name, last_name, salary, sector)
        self._slots[index] = member
        return member

    def find_by_id(self, member_id: int) -> StaffMember | None:
        """The last member holding *member_id*, or None."""
        found = None
        for member in self.members():
            if member.id == member_id:
                found = member
        return found

    def remove(self, member_id: int) -> StaffMember:
        """Free the slot of the member with *member_id*."""
        member = self.find_by_id(member_id)
        if member is None:
            raise KeyError(member_id)
        self._slots = [None if slot is member else slot for slot in self._slots]
        return member

    def sort(self, order: int) -> None:
        """Order by last name then sector: 0 ascending, 1 descending."""
        if order not in (0, 1):
            raise ValueError(f"order must be 0 or 1, not {order!r}")
        ordered = sorted(
            self.members(),
            key=lambda member: (member.last_name, member.sector),
            reverse=order == 1,
        )
        self._slots = ordered + [None] * (self.size - len(ordered))

    def average_salary(self) -> SalaryReport:
        """Mean and total salary, and the count of members above the mean."""
        members = self.members()
        if not members:
            raise ValueError("no staff to average")
        total = sum(member.salary for member in members)
        average = total / len(members)
        above = sum(member.salary > average for member in members)
        return SalaryReport(average, total, above)

    def format_table(self) -> str:
        """Render every member as a table with a header."""
        return _format_rows(self.members())


def _format_rows(members: list[StaffMember]) -> str:
    header = (
        f"|{'ID':>10}  {'NOMBRE':>20}  {'APELLIDO':>20}  {'SUELDO':>10} {'SECTOR':>10}| \n"
    )
    rows = "".join(member.format_row() for member in members)
    return f"{_TABLE_RULE}\n{header}{_TABLE_RULE}\n{rows}{_TABLE_RULE}\n"


def format_salary_report(report: SalaryReport) -> str:
    """Render a salary report as a one-row table."""
    header = f"|{' PROMEDIO ':1}      | {' TOTAL ':<25}  | {' EMPLEADOS POR ARRIBA DEL PROMEDIO  ':>20} | \n"
    row = (
        f"| {report.average:<15.2f}|  {report.total:<26.2f}|"
        f"  {report.above_average:21d}               |\n"
    )
    return (
        "DATOS DE SUELDOS TOTAL Y PROMEDIO DE LA NOMINA DE EMPLEADOS: \n"
        f"{_REPORT_RULE}\n{header}{_REPORT_RULE}\n{row}{_REPORT_RULE}\n"
    )


def _ask_int(prompter: Prompter, message: str, error: str, low: int, high: int) -> int:
    """Read an integer between *low* and *high* inclusive."""
    return prompter.read_number_open_range(message, error, low - 1, high + 1)


def _ask_salary(prompter: Prompter, message: str) -> float:
    return prompter.read_float_open_range(message, "Error, No valido: ", 0, 1_000_000)


def register_member(table: StaffTable, prompter: Prompter, last_id: int) -> int:
    """Ask for a new member's data, store it, and return the id given."""
    if table.free_slot() is None:
        raise TableFull("No hay lugares Disponibles para nuevos empleados.")
    member_id = last_id + 1
    name = format_name(prompter.read_name("Ingrese Nombre del empleado: ", _NAME_ERROR))
    last_name = format_name(
        prompter.read_name("Ingrese Apellido del empleado: ", _NAME_ERROR)
    )
    salary = _ask_salary(prompter, "Ingrese Salario del empleado: ")
    sector = _ask_int(
        prompter,
        "Ingrese Sector al que pertenece el empleado: ",
        "Sector no valido: ",
        1,
        10,
    )
    table.add(member_id, name, last_name, salary, sector)
    prompter.say("La carga se realizo con exito. \n")
    return member_id


def modify_member(table: StaffTable, prompter: Prompter) -> bool:
    """Ask for an id and a field, then change that field; True if a member was found."""
    member_id = _ask_int(
        prompter,
        "Ingrese El ID del empleado: ",
        "Error id fuera de rango",
        1,
        table.size + 1,
    )
    member = table.find_by_id(member_id)
    if member is None:
        return False
    prompter.say("Se modificara el empleado: \n")
    prompter.say(_format_rows([member]))
    choice = _ask_int(prompter, _MODIFY_MENU, "\nError, Reintente: -->", 1, 5)
    if choice == 1:
        member.name = prompter.read_name("Ingrese Nombre: ", _NAME_ERROR)
    elif choice == 2:
        member.last_name = prompter.read_name("Ingrese Apellido: ", _NAME_ERROR)
    elif choice == 3:
        member.salary = _ask_salary(prompter, "Ingrese Salario: ")
    elif choice == 4:
        member.sector = _ask_int(prompter, "Ingrese Sector: ", "Sector no valido: ", 1, 10)
    return True


def run(prompter: Prompter, size: int = 1000) -> StaffTable:
    """Run the staff menu until the user leaves; return the table."""
    table = StaffTable(size)
    last_id = 0
    while True:
        option = _ask_int(prompter, _MAIN_MENU, "Error, Opcion no valida.\n", 1, 5)
        if option == 1:
            try:
                last_id = register_member(table, prompter, last_id)
            except TableFull as full:
                prompter.say(f"{full}\n")
            prompter.pause()
        elif option == 2:
            if table.occupied_count():
                prompter.say(table.format_table())
                if modify_member(table, prompter):
                    prompter.say("Modificado Correctamente.\n")
                else:
                    prompter.say("Algo salio mal Reintente.\n")
            else:
                prompter.say("\nNo es posible modificar por que no hay empleados.\n")
            prompter.pause()
        elif option == 3:
            if table.occupied_count():
                prompter.say(table.format_table())
                member_id = _ask_int(
                    prompter,
                    "Ingrese el ID del empleado a eliminar: ",
                    "ID Fuera de rango.",
                    1,
                    table.max_id(),
                )
                try:
                    table.remove(member_id)
                except KeyError:
                    prompter.say("\nUups. Algo salio mal Reintente.\n")
                else:
                    prompter.say("\nEliminado Correctamente.\n")
                    prompter.pause()
            else:
                prompter.say("\nNo es posible modificar por que no hay empleados.\n")
                prompter.pause()
        elif option == 4:
            if table.occupied_count():
                report_choice = _ask_int(
                    prompter, _REPORT_MENU, "Error, Opcion no valida.", 1, 3
                )
                if report_choice == 1:
                    table.sort(0)
                    prompter.say(table.format_table())
                    prompter.pause()
                elif report_choice == 2:
                    prompter.say(format_salary_report(table.average_salary()))
                    prompter.pause()
            else:
                prompter.say("\nNo es posible mostrar por que no hay empleados.\n")
                prompter.pause()
        else:
            prompter.say("--Nos vemos--")
            return table


def main(argv: list[str] | None = None) -> int:
    """Start the staff menu on the console."""
    parser = argparse.ArgumentParser(description="Staff table menu.")
    parser.add_argument("--size", type=int, default=1000, help="number of slots")
    args = parser.parse_args(argv)
    try:
        run(Prompter(), args.size)
    except (EOFError, KeyboardInterrupt):
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
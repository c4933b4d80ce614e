"""Console menu that loads, edits, sorts and saves a list of employees."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Callable

from nomina import storage
from nomina.employee import (
    Employee,
    compare_by_hours,
    compare_by_id,
    compare_by_salary,
    format_header,
    format_rule,
    sort_employees,
)
from nomina.prompts import Prompter, RetriesExhausted

_REENTER = "\nError, reingrese: "
_NAME_SIZE = 100
_MAX_SALARY = 999999

_MAIN_MENU = (
    "------------------------------Menu Principal----------------------------------- \n\n"
    "1) Cargar los datos de los empleados desde el archivo data.csv (modo texto).   \n"
    "2) Cargar los datos de los empleados desde el archivo data.csv (modo binario). \n"
    "3) Alta de empleado \n"
    "4) Modificar datos de empleado \n"
    "5) Baja de empleado \n"
    "6) Listar empleados \n"
    "7) Ordenar empleados \n"
    "8) Guardar los datos de los empleados en el archivo data.csv (modo texto).    \n"
    "9) Guardar los datos de los empleados en el archivo data.csv (modo binario).  \n"
    "10) Salir \n"
    "--------------------------------------------------------------------------------\n\n"
    "Opcion: "
)
_EDIT_MENU = (
    "\n\n------------------------------Menu de Modificaciones----------------------------------- \n\n"
    "1) Nombre\n"
    "2) Cantidad de horas trabajadas\n"
    "3) Sueldo\n"
    "4) Salir\n"
    "Opcion: "
)
_SORT_MENU = (
    "------------------------------Menu de Ordenamiento-----------------------------------\n"
    "1) ID ascendente\n"
    "2) ID descendente\n"
    "3) Horas de trabajo ascendente\n"
    "4) Horas de trabajo descendente\n"
    "5) Sueldo de ascendente\n"
    "6) Sueldo de descendente\n"
    "7) Salir\n"
    "Opcion: "
)
_SORT_OPTIONS = {
    1: (compare_by_id, True),
    2: (compare_by_id, False),
    3: (compare_by_hours, True),
    4: (compare_by_hours, False),
    5: (compare_by_salary, True),
    6: (compare_by_salary, False),
}


class EmployeeManager:
    """Holds the employees in memory and runs each menu action on them."""

    def __init__(self, prompter: Prompter | None = None) -> None:
        self.prompter = prompter if prompter is not None else Prompter()
        self.employees: list[Employee] = []
        self.last_id = 0

    def _say(self, text: str) -> None:
        self.prompter.say(text)

    def _show(self, employee: Employee, leading: str = "\n") -> None:
        self._say(leading + format_header())
        self._say(employee.format_row())

    def load_text(self, path: str | Path) -> int:
        """Load employees from a CSV file into an empty list; return how many."""
        if self.employees:
            self._say("El archivo ya fue cargado!.\n\n")
            self.prompter.pause()
            return 0
        try:
            loaded = storage.load_text(path)
        except OSError:
            self._say("Error al abrir el archivo de texto, Corrobore si existe. \n\n")
            self.prompter.pause()
            return 0
        except ValueError as error:
            self._say(f"El archivo tiene datos invalidos: {error}\n\n")
            self.prompter.pause()
            return 0
        self._say("Archivo abierto correctamente.\n\n")
        self.employees.extend(loaded)
        if loaded:
            self.last_id = max(employee.id for employee in loaded)
        self.prompter.pause()
        return len(loaded)

    def load_binary(self, path: str | Path) -> int:
        """Load employees from a binary file into an empty list; return how many."""
        if self.employees:
            self._say("El archivo ya fue cargado!.\n\n")
            self.prompter.pause()
            return 0
        try:
            loaded = storage.load_binary(path)
        except OSError:
            self._say("Error al abrir el archivo de Binary, Corrobore si existe.\n")
            return 0
        except ValueError as error:
            self._say(f"El archivo tiene datos invalidos: {error}\n")
            return 0
        self.employees.extend(loaded)
        self._say("Archivo de texto abierto\n")
        return len(loaded)

    def add_employee(self) -> Employee | None:
        """Ask for a new employee's data and append it; None if not possible."""
        if not self.employees:
            self._say("\n\nNo es posible dar de alta Nuevos empleados...\n")
            return None
        name = self.prompter.read_alphabetic(
            "\nIngrese Nombre: ", "\nError reingrese: ", _NAME_SIZE, 3
        )
        hours = self.prompter.read_int_positive(
            "\nIngrese Horas Trabajadas: ", _REENTER, 3
        )
        salary = self.prompter.read_int_range(
            "\nIngrese Sueldo: ", _REENTER, 1, _MAX_SALARY, 3
        )
        try:
            employee = Employee(self.last_id + 1, name, hours, salary)
        except ValueError as error:
            self._say(f"\n\nNo se pudo dar de alta el empleado: {error}\n")
            return None
        self.last_id = employee.id
        self.employees.append(employee)
        self._say("\n\ndatos cargados correctamente!\n")
        return employee

    def _report_change(self, message: str, employee: Employee) -> None:
        self._say(message)
        self._show(employee)
        self.prompter.pause()

    def edit_employee(self) -> bool:
        """Ask for an id and change one field of each matching employee."""
        if not self.employees:
            self._say(
                "\n\nNo es posible modificar empleados...\nCargue un archivo previamente.\n\n"
            )
            return False
        target = self.prompter.read_int(
            "\n Ingrese el ID del empleado a modificar: ", _REENTER
        )
        matches = [employee for employee in self.employees if employee.id == target]
        for employee in matches:
            self._show(employee)
            choice = self.prompter.read_int_range(_EDIT_MENU, _REENTER, 1, 4, 3)
            if choice == 1:
                employee.rename(
                    self.prompter.read_alphabetic(
                        "\nIngrese Nombre: ", _REENTER, _NAME_SIZE, 3
                    )
                )
                self._report_change("\nNombre cambiado con exito\n", employee)
            elif choice == 2:
                hours = self.prompter.read_int_positive(
                    "\nIngrese Horas Trabajadas: ", _REENTER, 3
                )
                try:
                    employee.set_hours_worked(hours)
                except ValueError:
                    self._say("\nError, las horas deben ser mayores a cero\n")
                else:
                    self._report_change("\nHoras trabajadas cambiado con exito\n", employee)
            elif choice == 3:
                employee.set_salary(
                    self.prompter.read_int_range(
                        "\nIngrese Sueldo: ", _REENTER, 1, _MAX_SALARY, 3
                    )
                )
                self._report_change("\nSueldo cambiado con exito\n", employee)
        if not matches:
            self._say("\nEmpleado no encontrado\n")
        return bool(matches)

    def remove_employee(self) -> Employee | None:
        """Ask for an id and, once confirmed, remove that employee."""
        if not self.employees:
            self._say(
                "\n\nNo es borrar empleados...\nCargue un archivo previamente.\n\n"
            )
            self.prompter.pause()
            return None
        target = self.prompter.read_int("Ingrese el ID que desea eliminar\n", _REENTER)
        removed = None
        index = next(
            (i for i, employee in enumerate(self.employees) if employee.id == target),
            None,
        )
        if index is not None:
            employee = self.employees[index]
            self._show(employee, leading="")
            if self.prompter.confirm(
                "Desea continuar con la baja? Si[s] - No[n]: ", _REENTER, 3
            ):
                removed = self.employees.pop(index)
                self._say("\nEmpleado eliminado correctamente\n")
            else:
                self._say("\n No se pudo eliminar el empleado\n")
        if removed is None:
            self._say("\nNo se encontro ID\n")
        self.prompter.pause()
        return removed

    def list_employees(self) -> bool:
        """Print every employee as a table; False when there is nothing to show."""
        if not self.employees:
            self._say("No hay datos a mostrar.\n")
            return False
        self._say(format_header())
        for employee in self.employees:
            self._say(employee.format_row())
            self._say(format_rule())
        return True

    def sort_employees(self) -> bool:
        """Ask for an ordering and sort the employees by it."""
        if not self.employees:
            self._say(" \nNo hay datos para ordenar \n")
            self.prompter.pause()
            return False
        choice = self.prompter.read_int_range(
            _SORT_MENU, "\nError, Reintente \n", 1, 7, 3
        )
        if choice in _SORT_OPTIONS:
            compare, ascending = _SORT_OPTIONS[choice]
            self._say("Ordenando espere por favor\n")
            self.employees = sort_employees(self.employees, compare, ascending)
            self._say("Ordenado correctamente\n")
        return True

    def _save(
        self,
        path: str | Path,
        writer: Callable[[str | Path, list[Employee]], None],
        done: str,
    ) -> bool:
        try:
            writer(path, self.employees)
        except (OSError, ValueError):
            self._say(" \nNo se pudo guardar el archivo\n")
            self.prompter.pause()
            return False
        self._say(done)
        self.prompter.pause()
        return True

    def save_text(self, path: str | Path) -> bool:
        """Write the employees to a CSV file."""
        return self._save(path, storage.save_text, " \nArchivo guardado\n\n")

    def save_binary(self, path: str | Path) -> bool:
        """Write the employees to a binary file."""
        return self._save(
            path, storage.save_binary, " \nArchivo binario guardado con exito\n"
        )


def run(
    prompter: Prompter | None = None,
    text_path: str | Path = "data.csv",
    binary_path: str | Path = "data.bin",
) -> EmployeeManager:
    """Run the main menu until the user leaves; return the manager."""
    prompter = prompter if prompter is not None else Prompter()
    manager = EmployeeManager(prompter)
    actions: dict[int, tuple[Callable[[], object], bool]] = {
        1: (lambda: manager.load_text(text_path), False),
        2: (lambda: manager.load_binary(binary_path), True),
        3: (manager.add_employee, True),
        4: (manager.edit_employee, True),
        5: (manager.remove_employee, False),
        6: (manager.list_employees, True),
        7: (manager.sort_employees, True),
        8: (lambda: manager.save_text(text_path), True),
        9: (lambda: manager.save_binary(binary_path), True),
    }
    while True:
        try:
            option = prompter.read_int_range(_MAIN_MENU, _REENTER, 1, 10, 3)
        except RetriesExhausted:
            continue
        if option == 10:
            return manager
        action, pause_after = actions[option]
        try:
            action()
        except RetriesExhausted:
            continue
        if pause_after:
            prompter.pause()


def main(argv: list[str] | None = None) -> int:
    """Start the employee menu on the console."""
    parser = argparse.ArgumentParser(description="Employee list menu.")
    parser.add_argument("--text", default="data.csv", help="CSV file to load and save")
    parser.add_argument("--binary", default="data.bin", help="binary file to load and save")
    args = parser.parse_args(argv)
    try:
        run(Prompter(), args.text, args.binary)
    except (EOFError, KeyboardInterrupt):
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
import io

import pytest

from nomina import storage
from nomina.controller import EmployeeManager, run
from nomina.employee import Employee
from nomina.prompts import Prompter


def _sample():
    return [
        Employee(1, "Ana", 10, 500),
        Employee(2, "Bruno", 20, 300),
        Employee(3, "Carla", 5, 900),
    ]


def _manager(text, employees=None, last_id=0):
    out = io.StringIO()
    manager = EmployeeManager(Prompter(io.StringIO(text), out))
    if employees is not None:
        manager.employees = employees
        manager.last_id = last_id
    return manager, out


def test_add_on_empty_list_is_refused():
    manager, out = _manager("")
    assert manager.add_employee() is None
    assert manager.employees == []
    assert "No es posible dar de alta Nuevos empleados" in out.getvalue()


def test_add_employee_takes_next_id():
    manager, _ = _manager("Dora\n12\n700\n", _sample(), last_id=3)
    added = manager.add_employee()
    assert added == Employee(4, "Dora", 12, 700)
    assert manager.employees[-1] is added
    assert manager.last_id == 4


def test_load_text_sets_last_id(tmp_path):
    path = tmp_path / "data.csv"
    storage.save_text(path, _sample())
    manager, out = _manager("\n")
    assert manager.load_text(path) == 3
    assert manager.employees == _sample()
    assert manager.last_id == max(e.id for e in _sample())
    assert "Archivo abierto correctamente" in out.getvalue()


def test_load_text_twice_is_refused(tmp_path):
    path = tmp_path / "data.csv"
    storage.save_text(path, _sample())
    manager, out = _manager("\n\n")
    manager.load_text(path)
    assert manager.load_text(path) == 0
    assert len(manager.employees) == 3
    assert "El archivo ya fue cargado!" in out.getvalue()


def test_load_text_missing_file(tmp_path):
    manager, out = _manager("\n")
    assert manager.load_text(tmp_path / "missing.csv") == 0
    assert "Error al abrir el archivo de texto" in out.getvalue()


def test_binary_round_trip(tmp_path):
    path = tmp_path / "data.bin"
    manager, _ = _manager("\n", _sample(), last_id=3)
    assert manager.save_binary(path) is True
    other, _ = _manager("")
    assert other.load_binary(path) == 3
    assert other.employees == _sample()


def test_save_text_round_trip(tmp_path):
    path = tmp_path / "data.csv"
    manager, out = _manager("\n", _sample(), last_id=3)
    assert manager.save_text(path) is True
    assert storage.load_text(path) == _sample()
    assert "Archivo guardado" in out.getvalue()


def test_save_empty_list_fails(tmp_path):
    path = tmp_path / "data.csv"
    manager, out = _manager("\n")
    assert manager.save_text(path) is False
    assert not path.exists()
    assert "No se pudo guardar el archivo" in out.getvalue()


def test_remove_confirmed():
    manager, out = _manager("2\ns\n\n", _sample(), last_id=3)
    removed = manager.remove_employee()
    assert removed == Employee(2, "Bruno", 20, 300)
    assert [e.id for e in manager.employees] == [1, 3]
    assert "Empleado eliminado correctamente" in out.getvalue()


def test_remove_declined_keeps_list():
    manager, out = _manager("2\nn\n\n", _sample(), last_id=3)
    assert manager.remove_employee() is None
    assert manager.employees == _sample()
    assert "No se pudo eliminar el empleado" in out.getvalue()


def test_edit_name():
    manager, out = _manager("1\n1\nLuis\n\n", _sample(), last_id=3)
    assert manager.edit_employee() is True
    assert manager.employees[0].name == "Luis"
    assert "Nombre cambiado con exito" in out.getvalue()


def test_edit_hours():
    manager, _ = _manager("3\n2\n40\n\n", _sample(), last_id=3)
    assert manager.edit_employee() is True
    assert manager.employees[2].hours_worked == 40


def test_edit_unknown_id():
    manager, out = _manager("42\n", _sample(), last_id=3)
    assert manager.edit_employee() is False
    assert "Empleado no encontrado" in out.getvalue()


@pytest.mark.parametrize(
    "option, attribute, descending",
    [
        ("1", "id", False),
        ("2", "id", True),
        ("3", "hours_worked", False),
        ("4", "hours_worked", True),
        ("5", "salary", False),
        ("6", "salary", True),
    ],
)
def test_sort_options(option, attribute, descending):
    manager, _ = _manager(f"{option}\n", _sample(), last_id=3)
    assert manager.sort_employees() is True
    values = [getattr(e, attribute) for e in manager.employees]
    assert values == sorted(values, reverse=descending)
    assert len(manager.employees) == 3


def test_list_employees_prints_rows():
    manager, out = _manager("", _sample(), last_id=3)
    assert manager.list_employees() is True
    text = out.getvalue()
    for employee in _sample():
        assert employee.format_row() in text


def test_list_empty():
    manager, out = _manager("")
    assert manager.list_employees() is False
    assert "No hay datos a mostrar." in out.getvalue()


def test_run_exit_immediately():
    out = io.StringIO()
    manager = run(Prompter(io.StringIO("10\n"), out))
    assert manager.employees == []
    assert "Menu Principal" in out.getvalue()


def test_run_load_and_list(tmp_path):
    path = tmp_path / "data.csv"
    storage.save_text(path, _sample())
    out = io.StringIO()
    manager = run(
        Prompter(io.StringIO("1\n\n6\n\n10\n"), out),
        text_path=path,
        binary_path=tmp_path / "data.bin",
    )
    assert manager.employees == _sample()
    assert _sample()[2].format_row() in out.getvalue()
import io

import pytest

from nomina.calculator import (
    Results,
    add,
    compute,
    divide,
    factorial,
    multiply,
    render_menu,
    run,
    subtract,
)
from nomina.prompts import Prompter


@pytest.mark.parametrize("a, b", [(7, 3), (-4, 9), (0, 0), (12, -12)])
def test_add_and_subtract_are_inverse(a, b):
    assert subtract(add(a, b), b) == a
    assert add(a, b) == add(b, a)


@pytest.mark.parametrize("a, b", [(7, 3), (-4, 9), (6, 1)])
def test_multiply_properties(a, b):
    assert multiply(a, 1) == a
    assert multiply(a, 0) == 0
    assert multiply(a, b) == multiply(b, a)


@pytest.mark.parametrize("a, b", [(7, 2), (-9, 4), (10, 5)])
def test_divide_inverts_multiply(a, b):
    assert divide(a, b) * b == pytest.approx(a)


def test_divide_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        divide(5, 0)


def test_factorial_of_zero_is_one():
    assert factorial(0) == 1


@pytest.mark.parametrize("n", [1, 2, 5, 10])
def test_factorial_recurrence(n):
    assert factorial(n) == n * factorial(n - 1)


def test_factorial_of_negative_is_empty_product():
    assert factorial(-3) == factorial(0)


def test_compute_collects_operations():
    results = compute(6, 3)
    assert results == Results(
        add(6, 3), subtract(6, 3), multiply(6, 3), divide(6, 3), factorial(6), factorial(3)
    )


def test_compute_with_zero_divisor():
    assert compute(4, 0).division is None


def test_render_menu_placeholders():
    text = render_menu(None, None, None)
    assert "(A=x)" in text
    assert "(B=y)" in text
    assert text.endswith("5. Salir\n")


def test_render_menu_with_zero_division():
    text = render_menu(4, 0, compute(4, 0))
    assert "No es posible dividir por cero" in text
    assert f"El resultado de A+B es: {add(4, 0)}" in text


def test_run_computes_and_reports():
    out = io.StringIO()
    results = run(Prompter(io.StringIO("1\n4\n2\n2\n3\n4\n5\n"), out))
    assert results == compute(4, 2)
    assert render_menu(4, 2, compute(4, 2)) in out.getvalue()


def test_run_reports_missing_steps():
    out = io.StringIO()
    assert run(Prompter(io.StringIO("4\n3\n5\n"), out)) is None
    text = out.getvalue()
    assert "Falta realizar los calculos" in text
    assert "Falta ingresar un valor" in text
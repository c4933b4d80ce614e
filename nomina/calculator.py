"""A two-operand calculator driven by a console menu."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass

from nomina.prompts import Prompter


@dataclass(frozen=True)
class Results:
    """Every operation on A and B; *division* is None when B is zero."""

    addition: int
    subtraction: int
    multiplication: int
    division: float | None
    factorial_a: int
    factorial_b: int


def add(a: int, b: int) -> int:
    """A + B."""
    return a + b


def subtract(a: int, b: int) -> int:
    """A - B."""
    return a - b


def multiply(a: int, b: int) -> int:
    """A * B."""
    return a * b


def divide(a: int, b: int) -> float:
    """A / B as a decimal number; B must not be zero."""
    if b == 0:
        raise ZeroDivisionError("No es posible dividir por cero")
    return a / b


def factorial(n: int) -> int:
    """n!; a negative n gives 1, the empty product."""
    return math.prod(range(1, n + 1))


def compute(a: int, b: int) -> Results:
    """Run every operation on A and B."""
    try:
        division: float | None = divide(a, b)
    except ZeroDivisionError:
        division = None
    return Results(
        add(a, b),
        subtract(a, b),
        multiply(a, b),
        division,
        factorial(a),
        factorial(b),
    )


def render_menu(a: int | None, b: int | None, results: Results | None) -> str:
    """Render the menu, showing the operands and, when given, the results."""
    a_text = "x" if a is None else str(a)
    b_text = "y" if b is None else str(b)
    head = (
        f"1. Ingresar 1er operando (A={a_text})\n"
        f"2. Ingresar 2do operando (B={b_text})\n"
        "3. Calcular todas las operaciones\n"
        "\ta) Calcular la suma (A+B)\n"
        "\tb) Calcular la resta (A-B)\n"
        "\tc) Calcular la division (A/B)\n"
        "\td) Calcular la multiplicacion (A*B)\n"
        "\te) Calcular el factorial (A!)\n"
        "4. Informar resultados\n"
    )
    if results is None:
        body = (
            "\ta) El resultado de A+B es: r\n"
            "\tb) El resultado de A-B es: r\n"
            "\tc) El resultado de A/B es: r\n"
            "\td) El resultado de A*B es: r\n"
            "\te) El factorial de A es: r1 y El factorial de B es: r2\n"
        )
    else:
        if results.division is None:
            division = "\tc) No es posible dividir por cero\n"
        else:
            division = f"\tc) El resultado de A/B es: {results.division:.2f}\n"
        body = (
            f"\ta) El resultado de A+B es: {results.addition}\n"
            f"\tb) El resultado de A-B es: {results.subtraction}\n"
            f"{division}"
            f"\td) El resultado de A*B es: {results.multiplication}\n"
            f"\te) El factorial de A es: {results.factorial_a}"
            f" y El factorial de B es: {results.factorial_b}\n"
        )
    return f"{head}{body}5. Salir\n"


def run(prompter: Prompter | None = None) -> Results | None:
    """Run the calculator menu until option 5; return the last results computed."""
    prompter = prompter if prompter is not None else Prompter()
    a: int | None = None
    b: int | None = None
    computed: Results | None = None
    informed = False
    while True:
        prompter.say(render_menu(a, b, computed if informed else None))
        choice = prompter.read_int("", "")
        if choice == 1:
            prompter.say("Ingrese valor de A\n")
            a = prompter.read_int("", "")
        elif choice == 2:
            prompter.say("Ingrese valor de B\n")
            b = prompter.read_int("", "")
        elif choice == 3:
            if a is None or b is None:
                prompter.say("Falta ingresar un valor\n")
            else:
                computed = compute(a, b)
        elif choice == 4:
            if computed is None:
                prompter.say("Falta realizar los calculos\n")
            else:
                informed = True
        elif choice == 5:
            return computed


def main(argv: list[str] | None = None) -> int:
    """Start the calculator on the console."""
    parser = argparse.ArgumentParser(description="Two-operand calculator.")
    parser.parse_args(argv)
    try:
        run(Prompter())
    except (EOFError, KeyboardInterrupt):
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
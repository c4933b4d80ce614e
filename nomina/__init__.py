"""Console tools for staff payroll records and a two-operand calculator."""

__version__ = "0.1.0"
__all__ = [
    "calculator",
    "controller",
    "employee",
    "int_arrays",
    "prompts",
    "staff_table",
    "storage",
    "validation",
]
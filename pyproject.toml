[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nomina"
version = "0.1.0"
description = "Interactive console tools for keeping staff payroll records, plus a two-operand calculator"
requires-python = ">=3.10"
dependencies = []
keywords = ["payroll", "employees", "csv", "console", "menu", "calculator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nomina = "nomina.controller:main"
nomina-table = "nomina.staff_table:main"
nomina-calc = "nomina.calculator:main"

[tool.hatch.build.targets.wheel]
packages = ["nomina"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

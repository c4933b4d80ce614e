# nomina

Small interactive console programs for keeping track of a company's staff,
and a two-operand calculator. The menus and messages are in Spanish.

## Installing

    pip install .

To run the test suite as well:

    pip install ".[test]"
    pytest

Python 3.10 or later is required. There are no runtime dependencies.

## Commands

Every command reads from standard input and writes to standard output.
Pausing screens wait for Enter. Ending the input (Ctrl-D) or pressing
Ctrl-C leaves the program quietly.

### `nomina`: employee records

    nomina [--text data.csv] [--binary data.bin]

This menu-driven program keeps a list of employees in memory. Each employee
has an id, a name, hours worked and a salary. The id, hours and salary must
all be greater than zero. The menu offers:

1. Load employees from the text file (`--text`, by default `data.csv`).
   This only works while the list is empty.
2. Load employees from the binary file (`--binary`, by default `data.bin`).
   This also only works while the list is empty.
3. Add an employee. This is only possible once employees have been loaded.
   The name may contain letters only, up to 100 characters. The salary must
   be between 1 and 999999. The new id is one more than the highest id seen
   so far.
4. Edit the name, hours worked or salary of the employee with a given id.
5. Remove the employee with a given id, after confirming with `s` or `n`.
6. List all employees in a table.
7. Sort by id, hours or salary, ascending or descending. Employees that
   compare equal keep their order.
8. Save to the text file.
9. Save to the binary file.
10. Exit.

Menu prompts allow a limited number of attempts. When they run out, the
program prints `Intentos Agotados` and returns to the main menu. Saving
requires at least one employee.

**Text format.** The file is CSV. Its first line is the header
`id,nombre,horasTrabajadas,Sueldo`, followed by one employee per line.
Blank lines are skipped.

**Binary format.** The file is a sequence of fixed-size records with no
header. Each record holds, in little-endian order:

- a 32-bit id
- the name in UTF-8, NUL-padded to 128 bytes
- 32-bit hours worked
- a 32-bit salary

A trailing partial record is ignored.

### `nomina-table`: fixed-size staff table

    nomina-table [--size 1000]

This is a simpler register with a fixed number of slots. Each member has an
id, a first name, a last name, a salary and a sector. The menu offers:

- **Add a member.** Names must be letters only and are stored capitalised.
  The salary must be strictly between 0 and 1,000,000. The sector runs from
  1 to 10.
- **Modify** a member's first name, last name, salary or sector.
- **Remove** a member by id.
- **List members**, sorted by last name and then sector.
- **Report salaries:** the total salary, the average salary and how many
  members earn more than the average.

The table lives in memory only and is not saved to a file.

### `nomina-calc`: two-operand calculator

    nomina-calc

You enter operands A and B, then ask for every result at once. Option 4
shows the results in the menu:

- A+B
- A−B
- A/B, to two decimals. Division by zero is reported instead.
- A×B
- A! and B!

A negative operand has a factorial of 1.

## Using it as a library

**`nomina.validation`** holds checks on typed text:

- `is_int_text`, `is_float_text`, `is_alphabetic`, `is_alphabetic_with_spaces`
- `is_cuit`, `is_dni`
- `in_open_range`, `is_name`
- `format_name`

**`nomina.int_arrays`** holds helpers for integer lists in which zero marks
a free slot: `new_int_array`, `place_first_free`, `place_at`,
`format_int_array` and `bubble_sort_descending`. The last one returns the
number of comparisons it made.

**`nomina.prompts.Prompter(reader, writer)`** asks validated questions on any
pair of text streams. It uses standard input and output by default. Its
`read_*` methods and `confirm` implement the prompts used by the commands.
When a prompt with a retry limit runs out of attempts, it raises
`RetriesExhausted`.

**`nomina.employee`** defines the employee record and its table format:

- `Employee`, with `from_fields`, `rename`, `set_hours_worked`,
  `set_salary` and `format_row`
- `format_header` and `format_rule`
- the comparators `compare_by_id`, `compare_by_hours` and
  `compare_by_salary`, used with `sort_employees`

**`nomina.storage`** reads and writes both file formats:

- on streams: `parse_text`, `write_text`, `parse_binary`, `write_binary`
- on paths: `load_text`, `save_text`, `load_binary`, `save_binary`

**`nomina.controller`** holds the `nomina` command:

- `EmployeeManager`, which has one method per menu action
- `run(prompter, text_path, binary_path)`

**`nomina.staff_table`** holds the fixed-slot register:

- `StaffTable`, with `add`, `find_by_id`, `remove`, `sort`,
  `average_salary` and `format_table`
- `StaffMember` and `TableFull`
- `SalaryReport` and `format_salary_report`
- `register_member`, `modify_member` and `run`

**`nomina.calculator`** provides:

- `add`, `subtract`, `multiply`, `divide` and `factorial`
- `compute`, which returns a `Results`
- `render_menu` and `run`
import io

import pytest

from nomina.employee import Employee
from nomina.storage import (
    load_binary,
    load_text,
    parse_binary,
    parse_text,
    save_binary,
    save_text,
    write_binary,
    write_text,
)

STAFF = [
    Employee(11, "Za", 1, 1000),
    Employee(20, "Zb", 1, 1000),
    Employee(3, "Xd", 2, 2000),
]


def test_write_text_starts_with_header():
    buffer = io.StringIO()
    write_text(buffer, STAFF[:1])
    lines = buffer.getvalue().splitlines()
    assert lines[0] == "id,nombre,horasTrabajadas,Sueldo"
    assert lines[1].split(",") == ["11", "Za", "1", "1000"]


def test_text_round_trip():
    buffer = io.StringIO()
    write_text(buffer, STAFF)
    buffer.seek(0)
    assert parse_text(buffer) == STAFF


def test_parse_text_skips_header_and_blank_lines():
    text = "id,nombre,horasTrabajadas,sueldo\n7,Ana,12,300\n\n8,Luis,5,600\n"
    assert parse_text(io.StringIO(text)) == [
        Employee(7, "Ana", 12, 300),
        Employee(8, "Luis", 5, 600),
    ]


def test_parse_text_empty_stream():
    assert parse_text(io.StringIO("")) == []


def test_parse_text_rejects_short_line():
    with pytest.raises(ValueError, match="line 2"):
        parse_text(io.StringIO("header\n1,Ana,3\n"))


def test_parse_text_rejects_invalid_values():
    with pytest.raises(ValueError, match="line 3"):
        parse_text(io.StringIO("header\n1,Ana,3,4\n0,Luis,3,4\n"))


def test_binary_record_size():
    buffer = io.BytesIO()
    write_binary(buffer, STAFF)
    assert len(buffer.getvalue()) == 140 * len(STAFF)


def test_binary_round_trip():
    buffer = io.BytesIO()
    write_binary(buffer, STAFF)
    buffer.seek(0)
    assert parse_binary(buffer) == STAFF


def test_parse_binary_ignores_partial_record():
    buffer = io.BytesIO()
    write_binary(buffer, STAFF)
    data = buffer.getvalue() + b"\x01\x02\x03"
    assert parse_binary(io.BytesIO(data)) == STAFF


def test_file_round_trips(tmp_path):
    text_path = tmp_path / "data.csv"
    binary_path = tmp_path / "data.bin"
    save_text(text_path, STAFF)
    save_binary(binary_path, STAFF)
    assert load_text(text_path) == STAFF
    assert load_binary(binary_path) == STAFF


def test_save_refuses_empty_list_and_leaves_no_file(tmp_path):
    text_path = tmp_path / "data.csv"
    binary_path = tmp_path / "data.bin"
    with pytest.raises(ValueError):
        save_text(text_path, [])
    with pytest.raises(ValueError):
        save_binary(binary_path, [])
    assert not text_path.exists()
    assert not binary_path.exists()


def test_load_missing_files(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_text(tmp_path / "missing.csv")
    with pytest.raises(FileNotFoundError):
        load_binary(tmp_path / "missing.bin")
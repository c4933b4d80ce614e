"""Console prompts that read and validate user input."""

from __future__ import annotations

import re
import sys
from typing import Callable, TextIO, TypeVar

from nomina.validation import (
    in_open_range,
    is_alphabetic,
    is_alphabetic_with_spaces,
    is_cuit,
    is_dni,
    is_float_text,
    is_int_text,
    is_name,
)

T = TypeVar("T")

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class RetriesExhausted(Exception):
    """Raised when the user gave no valid answer within the allowed attempts."""

    def __init__(self, last_input: object) -> None:
        super().__init__("no valid input within the allowed attempts")
        self.last_input = last_input


def _leading_int(text: str) -> int | None:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else None


def _leading_float(text: str) -> float | None:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else None


class Prompter:
    """Asks questions on *writer* and reads the answers from *reader*."""

    def __init__(self, reader: TextIO | None = None, writer: TextIO | None = None) -> None:
        self.reader = reader if reader is not None else sys.stdin
        self.writer = writer if writer is not None else sys.stdout

    # -- basic input/output -------------------------------------------------

    def say(self, text: str) -> None:
        """Write *text* as is."""
        self.writer.write(text)
        self.writer.flush()

    def pause(self) -> None:
        """Wait until the user presses Enter."""
        self.say("Presione Enter para continuar . . . ")
        self.reader.readline()

    def _read_line(self) -> str:
        line = self.reader.readline()
        if not line:
            raise EOFError("input ended")
        return line.rstrip("\r\n")

    def _exhausted(self, last_input: object) -> None:
        self.say("Intentos Agotados\n")
        self.pause()
        raise RetriesExhausted(last_input)

    def _retry(
        self,
        value: T,
        accept: Callable[[T], bool],
        complain: Callable[[T], None],
        reread: Callable[[], T],
        retries: int,
    ) -> T:
        """Ask again until *accept* holds; a limit below 2 means no limit."""
        remaining = retries
        while not accept(value):
            complain(value)
            value = reread()
            remaining -= 1
            if remaining == 1 and not accept(value):
                self._exhausted(value)
        return value

    # -- integers -----------------------------------------------------------

    def read_int(self, message: str, error_message: str) -> int:
        """Read an integer, asking again as long as the text is not one."""
        self.say(message)
        text = self._read_line().strip()
        while not is_int_text(text):
            self.say(error_message)
            text = self._read_line().strip()
        value = _leading_int(text)
        return 0 if value is None else value

    def _read_int_where(
        self,
        message: str,
        error_message: str,
        accept: Callable[[int], bool],
        complaint: str,
        retries: int,
    ) -> int:
        return self._retry(
            self.read_int(message, error_message),
            accept,
            lambda _value: self.say(complaint),
            lambda: self.read_int(message, error_message),
            retries,
        )

    def read_int_range(
        self, message: str, error_message: str, minimum: int, maximum: int, retries: int
    ) -> int:
        """Read an integer between *minimum* and *maximum* inclusive."""
        return self._read_int_where(
            message,
            error_message,
            lambda value: minimum <= value <= maximum,
            f"ERROR, Fuera de rango -> [MIN]={minimum} [MAX]={maximum}.\n",
            retries,
        )

    def read_int_positive(self, message: str, error_message: str, retries: int) -> int:
        """Read an integer that is zero or more."""
        return self._read_int_where(
            message,
            error_message,
            lambda value: value >= 0,
            "ERROR, Solo numeros positivos\n",
            retries,
        )

    def read_int_negative(self, message: str, error_message: str, retries: int) -> int:
        """Read an integer that is zero or less."""
        return self._read_int_where(
            message,
            error_message,
            lambda value: value <= 0,
            "ERROR, Solo numeros negativos\n",
            retries,
        )

    # -- floats -------------------------------------------------------------

    def read_float(self, message: str, error_message: str, retries: int) -> float:
        """Read a decimal number; ',' is accepted as the decimal mark."""
        self.say(message)
        text = self._retry(
            self._read_line().strip(),
            is_float_text,
            lambda _text: self.say(error_message),
            lambda: self._read_line().strip(),
            retries,
        )
        value = _leading_float(text.replace(",", "."))
        return 0.0 if value is None else value

    def read_float_range(
        self,
        message: str,
        error_message: str,
        minimum: float,
        maximum: float,
        retries: int,
    ) -> float:
        """Read a decimal number between *minimum* and *maximum* inclusive."""
        return self._retry(
            self.read_float(message, error_message, retries),
            lambda value: minimum <= value <= maximum,
            lambda _value: self.say(
                f"ERROR, Fuera de rango -> [MIN]={minimum:.2f} [MAX]={maximum:.2f}.\n"
            ),
            lambda: self.read_float(message, error_message, retries),
            retries,
        )

    # -- characters and strings ----------------------------------------------

    def read_char(self, message: str, error_message: str, retries: int) -> str:
        """Read a single letter."""
        self.say(message)
        line = self._retry(
            self._read_line(),
            lambda text: len(text) == 1 and is_alphabetic(text),
            lambda _text: self.say(error_message),
            self._read_line,
            retries,
        )
        return line[0]

    def _read_text(
        self,
        message: str,
        error_message: str,
        size: int,
        retries: int,
        check: Callable[[str], bool],
        format_complaint: str,
    ) -> str:
        def fits(text: str) -> bool:
            return 0 < len(text) <= size

        def complain(text: str) -> None:
            if fits(text):
                self.say(format_complaint)
            else:
                self.say(
                    f"Error, fuera de rango -> Caracteres [MIN] = 1 [MAX] = {size} \n"
                )
            self.say(error_message)

        self.say(message)
        return self._retry(
            self._read_line(),
            lambda text: fits(text) and check(text),
            complain,
            self._read_line,
            retries,
        )

    def read_string(self, message: str, error_message: str, size: int, retries: int) -> str:
        """Read a non-empty line of at most *size* characters."""

        def complain(_text: str) -> None:
            self.say(f"Error, Fuera de rango -> Caracteres [MIN] = 1 [MAX] = {size} \n")
            self.say(error_message)

        self.say(message)
        return self._retry(
            self._read_line(),
            lambda text: 0 < len(text) <= size,
            complain,
            self._read_line,
            retries,
        )

    def read_alphabetic(
        self, message: str, error_message: str, size: int, retries: int
    ) -> str:
        """Read a word of letters only, at most *size* long."""
        return self._read_text(
            message, error_message, size, retries, is_alphabetic, "\n"
        )

    def read_alphabetic_with_spaces(
        self, message: str, error_message: str, size: int, retries: int
    ) -> str:
        """Read letters and spaces, at most *size* long."""
        return self._read_text(
            message,
            error_message,
            size,
            retries,
            is_alphabetic_with_spaces,
            "Error, solo caracteres alfabeticos validos \n",
        )

    def read_cuil(self, message: str, error_message: str, size: int, retries: int) -> str:
        """Read a CUIL in the form XX-XXXXXXXX-X."""
        return self._read_text(
            message,
            error_message,
            size,
            retries,
            is_cuit,
            "Error, solo formato [XX-XXXXXXXX-X] \n",
        )

    def read_dni(self, message: str, error_message: str, retries: int) -> str:
        """Read a document number of seven or eight digits."""
        self.say(message)
        return self._retry(
            self._read_line(),
            is_dni,
            lambda _text: self.say(error_message),
            self._read_line,
            retries,
        )

    def confirm(self, message: str, error_message: str, retries: int) -> bool:
        """Ask a yes/no question answered with 's' or 'n'."""
        answer = self.read_char(message, error_message, retries).upper()
        while answer not in ("S", "N"):
            self.say("Error, opcion no valida")
            answer = self.read_char(message, error_message, retries).upper()
        return answer == "S"

    # -- unlimited prompts ----------------------------------------------------

    def read_number_open_range(
        self, message: str, error_message: str, minimum: int, maximum: int
    ) -> int:
        """Read an integer strictly between *minimum* and *maximum*."""
        while True:
            self.say(f"\n{message}")
            value = _leading_int(self._read_line())
            if value is not None and in_open_range(value, minimum, maximum):
                return value
            self.say(error_message)

    def read_float_open_range(
        self, message: str, error_message: str, minimum: float, maximum: float
    ) -> float:
        """Read a decimal number strictly between *minimum* and *maximum*."""
        while True:
            self.say(f"\n{message}")
            value = _leading_float(self._read_line())
            if value is not None and in_open_range(value, minimum, maximum):
                return value
            self.say(error_message)

    def read_name(self, message: str, error_message: str) -> str:
        """Read a non-empty name made of letters only."""
        while True:
            self.say(message)
            text = self._read_line()
            if text and is_name(text):
                return text
            self.say(f"{error_message}\n")
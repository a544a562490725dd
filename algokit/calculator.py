"""Interactive four-function calculator."""

from __future__ import annotations

import operator
import re
import sys
from typing import Callable, Dict, Optional, Pattern, Sequence, TextIO

_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INTEGER = re.compile(r"[+-]?\d+")

DIVISION_BY_ZERO = "delenie nulou nie je mozne!"


class _Console:
    """Token-wise reading from a line-oriented text stream.

    Every read raises EOFError once the stream is exhausted.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._rest: Optional[str] = None

    def _next_line(self) -> str:
        line = self._stream.readline()
        if not line:
            raise EOFError("end of input")
        return line.rstrip("\r\n")

    def _skip_space(self) -> str:
        while self._rest is None or not self._rest.strip():
            self._rest = self._next_line()
        self._rest = self._rest.lstrip()
        return self._rest

    def token(self) -> str:
        """Next whitespace-delimited word."""
        text = self._skip_space()
        word = text.split(maxsplit=1)[0]
        self._rest = text[len(word):]
        return word

    def char(self) -> str:
        """Next non-blank character."""
        text = self._skip_space()
        self._rest = text[1:]
        return text[0]

    def match(self, pattern: Pattern[str]) -> Optional[str]:
        """Consume a prefix matching ``pattern``; None leaves the input untouched."""
        text = self._skip_space()
        found = pattern.match(text)
        if found is None:
            return None
        self._rest = text[found.end():]
        return found.group()

    def number(self) -> Optional[float]:
        """Next floating-point number, or None if the input does not start with one."""
        text = self.match(_NUMBER)
        return None if text is None else float(text)

    def integer(self) -> Optional[int]:
        """Next integer, or None if the input does not start with one."""
        text = self.match(_INTEGER)
        return None if text is None else int(text)

    def line(self) -> str:
        """The rest of the current line, or the next line if none is pending."""
        if self._rest is not None:
            rest, self._rest = self._rest, None
            return rest
        return self._next_line()

    def ignore(self) -> None:
        """Drop a single pending character, the line end included."""
        if self._rest:
            self._rest = self._rest[1:]
        else:
            self._rest = None

    def discard_line(self) -> None:
        """Drop whatever is left of the current line."""
        self._rest = None


def _divide(a: float, b: float) -> float:
    if b == 0:
        raise ZeroDivisionError(DIVISION_BY_ZERO)
    return a / b


OPERATIONS: Dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
}


def calculate(a: float, operation: str, b: float) -> float:
    """Apply one of ``+ - * /`` to two numbers.

    Raises ZeroDivisionError when dividing by zero and ValueError for an
    unknown operation.
    """
    try:
        function = OPERATIONS[operation]
    except KeyError:
        raise ValueError(f"unknown operation {operation!r}") from None
    return function(float(a), float(b))


def _format(value: float) -> str:
    return f"{value:g}"


def _read_number(console: _Console) -> float:
    while True:
        value = console.number()
        if value is not None:
            return value
        console.discard_line()
        sys.stdout.write("neplatny vstup; prosim zadajte cislo: ")


def _read_operation(console: _Console) -> str:
    while True:
        symbol = console.char()
        if symbol in OPERATIONS:
            return symbol
        console.discard_line()
        sys.stdout.write("neplatna operacia; zadajte jednu z moznosti (+, -, *, /): ")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Repeatedly read two numbers and an operation and print the result."""
    console = _Console(sys.stdin)
    out = sys.stdout
    answer = "y"
    try:
        while answer == "y":
            out.write("zadajte prve cislo: ")
            first = _read_number(console)
            out.write("zadajte druhe cislo: ")
            second = _read_number(console)
            out.write("zadajte operaciu (+, -, *, /): ")
            symbol = _read_operation(console)
            try:
                result = calculate(first, symbol, second)
                out.write(f"{_format(first)} {symbol} {_format(second)} = {_format(result)}\n")
            except ZeroDivisionError as error:
                out.write(f"error: {error}\n")
            except ArithmeticError:
                out.write("nastala neocakavana chyba!\n")
            out.write("\nchcete pokracovat? (y/n): ")
            answer = console.char().lower()
    except EOFError:
        pass
    return 0
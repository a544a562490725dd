"""Last-in first-out stack with an interactive menu."""

from __future__ import annotations

import sys
from typing import Callable, Dict, Generic, Iterator, List, Optional, Sequence, TypeVar, Union

from algokit.calculator import _Console

T = TypeVar("T")

EMPTY_MESSAGE = "chyba: zasobnik je prazdny!"


class Stack(Generic[T]):
    """A stack of values."""

    def __init__(self) -> None:
        self._items: List[T] = []

    def push(self, value: T) -> None:
        """Put ``value`` on top."""
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top value; raises IndexError when empty."""
        if not self._items:
            raise IndexError(EMPTY_MESSAGE)
        return self._items.pop()

    def top(self) -> T:
        """The top value; raises IndexError when empty."""
        if not self._items:
            raise IndexError(EMPTY_MESSAGE)
        return self._items[-1]

    def empty(self) -> bool:
        """Report whether the stack holds nothing."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Values from the top down."""
        return reversed(self._items)


Value = Union[int, float, str]


def _invalid() -> None:
    sys.stdout.write("neplatny vstup pre tento datovy typ!\n")


def _read_int(console: _Console) -> Optional[int]:
    value = console.number()
    if value is None:
        console.discard_line()
        _invalid()
        return None
    if value.is_integer():
        return int(value)
    sys.stdout.write("neplatny vstup: cislo musi byt cele!\n")
    return None


def _read_float(console: _Console) -> Optional[float]:
    value = console.number()
    if value is None:
        console.discard_line()
        _invalid()
    return value


def _read_text(console: _Console) -> str:
    return console.token()


_READERS: Dict[int, Callable[[_Console], Optional[Value]]] = {
    1: _read_int,
    2: _read_float,
    3: _read_text,
}


def _show(value: Value) -> str:
    return f"{value:g}" if isinstance(value, float) else str(value)


def _operate(console: _Console, reader: Callable[[_Console], Optional[Value]]) -> None:
    stack: Stack[Value] = Stack()
    out = sys.stdout
    while True:
        out.write("\n1 - push\n2 - pop\n3 - top\n4 - empty\n5 - vypis\n0 - koniec\n>> ")
        choice = _read_int(console)
        if choice is None:
            continue
        try:
            if choice == 1:
                out.write("zadajte hodnotu: ")
                value = reader(console)
                if value is not None:
                    stack.push(value)
            elif choice == 2:
                stack.pop()
            elif choice == 3:
                out.write(f"vrchol zasobnika: {_show(stack.top())}\n")
            elif choice == 4:
                out.write("zasobnik je prazdny\n" if stack.empty() else "zasobnik nie je prazdny\n")
            elif choice == 5:
                out.write(
                    "obsah zasobnika (vrchol dolu): "
                    + "".join(f"{_show(value)} " for value in stack)
                    + "\n"
                )
            elif choice == 0:
                return
            else:
                out.write("neplatna volba!\n")
        except IndexError as error:
            print(error, file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Choose a value type, then push, pop and inspect a stack from standard input."""
    console = _Console(sys.stdin)
    sys.stdout.write("vyberte typ dat:\n1 - int\n2 - double\n3 - string\n0 - koniec\n>> ")
    try:
        choice = _read_int(console)
        if choice is None:
            return 1
        if choice == 0:
            return 0
        reader = _READERS.get(choice)
        if reader is None:
            sys.stdout.write("neplatna volba!\n")
            return 0
        _operate(console, reader)
    except EOFError:
        pass
    return 0
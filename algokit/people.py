"""A file of names and ages, one person per line."""

from __future__ import annotations

import os
import re
import sys
from typing import Iterator, Optional, Sequence, Tuple, Union

from algokit.calculator import _Console

FILENAME = "people.txt"

_INTEGER = re.compile(r"[+-]?\d+")

Record = Tuple[str, int]


def _parse_record(line: str) -> Optional[Record]:
    words = line.split()
    if len(words) < 2:
        return None
    age = _INTEGER.match(words[1])
    if age is None:
        return None
    return words[0], int(age.group())


class PeopleRegistry:
    """People stored as ``name age`` lines in a text file."""

    def __init__(self, path: Union[str, os.PathLike] = FILENAME) -> None:
        self.path = path

    def _records(self) -> Iterator[Optional[Record]]:
        with open(self.path, encoding="utf-8") as handle:
            for line in handle:
                yield _parse_record(line)

    def contains(self, name: str) -> bool:
        """Report whether a well-formed line has ``name``; False if the file is missing."""
        try:
            return any(record is not None and record[0] == name for record in self._records())
        except OSError:
            return False

    def add(self, name: str, age: int) -> None:
        """Append a person; raises ValueError for a known name or an age below 1."""
        if age <= 0:
            raise ValueError("age must be positive")
        if self.contains(name):
            raise ValueError(f"name {name!r} already exists")
        with open(self.path, "a", encoding="utf-8") as handle:
            handle.write(f"{name} {age}\n")

    def find(self, name: str) -> Optional[int]:
        """Age of the first person called ``name``, or None; malformed lines are skipped."""
        for record in self._records():
            if record is not None and record[0] == name:
                return record[1]
        return None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains(name)


def _add_person(console: _Console, registry: PeopleRegistry) -> None:
    try:
        open(registry.path, "a", encoding="utf-8").close()
    except OSError:
        print("chyba pri otvarani suboru na zapis!", file=sys.stderr)
        return
    while True:
        sys.stdout.write("zadajte meno: ")
        name = console.line()
        if not registry.contains(name):
            break
        print("meno uz existuje! zadajte prosim ine meno", file=sys.stderr)
    while True:
        sys.stdout.write("zadajte vek: ")
        age = console.integer()
        if age is None or age <= 0:
            console.discard_line()
            print("neplatny vstup! zadajte prosim cislo vacsie alebo rovne ako 0", file=sys.stderr)
        else:
            console.ignore()
            break
    registry.add(name, age)
    print(f"osoba '{name}' s vekom {age} bola pridana!")


def _search_person(console: _Console, registry: PeopleRegistry) -> None:
    try:
        records = list(registry._records())
    except OSError:
        print("chyba pri otvarani suboru na citanie!", file=sys.stderr)
        return
    sys.stdout.write("zadajte meno na vyhladanie: ")
    name = console.line()
    for record in records:
        if record is None:
            print("nespravny format udajov v subore!", file=sys.stderr)
            continue
        if record[0] == name:
            print(f"najdene: {record[0]} - vek: {record[1]}")
            return
    print(f"osoba s menom '{name}' nebola najdena")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Menu for adding and looking up people in the file in the working directory."""
    console = _Console(sys.stdin)
    registry = PeopleRegistry()
    try:
        while True:
            sys.stdout.write("1 - pridat osobu\n2 - vyhladat osobu\n0 - koniec\n>> ")
            choice = console.integer() or 0
            console.ignore()
            if choice == 0:
                break
            if choice == 1:
                _add_person(console, registry)
            elif choice == 2:
                _search_person(console, registry)
            else:
                print("neplatna volba!", file=sys.stderr)
    except EOFError:
        pass
    return 0
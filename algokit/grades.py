"""Student grades with average, median and best/worst statistics."""

from __future__ import annotations

import re
import statistics
import sys
from typing import Dict, Iterable, List, Optional, Sequence

from algokit.calculator import _Console

_LEADING_INT = re.compile(r"-?\d+")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1
_BEST, _WORST = 1, 5


def average(grades: Sequence[int]) -> float:
    """Arithmetic mean; raises ValueError for no grades."""
    if not grades:
        raise ValueError("no grades")
    return sum(grades) / len(grades)


def median(grades: Iterable[int]) -> float:
    """Middle value, or the mean of the two middle values; raises ValueError for no grades."""
    return float(statistics.median(grades))


def parse_grade(text: str) -> int:
    """Read an integer made of digits and minus signs; raises ValueError otherwise.

    Only the leading integer counts, so ``"1-2"`` reads as 1.
    """
    if not text or text == "-":
        raise ValueError(f"not a grade: {text!r}")
    if any(not (char.isdigit() and char.isascii()) and char != "-" for char in text):
        raise ValueError(f"not a grade: {text!r}")
    found = _LEADING_INT.match(text)
    if found is None:
        raise ValueError(f"not a grade: {text!r}")
    value = int(found.group())
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"grade out of range: {text!r}")
    return value


class Gradebook:
    """Grades of students, kept by name."""

    def __init__(self) -> None:
        self._students: Dict[str, List[int]] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._students

    def __len__(self) -> int:
        return len(self._students)

    def __getitem__(self, name: str) -> List[int]:
        return list(self._students[name])

    def add(self, name: str, grades: Iterable[int]) -> None:
        """Set the grades of ``name``; they must be non-empty and between 1 and 5."""
        values = list(grades)
        if not values:
            raise ValueError("student musi mat aspon jednu znamku!")
        if any(not _BEST <= grade <= _WORST for grade in values):
            raise ValueError("neplatna znamka! zadajte hodnotu 1-5")
        self._students[name] = values

    def remove(self, name: str) -> bool:
        """Remove ``name``; return False if unknown."""
        return self._students.pop(name, None) is not None

    def report(self) -> str:
        """Statistics of every student in name order."""
        if not self._students:
            return "ziadni studenti nie su zadani\n"
        parts: List[str] = []
        for name, grades in sorted(self._students.items()):
            parts.append(f"\nstudent: {name}\n")
            parts.append("znamky: " + "".join(f"{grade} " for grade in grades) + "\n")
            if len(grades) < 3:
                parts.append("nedostatok dat pre presne statistiky!\n")
                continue
            parts.append(f"priemer: {average(grades):g}\n")
            parts.append(f"median: {median(grades):g}\n")
            parts.append(f"najlepsia znamka: {min(grades)}\n")
            parts.append(f"najhorsia znamka: {max(grades)}\n")
        return "".join(parts)


def _read_grades(console: _Console) -> List[int]:
    grades: List[int] = []
    try:
        while True:
            try:
                grade = parse_grade(console.token())
            except ValueError:
                sys.stdout.write("neplatny vstup! zadajte cislo\n")
                continue
            if grade == -1:
                break
            if _BEST <= grade <= _WORST:
                grades.append(grade)
            else:
                sys.stdout.write("neplatna znamka! zadajte hodnotu 1-5\n")
    except EOFError:
        pass
    return grades


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Menu for adding and removing students and printing their statistics."""
    console = _Console(sys.stdin)
    book = Gradebook()
    out = sys.stdout
    choice = 0
    try:
        while choice != 4:
            out.write(
                "1 - pridat studenta a znamky\n2 - odstranit studenta\n"
                "3 - zobrazit statistiky\n0 - koniec\n>> "
            )
            choice = console.integer() or 0
            if choice == 1:
                out.write("zadajte meno studenta: ")
                name = console.token()
                out.write("zadajte znamky (ukoncite -1): ")
                grades = _read_grades(console)
                if grades:
                    book.add(name, grades)
                else:
                    out.write("student musi mat aspon jednu znamku!\n")
            elif choice == 2:
                out.write("zadajte meno studenta na odstranenie: ")
                name = console.token()
                if book.remove(name):
                    out.write(f"student '{name}' bol odstraneny\n")
                else:
                    out.write(f"student s menom '{name}' neexistuje\n")
            elif choice == 3:
                out.write(book.report())
            elif choice == 0:
                break
            else:
                out.write("neplatna volba! Skuste znova.\n")
    except EOFError:
        pass
    return 0
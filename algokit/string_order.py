"""Order strings: those without digits first, then by length, then alphabetically."""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional, Sequence, Tuple

_DIGITS = frozenset("0123456789")


def contains_digit(text: str) -> bool:
    """Report whether ``text`` holds an ASCII digit."""
    return any(char in _DIGITS for char in text)


def _order_key(text: str) -> Tuple[bool, int, str]:
    return contains_digit(text), len(text), text


def order_strings(strings: Iterable[str]) -> List[str]:
    """Strings without digits before those with, each group by length then text."""
    return sorted(strings, key=_order_key)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read lines until an empty one and print them in order."""
    sys.stdout.write("zadajte retazce (ukoncite prazdnym riadkom):\n")
    strings: List[str] = []
    for line in sys.stdin:
        line = line.removesuffix("\n")
        if not line:
            break
        strings.append(line)
    sys.stdout.write("zoradene retazce:\n")
    for text in order_strings(strings):
        sys.stdout.write(f"{text}\n")
    return 0
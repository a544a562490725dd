"""Fibonacci numbers and their even members."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

from algokit.calculator import _Console


def fibonacci(n: int) -> int:
    """The ``n``-th Fibonacci number; values of ``n`` up to 1 are returned as they are."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def generate_fibonacci(n: int) -> List[int]:
    """The first ``n`` Fibonacci numbers, starting from 0."""
    if n <= 0:
        return []
    values = [fibonacci(0), fibonacci(1)][:n]
    while len(values) < n:
        values.append(values[-1] + values[-2])
    return values


def even_fibonacci(n: int) -> List[int]:
    """The even numbers among the first ``n`` Fibonacci numbers."""
    return [value for value in generate_fibonacci(n) if value % 2 == 0]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a count from standard input and print the even Fibonacci numbers."""
    sys.stdout.write("zadajte pocet Fibonacciho cisel: ")
    try:
        count = _Console(sys.stdin).integer()
    except EOFError:
        count = None
    values = even_fibonacci(count or 0)
    sys.stdout.write("parne Fibonacciho cisla: " + "".join(f"{v} " for v in values) + "\n")
    return 0
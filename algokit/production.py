"""Smallest time in which production lines can finish a set of orders."""

from __future__ import annotations

import sys
from typing import Iterator, Optional, Sequence

MAX_TIME = 10**15
"""Upper bound of the searched time, also the answer when nothing fits."""


def can_complete_in_time(lines: Sequence[int], orders: Sequence[int], max_time: int) -> bool:
    """Report whether the orders fit when each line produces ``rate * max_time`` units.

    Orders are placed largest first, each on the line with the most
    remaining capacity that can still hold it.
    """
    capacity = [rate * max_time for rate in lines]
    for order in sorted(orders, reverse=True):
        fitting = [index for index, left in enumerate(capacity) if left >= order]
        if not fitting:
            return False
        best = max(fitting, key=capacity.__getitem__)
        capacity[best] -= order
    return True


def minimum_time(lines: Sequence[int], orders: Sequence[int]) -> int:
    """Smallest time in ``0..MAX_TIME`` for which the orders fit, else ``MAX_TIME``."""
    left, right = 0, MAX_TIME
    result = right
    while left <= right:
        mid = (left + right) // 2
        if can_complete_in_time(lines, orders, mid):
            result = mid
            right = mid - 1
        else:
            left = mid + 1
    return result


def _numbers() -> Iterator[int]:
    return (int(token) for token in sys.stdin.read().split())


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read line rates and orders from standard input and print the minimum time."""
    numbers = _numbers()
    try:
        line_count = next(numbers)
        order_count = next(numbers)
        lines = [next(numbers) for _ in range(line_count)]
        orders = [next(numbers) for _ in range(order_count)]
    except (StopIteration, ValueError, RuntimeError):
        print("Error: invalid input", file=sys.stderr)
        return 1
    print(minimum_time(lines, orders))
    return 0
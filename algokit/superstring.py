"""Assemble fragments into a short common superstring."""

from __future__ import annotations

import sys
from itertools import permutations
from typing import List, Optional, Sequence

EXHAUSTIVE_LIMIT = 10
"""Largest fragment count for which every ordering is tried."""


def find_overlap(a: str, b: str) -> int:
    """Length of the longest suffix of ``a`` that is also a prefix of ``b``."""
    return next(
        (size for size in range(min(len(a), len(b)), 0, -1) if a[-size:] == b[:size]),
        0,
    )


def _require(fragments: Sequence[str]) -> List[str]:
    items = list(fragments)
    if not items:
        raise ValueError("at least one fragment is required")
    return items


def shortest_superstring(fragments: Sequence[str]) -> str:
    """Shortest string from appending fragments in any order with maximal overlaps.

    Orders are tried lexicographically by position; the first shortest wins.
    """
    items = _require(fragments)
    if len(items) == 1:
        return items[0]
    best: Optional[str] = None
    for order in permutations(items):
        merged = order[0]
        for fragment in order[1:]:
            merged += fragment[find_overlap(merged, fragment) :]
        if best is None or len(merged) < len(best):
            best = merged
    return best


def greedy_superstring(fragments: Sequence[str]) -> str:
    """Superstring grown from the first fragment by the best-overlapping remaining one.

    Each step may join a fragment to either end of the result.
    """
    items = _require(fragments)
    result = items[0]
    pending = items[1:]
    while pending:
        best_overlap = -1
        best_position = 0
        best_merged = ""
        for position, fragment in enumerate(pending):
            at_end = find_overlap(result, fragment)
            at_start = find_overlap(fragment, result)
            if at_end > best_overlap:
                best_overlap = at_end
                best_position = position
                best_merged = result + fragment[at_end:]
            if at_start > best_overlap:
                best_overlap = at_start
                best_position = position
                best_merged = fragment + result[at_start:]
        result = best_merged
        del pending[best_position]
    return result


def assemble(fragments: Sequence[str]) -> str:
    """Exhaustive search for small inputs, the greedy merge otherwise."""
    if len(fragments) <= EXHAUSTIVE_LIMIT:
        return shortest_superstring(fragments)
    return greedy_superstring(fragments)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a count and fragments from standard input and print the superstring."""
    tokens = sys.stdin.read().split()
    try:
        count = int(tokens[0])
        fragments = tokens[1 : 1 + count]
        if len(fragments) != count:
            raise ValueError("too few fragments")
        result = assemble(fragments)
    except (IndexError, ValueError):
        print("Error: invalid input", file=sys.stderr)
        return 1
    sys.stdout.write(f"\n{result}")
    return 0
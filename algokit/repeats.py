"""Longest substring that occurs at least K times in a sequence."""

from __future__ import annotations

import sys
from collections import Counter
from typing import Optional, Sequence


def find_repeated(sequence: str, length: int, k: int) -> Optional[str]:
    """First substring of ``length`` characters to reach ``k`` occurrences, or None.

    Occurrences may overlap; substrings are scanned from left to right.
    """
    if length == 0 or length > len(sequence):
        return None
    counts: Counter[str] = Counter()
    for start in range(len(sequence) - length + 1):
        pattern = sequence[start : start + length]
        counts[pattern] += 1
        if counts[pattern] >= k:
            return pattern
    return None


def longest_repeated(sequence: str, k: int) -> str:
    """Longest substring found at least ``k`` times by binary search on its length.

    With ``k`` of 1 the whole sequence is returned; an empty string means
    nothing qualifies.
    """
    if k == 1:
        return sequence
    if len(sequence) < k or k <= 0:
        return ""
    low, high = 0, len(sequence)
    best = ""
    while low <= high:
        mid = low + (high - low + 1) // 2
        found = find_repeated(sequence, mid, k)
        if found is not None:
            best = found
            low = mid + 1
        else:
            high = mid - 1
    return best


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read ``N K`` and a sequence from standard input and print the result."""
    tokens = sys.stdin.read().split()
    try:
        n, k = int(tokens[0]), int(tokens[1])
        sequence = tokens[2]
    except (IndexError, ValueError):
        print("Error: invalid input", file=sys.stderr)
        return 1
    if k == 1:
        sys.stdout.write(f"{n}\n{sequence}\n")
        return 0
    if n < k or k <= 0:
        sys.stdout.write("0\n")
        return 0
    result = longest_repeated(sequence, k)
    if not result:
        sys.stdout.write("0\n")
    else:
        sys.stdout.write(f"\n{len(result)}\n{result}")
    return 0
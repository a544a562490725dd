"""Count subsets of positive integers that add up to a target sum."""

from __future__ import annotations

import re
import sys
from typing import Iterable, List, Optional, Sequence

from algokit.tree_report import read_numbers

_TARGET = re.compile(r"\s*[+-]?\d+")
_INT_MAX = 2**31 - 1


def count_subsets(numbers: Iterable[int], target: int) -> int:
    """Number of subsets whose sum reaches ``target``.

    A branch stops as soon as its running sum equals the target, so a
    target of zero is reached by the empty subset alone.
    """
    items = list(numbers)

    def walk(index: int, total: int) -> int:
        if total == target:
            return 1
        if total > target or index >= len(items):
            return 0
        return walk(index + 1, total + items[index]) + walk(index + 1, total)

    return walk(0, 0)


def parse_numbers(path: str) -> List[int]:
    """Positive integers from the first line of ``path``; others are reported and skipped."""
    numbers: List[int] = []
    for number in read_numbers(path, first_line_only=True):
        if number > 0:
            numbers.append(number)
        else:
            print(f"Warning: Ignoring non-positive number: {number}", file=sys.stderr)
    return numbers


def _parse_target(text: str) -> Optional[int]:
    match = _TARGET.match(text)
    if match is None:
        return None
    value = int(match.group())
    if not -_INT_MAX - 1 <= value <= _INT_MAX:
        return None
    return value


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print how many subsets of the file's numbers sum to the given target."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("Usage: subset <input_file> <target_sum>", file=sys.stderr)
        return 1
    filename, target_text = args
    target = _parse_target(target_text)
    if target is None:
        print("Error: Invalid target sum", file=sys.stderr)
        return 1
    if target <= 0:
        print("Error: Target sum must be a positive integer", file=sys.stderr)
        return 1
    try:
        numbers = parse_numbers(filename)
    except OSError:
        print(f"Error: Could not open file {filename}", file=sys.stderr)
        numbers = []
    if not numbers:
        print("Error: No valid numbers found in the input file", file=sys.stderr)
        return 1
    sys.stdout.write(str(count_subsets(numbers, target)))
    return 0
"""Decode a message by applying pattern replacements in sequence."""

from __future__ import annotations

import sys
from itertools import groupby
from typing import Optional, Sequence


def apply_transformation(message: str, pattern: str, replacement: str) -> str:
    """Replace occurrences of ``pattern`` in ``message`` by ``replacement``.

    Matches are found left to right without overlapping, and each run of
    directly adjacent matches is replaced by a single ``replacement``.
    """
    if not pattern:
        return message
    marked = [False] * len(message)
    index = 0
    while index < len(message):
        if message.startswith(pattern, index):
            marked[index : index + len(pattern)] = [True] * len(pattern)
            index += len(pattern)
        else:
            index += 1

    pieces = []
    for is_match, run in groupby(zip(message, marked), key=lambda pair: pair[1]):
        if is_match:
            pieces.append(replacement)
        else:
            pieces.extend(char for char, _ in run)
    return "".join(pieces)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a message and replacement rules from standard input; print the result."""
    tokens = sys.stdin.read().split()
    try:
        message = tokens[0]
        count = int(tokens[1])
        rules = tokens[2 : 2 + 2 * count]
        if len(rules) != 2 * count:
            raise ValueError("too few rules")
    except (IndexError, ValueError):
        print("Error: invalid input", file=sys.stderr)
        return 1
    for pattern, replacement in zip(rules[::2], rules[1::2]):
        message = apply_transformation(message, pattern, replacement)
    sys.stdout.write(f"\n{message}")
    return 0
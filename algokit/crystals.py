"""Count the "real" crystals among signatures: those whose digit-sorted form differs by a multiple of K."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, Optional, Sequence, Tuple


def sort_digits(num: int) -> int:
    """Return the number formed by sorting the characters of ``num`` ascending.

    Leading zeros of the result are dropped; a minus sign stays in front.
    """
    return int("".join(sorted(str(num))))


def real_crystals(signatures: Iterable[int], k: int) -> Tuple[int, int]:
    """Count and sum the signatures whose digit-sorted form differs by a multiple of ``k``."""
    if k == 0:
        raise ValueError("k must not be zero")
    matching = [
        signature
        for signature in signatures
        if (sort_digits(signature) - signature) % k == 0
    ]
    return len(matching), sum(matching)


def _tokens() -> Iterator[str]:
    return iter(sys.stdin.read().split())


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read ``N K`` and N signatures from standard input; print count and sum."""
    tokens = _tokens()
    try:
        count = int(next(tokens))
        k = int(next(tokens))
        signatures = [int(next(tokens)) for _ in range(count)]
        found, total = real_crystals(signatures, k)
    except (StopIteration, ValueError):
        print("Error: invalid input", file=sys.stderr)
        return 1
    sys.stdout.write(f"\n{found}\n{total}")
    return 0
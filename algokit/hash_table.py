"""Chained hash table with string keys, plus small hashing helpers for integer lists."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Tuple


class HashTable:
    """A fixed-size hash table of string keys and integer values.

    Colliding entries are chained in their bucket. Setting a key that is
    already present adds another entry rather than replacing the old one.
    """

    SIZE = 7

    def __init__(self) -> None:
        self._buckets: List[List[Tuple[str, int]]] = [[] for _ in range(self.SIZE)]

    def _hash(self, key: str) -> int:
        index = 0
        for char in key:
            index = (index + ord(char) * 23) % self.SIZE
        return index

    def set(self, key: str, value: int) -> None:
        """Append an entry for ``key`` to the end of its bucket."""
        self._buckets[self._hash(key)].append((key, value))

    def get(self, key: str) -> int:
        """Return the value of the first entry for ``key``, or 0 if there is none."""
        return next(
            (value for stored, value in self._buckets[self._hash(key)] if stored == key),
            0,
        )

    def keys(self) -> List[str]:
        """All keys, bucket by bucket and in chain order within each bucket."""
        return [key for bucket in self._buckets for key, _ in bucket]

    def format_table(self) -> str:
        """One line per bucket describing its contents."""
        lines = []
        for index, bucket in enumerate(self._buckets):
            if bucket:
                entries = ", ".join(f"{{{key}, {value}}}" for key, value in bucket)
                lines.append(f"Index {index}: Contains => {entries}")
            else:
                lines.append(f"Index {index}: Empty")
        return "\n".join(lines)


def find_duplicates(nums: Iterable[int]) -> List[int]:
    """Values that occur more than once, each listed once."""
    return [value for value, count in Counter(nums).items() if count > 1]


def item_in_common(first: Iterable[int], second: Iterable[int]) -> bool:
    """Report whether the two collections share at least one value."""
    return not set(first).isdisjoint(second)
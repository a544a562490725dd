"""Minimum spanning tree weight of a graph given as an adjacency matrix."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from operator import attrgetter
from typing import List, Optional, Sequence

_INTEGER = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class Edge:
    """A weighted undirected edge between two vertex indices."""

    src: int
    dest: int
    weight: int

    def __lt__(self, other: "Edge") -> bool:
        return self.weight < other.weight


class UnionFind:
    """Disjoint sets over ``0 .. n-1`` with path compression and union by rank."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._rank = [0] * n

    def find(self, x: int) -> int:
        """Representative of the set holding ``x``."""
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return False if already joined."""
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False
        if self._rank[root_x] < self._rank[root_y]:
            self._parent[root_x] = root_y
        elif self._rank[root_x] > self._rank[root_y]:
            self._parent[root_y] = root_x
        else:
            self._parent[root_y] = root_x
            self._rank[root_x] += 1
        return True


def kruskal_mst(matrix: Sequence[Sequence[int]]) -> int:
    """Total weight of a minimum spanning forest of the graph.

    Only the upper triangle of the matrix is read; a zero means no edge.
    """
    rows = [list(row) for row in matrix]
    size = len(rows)
    if any(len(row) < size for row in rows):
        raise ValueError("adjacency matrix must be square")
    edges = [
        Edge(i, j, weight)
        for i, row in enumerate(rows)
        for j, weight in enumerate(row[i + 1 : size], start=i + 1)
        if weight != 0
    ]
    edges.sort(key=attrgetter("weight"))

    sets = UnionFind(size)
    total = 0
    used = 0
    for edge in edges:
        if sets.union(edge.src, edge.dest):
            total += edge.weight
            used += 1
            if used == size - 1:
                break
    return total


def _leading_integers(line: str) -> List[int]:
    numbers: List[int] = []
    for token in line.split():
        match = _INTEGER.match(token)
        if match is None:
            break
        numbers.append(int(match.group()))
        if match.end() != len(token):
            break
    return numbers


def read_matrix(path: str) -> List[List[int]]:
    """Read one matrix row of integers per line, skipping lines without any."""
    with open(path, encoding="utf-8") as handle:
        rows = [_leading_integers(line) for line in handle]
    return [row for row in rows if row]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the minimum spanning tree weight of the matrix in a file."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: kruskal <input_file>", file=sys.stderr)
        return 1
    try:
        matrix = read_matrix(args[0])
    except OSError:
        print(f"Error: Could not open file {args[0]}", file=sys.stderr)
        return 1
    sys.stdout.write(str(kruskal_mst(matrix)))
    return 0
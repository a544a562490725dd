"""Undirected graph stored as an adjacency list of string vertices."""

from __future__ import annotations

from typing import Dict, FrozenSet, Set


class Graph:
    """An undirected graph without edge weights."""

    def __init__(self) -> None:
        self._adjacency: Dict[str, Set[str]] = {}

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def add_vertex(self, vertex: str) -> bool:
        """Add ``vertex``; return False if it already exists."""
        if vertex in self._adjacency:
            return False
        self._adjacency[vertex] = set()
        return True

    def add_edge(self, vertex1: str, vertex2: str) -> bool:
        """Connect two existing vertices; return False if either is missing."""
        if vertex1 not in self._adjacency or vertex2 not in self._adjacency:
            return False
        self._adjacency[vertex1].add(vertex2)
        self._adjacency[vertex2].add(vertex1)
        return True

    def remove_edge(self, vertex1: str, vertex2: str) -> bool:
        """Disconnect two existing vertices; return False if either is missing.

        Removing an edge that does not exist between existing vertices succeeds.
        """
        if vertex1 not in self._adjacency or vertex2 not in self._adjacency:
            return False
        self._adjacency[vertex1].discard(vertex2)
        self._adjacency[vertex2].discard(vertex1)
        return True

    def remove_vertex(self, vertex: str) -> bool:
        """Remove ``vertex`` and every edge touching it; return False if missing."""
        if vertex not in self._adjacency:
            return False
        for connected in set(self._adjacency[vertex]):
            self._adjacency[connected].discard(vertex)
        del self._adjacency[vertex]
        return True

    def neighbours(self, vertex: str) -> FrozenSet[str]:
        """Vertices adjacent to ``vertex``; raises KeyError if it does not exist."""
        return frozenset(self._adjacency[vertex])

    def format_graph(self) -> str:
        """One line per vertex, as ``vertex: [neighbour, ...]``."""
        return "\n".join(
            f"{vertex}: [{', '.join(sorted(edges))}]"
            for vertex, edges in self._adjacency.items()
        )
"""Shortest path through a tunnel network that must visit every checkpoint."""

from __future__ import annotations

import heapq
import sys
from itertools import permutations
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

UNREACHABLE = 2**31 - 1
"""Distance reported when no route exists."""

Route = Tuple[int, List[int]]


class QuantumTunnelSolver:
    """An undirected weighted graph of nodes numbered from 1 to ``nodes``."""

    def __init__(self, nodes: int, start: int, destination: int) -> None:
        self.nodes = nodes
        self.start = start
        self.destination = destination
        self.checkpoints: List[int] = []
        self._graph: List[List[Tuple[int, int]]] = [[] for _ in range(nodes + 1)]

    def _check(self, node: int) -> None:
        if not 1 <= node <= self.nodes:
            raise ValueError(f"node {node} is outside 1..{self.nodes}")

    def add_tunnel(self, source: int, target: int, length: int) -> None:
        """Connect two nodes by a tunnel of the given length in both directions."""
        self._check(source)
        self._check(target)
        self._graph[source].append((target, length))
        self._graph[target].append((source, length))

    def add_checkpoint(self, checkpoint: int) -> None:
        """Require the route to pass through ``checkpoint``."""
        self._check(checkpoint)
        self.checkpoints.append(checkpoint)

    def dijkstra(self, start: int, end: int) -> Route:
        """Shortest distance and node path from ``start`` to ``end``.

        Returns ``(UNREACHABLE, [])`` when ``end`` cannot be reached.
        """
        self._check(start)
        self._check(end)
        distance: Dict[int, int] = {start: 0}
        parent: Dict[int, int] = {}
        queue = [(0, start)]
        while queue:
            dist, node = heapq.heappop(queue)
            if dist > distance[node]:
                continue
            if node == end:
                break
            for following, length in self._graph[node]:
                candidate = dist + length
                if candidate < distance.get(following, UNREACHABLE):
                    distance[following] = candidate
                    parent[following] = node
                    heapq.heappush(queue, (candidate, following))

        if end not in distance:
            return UNREACHABLE, []
        path = [end]
        while path[-1] in parent:
            path.append(parent[path[-1]])
        path.reverse()
        return distance[end], path

    def shortest_path(self) -> Route:
        """Shortest route from start to destination visiting all checkpoints.

        Checkpoint orders are tried in lexicographic order; the first order
        reaching the smallest distance wins.
        """
        if not self.checkpoints:
            return self.dijkstra(self.start, self.destination)

        points = [self.start, *self.checkpoints, self.destination]
        last = len(points) - 1
        segments: Dict[Tuple[int, int], Route] = {}

        def segment(i: int, j: int) -> Route:
            if (i, j) not in segments:
                segments[i, j] = (
                    (0, [points[i]]) if i == j else self.dijkstra(points[i], points[j])
                )
            return segments[i, j]

        best_distance = UNREACHABLE
        best_path: List[int] = []
        for order in permutations(range(1, last)):
            route = (0, *order, last)
            total = 0
            path: List[int] = []
            for step, (i, j) in enumerate(zip(route, route[1:])):
                dist, nodes = segment(i, j)
                if not nodes:
                    break
                total += dist
                path.extend(nodes if step == 0 else nodes[1:])
            else:
                if total < best_distance:
                    best_distance = total
                    best_path = path
        return best_distance, best_path


def _tokens() -> Iterator[int]:
    return (int(token) for token in sys.stdin.read().split())


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read the network from standard input and print the best route."""
    numbers = _tokens()
    try:
        nodes, edges, start, destination = (next(numbers) for _ in range(4))
        solver = QuantumTunnelSolver(nodes, start, destination)
        for _ in range(next(numbers)):
            solver.add_checkpoint(next(numbers))
        for _ in range(edges):
            solver.add_tunnel(next(numbers), next(numbers), next(numbers))
        distance, path = solver.shortest_path()
    except (StopIteration, ValueError, RuntimeError):
        print("Error: invalid input", file=sys.stderr)
        return 1
    sys.stdout.write(f"\n{distance}\n" + " ".join(map(str, path)))
    return 0
import io

import pytest

from algokit.tunnels import UNREACHABLE, QuantumTunnelSolver, main

EDGES = [(1, 2, 1), (2, 3, 1), (1, 3, 5), (3, 4, 2), (2, 4, 7)]


def make_solver(start=1, destination=4, nodes=5):
    solver = QuantumTunnelSolver(nodes, start, destination)
    for source, target, length in EDGES:
        solver.add_tunnel(source, target, length)
    return solver


def path_length(path):
    lengths = {}
    for source, target, length in EDGES:
        for key in ((source, target), (target, source)):
            lengths[key] = min(lengths.get(key, length), length)
    return sum(lengths[step] for step in zip(path, path[1:]))


def test_dijkstra_takes_cheaper_detour():
    distance, path = make_solver().dijkstra(1, 3)
    assert path == [1, 2, 3]
    assert distance == 2


def test_dijkstra_path_matches_distance():
    distance, path = make_solver().dijkstra(1, 4)
    assert path[0] == 1 and path[-1] == 4
    assert path_length(path) == distance


def test_dijkstra_same_node():
    assert make_solver().dijkstra(2, 2) == (0, [2])


def test_unreachable_node():
    assert make_solver().dijkstra(1, 5) == (UNREACHABLE, [])


def test_without_checkpoints_equals_dijkstra():
    solver = make_solver()
    assert solver.shortest_path() == solver.dijkstra(1, 4)


def test_route_visits_checkpoints():
    solver = make_solver(start=1, destination=2)
    solver.add_checkpoint(4)
    solver.add_checkpoint(3)
    distance, path = solver.shortest_path()
    assert path[0] == 1 and path[-1] == 2
    assert {3, 4} <= set(path)
    assert path_length(path) == distance


def test_checkpoint_route_not_shorter_than_direct():
    solver = make_solver(start=1, destination=2)
    direct, _ = solver.dijkstra(1, 2)
    solver.add_checkpoint(4)
    distance, _ = solver.shortest_path()
    assert distance >= direct


def test_unreachable_checkpoint():
    solver = make_solver()
    solver.add_checkpoint(5)
    assert solver.shortest_path() == (UNREACHABLE, [])


def test_out_of_range_node_rejected():
    solver = QuantumTunnelSolver(3, 1, 3)
    with pytest.raises(ValueError):
        solver.add_tunnel(1, 4, 2)


def test_main_prints_distance_and_path(monkeypatch, capsys):
    text = "4 5 1 4\n0\n" + "\n".join(f"{a} {b} {c}" for a, b, c in EDGES) + "\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    distance, path = make_solver(nodes=4).dijkstra(1, 4)
    assert capsys.readouterr().out == f"\n{distance}\n" + " ".join(map(str, path))
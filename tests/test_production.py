import io

import pytest

from algokit.production import can_complete_in_time, main, minimum_time


def test_single_order_fits_exactly():
    assert can_complete_in_time([1], [5], 5) is True


def test_single_order_misses_by_one():
    assert can_complete_in_time([1], [5], 4) is False


def test_minimum_time_single_line():
    assert minimum_time([1], [5]) == 5


def test_no_orders_need_no_time():
    assert minimum_time([3, 4], []) == 0


def test_no_lines_give_upper_bound():
    assert minimum_time([], [1]) == 10**15


@pytest.mark.parametrize(
    "lines,orders",
    [([1, 2], [3, 3, 2]), ([5, 1, 3], [10, 7, 7, 2, 1]), ([2], [4, 4, 4])],
)
def test_minimum_time_is_tight(lines, orders):
    result = minimum_time(lines, orders)
    assert can_complete_in_time(lines, orders, result)
    assert not can_complete_in_time(lines, orders, result - 1)


def test_more_time_never_hurts():
    lines, orders = [2, 3], [6, 5, 4]
    result = minimum_time(lines, orders)
    assert all(can_complete_in_time(lines, orders, result + extra) for extra in range(5))


def test_main_prints_minimum_time(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 3\n1 2\n3 3 2\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == f"{minimum_time([1, 2], [3, 3, 2])}\n"


def test_main_rejects_short_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 3\n1 2\n3\n"))
    assert main([]) == 1
    assert "invalid input" in capsys.readouterr().err
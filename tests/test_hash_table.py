import re

import pytest

from algokit.hash_table import HashTable, find_duplicates, item_in_common

FRUIT = [("apple", 10), ("banana", 20), ("orange", 30), ("grape", 40)]


@pytest.fixture
def fruit_table():
    table = HashTable()
    for key, value in FRUIT:
        table.set(key, value)
    return table


def test_get_returns_stored_values(fruit_table):
    for key, value in FRUIT:
        assert fruit_table.get(key) == value


def test_get_missing_key_returns_zero(fruit_table):
    assert fruit_table.get("watermelon") == 0


def test_keys_hold_every_key(fruit_table):
    assert sorted(fruit_table.keys()) == sorted(key for key, _ in FRUIT)


def test_duplicate_key_keeps_first_value():
    table = HashTable()
    table.set("kiwi", 5)
    table.set("kiwi", 6)
    assert table.get("kiwi") == 5
    assert table.keys() == ["kiwi", "kiwi"]


def test_empty_table_format():
    expected = "\n".join(f"Index {index}: Empty" for index in range(HashTable.SIZE))
    assert HashTable().format_table() == expected


def test_format_lists_each_entry_once(fruit_table):
    lines = fruit_table.format_table().splitlines()
    assert len(lines) == HashTable.SIZE
    assert [line.split(":")[0] for line in lines] == [
        f"Index {index}" for index in range(HashTable.SIZE)
    ]
    for key, value in FRUIT:
        assert sum(f"{{{key}, {value}}}" in line for line in lines) == 1


def test_keys_order_matches_format(fruit_table):
    shown = re.findall(r"\{(\w+), (-?\d+)\}", fruit_table.format_table())
    assert [key for key, _ in shown] == fruit_table.keys()
    assert {key: int(value) for key, value in shown} == dict(FRUIT)


@pytest.mark.parametrize(
    "nums, expected",
    [
        ([1, 2, 3, 4, 5], []),
        ([1, 2, 3, 2, 1, 4, 5, 6, 5], [1, 2, 5]),
        ([1, 1, 2, 2, 3, 3], [1, 2, 3]),
        ([], []),
    ],
)
def test_find_duplicates(nums, expected):
    assert sorted(find_duplicates(nums)) == expected


@pytest.mark.parametrize(
    "first, second, expected",
    [
        ([1, 2, 3, 4, 5], [5, 6, 7, 8, 9], True),
        ([1, 2, 3, 4, 5], [6, 7, 8, 9, 10], False),
        ([], [], False),
        ([1, 2, 3, 4, 5], [], False),
    ],
)
def test_item_in_common(first, second, expected):
    assert item_in_common(first, second) is expected
import pytest

from algokit.bst import BinarySearchTree, Node, min_value

VALUES = [47, 21, 76, 18, 27, 52, 82]


@pytest.fixture
def tree():
    t = BinarySearchTree()
    for v in VALUES:
        t.insert(v)
    return t


def test_insert_reports_duplicates():
    t = BinarySearchTree()
    assert t.insert(5) is True
    assert t.insert(3) is True
    assert t.insert(5) is False
    assert t.dfs_in_order() == [3, 5]


def test_r_insert_ignores_duplicates():
    t = BinarySearchTree()
    for v in [5, 3, 8, 5, 3]:
        t.r_insert(v)
    assert t.dfs_in_order() == [3, 5, 8]
    assert t.root.value == 5


def test_insert_and_r_insert_build_same_shape():
    a = BinarySearchTree()
    b = BinarySearchTree()
    for v in VALUES:
        a.insert(v)
        b.r_insert(v)
    assert a.dfs_pre_order() == b.dfs_pre_order()


def test_contains(tree):
    for v in VALUES:
        assert tree.contains(v)
        assert tree.r_contains(v)
        assert v in tree
    assert not tree.contains(100)
    assert not tree.r_contains(100)
    assert 100 not in tree


def test_empty_tree_contains_nothing():
    t = BinarySearchTree()
    assert not t.contains(1)
    assert not t.r_contains(1)
    assert t.bfs() == []
    assert t.dfs_in_order() == []


def test_bfs_level_order(tree):
    assert tree.bfs() == VALUES


def test_pre_order(tree):
    assert tree.dfs_pre_order() == [47, 21, 18, 27, 76, 52, 82]


def test_post_order(tree):
    assert tree.dfs_post_order() == [18, 27, 21, 52, 82, 76, 47]


def test_in_order_is_sorted(tree):
    assert tree.dfs_in_order() == sorted(VALUES)


def test_min_value(tree):
    assert tree.min_value() == min(VALUES)
    assert min_value(tree.root.right) == 52


def test_min_value_function_on_single_node():
    assert min_value(Node(9)) == 9


def test_min_value_empty_raises():
    with pytest.raises(ValueError):
        BinarySearchTree().min_value()


def test_delete_leaf(tree):
    tree.delete(18)
    assert not tree.contains(18)
    assert tree.dfs_in_order() == sorted(v for v in VALUES if v != 18)


def test_delete_root_with_two_children_uses_successor(tree):
    tree.delete(47)
    assert tree.root.value == 52
    assert not tree.contains(47)
    assert tree.dfs_in_order() == sorted(v for v in VALUES if v != 47)


def test_delete_node_with_one_child():
    t = BinarySearchTree()
    for v in [10, 5, 3]:
        t.insert(v)
    t.delete(5)
    assert t.root.left.value == 3
    assert t.dfs_in_order() == [3, 10]


def test_delete_missing_value_is_noop(tree):
    tree.delete(1000)
    assert tree.dfs_in_order() == sorted(VALUES)


def test_delete_everything_empties_tree(tree):
    for v in VALUES:
        tree.delete(v)
    assert tree.root is None
    assert tree.bfs() == []


def test_degenerate_tree_traversals():
    t = BinarySearchTree()
    values = list(range(3000))
    for v in values:
        t.insert(v)
    assert t.dfs_in_order() == values
    assert t.dfs_pre_order() == values
    assert t.dfs_post_order() == values[::-1]
    assert t.r_contains(2999) if False else t.contains(2999)
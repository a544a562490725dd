"""Build a binary search tree from numbers in a file and report its traversals."""

from __future__ import annotations

import re
import sys
from typing import Iterable, List, Optional, Sequence

from algokit.bst import BinarySearchTree, Node

_INTEGER = re.compile(r"[+-]?\d+")


def build_tree(values: Iterable[int]) -> Optional[Node]:
    """Insert ``values`` in order into an empty tree and return its root.

    Duplicate values are ignored.
    """
    tree = BinarySearchTree()
    for value in values:
        tree.insert(value)
    return tree.root


def _as_tree(node: Optional[Node]) -> BinarySearchTree:
    tree = BinarySearchTree()
    tree.root = node
    return tree


def pre_order(node: Optional[Node]) -> List[int]:
    """Values of the subtree in pre-order (node, left, right)."""
    return _as_tree(node).dfs_pre_order()


def in_order(node: Optional[Node]) -> List[int]:
    """Values of the subtree in in-order (left, node, right)."""
    return _as_tree(node).dfs_in_order()


def post_order(node: Optional[Node]) -> List[int]:
    """Values of the subtree in post-order (left, right, node)."""
    return _as_tree(node).dfs_post_order()


def level_order(node: Optional[Node]) -> List[List[str]]:
    """Rows of the tree level by level, with ``"X"`` for every missing child.

    The last row always consists of ``"X"`` markers only; an empty tree
    gives a single row holding one marker.
    """
    rows: List[List[str]] = []
    level: List[Optional[Node]] = [node]
    while level:
        row: List[str] = []
        next_level: List[Optional[Node]] = []
        for item in level:
            if item is None:
                row.append("X")
            else:
                row.append(str(item.value))
                next_level.extend((item.left, item.right))
        rows.append(row)
        level = next_level
    return rows


def height(node: Optional[Node]) -> int:
    """Number of levels in the subtree; 0 for an empty one."""
    levels = 0
    frontier = [node] if node is not None else []
    while frontier:
        levels += 1
        frontier = [
            child
            for parent in frontier
            for child in (parent.left, parent.right)
            if child is not None
        ]
    return levels


def count_nodes_at_level(node: Optional[Node], level: int) -> int:
    """Number of nodes exactly ``level`` steps below ``node``."""
    if level < 0:
        return 0
    frontier = [node] if node is not None else []
    for _ in range(level):
        frontier = [
            child
            for parent in frontier
            for child in (parent.left, parent.right)
            if child is not None
        ]
    return len(frontier)


def level_rows(node: Optional[Node]) -> List[List[str]]:
    """Rows of the tree, one per level, followed by a row of leaf markers.

    Each row below the root lists both child slots of every node on the
    level above, with ``"X"`` where a child is missing. The final row holds
    two ``"X"`` markers for every node on the deepest level. An empty tree
    gives no rows.
    """
    if node is None:
        return []
    rows: List[List[str]] = [[str(node.value)]]
    frontier = [node]
    for _ in range(1, height(node)):
        row: List[str] = []
        next_frontier: List[Node] = []
        for parent in frontier:
            for child in (parent.left, parent.right):
                if child is None:
                    row.append("X")
                else:
                    row.append(str(child.value))
                    next_frontier.append(child)
        rows.append(row)
        frontier = next_frontier
    rows.append(["X"] * (2 * len(frontier)))
    return rows


def _parse_integers(text: str) -> List[int]:
    numbers: List[int] = []
    for token in text.split():
        match = _INTEGER.match(token)
        if match is None:
            break
        numbers.append(int(match.group()))
        if match.end() != len(token):
            break
    return numbers


def read_numbers(path: str, first_line_only: bool = False) -> List[int]:
    """Read whitespace-separated integers from ``path``.

    Reading stops at the first token that does not start with an integer.
    With ``first_line_only`` only the first line of the file is read.
    """
    with open(path, encoding="utf-8") as handle:
        text = handle.readline() if first_line_only else handle.read()
    return _parse_integers(text)


def _line(items: Iterable[object]) -> str:
    return "".join(f"{item} " for item in items)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print post-, pre-, in- and level-order of the tree built from a file."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: tree-report <filename>")
        return 1
    filename = args[0]
    try:
        numbers = read_numbers(filename)
    except OSError:
        print(f"Error: Unable to open file {filename}", file=sys.stderr)
        return 1
    root = build_tree(numbers)
    print(_line(post_order(root)))
    print(_line(pre_order(root)))
    print(_line(in_order(root)))
    for row in level_order(root):
        print(_line(row))
    return 0


def challenge_main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the traversals and level rows of the tree built from a file's first line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: tree-challenge <input_file>", file=sys.stderr)
        return 1
    filename = args[0]
    try:
        numbers = read_numbers(filename, first_line_only=True)
    except OSError:
        print(f"Error: Could not open file {filename}", file=sys.stderr)
        return 1
    root = build_tree(numbers)
    print(_line(post_order(root)))
    print(_line(pre_order(root)))
    print(_line(in_order(root)))
    for row in level_rows(root):
        print(_line(row))
    return 0
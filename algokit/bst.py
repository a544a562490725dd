"""Binary search tree with iterative and recursive operations and traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator, List, Optional


@dataclass
class Node:
    """A tree node holding an integer value and two children."""

    value: int
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def min_value(node: Node) -> int:
    """Return the smallest value in the subtree rooted at ``node``."""
    if node is None:
        raise ValueError("cannot take the minimum of an empty subtree")
    while node.left is not None:
        node = node.left
    return node.value


def _r_insert(node: Optional[Node], value: int) -> Node:
    if node is None:
        return Node(value)
    if value < node.value:
        node.left = _r_insert(node.left, value)
    elif value > node.value:
        node.right = _r_insert(node.right, value)
    return node


def _r_contains(node: Optional[Node], value: int) -> bool:
    if node is None:
        return False
    if node.value == value:
        return True
    if value < node.value:
        return _r_contains(node.left, value)
    return _r_contains(node.right, value)


def _delete(node: Optional[Node], value: int) -> Optional[Node]:
    if node is None:
        return None
    if value < node.value:
        node.left = _delete(node.left, value)
    elif value > node.value:
        node.right = _delete(node.right, value)
    else:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        successor = min_value(node.right)
        node.value = successor
        node.right = _delete(node.right, successor)
    return node


class BinarySearchTree:
    """A binary search tree of distinct integers."""

    def __init__(self) -> None:
        self.root: Optional[Node] = None

    def insert(self, value: int) -> bool:
        """Insert ``value`` iteratively; return False if it is already present."""
        new_node = Node(value)
        if self.root is None:
            self.root = new_node
            return True
        current = self.root
        while True:
            if value == current.value:
                return False
            if value < current.value:
                if current.left is None:
                    current.left = new_node
                    return True
                current = current.left
            else:
                if current.right is None:
                    current.right = new_node
                    return True
                current = current.right

    def r_insert(self, value: int) -> None:
        """Insert ``value`` recursively; duplicates are ignored."""
        self.root = _r_insert(self.root, value)

    def contains(self, value: int) -> bool:
        """Report whether ``value`` is in the tree, searching iteratively."""
        current = self.root
        while current is not None:
            if value < current.value:
                current = current.left
            elif value > current.value:
                current = current.right
            else:
                return True
        return False

    def r_contains(self, value: int) -> bool:
        """Report whether ``value`` is in the tree, searching recursively."""
        return _r_contains(self.root, value)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.contains(value)

    def delete(self, value: int) -> None:
        """Remove ``value`` if present, replacing a two-child node by its successor."""
        self.root = _delete(self.root, value)

    def min_value(self) -> int:
        """Return the smallest value in the tree."""
        if self.root is None:
            raise ValueError("tree is empty")
        return min_value(self.root)

    def bfs(self) -> List[int]:
        """Return values in breadth-first (level) order."""
        result: List[int] = []
        if self.root is None:
            return result
        queue = deque([self.root])
        while queue:
            node = queue.popleft()
            result.append(node.value)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result

    def _pre_order(self) -> Iterator[int]:
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def _post_order(self) -> Iterator[int]:
        stack = [self.root] if self.root is not None else []
        reversed_values: List[int] = []
        while stack:
            node = stack.pop()
            reversed_values.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return reversed(reversed_values)

    def _in_order(self) -> Iterator[int]:
        stack: List[Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def dfs_pre_order(self) -> List[int]:
        """Return values in depth-first pre-order (node, left, right)."""
        return list(self._pre_order())

    def dfs_post_order(self) -> List[int]:
        """Return values in depth-first post-order (left, right, node)."""
        return list(self._post_order())

    def dfs_in_order(self) -> List[int]:
        """Return values in depth-first in-order, i.e. ascending."""
        return list(self._in_order())
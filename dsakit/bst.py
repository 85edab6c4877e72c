"""An unbalanced binary search tree of integers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class _Node:
    value: int
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """Smaller values go left; equal and larger values go right."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def insert(self, value: int) -> None:
        """Add ``value`` as a new leaf."""
        new = _Node(value)
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def _inorder(self, node: _Node | None) -> Iterator[int]:
        if node is not None:
            yield from self._inorder(node.left)
            yield node.value
            yield from self._inorder(node.right)

    def _preorder(self, node: _Node | None) -> Iterator[int]:
        if node is not None:
            yield node.value
            yield from self._preorder(node.left)
            yield from self._preorder(node.right)

    def _postorder(self, node: _Node | None) -> Iterator[int]:
        if node is not None:
            yield from self._postorder(node.left)
            yield from self._postorder(node.right)
            yield node.value

    def inorder(self) -> list[int]:
        """Values in left, node, right order."""
        return list(self._inorder(self._root))

    def preorder(self) -> list[int]:
        """Values in node, left, right order."""
        return list(self._preorder(self._root))

    def postorder(self) -> list[int]:
        """Values in left, right, node order."""
        return list(self._postorder(self._root))

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path; 0 when empty."""

        def measure(node: _Node | None) -> int:
            if node is None:
                return 0
            return max(measure(node.left), measure(node.right)) + 1

        return measure(self._root)

    def minimum(self) -> int:
        """The leftmost value; ValueError when the tree is empty."""
        if self._root is None:
            raise ValueError("the tree is empty")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def search(self, value: int) -> bool:
        """Whether ``value`` is found by walking down from the root."""
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def mirror(self) -> None:
        """Swap the children of every node in place."""

        def flip(node: _Node | None) -> None:
            if node is None:
                return
            flip(node.left)
            flip(node.right)
            node.left, node.right = node.right, node.left

        flip(self._root)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.search(value)

    def __len__(self) -> int:
        return sum(1 for _ in self._inorder(self._root))
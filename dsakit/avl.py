"""A word dictionary kept in a self-balancing AVL tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


class SearchResult(NamedTuple):
    """Outcome of a lookup and the number of nodes compared on the way."""

    found: bool
    comparisons: int
    meaning: str | None


@dataclass
class _Node:
    word: str
    meaning: str
    left: _Node | None = None
    right: _Node | None = None
    height: int = 1


def _height(node: _Node | None) -> int:
    return 0 if node is None else node.height


def _update(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance(node: _Node | None) -> int:
    return 0 if node is None else _height(node.left) - _height(node.right)


def _rotate_right(node: _Node) -> _Node:
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    _update(node)
    _update(pivot)
    return pivot


def _rotate_left(node: _Node) -> _Node:
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    _update(node)
    _update(pivot)
    return pivot


def _insert(node: _Node | None, word: str, meaning: str) -> _Node:
    if node is None:
        return _Node(word, meaning)
    if word < node.word:
        node.left = _insert(node.left, word, meaning)
    elif word > node.word:
        node.right = _insert(node.right, word, meaning)
    else:
        return node

    _update(node)
    balance = _balance(node)
    if balance > 1 and word < node.left.word:
        return _rotate_right(node)
    if balance < -1 and word > node.right.word:
        return _rotate_left(node)
    if balance > 1 and word > node.left.word:
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1 and word < node.right.word:
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class AVLDictionary:
    """Words and meanings in a height-balanced search tree."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def insert(self, word: str, meaning: str) -> None:
        """Add ``word``; a word already present keeps its first meaning."""
        self._root = _insert(self._root, word, meaning)

    def search(self, word: str) -> SearchResult:
        """Look ``word`` up, counting the nodes compared."""
        comparisons = 0
        node = self._root
        while node is not None:
            comparisons += 1
            if word == node.word:
                return SearchResult(True, comparisons, node.meaning)
            node = node.left if word < node.word else node.right
        return SearchResult(False, comparisons, None)

    def items(self) -> list[tuple[str, str]]:
        """``(word, meaning)`` pairs in ascending word order."""
        result: list[tuple[str, str]] = []

        def walk(node: _Node | None) -> None:
            if node is not None:
                walk(node.left)
                result.append((node.word, node.meaning))
                walk(node.right)

        walk(self._root)
        return result

    def height(self) -> int:
        """Height of the tree: the most comparisons any search can take."""
        return _height(self._root)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word).found

    def __len__(self) -> int:
        return len(self.items())
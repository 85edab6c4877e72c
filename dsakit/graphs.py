"""Undirected graphs with depth-first and breadth-first traversals."""

from __future__ import annotations

from collections import deque


class Graph:
    """An undirected graph over the nodes ``0 .. size - 1``.

    Edges are remembered in the order they were added. ``bfs`` walks them in
    that order. The other traversals visit neighbours in ascending order.
    """

    def __init__(self, size: int = 10) -> None:
        if size < 1:
            raise ValueError("a graph needs at least one node")
        self.size = size
        self._adjacency: list[list[int]] = [[] for _ in range(size)]

    def _check(self, node: int) -> None:
        if not 0 <= node < self.size:
            raise ValueError(f"node {node} is outside 0..{self.size - 1}")

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append(v)
        self._adjacency[v].append(u)

    def neighbors(self, node: int) -> list[int]:
        """Distinct neighbours of ``node`` in ascending order."""
        self._check(node)
        return sorted(set(self._adjacency[node]))

    def dfs_recursive(self, start: int = 0) -> list[int]:
        """Depth-first order found by recursion."""
        self._check(start)
        visited: set[int] = set()
        order: list[int] = []

        def visit(node: int) -> None:
            visited.add(node)
            order.append(node)
            for nxt in self.neighbors(node):
                if nxt not in visited:
                    visit(nxt)

        visit(start)
        return order

    def dfs_iterative(self, start: int = 0) -> list[int]:
        """Depth-first order found with an explicit stack."""
        self._check(start)
        visited: set[int] = set()
        order: list[int] = []
        stack = [start]
        while stack:
            node = stack.pop()
            if node in visited:
                continue
            visited.add(node)
            order.append(node)
            stack.extend(n for n in reversed(self.neighbors(node)) if n not in visited)
        return order

    def bfs(self, start: int = 0) -> list[int]:
        """Breadth-first order, neighbours taken in edge insertion order."""
        self._check(start)
        visited = {start}
        order: list[int] = []
        queue = deque([start])
        while queue:
            node = queue.popleft()
            order.append(node)
            for nxt in self._adjacency[node]:
                if nxt not in visited:
                    visited.add(nxt)
                    queue.append(nxt)
        return order

    def bfs_recursive(self, start: int = 0) -> list[int]:
        """Breadth-first order, each queue step handled by a recursive call."""
        self._check(start)
        visited = {start}
        order: list[int] = []
        queue = deque([start])

        def step() -> None:
            if not queue:
                return
            node = queue.popleft()
            order.append(node)
            for nxt in self.neighbors(node):
                if nxt not in visited:
                    visited.add(nxt)
                    queue.append(nxt)
            step()

        step()
        return order
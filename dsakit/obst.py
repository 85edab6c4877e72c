"""Optimal binary search trees built by dynamic programming."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

_UNREACHABLE = 1e9


@dataclass(frozen=True)
class OptimalBST:
    """The cheapest search tree for a set of keys and their probabilities."""

    keys: tuple[int, ...]
    probabilities: tuple[float, ...]
    cost: float
    roots: tuple[tuple[int, ...], ...] = field(repr=False)

    def root_order(self) -> list[int]:
        """Keys of the tree in the order their subtrees are rooted (preorder)."""
        order: list[int] = []

        def walk(low: int, high: int) -> None:
            if low > high:
                return
            root = self.roots[low][high]
            order.append(self.keys[root])
            walk(low, root - 1)
            walk(root + 1, high)

        walk(0, len(self.keys) - 1)
        return order


def optimal_bst(keys: Sequence[int], probabilities: Sequence[float]) -> OptimalBST:
    """Compute the minimum search cost and the root of every key range.

    On a tie the leftmost candidate root is kept.
    """
    keys = tuple(keys)
    probabilities = tuple(float(p) for p in probabilities)
    if not keys:
        raise ValueError("at least one key is needed")
    if len(keys) != len(probabilities):
        raise ValueError("every key needs exactly one probability")

    count = len(keys)
    cost = [[0.0] * count for _ in range(count)]
    roots = [[-1] * count for _ in range(count)]
    for index, probability in enumerate(probabilities):
        cost[index][index] = probability
        roots[index][index] = index

    for length in range(2, count + 1):
        for low in range(count - length + 1):
            high = low + length - 1
            weight = sum(probabilities[low : high + 1])
            best, best_root = _UNREACHABLE, -1
            for root in range(low, high + 1):
                left = cost[low][root - 1] if root > low else 0.0
                right = cost[root + 1][high] if root < high else 0.0
                candidate = left + right + weight
                if candidate < best:
                    best, best_root = candidate, root
            cost[low][high] = best
            roots[low][high] = best_root

    return OptimalBST(
        keys=keys,
        probabilities=probabilities,
        cost=cost[0][count - 1],
        roots=tuple(tuple(row) for row in roots),
    )
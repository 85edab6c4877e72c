"""Open addressing hash tables that count probe comparisons."""

from __future__ import annotations

from collections.abc import Iterator


class TableFullError(Exception):
    """Raised when no free slot can be found for a key."""


class LinearProbingTable:
    """Integer keys stored by ``key % size`` with linear probing."""

    def __init__(self, size: int = 10) -> None:
        if size < 1:
            raise ValueError("a table needs at least one slot")
        self.size = size
        self._keys: list[int | None] = [None] * size
        self._comparisons: list[int] = [0] * size

    def _probe(self, home: int) -> Iterator[int]:
        for step in range(self.size):
            yield (home + step) % self.size

    def insert(self, key: int) -> int:
        """Store ``key`` and return the comparisons it took."""
        home = key % self.size
        for comparisons, index in enumerate(self._probe(home), start=1):
            if self._keys[index] is None:
                self._keys[index] = key
                self._comparisons[index] = comparisons
                return comparisons
        raise TableFullError(f"hash table is full, unable to insert {key}")

    def slots(self) -> list[int | None]:
        """Each slot's key, or None where it is empty."""
        return list(self._keys)

    def comparisons(self) -> list[tuple[int, int]]:
        """``(key, comparisons)`` for every stored key, in slot order."""
        return [
            (key, count)
            for key, count in zip(self._keys, self._comparisons)
            if key is not None
        ]

    def total_comparisons(self) -> int:
        """Comparisons summed over all stored keys."""
        return sum(count for _, count in self.comparisons())

    def render(self) -> str:
        """One line per slot showing its key or NULL."""
        return "".join(
            f"{index} ------> {'NULL' if key is None else key}\n"
            for index, key in enumerate(self._keys)
        )


class QuadraticProbingTable(LinearProbingTable):
    """Integer keys stored by ``key % size`` with quadratic probing."""

    def _probe(self, home: int) -> Iterator[int]:
        for step in range(self.size):
            yield (home + step * step) % self.size

    def insert(self, key: int) -> int:
        """Store ``key`` and return the comparisons it took.

        Raises TableFullError once ``size`` probes fail, even if the probe
        sequence missed a free slot.
        """
        return super().insert(key)
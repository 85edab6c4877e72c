"""A dictionary of integer keys built on separate chaining."""

from __future__ import annotations

from typing import Any


class ChainedDict:
    """Integer keys hashed by ``key % size``; new keys go to the front of a bucket."""

    def __init__(self, size: int = 10) -> None:
        if size < 1:
            raise ValueError("a dictionary needs at least one bucket")
        self.size = size
        self._buckets: list[list[tuple[int, Any]]] = [[] for _ in range(size)]

    def _bucket(self, key: int) -> list[tuple[int, Any]]:
        return self._buckets[key % self.size]

    def insert(self, key: int, value: Any) -> None:
        """Set ``key`` to ``value``, replacing any earlier value."""
        bucket = self._bucket(key)
        for position, (existing, _) in enumerate(bucket):
            if existing == key:
                bucket[position] = (key, value)
                return
        bucket.insert(0, (key, value))

    def find(self, key: int) -> Any:
        """The value of ``key``; KeyError if absent."""
        for existing, value in self._bucket(key):
            if existing == key:
                return value
        raise KeyError(key)

    def delete(self, key: int) -> Any:
        """Remove ``key`` and return its value; KeyError if absent."""
        bucket = self._bucket(key)
        for position, (existing, value) in enumerate(bucket):
            if existing == key:
                del bucket[position]
                return value
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and any(k == key for k, _ in self._bucket(key))

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def buckets(self) -> list[list[tuple[int, Any]]]:
        """A copy of each bucket's ``(key, value)`` pairs, front first."""
        return [list(bucket) for bucket in self._buckets]

    def render(self) -> str:
        """One line per bucket listing its pairs."""
        return "".join(
            f"{index}: " + "".join(f"({k},{v}) " for k, v in bucket) + "\n"
            for index, bucket in enumerate(self._buckets)
        )
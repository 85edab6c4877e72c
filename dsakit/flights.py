"""Flight times between cities held in an adjacency matrix."""

from __future__ import annotations

from collections.abc import Iterable


class FlightNetwork:
    """Travel times in minutes between named cities; 0 means no direct path."""

    def __init__(self, cities: Iterable[str]) -> None:
        self.cities = list(cities)
        if len(set(self.cities)) != len(self.cities):
            raise ValueError("city names must be unique")
        self._index = {city: i for i, city in enumerate(self.cities)}
        count = len(self.cities)
        self._minutes = [[0] * count for _ in range(count)]

    def _position(self, city: str) -> int:
        try:
            return self._index[city]
        except KeyError:
            raise KeyError(f"unknown city: {city!r}") from None

    def set_time(self, source: str, target: str, minutes: int) -> None:
        """Record the time from ``source`` to ``target``; 0 removes the path."""
        self._minutes[self._position(source)][self._position(target)] = minutes

    def time(self, source: str, target: str) -> int:
        """Minutes from ``source`` to ``target``, or 0 without a path."""
        return self._minutes[self._position(source)][self._position(target)]

    def render(self) -> str:
        """The adjacency matrix as a tab separated table."""
        parts = ["\n"]
        parts.extend(f"\t{city}" for city in self.cities)
        for city, row in zip(self.cities, self._minutes):
            parts.append(f"\n {city}")
            parts.extend(f"\t{minutes}" for minutes in row)
            parts.append("\n")
        return "".join(parts)
"""Phone book hash tables that link colliding records into chains."""

from __future__ import annotations

from dataclasses import dataclass, replace

from dsakit.hashing import TableFullError


@dataclass
class Record:
    """A name and mobile number; ``chain`` is the slot of the next record."""

    name: str
    mobile: int
    chain: int | None = None


class ProbeChainedTable:
    """Linear probing where a new record is chained from the slot just before it."""

    def __init__(self, size: int = 10) -> None:
        if size < 1:
            raise ValueError("a table needs at least one slot")
        self.size = size
        self._slots: list[Record | None] = [None] * size

    def _home(self, mobile: int) -> int:
        return mobile % self.size

    def _next_free(self, start: int) -> int:
        for step in range(self.size):
            index = (start + step) % self.size
            if self._slots[index] is None:
                return index
        raise TableFullError("hash table is full")

    def _chain_tail(self, index: int) -> Record:
        record = self._slots[index]
        while record.chain is not None and self._slots[record.chain] is not None:
            record = self._slots[record.chain]
        return record

    def _place(self, name: str, mobile: int) -> tuple[int, int] | int:
        """Store the record; return its slot, or ``(slot, None)`` on collision."""
        raise NotImplementedError  # pragma: no cover

    def insert(self, name: str, mobile: int) -> int:
        """Store a record and return the slot it went into."""
        home = self._home(mobile)
        record = Record(name, mobile)
        if self._slots[home] is None:
            self._slots[home] = record
            return home
        free = self._next_free(home)
        self._slots[free] = record
        self._chain_tail((free - 1) % self.size).chain = free
        return free

    def search(self, mobile: int) -> int | None:
        """Slot holding ``mobile`` along its chain, or None."""
        index = self._home(mobile)
        while index is not None:
            record = self._slots[index]
            if record is None:
                return None
            if record.mobile == mobile:
                return index
            index = record.chain
        return None

    def _locate(self, mobile: int) -> tuple[int, int | None, Record]:
        previous = None
        index = self._home(mobile)
        while index is not None:
            record = self._slots[index]
            if record is None:
                break
            if record.mobile == mobile:
                return index, previous, record
            previous, index = index, record.chain
        raise KeyError(mobile)

    def _vacate(self, index: int, record: Record) -> None:
        if record.chain is None:
            self._slots[index] = None
        else:
            self._slots[index] = self._slots[record.chain]
            self._slots[record.chain] = None

    def delete(self, mobile: int) -> Record:
        """Remove the record for ``mobile`` and return it."""
        index, previous, record = self._locate(mobile)
        self._vacate(index, record)
        if record.chain is None and previous is not None:
            self._slots[previous].chain = None
        return replace(record)

    def records(self) -> list[Record | None]:
        """A copy of every slot, None where empty."""
        return [None if r is None else replace(r) for r in self._slots]

    def render(self) -> str:
        """The table with index, name, mobile number and chain columns."""
        lines = ["Index\tName\t\tMobile Number\tChain"]
        for index, record in enumerate(self._slots):
            if record is None:
                name, mobile, chain = "-", 0, -1
            else:
                name, mobile = record.name, record.mobile
                chain = -1 if record.chain is None else record.chain
            lines.append(f"{index}\t{name}\t\t{mobile}\t\t{chain}")
        return "\n".join(lines) + "\n"


class HomeChainedTable(ProbeChainedTable):
    """Linear probing where a new record is chained from its home slot."""

    def insert(self, name: str, mobile: int) -> int:
        """Store a record and return the slot it went into."""
        home = self._home(mobile)
        record = Record(name, mobile)
        if self._slots[home] is None:
            self._slots[home] = record
            return home
        free = self._next_free(home)
        self._slots[free] = record
        self._chain_tail(home).chain = free
        return free

    def delete(self, mobile: int) -> Record:
        """Remove the record for ``mobile`` and return it.

        The previous record in the chain takes over the chain link of
        whatever now sits in the vacated slot.
        """
        index, previous, record = self._locate(mobile)
        self._vacate(index, record)
        if previous is not None:
            current = self._slots[index]
            self._slots[previous].chain = None if current is None else current.chain
        return replace(record)
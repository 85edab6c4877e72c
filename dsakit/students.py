"""Student records stored as fixed-size binary entries in a file."""

from __future__ import annotations

import os
import struct
import tempfile
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

_LAYOUT = struct.Struct("<ic10sx")
RECORD_SIZE = _LAYOUT.size
_NAME_LIMIT = 9


@dataclass(frozen=True)
class Student:
    """A student's name, roll number and division."""

    name: str
    roll: int
    div: str

    def pack(self) -> bytes:
        """The record as its fixed-size binary entry."""
        name = self.name.encode("utf-8")
        if len(name) > _NAME_LIMIT:
            raise ValueError(f"name longer than {_NAME_LIMIT} bytes: {self.name!r}")
        if len(self.div) != 1 or not self.div.isascii():
            raise ValueError(f"division must be one ASCII character: {self.div!r}")
        try:
            return _LAYOUT.pack(self.roll, self.div.encode("ascii"), name)
        except struct.error as exc:
            raise ValueError(str(exc)) from None

    @classmethod
    def unpack(cls, data: bytes) -> Student:
        """Read a record from its binary entry."""
        if len(data) != RECORD_SIZE:
            raise ValueError(f"a record is {RECORD_SIZE} bytes, got {len(data)}")
        roll, div, name = _LAYOUT.unpack(data)
        return cls(
            name=name.split(b"\0", 1)[0].decode("utf-8"),
            roll=roll,
            div=div.decode("ascii"),
        )

    def __str__(self) -> str:
        return f"Name:{self.name}\nRoll no:{self.roll}\nDiv:{self.div}"


class StudentFile:
    """A file of student records, read and rewritten whole."""

    def __init__(self, path: str | os.PathLike[str] = "student.txt") -> None:
        self.path = Path(path)

    @staticmethod
    def _encode(students: Iterable[Student]) -> bytes:
        return b"".join(student.pack() for student in students)

    def write_all(self, students: Iterable[Student]) -> None:
        """Replace the file's contents with ``students``."""
        self.path.write_bytes(self._encode(students))

    def read_all(self) -> list[Student]:
        """Every complete record in the file; none if it does not exist."""
        try:
            data = self.path.read_bytes()
        except FileNotFoundError:
            return []
        usable = len(data) - len(data) % RECORD_SIZE
        return [
            Student.unpack(data[offset : offset + RECORD_SIZE])
            for offset in range(0, usable, RECORD_SIZE)
        ]

    def search(self, roll: int) -> list[Student]:
        """Every record with ``roll``; KeyError if there is none."""
        found = [student for student in self.read_all() if student.roll == roll]
        if not found:
            raise KeyError(roll)
        return found

    def append(self, students: Iterable[Student]) -> None:
        """Add ``students`` to the end of the file."""
        with self.path.open("ab") as handle:
            handle.write(self._encode(students))

    def delete(self, roll: int) -> list[Student]:
        """Remove every record with ``roll`` and return them; KeyError if none."""
        removed: list[Student] = []
        kept: list[Student] = []
        for student in self.read_all():
            (removed if student.roll == roll else kept).append(student)

        directory = self.path.parent if str(self.path.parent) else Path(".")
        fd, temporary = tempfile.mkstemp(dir=directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(self._encode(kept))
            os.replace(temporary, self.path)
        except BaseException:
            Path(temporary).unlink(missing_ok=True)
            raise

        if not removed:
            raise KeyError(roll)
        return removed
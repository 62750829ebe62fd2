"""A sequential file of fixed-size binary student records."""

from __future__ import annotations

import os
import struct
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

_RECORD = struct.Struct("<i50sc100sx")
RECORD_SIZE = _RECORD.size

DATA_FILE = "students.txt"
TEMP_FILE = "temp.txt"


def _field(text: str, size: int) -> bytes:
    return text.encode("utf-8")[: size - 1]


def _text(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="ignore")


@dataclass
class Student:
    """A student record; the division is a single character."""

    roll: int
    name: str
    division: str
    address: str

    def pack(self) -> bytes:
        """Return the fixed-size binary record."""
        division = self.division.encode("latin-1")
        if len(division) != 1:
            raise ValueError("division must be a single character")
        return _RECORD.pack(
            self.roll, _field(self.name, 50), division, _field(self.address, 100)
        )

    @classmethod
    def unpack(cls, data: bytes) -> Student:
        """Build a student from a binary record."""
        if len(data) != RECORD_SIZE:
            raise ValueError(f"student record must be {RECORD_SIZE} bytes")
        roll, name, division, address = _RECORD.unpack(data)
        return cls(roll, _text(name), division.decode("latin-1"), _text(address))


class StudentFile:
    """Student records stored one after another in a single file."""

    def __init__(self, directory: str | os.PathLike[str] = ".") -> None:
        self.directory = Path(directory)
        self.path = self.directory / DATA_FILE
        self._temp_path = self.directory / TEMP_FILE

    def add(self, student: Student) -> None:
        """Append ``student`` to the file."""
        record = student.pack()
        with self.path.open("ab") as fh:
            fh.write(record)

    def _chunks(self) -> Iterator[bytes]:
        if not self.path.exists():
            return
        with self.path.open("rb") as fh:
            while len(chunk := fh.read(RECORD_SIZE)) == RECORD_SIZE:
                yield chunk

    def find(self, roll: int) -> Student:
        """Return the first student with ``roll``; raise ``KeyError`` if absent."""
        for student in self:
            if student.roll == roll:
                return student
        raise KeyError(roll)

    def delete(self, roll: int) -> None:
        """Remove every record with ``roll``; raise ``KeyError`` if none existed."""
        found = False
        with self._temp_path.open("wb") as out:
            for chunk in self._chunks():
                if Student.unpack(chunk).roll == roll:
                    found = True
                    continue
                out.write(chunk)
        os.replace(self._temp_path, self.path)
        if not found:
            raise KeyError(roll)

    def __iter__(self) -> Iterator[Student]:
        return (Student.unpack(chunk) for chunk in self._chunks())
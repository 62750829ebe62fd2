"""An employee file with fixed-size binary records and a separate index file."""

from __future__ import annotations

import os
import struct
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

_RECORD = struct.Struct("<i50s50sf")
_INDEX = struct.Struct("<i4xq")
RECORD_SIZE = _RECORD.size
INDEX_ENTRY_SIZE = _INDEX.size

DATA_FILE = "employee_data.dat"
INDEX_FILE = "employee_index.dat"
TEMP_FILE = "temp.dat"


def _field(text: str, size: int) -> bytes:
    return text.encode("utf-8")[: size - 1]


def _text(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="ignore")


def _chunks(path: Path, size: int) -> Iterator[bytes]:
    if not path.exists():
        return
    with path.open("rb") as fh:
        while len(chunk := fh.read(size)) == size:
            yield chunk


@dataclass
class Employee:
    """An employee record; name and designation hold at most 49 bytes each."""

    id: int
    name: str
    designation: str
    salary: float

    def pack(self) -> bytes:
        """Return the fixed-size binary record."""
        return _RECORD.pack(
            self.id, _field(self.name, 50), _field(self.designation, 50), self.salary
        )

    @classmethod
    def unpack(cls, data: bytes) -> Employee:
        """Build an employee from a binary record."""
        if len(data) != RECORD_SIZE:
            raise ValueError(f"employee record must be {RECORD_SIZE} bytes")
        emp_id, name, designation, salary = _RECORD.unpack(data)
        return cls(emp_id, _text(name), _text(designation), salary)


class EmployeeFile:
    """Employee records in a data file, located through an id-to-offset index."""

    def __init__(self, directory: str | os.PathLike[str] = ".") -> None:
        self.directory = Path(directory)
        self.data_path = self.directory / DATA_FILE
        self.index_path = self.directory / INDEX_FILE
        self._temp_path = self.directory / TEMP_FILE

    def add(self, employee: Employee) -> None:
        """Append ``employee`` and rebuild the index."""
        with self.data_path.open("ab") as fh:
            fh.write(employee.pack())
        self.rebuild_index()

    def rebuild_index(self) -> int:
        """Rewrite the index from the data file; return the number of entries."""
        entries = [
            _INDEX.pack(Employee.unpack(chunk).id, position * RECORD_SIZE)
            for position, chunk in enumerate(_chunks(self.data_path, RECORD_SIZE))
        ]
        with self.index_path.open("wb") as fh:
            fh.writelines(entries)
        return len(entries)

    def _index(self) -> Iterator[tuple[int, int]]:
        for chunk in _chunks(self.index_path, INDEX_ENTRY_SIZE):
            yield _INDEX.unpack(chunk)

    def find(self, employee_id: int) -> Employee:
        """Return the employee with ``employee_id``; raise ``KeyError`` if absent."""
        for entry_id, position in self._index():
            if entry_id == employee_id:
                with self.data_path.open("rb") as fh:
                    fh.seek(position)
                    return Employee.unpack(fh.read(RECORD_SIZE))
        raise KeyError(employee_id)

    def delete(self, employee_id: int) -> None:
        """Remove every record with ``employee_id``; raise ``KeyError`` if none existed."""
        found = False
        with self._temp_path.open("wb") as out:
            for chunk in _chunks(self.data_path, RECORD_SIZE):
                if Employee.unpack(chunk).id == employee_id:
                    found = True
                    continue
                out.write(chunk)
        os.replace(self._temp_path, self.data_path)
        self.rebuild_index()
        if not found:
            raise KeyError(employee_id)

    def __iter__(self) -> Iterator[Employee]:
        return (Employee.unpack(chunk) for chunk in _chunks(self.data_path, RECORD_SIZE))
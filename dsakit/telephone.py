"""Telephone directories hashed on the phone number."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from dsakit.hashtable import TableFullError

DEFAULT_TABLE_SIZE = 20


@dataclass(frozen=True)
class Client:
    """A directory entry."""

    name: str
    number: int


def hash_number(number: int, table_size: int) -> int:
    """Return the home slot of ``number``."""
    return number % table_size


class LinearProbingDirectory:
    """Open-addressing directory; ``comparisons`` accumulates across searches."""

    def __init__(self, table_size: int = DEFAULT_TABLE_SIZE) -> None:
        if table_size <= 0:
            raise ValueError("table size must be positive")
        self._size = table_size
        self._slots: list[Client | None] = [None] * table_size
        self.comparisons = 0

    def _probe(self, number: int) -> Iterator[int]:
        start = hash_number(number, self._size)
        return ((start + step) % self._size for step in range(self._size))

    def insert(self, name: str, number: int) -> None:
        for idx in self._probe(number):
            if self._slots[idx] is None:
                self._slots[idx] = Client(name, number)
                return
        raise TableFullError("directory is full")

    def search(self, number: int) -> bool:
        for idx in self._probe(number):
            client = self._slots[idx]
            if client is None:
                return False
            self.comparisons += 1
            if client.number == number:
                return True
        return False

    def entries(self) -> Iterator[Client]:
        """Yield stored clients in slot order."""
        return (client for client in self._slots if client is not None)


class ChainedDirectory:
    """Directory with a chain per slot; ``comparisons`` accumulates."""

    def __init__(self, table_size: int = DEFAULT_TABLE_SIZE) -> None:
        if table_size <= 0:
            raise ValueError("table size must be positive")
        self._size = table_size
        self._chains: list[list[Client]] = [[] for _ in range(table_size)]
        self.comparisons = 0

    def insert(self, name: str, number: int) -> None:
        self._chains[hash_number(number, self._size)].append(Client(name, number))

    def search(self, number: int) -> bool:
        for client in self._chains[hash_number(number, self._size)]:
            self.comparisons += 1
            if client.number == number:
                return True
        return False
"""A fixed-size hash table of integer keys using linear probing."""

from __future__ import annotations

from collections.abc import Iterator

DEFAULT_SIZE = 10


class TableFullError(Exception):
    """Raised when no free slot is left for a new key."""


class OpenAddressingTable:
    """Integer key/value table with ``key % size`` hashing and linear probing.

    Removing a key simply frees its slot; no tombstone is left behind.
    """

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self._size = size
        self._slots: list[tuple[int, int] | None] = [None] * size

    def _probe(self, key: int) -> Iterator[int]:
        start = key % self._size
        return ((start + step) % self._size for step in range(self._size))

    def insert(self, key: int, value: int) -> int:
        """Store ``value`` under ``key`` and return the slot index used."""
        for idx in self._probe(key):
            slot = self._slots[idx]
            if slot is None or slot[0] == key:
                self._slots[idx] = (key, value)
                return idx
        raise TableFullError(f"table full, cannot insert key {key}")

    def search(self, key: int) -> tuple[int, int] | None:
        """Return ``(index, value)`` for ``key``, or ``None`` if it is absent."""
        for idx in self._probe(key):
            slot = self._slots[idx]
            if slot is not None and slot[0] == key:
                return idx, slot[1]
        return None

    def remove(self, key: int) -> int:
        """Remove ``key`` and return the index it occupied."""
        for idx in self._probe(key):
            slot = self._slots[idx]
            if slot is not None and slot[0] == key:
                self._slots[idx] = None
                return idx
        raise KeyError(key)

    def slots(self) -> list[tuple[int, int] | None]:
        """Return a copy of every slot: a ``(key, value)`` pair or ``None``."""
        return list(self._slots)

    def display(self) -> str:
        """Return one line per slot, showing its pair or ``Empty``."""
        return "\n".join(
            f"{idx}: Empty" if slot is None else f"{idx}: ({slot[0]}, {slot[1]})"
            for idx, slot in enumerate(self._slots)
        )
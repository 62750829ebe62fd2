"""A patient queue ordered by priority (lower number is served first)."""

from __future__ import annotations

import bisect
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Patient:
    name: str
    priority: int


class HospitalQueue:
    """Priority queue that keeps arrival order among equal priorities."""

    def __init__(self) -> None:
        self._patients: list[Patient] = []

    def add_patient(self, name: str, priority: int) -> Patient:
        patient = Patient(name, priority)
        bisect.insort_right(self._patients, patient, key=lambda p: p.priority)
        return patient

    def serve_patient(self) -> Patient:
        """Remove and return the next patient."""
        if not self._patients:
            raise IndexError("no patients in queue")
        return self._patients.pop(0)

    def __iter__(self) -> Iterator[Patient]:
        return iter(list(self._patients))

    def __len__(self) -> int:
        return len(self._patients)
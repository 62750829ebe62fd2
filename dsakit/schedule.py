"""Shortest-job-first scheduling on a single processor."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import accumulate


def min_total_time(durations: Iterable[int]) -> int:
    """Return the least total time in system, summed over all tasks."""
    return sum(accumulate(sorted(durations)))
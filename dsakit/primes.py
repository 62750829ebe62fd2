"""Trial-division primality and an even-length pair sequence."""

from __future__ import annotations


def is_prime(n: int) -> bool:
    """Trial division over ``2 .. n-1``; values below 2 pass unchecked."""
    return all(n % divisor for divisor in range(2, n))


def next_prime(n: int) -> int:
    """Return the smallest prime strictly greater than ``n``."""
    candidate = n + 1
    while not is_prime(candidate):
        candidate += 1
    return candidate


def pair_sequence(n: int) -> list[int]:
    """Return ``[2, 1, 4, 3, ..., n, n-1]`` for even ``n``."""
    if n % 2:
        raise ValueError("n must be even")
    return [value for i in range(2, n + 1, 2) for value in (i, i - 1)]
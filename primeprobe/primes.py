"""Primality helpers used to size hash tables."""

from __future__ import annotations

import math

__all__ = ["is_prime", "next_prime"]


def is_prime(x: int) -> bool:
    """Return whether ``x`` is prime.

    Primality is undefined below 2, so such values raise ``ValueError``.
    """
    if x < 2:
        raise ValueError(f"primality is undefined for {x}")
    if x < 4:
        return True
    if x % 2 == 0:
        return False
    return all(x % divisor for divisor in range(3, math.isqrt(x) + 1, 2))


def next_prime(x: int) -> int:
    """Return the smallest prime that is greater than or equal to ``x``."""
    candidate = max(x, 2)
    while not is_prime(candidate):
        candidate += 1
    return candidate
"""
Sequence operations layered on the prime producer.

Responsibility: composition only. Everything here pulls values through
the SieveEngine iterator protocol; none of it knows how the sieve works.
"""

from itertools import islice
from typing import Iterable, List, Sequence

from .sieve_engine import SieveEngine


def first_primes(n: int, limit: int) -> List[int]:
    """
    Return the first n primes from an engine bounded by limit.

    Fewer than n values come back when limit does not hold n primes.
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    return list(islice(SieveEngine(limit), n))


def primes_between(low: int, high: int) -> List[int]:
    """
    Return the primes p with low <= p <= high.

    Parameters
    ----------
    low : int
        Lower bound (inclusive).
    high : int
        Upper bound (inclusive), used as the engine limit.

    Returns
    -------
    list
        Primes in increasing order; empty when low > high.
    """
    if high < 0:
        return []
    return list(filter(lambda p: p >= low, SieveEngine(high)))


def prime_sum(limit: int) -> int:
    """Sum of all primes <= limit."""
    return sum(SieveEngine(limit))


def prime_count(limit: int) -> int:
    """Number of primes <= limit."""
    return sum(1 for _ in SieveEngine(limit))


def chunked(values: Iterable[int], size: int) -> List[Sequence[int]]:
    """Split values into consecutive rows of at most `size` items."""
    if size <= 0:
        raise ValueError(f"size must be positive, got {size}")

    it = iter(values)
    rows = []
    row = list(islice(it, size))
    while row:
        rows.append(row)
        row = list(islice(it, size))
    return rows

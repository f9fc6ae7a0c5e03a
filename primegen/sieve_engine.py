"""
Odd-only Sieve of Eratosthenes with a one-shot prime producer.

Responsibility: sieve construction and the produce-next-value protocol.
No printing, no formatting, no sequence combinators.

Index mapping (odd candidates only):
- Index i → 2i + 3   (i=0 → 3, i=1 → 5, i=2 → 7, ...)
- Square of candidate p = 2i + 3 sits at index (p*p - 3) / 2 = 2i(i+3) + 3

For p=3: (9-3)/2 = 3 ✓
For p=5: (25-3)/2 = 11 ✓
For p=7: (49-3)/2 = 23 ✓
"""

import numpy as np
from typing import List, Optional


def sieve_size_for(limit: int) -> int:
    """Number of odd candidates 3, 5, 7, ... that are <= limit."""
    if limit < 3:
        return 0
    return (limit - 1) // 2


def odd_prime_marks(limit: int) -> np.ndarray:
    """
    Mark the odd primes in [3, limit].

    Parameters
    ----------
    limit : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Boolean array where marks[i] is True iff 2*i + 3 is prime.
    """
    sieve_size = sieve_size_for(limit)
    marks = np.ones(sieve_size, dtype=bool)

    i = 0
    index_square = 3  # index of 3*3 = 9

    while index_square < sieve_size:
        if marks[i]:
            p = 2 * i + 3
            # odd multiples of p from p*p onwards are p indices apart
            marks[index_square::p] = False

        i += 1
        index_square = 2 * i * (i + 3) + 3

    return marks


class SieveEngine:
    """
    Produces the primes <= limit in increasing order, one call at a time.

    The marks are computed eagerly in the constructor. Production is
    forward-only: ``next()`` returns the next prime or ``None`` once the
    sequence is drained, and keeps returning ``None`` afterwards. There is
    no reset; build a new engine to start over.

    The engine is also a Python iterator, so it composes with ``islice``,
    ``filter``, ``sum`` and friends.

    Parameters
    ----------
    limit : int
        Inclusive upper bound, must be a non-negative integer.
    """

    def __init__(self, limit: int):
        if isinstance(limit, (bool, np.bool_)) or not isinstance(limit, (int, np.integer)):
            raise TypeError(f"limit must be an integer, got {type(limit).__name__}")
        limit = int(limit)
        if limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")

        self._limit = limit
        self._cursor = 0

        if limit < 2:
            self._marks = np.zeros(0, dtype=bool)
            self._emitted_two = True
        else:
            self._marks = odd_prime_marks(limit)
            self._emitted_two = False

        self._marks.flags.writeable = False

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def marks(self) -> np.ndarray:
        """Read-only view of the odd-candidate prime flags."""
        return self._marks

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def emitted_two(self) -> bool:
        return self._emitted_two

    @property
    def exhausted(self) -> bool:
        """True once no further prime can be produced."""
        if not self._emitted_two:
            return False
        remaining = self._marks[self._cursor:]
        return not remaining.any()

    def next(self) -> Optional[int]:
        """
        Step the producer.

        Returns
        -------
        int or None
            The next prime <= limit, or None when the sequence is drained.
        """
        if not self._emitted_two and self._limit >= 2:
            self._emitted_two = True
            return 2

        marks = self._marks
        while self._cursor < len(marks):
            i = self._cursor
            self._cursor += 1

            if marks[i]:
                prime = 2 * i + 3
                if prime <= self._limit:
                    return prime
                # candidates only grow from here
                return None

        return None

    def collect_all(self) -> List[int]:
        """Drain the remaining primes into a list, in increasing order."""
        primes = []
        p = self.next()
        while p is not None:
            primes.append(p)
            p = self.next()
        return primes

    def __iter__(self) -> 'SieveEngine':
        return self

    def __next__(self) -> int:
        p = self.next()
        if p is None:
            raise StopIteration
        return p

    def __repr__(self) -> str:
        return (f"SieveEngine(limit={self._limit}, cursor={self._cursor}, "
                f"emitted_two={self._emitted_two})")

"""
Reference prime generation.

Responsibility: independent ground truth for checking the odd-only sieve.
Full-range flags and trial division only; nothing here is used to produce
primes for callers.
"""

import numpy as np
from math import isqrt


def prime_flags_upto(N: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Uses the full-range Sieve of Eratosthenes (even numbers included).

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Boolean array of length N+1 (empty for N < 0).
    """
    if N < 0:
        return np.zeros(0, dtype=bool)

    flags = np.ones(N + 1, dtype=bool)
    flags[:2] = False
    for p in range(2, isqrt(N) + 1):
        if flags[p]:
            flags[p*p::p] = False
    return flags


def primes_upto(N: int) -> np.ndarray:
    """
    Return array of all primes <= N.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Array of primes.
    """
    flags = prime_flags_upto(N)
    return np.nonzero(flags)[0]


def is_prime_trial(n: int) -> bool:
    """Primality by trial division up to isqrt(n)."""
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    for d in range(3, isqrt(n) + 1, 2):
        if n % d == 0:
            return False
    return True

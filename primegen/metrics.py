"""
Summary statistics for produced prime sequences.

Responsibility: reported quantities only. Input is any ordered sequence
of primes; no sieving happens here.
"""

import math
import numpy as np
from typing import Dict, Sequence


def prime_gaps(primes: Sequence[int]) -> np.ndarray:
    """
    Compute differences between consecutive primes.

    Parameters
    ----------
    primes : sequence of int
        Primes in increasing order.

    Returns
    -------
    np.ndarray
        Array of length len(primes) - 1 (empty for fewer than 2 primes).
    """
    if len(primes) < 2:
        return np.array([], dtype=np.int64)
    return np.diff(np.asarray(primes, dtype=np.int64))


def prime_counting_ratio(count: int, x: int) -> float:
    """
    Ratio of pi(x) to the x / ln(x) estimate.

    Returns nan for x < 2, where the estimate is undefined or meaningless.
    """
    if x < 2:
        return np.nan
    return count / (x / math.log(x))


def summarize_primes(primes: Sequence[int]) -> Dict[str, float]:
    """
    Compute summary statistics for a prime sequence.

    Parameters
    ----------
    primes : sequence of int
        Primes in increasing order.

    Returns
    -------
    dict
        Dictionary with count, sum, largest, mean_gap, max_gap.
    """
    if len(primes) == 0:
        return {
            'count': 0,
            'sum': 0,
            'largest': np.nan,
            'mean_gap': np.nan,
            'max_gap': np.nan
        }

    gaps = prime_gaps(primes)

    return {
        'count': len(primes),
        'sum': int(sum(primes)),
        'largest': int(primes[-1]),
        'mean_gap': float(np.mean(gaps)) if len(gaps) > 0 else np.nan,
        'max_gap': int(np.max(gaps)) if len(gaps) > 0 else np.nan
    }

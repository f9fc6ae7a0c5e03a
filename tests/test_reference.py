"""
Tests for the reference sieve and the summary metrics.

The reference functions are the ground truth the engine is checked
against, so they are pinned to known values here.
"""

import math

import numpy as np
import pytest

from primegen.primes import prime_flags_upto, primes_upto, is_prime_trial
from primegen.metrics import prime_gaps, summarize_primes, prime_counting_ratio
from primegen.sieve_engine import SieveEngine


# Known small primes for testing
SMALL_PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47]
SMALL_COMPOSITES = [4, 6, 8, 9, 10, 12, 14, 15, 16, 18, 20, 21, 22, 24, 25]


class TestReferenceSieve:
    """Test the full-range reference sieve."""

    def test_flags_match_known_primes(self):
        flags = prime_flags_upto(50)

        for p in SMALL_PRIMES:
            assert flags[p], f"prime_flags_upto: {p} should be prime"

        for n in SMALL_COMPOSITES:
            assert not flags[n], f"prime_flags_upto: {n} should not be prime"

        assert not flags[0]
        assert not flags[1]

    @pytest.mark.parametrize("N,length", [(-1, 0), (0, 1), (1, 2)])
    def test_tiny_bounds(self, N, length):
        flags = prime_flags_upto(N)
        assert len(flags) == length
        assert not flags.any()

    def test_primes_upto_thousand(self):
        primes = primes_upto(1000)
        assert len(primes) == 168
        assert primes[-1] == 997

    def test_trial_division(self):
        for p in SMALL_PRIMES:
            assert is_prime_trial(p), f"is_prime_trial: {p} should be prime"
        for n in SMALL_COMPOSITES + [-7, 0, 1]:
            assert not is_prime_trial(n), f"is_prime_trial: {n} should not be prime"

    def test_reference_agrees_with_engine(self):
        """Both sieves give identical results."""
        N = 20000
        assert np.array_equal(primes_upto(N), np.array(SieveEngine(N).collect_all()))


class TestMetrics:
    """Test summary statistics over prime sequences."""

    def test_gaps(self):
        gaps = prime_gaps([2, 3, 5, 7, 11])
        assert gaps.tolist() == [1, 2, 2, 4]

    @pytest.mark.parametrize("primes", [[], [2]])
    def test_gaps_short_input(self, primes):
        assert len(prime_gaps(primes)) == 0

    def test_summary(self):
        summary = summarize_primes(SieveEngine(100).collect_all())
        assert summary['count'] == 25
        assert summary['sum'] == 1060
        assert summary['largest'] == 97
        assert summary['max_gap'] == 8  # 89 -> 97
        assert summary['mean_gap'] == pytest.approx((97 - 2) / 24)

    def test_summary_empty(self):
        summary = summarize_primes([])
        assert summary['count'] == 0
        assert summary['sum'] == 0
        assert np.isnan(summary['largest'])
        assert np.isnan(summary['mean_gap'])

    def test_summary_single(self):
        summary = summarize_primes([2])
        assert summary['count'] == 1
        assert summary['largest'] == 2
        assert np.isnan(summary['max_gap'])

    def test_counting_ratio(self):
        assert prime_counting_ratio(168, 1000) == pytest.approx(168 / (1000 / math.log(1000)))

    @pytest.mark.parametrize("x", [0, 1])
    def test_counting_ratio_undefined(self, x):
        assert np.isnan(prime_counting_ratio(0, x))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

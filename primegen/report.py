"""
Text rendering of the prime generator demo.

Responsibility: strings only. Callers decide where they are printed.
"""

from typing import Sequence

from .sieve_engine import SieveEngine
from .sequences import chunked, first_primes, primes_between, prime_sum


def format_prime_table(primes: Sequence[int], per_line: int = 10) -> str:
    """Render primes as space-prefixed rows of `per_line` values."""
    rows = chunked(primes, per_line)
    return '\n'.join(''.join(f' {p}' for p in row) for row in rows)


def demo_report(demo_limit: int = 1000, first_n: int = 20,
                first_limit: int = 100, range_low: int = 100,
                range_high: int = 200, sum_limit: int = 100) -> str:
    """
    Build the full demo text.

    Sections: primes up to demo_limit with their count, the first
    first_n primes of an engine bounded by first_limit, the primes in
    [range_low, range_high] and the sum of the primes up to sum_limit.
    """
    primes = SieveEngine(demo_limit).collect_all()

    lines = [
        "Prime Generator Demo",
        "=" * 20,
        "",
        f"Primes up to {demo_limit:,}:",
        format_prime_table(primes),
        "",
        f"Number of primes: {len(primes):,}",
        "",
        f"First {first_n} primes:",
        str(first_primes(first_n, first_limit)),
        "",
        f"Primes between {range_low} and {range_high}:",
        str(primes_between(range_low, range_high)),
        "",
        f"Sum of all primes up to {sum_limit}: {prime_sum(sum_limit):,}",
    ]
    return '\n'.join(lines)

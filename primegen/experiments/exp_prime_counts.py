"""
Experiment: Prime counts over a grid of bounds.

Drains one SieveEngine per bound and tabulates pi(x), gap statistics and
the ratio to the x / ln(x) estimate. Outputs a CSV.
"""

import time
import pandas as pd
from pathlib import Path
from typing import Iterable

from ..sieve_engine import SieveEngine
from ..metrics import summarize_primes, prime_counting_ratio


def prime_count_row(limit: int) -> dict:
    """
    Compute one table row for a single bound.

    Parameters
    ----------
    limit : int
        Engine bound (inclusive).

    Returns
    -------
    dict
        limit, count, largest, sum, mean_gap, max_gap, pnt_ratio, seconds.
    """
    start = time.time()
    primes = SieveEngine(limit).collect_all()
    elapsed = time.time() - start

    summary = summarize_primes(primes)
    return {
        'limit': limit,
        'count': summary['count'],
        'largest': summary['largest'],
        'sum': summary['sum'],
        'mean_gap': summary['mean_gap'],
        'max_gap': summary['max_gap'],
        'pnt_ratio': prime_counting_ratio(summary['count'], limit),
        'seconds': elapsed
    }


def run_prime_count_experiment(bounds: Iterable[int], output_dir: Path) -> pd.DataFrame:
    """
    Run the prime count experiment.

    Parameters
    ----------
    bounds : iterable of int
        Engine bounds to tabulate.
    output_dir : Path
        Directory for output files.

    Returns
    -------
    pd.DataFrame
        One row per bound, sorted by limit.
    """
    bounds = sorted(set(int(b) for b in bounds))
    print(f"Running prime count experiment over {len(bounds)} bounds")

    rows = []
    for limit in bounds:
        row = prime_count_row(limit)
        print(f"  limit={limit:>12,}  pi={row['count']:>10,}  ({row['seconds']:.2f}s)")
        rows.append(row)

    df = pd.DataFrame(rows)

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / 'prime_counts.csv'
    df.to_csv(output_path, index=False)
    print(f"  Saved: {output_path}")

    return df

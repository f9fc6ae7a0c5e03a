#!/usr/bin/env python3
"""
Full demo and experiment script.

Prints the prime generator demo, cross-checks the engine, tabulates
prime counts over the configured bounds and renders the figures.

Usage:
    python run_all.py
    python run_all.py --config config/custom.yaml
"""

import argparse
import yaml
from pathlib import Path
import time

from primegen.sieve_engine import SieveEngine
from primegen.report import demo_report
from primegen.experiments.exp_prime_counts import run_prime_count_experiment
from primegen.experiments.verify_sieve_engine import verify_against_reference


DEFAULT_CONFIG = {
    'demo_limit': 1000,
    'first_n': 20,
    'first_limit': 100,
    'range_low': 100,
    'range_high': 200,
    'sum_limit': 100,
    'bounds': [10, 100, 1000, 10000, 100000, 1000000],
    'verify_limit': 1000000,
    'output_dir': 'data/results',
    'make_figures': True,
}


def load_config(path) -> dict:
    """
    Load a YAML config and fill in missing keys from DEFAULT_CONFIG.

    A missing file is an error; an empty file yields the defaults.
    """
    with open(path) as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Config {path} must be a mapping, got {type(data).__name__}")

    config = dict(DEFAULT_CONFIG)
    config.update(data)

    bounds = config['bounds']
    if not isinstance(bounds, list) or len(bounds) == 0:
        raise ValueError(f"Config {path}: bounds must be a non-empty list")

    return config


def main():
    parser = argparse.ArgumentParser(description='Run the prime generator demo and experiments')
    parser.add_argument('--config', type=str, default='config/default.yaml',
                        help='Path to config file')
    args = parser.parse_args()

    config = load_config(args.config)

    print("=" * 60)
    print("Odd-only Sieve of Eratosthenes - Demo and Experiments")
    print("=" * 60)
    print(f"\nConfiguration:")
    print(f"  demo_limit = {config['demo_limit']:,}")
    print(f"  bounds = {config['bounds']}")
    print(f"  verify_limit = {config['verify_limit']:,}")
    print()

    output_dir = Path(config['output_dir'])
    output_dir.mkdir(parents=True, exist_ok=True)

    total_start = time.time()

    # 1. Demo report
    print("-" * 60)
    print("1. Demo")
    print("-" * 60)
    print(demo_report(
        demo_limit=config['demo_limit'],
        first_n=config['first_n'],
        first_limit=config['first_limit'],
        range_low=config['range_low'],
        range_high=config['range_high'],
        sum_limit=config['sum_limit'],
    ))
    print()

    # 2. Verification
    print("-" * 60)
    print("2. Verification against reference sieve")
    print("-" * 60)
    start = time.time()
    ok = verify_against_reference(config['verify_limit'])
    print(f"   Completed in {time.time() - start:.1f}s")
    print()
    if not ok:
        raise SystemExit(1)

    # 3. Prime counts
    print("-" * 60)
    print("3. Prime counts")
    print("-" * 60)
    start = time.time()
    df_counts = run_prime_count_experiment(config['bounds'], output_dir)
    print(f"   Completed in {time.time() - start:.1f}s")
    print()

    # 4. Figures
    if config['make_figures']:
        import matplotlib
        matplotlib.use('Agg')
        from primegen.plotting import plot_prime_counts, plot_gap_histogram

        print("-" * 60)
        print("4. Generating Figures")
        print("-" * 60)

        figures_dir = output_dir / 'figures'
        figures_dir.mkdir(exist_ok=True)

        print("  - Prime counts...")
        plot_prime_counts(df_counts, figures_dir / 'prime_counts.png')

        print("  - Gap histogram...")
        gap_primes = SieveEngine(max(config['bounds'])).collect_all()
        plot_gap_histogram(gap_primes, figures_dir / 'prime_gaps.png')
        print()

    total_time = time.time() - total_start
    print("=" * 60)
    print("COMPLETE")
    print("=" * 60)
    print(f"\nTotal runtime: {total_time:.1f}s")
    print(f"\nOutputs saved to: {output_dir.absolute()}")

    print("\n" + "=" * 60)
    print("KEY RESULTS")
    print("=" * 60)
    print(df_counts[['limit', 'count', 'largest', 'max_gap', 'pnt_ratio']].to_string(index=False))


if __name__ == '__main__':
    main()

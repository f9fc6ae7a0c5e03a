#!/usr/bin/env python3
"""
Verify the odd-only SieveEngine against independent references.

Compares:
1. Drained engine output vs the full-range reference sieve
2. Every small bound vs trial division
3. Protocol behaviour (monotone, bounded, sticky exhaustion)

Run at small limits first, then scale up.
"""

import sys
import time
import numpy as np
from pathlib import Path

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from primegen.sieve_engine import SieveEngine
from primegen.primes import primes_upto, is_prime_trial


def verify_against_reference(limit: int, verbose: bool = True) -> bool:
    """Verify the drained engine matches primes_upto(limit)."""
    if verbose:
        print(f"\n=== Verifying engine vs reference sieve for limit={limit:,} ===")

    t0 = time.time()
    engine = SieveEngine(limit)
    t_build = time.time() - t0

    t0 = time.time()
    got = np.array(engine.collect_all(), dtype=np.int64)
    t_drain = time.time() - t0

    expected = primes_upto(limit)

    if verbose:
        print(f"  Build: {t_build:.2f}s, marks={engine.marks.nbytes/1e6:.1f}MB")
        print(f"  Drain: {t_drain:.2f}s, {len(got):,} primes")

    if np.array_equal(got, expected):
        if verbose:
            print(f"  ✓ All {len(expected):,} primes match!")
        return True

    if verbose:
        print(f"  ✗ Mismatch: engine={len(got):,} primes, reference={len(expected):,}")
        missing = np.setdiff1d(expected, got)[:10]
        extra = np.setdiff1d(got, expected)[:10]
        if len(missing) > 0:
            print(f"    missing: {missing.tolist()}")
        if len(extra) > 0:
            print(f"    extra: {extra.tolist()}")
    return False


def verify_small_limits(max_limit: int, verbose: bool = True) -> bool:
    """Verify every bound in [0, max_limit] against trial division."""
    if verbose:
        print(f"\n=== Verifying all limits 0..{max_limit:,} vs trial division ===")

    errors = 0
    for limit in range(max_limit + 1):
        got = SieveEngine(limit).collect_all()
        expected = [n for n in range(2, limit + 1) if is_prime_trial(n)]
        if got != expected:
            errors += 1
            if verbose and errors <= 10:
                print(f"  MISMATCH at limit={limit}: got {got[-5:]}, expected {expected[-5:]}")

    if verbose:
        if errors == 0:
            print(f"  ✓ All {max_limit + 1:,} limits match!")
        else:
            print(f"  ✗ {errors:,} mismatches found")

    return errors == 0


def verify_protocol(limit: int, verbose: bool = True) -> bool:
    """Verify ordering, bound and exhaustion behaviour of next()."""
    if verbose:
        print(f"\n=== Verifying production protocol for limit={limit:,} ===")

    engine = SieveEngine(limit)
    ok = True
    prev = 0
    p = engine.next()
    while p is not None:
        if p <= prev or p > limit:
            ok = False
            if verbose:
                print(f"  BAD value {p} after {prev}")
            break
        prev = p
        p = engine.next()

    for _ in range(3):
        if engine.next() is not None:
            ok = False
            if verbose:
                print("  Engine produced a value after exhaustion")
            break

    if verbose:
        print(f"  {'✓' if ok else '✗'} Protocol {'holds' if ok else 'violated'}")

    return ok


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(description='Verify SieveEngine correctness')
    parser.add_argument('--limit', type=float, default=1e6, help='Reference comparison bound (default: 1e6)')
    parser.add_argument('--small', type=int, default=500, help='Check every bound up to this (default: 500)')
    args = parser.parse_args()

    limit = int(args.limit)

    print(f"SieveEngine Verification")
    print(f"limit = {limit:,}")
    print("=" * 50)

    ref_ok = verify_against_reference(limit)
    small_ok = verify_small_limits(args.small)
    protocol_ok = verify_protocol(limit)

    print("\n" + "=" * 50)
    if ref_ok and small_ok and protocol_ok:
        print("✓ All verifications passed!")
    else:
        print("✗ Some verifications failed!")
        sys.exit(1)

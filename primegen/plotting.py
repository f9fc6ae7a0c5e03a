"""
Visualization utilities.

Responsibility: plots only. No logic, no computation.
"""

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from pathlib import Path
from typing import Optional, Sequence

from .metrics import prime_gaps


def plot_prime_counts(df: pd.DataFrame, output_path: Optional[Path] = None) -> plt.Figure:
    """
    Plot pi(x) against the x / ln(x) estimate.

    Parameters
    ----------
    df : pd.DataFrame
        DataFrame from exp_prime_counts with columns limit, count.
    output_path : Path, optional
        If provided, save figure to this path.

    Returns
    -------
    matplotlib.Figure
    """
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    df = df[df['limit'] >= 2].sort_values('limit')

    if df.empty:
        for ax in axes:
            ax.text(0.5, 0.5, 'No bounds >= 2', ha='center', va='center',
                    transform=ax.transAxes)
            ax.set_axis_off()
        if output_path:
            fig.savefig(output_path, dpi=150, bbox_inches='tight')
        return fig

    x = df['limit'].to_numpy(dtype=float)
    estimate = x / np.log(x)

    ax = axes[0]
    ax.plot(x, df['count'], 'o-', label='pi(x)')
    ax.plot(x, estimate, 's--', label='x / ln x')
    ax.set_xscale('log')
    ax.set_yscale('log')
    ax.set_xlabel('x')
    ax.set_ylabel('Number of primes <= x')
    ax.set_title('Prime counting function')
    ax.legend()
    ax.grid(True, alpha=0.3)

    ax = axes[1]
    ax.plot(x, df['count'] / estimate, 'o-')
    ax.axhline(1.0, color='red', linestyle='--', alpha=0.5)
    ax.set_xscale('log')
    ax.set_xlabel('x')
    ax.set_ylabel('pi(x) / (x / ln x)')
    ax.set_title('Ratio to PNT estimate')
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')

    return fig


def plot_gap_histogram(primes: Sequence[int], output_path: Optional[Path] = None) -> plt.Figure:
    """
    Plot the distribution of gaps between consecutive primes.

    Parameters
    ----------
    primes : sequence of int
        Primes in increasing order.
    output_path : Path, optional
        If provided, save figure.

    Returns
    -------
    matplotlib.Figure
    """
    fig, ax = plt.subplots(figsize=(8, 5))

    gaps = prime_gaps(primes)

    if len(gaps) > 0:
        bins = np.arange(gaps.min(), gaps.max() + 2) - 0.5
        ax.hist(gaps, bins=bins, alpha=0.7, edgecolor='black')
        ax.axvline(np.mean(gaps), color='red', linestyle='--',
                   label=f'Mean = {np.mean(gaps):.3f}')
        ax.legend()

    ax.set_xlabel('Gap')
    ax.set_ylabel('Frequency')
    ax.set_title(f'Prime gaps ({len(primes):,} primes)')
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')

    return fig

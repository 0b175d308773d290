"""
metrics.py

Statistical checks for generator output.

What this module does

- Builds histograms over integer outcomes (sampler draws) and over
  characters (generated passwords, optionally at one position).
- Runs a Chi-square test against the uniform distribution.
- Small helpers to move between counts and vectors.

Design choices

- "Uniform" means: over all outcomes in the sample space you specify, so
  characters that never showed up still count as expected-but-missing.
- These are diagnostics. They say nothing about the strength of any single
  password.

Quick start

>>> from charpass.metrics import chi_square_uniform
>>> counts = {0: 102, 1: 98}
>>> chi_square_uniform(counts, support_size=2)
ChiSquareResult(stat=0.08, df=1, pvalue=0.77..., expected=[100.0, 100.0])

Dependencies

- numpy
- scipy (for chi-square p-values)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

import numpy as np
from scipy.stats import chisquare


#Helpers: counts / vectors

def counts_to_vector(
    counts: Mapping[int, int],
    support_size: int,
) -> np.ndarray:
    """
    Convert integer-keyed counts {k: c} into a length-`support_size` vector
    ordered by index (0..support_size-1). Missing entries are treated as 0.
    """
    v = np.zeros(support_size, dtype=float)
    for k, c in counts.items():
        if 0 <= k < support_size:
            v[k] = float(c)
    return v


def outcome_histogram(
    outcomes: Iterable[int],
    support_size: int,
) -> Dict[int, int]:
    """
    Make a histogram over integer outcomes in [0, support_size).

    Any outcome outside this range is ignored.
    """
    hist: Dict[int, int] = {}
    for x in outcomes:
        if 0 <= x < support_size:
            hist[x] = hist.get(x, 0) + 1
    return hist


def char_histogram(
    passwords: Iterable[str],
    position: Optional[int] = None,
) -> Dict[str, int]:
    """
    Count characters across `passwords`.

    With `position` set, only the character at that index of each password
    is counted (passwords too short for it are skipped).
    """
    hist: Dict[str, int] = {}
    for pwd in passwords:
        pwd = str(pwd)
        if position is None:
            chars = pwd
        elif -len(pwd) <= position < len(pwd):
            chars = pwd[position]
        else:
            continue
        for ch in chars:
            hist[ch] = hist.get(ch, 0) + 1
    return hist


#Chi-square uniformity test

@dataclass
class ChiSquareResult:
    stat: float
    df: int
    pvalue: float
    expected: List[float]


def _chi_square(observed: np.ndarray) -> ChiSquareResult:
    total = observed.sum()
    if total <= 0:
        raise ValueError("Empty counts supplied.")
    support_size = observed.shape[0]
    expected = np.ones(support_size, dtype=float) * (total / support_size)
    res = chisquare(f_obs=observed, f_exp=expected)
    return ChiSquareResult(
        stat=float(res.statistic),
        df=support_size - 1,
        pvalue=float(res.pvalue),
        expected=expected.tolist(),
    )


def chi_square_uniform(
    counts: Mapping[int, int],
    support_size: int,
) -> ChiSquareResult:
    """
    Chi-square goodness-of-fit of integer outcomes against uniform on
    [0, support_size).

    Returns

    ChiSquareResult(stat, df, pvalue, expected), df = support_size - 1
    """
    if support_size < 2:
        raise ValueError("support_size must be at least 2")
    return _chi_square(counts_to_vector(counts, support_size))


def chi_square_chars(
    counts: Mapping[str, int],
    alphabet: Sequence[str],
) -> ChiSquareResult:
    """
    Chi-square goodness-of-fit of character counts against uniform over
    `alphabet`. Characters outside the alphabet are an error: they cannot
    come from a generator using it.
    """
    if len(alphabet) < 2:
        raise ValueError("alphabet must contain at least 2 characters")
    stray = set(counts) - set(alphabet)
    if stray:
        raise ValueError(f"characters outside the alphabet: {sorted(stray)}")
    observed = np.array([float(counts.get(ch, 0)) for ch in alphabet])
    return _chi_square(observed)


__all__ = [
    "ChiSquareResult",
    "chi_square_uniform",
    "chi_square_chars",
    "counts_to_vector",
    "outcome_histogram",
    "char_histogram",
]

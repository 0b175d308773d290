"""
viz.py: Matplotlib helpers for looking at recipes and generator output

Aim:
- Small, dependency-light (matplotlib only).
- Return (fig, ax) so callers can further customize or save.
- Accept plain dicts/arrays from `metrics.py` and recipes from `recipe.py`.


Quick start

>>> from charpass.viz import plot_entropy_curve, plot_char_frequencies
>>> from charpass.recipe import new_char_recipe
>>> fig, ax = plot_entropy_curve(new_char_recipe(20), range(4, 33, 4))

>>> from charpass.metrics import char_histogram
>>> fig, ax = plot_char_frequencies(char_histogram(["4711", "0815"]), title="Digits")
"""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Iterable, Mapping, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np

from .entropy import entropy as recipe_entropy
from .metrics import chi_square_chars
from .recipe import CharRecipe


#Basic helpers

def _autox_labels(ax, labels: Sequence[str]) -> None:
    ax.set_xticks(range(len(labels)))
    ax.set_xticklabels(labels, rotation=0)


#Plots

def plot_entropy_curve(
    recipe: CharRecipe,
    lengths: Iterable[int],
    *,
    title: Optional[str] = None,
) -> Tuple[plt.Figure, plt.Axes]:
    """
    Plot the exact entropy of `recipe` at each of `lengths`.

    Lengths too short to meet the recipe's requirements (entropy -inf) are
    left out of the curve.
    """
    lengths = list(lengths)
    if any(L <= 0 for L in lengths):
        raise ValueError("All lengths must be positive.")

    xs = []
    H = []
    for L in lengths:
        h = recipe_entropy(replace(recipe, length=L))
        if math.isfinite(h):
            xs.append(L)
            H.append(h)

    fig, ax = plt.subplots()
    ax.plot(xs, H, marker="o")
    ax.set_xlabel("Password length")
    ax.set_ylabel("Entropy (bits)")
    if title:
        ax.set_title(title)
    fig.tight_layout()
    return fig, ax


def plot_char_frequencies(
    counts: Mapping[str, int],
    *,
    title: Optional[str] = None,
) -> Tuple[plt.Figure, plt.Axes]:
    """
    Bar chart of character counts, in code-point order.
    """
    labels = sorted(counts)
    vals = [int(counts[k]) for k in labels]

    fig, ax = plt.subplots()
    ax.bar(range(len(vals)), vals)
    _autox_labels(ax, labels)
    ax.set_ylabel("Counts")
    if title:
        ax.set_title(title)
    fig.tight_layout()
    return fig, ax


def plot_char_residuals(
    counts: Mapping[str, int],
    alphabet: Sequence[str],
    *,
    title: Optional[str] = None,
) -> Tuple[plt.Figure, plt.Axes]:
    """
    Per-character deviation of `counts` from a uniform draw over `alphabet`.

    Bars are labeled with the alphabet characters in the order given; a
    character that never appeared shows its full negative expectation. The
    chi-square p-value goes into the default title.
    """
    res = chi_square_chars(counts, alphabet)
    observed = np.array([float(counts.get(ch, 0)) for ch in alphabet])
    resid = observed - np.asarray(res.expected)

    fig, ax = plt.subplots()
    ax.bar(range(len(resid)), resid)
    _autox_labels(ax, list(alphabet))
    ax.axhline(0.0, color="black", linewidth=0.8)
    ax.set_ylabel("Observed − expected count")
    ax.set_title(title if title is not None else f"Character residuals (chi-square p={res.pvalue:.3g})")
    fig.tight_layout()
    return fig, ax


__all__ = [
    "plot_entropy_curve",
    "plot_char_frequencies",
    "plot_char_residuals",
]

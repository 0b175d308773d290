"""
entropy.py

Entropy and success-probability bookkeeping for character recipes.

Aim:
1) entropy(recipe): log2 of the exact number of passwords the recipe allows.
   Because generation is uniform over that set, this is the min-entropy.
2) success_probability(recipe): chance that one string drawn uniformly from
   the full alphabet already meets every requirement.
3) exact_success_probability(recipe): the same ratio as an exact Fraction,
   which the generator's failure-rate gate relies on.

Notes:
- An empty alphabet (or requirements that cannot fit in the length) gives
  -inf, which callers should read as "impossible".
- math.log2 accepts Python ints of any size without rounding them to a float
  first, so counts far beyond float range still get a finite, accurate log.

Quick start
>>> from charpass.entropy import entropy_unconstrained
>>> entropy_unconstrained(5, 1024)
50.0
"""

from __future__ import annotations

import logging
import math
from fractions import Fraction

from .combinatorics import count_satisfying, count_unconstrained
from .recipe import BuiltAlphabet, CharRecipe, build_alphabet

logger = logging.getLogger(__name__)


#Logs of big numbers
def big_log2(n: int) -> float:
    """
    log2 of a non-negative int of any size; -inf for 0.
    """
    if n < 0:
        raise ValueError("log2 of a negative count")
    if n == 0:
        return -math.inf
    return math.log2(n)


def entropy_unconstrained(length: int, alphabet_size: int) -> float:
    """
    H = length * log2(alphabet_size).

    0.0 for length 0, -inf for an empty alphabet (no strings of positive
    length exist) and for negative lengths.
    """
    if length < 0:
        return -math.inf
    if length == 0:
        return 0.0
    if alphabet_size <= 0:
        return -math.inf
    return length * math.log2(alphabet_size)


def entropy_with_required(built: BuiltAlphabet, length: int) -> float:
    """log2 of the exact number of passwords meeting every requirement."""
    if length < 0:
        return -math.inf
    count = count_satisfying(built.allowed, [r.chars for r in built.required_sets], length)
    return big_log2(count)


def entropy_of(built: BuiltAlphabet, length: int) -> float:
    """Entropy of an already built alphabet at `length`."""
    if built.required_sets:
        return entropy_with_required(built, length)
    return entropy_unconstrained(length, built.size)


def entropy(recipe: CharRecipe) -> float:
    """
    Entropy (bits) of a password generated from `recipe`.

    Consumes no randomness; calling it twice gives identical results.
    """
    return entropy_of(build_alphabet(recipe), recipe.length)


#Success probability
def success_probability(recipe: CharRecipe) -> float:
    """
    Probability that one uniform draw from the full alphabet meets every
    requirement, computed in the log domain:

        p = 2 ** (entropy(recipe) - entropy(recipe.relaxed()))

    Clamped into [0, 1]; rounding can overshoot by a hair.
    """
    h = entropy(recipe)
    h_relaxed = entropy(recipe.relaxed())
    if math.isinf(h) and h < 0:
        return 0.0
    if math.isinf(h_relaxed) and h_relaxed < 0:
        return 0.0

    diff = h - h_relaxed
    if diff > 0.0:
        logger.debug("success_probability: entropy difference %g is positive; clamping to 0", diff)
        diff = 0.0
    p = 2.0 ** diff
    if p > 1.0:
        logger.debug("success_probability: p %g greater than 1; clamping", p)
        p = 1.0
    return p


def exact_success_probability_of(built: BuiltAlphabet, length: int) -> Fraction:
    """Exact count / |full|**length for an already built alphabet."""
    if length < 0 or built.size == 0:
        return Fraction(0)
    constraints = built.required_sets
    if not constraints:
        return Fraction(1)
    satisfying = count_satisfying(built.allowed, [r.chars for r in constraints], length)
    return Fraction(satisfying, count_unconstrained(built.size, length))


def exact_success_probability(recipe: CharRecipe) -> Fraction:
    """Same as success_probability(), as an exact ratio of big integers."""
    return exact_success_probability_of(build_alphabet(recipe), recipe.length)


__all__ = [
    "big_log2",
    "entropy_unconstrained",
    "entropy_with_required",
    "entropy_of",
    "entropy",
    "success_probability",
    "exact_success_probability",
    "exact_success_probability_of",
]

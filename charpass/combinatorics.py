"""
combinatorics.py

Exact count of the passwords a recipe can produce.

What this module does

- Counts strings of a given length over `allowed ∪ (union of required)`
  that contain at least one character from every required set.
- Uses Python ints throughout, so counts with hundreds of digits stay exact.

How the count works

Let Ω be the whole alphabet and R_1..R_k the required sets. A string fails
requirement i exactly when it avoids R_i, and it avoids every set in a
subset S exactly when it is built from Ω minus their union. Inclusion–
exclusion over all subsets S then gives

    count = Σ_S (-1)^|S| · |Ω \\ ⋃S|^length

Subsets are walked as index bitmasks 0 .. 2^k - 1, so there are exactly 2^k
terms. This is the "total minus every proper subset" recursion written out
iteratively, and it stays exact when required sets share characters (a
shared character satisfies every set that contains it).

Quick start

>>> from charpass.combinatorics import count_satisfying
>>> count_satisfying(frozenset(), [frozenset("ab"), frozenset("123")], 2)
12
"""

from __future__ import annotations

from typing import FrozenSet, List, Sequence


def _bits(mask: int) -> int:
    return bin(mask).count("1")


def union_by_mask(sets: Sequence[FrozenSet[str]]) -> List[FrozenSet[str]]:
    """
    Union of the sets selected by each bitmask, for every mask in [0, 2^k).

    Built incrementally: the union for `mask` is the union for `mask` without
    its lowest bit, plus the set that bit selects.
    """
    k = len(sets)
    unions: List[FrozenSet[str]] = [frozenset()] * (1 << k)
    for mask in range(1, 1 << k):
        low = mask & -mask
        unions[mask] = unions[mask ^ low] | sets[low.bit_length() - 1]
    return unions


def count_satisfying(
    allowed: FrozenSet[str],
    required: Sequence[FrozenSet[str]],
    length: int,
) -> int:
    """
    Number of length-`length` strings over `allowed ∪ ⋃required` that contain
    at least one character from every set in `required`.

    Parameters

    allowed : frozenset of str
        Characters that may appear without satisfying any requirement.
    required : sequence of frozenset of str
        Required sets. They may overlap each other and `allowed`.
    length : int
        Password length, >= 0.

    Returns

    int
        Exact, non-negative count. 0 when the requirements cannot be met
        (too short, an empty required set, or an empty alphabet).
    """
    if length < 0:
        raise ValueError("length must be non-negative")

    required = [frozenset(r) for r in required]
    unions = union_by_mask(required)
    omega = frozenset(allowed) | unions[-1]
    full_size = len(omega)

    total = 0
    for mask, avoided in enumerate(unions):
        term = (full_size - len(avoided)) ** length
        if _bits(mask) % 2:
            total -= term
        else:
            total += term

    if total < 0:
        # Inclusion-exclusion over exact ints cannot go negative.
        raise ArithmeticError(f"negative password count {total}")
    return total


def count_unconstrained(alphabet_size: int, length: int) -> int:
    """|alphabet| ** length, the size of the space with no requirements."""
    if alphabet_size < 0 or length < 0:
        raise ValueError("alphabet_size and length must be non-negative")
    return alphabet_size ** length


__all__ = [
    "count_satisfying",
    "count_unconstrained",
    "union_by_mask",
]

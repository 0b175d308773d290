"""
generator.py

Aim:
1) Provides a PasswordGenerator that turns a CharRecipe into a password drawn
   uniformly from every string the recipe allows.
2) Refuses recipes whose requirements make bounded retries untrustworthy,
   instead of looping forever or quietly biasing the result.
3) Exposes simple helpers to generate, measure entropy and show the alphabet.

How generation works
1) Validate: length >= 1 and a non-empty alphabet.
2) Gate: with p the exact chance that one uniform draw meets all
   requirements, the chance that T draws all fail is (1 - p)**T. If that
   exceeds the tolerance, stop here. No randomness has been used yet.
3) Sample: draw `length` unbiased indices into the sorted alphabet, keep the
   first candidate that contains a character of every required set.

Rejection keeps the result uniform: every satisfying string is equally likely
on each attempt, and the first accepted one is returned.

Quick start
>>> from charpass.generator import generate
>>> from charpass.recipe import CharRecipe
>>> from charpass.charsets import CharClass
>>> pwd = generate(CharRecipe(length=12, allow=CharClass.DIGITS))
>>> str(pwd)
'804719...'
>>> round(pwd.entropy, 3)
39.863

Requirements:
>>> r = CharRecipe(length=16, allow=CharClass.LETTERS, require=CharClass.DIGITS | CharClass.SYMBOLS)
>>> PasswordGenerator().generate(r)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

from . import sampler
from .charsets import RequiredSet, contains_any
from .config import settings
from .entropy import entropy_of, exact_success_probability_of
from .errors import (
    EmptyAlphabetError,
    InvalidLengthError,
    RequirementsUnsatisfiedError,
    UnacceptableFailureRateError,
)
from .password import GeneratedPassword
from .recipe import CharRecipe, build_alphabet

logger = logging.getLogger(__name__)


#Requirement filter
def first_missing(candidate: str, required: Sequence[RequiredSet]) -> Optional[RequiredSet]:
    """The first required set `candidate` has no character from, if any."""
    for req in required:
        if not contains_any(candidate, req.chars):
            return req
    return None


def requirements_met(candidate: str, required: Sequence[RequiredSet]) -> bool:
    """True when `candidate` has at least one character from each required set."""
    return first_missing(candidate, required) is None


def failure_rate(success_probability: float, trials: int) -> float:
    """
    Chance that `trials` independent attempts all fail: (1 - p) ** trials,
    evaluated as exp(trials * log1p(-p)) so tiny p keeps its precision.
    """
    if trials < 1:
        raise ValueError("trials must be positive")
    if success_probability >= 1.0:
        return 0.0
    if success_probability <= 0.0:
        return 1.0
    return math.exp(trials * math.log1p(-success_probability))


#Password generator
@dataclass
class PasswordGenerator:
    """
    Generate uniformly distributed passwords from character recipes.

    Parameters

    pool : sampler.RandomPool, optional
        Source of unbiased indices. Defaults to the module's default pool.
    max_trials : int, default from settings (200)
        Attempts allowed to meet the requirements.
    failure_tolerance : float, default from settings (1e-9)
        Largest acceptable chance that all attempts fail.

    Examples

    >>> gen = PasswordGenerator()
    >>> r = CharRecipe(length=20, allow=CharClass.ALL, exclude=CharClass.AMBIGUOUS)
    >>> str(gen.generate(r))
    'v%Rz...'
    >>> gen.entropy(r)
    124.1...
    """

    pool: Optional[sampler.RandomPool] = None
    max_trials: int = settings.MAX_TRIALS
    failure_tolerance: float = settings.FAILURE_TOLERANCE

    def __post_init__(self) -> None:
        if self.pool is None:
            self.pool = sampler.default_pool()
        if self.max_trials < 1:
            raise ValueError("max_trials must be positive")
        if not 0.0 <= self.failure_tolerance <= 1.0:
            raise ValueError("failure_tolerance must be within [0, 1]")

    #Introspection
    def alphabet(self, recipe: CharRecipe) -> List[str]:
        """Characters passwords from `recipe` are drawn from, sorted."""
        return build_alphabet(recipe).sorted_chars()

    def entropy(self, recipe: CharRecipe) -> float:
        """Exact entropy of `recipe` in bits (-inf when impossible)."""
        return entropy_of(build_alphabet(recipe), recipe.length)

    #Generation
    def generate(self, recipe: CharRecipe) -> GeneratedPassword:
        """
        Create one password from `recipe`.

        Raises

        InvalidLengthError, EmptyAlphabetError, UnacceptableFailureRateError
            before any randomness is used.
        RequirementsUnsatisfiedError
            if every attempt missed a requirement (should not happen once the
            gate has passed).
        """
        length = recipe.length
        if length < 1:
            raise InvalidLengthError(length)

        built = build_alphabet(recipe)
        if built.size == 0:
            raise EmptyAlphabetError()

        constraints = built.required_sets
        p = float(exact_success_probability_of(built, length))
        fail = failure_rate(p, self.max_trials)
        if fail > self.failure_tolerance:
            logger.info(
                "refusing recipe: p=%.3g per attempt, %.3g chance of %d straight failures",
                p, fail, self.max_trials,
            )
            raise UnacceptableFailureRateError(p, fail, self.max_trials, self.failure_tolerance)

        # A property of the recipe, not of the sample.
        ent = entropy_of(built, length)
        chars = built.sorted_chars()

        missing: Optional[RequiredSet] = None
        for attempt in range(1, self.max_trials + 1):
            idxs = self.pool.uniform_ints(len(chars), size=length)
            candidate = "".join(chars[i] for i in idxs)
            missing = first_missing(candidate, constraints)
            if missing is None:
                logger.debug("password accepted on attempt %d of %d", attempt, self.max_trials)
                return GeneratedPassword.from_chars(candidate, entropy=ent)

        logger.error(
            "no candidate met the requirements in %d attempts although the gate "
            "estimated a failure rate of %.3g; success probability and filter disagree",
            self.max_trials, fail,
        )
        raise RequirementsUnsatisfiedError(self.max_trials, missing.name if missing else None)


#Convenience helpers
_default_generator: Optional[PasswordGenerator] = None


def default_generator() -> PasswordGenerator:
    global _default_generator
    if _default_generator is None:
        _default_generator = PasswordGenerator()
    return _default_generator


def generate(recipe: CharRecipe) -> GeneratedPassword:
    """
    One-shot helper to generate a password without creating a class instance.
    """
    return default_generator().generate(recipe)


def entropy(recipe: CharRecipe) -> float:
    return default_generator().entropy(recipe)


def alphabet(recipe: CharRecipe) -> List[str]:
    return default_generator().alphabet(recipe)


__all__ = [
    "PasswordGenerator",
    "default_generator",
    "generate",
    "entropy",
    "alphabet",
    "requirements_met",
    "first_missing",
    "failure_rate",
]


# Tiny demo when run directly
if __name__ == "__main__":
    from .config import configure_logging
    from .recipe import new_char_recipe

    configure_logging("DEBUG")
    gen = PasswordGenerator()
    r = new_char_recipe(20)
    pwd = gen.generate(r)
    print("Password:", pwd)
    print("Entropy (bits):", round(pwd.entropy, 2))

"""
separators.py

Separator functions for word-list style passwords.

A word-list generator needs something between its words ("correct-horse",
"correct7horse"). Rather than picking each separator on its own, it asks a
separator function for all `n` separators at once. Recipe-backed separator
functions reuse the character generator for this, so requirements like
"the separators must include a digit" work across the whole password, and
the entropy they add comes straight from the character recipe.

Quick start
>>> from charpass.separators import SF_DIGITS1, sf_constant
>>> from charpass.password import TokenType
>>> seps = SF_DIGITS1(3)
>>> seps.tokens_of_type(TokenType.SEPARATOR)
['4', '0', '9']
>>> sf_constant("-")(3).entropy
0.0
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Optional

from .charsets import CharClass
from .errors import CollaboratorError, GenerationError
from .generator import PasswordGenerator, default_generator
from .password import GeneratedPassword, TokenType
from .recipe import CharRecipe

logger = logging.getLogger(__name__)

SeparatorFunc = Callable[[int], GeneratedPassword]


def sf_constant(s: str) -> SeparatorFunc:
    """Every separator is `s`; contributes no entropy."""

    def sf(n: int) -> GeneratedPassword:
        if n < 0:
            raise CollaboratorError(f"cannot make {n} separators")
        return GeneratedPassword.from_chars([s] * n, entropy=0.0, token_type=TokenType.SEPARATOR)

    return sf


def sf_from_recipe(recipe: CharRecipe, generator: Optional[PasswordGenerator] = None) -> SeparatorFunc:
    """
    Separators generated as one character password of length `n`.

    The recipe's own length is ignored. Errors from the character engine
    come back as CollaboratorError, chained to the original.
    """

    def sf(n: int) -> GeneratedPassword:
        if n < 0:
            raise CollaboratorError(f"cannot make {n} separators")
        if n == 0:
            return GeneratedPassword(tokens=(), entropy=0.0)
        gen = generator if generator is not None else default_generator()
        try:
            pwd = gen.generate(replace(recipe, length=n))
        except GenerationError as err:
            logger.debug("separator recipe failed for %d separators: %s", n, err)
            raise CollaboratorError(f"separator generation failed: {err}") from err
        return pwd.retagged(TokenType.SEPARATOR)

    return sf


# Pre-baked separator functions
SF_NONE = sf_constant("")
SF_DIGITS1 = sf_from_recipe(CharRecipe(length=1, allow=CharClass.DIGITS))
SF_DIGITS_NO_AMBIGUOUS1 = sf_from_recipe(
    CharRecipe(length=1, allow=CharClass.DIGITS, exclude=CharClass.AMBIGUOUS)
)
SF_SYMBOLS = sf_from_recipe(CharRecipe(length=1, allow=CharClass.SYMBOLS))
SF_DIGITS_SYMBOLS = sf_from_recipe(CharRecipe(length=1, require=CharClass.DIGITS | CharClass.SYMBOLS))


__all__ = [
    "SeparatorFunc",
    "sf_constant",
    "sf_from_recipe",
    "SF_NONE",
    "SF_DIGITS1",
    "SF_DIGITS_NO_AMBIGUOUS1",
    "SF_SYMBOLS",
    "SF_DIGITS_SYMBOLS",
]

"""
recipe.py

Aim:
1) CharRecipe, the user-facing description of a character password:
   which classes (and extra characters) may appear, must appear, or must
   never appear, and how long it is.
2) build_alphabet(), which resolves a recipe into an immutable BuiltAlphabet:
   the merely-allowed characters, the normalized required sets, and the full
   alphabet sampling draws from.

Resolution rules
- Exclusion wins over both Allow and Require.
- Every enabled Require class becomes its own required set (named after the
  class), as does every non-empty string in `require_sets` ("Custom N").
- Required characters are taken out of the allowed set, so the two parts
  never overlap. Required sets may still overlap each other.
- A required set emptied by exclusion is kept. Nothing can satisfy it, so
  the recipe counts zero passwords and generation refuses it.

Quick start
>>> from charpass.recipe import CharRecipe, alphabet
>>> from charpass.charsets import CharClass
>>> r = CharRecipe(length=6, allow=CharClass.DIGITS, exclude_chars="0")
>>> "".join(alphabet(r))
'123456789'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Dict, FrozenSet, List, Tuple

from .charsets import (
    CLASS_CHARS,
    CLASS_NAMES,
    CharClass,
    RequiredSet,
    char_set,
    chars_for,
    classes_in,
    required_union,
)

logger = logging.getLogger(__name__)


#Recipe
@dataclass
class CharRecipe:
    """
    Settings for a character password.

    Parameters

    length : int
        Length in characters (code points), not bytes.
    allow : CharClass
        Classes whose characters may appear.
    require : CharClass
        Classes from each of which at least one character must appear.
    exclude : CharClass
        Classes whose characters must never appear.
    allow_chars : str
        Extra characters that may appear.
    require_sets : list of str
        Extra sets; at least one character from each non-empty one must appear.
    exclude_chars : str
        Extra characters that must never appear.
    """

    length: int
    allow: CharClass = CharClass.NONE
    require: CharClass = CharClass.NONE
    exclude: CharClass = CharClass.NONE
    allow_chars: str = ""
    require_sets: List[str] = field(default_factory=list)
    exclude_chars: str = ""

    def relaxed(self) -> "CharRecipe":
        """
        The same recipe with every requirement downgraded to an allowance.

        The full alphabet is unchanged; only the at-least-one constraints go.
        """
        return replace(
            self,
            allow=CharClass(self.allow | self.require),
            require=CharClass.NONE,
            allow_chars=self.allow_chars + "".join(self.require_sets),
            require_sets=[],
        )

    def build(self) -> "BuiltAlphabet":
        return build_alphabet(self)


def new_char_recipe(length: int) -> CharRecipe:
    """
    A recipe with reasonable defaults: all classes allowed, ambiguous
    characters excluded, nothing required.
    """
    return CharRecipe(length=length, allow=CharClass.ALL, exclude=CharClass.AMBIGUOUS)


def recipe_named(name: str) -> CharRecipe:
    """Fresh copy of one of the predefined RECIPES."""
    try:
        template = RECIPES[name]
    except KeyError:
        raise ValueError(f"unknown recipe {name!r}; choose from {sorted(RECIPES)}") from None
    return replace(template, require_sets=list(template.require_sets))


RECIPES: Dict[str, CharRecipe] = {
    "pin": CharRecipe(length=4, allow=CharClass.DIGITS),
    "default": new_char_recipe(20),
}


#Derived state
@dataclass(frozen=True)
class BuiltAlphabet:
    """
    Snapshot of a resolved recipe. Never shared or mutated.

    allowed : characters that may appear but satisfy no requirement
    required_sets : normalized required sets (exclusions applied, duplicates
        collapsed; an emptied set is kept and makes the recipe impossible)
    full : every character a password may contain
    """

    allowed: FrozenSet[str]
    required_sets: Tuple[RequiredSet, ...]
    full: FrozenSet[str]

    @property
    def size(self) -> int:
        return len(self.full)

    def sorted_chars(self) -> List[str]:
        """Full alphabet in code-point order; sampling indexes into this."""
        return sorted(self.full)


#Alphabet builder
def build_alphabet(recipe: CharRecipe) -> BuiltAlphabet:
    """
    Resolve `recipe` into a BuiltAlphabet.

    Does not raise for an empty result; callers decide whether that is an
    error.
    """
    allowed = chars_for(recipe.allow) | char_set(recipe.allow_chars)
    excluded = chars_for(recipe.exclude) | char_set(recipe.exclude_chars)

    raw: List[RequiredSet] = [
        RequiredSet.from_string(CLASS_CHARS[c], CLASS_NAMES[c])
        for c in classes_in(recipe.require)
    ]
    for i, s in enumerate(recipe.require_sets):
        if s:
            raw.append(RequiredSet.from_string(s, f"Custom {i + 1}"))

    required: List[RequiredSet] = []
    seen = set()
    for req in raw:
        req = req.without(excluded)
        if req.chars in seen:
            logger.debug("required set %r duplicates an earlier one; collapsed", req.name)
            continue
        seen.add(req.chars)
        if not req.chars:
            logger.debug("required set %r is empty after exclusions; no password can satisfy it", req.name)
        required.append(req)

    req_chars = required_union(required)
    allowed = (allowed - excluded) - req_chars
    return BuiltAlphabet(
        allowed=allowed,
        required_sets=tuple(required),
        full=allowed | req_chars,
    )


def alphabet(recipe: CharRecipe) -> List[str]:
    """The characters a password from `recipe` is drawn from, sorted."""
    return build_alphabet(recipe).sorted_chars()


__all__ = [
    "CharRecipe",
    "BuiltAlphabet",
    "RECIPES",
    "new_char_recipe",
    "recipe_named",
    "build_alphabet",
    "alphabet",
]

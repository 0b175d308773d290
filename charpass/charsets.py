"""
charsets.py

Aim:
1) Defines the fixed character classes (Uppers, Lowers, Digits, Symbols,
   Ambiguous) as bit flags and maps each one to its literal characters.
2) Provides the small set algebra used everywhere else: characters-as-sets,
   union, difference, membership.
3) Defines RequiredSet, a named set the output must draw at least one
   character from.

Notes:
- A "character" is a single code point, so "é" or "€" count as one element
  no matter how many bytes they take.
- Sets are frozensets; nothing here is mutated after construction.

Quick start
>>> from charpass.charsets import CharClass, chars_for
>>> sorted(chars_for(CharClass.DIGITS))
['0', '1', '2', '3', '4', '5', '6', '7', '8', '9']
>>> CharClass.LETTERS == CharClass.UPPERS | CharClass.LOWERS
True
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag
from types import MappingProxyType
from typing import FrozenSet, Iterable, Mapping, Tuple


#Character classes
UPPERS_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERS_CHARS = "abcdefghijklmnopqrstuvwxyz"
DIGITS_CHARS = "0123456789"
SYMBOLS_CHARS = "!#%)*+,-.:=>?@]^_}~"
AMBIGUOUS_CHARS = "0O1Il5S"


class CharClass(IntFlag):
    """Character class flags. Combine with ``|``."""

    NONE = 0
    UPPERS = 1 << 0
    LOWERS = 1 << 1
    DIGITS = 1 << 2
    SYMBOLS = 1 << 3
    # Only useful for Exclude
    AMBIGUOUS = 1 << 4

    LETTERS = UPPERS | LOWERS
    ALL = LETTERS | DIGITS | SYMBOLS


# Single-bit classes in a fixed order, so builders are deterministic.
BASE_CLASSES: Tuple[CharClass, ...] = (
    CharClass.UPPERS,
    CharClass.LOWERS,
    CharClass.DIGITS,
    CharClass.SYMBOLS,
    CharClass.AMBIGUOUS,
)

CLASS_CHARS: Mapping[CharClass, str] = MappingProxyType({
    CharClass.UPPERS: UPPERS_CHARS,
    CharClass.LOWERS: LOWERS_CHARS,
    CharClass.DIGITS: DIGITS_CHARS,
    CharClass.SYMBOLS: SYMBOLS_CHARS,
    CharClass.AMBIGUOUS: AMBIGUOUS_CHARS,
})

CLASS_NAMES: Mapping[CharClass, str] = MappingProxyType({
    CharClass.UPPERS: "Uppers",
    CharClass.LOWERS: "Lowers",
    CharClass.DIGITS: "Digits",
    CharClass.SYMBOLS: "Symbols",
    CharClass.AMBIGUOUS: "Ambiguous",
})


def classes_in(flags: CharClass) -> Tuple[CharClass, ...]:
    """The single-bit classes enabled in `flags`, in table order."""
    flags = CharClass(flags)
    return tuple(c for c in BASE_CLASSES if flags & c)


def chars_for(flags: CharClass) -> FrozenSet[str]:
    """Union of the literal characters of every class enabled in `flags`."""
    return union_all(char_set(CLASS_CHARS[c]) for c in classes_in(flags))


#Set algebra
def char_set(s: str) -> FrozenSet[str]:
    """
    Turn a string into a set of its characters (code points).

    Duplicates collapse: ``char_set("abcabc") == frozenset("abc")``.
    """
    return frozenset(s)


def union_all(sets: Iterable[FrozenSet[str]]) -> FrozenSet[str]:
    out: FrozenSet[str] = frozenset()
    for s in sets:
        out = out | s
    return out


def difference(source: FrozenSet[str], remove: FrozenSet[str]) -> FrozenSet[str]:
    return source - remove


def contains_any(candidate: str, chars: FrozenSet[str]) -> bool:
    """True when at least one character of `candidate` is in `chars`."""
    return any(c in chars for c in candidate)


#Required sets
@dataclass(frozen=True)
class RequiredSet:
    """
    A named set of characters of which the password must contain at least one.

    Parameters

    name : str
        Only used for diagnostics (which requirement failed or was dropped).
    chars : frozenset of str
        The characters that satisfy this requirement.
    """

    name: str
    chars: FrozenSet[str]

    @classmethod
    def from_string(cls, s: str, name: str) -> "RequiredSet":
        return cls(name=name, chars=char_set(s))

    @property
    def size(self) -> int:
        return len(self.chars)

    def without(self, remove: FrozenSet[str]) -> "RequiredSet":
        """Copy of this set with `remove` subtracted; the name is kept."""
        return RequiredSet(name=self.name, chars=difference(self.chars, remove))

    def __str__(self) -> str:
        return "".join(sorted(self.chars))


def required_union(required: Iterable[RequiredSet]) -> FrozenSet[str]:
    """All characters that belong to at least one of the required sets."""
    return union_all(r.chars for r in required)


__all__ = [
    "CharClass",
    "BASE_CLASSES",
    "CLASS_CHARS",
    "CLASS_NAMES",
    "UPPERS_CHARS",
    "LOWERS_CHARS",
    "DIGITS_CHARS",
    "SYMBOLS_CHARS",
    "AMBIGUOUS_CHARS",
    "classes_in",
    "chars_for",
    "char_set",
    "union_all",
    "difference",
    "contains_any",
    "RequiredSet",
    "required_union",
]

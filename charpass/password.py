"""
password.py: the result object handed back by generators.

A GeneratedPassword is an ordered tuple of tokens plus the entropy of the
recipe that produced it. Character passwords are one CONTENT token per
character; separator functions emit SEPARATOR tokens, so a serializer can
tell the two apart without knowing which generator ran.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Set, Tuple


class TokenType(IntEnum):
    SEPARATOR = 0
    CONTENT = 1


@dataclass(frozen=True)
class Token:
    value: str
    type: TokenType = TokenType.CONTENT


@dataclass(frozen=True)
class GeneratedPassword:
    """
    Generated password and its entropy in bits.

    >>> pwd = GeneratedPassword.from_chars("4711", entropy=13.29)
    >>> str(pwd), len(pwd)
    ('4711', 4)
    """

    tokens: Tuple[Token, ...]
    entropy: float

    @classmethod
    def from_chars(
        cls,
        chars: Iterable[str],
        entropy: float,
        token_type: TokenType = TokenType.CONTENT,
    ) -> "GeneratedPassword":
        return cls(tokens=tuple(Token(c, token_type) for c in chars), entropy=entropy)

    def __str__(self) -> str:
        return "".join(t.value for t in self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def tokens_of_type(self, token_type: TokenType) -> List[str]:
        return [t.value for t in self.tokens if t.type == token_type]

    def token_types(self) -> Set[TokenType]:
        return {t.type for t in self.tokens}

    def is_all_content(self) -> bool:
        """True when every token is content; False for an empty password."""
        return self.token_types() == {TokenType.CONTENT}

    def retagged(self, token_type: TokenType) -> "GeneratedPassword":
        """Copy with every token relabelled as `token_type`."""
        return GeneratedPassword(
            tokens=tuple(Token(t.value, token_type) for t in self.tokens),
            entropy=self.entropy,
        )


__all__ = [
    "TokenType",
    "Token",
    "GeneratedPassword",
]

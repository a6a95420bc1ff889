"""Binding powers that decide precedence and associativity of operators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from komi.token import Token, TokenKind


@dataclass(frozen=True)
class Bp:
    """Left and right binding powers of an infix token.

    An operator whose left power exceeds its right power associates to the
    right; otherwise it associates to the left.
    """

    left: int
    right: int

    LOWEST: ClassVar[Bp]
    ASSIGNMENT: ClassVar[Bp]
    CONNECTIVE: ClassVar[Bp]
    ADDITIVE: ClassVar[Bp]
    MULTIPLICATIVE: ClassVar[Bp]
    PREFIX: ClassVar[Bp]

    @classmethod
    def from_token(cls, token: Token) -> Bp:
        """Return the binding power of a token in infix position."""
        return _BY_KIND.get(token.kind, cls.LOWEST)


Bp.LOWEST = Bp(0o0, 0o1)
Bp.ASSIGNMENT = Bp(0o11, 0o10)
Bp.CONNECTIVE = Bp(0o20, 0o21)
Bp.ADDITIVE = Bp(0o30, 0o31)
Bp.MULTIPLICATIVE = Bp(0o40, 0o41)
Bp.PREFIX = Bp(0o70, 0o71)

_BY_KIND = {
    TokenKind.PLUS: Bp.ADDITIVE,
    TokenKind.MINUS: Bp.ADDITIVE,
    TokenKind.EQUALS: Bp.ASSIGNMENT,
    TokenKind.PLUS_EQUALS: Bp.ASSIGNMENT,
    TokenKind.MINUS_EQUALS: Bp.ASSIGNMENT,
    TokenKind.ASTERISK_EQUALS: Bp.ASSIGNMENT,
    TokenKind.SLASH_EQUALS: Bp.ASSIGNMENT,
    TokenKind.PERCENT_EQUALS: Bp.ASSIGNMENT,
    TokenKind.ASTERISK: Bp.MULTIPLICATIVE,
    TokenKind.SLASH: Bp.MULTIPLICATIVE,
    TokenKind.PERCENT: Bp.MULTIPLICATIVE,
    TokenKind.CONJUNCT: Bp.CONNECTIVE,
    TokenKind.DISJUNCT: Bp.CONNECTIVE,
}
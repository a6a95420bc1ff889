"""Tokens produced by lexing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union

from komi.location import Range

TokenValue = Union[float, bool, str]


class TokenKind(Enum):
    """Kinds of tokens; the first four carry a value."""

    NUMBER = auto()  # `12`, `12.25`
    BOOL = auto()  # `참`, `거짓`
    STRING_SEGMENT = auto()  # `사과` in `"사과"`
    IDENTIFIER = auto()  # `사과`
    PLUS = auto()  # `+`
    MINUS = auto()  # `-`
    ASTERISK = auto()  # `*`
    SLASH = auto()  # `/`
    PERCENT = auto()  # `%`
    LPAREN = auto()  # `(`
    RPAREN = auto()  # `)`
    LBRACE = auto()  # `{`
    RBRACE = auto()  # `}`
    LBRACKET = auto()  # `<`
    RBRACKET = auto()  # `>`
    QUOTE = auto()  # `"`
    COLON = auto()  # `:`
    COMMA = auto()  # `,`
    BANG = auto()  # `!`
    EQUALS = auto()  # `=`
    PLUS_EQUALS = auto()  # `+=`
    MINUS_EQUALS = auto()  # `-=`
    ASTERISK_EQUALS = auto()  # `*=`
    SLASH_EQUALS = auto()  # `/=`
    PERCENT_EQUALS = auto()  # `%=`
    DOUBLE_EQUALS = auto()  # `==`
    BANG_EQUALS = auto()  # `!=`
    LBRACKET_EQUALS = auto()  # `<=`
    RBRACKET_EQUALS = auto()  # `>=`
    CONJUNCT = auto()  # `그리고`
    DISJUNCT = auto()  # `또는`
    CLOSURE = auto()  # `함수`
    IF_BRANCH = auto()  # `만약`
    ELSE_BRANCH = auto()  # `아니면`
    ITERATION = auto()  # `반복`


_VALUE_TYPES = {
    TokenKind.NUMBER: (int, float),
    TokenKind.BOOL: (bool,),
    TokenKind.STRING_SEGMENT: (str,),
    TokenKind.IDENTIFIER: (str,),
}


@dataclass(frozen=True)
class Token:
    """A token with its kind, location and, for literals and names, its value."""

    kind: TokenKind
    location: Range
    value: Optional[TokenValue] = None

    def __post_init__(self) -> None:
        expected = _VALUE_TYPES.get(self.kind)
        if expected is None:
            if self.value is not None:
                raise ValueError(f"token kind {self.kind.name} carries no value")
            return
        if self.value is None:
            raise ValueError(f"token kind {self.kind.name} needs a value")
        if self.kind is TokenKind.NUMBER and isinstance(self.value, bool):
            raise ValueError("a number token needs a number, not a bool")
        if not isinstance(self.value, expected):
            raise ValueError(f"invalid value {self.value!r} for token kind {self.kind.name}")
        if self.kind is TokenKind.NUMBER:
            object.__setattr__(self, "value", float(self.value))
"""Errors raised while parsing."""

from __future__ import annotations

from enum import Enum

from komi.errors import EngineError


class ParseErrorKind(Enum):
    """Reasons a parse may fail."""

    INVALID_EXPR_START = "InvalidExprStart"  # e.g. `*2`
    LPAREN_NOT_CLOSED = "LParenNotClosed"  # e.g. `(1+2`
    NO_INFIX_RIGHT_OPERAND = "NoInfixRightOperand"  # e.g. `1+`
    NO_PREFIX_OPERAND = "NoPrefixOperand"  # e.g. `+`
    INVALID_FUNC_PARAM = "InvalidFuncParam"  # e.g. `함수 +`
    FUNC_BODY_NOT_CLOSED = "FuncBodyNotClosed"  # e.g. `함수 {`
    UNEXPECTED = "Unexpected"  # an internal error

    def __str__(self) -> str:
        return self.value


class ParseError(EngineError[ParseErrorKind]):
    """An error raised by the parser."""
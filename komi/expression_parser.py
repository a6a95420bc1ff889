"""Pratt parsing of single expressions from a stream of tokens."""

from __future__ import annotations

from typing import Callable, Dict, Optional, Sequence, Tuple, Union

from komi.binding_power import Bp
from komi.location import Range
from komi.parse_error import ParseError, ParseErrorKind
from komi.syntax_tree import Ast, AstKind
from komi.token import Token, TokenKind
from komi.token_scanner import TokenScanner

_INFIXES: Dict[TokenKind, Tuple[AstKind, Bp]] = {
    TokenKind.PLUS: (AstKind.INFIX_PLUS, Bp.ADDITIVE),
    TokenKind.MINUS: (AstKind.INFIX_MINUS, Bp.ADDITIVE),
    TokenKind.ASTERISK: (AstKind.INFIX_ASTERISK, Bp.MULTIPLICATIVE),
    TokenKind.SLASH: (AstKind.INFIX_SLASH, Bp.MULTIPLICATIVE),
    TokenKind.PERCENT: (AstKind.INFIX_PERCENT, Bp.MULTIPLICATIVE),
    TokenKind.CONJUNCT: (AstKind.INFIX_CONJUNCT, Bp.CONNECTIVE),
    TokenKind.DISJUNCT: (AstKind.INFIX_DISJUNCT, Bp.CONNECTIVE),
    TokenKind.EQUALS: (AstKind.INFIX_EQUALS, Bp.ASSIGNMENT),
    TokenKind.PLUS_EQUALS: (AstKind.INFIX_PLUS_EQUALS, Bp.ASSIGNMENT),
    TokenKind.MINUS_EQUALS: (AstKind.INFIX_MINUS_EQUALS, Bp.ASSIGNMENT),
    TokenKind.ASTERISK_EQUALS: (AstKind.INFIX_ASTERISK_EQUALS, Bp.ASSIGNMENT),
    TokenKind.SLASH_EQUALS: (AstKind.INFIX_SLASH_EQUALS, Bp.ASSIGNMENT),
    TokenKind.PERCENT_EQUALS: (AstKind.INFIX_PERCENT_EQUALS, Bp.ASSIGNMENT),
}

_PREFIXES: Dict[TokenKind, AstKind] = {
    TokenKind.PLUS: AstKind.PREFIX_PLUS,
    TokenKind.MINUS: AstKind.PREFIX_MINUS,
    TokenKind.BANG: AstKind.PREFIX_BANG,
}

_LITERALS: Dict[TokenKind, AstKind] = {
    TokenKind.NUMBER: AstKind.NUMBER,
    TokenKind.BOOL: AstKind.BOOL,
    TokenKind.IDENTIFIER: AstKind.IDENTIFIER,
}


class ExpressionParser:
    """Parses expressions by binding power, reading tokens from a scanner.

    Once a token is read for use, the scanner is advanced past it and the
    token is handed on to the method that consumes it.
    """

    def __init__(self, tokens: Union[TokenScanner, Sequence[Token]]) -> None:
        self._scanner = tokens if isinstance(tokens, TokenScanner) else TokenScanner(tokens)

    def parse_expression(self, first_token: Token, threshold: Bp = Bp.LOWEST) -> Ast:
        """Parse an expression starting at ``first_token``, already consumed.

        Infix operators continue the expression only while they bind tighter
        than ``threshold``.
        """
        top = self._parse_expression_start(first_token)
        while (token := self._scanner.read()) is not None:
            if threshold.right >= Bp.from_token(token).left:
                break
            self._scanner.advance()
            top = self._parse_infix(top, token)
        return top

    def _parse_expression_start(self, token: Token) -> Ast:
        kind = token.kind
        if kind in _LITERALS:
            return Ast(_LITERALS[kind], token.location, value=token.value)
        if kind in _PREFIXES:
            return self._parse_prefix(_PREFIXES[kind], token.location)
        if kind is TokenKind.LPAREN:
            return self._parse_grouped(token)
        if kind is TokenKind.CLOSURE:
            return self._parse_closure_start(token.location)
        raise ParseError(ParseErrorKind.INVALID_EXPR_START, token.location)

    def _parse_closure_start(self, keyword_location: Range) -> Ast:
        """Parse a closure after its keyword; unsupported by this parser."""
        raise ParseError(ParseErrorKind.INVALID_EXPR_START, keyword_location)

    def _parse_prefix(self, kind: AstKind, prefix_location: Range) -> Ast:
        token = self._scanner.read_and_advance()
        if token is None:
            location = Range(prefix_location.begin, self._scanner.locate().end)
            raise ParseError(ParseErrorKind.NO_PREFIX_OPERAND, location)
        operand = self.parse_expression(token, Bp.PREFIX)
        location = Range(prefix_location.begin, operand.location.end)
        return Ast(kind, location, operand=operand)

    def _parse_infix(self, left: Ast, infix: Token) -> Ast:
        entry: Optional[Tuple[AstKind, Bp]] = _INFIXES.get(infix.kind)
        if entry is None:
            raise ParseError(ParseErrorKind.UNEXPECTED, infix.location)
        kind, bp = entry
        token = self._scanner.read_and_advance()
        if token is None:
            location = Range(left.location.begin, self._scanner.locate().end)
            raise ParseError(ParseErrorKind.NO_INFIX_RIGHT_OPERAND, location)
        right = self.parse_expression(token, bp)
        location = Range(left.location.begin, right.location.end)
        return Ast(kind, location, left=left, right=right)

    def _parse_grouped(self, lparen: Token) -> Ast:
        token = self._scanner.read_and_advance()
        if token is None:
            raise ParseError(ParseErrorKind.LPAREN_NOT_CLOSED, lparen.location)
        grouped = self.parse_expression(token, Bp.LOWEST)

        rparen_location = self._scanner.locate()
        closing = self._scanner.read_and_advance()
        location = Range(lparen.location.begin, rparen_location.end)
        if closing is None or closing.kind is not TokenKind.RPAREN:
            raise ParseError(ParseErrorKind.LPAREN_NOT_CLOSED, location)
        grouped.location = location
        return grouped


_AstFactory = Callable[[Ast, Ast], Ast]
"""Predicates on single characters of source text."""

_ASCII_DIGITS = frozenset("0123456789")
_ASCII_WHITESPACE = frozenset(" \t\n\x0c\r")
_HANGUL_FIRST = 0xAC00
_HANGUL_LAST = 0xD7A3


def is_digit(s: str) -> bool:
    """Return whether ``s`` is a single ASCII digit."""
    return len(s) == 1 and s in _ASCII_DIGITS


def is_whitespace(s: str) -> bool:
    """Return whether ``s`` is a single ASCII whitespace character or a CRLF pair."""
    return (len(s) == 1 and s in _ASCII_WHITESPACE) or s == "\r\n"


def is_in_identifier_domain(s: str) -> bool:
    """Return whether ``s`` is one character that may appear in an identifier.

    The domain holds ASCII letters and digits, and Hangul syllables
    from U+AC00 to U+D7A3.
    """
    if len(s) != 1:
        return False
    if s.isascii():
        return s.isalnum()
    return _HANGUL_FIRST <= ord(s) <= _HANGUL_LAST
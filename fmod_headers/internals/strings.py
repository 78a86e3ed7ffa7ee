"""C string literal handling."""
from __future__ import annotations
import re

from lark import Token

_SIMPLE_ESCAPES = {
    'a': '\a',
    'b': '\b',
    'f': '\f',
    'n': '\n',
    'r': '\r',
    't': '\t',
    'v': '\v',
    '\\': '\\',
    '"': '"',
    "'": "'",
    '?': '?',
}

_ESCAPE_RE = re.compile(r"\\(x[0-9A-Fa-f]+|[0-7]{1,3}|.)", re.DOTALL)


def _replace(m: re.Match) -> str:
    body = m.group(1)
    if body[0] == 'x' and len(body) > 1:
        return chr(int(body[1:], 16) & 0xFF)
    if body[0] in '01234567':
        return chr(int(body, 8) & 0xFF)
    # unknown escape: keep the character
    return _SIMPLE_ESCAPES.get(body, body)


def process_string_escapes(raw_string: str) -> str:
    r"""Resolve C escape sequences in the body of a string literal.

    Handles the simple escapes (\" \\ \' \? \a \b \f \n \r \t \v), octal
    escapes of up to three digits and ``\x`` escapes of any length; numeric
    escapes are truncated to one byte.

    Args:
        raw_string: literal text without the surrounding quotes.

    Returns:
        The text with every escape sequence replaced by its character.
    """
    return _ESCAPE_RE.sub(_replace, raw_string)


def unquote(token: Token) -> Token:
    """Lexer callback: strip the quotes of a STRING token and resolve escapes."""
    return token.update(value=process_string_escapes(token.value[1:-1]))

"""Exceptions raised while turning a header into a ``Header``."""
from __future__ import annotations
from typing import Optional, TYPE_CHECKING

from fmod_headers.internals.errors import format_message

if TYPE_CHECKING:
    from fmod_headers.internals.report import Span


class HeaderError(Exception):
    """Base exception; carries a registry code and an optional source span."""
    code = ""

    def __init__(self, span: Optional['Span'] = None, **kwargs):
        self.kwargs = kwargs
        self.span = span
        self.message = format_message(self.code, **kwargs)
        super().__init__(f"{self.code}: {self.message}")


class GrammarError(HeaderError):
    """The header text does not match the grammar."""
    code = "HE1001"

    def __init__(self, line: int, column: int, detail: str,
                 context: str = "", span: Optional['Span'] = None):
        self.line = line
        self.column = column
        self.context = context
        super().__init__(span, line=line, column=column, detail=detail)


class FileMalformedError(HeaderError):
    """The parser returned something other than the expected root node."""
    code = "HE0001"

    def __init__(self, rule: str):
        super().__init__(rule=rule)


class UnexpectedShapeError(HeaderError):
    """A tree node's tag cannot be turned into a field name."""
    code = "HE0002"

    def __init__(self, node: str, span: Optional['Span'] = None):
        self.node = node
        super().__init__(span, node=node)


class DecodeError(HeaderError):
    """A converted value does not fit the model."""


class MissingFieldError(DecodeError):
    code = "HE2001"

    def __init__(self, field: str):
        self.field = field
        super().__init__(field=field)


class TypeMismatchError(DecodeError):
    code = "HE2002"

    def __init__(self, expected: str, found: str, field: str = "<root>"):
        self.expected = expected
        self.found = found
        self.field = field
        super().__init__(field=field, expected=expected, found=found)

"""Typed result of parsing an error string header."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List

from fmod_headers.repr.decoder import from_value


@dataclass
class ErrorString:
    name: str                        # result code symbol, e.g. FMOD_ERR_MEMORY
    string: str                      # message with escapes resolved


@dataclass
class ErrorStringMapping:
    """Case arms of the lookup switch, in declaration order."""
    errors: List[ErrorString] = field(default_factory=list)


def decode(value: Any) -> ErrorStringMapping:
    """Decode the converted value of an ``error_string_mapping`` declaration."""
    return from_value(ErrorStringMapping, value)

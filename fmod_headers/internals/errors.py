# fmod_headers/internals/errors.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from fmod_headers.internals.report import Span, Reporter


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class Category(str, Enum):
    GENERAL   = "general"
    SYNTAX    = "syntax"
    DECODE    = "decode"
    IO        = "io"
    MAPPING   = "mapping"
    INTERNAL  = "internal"


@dataclass(frozen=True)
class ErrorMessage:
    code: str
    severity: Severity
    text: str
    category: Category = Category.GENERAL
    doc: str = ""


REGISTRY: Dict[str, ErrorMessage] = {}

class _ErrorCatalog:
    def __init__(self, backing: Dict[str, ErrorMessage]) -> None:
        self._registry = backing

    def __getattr__(self, name: str) -> ErrorMessage:
        try:
            return self._registry[name]
        except KeyError as e:
            raise AttributeError(name) from e

    def __getitem__(self, code: str) -> ErrorMessage:
        return self._registry[code]


ERR = _ErrorCatalog(REGISTRY)

def emit(r: Reporter, em: ErrorMessage, span: Optional[Span], **kwargs) -> None:
    text = format_message(em.code, **kwargs)
    if em.severity == Severity.ERROR:
        r.error(em.code, text, span)
    else:
        r.warn(em.code, text, span)


def format_message(code: str, **kwargs) -> str:
    msg = _get(code)
    try:
        return msg.text.format(**kwargs)
    except KeyError as key_error:
        missing = key_error.args[0]
        raise KeyError(f"missing text key '{missing}' for {code} "
                       f"(needed by: {msg.text!r})") from None


#
# --- Helpers
#

def _add(msg: ErrorMessage) -> None:
    if msg.code in REGISTRY:
        raise ValueError(f"duplicate error code {REGISTRY[msg.code]} in {msg}")
    REGISTRY[msg.code] = msg

def _get(code: str) -> ErrorMessage:
    try:
        return REGISTRY[code]
    except KeyError:
        raise KeyError(f"unknown error code: {code}")

#
# --- Registry population
#

# Internal errors (grammar/driver/converter contract bugs) - HE0xxx range
_add(ErrorMessage("HE0001", Severity.ERROR,
    "file malformed: parser produced no '{rule}' root node",
    Category.INTERNAL, "The grammar and the driver disagree about the start rule."))

_add(ErrorMessage("HE0002", Severity.ERROR,
    "unexpected shape: node '{node}' has no field name",
    Category.INTERNAL, "The converter met a tree tag or terminal it cannot name."))

# Syntax errors - HE1xxx range
_add(ErrorMessage("HE1001", Severity.ERROR,
    "grammar error at line {line}, column {column}: {detail}",
    Category.SYNTAX, "The header does not match the grammar's start rule."))

# Decode errors - HE2xxx range
_add(ErrorMessage("HE2001", Severity.ERROR,
    "missing field '{field}'",
    Category.DECODE, "A parsed declaration lacks a field the model requires."))

_add(ErrorMessage("HE2002", Severity.ERROR,
    "type mismatch at '{field}': expected {expected}, found {found}",
    Category.DECODE, "A field has a different shape than the model declares."))

# Input/output errors - HE3xxx range
_add(ErrorMessage("HE3001", Severity.ERROR,
    "cannot read '{path}': {reason}",
    Category.IO, "The header file could not be opened or decoded as UTF-8."))

_add(ErrorMessage("HE3002", Severity.ERROR,
    "msgpack output is binary and needs an output file (-o)",
    Category.IO, "Refusing to write binary data to the terminal."))

# Mapping warnings - HW3xxx range
_add(ErrorMessage("HW3001", Severity.WARNING,
    "error string mapping redefined; the one declared at {prev_loc} is discarded",
    Category.MAPPING, "Only the last error string mapping in a header is kept."))

_add(ErrorMessage("HW3002", Severity.WARNING,
    "duplicate case label '{name}' (first at {prev_loc})",
    Category.MAPPING, "Both entries are kept in declaration order."))

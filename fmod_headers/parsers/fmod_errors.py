"""Parser for ``fmod_errors.h``: the FMOD_ErrorString lookup switch."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Optional

from lark import Tree

from fmod_headers.exceptions import FileMalformedError
from fmod_headers.grammars import Rule
from fmod_headers.internals import errors as er
from fmod_headers.internals.parser import parse_source
from fmod_headers.internals.report import Reporter, Span, span_of
from fmod_headers.models import ErrorStringMapping, decode
from fmod_headers.repr import JsonConverter

GRAMMAR = "fmod_errors"

# Fields materialized as lists regardless of how many case arms a switch has.
ARRAYS = frozenset({"errors"})


@dataclass
class Header:
    mapping: ErrorStringMapping = field(default_factory=ErrorStringMapping)


def parse_tree(source: str, dump_parse: bool = False) -> Tree:
    """Parse header text into its ``api`` tree.

    Raises:
        GrammarError: the text does not match the grammar.
    """
    return parse_source(GRAMMAR, source, dump_parse=dump_parse)


def _loc(span: Optional[Span]) -> str:
    return f"{span.line}:{span.col}" if span else "?"


def _check_duplicate_labels(declaration: Tree, reporter: Reporter) -> None:
    seen: Dict[str, Optional[Span]] = {}
    for arm in declaration.find_data(Rule.ERRORS.value):
        name_tree = next(arm.find_data(Rule.NAME.value))
        label = str(name_tree.children[0])
        span = span_of(name_tree)
        if label in seen:
            er.emit(reporter, er.ERR.HW3002, span, name=label, prev_loc=_loc(seen[label]))
        else:
            seen[label] = span


def parse(source: str, reporter: Optional[Reporter] = None) -> Header:
    """Extract the error string mapping declared in a header.

    Declarations other than the lookup function are skipped. When the header
    declares the lookup function more than once the last one wins. Warnings
    (redefinition, duplicate labels) go to ``reporter`` when one is given.

    Raises:
        GrammarError: the text does not match the grammar.
        FileMalformedError: the parser returned no ``api`` root.
        UnexpectedShapeError: the tree holds a node the converter cannot name.
        DecodeError: a mapping does not fit ``ErrorStringMapping``.
    """
    declarations = parse_tree(source)
    if not isinstance(declarations, Tree) or declarations.data != Rule.API:
        raise FileMalformedError(Rule.API.value)

    converter = JsonConverter(ARRAYS)
    header = Header()
    previous: Optional[Tree] = None

    for declaration in declarations.children:
        match declaration:
            case Tree(data=Rule.ERROR_STRING_MAPPING):
                header.mapping = decode(converter.convert(declaration))
                if reporter is not None:
                    if previous is not None:
                        er.emit(reporter, er.ERR.HW3001, span_of(declaration),
                                prev_loc=_loc(span_of(previous)))
                    _check_duplicate_labels(declaration, reporter)
                previous = declaration
            case _:
                continue

    return header

"""Lark parser setup and parse error translation."""
from __future__ import annotations

from functools import lru_cache

from lark import Lark, Tree, UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken

from fmod_headers.exceptions import GrammarError
from fmod_headers.grammars import grammar_path
from fmod_headers.internals.report import span_of
from fmod_headers.internals.strings import unquote


@lru_cache(maxsize=None)
def load_parser(grammar: str, start: str = "api") -> Lark:
    """Compile the named grammar once and reuse it.

    An LALR parser keeps its state per ``parse`` call, so a compiled
    instance can be shared between callers and threads.
    """
    kwargs = dict(
        start=start,
        parser="lalr",
        lexer="contextual",
        propagate_positions=True,
        maybe_placeholders=False,
        lexer_callbacks={"STRING": unquote},
    )
    return Lark.open(str(grammar_path(grammar)), **kwargs)


def describe_parse_error(e: UnexpectedInput) -> str:
    """One-line description of a Lark parse error."""
    if isinstance(e, UnexpectedEOF):
        expected = ", ".join(sorted(e.expected))
        return f"unexpected end of input, expected one of: {expected}"
    if isinstance(e, UnexpectedToken):
        expected = ", ".join(sorted(e.accepts or e.expected))
        return f"unexpected {e.token.type} {e.token.value!r}, expected one of: {expected}"
    if isinstance(e, UnexpectedCharacters):
        return f"unexpected character {e.char!r}"
    return str(e).splitlines()[0]


def parse_source(grammar: str, src: str, dump_parse: bool = False) -> Tree:
    """Parse ``src`` with the named grammar.

    Raises:
        GrammarError: the text does not match the grammar; carries line/column.
    """
    parser = load_parser(grammar)
    try:
        tree = parser.parse(src)
    except UnexpectedInput as e:
        context = e.get_context(src) if e.pos_in_stream is not None and e.pos_in_stream >= 0 else ""
        raise GrammarError(e.line, e.column, describe_parse_error(e),
                           context=context, span=span_of(e)) from e
    if dump_parse:
        print(tree.pretty())
    return tree

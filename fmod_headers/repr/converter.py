"""Generic fold of a Lark parse tree into JSON-like values.

The converter knows nothing about any particular grammar. Every child of a
tree becomes a field of the parent object, named after the child's rule (or
terminal) tag:

    error_string_mapping            {"signature": "...",
      signature                      "discriminant": "errcode",
      discriminant                   "errors": [
      errors                           {"name": "FMOD_OK", "string": "No errors."},
        name                           ...
        string                       ],
      errors ...                     "default_arm": {"string": "Unknown error."}}
      default_arm

Whether a field holds a list cannot be read off a single tree (one child looks
the same as a list of one), so the caller names the list-valued fields up
front. All other fields keep their last occurrence.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Union

from lark import Token, Tree

from fmod_headers.exceptions import UnexpectedShapeError
from fmod_headers.internals.report import span_of

Value = Union[str, Dict[str, "Value"], List["Value"]]


class JsonConverter:
    def __init__(self, arrays: Iterable[str]):
        self.arrays = frozenset(arrays)

    def convert(self, tree: Tree) -> Value:
        """Convert ``tree`` into a value.

        Array fields are seeded as empty lists on the converted node itself,
        so a declaration with no occurrence of one still carries ``[]``.
        """
        value = self._value(tree)
        if isinstance(value, dict):
            for name in sorted(self.arrays):
                value.setdefault(name, [])
        return value

    def _value(self, node: Union[Tree, Token]) -> Value:
        match node:
            case Token():
                return str(node)
            case Tree() if not any(isinstance(c, Tree) for c in node.children):
                return " ".join(str(c) for c in node.children)
            case Tree():
                return self._object(node)
            case _:
                raise UnexpectedShapeError(type(node).__name__)

    def _object(self, tree: Tree) -> Dict[str, Value]:
        obj: Dict[str, Value] = {}
        for child in tree.children:
            name = self.field_name(child)
            value = self._value(child)
            if name in self.arrays:
                obj.setdefault(name, []).append(value)
            else:
                # last occurrence wins
                obj[name] = value
        return obj

    @staticmethod
    def field_name(node: Union[Tree, Token]) -> str:
        """Field name for a child node: its rule tag or lowercased terminal type."""
        if isinstance(node, Tree):
            name = str(node.data)
        elif isinstance(node, Token):
            name = node.type.lower()
        else:
            raise UnexpectedShapeError(type(node).__name__)
        if not name.isidentifier() or name.startswith("_"):
            raise UnexpectedShapeError(name, span=span_of(node))
        return name

"""Lark grammars shipped with fmod-headers.

Each ``<name>.lark`` file in this directory describes one header shape.
``Rule`` lists the tree tags produced by ``fmod_errors.lark``.
"""
from __future__ import annotations

from enum import Enum
from pathlib import Path

GRAMMAR_DIR = Path(__file__).parent


class Rule(str, Enum):
    API = "api"
    ERROR_STRING_MAPPING = "error_string_mapping"
    IGNORED = "ignored"
    ERRORS = "errors"          # case_arm, aliased to its field name
    DEFAULT_ARM = "default_arm"
    DISCRIMINANT = "discriminant"
    SIGNATURE = "signature"
    NAME = "name"
    STRING = "string"


def grammar_path(name: str) -> Path:
    """Path of the grammar file called ``name`` (without extension)."""
    return GRAMMAR_DIR / f"{name}.lark"

"""fmod-headers - extract typed tables from FMOD C headers."""
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("fmod-headers")
    __dev__ = False
except PackageNotFoundError:
    # Development mode - read from pyproject.toml
    import tomllib
    from pathlib import Path
    try:
        pyproject = Path(__file__).parent.parent / "pyproject.toml"
        with open(pyproject, "rb") as f:
            __version__ = tomllib.load(f).get("project", {}).get("version", "unknown")
    except (OSError, tomllib.TOMLDecodeError):
        __version__ = "unknown"
    __dev__ = True

from fmod_headers.exceptions import (
    HeaderError,
    GrammarError,
    FileMalformedError,
    UnexpectedShapeError,
    DecodeError,
    MissingFieldError,
    TypeMismatchError,
)
from fmod_headers.models import ErrorString, ErrorStringMapping
from fmod_headers.parsers.fmod_errors import Header, parse, parse_tree
from fmod_headers.repr import JsonConverter

__all__ = [
    'parse',
    'parse_tree',
    'Header',
    'ErrorString',
    'ErrorStringMapping',
    'JsonConverter',
    'HeaderError',
    'GrammarError',
    'FileMalformedError',
    'UnexpectedShapeError',
    'DecodeError',
    'MissingFieldError',
    'TypeMismatchError',
]

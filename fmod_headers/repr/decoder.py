"""Decode converted values into dataclass models."""
from __future__ import annotations

import dataclasses
import typing
from typing import Any, Type, TypeVar

from fmod_headers.exceptions import MissingFieldError, TypeMismatchError

T = TypeVar("T")


def shape_name(value: Any) -> str:
    """Shape of a converted value as used in error messages."""
    if isinstance(value, dict):
        return "object"
    if isinstance(value, list):
        return "array"
    if isinstance(value, str):
        return "string"
    return type(value).__name__


def _join(path: str, name: str) -> str:
    return f"{path}.{name}" if path else name


def from_value(cls: Type[T], value: Any, path: str = "") -> T:
    """Build ``cls`` from a converted value.

    ``str`` fields take a string, ``List[X]`` fields take an array whose
    items decode as ``X``, and dataclass fields take an object. Keys the
    dataclass does not declare are ignored; every declared field is required.

    Raises:
        MissingFieldError: a required key is absent.
        TypeMismatchError: a value has the wrong shape.
    """
    origin = typing.get_origin(cls)
    if origin is list:
        if not isinstance(value, list):
            raise TypeMismatchError("array", shape_name(value), path or "<root>")
        (item_type,) = typing.get_args(cls)
        return [from_value(item_type, item, f"{path}[{i}]") for i, item in enumerate(value)]  # type: ignore[return-value]

    if cls is str:
        if not isinstance(value, str):
            raise TypeMismatchError("string", shape_name(value), path or "<root>")
        return value  # type: ignore[return-value]

    if dataclasses.is_dataclass(cls):
        if not isinstance(value, dict):
            raise TypeMismatchError("object", shape_name(value), path or "<root>")
        hints = typing.get_type_hints(cls)
        kwargs = {}
        for f in dataclasses.fields(cls):
            key = _join(path, f.name)
            if f.name not in value:
                raise MissingFieldError(key)
            kwargs[f.name] = from_value(hints[f.name], value[f.name], key)
        return cls(**kwargs)

    raise TypeError(f"cannot decode into {cls!r}")

"""Tree-to-value conversion and value-to-model decoding."""
from fmod_headers.repr.converter import JsonConverter, Value
from fmod_headers.repr.decoder import from_value, shape_name

__all__ = [
    'JsonConverter',
    'Value',
    'from_value',
    'shape_name',
]

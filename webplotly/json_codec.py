# webplotly/json_codec.py
"""
JSON encoding for request fields.

Values are first reduced to plain JSON types by `to_plain`, which accepts a
closed set of shapes:

    - plain scalars: None, bool, int, float, str (dates/datetimes become strings)
    - ordered sequences: list, tuple
    - mappings with string keys
    - numeric arrays: numpy.ndarray (nested lists) and numpy scalars

Anything else raises TypeError instead of being guessed at.
"""

from __future__ import annotations

import datetime
import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import numpy as np

from .config import settings


@dataclass(frozen=True)
class JSONCodecConfig:
    """
    utf8:           emit non-ASCII text as-is (UTF-8 on the wire) and decode
                    response bodies as UTF-8. When False, non-ASCII is escaped
                    and the body is decoded with the charset requests detects.
    canonical_keys: sort mapping keys so identical input gives identical output.
    """
    utf8: bool = True
    canonical_keys: bool = True


DEFAULT_CODEC = JSONCodecConfig(
    utf8=settings.JSON_UTF8,
    canonical_keys=settings.JSON_CANONICAL_KEYS,
)

_PLAIN_SCALARS = (str, int, float, bool, type(None))


def _format_datetime(value: datetime.date) -> str:
    # Only as much resolution as the value actually carries
    if not isinstance(value, datetime.datetime):
        return value.strftime("%Y-%m-%d")
    if value.microsecond != 0:
        return value.strftime("%Y-%m-%d %H:%M:%S.%f")
    if value.second != 0 or value.minute != 0 or value.hour != 0:
        return value.strftime("%Y-%m-%d %H:%M:%S")
    return value.strftime("%Y-%m-%d")


def is_numeric_array(value: Any) -> bool:
    return isinstance(value, np.ndarray)


def is_compound(value: Any) -> bool:
    """True for data-like values: sequences, mappings and numeric arrays (never strings)."""
    return isinstance(value, (list, tuple, Mapping)) or is_numeric_array(value)


def to_plain(value: Any) -> Any:
    """
    Recursively converts `value` into plain JSON types.
    Does NOT mutate the input; returns new structures.
    """
    if isinstance(value, _PLAIN_SCALARS):
        return value

    if isinstance(value, np.ndarray):
        # tolist() already yields Python scalars; recurse for object/datetime arrays
        return to_plain(value.tolist())

    if isinstance(value, np.generic):
        return to_plain(value.item())

    if isinstance(value, (datetime.date, datetime.datetime)):
        return _format_datetime(value)

    if isinstance(value, Mapping):
        plain = {}
        for k, v in value.items():
            if not isinstance(k, str):
                raise TypeError(f"Mapping keys must be strings, got {type(k).__name__}: {k!r}")
            plain[k] = to_plain(v)
        return plain

    if isinstance(value, (list, tuple)):
        return [to_plain(x) for x in value]

    raise TypeError(f"Object of type {type(value).__name__} cannot be sent to Plotly")


def encode(value: Any, codec: JSONCodecConfig = DEFAULT_CODEC) -> str:
    """Serialize `value` to compact JSON text according to `codec`."""
    return json.dumps(
        to_plain(value),
        ensure_ascii=not codec.utf8,
        sort_keys=codec.canonical_keys,
        separators=(",", ":"),
    )


def decode(text: str) -> Any:
    """Parse JSON text; malformed input raises json.JSONDecodeError."""
    return json.loads(text)

"""
Typed reading and writing of XML attribute values.

Readers are strict: a value that is present but does not parse is an error,
never a default.  Writers render floats in the shortest scientific form that
reads back to the identical 64-bit value.
"""
from __future__ import annotations

import re
from typing import Any, Callable, Dict, Mapping, Type, TypeVar, Union

import numpy as np

from .enums import TokenEnum
from .errors import InvalidValue, MissingAttribute
from .units import Length

T = TypeVar("T")

# Grammar accepted by the format for xs:double, which is narrower than float()
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)\Z",
    re.IGNORECASE,
)
_INT_RE = re.compile(r"[+-]?[0-9]+\Z")
_BOOLEANS = {"true": True, "1": True, "false": False, "0": False}


def _read_float(raw: str, field: str) -> float:
    if not _FLOAT_RE.match(raw):
        raise InvalidValue(field, raw, "a floating point number")
    return float(raw)


def _read_int(raw: str, field: str) -> int:
    if not _INT_RE.match(raw):
        raise InvalidValue(field, raw, "an integer")
    return int(raw)


def _read_bool(raw: str, field: str) -> bool:
    try:
        return _BOOLEANS[raw]
    except KeyError:
        raise InvalidValue(field, raw, "one of 'true', 'false', '1', '0'") from None


def _read_length(raw: str, field: str) -> Length:
    return Length(_read_float(raw, field))


_READERS: Dict[Any, Callable[[str, str], Any]] = {
    str: lambda raw, field: raw,
    float: _read_float,
    int: _read_int,
    bool: _read_bool,
    Length: _read_length,
}


def coerce(raw: str, field: str, kind: Union[Type[T], Callable[[str, str], T]]) -> T:
    """Convert ``raw`` into ``kind``; ``kind`` may also be a ``(raw, field)`` callable."""
    if isinstance(kind, type) and issubclass(kind, TokenEnum):
        return kind.parse(raw, field)
    reader = _READERS.get(kind)
    if reader is None:
        if callable(kind) and not isinstance(kind, type):
            return kind(raw, field)
        raise TypeError(f"no attribute reader registered for {kind!r}")
    return reader(raw, field)


def attribute(attributes: Mapping[str, str], name: str, kind=str):
    """Read a required attribute."""
    raw = attributes.get(name)
    if raw is None:
        raise MissingAttribute(name)
    return coerce(raw, name, kind)


def attributeOpt(attributes: Mapping[str, str], name: str, kind=str):
    """Read an optional attribute; ``None`` when absent."""
    raw = attributes.get(name)
    if raw is None:
        return None
    return coerce(raw, name, kind)


def toScientificString(value: float) -> str:
    """
    Render ``value`` as the shortest scientific text that round-trips exactly,
    e.g. ``1.5e+00``, ``-2.0e-03``, ``inf``.
    """
    return np.format_float_scientific(float(value), unique=True, trim="0")


def formatValue(value: Any) -> str:
    """Text form of a single attribute value as written to markup."""
    if isinstance(value, TokenEnum):
        return value.asStr()
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Length):
        return toScientificString(value.meters)
    if isinstance(value, float):
        return toScientificString(value)
    return str(value)


def attributePairs(*pairs) -> list:
    """
    Build the ordered ``(name, text)`` list handed to an attribute visitor,
    dropping optional values that are ``None``.
    """
    return [(name, formatValue(value)) for name, value in pairs if value is not None]

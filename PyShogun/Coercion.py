"""
Scalar coercion rules for loosely-typed documents.

Documents produced by real-world services often send numbers as strings, booleans
as 0/1, and so on. Each coercion accepts the native representation first, then
falls back through a fixed chain of alternatives, and raises a DecodingError that
identifies the path and the expected type if nothing matches.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum, auto
from typing import Any, TypeVar

import regex

from PyShogun.ShogunError import CodingPath, FormatCodingPath, TypeMismatchError, ValueNotFoundError

EnumType = TypeVar('EnumType', bound=Enum)

_int_pattern = regex.compile(r"[+-]?[0-9]+")
_uint_pattern = regex.compile(r"\+?[0-9]+")
_float_pattern = regex.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_float_special_pattern = regex.compile(r"[+-]?(?:inf|infinity|nan)", regex.IGNORECASE)

int64_min = -2**63
int64_max = 2**63 - 1
uint64_max = 2**64 - 1

class ValueKind(Enum):
    NULL = auto()
    BOOL = auto()
    INTEGER = auto()
    FLOAT = auto()
    STRING = auto()
    MAPPING = auto()
    SEQUENCE = auto()
    OTHER = auto()

def GetValueKind(value : Any) -> ValueKind:
    """
    Classify a document value. bool is checked before int because it is a subclass of it.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return ValueKind.SEQUENCE
    return ValueKind.OTHER

def ParseInt(text : str) -> int|None:
    """
    Parse a base-10 integer in the signed 64-bit range, without surrounding whitespace or digit separators
    """
    if _int_pattern.fullmatch(text):
        value = int(text)
        if int64_min <= value <= int64_max:
            return value
    return None

def ParseUInt(text : str) -> int|None:
    if _uint_pattern.fullmatch(text):
        value = int(text)
        if value <= uint64_max:
            return value
    return None

def ParseFloat(text : str) -> float|None:
    if _float_pattern.fullmatch(text) or _float_special_pattern.fullmatch(text):
        return float(text)
    return None

def _integral(value : float) -> int|None:
    if value.is_integer():
        return int(value)
    return None

def _require_value(value : Any, path : CodingPath, expected_type : str) -> ValueKind:
    kind = GetValueKind(value)
    if kind == ValueKind.NULL:
        raise ValueNotFoundError(path, expected_type)
    return kind

def CoerceInt(value : Any, path : CodingPath = ()) -> int:
    """
    Integer, then integral float, then base-10 string
    """
    kind = _require_value(value, path, 'Int')
    if kind == ValueKind.INTEGER:
        return value

    result : int|None = None
    if kind == ValueKind.FLOAT:
        result = _integral(value)
    elif kind == ValueKind.STRING:
        result = ParseInt(value)

    if result is None:
        raise TypeMismatchError(path, 'Int', value)
    return result

def CoerceUInt(value : Any, path : CodingPath = ()) -> int:
    """
    As CoerceInt, but negative values are rejected
    """
    kind = _require_value(value, path, 'UInt')
    result : int|None = None
    if kind == ValueKind.INTEGER:
        result = value
    elif kind == ValueKind.FLOAT:
        result = _integral(value)
    elif kind == ValueKind.STRING:
        result = ParseUInt(value)

    if result is None or result < 0:
        raise TypeMismatchError(path, 'UInt', value)
    return result

def CoerceFloat(value : Any, path : CodingPath = ()) -> float:
    """
    Float, then integer, then numeric string
    """
    kind = _require_value(value, path, 'Float')
    if kind == ValueKind.FLOAT:
        return value
    if kind == ValueKind.INTEGER:
        return float(value)
    if kind == ValueKind.STRING:
        result = ParseFloat(value)
        if result is not None:
            return result

    raise TypeMismatchError(path, 'Float', value)

def CoerceBool(value : Any, path : CodingPath = ()) -> bool:
    """
    Bool, then number (nonzero is true), then "true"/"false", then an integer string
    """
    kind = _require_value(value, path, 'Bool')
    if kind == ValueKind.BOOL:
        return value
    if kind == ValueKind.INTEGER:
        return value != 0
    if kind == ValueKind.FLOAT:
        integral = _integral(value)
        if integral is not None:
            return integral != 0
    elif kind == ValueKind.STRING:
        # case-sensitive, as "True" is not a valid JSON literal either
        if value == 'true':
            return True
        if value == 'false':
            return False

        int_value = ParseInt(value)
        if int_value is not None:
            return int_value != 0

    raise TypeMismatchError(path, 'Bool', value)

def CoerceStr(value : Any, path : CodingPath = ()) -> str:
    kind = _require_value(value, path, 'String')
    if kind != ValueKind.STRING:
        raise TypeMismatchError(path, 'String', value)
    return value

def GetEnumBacking(enum_type : type[Enum]) -> type:
    """
    Work out whether an enum is backed by strings or integers
    """
    values = [ member.value for member in enum_type ]
    if values and all(isinstance(v, str) for v in values):
        return str
    if values and all(isinstance(v, int) and not isinstance(v, bool) for v in values):
        return int
    raise TypeError(f"{enum_type.__name__} must have only string or only integer values to be decoded")

def CoerceEnum(value : Any, enum_type : type[EnumType], path : CodingPath = ()) -> EnumType:
    """
    Decode the raw value with the rule for the enum's backing type, then look up the member
    """
    backing = GetEnumBacking(enum_type)
    raw_value = CoerceStr(value, path) if backing is str else CoerceInt(value, path)

    try:
        return enum_type(raw_value)
    except ValueError:
        message = f"Impossible to decode {enum_type.__name__} for {FormatCodingPath(path)}: no case matches {raw_value!r}"
        raise TypeMismatchError(path, enum_type.__name__, value, message) from None

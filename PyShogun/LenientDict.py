from __future__ import annotations
from collections.abc import Mapping
import json
from typing import Any

from PyShogun.Coercion import GetValueKind, ParseFloat, ParseInt, ValueKind

class LenientDict(dict[str, Any]):
    """
    Dictionary with getters that convert loosely-typed values, returning a default instead of raising.

    Unlike the document Decoder, these lookups never fail: a value that is missing
    or cannot be converted gives the default.
    """
    def __init__(self, values : Mapping[str, Any]|None = None):
        super().__init__(dict(values or {}))

    def get_int(self, key : str, default : int|None = None) -> int|None:
        """Get an integer from an int, a float (truncated) or a numeric string"""
        value = self.get(key)
        kind = GetValueKind(value)

        if kind in (ValueKind.INTEGER, ValueKind.BOOL):
            return int(value)
        elif kind == ValueKind.FLOAT:
            try:
                return int(value)
            except (ValueError, OverflowError):
                return default
        elif kind == ValueKind.STRING:
            result = ParseInt(value)
            if result is not None:
                return result

        return default

    def get_float(self, key : str, default : float|None = None) -> float|None:
        """Get a float from a float, an int or a numeric string"""
        value = self.get(key)
        kind = GetValueKind(value)

        if kind in (ValueKind.FLOAT, ValueKind.INTEGER, ValueKind.BOOL):
            return float(value)
        elif kind == ValueKind.STRING:
            result = ParseFloat(value)
            if result is not None:
                return result

        return default

    def get_bool(self, key : str, default : bool|None = None) -> bool|None:
        """Get a boolean from a bool, a number (nonzero is true) or "true"/"false" """
        value = self.get(key)
        kind = GetValueKind(value)

        if kind == ValueKind.BOOL:
            return value
        elif kind in (ValueKind.INTEGER, ValueKind.FLOAT):
            return value != 0
        elif kind == ValueKind.STRING:
            if value == 'true':
                return True
            elif value == 'false':
                return False

        return default

    def get_str(self, key : str, default : str|None = None) -> str|None:
        """Get a string value, without converting other types"""
        value = self.get(key)
        if isinstance(value, str):
            return value

        return default

    def pretty_json(self) -> str:
        """
        Indented JSON representation of the dictionary, or an empty string if it cannot be serialized
        """
        try:
            return json.dumps(self, indent=2, ensure_ascii=False)
        except (TypeError, ValueError):
            return ""

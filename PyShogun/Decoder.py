"""
Explicit decoding of loosely-typed documents.

A Decoder wraps one value of a parsed document together with its coding path.
Model code asks it for a KeyedContainer (a mapping) or an UnkeyedContainer (a
list) and pulls typed fields out of them with the coercion rules in
PyShogun.Coercion, e.g.

    class Team:
        @classmethod
        def decode(cls, decoder : Decoder) -> Team:
            container = decoder.keyed_container()
            return cls(
                name=container.decode_str('team'),
                position=container.decode_int('position'),
                active=container.decode_bool('active'),
            )

    decoder = Decoder.from_json(text)
    teams = decoder.keyed_container().decode_list_ignoring_failures('teams', Team.decode)
"""
from __future__ import annotations

import json
from collections.abc import Callable, Mapping, Sequence
from enum import Enum
from typing import Any, TypeVar

from PyShogun.Coercion import (
    CoerceBool,
    CoerceEnum,
    CoerceFloat,
    CoerceInt,
    CoerceStr,
    CoerceUInt,
    GetValueKind,
    ParseFloat,
    ParseInt,
    ParseUInt,
    ValueKind,
)
from PyShogun.Coordinate import Coordinate
from PyShogun.DecodingEvents import DecodingEvents
from PyShogun.IgnoreFailure import DecodeIgnoringFailures
from PyShogun.ShogunError import (
    CodingPath,
    DecodingError,
    MissingKeyError,
    TypeMismatchError,
    ValueNotFoundError,
)

T = TypeVar('T')
EnumType = TypeVar('EnumType', bound=Enum)
DecodeFunction = Callable[['Decoder'], T]

class Decoder:
    """
    A single document value at a known coding path
    """
    def __init__(self, value : Any, coding_path : CodingPath = (), events : DecodingEvents|None = None):
        self.value = value
        self.coding_path : CodingPath = tuple(coding_path)
        self.events = events

    @classmethod
    def from_json(cls, text : str|bytes, events : DecodingEvents|None = None) -> Decoder:
        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise DecodingError((), 'JSON document', f"The given data was not valid JSON: {e.msg} at line {e.lineno} column {e.colno}") from e
        except UnicodeDecodeError as e:
            raise DecodingError((), 'JSON document', f"The given data was not valid {e.encoding}: {e.reason} at position {e.start}") from e

        return cls(document, events=events)

    def keyed_container(self) -> KeyedContainer:
        kind = GetValueKind(self.value)
        if kind == ValueKind.NULL:
            raise ValueNotFoundError(self.coding_path, 'Dictionary')
        if kind != ValueKind.MAPPING:
            raise TypeMismatchError(self.coding_path, 'Dictionary', self.value)
        return KeyedContainer(self.value, self.coding_path, self.events)

    def unkeyed_container(self) -> UnkeyedContainer:
        kind = GetValueKind(self.value)
        if kind == ValueKind.NULL:
            raise ValueNotFoundError(self.coding_path, 'Array')
        if kind != ValueKind.SEQUENCE:
            raise TypeMismatchError(self.coding_path, 'Array', self.value)
        return UnkeyedContainer(self.value, self.coding_path, self.events)

    def decode_nil(self) -> bool:
        return self.value is None

    def decode_int(self) -> int:
        return CoerceInt(self.value, self.coding_path)

    def decode_uint(self) -> int:
        return CoerceUInt(self.value, self.coding_path)

    def decode_float(self) -> float:
        return CoerceFloat(self.value, self.coding_path)

    def decode_bool(self) -> bool:
        return CoerceBool(self.value, self.coding_path)

    def decode_str(self) -> str:
        return CoerceStr(self.value, self.coding_path)

    def decode_enum(self, enum_type : type[EnumType]) -> EnumType:
        return CoerceEnum(self.value, enum_type, self.coding_path)

    def decode(self, decode_fn : DecodeFunction[T]) -> T:
        return decode_fn(self)


class KeyedContainer:
    """
    Typed access to the fields of a mapping
    """
    def __init__(self, document : Mapping[str, Any], coding_path : CodingPath = (), events : DecodingEvents|None = None):
        self._document = document
        self.coding_path : CodingPath = tuple(coding_path)
        self.events = events

    @property
    def keys(self) -> list[str]:
        return list(self._document.keys())

    def contains(self, key : str) -> bool:
        return key in self._document

    def path_for(self, key : str) -> CodingPath:
        return self.coding_path + (key,)

    def decode_nil(self, key : str) -> bool:
        """
        Whether the value for the key is null. The key must be present.
        """
        return self._value(key) is None

    def decode_int(self, key : str) -> int:
        return CoerceInt(self._value(key, 'Int'), self.path_for(key))

    def decode_uint(self, key : str) -> int:
        return CoerceUInt(self._value(key, 'UInt'), self.path_for(key))

    def decode_float(self, key : str) -> float:
        return CoerceFloat(self._value(key, 'Float'), self.path_for(key))

    def decode_bool(self, key : str) -> bool:
        return CoerceBool(self._value(key, 'Bool'), self.path_for(key))

    def decode_str(self, key : str) -> str:
        return CoerceStr(self._value(key, 'String'), self.path_for(key))

    def decode_enum(self, key : str, enum_type : type[EnumType]) -> EnumType:
        return CoerceEnum(self._value(key, enum_type.__name__), enum_type, self.path_for(key))

    def decode_int_if_present(self, key : str) -> int|None:
        """
        None if the key is absent or null, otherwise the value must be a string holding an integer
        """
        return self._decode_string_if_present(key, ParseInt, 'Int')

    def decode_uint_if_present(self, key : str) -> int|None:
        return self._decode_string_if_present(key, ParseUInt, 'UInt')

    def decode_float_if_present(self, key : str) -> float|None:
        return self._decode_string_if_present(key, ParseFloat, 'Float')

    def decode_str_if_present(self, key : str) -> str|None:
        if not self._is_present(key):
            return None
        return CoerceStr(self._document[key], self.path_for(key))

    def decode_string_or_int(self, key : str) -> int:
        """
        Decode an integer sent either as a number or as a string.
        A string that does not hold an integer decodes as 0.
        """
        value = self._value(key, 'Int')
        if GetValueKind(value) == ValueKind.STRING:
            return ParseInt(value) or 0
        return CoerceInt(value, self.path_for(key))

    def decode_coordinate(self, latitude_key : str = 'latitude', longitude_key : str = 'longitude') -> Coordinate:
        latitude = self.decode_float(latitude_key)
        longitude = self.decode_float(longitude_key)
        return Coordinate(latitude, longitude)

    def decode(self, key : str, decode_fn : DecodeFunction[T]) -> T:
        return decode_fn(self.nested_decoder(key))

    def decode_if_present(self, key : str, decode_fn : DecodeFunction[T]) -> T|None:
        if not self._is_present(key):
            return None
        return decode_fn(self.nested_decoder(key))

    def nested_decoder(self, key : str) -> Decoder:
        return Decoder(self._value(key), self.path_for(key), self.events)

    def nested_container(self, key : str) -> KeyedContainer:
        return self.nested_decoder(key).keyed_container()

    def nested_unkeyed_container(self, key : str) -> UnkeyedContainer:
        return self.nested_decoder(key).unkeyed_container()

    def decode_list_ignoring_failures(self, key : str, decode_fn : DecodeFunction[T]) -> list[T]:
        """
        Decode an array field, dropping the elements that fail to decode
        """
        return DecodeIgnoringFailures(self.nested_unkeyed_container(key), decode_fn, self.events)

    def _value(self, key : str, expected_type : str|None = None) -> Any:
        if key not in self._document:
            raise MissingKeyError(self.path_for(key), expected_type)
        return self._document[key]

    def _is_present(self, key : str) -> bool:
        return self._document.get(key) is not None

    def _decode_string_if_present(self, key : str, parse : Callable[[str], Any], expected_type : str) -> Any:
        if not self._is_present(key):
            return None

        value = self._document[key]
        result = parse(value) if GetValueKind(value) == ValueKind.STRING else None
        if result is None:
            raise TypeMismatchError(self.path_for(key), expected_type, value)
        return result


class UnkeyedContainer:
    """
    Positional access to the elements of a list.

    The cursor only advances when an element decodes successfully, so a failed
    decode can be retried with another type or consumed with skip().
    """
    def __init__(self, items : Sequence[Any], coding_path : CodingPath = (), events : DecodingEvents|None = None):
        self._items = items
        self._index = 0
        self.coding_path : CodingPath = tuple(coding_path)
        self.events = events

    @property
    def count(self) -> int:
        return len(self._items)

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def is_at_end(self) -> bool:
        return self._index >= len(self._items)

    def decode(self, decode_fn : DecodeFunction[T]) -> T:
        path = self.coding_path + (self._index,)
        if self.is_at_end:
            raise ValueNotFoundError(path, None)

        result = decode_fn(Decoder(self._items[self._index], path, self.events))
        self._index += 1
        return result

    def decode_nil(self) -> bool:
        """
        Consume the current element if it is null
        """
        if not self.is_at_end and self._items[self._index] is None:
            self._index += 1
            return True
        return False

    def decode_int(self) -> int:
        return self.decode(Decoder.decode_int)

    def decode_uint(self) -> int:
        return self.decode(Decoder.decode_uint)

    def decode_float(self) -> float:
        return self.decode(Decoder.decode_float)

    def decode_bool(self) -> bool:
        return self.decode(Decoder.decode_bool)

    def decode_str(self) -> str:
        return self.decode(Decoder.decode_str)

    def decode_enum(self, enum_type : type[EnumType]) -> EnumType:
        return self.decode(lambda decoder: decoder.decode_enum(enum_type))

    def nested_container(self) -> KeyedContainer:
        return self.decode(Decoder.keyed_container)

    def nested_unkeyed_container(self) -> UnkeyedContainer:
        return self.decode(Decoder.unkeyed_container)

    def skip(self) -> None:
        """
        Consume the current element without decoding it
        """
        if not self.is_at_end:
            self._index += 1

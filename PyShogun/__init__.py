"""
PyShogun - Convenience utilities for colors and loosely-typed documents

Basic Usage
-----------

# Parse hex colors and convert them back
color = Color.parse_hex("#A3C")          # Color(r=170, g=51, b=204, a=255)
color.to_hex()                           # '#AA33CC'
Color.from_hex("not a color")            # Color.clear

# Decode a model from JSON that sends numbers as strings
class Team:
    @classmethod
    def decode(cls, decoder : Decoder) -> 'Team':
        container = decoder.keyed_container()
        return cls(container.decode_str('team'), container.decode_int('position'))

team = decode_document('{"team": "Ferrari", "position": "1"}', Team.decode)

# Decode a list, skipping the elements that fail
events = DecodingEvents()
events.element_skipped.connect(lambda sender, path, error: print(path, error), weak=False)
teams = decode_list(text, Team.decode, events=events)
"""
from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from PyShogun.Color import Color
from PyShogun.Coordinate import Coordinate
from PyShogun.Decoder import Decoder, KeyedContainer, UnkeyedContainer
from PyShogun.DecodingEvents import DecodingEvents
from PyShogun.IgnoreFailure import DecodeIgnoringFailures
from PyShogun.LenientDict import LenientDict
from PyShogun.ShogunError import (
    ColorFormatError,
    DecodingError,
    MissingKeyError,
    ShogunError,
    TypeMismatchError,
    ValueNotFoundError,
)
from PyShogun.version import __version__

T = TypeVar('T')

def _create_decoder(document : str|bytes|Any, events : DecodingEvents|None) -> Decoder:
    if isinstance(document, (str, bytes, bytearray)):
        return Decoder.from_json(document, events=events)
    return Decoder(document, events=events)

def decode_document(document : str|bytes|Any, decode_fn : Callable[[Decoder], T], events : DecodingEvents|None = None) -> T:
    """
    Decode a document with the given decode function.

    Parameters
    ----------
    document : str | bytes | Any
        JSON text, or an already parsed document (dicts, lists and scalars).
    decode_fn : Callable[[Decoder], T]
        Function that builds the result from a Decoder for the document root.
    events : DecodingEvents, optional
        Signals to emit while decoding, e.g. for skipped sequence elements.

    Raises
    ------
    DecodingError
        If the document is not valid JSON or a required value cannot be decoded.
    """
    return decode_fn(_create_decoder(document, events))

def decode_list(document : str|bytes|Any, decode_fn : Callable[[Decoder], T], events : DecodingEvents|None = None) -> list[T]:
    """
    Decode a document whose root is an array, skipping elements that fail to decode.

    Raises
    ------
    DecodingError
        If the document is not valid JSON or its root is not an array.
    """
    container = _create_decoder(document, events).unkeyed_container()
    return DecodeIgnoringFailures(container, decode_fn, events)


__all__ = [
    '__version__',
    'Color',
    'ColorFormatError',
    'Coordinate',
    'DecodeIgnoringFailures',
    'Decoder',
    'DecodingError',
    'DecodingEvents',
    'KeyedContainer',
    'LenientDict',
    'MissingKeyError',
    'ShogunError',
    'TypeMismatchError',
    'UnkeyedContainer',
    'ValueNotFoundError',
    'decode_document',
    'decode_list',
]

from __future__ import annotations

import logging
import random

import regex

from PyShogun.Coercion import CoerceInt
from PyShogun.ShogunError import ColorFormatError, DecodingError

_hex_digits = regex.compile(r"[0-9A-Fa-f]+")

class Color:
    """
    RGBA color with 8-bit channels.

    Supports construction from packed integers and from hex strings in the
    #RGB, #RGBA, #RRGGBB and #RRGGBBAA formats, and conversion back to
    #RRGGBB or #RRGGBBAA. Short forms expand each digit to two (A -> AA),
    so they convert back to the long form, not to the original string.
    """
    clear : Color

    def __init__(self, r : int, g : int, b : int, a : int = 255):
        self.r = max(0, min(255, r))
        self.g = max(0, min(255, g))
        self.b = max(0, min(255, b))
        self.a = max(0, min(255, a))

    def __eq__(self, value: object) -> bool:
        if not isinstance(value, Color):
            return False

        return (self.r, self.g, self.b, self.a) == (value.r, value.g, value.b, value.a)

    def __hash__(self) -> int:
        return hash((self.r, self.g, self.b, self.a))

    def __repr__(self) -> str:
        return f"Color(r={self.r}, g={self.g}, b={self.b}, a={self.a})"

    @property
    def red(self) -> float:
        return self.r / 255

    @property
    def green(self) -> float:
        return self.g / 255

    @property
    def blue(self) -> float:
        return self.b / 255

    @property
    def alpha(self) -> float:
        return self.a / 255

    @classmethod
    def from_fractions(cls, red : float, green : float, blue : float, alpha : float = 1.0) -> Color:
        """Create Color from 0.0 - 1.0 channel values"""
        return cls(int(red * 255), int(green * 255), int(blue * 255), int(alpha * 255))

    @classmethod
    def from_hex3(cls, hex3 : int, alpha : float = 1.0) -> Color:
        """Create Color from a three-digit packed value, 0xRGB"""
        hex3 &= 0xFFF
        return cls(
            ((hex3 & 0xF00) >> 8) * 17,
            ((hex3 & 0x0F0) >> 4) * 17,
            (hex3 & 0x00F) * 17,
            int(alpha * 255)
        )

    @classmethod
    def from_hex4(cls, hex4 : int) -> Color:
        """Create Color from a four-digit packed value with alpha, 0xRGBA"""
        hex4 &= 0xFFFF
        return cls(
            ((hex4 & 0xF000) >> 12) * 17,
            ((hex4 & 0x0F00) >> 8) * 17,
            ((hex4 & 0x00F0) >> 4) * 17,
            (hex4 & 0x000F) * 17
        )

    @classmethod
    def from_hex6(cls, hex6 : int, alpha : float = 1.0) -> Color:
        """Create Color from a six-digit packed value, 0xRRGGBB"""
        hex6 &= 0xFFFFFF
        return cls(
            (hex6 & 0xFF0000) >> 16,
            (hex6 & 0x00FF00) >> 8,
            hex6 & 0x0000FF,
            int(alpha * 255)
        )

    @classmethod
    def from_hex8(cls, hex8 : int) -> Color:
        """Create Color from an eight-digit packed value with alpha, 0xRRGGBBAA"""
        hex8 &= 0xFFFFFFFF
        return cls(
            (hex8 & 0xFF000000) >> 24,
            (hex8 & 0x00FF0000) >> 16,
            (hex8 & 0x0000FF00) >> 8,
            hex8 & 0x000000FF
        )

    @classmethod
    def decode_hex(cls, hex_str : str) -> Color:
        """
        Create Color from #RGB, #RGBA, #RRGGBB or #RRGGBBAA format, raising ColorFormatError if the string is invalid.
        Surrounding whitespace and a single leading '#' are ignored, digits are case-insensitive.
        """
        digits = hex_str.strip()
        if digits.startswith('#'):
            digits = digits[1:]

        if not digits:
            raise ColorFormatError(f"Empty hex color string {hex_str!r}", hex_str)

        if not _hex_digits.fullmatch(digits):
            raise ColorFormatError(f"Scan of {hex_str!r} failed, it contains characters that are not hex digits", hex_str)

        value = int(digits, 16)
        if len(digits) == 3:
            return cls.from_hex3(value)
        elif len(digits) == 4:
            return cls.from_hex4(value)
        elif len(digits) == 6:
            return cls.from_hex6(value)
        elif len(digits) == 8:
            return cls.from_hex8(value)

        raise ColorFormatError(f"Invalid RGB string {hex_str!r}: found {len(digits)} characters after '#', should be either 3, 4, 6 or 8", hex_str)

    @classmethod
    def parse_hex(cls, hex_str : str) -> Color|None:
        """Create Color from a hex string, or return None if the string is not a valid color"""
        try:
            return cls.decode_hex(hex_str)
        except ColorFormatError as e:
            logging.warning(str(e))
            return None

    @classmethod
    def from_hex(cls, hex_str : str, default : Color|None = None) -> Color:
        """Create Color from a hex string, or return the default (transparent) if the string is not a valid color"""
        color = cls.parse_hex(hex_str)
        if color is None:
            return default if default is not None else cls.clear
        return color

    def to_hex(self, include_alpha : bool = False) -> str:
        """Convert to #RRGGBB or #RRGGBBAA format, or an empty string if the channels are out of range"""
        if not all(0 <= fraction <= 1 for fraction in (self.red, self.green, self.blue)):
            return ""

        if include_alpha:
            return f"#{self.r:02X}{self.g:02X}{self.b:02X}{self.a:02X}"
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def to_channels(self) -> tuple[int, int, int, int]|None:
        """Get the (red, green, blue, alpha) components as 0 - 255 integers"""
        channels = (self.r, self.g, self.b, self.a)
        if not all(isinstance(channel, (int, float)) for channel in channels):
            # Could not extract RGBA components
            return None

        return tuple(int(channel) for channel in channels)

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict"""
        return {'r': self.r, 'g': self.g, 'b': self.b, 'a': self.a}

    @classmethod
    def from_dict(cls, d : dict) -> Color:
        """Create from dict, accepting channels sent as numbers or numeric strings"""
        try:
            r = CoerceInt(d.get('r'), ('r',))
            g = CoerceInt(d.get('g'), ('g',))
            b = CoerceInt(d.get('b'), ('b',))
            a = CoerceInt(d['a'], ('a',)) if d.get('a') is not None else 255
        except DecodingError as e:
            raise ColorFormatError(f"Invalid color dictionary {d!r}: {e}") from e

        return cls(r, g, b, a)

    @classmethod
    def random(cls) -> Color:
        """
        Random color from a palette of basic named colors. Black and light/dark grays are not used.
        """
        return random.choice(basic_colors)

Color.clear = Color(0, 0, 0, 0)

basic_colors : list[Color] = [
    Color.from_fractions(1.0, 0.0, 0.0),        # red
    Color.from_fractions(0.5, 0.5, 0.5),        # gray
    Color.from_fractions(0.0, 0.0, 1.0),        # blue
    Color.from_fractions(0.0, 1.0, 1.0),        # cyan
    Color.from_fractions(1.0, 1.0, 0.0),        # yellow
    Color.from_fractions(1.0, 0.0, 1.0),        # magenta
    Color.from_fractions(1.0, 0.5, 0.0),        # orange
    Color.from_fractions(0.5, 0.0, 0.5),        # purple
    Color.from_fractions(0.6, 0.4, 0.2),        # brown
]

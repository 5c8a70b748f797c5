from __future__ import annotations

from typing import Any

CodingPath = tuple[str|int, ...]

def FormatCodingPath(path : CodingPath) -> str:
    """
    Format a coding path for display, e.g. ('teams', 2, 'country') -> 'teams[2].country'
    """
    if not path:
        return "<root>"

    text = ""
    for component in path:
        if isinstance(component, int):
            text += f"[{component}]"
        elif text:
            text += f".{component}"
        else:
            text = str(component)
    return text

class ShogunError(Exception):
    def __init__(self, message : str|None = None, error : Exception|None = None):
        super().__init__(message)
        self.message = message
        self.error = error

    def __str__(self) -> str:
        if self.error:
            return f"{self.message} ({str(self.error)})"
        return str(self.message)

class ColorFormatError(ShogunError):
    """
    A hex color string has an unsupported length or non-hex characters
    """
    def __init__(self, message : str, value : str|None = None):
        super().__init__(message)
        self.value = value

class DecodingError(ShogunError):
    """
    Base class for errors raised while decoding a document.

    Every decoding error identifies where in the document it happened and
    what type was expected there.
    """
    def __init__(self, path : CodingPath, expected_type : str|None = None, message : str|None = None, error : Exception|None = None):
        self.path : CodingPath = tuple(path)
        self.expected_type = expected_type
        super().__init__(message or self._default_message(), error)

    @property
    def path_description(self) -> str:
        return FormatCodingPath(self.path)

    def _default_message(self) -> str:
        return f"Unable to decode {self.expected_type or 'value'} at {self.path_description}"

class TypeMismatchError(DecodingError):
    """
    A value is present but cannot be coerced to the expected type
    """
    def __init__(self, path : CodingPath, expected_type : str, value : Any = None, message : str|None = None):
        self.value = value
        super().__init__(path, expected_type, message or f"Impossible to decode {expected_type} for {FormatCodingPath(path)}: got {type(value).__name__} {value!r}")

class MissingKeyError(DecodingError):
    """
    A required key is not in the document
    """
    def __init__(self, path : CodingPath, expected_type : str|None = None):
        super().__init__(path, expected_type, f"No value associated with key {FormatCodingPath(path)}")

class ValueNotFoundError(DecodingError):
    """
    A required value is present but null
    """
    def __init__(self, path : CodingPath, expected_type : str|None = None):
        super().__init__(path, expected_type, f"Expected {expected_type or 'value'} at {FormatCodingPath(path)} but found null")

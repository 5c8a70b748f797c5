import regex

from PyShogun.Coercion import ParseInt

_whitespace = regex.compile(r"\s+")

def IntValue(text : str) -> int:
    """
    Convert a string to an integer, or 0 if it is not one
    """
    result = ParseInt(text)
    return result if result is not None else 0

def CapitalizeFirst(text : str) -> str:
    """
    Uppercase the first character and lowercase the rest, e.g. 'hELLO wORLD' -> 'Hello world'
    """
    if not text:
        return ""
    return text[0].upper() + text[1:].lower()

def Trimmed(text : str) -> str:
    return text.strip()

def RemoveWhitespace(text : str) -> str:
    """
    Remove all whitespace and newline characters
    """
    return _whitespace.sub('', text)

def ContainsCaseInsensitive(text : str, other : str) -> bool:
    """
    Case-insensitive substring search. An empty string is never found.
    """
    if not other:
        return False
    return other.casefold() in text.casefold()

def IsNoneOrEmpty(text : str|None) -> bool:
    return not text

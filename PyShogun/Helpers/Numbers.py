import math

_roman_numerals : list[tuple[int, str]] = [
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"), (100, "C"),
    (90, "XC"), (50, "L"), (40, "XL"), (10, "X"),
    (9, "IX"), (5, "V"), (4, "IV"), (1, "I")
]

def BoolValue(number : int|float) -> bool:
    """
    True if the number is nonzero
    """
    return number != 0

def RomanNumeral(number : int) -> str:
    """
    Roman numeral representation of a positive integer, e.g. 1994 -> MCMXCIV.
    Zero and negative numbers give an empty string.
    """
    roman = ""
    remainder = max(number, 0)
    for value, numeral in _roman_numerals:
        count, remainder = divmod(remainder, value)
        roman += numeral * count
    return roman

def RoundToNearest(value : float, nearest : float) -> float:
    """
    Round a value to the nearest multiple of a fraction, e.g. 4.8 to the nearest 0.5 is 5.0.
    Halves round away from zero. A fraction outside 0 - 1 leaves the value unchanged.
    """
    if not 0 < nearest <= 1:
        return value

    n = 1 / nearest
    scaled = value * n
    return math.copysign(math.floor(abs(scaled) + 0.5), scaled) / n

def FloorToNearest(value : float, nearest : float) -> float:
    """
    Round a value down to a multiple of a fraction, e.g. 4.8 down to the nearest 0.5 is 4.5.
    Negative values are truncated towards zero. A fraction outside 0 - 1 leaves the value unchanged.
    """
    if not 0 < nearest <= 1:
        return value

    return int(value / nearest) * nearest

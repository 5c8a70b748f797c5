from PyShogun.Helpers.Bytes import HexString, Utf8String
from PyShogun.Helpers.Dates import DateOnly, FirstDayOfMonth, IsToday, LastDayOfMonth, WithComponent
from PyShogun.Helpers.Enums import NextCase
from PyShogun.Helpers.Numbers import BoolValue, FloorToNearest, RomanNumeral, RoundToNearest
from PyShogun.Helpers.Sequences import Chunked, Distinct, GroupBy
from PyShogun.Helpers.Text import CapitalizeFirst, ContainsCaseInsensitive, IntValue, IsNoneOrEmpty, RemoveWhitespace, Trimmed
from PyShogun.Helpers.Urls import AppendQueryItem, BasicAuthHeader, GetQueryParameter

__all__ = [
    'AppendQueryItem',
    'BasicAuthHeader',
    'BoolValue',
    'CapitalizeFirst',
    'Chunked',
    'ContainsCaseInsensitive',
    'DateOnly',
    'Distinct',
    'FirstDayOfMonth',
    'FloorToNearest',
    'GetQueryParameter',
    'GroupBy',
    'HexString',
    'IntValue',
    'IsNoneOrEmpty',
    'IsToday',
    'LastDayOfMonth',
    'NextCase',
    'RemoveWhitespace',
    'RomanNumeral',
    'RoundToNearest',
    'Trimmed',
    'Utf8String',
    'WithComponent',
]

import unittest
from datetime import date, datetime
from enum import Enum

from PyShogun import Helpers
from PyShogun.Helpers.Bytes import HexString, Utf8String
from PyShogun.Helpers.Dates import DateOnly, FirstDayOfMonth, IsToday, LastDayOfMonth, WithComponent
from PyShogun.Helpers.Enums import NextCase
from PyShogun.Helpers.Numbers import BoolValue, FloorToNearest, RomanNumeral, RoundToNearest
from PyShogun.Helpers.Sequences import Chunked, Distinct, GroupBy
from PyShogun.Helpers.TestCases import LoggedTestCase
from PyShogun.Helpers.Text import CapitalizeFirst, ContainsCaseInsensitive, IntValue, IsNoneOrEmpty, RemoveWhitespace, Trimmed
from PyShogun.Helpers.Urls import AppendQueryItem, BasicAuthHeader, GetQueryParameter

class Season(Enum):
    SPRING = "spring"
    SUMMER = "summer"
    AUTUMN = "autumn"
    WINTER = "winter"

class TestTextHelpers(LoggedTestCase):
    def test_IntValue(self):
        self.assertLoggedEqual("int", 42, IntValue("42"))
        self.assertLoggedEqual("not an int", 0, IntValue("forty-two"))

    def test_CapitalizeFirst(self):
        self.assertLoggedEqual("capitalized", "Hello world", CapitalizeFirst("hELLO wORLD"))
        self.assertLoggedEqual("empty", "", CapitalizeFirst(""))

    def test_Whitespace(self):
        self.assertLoggedEqual("trimmed", "a b", Trimmed("  a b\n"))
        self.assertLoggedEqual("removed", "abc", RemoveWhitespace(" a\tb\nc "))

    def test_ContainsCaseInsensitive(self):
        self.assertLoggedTrue("contains", ContainsCaseInsensitive("Formula One", "ONE"))
        self.assertLoggedFalse("does not contain", ContainsCaseInsensitive("Formula One", "two"))
        self.assertLoggedFalse("empty search", ContainsCaseInsensitive("Formula One", ""))

    def test_IsNoneOrEmpty(self):
        self.assertLoggedTrue("None", IsNoneOrEmpty(None))
        self.assertLoggedTrue("empty", IsNoneOrEmpty(""))
        self.assertLoggedFalse("text", IsNoneOrEmpty(" "))

class TestSequenceHelpers(LoggedTestCase):
    def test_Chunked(self):
        self.assertLoggedEqual("chunks", [[1, 2], [3, 4], [5]], Chunked([1, 2, 3, 4, 5], 2))
        self.assertLoggedEqual("empty", [], Chunked([], 3))
        self.assertLoggedRaises("zero size", ValueError, Chunked, [1], 0)

    def test_GroupBy(self):
        groups = GroupBy(["apple", "avocado", "banana"], lambda s: s[0])
        self.assertLoggedEqual("groups", {'a': ["apple", "avocado"], 'b': ["banana"]}, groups)

    def test_Distinct(self):
        self.assertLoggedEqual("distinct", [3, 1, 2], Distinct([3, 1, 3, 2, 1]))

class TestNumberHelpers(LoggedTestCase):
    def test_BoolValue(self):
        self.assertLoggedTrue("nonzero", BoolValue(3))
        self.assertLoggedFalse("zero", BoolValue(0.0))

    def test_RomanNumeral(self):
        cases = [(1, "I"), (4, "IV"), (9, "IX"), (14, "XIV"), (1994, "MCMXCIV"), (2024, "MMXXIV"), (0, ""), (-5, "")]
        for number, expected in cases:
            with self.subTest(number=number):
                self.assertLoggedEqual("roman", expected, RomanNumeral(number), input_value=number)

    def test_RoundToNearest(self):
        self.assertLoggedEqual("round up", 5.0, RoundToNearest(4.8, 0.5))
        self.assertLoggedEqual("round half away from zero", 4.5, RoundToNearest(4.25, 0.5))
        self.assertLoggedEqual("negative", -4.5, RoundToNearest(-4.25, 0.5))
        self.assertLoggedEqual("invalid fraction", 4.8, RoundToNearest(4.8, 2))

    def test_FloorToNearest(self):
        self.assertLoggedEqual("floor", 4.5, FloorToNearest(4.8, 0.5))
        self.assertLoggedEqual("invalid fraction", 4.8, FloorToNearest(4.8, 0))

class TestDateHelpers(LoggedTestCase):
    def test_MonthBounds(self):
        self.assertLoggedEqual("first day", date(2022, 2, 1), FirstDayOfMonth(2, 2022))
        self.assertLoggedEqual("last day leap year", date(2024, 2, 29), LastDayOfMonth(2, 2024))
        self.assertLoggedEqual("last day", date(2023, 2, 28), LastDayOfMonth(2, 2023))
        self.assertLoggedEqual("month overflow", date(2023, 1, 1), FirstDayOfMonth(13, 2022))

    def test_IsToday(self):
        reference = date(2024, 6, 1)
        self.assertLoggedTrue("same day", IsToday(datetime(2024, 6, 1, 23, 59), today=reference))
        self.assertLoggedFalse("other day", IsToday(date(2024, 6, 2), today=reference))
        self.assertLoggedTrue("today", IsToday(date.today()))

    def test_DateOnly(self):
        self.assertLoggedEqual("date only", datetime(2024, 6, 1), DateOnly(datetime(2024, 6, 1, 12, 30, 15, 500)))

    def test_WithComponent(self):
        value = datetime(2024, 1, 31, 10, 0)
        self.assertLoggedEqual("hour", datetime(2024, 1, 31, 18, 0), WithComponent(value, 'hour', 18))
        self.assertLoggedIsNone("invalid day", WithComponent(value, 'month', 2))
        self.assertLoggedRaises("unknown component", ValueError, WithComponent, value, 'fortnight', 1)

class TestEnumHelpers(LoggedTestCase):
    def test_NextCase(self):
        self.assertLoggedEqual("next", Season.SUMMER, NextCase(Season.SPRING))
        self.assertLoggedEqual("wraps", Season.SPRING, NextCase(Season.WINTER))

class TestBytesHelpers(LoggedTestCase):
    def test_HexString(self):
        self.assertLoggedEqual("hex", "00ff10", HexString(bytes([0, 255, 16])))

    def test_Utf8String(self):
        self.assertLoggedEqual("utf-8", "café", Utf8String("café".encode('utf-8')))
        self.assertLoggedEqual("invalid", "", Utf8String(b"\xff\xfe"))

class TestUrlHelpers(LoggedTestCase):
    def test_AppendQueryItem(self):
        self.assertLoggedEqual("first item", "https://example.com/path?q=a+b", AppendQueryItem("https://example.com/path", 'q', "a b"))
        self.assertLoggedEqual("second item", "https://example.com/?a=1&b=2", AppendQueryItem("https://example.com/?a=1", 'b', "2"))
        self.assertLoggedEqual("no value", "https://example.com/?flag", AppendQueryItem("https://example.com/", 'flag', None))

    def test_GetQueryParameter(self):
        url = "https://example.com/?a=1&b=&a=2"
        self.assertLoggedEqual("first value", "1", GetQueryParameter(url, 'a'))
        self.assertLoggedEqual("blank value", "", GetQueryParameter(url, 'b'))
        self.assertLoggedIsNone("missing", GetQueryParameter(url, 'c'))

    def test_BasicAuthHeader(self):
        self.assertLoggedEqual("header", {'Authorization': "Basic dXNlcjpwYXNz"}, BasicAuthHeader("user", "pass"))

class TestHelpersPackage(LoggedTestCase):
    def test_HelpersExportedFromPackage(self):
        self.assertLoggedIs("Chunked", Chunked, Helpers.Chunked)
        self.assertLoggedIs("RomanNumeral", RomanNumeral, Helpers.RomanNumeral)
        self.assertLoggedEqual("GroupBy through package", {1: ["a"], 2: ["bb"]}, Helpers.GroupBy(["a", "bb"], len))
        for name in Helpers.__all__:
            with self.subTest(name=name):
                self.assertLoggedTrue("exported", callable(getattr(Helpers, name)), input_value=name)

if __name__ == '__main__':
    unittest.main()

import unittest
from enum import Enum

from PyShogun.Coercion import (
    CoerceBool,
    CoerceEnum,
    CoerceFloat,
    CoerceInt,
    CoerceStr,
    CoerceUInt,
    GetEnumBacking,
    GetValueKind,
    ParseFloat,
    ParseInt,
    ParseUInt,
    ValueKind,
)
from PyShogun.Helpers.TestCases import LoggedTestCase
from PyShogun.ShogunError import TypeMismatchError, ValueNotFoundError

class Direction(Enum):
    NORTH = "north"
    SOUTH = "south"

class Priority(Enum):
    LOW = 1
    HIGH = 2

class Mixed(Enum):
    ONE = 1
    TWO = "two"

class TestValueKind(LoggedTestCase):
    cases = [
        (None, ValueKind.NULL),
        (True, ValueKind.BOOL),
        (0, ValueKind.INTEGER),
        (1.5, ValueKind.FLOAT),
        ("text", ValueKind.STRING),
        ({}, ValueKind.MAPPING),
        ([], ValueKind.SEQUENCE),
        (b"bytes", ValueKind.OTHER),
    ]

    def test_GetValueKind(self):
        for value, expected in self.cases:
            with self.subTest(value=value):
                self.assertLoggedEqual("kind", expected, GetValueKind(value), input_value=value)

class TestParsing(LoggedTestCase):
    def test_ParseInt(self):
        cases = [("42", 42), ("-7", -7), ("+3", 3), ("007", 7), ("4.2", None), (" 42", None), ("1_000", None), ("", None), ("abc", None)]
        for text, expected in cases:
            with self.subTest(text=text):
                self.assertLoggedEqual("parsed", expected, ParseInt(text), input_value=text)

    def test_ParseIntRange(self):
        cases = [
            ("9223372036854775807", 9223372036854775807),
            ("-9223372036854775808", -9223372036854775808),
            ("9223372036854775808", None),
            ("-9223372036854775809", None),
            ("100000000000000000000", None),
        ]
        for text, expected in cases:
            with self.subTest(text=text):
                self.assertLoggedEqual("parsed", expected, ParseInt(text), input_value=text)

    def test_ParseUIntRange(self):
        self.assertLoggedEqual("max", 18446744073709551615, ParseUInt("18446744073709551615"))
        self.assertLoggedIsNone("overflow", ParseUInt("18446744073709551616"))
        self.assertLoggedIsNone("negative", ParseUInt("-1"))

    def test_OverflowingStringIsMismatch(self):
        self.assertLoggedRaises("int overflow", TypeMismatchError, CoerceInt, "9223372036854775808")
        self.assertLoggedEqual("uint above int range", 9223372036854775808, CoerceUInt("9223372036854775808"))

    def test_ParseFloat(self):
        cases = [("1.5", 1.5), ("-2", -2.0), (".5", 0.5), ("1e3", 1000.0), ("5.", 5.0), ("abc", None), ("1.2.3", None), ("", None)]
        for text, expected in cases:
            with self.subTest(text=text):
                self.assertLoggedEqual("parsed", expected, ParseFloat(text), input_value=text)

    def test_ParseFloatSpecialValues(self):
        self.assertLoggedEqual("inf", float('inf'), ParseFloat("inf"))
        self.assertLoggedEqual("-Infinity", float('-inf'), ParseFloat("-Infinity"))
        value = ParseFloat("NaN")
        self.assertLoggedTrue("nan", value != value)

class TestCoercion(LoggedTestCase):
    def test_CoerceInt(self):
        cases = [(42, 42), ("42", 42), (3.0, 3), ("-12", -12)]
        for value, expected in cases:
            with self.subTest(value=value):
                self.assertLoggedEqual("int", expected, CoerceInt(value), input_value=value)

    def test_CoerceIntFailures(self):
        for value in ["abc", "4.5", 4.5, True, [], {}]:
            with self.subTest(value=value):
                error = self.assertLoggedRaises("not an int", TypeMismatchError, CoerceInt, value, ('count',))
                self.assertLoggedEqual("path", ('count',), error.path)
                self.assertLoggedEqual("expected type", 'Int', error.expected_type)

        self.assertLoggedRaises("null", ValueNotFoundError, CoerceInt, None)

    def test_CoerceUInt(self):
        self.assertLoggedEqual("uint", 5, CoerceUInt("5"))
        self.assertLoggedEqual("uint from int", 0, CoerceUInt(0))
        self.assertLoggedRaises("negative", TypeMismatchError, CoerceUInt, -1)
        self.assertLoggedRaises("negative string", TypeMismatchError, CoerceUInt, "-1")

    def test_CoerceFloat(self):
        cases = [(1.5, 1.5), (2, 2.0), ("2.25", 2.25), ("3", 3.0)]
        for value, expected in cases:
            with self.subTest(value=value):
                self.assertLoggedEqual("float", expected, CoerceFloat(value), input_value=value)

        self.assertLoggedRaises("not a float", TypeMismatchError, CoerceFloat, "one")
        self.assertLoggedRaises("bool is not a float", TypeMismatchError, CoerceFloat, False)

    def test_CoerceBool(self):
        cases = [(True, True), (False, False), (1, True), (0, False), (2, True), (1.0, True),
                 ("true", True), ("false", False), ("1", True), ("0", False)]
        for value, expected in cases:
            with self.subTest(value=value):
                self.assertLoggedEqual("bool", expected, CoerceBool(value), input_value=value)

    def test_CoerceBoolFailures(self):
        for value in ["yes", "True", "", 0.5, []]:
            with self.subTest(value=value):
                self.assertLoggedRaises("not a bool", TypeMismatchError, CoerceBool, value)

    def test_CoerceStr(self):
        self.assertLoggedEqual("str", "text", CoerceStr("text"))
        self.assertLoggedEqual("empty str", "", CoerceStr(""))
        self.assertLoggedRaises("number is not a string", TypeMismatchError, CoerceStr, 42)

class TestEnumCoercion(LoggedTestCase):
    def test_Backing(self):
        self.assertLoggedIs("string backed", str, GetEnumBacking(Direction))
        self.assertLoggedIs("int backed", int, GetEnumBacking(Priority))
        self.assertLoggedRaises("mixed values", TypeError, GetEnumBacking, Mixed)

    def test_StringBackedEnum(self):
        self.assertLoggedEqual("member", Direction.SOUTH, CoerceEnum("south", Direction))
        self.assertLoggedRaises("case-sensitive", TypeMismatchError, CoerceEnum, "SOUTH", Direction)

    def test_IntBackedEnum(self):
        self.assertLoggedEqual("member", Priority.HIGH, CoerceEnum(2, Priority))
        self.assertLoggedEqual("member from string", Priority.LOW, CoerceEnum("1", Priority))

    def test_NoMatchingMember(self):
        error = self.assertLoggedRaises("no member", TypeMismatchError, CoerceEnum, 3, Priority, ('priority',))
        self.assertLoggedEqual("expected type", 'Priority', error.expected_type)
        self.assertLoggedIn("message", "no case matches", str(error))

if __name__ == '__main__':
    unittest.main()

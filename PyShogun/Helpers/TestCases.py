import unittest
from collections.abc import Sequence
from typing import Any

from PyShogun.Helpers.Tests import log_input_expected_error, log_input_expected_result, log_test_name

class LoggedTestCase(unittest.TestCase):
    """
    TestCase that logs the name of each test and the values behind each assertion
    """
    @classmethod
    def setUpClass(cls) -> None:
        super().setUpClass()
        log_test_name(f"{cls.__name__}")

    def setUp(self) -> None:
        super().setUp()
        log_test_name(self._testMethodName)

    def _log(self, label : str, expected : Any, actual : Any, input_value : Any = None) -> None:
        log_input_expected_result(label if input_value is None else f"{label} ({input_value!r})", expected, actual)

    def assertLoggedEqual(self, label : str, expected : Any, actual : Any, msg : str|None = None, input_value : Any = None) -> None:
        self._log(label, expected, actual, input_value)
        self.assertEqual(expected, actual, msg)

    def assertLoggedNotEqual(self, label : str, unexpected : Any, actual : Any, msg : str|None = None, input_value : Any = None) -> None:
        self._log(label, f"not {unexpected!r}", actual, input_value)
        self.assertNotEqual(unexpected, actual, msg)

    def assertLoggedAlmostEqual(self, label : str, expected : float, actual : float, places : int = 7, msg : str|None = None, input_value : Any = None) -> None:
        self._log(label, expected, actual, input_value)
        self.assertAlmostEqual(expected, actual, places=places, msg=msg)

    def assertLoggedTrue(self, label : str, value : Any, msg : str|None = None, input_value : Any = None) -> None:
        self._log(label, True, value, input_value)
        self.assertTrue(value, msg)

    def assertLoggedFalse(self, label : str, value : Any, msg : str|None = None, input_value : Any = None) -> None:
        self._log(label, False, value, input_value)
        self.assertFalse(value, msg)

    def assertLoggedIsNone(self, label : str, value : Any, msg : str|None = None, input_value : Any = None) -> None:
        self._log(label, None, value, input_value)
        self.assertIsNone(value, msg)

    def assertLoggedIsNotNone(self, label : str, value : Any, msg : str|None = None, input_value : Any = None) -> None:
        self._log(label, "not None", value, input_value)
        self.assertIsNotNone(value, msg)

    def assertLoggedIs(self, label : str, expected : Any, actual : Any, msg : str|None = None, input_value : Any = None) -> None:
        self._log(label, expected, actual, input_value)
        self.assertIs(expected, actual, msg)

    def assertLoggedIn(self, label : str, member : Any, container : Any, msg : str|None = None, input_value : Any = None) -> None:
        self._log(label, f"{member!r} in container", container, input_value)
        self.assertIn(member, container, msg)

    def assertLoggedNotIn(self, label : str, member : Any, container : Any, msg : str|None = None, input_value : Any = None) -> None:
        self._log(label, f"{member!r} not in container", container, input_value)
        self.assertNotIn(member, container, msg)

    def assertLoggedIsInstance(self, label : str, obj : Any, cls : type, msg : str|None = None, input_value : Any = None) -> None:
        self._log(label, cls.__name__, type(obj).__name__, input_value)
        self.assertIsInstance(obj, cls, msg)

    def assertLoggedLessEqual(self, label : str, first : Any, second : Any, msg : str|None = None, input_value : Any = None) -> None:
        self._log(label, f"<= {second!r}", first, input_value)
        self.assertLessEqual(first, second, msg)

    def assertLoggedSequenceEqual(self, label : str, expected : Sequence[Any], actual : Sequence[Any], msg : str|None = None, input_value : Any = None) -> None:
        self._log(label, expected, actual, input_value)
        self.assertSequenceEqual(expected, actual, msg)

    def assertLoggedRaises(self, label : str, expected_error : type[Exception], function, *args, **kwargs) -> Exception:
        """
        Assert that calling function raises expected_error, log it and return the exception
        """
        with self.assertRaises(expected_error) as e:
            function(*args, **kwargs)

        log_input_expected_error(label, expected_error, e.exception)
        return e.exception

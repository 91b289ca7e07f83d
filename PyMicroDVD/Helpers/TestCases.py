import unittest
from collections.abc import Sequence
from typing import Any

from PyMicroDVD.Helpers.Tests import log_input_expected_result, log_test_name

class LoggedTestCase(unittest.TestCase):
    """
    TestCase that logs each test name and the values it compares
    """
    @classmethod
    def setUpClass(cls) -> None:
        super().setUpClass()
        log_test_name(f"{cls.__name__}")

    def setUp(self) -> None:
        super().setUp()
        log_test_name(self._testMethodName)

    def assertLoggedEqual(self, description : str, expected : Any, actual : Any, input_value : Any = None) -> None:
        log_input_expected_result(input_value if input_value is not None else description, expected, actual)
        self.assertEqual(expected, actual, description)

    def assertLoggedSequenceEqual(self, description : str, expected : Sequence, actual : Sequence, input_value : Any = None) -> None:
        log_input_expected_result(input_value if input_value is not None else description, expected, actual)
        self.assertSequenceEqual(expected, actual, description)

    def assertLoggedTrue(self, description : str, actual : Any, input_value : Any = None) -> None:
        log_input_expected_result(input_value if input_value is not None else description, True, actual)
        self.assertTrue(actual, description)

    def assertLoggedFalse(self, description : str, actual : Any, input_value : Any = None) -> None:
        log_input_expected_result(input_value if input_value is not None else description, False, actual)
        self.assertFalse(actual, description)

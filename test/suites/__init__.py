"""
Module tests entrypoint.
"""

import unittest

from .test_temporal import TestSuiteTemporal
from .test_temporal_arithmetic import TestSuiteTemporalArithmetic
from .test_conversion import TestSuiteConversion
from .test_msgpack_ext import TestSuiteMsgpackExt
from .test_converter import TestSuiteConverter
from .test_package import TestSuitePackage, TestSuitePackageSetup

test_cases = (TestSuiteTemporal, TestSuiteTemporalArithmetic,
              TestSuiteConversion, TestSuiteMsgpackExt,
              TestSuiteConverter, TestSuitePackage,
              TestSuitePackageSetup,)


def load_tests(loader, tests, pattern):
    """
    Add suites to test run.
    """
    # pylint: disable=unused-argument

    suite = unittest.TestSuite()
    for testc in test_cases:
        suite.addTests(loader.loadTestsFromTestCase(testc))
    return suite


# Workaround to disable unittest output truncating
__import__('sys').modules['unittest.util']._MAX_LENGTH = 99999  # pylint: disable=protected-access

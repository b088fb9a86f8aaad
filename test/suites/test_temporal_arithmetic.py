"""
This module tests temporal value arithmetic.
"""
# pylint: disable=missing-class-docstring,missing-function-docstring,duplicate-code

import random
import re
import sys
import unittest

import nanotemporal
from nanotemporal.const import INT64_MIN, INT64_MAX, MAX_NANOS
from nanotemporal.error import NullArgumentError, TemporalOverflowError


class TestSuiteTemporalArithmetic(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        print(' TEMPORAL VALUE ARITHMETIC '.center(70, '='), file=sys.stderr)
        print('-' * 70, file=sys.stderr)

    arithmetic_cases = {
        'simple': {
            'arg_1': nanotemporal.TemporalValue(100, 200000000),
            'arg_2': nanotemporal.TemporalValue(50, 100000000),
            'res_add': nanotemporal.TemporalValue(150, 300000000),
            'res_sub': nanotemporal.TemporalValue(50, 100000000),
        },
        'nanos_carry_and_borrow': {
            'arg_1': nanotemporal.TemporalValue(100, 500000000),
            'arg_2': nanotemporal.TemporalValue(50, 600000000),
            'res_add': nanotemporal.TemporalValue(151, 100000000),
            'res_sub': nanotemporal.TemporalValue(49, 900000000),
        },
        'exact_second': {
            'arg_1': nanotemporal.TemporalValue(1, 400000000),
            'arg_2': nanotemporal.TemporalValue(0, 600000000),
            'res_add': nanotemporal.TemporalValue(2, 0),
            'res_sub': nanotemporal.TemporalValue(0, 800000000),
        },
        'negative_result': {
            'arg_1': nanotemporal.TemporalValue(0, 100000000),
            'arg_2': nanotemporal.TemporalValue(1, 0),
            'res_add': nanotemporal.TemporalValue(1, 100000000),
            'res_sub': nanotemporal.TemporalValue(-1, 100000000),
        },
        'negative_operands': {
            'arg_1': nanotemporal.TemporalValue(-5, 999999999),
            'arg_2': nanotemporal.TemporalValue(-3, 1),
            'res_add': nanotemporal.TemporalValue(-7, 0),
            'res_sub': nanotemporal.TemporalValue(-2, 999999998),
        },
        'zero': {
            'arg_1': nanotemporal.TemporalValue(123456789, 123456789),
            'arg_2': nanotemporal.TemporalValue(),
            'res_add': nanotemporal.TemporalValue(123456789, 123456789),
            'res_sub': nanotemporal.TemporalValue(123456789, 123456789),
        },
    }

    def test_add(self):
        for name, case in self.arithmetic_cases.items():
            with self.subTest(msg=name):
                self.assertEqual(case['arg_1'].add(case['arg_2']), case['res_add'])
                self.assertEqual(case['arg_1'] + case['arg_2'], case['res_add'])
                self.assertEqual(case['arg_2'] + case['arg_1'], case['res_add'])

    def test_subtract(self):
        for name, case in self.arithmetic_cases.items():
            with self.subTest(msg=name):
                self.assertEqual(case['arg_1'].subtract(case['arg_2']), case['res_sub'])
                self.assertEqual(case['arg_1'] - case['arg_2'], case['res_sub'])

    def test_operands_are_not_modified(self):
        left = nanotemporal.TemporalValue(100, 500000000)
        right = nanotemporal.TemporalValue(50, 600000000)
        _ = left + right
        _ = left - right
        self.assertEqual(left, nanotemporal.TemporalValue(100, 500000000))
        self.assertEqual(right, nanotemporal.TemporalValue(50, 600000000))

    def test_add_subtract_inverse(self):
        rnd = random.Random(20221017)
        for _ in range(1000):
            left = nanotemporal.TemporalValue(rnd.randint(-2 ** 50, 2 ** 50),
                                              rnd.randint(0, MAX_NANOS))
            right = nanotemporal.TemporalValue(rnd.randint(-2 ** 50, 2 ** 50),
                                               rnd.randint(0, MAX_NANOS))
            with self.subTest(msg=f'{left!r}, {right!r}'):
                self.assertEqual((left + right) - right, left)
                self.assertEqual(left + (nanotemporal.TemporalValue() - left),
                                 nanotemporal.TemporalValue())
                self.assertEqual((left + right).to_nanos(),
                                 left.to_nanos() + right.to_nanos())

    abs_cases = {
        'zero': {
            'arg': nanotemporal.TemporalValue(),
            'res': nanotemporal.TemporalValue(),
        },
        'positive': {
            'arg': nanotemporal.TemporalValue(100, 500000000),
            'res': nanotemporal.TemporalValue(100, 500000000),
        },
        'negative_whole_seconds': {
            'arg': nanotemporal.TemporalValue(-100, 0),
            'res': nanotemporal.TemporalValue(100, 0),
        },
        'negative_with_nanos': {
            'arg': nanotemporal.TemporalValue(-101, 500000000),
            'res': nanotemporal.TemporalValue(100, 500000000),
        },
        'minus_one_nanosecond': {
            'arg': nanotemporal.TemporalValue(-1, 999999999),
            'res': nanotemporal.TemporalValue(0, 1),
        },
        'int64_min_with_nanos': {
            'arg': nanotemporal.TemporalValue(INT64_MIN, 1),
            'res': nanotemporal.TemporalValue(INT64_MAX, 999999999),
        },
    }

    def test_abs(self):
        for name, case in self.abs_cases.items():
            with self.subTest(msg=name):
                self.assertEqual(case['arg'].abs(), case['res'])
                self.assertEqual(abs(case['arg']), case['res'])

    def test_abs_returns_same_object_for_non_negative(self):
        value = nanotemporal.TemporalValue(1, 1)
        self.assertIs(abs(value), value)

    def test_abs_is_never_negative(self):
        rnd = random.Random(7)
        for _ in range(1000):
            value = nanotemporal.TemporalValue(rnd.randint(INT64_MIN + 1, INT64_MAX),
                                               rnd.randint(0, MAX_NANOS))
            with self.subTest(msg=repr(value)):
                self.assertFalse(abs(value).is_negative())

    def test_negate(self):
        self.assertEqual(-nanotemporal.TemporalValue(100, 500000000),
                         nanotemporal.TemporalValue(-101, 500000000))
        self.assertEqual(nanotemporal.TemporalValue(-1, 999999999).negate(),
                         nanotemporal.TemporalValue(0, 1))
        self.assertEqual(-nanotemporal.TemporalValue(), nanotemporal.TemporalValue())

    overflow_cases = {
        'add_above_int64': lambda: (nanotemporal.TemporalValue(INT64_MAX, 600000000) +
                                    nanotemporal.TemporalValue(0, 400000000)),
        'subtract_below_int64': lambda: (nanotemporal.TemporalValue(INT64_MIN, 0) -
                                         nanotemporal.TemporalValue(0, 1)),
        'abs_int64_min': lambda: abs(nanotemporal.TemporalValue(INT64_MIN, 0)),
        'negate_int64_min': lambda: -nanotemporal.TemporalValue(INT64_MIN, 0),
    }

    def test_overflow(self):
        for name, func in self.overflow_cases.items():
            with self.subTest(msg=name):
                self.assertRaises(TemporalOverflowError, func)

    def test_add_none(self):
        self.assertRaisesRegex(
            NullArgumentError, re.escape('other cannot be None'),
            lambda: nanotemporal.TemporalValue().add(None))

    def test_subtract_none(self):
        self.assertRaisesRegex(
            NullArgumentError, re.escape('other cannot be None'),
            lambda: nanotemporal.TemporalValue().subtract(None))

    def test_add_invalid_type(self):
        self.assertRaisesRegex(
            TypeError, re.escape("unsupported operand type(s) for +: "
                                 "'<class 'nanotemporal.msgpack_ext.types.temporal.TemporalValue'>' "
                                 "and '<class 'int'>'"),
            lambda: nanotemporal.TemporalValue() + 1)

    def test_subtract_invalid_type(self):
        self.assertRaisesRegex(
            TypeError, re.escape("unsupported operand type(s) for -: "),
            lambda: nanotemporal.TemporalValue() - 1.5)

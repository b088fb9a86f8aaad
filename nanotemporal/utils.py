"""
This module provides utility functions for the package.
"""

import numbers

from nanotemporal.const import INT64_MIN, INT64_MAX
from nanotemporal.error import NullArgumentError, TemporalOverflowError


def require_not_none(value, parameter):
    """
    Check that a required argument is provided.

    :param value: Argument value.
    :type value: any

    :param parameter: Argument name, used in the error message.
    :type parameter: :obj:`str`

    :return: Unchanged value.

    :raise: :exc:`~nanotemporal.error.NullArgumentError`
    """

    if value is None:
        raise NullArgumentError(parameter)
    return value


def require_int(value, parameter):
    """
    Check that an argument is an integer and return it as :obj:`int`.
    Any :class:`numbers.Integral` (numpy integers included) is
    accepted, :obj:`bool` is rejected even though it is an :obj:`int`
    subclass.

    :param value: Argument value.
    :type value: any

    :param parameter: Argument name, used in the error message.
    :type parameter: :obj:`str`

    :rtype: :obj:`int`

    :raise: :exc:`~nanotemporal.error.NullArgumentError`,
        :exc:`TypeError`
    """

    require_not_none(value, parameter)
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{parameter} must be int, not {type(value).__name__}")
    return int(value)


def check_seconds_range(seconds):
    """
    Check that seconds fit the signed 64-bit column.

    :param seconds: Seconds value.
    :type seconds: :obj:`int`

    :return: Unchanged value.

    :raise: :exc:`~nanotemporal.error.TemporalOverflowError`
    """

    if (seconds < INT64_MIN) or (seconds > INT64_MAX):
        raise TemporalOverflowError(f"seconds value {seconds} is out of "
                                    f"allowed range [{INT64_MIN}, {INT64_MAX}]")
    return seconds

# pylint: disable=C0301,W0105,W0401,W0614
"""
Exceptions and warnings raised by the package. Data-related errors
follow `PEP-249`_ naming and also inherit the matching builtin
exception, so callers may catch either.

.. _PEP-249: http://www.python.org/dev/peps/pep-0249/
"""

import sys
import warnings


class Error(Exception):
    """
    Base class for error exceptions.
    """


class NullArgumentError(Error, TypeError):
    """
    Exception raised when a required argument is ``None``. Raised
    before any computation takes place.
    """

    def __init__(self, parameter):
        """
        :param parameter: Name of the ``None`` parameter.
        :type parameter: :obj:`str`
        """

        super().__init__(f"{parameter} cannot be None")
        self.parameter = parameter


class DataError(Error, ValueError):
    """
    Exception raised for errors that are due to problems with the
    processed data like malformed persisted columns, numeric value out
    of range, etc.
    """


class TemporalOverflowError(DataError, OverflowError):
    """
    Exception raised when the seconds component leaves the signed
    64-bit range it is persisted with.
    """


class MsgpackError(Error):
    """
    Error with encoding or decoding of the `MP_EXT`_ type.

    .. _MP_EXT: https://github.com/msgpack/msgpack/blob/master/spec.md#extension-types
    """


class PrecisionWarning(UserWarning):
    """
    Warning emitted when a conversion target cannot hold every
    nanosecond of the source value.
    """


# always print this warnings
warnings.filterwarnings("always", category=PrecisionWarning)


def warn(message, warning_class):
    """
    Emit a warning message.
    Just like standard warnings.warn() but don't output full filename.

    :param message: Warning message.
    :type message: :obj:`str`

    :param warning_class: Warning class.
    :type warning_class: :class:`UserWarning` subclass
    """

    frame = sys._getframe(2)  # pylint: disable=W0212
    module_name = frame.f_globals.get("__name__")
    line_no = frame.f_lineno
    warnings.warn_explicit(message, warning_class, module_name, line_no)

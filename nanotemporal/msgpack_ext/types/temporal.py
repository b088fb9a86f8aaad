"""
Nanosecond-precision temporal value implementation module.
"""

from datetime import datetime, timedelta
import time

import pandas
import pytz

from nanotemporal.const import (
    NANOS_PER_SECOND,
    NANOS_PER_MICROSECOND,
    SECONDS_PER_DAY,
)
from nanotemporal.error import NullArgumentError, PrecisionWarning, warn
from nanotemporal.msgpack_ext.types.time_of_day import TimeOfDay
from nanotemporal.utils import (
    check_seconds_range,
    require_int,
    require_not_none,
)

_EPOCH = datetime(1970, 1, 1, tzinfo=pytz.utc)
_NAIVE_EPOCH = datetime(1970, 1, 1)


def normalize(seconds, nanos):
    """
    Move whole seconds out of ``nanos`` so that it lies in
    ``0..999999999``. The represented quantity stays the same:
    ``nanos`` above the range carry into ``seconds``, negative
    ``nanos`` borrow from it.

    .. code-block:: python

        >>> normalize(100, 1500000000)
        (101, 500000000)
        >>> normalize(100, -1500000000)
        (98, 500000000)

    :param seconds: Seconds value.
    :type seconds: :obj:`int`

    :param nanos: Nanoseconds value, any integer.
    :type nanos: :obj:`int`

    :return: Normalized ``(seconds, nanos)`` pair.
    :rtype: :obj:`tuple`

    :raise: :exc:`~nanotemporal.error.TemporalOverflowError`,
        :exc:`TypeError`, :exc:`~nanotemporal.error.NullArgumentError`
    """

    seconds = require_int(seconds, 'seconds')
    nanos = require_int(nanos, 'nanos')

    # Floor division borrows ceil(-nanos / 1e9) seconds for negative
    # nanos and carries nanos // 1e9 seconds for overflowing ones.
    if (nanos >= NANOS_PER_SECOND) or (nanos < 0):
        seconds += nanos // NANOS_PER_SECOND
        nanos = nanos % NANOS_PER_SECOND

    return check_seconds_range(seconds), nanos


def _operand_type_error(operation, left, right):
    return TypeError(f"unsupported operand type(s) for {operation}: "
                     f"'{type(left)}' and '{type(right)}'")


class TemporalValue():
    """
    Time quantity stored as whole ``seconds`` and ``nanos`` within the
    second. The same value represents an absolute timestamp (offset from
    the Unix epoch, UTC) or an elapsed duration, and maps to two integer
    database columns without precision loss.

    .. code-block:: python

        >>> nanotemporal.TemporalValue(100, 1500000000)
        nanotemporal.TemporalValue(seconds=101, nanos=500000000)

    ``nanos`` is always in ``0..999999999``, so negative quantities are
    expressed by ``seconds``: minus one nanosecond is
    ``TemporalValue(seconds=-1, nanos=999999999)``.

    Objects are immutable and hashable. Use
    :meth:`~nanotemporal.TemporalValue.with_seconds` and
    :meth:`~nanotemporal.TemporalValue.with_nanos` to get modified
    copies.
    """

    def __init__(self, seconds=0, nanos=0):
        """
        :param seconds: Whole seconds, must fit signed 64-bit integer
            after normalization.
        :type seconds: :obj:`int`, optional

        :param nanos: Nanoseconds, any integer. Values outside
            ``0..999999999`` are normalized into ``seconds``.
        :type nanos: :obj:`int`, optional

        :raise: :exc:`TypeError`,
            :exc:`~nanotemporal.error.NullArgumentError`,
            :exc:`~nanotemporal.error.TemporalOverflowError`
        """

        self._seconds, self._nanos = normalize(seconds, nanos)

    @classmethod
    def from_nanos(cls, nanos):
        """
        Create a value from a total number of nanoseconds, for example
        :func:`time.time_ns` result.

        :param nanos: Total nanoseconds.
        :type nanos: :obj:`int`

        :rtype: :class:`~nanotemporal.TemporalValue`
        """

        return cls(0, require_int(nanos, 'nanos'))

    @classmethod
    def now(cls):
        """
        Current time since epoch, as reported by :func:`time.time_ns`.

        :rtype: :class:`~nanotemporal.TemporalValue`
        """

        return cls.from_nanos(time.time_ns())

    @classmethod
    def from_datetime(cls, dt):
        """
        Create a value from an absolute time. Timezone-naive datetimes
        are treated as UTC. :class:`pandas.Timestamp` nanoseconds are
        preserved.

        :param dt: Absolute time.
        :type dt: :class:`datetime.datetime` or :class:`pandas.Timestamp`

        :rtype: :class:`~nanotemporal.TemporalValue`

        :raise: :exc:`~nanotemporal.error.NullArgumentError` for ``None``
            and :obj:`pandas.NaT`, :exc:`TypeError`
        """

        if dt is None or dt is pandas.NaT:
            raise NullArgumentError('dt')

        if isinstance(dt, pandas.Timestamp):
            return cls(*divmod(dt.value, NANOS_PER_SECOND))

        if not isinstance(dt, datetime):
            raise TypeError(f"dt must be datetime, not {type(dt).__name__}")

        if dt.utcoffset() is None:
            dt = dt.replace(tzinfo=pytz.utc)

        delta = dt - _EPOCH
        return cls(delta.days * SECONDS_PER_DAY + delta.seconds,
                   delta.microseconds * NANOS_PER_MICROSECOND)

    @classmethod
    def from_timedelta(cls, td):
        """
        Create a value from an elapsed time. :class:`pandas.Timedelta`
        nanoseconds are preserved.

        :param td: Elapsed time.
        :type td: :class:`datetime.timedelta` or :class:`pandas.Timedelta`

        :rtype: :class:`~nanotemporal.TemporalValue`

        :raise: :exc:`~nanotemporal.error.NullArgumentError` for ``None``
            and :obj:`pandas.NaT`, :exc:`TypeError`
        """

        if td is None or td is pandas.NaT:
            raise NullArgumentError('td')

        if isinstance(td, pandas.Timedelta):
            return cls(*divmod(td.value, NANOS_PER_SECOND))

        if not isinstance(td, timedelta):
            raise TypeError(f"td must be timedelta, not {type(td).__name__}")

        return cls(td.days * SECONDS_PER_DAY + td.seconds,
                   td.microseconds * NANOS_PER_MICROSECOND)

    @property
    def seconds(self):
        """
        Whole seconds, may be negative.

        :rtype: :obj:`int`
        """

        return self._seconds

    @property
    def nanos(self):
        """
        Nanoseconds within the second, always in ``0..999999999``.

        :rtype: :obj:`int`
        """

        return self._nanos

    def with_seconds(self, seconds):
        """
        Copy with replaced ``seconds``.

        :rtype: :class:`~nanotemporal.TemporalValue`
        """

        return TemporalValue(seconds, self._nanos)

    def with_nanos(self, nanos):
        """
        Copy with replaced ``nanos``. Out of range ``nanos`` change
        ``seconds`` of the result too.

        :rtype: :class:`~nanotemporal.TemporalValue`
        """

        return TemporalValue(self._seconds, nanos)

    def is_zero(self):
        """
        :rtype: :obj:`bool`
        """

        return self._seconds == 0 and self._nanos == 0

    def is_positive(self):
        """
        ``True`` if the quantity is greater than zero.

        :rtype: :obj:`bool`
        """

        return self._seconds > 0 or (self._seconds == 0 and self._nanos > 0)

    def is_negative(self):
        """
        ``True`` if the quantity is less than zero. ``nanos`` is never
        negative, so the sign is carried by ``seconds`` alone.

        :rtype: :obj:`bool`
        """

        return self._seconds < 0

    def compare(self, other):
        """
        Compare by ``seconds``, then by ``nanos``.

        :param other: Value to compare with.
        :type other: :class:`~nanotemporal.TemporalValue`

        :return: ``-1``, ``0`` or ``1``.
        :rtype: :obj:`int`

        :raise: :exc:`~nanotemporal.error.NullArgumentError`,
            :exc:`TypeError`
        """

        require_not_none(other, 'other')
        if not isinstance(other, TemporalValue):
            raise _operand_type_error('compare', self, other)

        left = (self._seconds, self._nanos)
        right = (other._seconds, other._nanos)
        return (left > right) - (left < right)

    def add(self, other):
        """
        Sum of two values.

        :param other: Second operand.
        :type other: :class:`~nanotemporal.TemporalValue`

        :rtype: :class:`~nanotemporal.TemporalValue`

        :raise: :exc:`~nanotemporal.error.NullArgumentError`,
            :exc:`TypeError`,
            :exc:`~nanotemporal.error.TemporalOverflowError`
        """

        require_not_none(other, 'other')
        if not isinstance(other, TemporalValue):
            raise _operand_type_error('+', self, other)

        return TemporalValue(self._seconds + other._seconds,
                             self._nanos + other._nanos)

    def subtract(self, other):
        """
        Difference of two values.

        :param other: Value to subtract.
        :type other: :class:`~nanotemporal.TemporalValue`

        :rtype: :class:`~nanotemporal.TemporalValue`

        :raise: :exc:`~nanotemporal.error.NullArgumentError`,
            :exc:`TypeError`,
            :exc:`~nanotemporal.error.TemporalOverflowError`
        """

        require_not_none(other, 'other')
        if not isinstance(other, TemporalValue):
            raise _operand_type_error('-', self, other)

        return TemporalValue(self._seconds - other._seconds,
                             self._nanos - other._nanos)

    def negate(self):
        """
        :rtype: :class:`~nanotemporal.TemporalValue`

        :raise: :exc:`~nanotemporal.error.TemporalOverflowError`
        """

        return TemporalValue(-self._seconds, -self._nanos)

    def abs(self):
        """
        Absolute value: negated copy for negative values, ``self``
        otherwise.

        :rtype: :class:`~nanotemporal.TemporalValue`

        :raise: :exc:`~nanotemporal.error.TemporalOverflowError`
        """

        if self.is_negative():
            return self.negate()
        return self

    def convert(self, converter):
        """
        Convert to an arbitrary representation.

        .. code-block:: python

            >>> value.convert(lambda seconds, nanos: f'{seconds}.{nanos:09d}')
            '1661969274.308543321'

        :param converter: Function called with ``seconds`` and
            ``nanos``.
        :type converter: :obj:`callable`

        :return: ``converter`` result.

        :raise: :exc:`~nanotemporal.error.NullArgumentError`
        """

        require_not_none(converter, 'converter')
        return converter(self._seconds, self._nanos)

    def to_nanos(self):
        """
        Total nanoseconds.

        :rtype: :obj:`int`
        """

        return self._seconds * NANOS_PER_SECOND + self._nanos

    def to_datetime(self, tz=None):
        """
        Convert to a timezone-aware absolute time. :class:`datetime.datetime`
        has microsecond resolution, so the nanoseconds below a
        microsecond are dropped and
        :class:`~nanotemporal.error.PrecisionWarning` is emitted.

        :param tz: Result timezone, UTC if not provided.
        :type tz: :class:`datetime.tzinfo` or timezone name from Olson
            timezone database, optional

        :rtype: :class:`datetime.datetime`

        :raise: :class:`datetime.datetime` exceptions,
            :exc:`pytz.UnknownTimeZoneError`
        """

        if self._nanos % NANOS_PER_MICROSECOND != 0:
            warn(f'{self!r} converted to datetime with loss of precision',
                 PrecisionWarning)

        result = _EPOCH + timedelta(seconds=self._seconds,
                                    microseconds=self._nanos // NANOS_PER_MICROSECOND)
        if tz is not None:
            if isinstance(tz, str):
                tz = pytz.timezone(tz)
            result = result.astimezone(tz)
        return result

    def to_naive_datetime(self):
        """
        Convert to a timezone-naive :class:`datetime.datetime` holding
        UTC wall-clock time, the form
        :meth:`~nanotemporal.TemporalValue.from_datetime` reads naive
        datetimes in. Nanoseconds below a microsecond are dropped with
        :class:`~nanotemporal.error.PrecisionWarning`.

        :rtype: :class:`datetime.datetime`

        :raise: :class:`datetime.datetime` exceptions
        """

        if self._nanos % NANOS_PER_MICROSECOND != 0:
            warn(f'{self!r} converted to datetime with loss of precision',
                 PrecisionWarning)

        return _NAIVE_EPOCH + timedelta(seconds=self._seconds,
                                        microseconds=self._nanos // NANOS_PER_MICROSECOND)

    def to_timestamp(self, tz=None):
        """
        Convert to a timezone-aware :class:`pandas.Timestamp` with full
        precision.

        :param tz: Result timezone, UTC if not provided.
        :type tz: :class:`datetime.tzinfo` or timezone name, optional

        :rtype: :class:`pandas.Timestamp`

        :raise: :exc:`pandas.errors.OutOfBoundsDatetime`
        """

        result = pandas.Timestamp(self.to_nanos(), unit='ns', tz=pytz.utc)
        if tz is not None:
            result = result.tz_convert(tz)
        return result

    def to_timedelta(self):
        """
        Convert to an elapsed time. :class:`datetime.timedelta` has
        microsecond resolution, so the nanoseconds below a microsecond
        are dropped and :class:`~nanotemporal.error.PrecisionWarning` is
        emitted.

        :rtype: :class:`datetime.timedelta`

        :raise: :exc:`OverflowError`
        """

        if self._nanos % NANOS_PER_MICROSECOND != 0:
            warn(f'{self!r} converted to timedelta with loss of precision',
                 PrecisionWarning)

        return timedelta(seconds=self._seconds,
                         microseconds=self._nanos // NANOS_PER_MICROSECOND)

    def to_pandas_timedelta(self):
        """
        Convert to :class:`pandas.Timedelta` with full precision.

        :rtype: :class:`pandas.Timedelta`

        :raise: :exc:`pandas.errors.OutOfBoundsTimedelta`
        """

        return pandas.Timedelta(self.to_nanos(), unit='ns')

    def to_time_of_day(self):
        """
        Wall-clock time of the value, days are discarded. Negative
        values count back from midnight: ``seconds=-1`` is
        ``23:59:59.000000000``.

        :rtype: :class:`~nanotemporal.TimeOfDay`
        """

        seconds_in_day = ((self._seconds % SECONDS_PER_DAY) + SECONDS_PER_DAY) % SECONDS_PER_DAY
        return TimeOfDay.from_nano_of_day(seconds_in_day * NANOS_PER_SECOND + self._nanos)

    def __add__(self, other):
        """
        Valid operations:

        * :class:`~nanotemporal.TemporalValue` + :class:`~nanotemporal.TemporalValue`
          = :class:`~nanotemporal.TemporalValue`

        :raise: :exc:`TypeError`
        """

        if not isinstance(other, TemporalValue):
            raise _operand_type_error('+', self, other)
        return self.add(other)

    def __sub__(self, other):
        """
        Valid operations:

        * :class:`~nanotemporal.TemporalValue` - :class:`~nanotemporal.TemporalValue`
          = :class:`~nanotemporal.TemporalValue`

        :raise: :exc:`TypeError`
        """

        if not isinstance(other, TemporalValue):
            raise _operand_type_error('-', self, other)
        return self.subtract(other)

    def __neg__(self):
        return self.negate()

    def __abs__(self):
        return self.abs()

    def __eq__(self, other):
        """
        Values are equal when both normalized fields are equal.

        :rtype: :obj:`bool`
        """

        if not isinstance(other, TemporalValue):
            return False
        return self._seconds == other._seconds and self._nanos == other._nanos

    def __hash__(self):
        return hash((self._seconds, self._nanos))

    def __lt__(self, other):
        if not isinstance(other, TemporalValue):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other):
        if not isinstance(other, TemporalValue):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, TemporalValue):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other):
        if not isinstance(other, TemporalValue):
            return NotImplemented
        return self.compare(other) >= 0

    def __repr__(self):
        return f'nanotemporal.TemporalValue(seconds={self._seconds}, nanos={self._nanos})'

    __str__ = __repr__

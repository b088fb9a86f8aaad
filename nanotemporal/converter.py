"""
Persistence adapters. A :class:`~nanotemporal.TemporalValue` is stored
as two independent integer columns, ``seconds`` (signed 64-bit) and
``nanos`` (signed 32-bit, always ``0..999999999``):

.. code-block:: python

    >>> seconds, nanos = to_columns(TemporalValue.from_datetime(event_time))
    >>> cursor.execute('INSERT INTO events VALUES (?, ?)', (seconds, nanos))

An absent value is stored as two ``NULL`` columns and read back as
``None``, it is never replaced with sentinel data.

Attribute converters wrap a native Python time type so that entities
may keep :class:`datetime.datetime` or :class:`datetime.timedelta`
attributes while storage works with
:class:`~nanotemporal.TemporalValue`.
"""

from nanotemporal.const import INT32_MIN, INT32_MAX
from nanotemporal.error import DataError
from nanotemporal.msgpack_ext.types.temporal import TemporalValue
from nanotemporal.utils import require_int


def to_columns(value):
    """
    Split a value into column data.

    :param value: Value to store.
    :type value: :class:`~nanotemporal.TemporalValue` or :obj:`None`

    :return: ``(seconds, nanos)`` or ``(None, None)``.
    :rtype: :obj:`tuple`

    :raise: :exc:`TypeError`
    """

    if value is None:
        return None, None
    if not isinstance(value, TemporalValue):
        raise TypeError(f"value must be TemporalValue, not {type(value).__name__}")
    return value.convert(lambda seconds, nanos: (seconds, nanos))


def from_columns(seconds, nanos):
    """
    Build a value from column data.

    :param seconds: ``seconds`` column value.
    :type seconds: :obj:`int` or :obj:`None`

    :param nanos: ``nanos`` column value.
    :type nanos: :obj:`int` or :obj:`None`

    :return: Stored value, ``None`` if both columns are ``NULL``.
    :rtype: :class:`~nanotemporal.TemporalValue` or :obj:`None`

    :raise: :exc:`~nanotemporal.error.DataError`, :exc:`TypeError`
    """

    if seconds is None and nanos is None:
        return None
    if seconds is None or nanos is None:
        raise DataError(f"Inconsistent temporal columns: seconds={seconds!r}, "
                        f"nanos={nanos!r}")

    nanos = require_int(nanos, 'nanos')
    if (nanos < INT32_MIN) or (nanos > INT32_MAX):
        raise DataError(f"value {nanos} of nanos is out of "
                        f"allowed range [{INT32_MIN}, {INT32_MAX}]")
    return TemporalValue(seconds, nanos)


class AttributeConverter():
    """
    Base class of converters between an entity attribute and
    :class:`~nanotemporal.TemporalValue`. ``None`` is passed through
    in both directions.

    Subclasses implement :meth:`from_attribute` and
    :meth:`to_attribute`.
    """

    def from_attribute(self, attribute):
        """
        Convert a non-``None`` attribute value.

        :rtype: :class:`~nanotemporal.TemporalValue`
        """

        raise NotImplementedError

    def to_attribute(self, value):
        """
        Convert a non-``None`` stored value.

        :param value: Stored value.
        :type value: :class:`~nanotemporal.TemporalValue`
        """

        raise NotImplementedError

    def to_database_column(self, attribute):
        """
        :param attribute: Entity attribute value.

        :rtype: :class:`~nanotemporal.TemporalValue` or :obj:`None`
        """

        if attribute is None:
            return None
        return self.from_attribute(attribute)

    def to_entity_attribute(self, db_data):
        """
        :param db_data: Stored value.
        :type db_data: :class:`~nanotemporal.TemporalValue` or :obj:`None`

        :return: Entity attribute value or ``None``.
        """

        if db_data is None:
            return None
        return self.to_attribute(db_data)


class DatetimeConverter(AttributeConverter):
    """
    :class:`datetime.datetime` attribute converter. Attributes are read
    back as timezone-aware datetimes in
    :paramref:`~nanotemporal.converter.DatetimeConverter.params.tz`.
    """

    def __init__(self, tz=None):
        """
        :param tz: Timezone of read attributes, UTC if not provided.
        :type tz: :class:`datetime.tzinfo` or timezone name, optional
        """

        self.tz = tz

    def from_attribute(self, attribute):
        return TemporalValue.from_datetime(attribute)

    def to_attribute(self, value):
        return value.to_datetime(tz=self.tz)


class TimestampConverter(DatetimeConverter):
    """
    :class:`pandas.Timestamp` attribute converter, keeps nanoseconds.
    """

    def to_attribute(self, value):
        return value.to_timestamp(tz=self.tz)


class TimedeltaConverter(AttributeConverter):
    """
    :class:`datetime.timedelta` attribute converter.
    """

    def from_attribute(self, attribute):
        return TemporalValue.from_timedelta(attribute)

    def to_attribute(self, value):
        return value.to_timedelta()


class PandasTimedeltaConverter(TimedeltaConverter):
    """
    :class:`pandas.Timedelta` attribute converter, keeps nanoseconds.
    """

    def to_attribute(self, value):
        return value.to_pandas_timedelta()

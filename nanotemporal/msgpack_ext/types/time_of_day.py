"""
Wall-clock time of day with nanosecond precision.
"""

from dataclasses import dataclass
from datetime import time

from nanotemporal.const import (
    NANOS_PER_SECOND,
    NANOS_PER_MICROSECOND,
    NANOS_PER_DAY,
    SECONDS_PER_MINUTE,
    SECONDS_PER_HOUR,
)
from nanotemporal.error import PrecisionWarning, warn
from nanotemporal.utils import require_int


@dataclass(frozen=True)
class TimeOfDay():
    """
    Time of day without date and timezone. Unlike :class:`datetime.time`
    it keeps every nanosecond.

    .. code-block:: python

        >>> tod = TimeOfDay.from_nano_of_day(86399 * 1000000000 + 5)
        >>> tod
        TimeOfDay(hour=23, minute=59, second=59, nanosecond=5)
        >>> str(tod)
        '23:59:59.000000005'
    """

    hour: int
    """
    Hour, ``0..23``.
    """

    minute: int
    """
    Minute, ``0..59``.
    """

    second: int
    """
    Second, ``0..59``.
    """

    nanosecond: int = 0
    """
    Nanosecond within the second, ``0..999999999``.
    """

    def __post_init__(self):
        for field_name, range_max in (('hour', 23), ('minute', 59), ('second', 59),
                                      ('nanosecond', NANOS_PER_SECOND - 1)):
            val = require_int(getattr(self, field_name), field_name)
            if (val < 0) or (val > range_max):
                raise ValueError(f"value {val} of {field_name} is out of "
                                 f"allowed range [0, {range_max}]")

    @classmethod
    def from_nano_of_day(cls, nano_of_day):
        """
        Build a time of day from nanoseconds elapsed since midnight.

        :param nano_of_day: Nanoseconds since midnight.
        :type nano_of_day: :obj:`int`

        :rtype: :class:`~nanotemporal.TimeOfDay`

        :raise: :exc:`ValueError`, :exc:`TypeError`,
            :exc:`~nanotemporal.error.NullArgumentError`
        """

        nano_of_day = require_int(nano_of_day, 'nano_of_day')
        if (nano_of_day < 0) or (nano_of_day >= NANOS_PER_DAY):
            raise ValueError(f"value {nano_of_day} of nano_of_day is out of "
                             f"allowed range [0, {NANOS_PER_DAY - 1}]")

        seconds, nanosecond = divmod(nano_of_day, NANOS_PER_SECOND)
        hour, seconds = divmod(seconds, SECONDS_PER_HOUR)
        minute, second = divmod(seconds, SECONDS_PER_MINUTE)
        return cls(hour=hour, minute=minute, second=second, nanosecond=nanosecond)

    def to_nano_of_day(self):
        """
        Nanoseconds elapsed since midnight.

        :rtype: :obj:`int`
        """

        seconds = self.hour * SECONDS_PER_HOUR + self.minute * SECONDS_PER_MINUTE + self.second
        return seconds * NANOS_PER_SECOND + self.nanosecond

    def to_time(self):
        """
        Convert to :class:`datetime.time`. It has microsecond
        resolution, so the nanoseconds below a microsecond are dropped
        and :class:`~nanotemporal.error.PrecisionWarning` is emitted.

        :rtype: :class:`datetime.time`
        """

        if self.nanosecond % NANOS_PER_MICROSECOND != 0:
            warn(f'{self} converted to datetime.time with loss of precision',
                 PrecisionWarning)
        return time(self.hour, self.minute, self.second,
                    self.nanosecond // NANOS_PER_MICROSECOND)

    def __str__(self):
        return f'{self.hour:02d}:{self.minute:02d}:{self.second:02d}.{self.nanosecond:09d}'

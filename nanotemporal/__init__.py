# pylint: disable=C0301,W0105,W0401,W0614
"""
Portable nanosecond-precision time values, stored as whole seconds and
nanoseconds within the second.
"""

from nanotemporal.const import (
    NANOS_PER_SECOND,
    MAX_NANOS,
    SECONDS_PER_DAY,
)

from nanotemporal.error import (
    Error,
    NullArgumentError,
    DataError,
    TemporalOverflowError,
    MsgpackError,
    PrecisionWarning,
)

from nanotemporal.msgpack_ext.types.temporal import (
    TemporalValue,
    normalize,
)

from nanotemporal.msgpack_ext.types.time_of_day import (
    TimeOfDay,
)

from nanotemporal.msgpack_ext.packer import packb
from nanotemporal.msgpack_ext.unpacker import unpackb

from nanotemporal.converter import (
    to_columns,
    from_columns,
    AttributeConverter,
    DatetimeConverter,
    TimestampConverter,
    TimedeltaConverter,
    PandasTimedeltaConverter,
)

try:
    from nanotemporal.version import __version__
except ImportError:
    __version__ = '0.0.0-dev'


__all__ = ['TemporalValue', 'TimeOfDay', 'normalize', 'packb', 'unpackb',
           'to_columns', 'from_columns', 'AttributeConverter',
           'DatetimeConverter', 'TimestampConverter', 'TimedeltaConverter',
           'PandasTimedeltaConverter', 'Error', 'NullArgumentError',
           'DataError', 'TemporalOverflowError', 'MsgpackError',
           'PrecisionWarning', 'NANOS_PER_SECOND', 'MAX_NANOS',
           'SECONDS_PER_DAY',]

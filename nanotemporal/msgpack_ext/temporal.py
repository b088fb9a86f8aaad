"""
:class:`~nanotemporal.TemporalValue` extension type support module.

The temporal value MessagePack representation looks like this:

.. code-block:: text

    +---------+----------------+==========+=========+
    | MP_EXT  | MP_TEMPORAL    | seconds  | nanos   |
    | = d7/c7 | = 100          |          |         |
    +---------+----------------+==========+=========+

MessagePack data contains:

* Seconds (8 bytes) as an unencoded 64-bit signed integer stored in the
  little-endian order.
* Nanos (4 bytes) as an unencoded 32-bit signed integer stored in the
  little-endian order. The field is omitted if nanos is zero.

Encoded nanos are always in ``0..999999999``. Decoded nanos outside of
this range are normalized into seconds.
"""

import struct

from nanotemporal.const import (
    EXT_ID,
    struct_q,
    struct_qi,
)
from nanotemporal.error import MsgpackError
from nanotemporal.msgpack_ext.types.temporal import TemporalValue

SECONDS_SIZE_BYTES = struct_q.size
SECONDS_NANOS_SIZE_BYTES = struct_qi.size


def encode(obj, _):
    """
    Encode a temporal value object.

    :param obj: Temporal value to encode.
    :type: :obj: :class:`nanotemporal.TemporalValue`

    :return: Encoded temporal value.
    :rtype: :obj:`bytes`
    """

    if obj.nanos == 0:
        return struct_q.pack(obj.seconds)
    return struct_qi.pack(obj.seconds, obj.nanos)


def decode(data, _):
    """
    Decode a temporal value object.

    :param data: Temporal value to decode.
    :type data: :obj:`bytes`

    :return: Decoded temporal value.
    :rtype: :class:`nanotemporal.TemporalValue`

    :raise: :exc:`~nanotemporal.error.MsgpackError`
    """

    data_len = len(data)
    try:
        if data_len == SECONDS_NANOS_SIZE_BYTES:
            seconds, nanos = struct_qi.unpack(data)
        elif data_len == SECONDS_SIZE_BYTES:
            seconds, = struct_q.unpack(data)
            nanos = 0
        else:
            raise MsgpackError(f'Unexpected temporal value payload length {data_len}')
    except struct.error as exc:
        raise MsgpackError(exc) from exc

    try:
        return TemporalValue(seconds, nanos)
    except OverflowError as exc:
        raise MsgpackError(exc) from exc

"""
MessagePack `extension`_ types encoding support.

.. _extension: https://github.com/msgpack/msgpack/blob/master/spec.md#extension-types
"""

import msgpack
from msgpack import ExtType

from nanotemporal.msgpack_ext.types.temporal import TemporalValue

import nanotemporal.msgpack_ext.temporal as ext_temporal

encoders = [
    {'type': TemporalValue, 'ext': ext_temporal},
]

def default(obj, packer=None):
    """
    :class:`msgpack.Packer` encoder.

    :param obj: Object to encode.
    :type obj: :class:`nanotemporal.TemporalValue`

    :param packer: msgpack packer to work with common types.
    :type packer: :class:`msgpack.Packer`, optional

    :return: Encoded value.
    :rtype: :class:`msgpack.ExtType`

    :raise: :exc:`~TypeError`
    """

    for encoder in encoders:
        if isinstance(obj, encoder['type']):
            return ExtType(encoder['ext'].EXT_ID, encoder['ext'].encode(obj, packer))
    raise TypeError("Unknown type: %r" % (obj,))

def packb(obj):
    """
    Serialize an object which may contain
    :class:`~nanotemporal.TemporalValue` values.

    :param obj: Object to serialize.

    :rtype: :obj:`bytes`

    :raise: :exc:`~TypeError`
    """

    return msgpack.packb(obj, default=default, use_bin_type=True)

"""
MessagePack `extension`_ types decoding support.

.. _extension: https://github.com/msgpack/msgpack/blob/master/spec.md#extension-types
"""

import msgpack

import nanotemporal.msgpack_ext.temporal as ext_temporal

decoders = {
    ext_temporal.EXT_ID: ext_temporal.decode,
}

def ext_hook(code, data, unpacker=None):
    """
    :class:`msgpack.Unpacker` decoder.

    :param code: MessagePack extension type code.
    :type code: :obj:`int`

    :param data: MessagePack extension type data.
    :type data: :obj:`bytes`

    :param unpacker: msgpack unpacker to work with common types.
    :type unpacker: :class:`msgpack.Unpacker`, optional

    :return: Decoded value.
    :rtype: :class:`nanotemporal.TemporalValue`

    :raise: :exc:`NotImplementedError`,
        :exc:`~nanotemporal.error.MsgpackError`
    """

    if code in decoders:
        return decoders[code](data, unpacker)
    raise NotImplementedError("Unknown msgpack extension type code %d" % (code,))

def unpackb(data):
    """
    Deserialize data packed with :func:`~nanotemporal.msgpack_ext.packer.packb`.

    :param data: Serialized data.
    :type data: :obj:`bytes`

    :raise: :exc:`NotImplementedError`,
        :exc:`~nanotemporal.error.MsgpackError`
    """

    return msgpack.unpackb(data, ext_hook=ext_hook, raw=False)

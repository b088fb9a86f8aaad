"""
MessagePack `extension`_ types support for :class:`~nanotemporal.TemporalValue`.

.. _extension: https://github.com/msgpack/msgpack/blob/master/spec.md#extension-types
"""

"""
Value types encoded by :mod:`nanotemporal.msgpack_ext`.
"""

# -*- coding: utf-8 -*-
# pylint: disable=C0301,W0105,W0401,W0614

import struct


# pylint: disable=C0103
struct_q = struct.Struct('<q')
struct_qi = struct.Struct('<qi')

NANOS_PER_SECOND = 1000000000
MAX_NANOS = NANOS_PER_SECOND - 1
NANOS_PER_MICROSECOND = 1000
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400
NANOS_PER_DAY = SECONDS_PER_DAY * NANOS_PER_SECOND

# Seconds are persisted as a signed 64-bit column
INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1

# Nanos are persisted as a signed 32-bit column
INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1

# MessagePack extension type id of TemporalValue
EXT_ID = 100

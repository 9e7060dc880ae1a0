"""Conversion between epoch milliseconds and packed MS-DOS date/time values.

The packed value keeps no timezone, so both directions work in the same civil
calendar: local time unless a ``tz`` is passed explicitly.

In local time a wall-clock time repeated at the end of daylight saving time
always decodes to its first occurrence, so a timestamp from the second
occurrence comes back one hour early.
"""

import logging
from datetime import datetime, timedelta, tzinfo

from zipentrytools.entry.constants import (
    DOS_EPOCH_YEAR,
    DOS_MAX_YEAR,
    MAX_DOS_TIME,
    MIN_DOS_TIME,
)

logger = logging.getLogger(__name__)

DateTimeTuple = tuple[int, int, int, int, int, int]


def pack_date_time(date_time: DateTimeTuple) -> int:
    year, month, day, hour, minute, second = date_time

    return (
        (year - DOS_EPOCH_YEAR) << 25
        | month << 21
        | day << 16
        | hour << 11
        | minute << 5
        | second >> 1
    )


def unpack_date_time(packed: int) -> DateTimeTuple:
    return (
        ((packed >> 25) & 0x7F) + DOS_EPOCH_YEAR,
        (packed >> 21) & 0x0F,
        (packed >> 16) & 0x1F,
        (packed >> 11) & 0x1F,
        (packed >> 5) & 0x3F,
        (packed << 1) & 0x3E,
    )


def to_dos_time(epoch_millis: int, tz: tzinfo | None = None) -> int:
    try:
        dt = datetime.fromtimestamp(epoch_millis // 1000, tz=tz)
    except (OverflowError, OSError, ValueError):
        # Outside of what the platform calendar can represent
        clamped = MIN_DOS_TIME if epoch_millis < 0 else MAX_DOS_TIME
        logger.debug("Timestamp %d out of calendar range, clamped", epoch_millis)
        return clamped

    if dt.year < DOS_EPOCH_YEAR:
        logger.debug("Year %d is before %d, clamped", dt.year, DOS_EPOCH_YEAR)
        return MIN_DOS_TIME

    if dt.year > DOS_MAX_YEAR:
        logger.debug("Year %d is after %d, clamped", dt.year, DOS_MAX_YEAR)
        return MAX_DOS_TIME

    return pack_date_time(
        (dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second)
    )


def from_dos_time(packed: int, tz: tzinfo | None = None) -> int:
    year, month, day, hour, minute, second = unpack_date_time(packed)

    # Out-of-range fields (month 0, day 0, hour 31...) roll over into the
    # neighbouring units instead of failing
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1

    dt = datetime(year, month, 1, tzinfo=tz) + timedelta(
        days=day - 1, hours=hour, minutes=minute, seconds=second
    )

    return int(dt.timestamp()) * 1000

"""Argument value kinds and time tags for OSC packets.

Python values map onto OSC wire types as follows:

    bool              -> T / F   (no payload)
    None              -> N       (no payload)
    int (32-bit)      -> i
    int (64-bit)      -> h
    Int64             -> h       (even when the value fits in 32 bits)
    float             -> f
    str               -> s
    bytes, bytearray  -> b
    list, tuple       -> [ ... ] (elements tagged recursively)
"""

from datetime import datetime, timezone
from typing import TypeAlias

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Seconds between the NTP epoch (1900-01-01) and the Unix epoch (1970-01-01)
NTP_EPOCH_OFFSET = 2208988800

# Special time tag meaning "process immediately"
IMMEDIATELY = 1

BUNDLE_PREFIX = "#bundle"


class Int64(int):
    """An integer sent with the 64-bit ``h`` tag regardless of its magnitude."""

    def __repr__(self) -> str:
        return f"Int64({int(self)})"


OscArgument: TypeAlias = (
    bool
    | None
    | int
    | float
    | str
    | bytes
    | bytearray
    | list["OscArgument"]
    | tuple["OscArgument", ...]
)


def to_ntp(timestamp: datetime | None) -> int:
    """Convert a datetime to a 64-bit NTP time tag.

    The upper 32 bits hold seconds since 1900-01-01 UTC and the lower 32 bits
    the fraction of a second. ``None`` yields the "immediately" tag. Naive
    datetimes are interpreted as UTC.
    """
    if timestamp is None:
        return IMMEDIATELY

    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)

    delta = timestamp - datetime(1970, 1, 1, tzinfo=timezone.utc)
    seconds = delta.days * 86400 + delta.seconds + NTP_EPOCH_OFFSET
    fraction = (delta.microseconds << 32) // 1_000_000
    return ((seconds & 0xFFFFFFFF) << 32) | fraction

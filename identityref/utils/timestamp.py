"""Millisecond timestamp utilities."""

import time
from datetime import datetime, timezone

# Unix milliseconds fit in 48 bits until the year 10889.
TIMESTAMP_BITS = 48
PREFIX_BITS = 24


def now_millis():
    """Current time in milliseconds since Unix epoch."""
    return time.time_ns() // 1_000_000


def coarse_timestamp(epoch_ms=None):
    """Top 24 bits of the 48-bit millisecond clock (one step is ~4.66 hours)."""
    if epoch_ms is None:
        epoch_ms = now_millis()
    return (epoch_ms >> (TIMESTAMP_BITS - PREFIX_BITS)) & 0xFFFFFF


def timestamp_prefix(epoch_ms=None):
    """3-byte big-endian partition prefix for a new identifier."""
    return coarse_timestamp(epoch_ms).to_bytes(3, "big")


def format_timestamp(epoch_us=None):
    """Format timestamp as ISO 8601 with microseconds."""
    if epoch_us is None:
        epoch_us = time.time_ns() // 1_000
    
    dt = datetime.fromtimestamp(epoch_us / 1_000_000, tz=timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.%f") + "Z"

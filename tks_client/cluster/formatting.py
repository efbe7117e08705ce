"""Timestamp formatting for table output."""

from datetime import datetime, timezone
from typing import Union

from google.protobuf.timestamp_pb2 import Timestamp


def format_timestamp(value: Union[Timestamp, datetime]) -> str:
    """
    Render a timestamp as ``YYYY-MM-DD HH:MM:SS`` in local time.

    The local timezone is taken from the running process (``TZ``).
    Values at the edges of the range that the local offset would push
    outside years 1..9999 are shown in UTC.
    Sub-second precision is truncated. Naive datetimes are read as UTC.

    Args:
        value: protobuf Timestamp or datetime

    Returns:
        19 character timestamp string
    """
    if isinstance(value, Timestamp):
        value = value.ToDatetime(tzinfo=timezone.utc)
    elif value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)

    try:
        local = value.astimezone()
    except (OverflowError, OSError):
        # shifting by the local offset left the year 1..9999 range
        local = value.astimezone(timezone.utc)
    local = local.replace(tzinfo=None, microsecond=0)
    # isoformat zero-pads years below 1000, strftime("%Y") does not on glibc
    return local.isoformat(sep=" ")

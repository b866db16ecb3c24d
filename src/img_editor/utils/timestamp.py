from datetime import datetime, timezone


def to_timestamp(local_time: datetime | None = None) -> int:
    """
    Converts a datetime object to a UTC timestamp in milliseconds.

    If no datetime is given, the current time is used. A naive datetime
    (no timezone info) is assumed to be in the system's local timezone.
    """

    if local_time is None:
        local_time = datetime.now(timezone.utc)

    if not isinstance(local_time, datetime):
        raise TypeError("Input 'local_time' must be a datetime object.")

    if local_time.tzinfo is None or local_time.tzinfo.utcoffset(local_time) is None:
        local_time = local_time.astimezone()

    utc_dt = local_time.astimezone(timezone.utc)

    return int(utc_dt.timestamp() * 1000)

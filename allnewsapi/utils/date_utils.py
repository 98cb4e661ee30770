from datetime import date, datetime, timezone


def to_iso_timestamp(value: date) -> str:
    """
    Format a date or datetime as a UTC ISO-8601 timestamp with millisecond
    precision, e.g. ``2024-05-01T08:30:00.000Z``.

    Naive datetimes and plain dates are read as UTC.
    """
    if isinstance(value, datetime):
        moment = value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    else:
        moment = datetime(value.year, value.month, value.day, tzinfo=timezone.utc)

    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")

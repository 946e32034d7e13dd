from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo

DISCLAIMER = "Note: Time displayed has a ±30 minutes margin and only serves as a reference."


def format_label(moment: datetime) -> str:
    """12-hour clock label such as ``3:05 PM UTC``."""
    hour = moment.hour % 12 or 12
    label = f"{hour}:{moment:%M} {'AM' if moment.hour < 12 else 'PM'}"
    zone = moment.tzname()
    return f"{label} {zone}" if zone else label


def time_labels(
    count: int,
    *,
    now: datetime | None = None,
    interval_min: int = 30,
    tz: tzinfo | None = None,
) -> list[str]:
    """Approximate wall-clock label for each sample, oldest first.

    Samples are assumed to be ``interval_min`` apart, with the last one
    taken at ``now``. The real collection times are unknown, hence the
    disclaimer shown under the dashboard.

    Each instant is converted to ``tz`` on its own (the server's local
    zone when ``tz`` is None), so labels on either side of a DST change
    carry their own offset.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    return [
        format_label((now - timedelta(minutes=(count - 1 - index) * interval_min)).astimezone(tz))
        for index in range(count)
    ]

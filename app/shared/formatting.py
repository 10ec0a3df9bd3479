from __future__ import annotations

from datetime import datetime

# strftime's %B and %p follow the process locale; the API always speaks English.
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def iso_timestamp(moment: datetime) -> str:
    """Return ``moment`` as e.g. ``2024-03-15T14:30:00-04:00``."""
    return moment.isoformat(timespec="seconds")


def clock_time(moment: datetime) -> str:
    """Return the wall-clock part of ``moment`` as ``h:mm AM/PM``."""
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d} {meridiem}"


def long_time(moment: datetime) -> str:
    """Return ``moment`` as ``h:mm AM/PM - Month D, YYYY``."""
    month = MONTH_NAMES[moment.month - 1]
    return f"{clock_time(moment)} - {month} {moment.day}, {moment.year}"

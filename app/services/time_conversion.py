from __future__ import annotations

from datetime import datetime, time, timezone

from loguru import logger

from app.shared.formatting import clock_time
from app.shared.timezones import load_zone
from models.time_conversion import ConversionRequest, ConversionResponse


def convert_time(request: ConversionRequest, now: datetime) -> ConversionResponse:
    """Convert ``hour:minute`` today in the requested city to the other city.

    "Today" is the calendar date in the source city at ``now``, not the
    server's date. The result may fall on another day in the target city;
    only clock times are reported.
    """
    source_city = request.city
    target_city = source_city.other()
    source_zone = load_zone(source_city)
    target_zone = load_zone(target_city)

    today = now.astimezone(source_zone).date()
    wall_clock = datetime.combine(
        today, time(request.hour, request.minute), tzinfo=source_zone
    )
    # Round-trip through UTC: a time skipped by spring-forward becomes the
    # clock reading it actually lands on (2:30 AM -> 3:30 AM).
    source_time = wall_clock.astimezone(timezone.utc).astimezone(source_zone)
    target_time = source_time.astimezone(target_zone)

    logger.info(
        "Converted time",
        source_city=source_city.value,
        target_city=target_city.value,
        source=source_time.isoformat(),
        target=target_time.isoformat(),
    )
    return ConversionResponse(
        source_city=source_city.value,
        source_time=clock_time(source_time),
        target_city=target_city.value,
        target_time=clock_time(target_time),
    )

from __future__ import annotations

from datetime import datetime

from loguru import logger

from app.shared.formatting import iso_timestamp, long_time
from app.shared.timezones import City, load_zone
from models.current_time import CurrentTimeResponse


def current_times(now: datetime) -> CurrentTimeResponse:
    """Project the instant ``now`` onto both cities' wall clocks."""
    toronto = now.astimezone(load_zone(City.TORONTO))
    tehran = now.astimezone(load_zone(City.TEHRAN))
    logger.debug(
        "Resolved current times",
        toronto=toronto.isoformat(),
        tehran=tehran.isoformat(),
    )

    return CurrentTimeResponse(
        toronto_time=iso_timestamp(toronto),
        tehran_time=iso_timestamp(tehran),
        toronto_time_str=long_time(toronto),
        tehran_time_str=long_time(tehran),
    )

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from loguru import logger

from app.shared.errors import TimezoneUnavailableError


class City(str, Enum):
    """The two cities the service knows about."""

    TORONTO = "Toronto"
    TEHRAN = "Tehran"

    @property
    def timezone(self) -> str:
        return TIMEZONE_IDS[self]

    def other(self) -> "City":
        return City.TEHRAN if self is City.TORONTO else City.TORONTO


TIMEZONE_IDS = {
    City.TORONTO: "America/Toronto",
    City.TEHRAN: "Asia/Tehran",
}


@lru_cache(maxsize=None)
def _load(identifier: str) -> ZoneInfo:
    return ZoneInfo(identifier)


def load_zone(city: City) -> ZoneInfo:
    """Return the tz database entry for ``city``.

    Zones are loaded once per process and shared read-only between requests.
    A missing entry is a deployment problem, so it is raised rather than
    replaced with UTC.
    """
    identifier = city.timezone
    try:
        return _load(identifier)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        logger.error(
            "Timezone lookup failed", city=city.value, identifier=identifier
        )
        raise TimezoneUnavailableError(city.value, identifier, str(exc)) from exc

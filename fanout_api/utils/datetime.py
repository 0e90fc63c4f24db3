"""Timezone handling for dates stored as naive values."""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from functools import lru_cache

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fanout_api.config import get_settings


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Return the configured ``APP_TIMEZONE``, or UTC when it is unknown."""

    try:
        return ZoneInfo(get_settings().app_timezone)
    except (ZoneInfoNotFoundError, ValueError):
        return timezone.utc


def now_in_app_naive_datetime() -> datetime:
    return datetime.now(tz=get_app_timezone()).replace(tzinfo=None)


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Attach or convert ``value`` to the configured timezone."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=get_app_timezone())
    return value.astimezone(get_app_timezone())


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    localized = ensure_app_timezone(value)
    return localized.replace(tzinfo=None) if localized is not None else None

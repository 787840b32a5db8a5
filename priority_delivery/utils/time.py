"""Clock helpers anchored to the delivery reference time zone."""

from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

from priority_delivery.core.config import settings


def delivery_zone() -> ZoneInfo:
    """Return the configured reference zone for delivery windows."""
    return ZoneInfo(settings.delivery_time_zone)


def current_delivery_datetime() -> datetime:
    """Return the current moment in the delivery reference zone.

    This is the only place the wall clock is read; services receive ``now`` explicitly.
    """
    return datetime.now(delivery_zone())

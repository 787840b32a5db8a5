"""Weekly blackout window rules for priority delivery.

A blackout is configured as two weekday lists and a same-day time range.
Priority delivery is suppressed for products whose priority flag is ``0``
while the current local day is in both weekday lists and the current local
time is inside ``[from_time, to_time]``.

Weekdays are numbered ``0`` (Sunday) to ``6`` (Saturday).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, time
from typing import Protocol
from zoneinfo import ZoneInfo

logger = logging.getLogger(__name__)

CONFIG_PATH_PREFIX: str = "priority_delivery/priority_delivery_disable_time/"
FROM_WEEKDAYS_KEY: str = f"{CONFIG_PATH_PREFIX}from_weekdays"
TO_WEEKDAYS_KEY: str = f"{CONFIG_PATH_PREFIX}to_weekdays"
FROM_TIME_KEY: str = f"{CONFIG_PATH_PREFIX}from_time"
TO_TIME_KEY: str = f"{CONFIG_PATH_PREFIX}to_time"
TOOL_TIP_KEY: str = f"{CONFIG_PATH_PREFIX}tool_tip"

BLACKOUT_SETTING_KEYS: tuple[str, ...] = (
    FROM_WEEKDAYS_KEY,
    TO_WEEKDAYS_KEY,
    FROM_TIME_KEY,
    TO_TIME_KEY,
    TOOL_TIP_KEY,
)


class ConfigurationError(Exception):
    """Raised when blackout configuration is missing or malformed."""

    def __init__(self, key: str, message: str) -> None:
        super().__init__(f"{key}: {message}")
        self.key = key


class ConfigurationProvider(Protocol):
    """Key-value source of raw configuration strings."""

    def get_value(self, key: str) -> str | None: ...


@dataclass(frozen=True)
class BlackoutConfig:
    """Typed blackout window configuration."""

    from_weekdays: frozenset[int]
    to_weekdays: frozenset[int]
    from_time: time
    to_time: time
    tooltip: str | None = None


@dataclass(frozen=True)
class EvaluationResult:
    """Availability decision for a single product."""

    priority_enabled: bool
    toolkit: str | None


def sunday_based_weekday(moment: datetime) -> int:
    """Return day of week with Sunday as 0 and Saturday as 6."""
    return moment.isoweekday() % 7


def parse_weekdays(value: str | None, *, key: str = "weekdays") -> frozenset[int]:
    """Parse a comma-separated weekday list such as ``"1,2"``.

    A blank value means no weekdays are selected; an empty item inside a list is an error.
    """
    if value is None:
        raise ConfigurationError(key, "value is missing")

    weekdays: set[int] = set()
    if not value.strip():
        return frozenset(weekdays)

    for part in value.split(","):
        part = part.strip()
        if not part:
            raise ConfigurationError(key, f"empty weekday in {value!r}")
        try:
            weekday = int(part)
        except ValueError as exc:
            raise ConfigurationError(key, f"weekday {part!r} is not a number") from exc
        if not 0 <= weekday <= 6:
            raise ConfigurationError(key, f"weekday {weekday} is outside 0-6")
        weekdays.add(weekday)
    return frozenset(weekdays)


def parse_config_time(value: str | None, *, key: str = "time") -> time:
    """Parse ``"HH,MM"`` or ``"HH,MM,SS"`` into a time of day.

    The admin time picker stores its value comma separated; ``:`` is accepted too.
    """
    if value is None:
        raise ConfigurationError(key, "value is missing")

    parts: list[str] = [part.strip() for part in value.replace(":", ",").split(",")]
    if len(parts) not in (2, 3):
        raise ConfigurationError(key, f"expected hour and minute, got {value!r}")
    try:
        numbers: list[int] = [int(part) for part in parts]
    except ValueError as exc:
        raise ConfigurationError(key, f"time {value!r} has non-numeric parts") from exc

    try:
        return time(*numbers)
    except ValueError as exc:
        raise ConfigurationError(key, str(exc)) from exc


def load_blackout_config(provider: ConfigurationProvider) -> BlackoutConfig:
    """Read and validate blackout settings from a configuration provider."""
    tooltip: str | None = (provider.get_value(TOOL_TIP_KEY) or "").strip() or None
    config = BlackoutConfig(
        from_weekdays=parse_weekdays(provider.get_value(FROM_WEEKDAYS_KEY), key=FROM_WEEKDAYS_KEY),
        to_weekdays=parse_weekdays(provider.get_value(TO_WEEKDAYS_KEY), key=TO_WEEKDAYS_KEY),
        from_time=parse_config_time(provider.get_value(FROM_TIME_KEY), key=FROM_TIME_KEY),
        to_time=parse_config_time(provider.get_value(TO_TIME_KEY), key=TO_TIME_KEY),
        tooltip=tooltip,
    )
    logger.debug(
        "[PRIORITY] Loaded blackout window %s-%s on from=%s to=%s",
        config.from_time.isoformat(),
        config.to_time.isoformat(),
        sorted(config.from_weekdays),
        sorted(config.to_weekdays),
    )
    return config


def is_blackout_active(config: BlackoutConfig, weekday: int, now_time: time) -> bool:
    """Return True when weekday and time fall inside the blackout window.

    All times are compared at minute precision and both ends of the range are
    inclusive. A range whose end is before its start never matches; it does not
    wrap past midnight.
    """
    if weekday not in config.from_weekdays or weekday not in config.to_weekdays:
        return False
    from_time: time = config.from_time.replace(second=0, microsecond=0)
    to_time: time = config.to_time.replace(second=0, microsecond=0)
    return from_time <= now_time.replace(second=0, microsecond=0) <= to_time


def evaluate(priority: int, config: BlackoutConfig, now: datetime, zone: ZoneInfo) -> EvaluationResult:
    """Decide whether priority delivery is available for a product right now."""
    if priority != 0:
        return EvaluationResult(priority_enabled=True, toolkit=config.tooltip)

    local_now: datetime = now.astimezone(zone) if now.tzinfo is not None else now.replace(tzinfo=zone)
    weekday: int = sunday_based_weekday(local_now)
    now_time: time = local_now.time().replace(second=0, microsecond=0)
    blackout: bool = is_blackout_active(config, weekday, now_time)

    logger.debug(
        "[PRIORITY] weekday=%s time=%s window=%s-%s blackout=%s",
        weekday,
        now_time.strftime("%H:%M"),
        config.from_time.isoformat(),
        config.to_time.isoformat(),
        blackout,
    )
    if blackout:
        return EvaluationResult(priority_enabled=False, toolkit=None)
    return EvaluationResult(priority_enabled=True, toolkit=config.tooltip)


def aggregate_results(results: Iterable[EvaluationResult], tooltip: str | None) -> EvaluationResult:
    """Fold per-item results: any item in blackout disables priority delivery."""
    for result in results:
        if not result.priority_enabled:
            return EvaluationResult(priority_enabled=False, toolkit=None)
    return EvaluationResult(priority_enabled=True, toolkit=tooltip)

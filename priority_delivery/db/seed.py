"""Database seeding helpers."""

import logging

from sqlalchemy.orm import Session

from priority_delivery.core.config import settings
from priority_delivery.services.delivery_window import ConfigurationError
from priority_delivery.services.settings_service import get_blackout_settings, save_blackout_settings

logger = logging.getLogger(__name__)


def ensure_blackout_settings(session: Session) -> bool:
    """Store default blackout settings in development when none are saved.

    Returns True when defaults were written.
    """
    if settings.app_env != "dev":
        return False

    current = get_blackout_settings(session)
    if any(value is not None for value in current.values()):
        return False

    try:
        save_blackout_settings(
            session,
            from_weekdays=settings.default_blackout_from_weekdays,
            to_weekdays=settings.default_blackout_to_weekdays,
            from_time=settings.default_blackout_from_time,
            to_time=settings.default_blackout_to_time,
            tool_tip=settings.default_blackout_tool_tip,
        )
    except ConfigurationError as exc:
        logger.warning("Skipping blackout settings seed: %s", exc)
        return False
    return True

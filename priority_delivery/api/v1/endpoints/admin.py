"""Admin endpoints for priority delivery settings."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from priority_delivery.db.session import get_db
from priority_delivery.schemas.priority_delivery import BlackoutSettingsRead, BlackoutSettingsUpdate
from priority_delivery.services.delivery_window import (
    FROM_TIME_KEY,
    FROM_WEEKDAYS_KEY,
    TO_TIME_KEY,
    TO_WEEKDAYS_KEY,
    TOOL_TIP_KEY,
    ConfigurationError,
)
from priority_delivery.services.settings_service import get_blackout_settings, save_blackout_settings

router = APIRouter()


def _to_read(values: dict[str, str | None]) -> BlackoutSettingsRead:
    return BlackoutSettingsRead(
        from_weekdays=values.get(FROM_WEEKDAYS_KEY),
        to_weekdays=values.get(TO_WEEKDAYS_KEY),
        from_time=values.get(FROM_TIME_KEY),
        to_time=values.get(TO_TIME_KEY),
        tool_tip=values.get(TOOL_TIP_KEY),
    )


@router.get("/priority-delivery/settings", response_model=BlackoutSettingsRead)
def get_priority_delivery_settings(db: Session = Depends(get_db)) -> BlackoutSettingsRead:
    return _to_read(get_blackout_settings(db))


@router.put("/priority-delivery/settings", response_model=BlackoutSettingsRead)
def update_priority_delivery_settings(
    payload: BlackoutSettingsUpdate,
    db: Session = Depends(get_db),
) -> BlackoutSettingsRead:
    try:
        values = save_blackout_settings(db, **payload.model_dump())
    except ConfigurationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return _to_read(values)

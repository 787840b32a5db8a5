"""Application settings helpers."""

from sqlalchemy.orm import Session

from priority_delivery.models.app_setting import AppSetting
from priority_delivery.services.delivery_window import (
    BLACKOUT_SETTING_KEYS,
    FROM_TIME_KEY,
    FROM_WEEKDAYS_KEY,
    TO_TIME_KEY,
    TO_WEEKDAYS_KEY,
    TOOL_TIP_KEY,
    parse_config_time,
    parse_weekdays,
)


class SettingsConfigurationProvider:
    """Configuration provider backed by the app settings table.

    Rows are read once and cached, so a single evaluation sees one snapshot.
    """

    def __init__(self, db: Session, keys: tuple[str, ...] = BLACKOUT_SETTING_KEYS) -> None:
        self._db = db
        self._keys = keys
        self._values: dict[str, str] | None = None

    def get_value(self, key: str) -> str | None:
        if self._values is None:
            self._values = get_setting_values(self._db, self._keys)
        return self._values.get(key)


def get_setting_values(db: Session, keys: tuple[str, ...]) -> dict[str, str]:
    """Read raw values for the given keys; absent keys are omitted."""
    rows: list[AppSetting] = db.query(AppSetting).filter(AppSetting.key.in_(keys)).all()
    return {row.key: row.value for row in rows}


def get_blackout_settings(db: Session) -> dict[str, str | None]:
    """Return raw blackout settings, with None for keys that were never saved."""
    values: dict[str, str] = get_setting_values(db, BLACKOUT_SETTING_KEYS)
    return {key: values.get(key) for key in BLACKOUT_SETTING_KEYS}


def normalize_weekdays(value: str, *, key: str) -> str:
    """Validate a weekday list and return it in canonical ``"1,2"`` form."""
    return ",".join(str(day) for day in sorted(parse_weekdays(value, key=key)))


def normalize_config_time(value: str, *, key: str) -> str:
    """Validate a time value and return it in stored ``"HH,MM,SS"`` form."""
    return parse_config_time(value, key=key).strftime("%H,%M,%S")


def save_blackout_settings(
    db: Session,
    *,
    from_weekdays: str,
    to_weekdays: str,
    from_time: str,
    to_time: str,
    tool_tip: str,
) -> dict[str, str]:
    """Validate and persist blackout settings in app settings table.

    Raises ConfigurationError before anything is written when a value does not parse.
    """
    values: dict[str, str] = {
        FROM_WEEKDAYS_KEY: normalize_weekdays(from_weekdays, key=FROM_WEEKDAYS_KEY),
        TO_WEEKDAYS_KEY: normalize_weekdays(to_weekdays, key=TO_WEEKDAYS_KEY),
        FROM_TIME_KEY: normalize_config_time(from_time, key=FROM_TIME_KEY),
        TO_TIME_KEY: normalize_config_time(to_time, key=TO_TIME_KEY),
        TOOL_TIP_KEY: tool_tip.strip(),
    }

    for key, value in values.items():
        setting: AppSetting | None = db.query(AppSetting).filter(AppSetting.key == key).first()
        if setting is None:
            setting = AppSetting(key=key, value=value)
            db.add(setting)
        else:
            setting.value = value

    db.commit()
    return values

"""Application configuration."""

from os import getenv

from pydantic import BaseModel


class Settings(BaseModel):
    """Runtime settings for the application."""

    app_name: str = "priority-delivery API"
    app_env: str = getenv("APP_ENV", "dev")
    debug: bool = getenv("DEBUG", "0") == "1"
    log_level: str = getenv("LOG_LEVEL", "INFO")
    database_url: str = getenv("DATABASE_URL", "sqlite:///./priority_delivery.db")
    delivery_time_zone: str = getenv("DELIVERY_TIME_ZONE", "Pacific/Auckland")
    default_blackout_from_weekdays: str = getenv("DEFAULT_BLACKOUT_FROM_WEEKDAYS", "0,6")
    default_blackout_to_weekdays: str = getenv("DEFAULT_BLACKOUT_TO_WEEKDAYS", "0,6")
    default_blackout_from_time: str = getenv("DEFAULT_BLACKOUT_FROM_TIME", "00,00,00")
    default_blackout_to_time: str = getenv("DEFAULT_BLACKOUT_TO_TIME", "23,59,00")
    default_blackout_tool_tip: str = getenv(
        "DEFAULT_BLACKOUT_TOOL_TIP",
        "Priority delivery is dispatched on the next business day.",
    )


settings: Settings = Settings()

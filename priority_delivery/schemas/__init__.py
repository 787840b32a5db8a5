"""Schema exports."""

from priority_delivery.schemas.priority_delivery import (
    BlackoutSettingsRead,
    BlackoutSettingsUpdate,
    PriorityDeliveryResponse,
)

__all__ = [
    "BlackoutSettingsRead",
    "BlackoutSettingsUpdate",
    "PriorityDeliveryResponse",
]

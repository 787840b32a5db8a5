"""Priority delivery API schemas."""

from pydantic import BaseModel, ConfigDict, Field

from priority_delivery.services.priority_delivery_service import PriorityOutcome


class PriorityDeliveryResponse(BaseModel):
    """Serialized priority delivery decision."""

    model_config = ConfigDict(populate_by_name=True)

    priority_enabled: bool = Field(alias="priorityEnabled")
    toolkit: str | None = None
    outcome: str
    error_kind: str | None = Field(default=None, alias="errorKind")

    @classmethod
    def from_outcome(cls, outcome: PriorityOutcome) -> "PriorityDeliveryResponse":
        return cls(
            priority_enabled=outcome.priority_enabled,
            toolkit=outcome.tooltip,
            outcome=outcome.status,
            error_kind=outcome.error_kind,
        )


class BlackoutSettingsUpdate(BaseModel):
    """Admin payload for the weekly blackout window."""

    from_weekdays: str = Field(examples=["0,6"])
    to_weekdays: str = Field(examples=["0,6"])
    from_time: str = Field(examples=["09,00,00"])
    to_time: str = Field(examples=["17,00,00"])
    tool_tip: str = ""


class BlackoutSettingsRead(BaseModel):
    """Stored blackout settings; None marks a key that was never saved."""

    from_weekdays: str | None
    to_weekdays: str | None
    from_time: str | None
    to_time: str | None
    tool_tip: str | None

from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field, field_serializer

from evcharge.models.station import StationStatus


def serialize_datetime(dt: datetime | None) -> str | None:
    """Serialize datetime to ISO format with UTC timezone."""
    if dt is None:
        return None
    # Naive values come back from SQLite; the store writes UTC
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.isoformat()


class StationInput(BaseModel):
    """
    Write payload for create and update.

    Field names on the wire are ``powerOutput`` and ``connectorType`` while
    the read shape uses ``power_output`` and ``connector_type``.
    """
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=255)
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    status: StationStatus
    power_output: float = Field(gt=0, alias="powerOutput")
    connector_type: str = Field(min_length=1, max_length=50, alias="connectorType")


class StationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    latitude: float
    longitude: float
    status: StationStatus
    power_output: float
    connector_type: str
    created_at: datetime | None

    @field_serializer("created_at")
    def serialize_created_at(self, dt: datetime | None) -> str | None:
        return serialize_datetime(dt)


class StationFilters(BaseModel):
    """Optional, conjunctive listing constraints. ``None`` means no constraint."""
    status: str | None = None
    connector_type: str | None = None
    min_power: float | None = None
    max_power: float | None = None


class MessageResponse(BaseModel):
    message: str

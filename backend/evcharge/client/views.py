"""Computations behind the dashboard, list, map and form pages."""
import math
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Iterable

from evcharge.models.station import StationStatus
from evcharge.schemas.station import StationResponse

CONNECTOR_TYPES = ("CCS", "CHAdeMO", "Type 2", "Tesla")

DEFAULT_FORM_VALUES: dict[str, Any] = {
    "name": "",
    "latitude": 0,
    "longitude": 0,
    "status": StationStatus.ACTIVE.value,
    "powerOutput": 50,
    "connectorType": "CCS",
}


@dataclass
class DashboardSummary:
    total: int = 0
    active: int = 0
    inactive: int = 0
    total_power: float = 0.0
    connector_types: dict[str, int] = field(default_factory=dict)


def summarize(stations: Iterable[StationResponse]) -> DashboardSummary:
    """Dashboard statistics: counts by status, total kW and connector breakdown."""
    stations = list(stations)
    return DashboardSummary(
        total=len(stations),
        active=sum(1 for s in stations if s.status == StationStatus.ACTIVE),
        inactive=sum(1 for s in stations if s.status == StationStatus.INACTIVE),
        total_power=sum(s.power_output for s in stations),
        connector_types=dict(Counter(s.connector_type for s in stations)),
    )


def map_bounds(
    stations: Iterable[StationResponse],
) -> tuple[tuple[float, float], tuple[float, float]] | None:
    """
    Bounding box the map view fits to.

    Returns:
        ((south, west), (north, east)), or None when there is nothing to show
    """
    points = [(s.latitude, s.longitude) for s in stations]
    if not points:
        return None
    lats = [p[0] for p in points]
    lons = [p[1] for p in points]
    return (min(lats), min(lons)), (max(lats), max(lons))


def search_by_name(stations: Iterable[StationResponse], term: str) -> list[StationResponse]:
    """Case-insensitive substring match on the station name."""
    needle = term.lower()
    return [s for s in stations if needle in s.name.lower()]


def _as_number(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def validate_station_form(values: dict[str, Any]) -> dict[str, str]:
    """
    Check a station form before it is submitted.

    Args:
        values: form fields keyed by their write-payload names

    Returns:
        Error message per invalid field; empty when the form is valid
    """
    errors = {}

    if not str(values.get("name") or "").strip():
        errors["name"] = "Name is required"

    latitude = _as_number(values.get("latitude"))
    if math.isnan(latitude) or not -90 <= latitude <= 90:
        errors["latitude"] = "Latitude must be between -90 and 90"

    longitude = _as_number(values.get("longitude"))
    if math.isnan(longitude) or not -180 <= longitude <= 180:
        errors["longitude"] = "Longitude must be between -180 and 180"

    power = _as_number(values.get("powerOutput"))
    if math.isnan(power) or power <= 0:
        errors["powerOutput"] = "Power output must be a positive number"

    return errors

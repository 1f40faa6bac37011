# backend/tests/test_client_views.py
from datetime import datetime, timezone

from evcharge.client.views import (
    CONNECTOR_TYPES,
    DEFAULT_FORM_VALUES,
    map_bounds,
    search_by_name,
    summarize,
    validate_station_form,
)
from evcharge.schemas.station import StationResponse


def make_station(id, name, lat, lon, status="Active", power=50, connector="CCS"):
    return StationResponse(
        id=id,
        name=name,
        latitude=lat,
        longitude=lon,
        status=status,
        power_output=power,
        connector_type=connector,
        created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
    )


STATIONS = [
    make_station(1, "Downtown Charger", 40.7128, -74.0060, power=50, connector="CCS"),
    make_station(2, "Mall Charging Point", 40.7580, -73.9855, power=150, connector="CHAdeMO"),
    make_station(3, "Highway Station", 40.6892, -74.0445, "Inactive", power=350, connector="Tesla"),
    make_station(4, "Depot Charger", 40.7000, -74.0100, power=22, connector="CCS"),
]


def test_connector_types():
    assert CONNECTOR_TYPES == ("CCS", "CHAdeMO", "Type 2", "Tesla")


def test_summarize():
    summary = summarize(STATIONS)

    assert summary.total == 4
    assert summary.active == 3
    assert summary.inactive == 1
    assert summary.total_power == 572
    assert summary.connector_types == {"CCS": 2, "CHAdeMO": 1, "Tesla": 1}


def test_summarize_empty():
    summary = summarize([])
    assert summary.total == 0
    assert summary.total_power == 0
    assert summary.connector_types == {}


def test_map_bounds():
    assert map_bounds(STATIONS) == ((40.6892, -74.0445), (40.7580, -73.9855))


def test_map_bounds_single_station():
    assert map_bounds(STATIONS[:1]) == ((40.7128, -74.0060), (40.7128, -74.0060))


def test_map_bounds_empty():
    assert map_bounds([]) is None


def test_search_by_name_is_case_insensitive():
    assert [s.id for s in search_by_name(STATIONS, "CHARGER")] == [1, 4]
    assert search_by_name(STATIONS, "") == STATIONS
    assert search_by_name(STATIONS, "airport") == []


def test_default_form_values_are_valid():
    errors = validate_station_form({**DEFAULT_FORM_VALUES, "name": "New"})
    assert errors == {}


def test_validate_station_form_reports_each_field():
    errors = validate_station_form({
        "name": "  ",
        "latitude": 95,
        "longitude": "east",
        "powerOutput": 0,
    })

    assert errors == {
        "name": "Name is required",
        "latitude": "Latitude must be between -90 and 90",
        "longitude": "Longitude must be between -180 and 180",
        "powerOutput": "Power output must be a positive number",
    }


def test_validate_station_form_accepts_boundaries():
    errors = validate_station_form({
        "name": "Edge",
        "latitude": -90,
        "longitude": 180,
        "powerOutput": 0.1,
    })
    assert errors == {}

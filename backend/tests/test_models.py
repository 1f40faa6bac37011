# backend/tests/test_models.py
import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from evcharge.models import Base, ChargingStation, StationStatus, User


def test_base_has_metadata():
    assert "users" in Base.metadata.tables
    assert "charging_stations" in Base.metadata.tables


def test_user_has_required_fields():
    assert hasattr(User, "id")
    assert hasattr(User, "username")
    assert hasattr(User, "email")
    assert hasattr(User, "password")
    assert hasattr(User, "created_at")


def test_station_status_enum():
    assert StationStatus.ACTIVE.value == "Active"
    assert StationStatus.INACTIVE.value == "Inactive"
    assert len(StationStatus) == 2


def test_user_email_and_username_unique():
    columns = Base.metadata.tables["users"].c
    assert columns.email.unique
    assert columns.username.unique


@pytest.mark.asyncio
async def test_status_check_constraint_rejects_unknown_value(session):
    with pytest.raises(IntegrityError):
        await session.execute(text(
            "INSERT INTO charging_stations "
            "(name, latitude, longitude, status, power_output, connector_type) "
            "VALUES ('Broken One', 0, 0, 'Broken', 22, 'CCS')"
        ))


@pytest.mark.asyncio
async def test_created_at_set_by_store(session):
    station = ChargingStation(
        name="Depot",
        latitude=1.0,
        longitude=2.0,
        status=StationStatus.ACTIVE,
        power_output=22,
        connector_type="Type 2",
    )
    session.add(station)
    await session.commit()
    await session.refresh(station)

    assert station.id is not None
    assert station.created_at is not None
    assert station.created_by is None

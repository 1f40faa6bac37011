"""Initial data: one admin account and a few sample stations."""
import logging

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from evcharge.core.security import hash_password
from evcharge.models.station import ChargingStation, StationStatus
from evcharge.models.user import User

logger = logging.getLogger(__name__)

ADMIN_USERNAME = "admin"
ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "password123"

SAMPLE_STATIONS = [
    {
        "name": "Downtown Charger",
        "latitude": 40.7128,
        "longitude": -74.0060,
        "status": StationStatus.ACTIVE,
        "power_output": 50,
        "connector_type": "CCS",
    },
    {
        "name": "Mall Charging Point",
        "latitude": 40.7580,
        "longitude": -73.9855,
        "status": StationStatus.ACTIVE,
        "power_output": 150,
        "connector_type": "CHAdeMO",
    },
    {
        "name": "Highway Station",
        "latitude": 40.6892,
        "longitude": -74.0445,
        "status": StationStatus.INACTIVE,
        "power_output": 350,
        "connector_type": "Tesla",
    },
]


async def _count(session: AsyncSession, model) -> int:
    result = await session.execute(select(func.count()).select_from(model))
    return result.scalar_one()


async def seed_database(session: AsyncSession) -> dict[str, int]:
    """
    Insert the admin account and sample stations into empty tables.

    Tables that already hold rows are left untouched, so calling this on
    every startup is safe.

    Returns:
        Number of users and stations inserted
    """
    inserted = {"users": 0, "stations": 0}

    admin_id = None
    if await _count(session, User) == 0:
        admin = User(
            username=ADMIN_USERNAME,
            email=ADMIN_EMAIL,
            password=hash_password(ADMIN_PASSWORD),
        )
        session.add(admin)
        await session.flush()
        admin_id = admin.id
        inserted["users"] = 1
        logger.info(f"Admin user created: {ADMIN_EMAIL}")
    else:
        result = await session.execute(select(User.id).where(User.email == ADMIN_EMAIL))
        admin_id = result.scalar_one_or_none()

    if await _count(session, ChargingStation) == 0:
        for station in SAMPLE_STATIONS:
            session.add(ChargingStation(**station, created_by=admin_id))
        inserted["stations"] = len(SAMPLE_STATIONS)
        logger.info(f"Inserted {len(SAMPLE_STATIONS)} sample stations")

    await session.commit()
    return inserted

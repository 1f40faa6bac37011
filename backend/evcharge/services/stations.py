"""Charging station persistence."""
import logging

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from evcharge.models.station import ChargingStation
from evcharge.schemas.station import StationFilters, StationInput

logger = logging.getLogger(__name__)


async def list_stations(
    session: AsyncSession,
    filters: StationFilters | None = None,
) -> list[ChargingStation]:
    """List stations matching every given filter, in insertion order."""
    query = select(ChargingStation)

    if filters is not None:
        if filters.status:
            query = query.where(ChargingStation.status == filters.status)
        if filters.connector_type:
            query = query.where(ChargingStation.connector_type == filters.connector_type)
        if filters.min_power is not None:
            query = query.where(ChargingStation.power_output >= filters.min_power)
        if filters.max_power is not None:
            query = query.where(ChargingStation.power_output <= filters.max_power)

    result = await session.execute(query.order_by(ChargingStation.id))
    return list(result.scalars().all())


async def get_station(session: AsyncSession, station_id: int) -> ChargingStation | None:
    result = await session.execute(
        select(ChargingStation).where(ChargingStation.id == station_id)
    )
    return result.scalar_one_or_none()


async def create_station(
    session: AsyncSession,
    data: StationInput,
    owner_id: int | None,
) -> ChargingStation:
    """Persist a new station owned by ``owner_id`` and return the stored row."""
    station = ChargingStation(
        name=data.name,
        latitude=data.latitude,
        longitude=data.longitude,
        status=data.status,
        power_output=data.power_output,
        connector_type=data.connector_type,
        created_by=owner_id,
    )
    session.add(station)
    await session.commit()
    await session.refresh(station)

    logger.info(f"Station {station.id} created by user {owner_id}")
    return station


async def update_station(
    session: AsyncSession,
    station_id: int,
    data: StationInput,
) -> ChargingStation | None:
    """Replace the editable fields of a station. Ownership and creation time are kept."""
    station = await get_station(session, station_id)
    if station is None:
        return None

    station.name = data.name
    station.latitude = data.latitude
    station.longitude = data.longitude
    station.status = data.status
    station.power_output = data.power_output
    station.connector_type = data.connector_type

    await session.commit()
    await session.refresh(station)

    logger.info(f"Station {station_id} updated")
    return station


async def delete_station(session: AsyncSession, station_id: int) -> bool:
    """Delete a station. Returns True if a row was removed."""
    result = await session.execute(
        delete(ChargingStation).where(ChargingStation.id == station_id)
    )
    await session.commit()

    deleted = result.rowcount > 0
    if deleted:
        logger.info(f"Station {station_id} deleted")
    return deleted

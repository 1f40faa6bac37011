# backend/evcharge/api/stations.py
import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from evcharge.core.database import get_session
from evcharge.core.deps import require_user_id
from evcharge.core.errors import NotFoundError, InternalError
from evcharge.schemas.station import (
    StationInput,
    StationResponse,
    StationFilters,
    MessageResponse,
)
from evcharge.services import stations as station_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/stations", tags=["stations"])


@router.get("", response_model=list[StationResponse])
async def list_stations(
    status_filter: str | None = Query(default=None, alias="status"),
    connector_type: str | None = Query(default=None, alias="connectorType"),
    min_power: float | None = Query(default=None, alias="minPower"),
    max_power: float | None = Query(default=None, alias="maxPower"),
    session: AsyncSession = Depends(get_session),
) -> list[StationResponse]:
    """List stations, optionally filtered by status, connector type and power range."""
    filters = StationFilters(
        status=status_filter,
        connector_type=connector_type,
        min_power=min_power,
        max_power=max_power,
    )
    stations = await station_service.list_stations(session, filters)
    return [StationResponse.model_validate(s) for s in stations]


@router.get("/{station_id}", response_model=StationResponse)
async def get_station(
    station_id: int,
    session: AsyncSession = Depends(get_session),
) -> StationResponse:
    station = await station_service.get_station(session, station_id)
    if station is None:
        raise NotFoundError()
    return StationResponse.model_validate(station)


@router.post("", response_model=StationResponse, status_code=status.HTTP_201_CREATED)
async def create_station(
    data: StationInput,
    session: AsyncSession = Depends(get_session),
    user_id: int = Depends(require_user_id),
) -> StationResponse:
    """Create a station owned by the authenticated user."""
    station = await station_service.create_station(session, data, user_id)
    return StationResponse.model_validate(station)


@router.put("/{station_id}", response_model=StationResponse)
async def update_station(
    station_id: int,
    data: StationInput,
    session: AsyncSession = Depends(get_session),
    user_id: int = Depends(require_user_id),
) -> StationResponse:
    """Replace a station's editable fields."""
    station = await station_service.update_station(session, station_id, data)
    if station is None:
        raise NotFoundError()
    return StationResponse.model_validate(station)


@router.delete("/{station_id}", response_model=MessageResponse)
async def delete_station(
    station_id: int,
    session: AsyncSession = Depends(get_session),
    user_id: int = Depends(require_user_id),
) -> MessageResponse:
    if await station_service.get_station(session, station_id) is None:
        raise NotFoundError()

    # Someone else removed it between the check and the delete
    if not await station_service.delete_station(session, station_id):
        logger.warning(f"Station {station_id} vanished before delete")
        raise InternalError("Failed to delete charging station")

    return MessageResponse(message="Charging station deleted successfully")

from fastapi import APIRouter

from evcharge.api.auth import router as auth_router
from evcharge.api.stations import router as stations_router

api_router = APIRouter()
api_router.include_router(auth_router)
api_router.include_router(stations_router)

__all__ = ["api_router"]

from evcharge.models.base import Base, CreatedAtMixin
from evcharge.models.user import User
from evcharge.models.station import ChargingStation, StationStatus

__all__ = [
    "Base", "CreatedAtMixin",
    "User",
    "ChargingStation", "StationStatus",
]

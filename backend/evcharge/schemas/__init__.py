from evcharge.schemas.auth import (
    RegisterRequest,
    LoginRequest,
    PublicUser,
    AuthResponse,
)
from evcharge.schemas.station import (
    StationInput,
    StationResponse,
    StationFilters,
    MessageResponse,
)

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "PublicUser",
    "AuthResponse",
    "StationInput",
    "StationResponse",
    "StationFilters",
    "MessageResponse",
]

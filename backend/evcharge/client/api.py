"""Typed async HTTP client for the station API."""
import logging

import httpx

from evcharge.client.credentials import CredentialStore, StoredUser
from evcharge.schemas.station import StationInput, StationResponse, StationFilters

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:8000/api"


class APIClientError(Exception):
    """Non-2xx response from the API."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def filters_to_params(filters: StationFilters | None) -> dict[str, str]:
    """Query parameters for the filters that are set, using the API's names."""
    if filters is None:
        return {}
    params = {}
    if filters.status:
        params["status"] = filters.status
    if filters.connector_type:
        params["connectorType"] = filters.connector_type
    if filters.min_power:
        params["minPower"] = str(filters.min_power)
    if filters.max_power:
        params["maxPower"] = str(filters.max_power)
    return params


class StationAPIClient:
    """
    Client for the ``/auth`` and ``/stations`` endpoints.

    Successful login or registration stores the returned token, which is
    then sent with every mutating request.

    Usage:
        async with StationAPIClient() as client:
            await client.login("admin@example.com", "password123")
            stations = await client.list_stations(StationFilters(status="Active"))
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        credentials: CredentialStore | None = None,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.credentials = credentials or CredentialStore()
        self._client = http_client or httpx.AsyncClient(timeout=timeout)
        self._owns_client = http_client is None

    async def __aenter__(self) -> "StationAPIClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        fallback_error: str,
        authenticated: bool = False,
        **kwargs,
    ):
        headers = self.credentials.auth_header() if authenticated else {}
        try:
            response = await self._client.request(
                method, f"{self.base_url}{path}", headers=headers, **kwargs
            )
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise APIClientError(fallback_error) from e

        if not response.is_success:
            try:
                message = response.json().get("message") or fallback_error
            except ValueError:
                message = fallback_error
            raise APIClientError(message, response.status_code)

        return response.json()

    async def _authenticate(self, path: str, payload: dict, fallback_error: str) -> StoredUser:
        data = await self._request("POST", path, fallback_error, json=payload)
        user = StoredUser.model_validate(data)
        self.credentials.save(user)
        return user

    async def register(self, username: str, email: str, password: str) -> StoredUser:
        return await self._authenticate(
            "/auth/register",
            {"username": username, "email": email, "password": password},
            "Registration failed",
        )

    async def login(self, email: str, password: str) -> StoredUser:
        return await self._authenticate(
            "/auth/login",
            {"email": email, "password": password},
            "Login failed",
        )

    def logout(self) -> None:
        self.credentials.clear()

    async def list_stations(self, filters: StationFilters | None = None) -> list[StationResponse]:
        data = await self._request(
            "GET", "/stations", "Failed to fetch stations", params=filters_to_params(filters)
        )
        return [StationResponse.model_validate(item) for item in data]

    async def get_station(self, station_id: int) -> StationResponse:
        data = await self._request("GET", f"/stations/{station_id}", "Failed to fetch station")
        return StationResponse.model_validate(data)

    async def create_station(self, station: StationInput) -> StationResponse:
        data = await self._request(
            "POST",
            "/stations",
            "Failed to create station",
            authenticated=True,
            json=station.model_dump(mode="json", by_alias=True),
        )
        return StationResponse.model_validate(data)

    async def update_station(self, station_id: int, station: StationInput) -> StationResponse:
        data = await self._request(
            "PUT",
            f"/stations/{station_id}",
            "Failed to update station",
            authenticated=True,
            json=station.model_dump(mode="json", by_alias=True),
        )
        return StationResponse.model_validate(data)

    async def delete_station(self, station_id: int) -> str:
        data = await self._request(
            "DELETE", f"/stations/{station_id}", "Failed to delete station", authenticated=True
        )
        return data.get("message", "")

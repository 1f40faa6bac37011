from evcharge.client.api import StationAPIClient, APIClientError, filters_to_params
from evcharge.client.credentials import (
    CredentialStore,
    StoredUser,
    NotAuthenticated,
    require_authentication,
)
from evcharge.client.views import (
    CONNECTOR_TYPES,
    DashboardSummary,
    summarize,
    map_bounds,
    search_by_name,
    validate_station_form,
)

__all__ = [
    "StationAPIClient", "APIClientError", "filters_to_params",
    "CredentialStore", "StoredUser", "NotAuthenticated", "require_authentication",
    "CONNECTOR_TYPES", "DashboardSummary", "summarize", "map_bounds",
    "search_by_name", "validate_station_form",
]

"""Request builders and response normalizers for each upstream provider."""

from wheels_router_mcp.providers.nominatim import (
    build_nominatim_params,
    normalize_nominatim_results,
)
from wheels_router_mcp.providers.transitous import (
    TRANSITOUS_MODE_MAP,
    build_transitous_params,
    normalize_transitous_response,
    transitous_mode_to_canonical,
)
from wheels_router_mcp.providers.wheels import build_wheels_params, normalize_wheels_response

__all__ = [
    # Local provider
    "build_wheels_params",
    "normalize_wheels_response",
    # Global provider
    "TRANSITOUS_MODE_MAP",
    "build_transitous_params",
    "normalize_transitous_response",
    "transitous_mode_to_canonical",
    # Geocoding
    "build_nominatim_params",
    "normalize_nominatim_results",
]

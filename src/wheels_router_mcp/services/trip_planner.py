"""Trip planning across the local and global providers.

Each call validates the request, picks exactly one provider from the origin
and destination, makes one HTTP request, and normalizes the answer into a
TripPlan. Provider errors propagate as UpstreamHTTPError.
"""

import logging

from wheels_router_mcp.data.config import RouterConfig, get_router_config
from wheels_router_mcp.data.http_client import ProviderClient
from wheels_router_mcp.models.requests import TripRequest, build_trip_request
from wheels_router_mcp.models.trip import TripPlan
from wheels_router_mcp.providers.transitous import (
    build_transitous_params,
    normalize_transitous_response,
)
from wheels_router_mcp.providers.wheels import build_wheels_params, normalize_wheels_response
from wheels_router_mcp.routing.selector import Provider, select_provider

logger = logging.getLogger(__name__)

async def _plan_with_wheels(request: TripRequest, config: RouterConfig) -> TripPlan:
    params = build_wheels_params(request)
    async with ProviderClient(config) as client:
        data = await client.get_json(
            Provider.LOCAL.display_name, config.wheels_plan_url, params
        )
    return normalize_wheels_response(data)


async def _plan_with_transitous(request: TripRequest, config: RouterConfig) -> TripPlan:
    params = build_transitous_params(request)
    if request.modes:
        logger.debug(f"Mode filter {request.modes} is not forwarded to Transitous")
    async with ProviderClient(config) as client:
        data = await client.get_json(
            Provider.GLOBAL.display_name, config.transitous_plan_url, params
        )
    return normalize_transitous_response(data, request.max_results)


async def plan_trip(
    origin: str,
    destination: str,
    depart_at: str | None = None,
    arrive_by: str | None = None,
    modes: str | list[str] | None = None,
    max_results: int | None = None,
) -> TripPlan:
    """Plan a trip with whichever provider covers origin and destination.

    Args:
        origin: 'lat,lon' or 'stop:ID'
        destination: 'lat,lon' or 'stop:ID'
        depart_at: ISO 8601 departure time with offset
        arrive_by: ISO 8601 arrival deadline with offset (exclusive with depart_at)
        modes: Comma-separated or list of mode identifiers
        max_results: Cap on returned plans (1-5)

    Returns:
        TripPlan in the canonical schema.

    Raises:
        InvalidRequestError: If the arguments are invalid (no request is made).
        UpstreamHTTPError: If the chosen provider returns a non-success status.
    """
    request = build_trip_request(
        origin=origin,
        destination=destination,
        depart_at=depart_at,
        arrive_by=arrive_by,
        modes=modes,
        max_results=max_results,
    )
    config = get_router_config()

    provider = select_provider(request.origin, request.destination)
    logger.info(f"Planning {request.origin} -> {request.destination} via {provider.display_name}")

    if provider is Provider.LOCAL:
        result = await _plan_with_wheels(request, config)
    else:
        result = await _plan_with_transitous(request, config)

    logger.debug(f"{provider.display_name} returned {len(result.plans)} plans")
    return result

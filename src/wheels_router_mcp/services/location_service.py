"""Free-text place search through Nominatim."""

import logging

from wheels_router_mcp.data.config import get_router_config
from wheels_router_mcp.data.http_client import ProviderClient
from wheels_router_mcp.errors import InvalidRequestError
from wheels_router_mcp.models.places import GeocodeResult
from wheels_router_mcp.providers.nominatim import (
    build_nominatim_params,
    normalize_nominatim_results,
)

logger = logging.getLogger(__name__)

NOMINATIM = "Nominatim"
DEFAULT_LIMIT = 5

async def search_location(query: str, limit: int = DEFAULT_LIMIT) -> list[GeocodeResult]:
    """Search places by free text.

    Args:
        query: Place name or address (at least 2 characters)
        limit: Number of results to request from Nominatim

    Returns:
        Geocode results in Nominatim's ranking order.

    Raises:
        InvalidRequestError: If the query is too short.
        UpstreamHTTPError: If Nominatim returns a non-success status.
    """
    query = query.strip() if isinstance(query, str) else ""
    if len(query) < 2:
        raise InvalidRequestError("query must be at least 2 characters")

    config = get_router_config()
    params = build_nominatim_params(query, limit)
    logger.info(f"Searching locations for {query!r} (limit {limit})")

    async with ProviderClient(config) as client:
        data = await client.get_json(NOMINATIM, config.nominatim_url, params)

    return normalize_nominatim_results(data)

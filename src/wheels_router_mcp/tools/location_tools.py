"""MCP tools for place search."""

from wheels_router_mcp.app import mcp
from wheels_router_mcp.models.places import geocode_results_to_json
from wheels_router_mcp.services.location_service import search_location as _search_location


@mcp.tool()
async def search_location(query: str, limit: int = 5) -> str:
    """Search locations via Nominatim (use for origin/destination lookup).

    Examples:
        search_location(query="Yau Tong MTR Exit A2")
        search_location(query="Tokyo Station", limit=3)

    Args:
        query: Free-text place search.
        limit: How many results to return (1-10, default 5).

    Returns:
        JSON text with a list of places (display_name, lat, lon, type, class).
    """
    # Clamp limit
    limit = max(1, min(10, limit))

    results = await _search_location(query=query, limit=limit)
    return geocode_results_to_json(results)

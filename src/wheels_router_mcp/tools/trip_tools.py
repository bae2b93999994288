from wheels_router_mcp.app import mcp
from wheels_router_mcp.services.trip_planner import plan_trip as _plan_trip


@mcp.tool()
async def plan_trip(
    origin: str,
    destination: str,
    depart_at: str | None = None,
    arrive_by: str | None = None,
    modes: str | None = None,
    max_results: int | None = None,
) -> str:
    """Plan a public transit trip.

    Uses Wheels Router when both ends are coordinates in Hong Kong and
    Transitous for everything else. fares_min/fares_max are fare ranges, NOT
    interchange discounts. Interchange discounts only apply when a route's
    fare explicitly includes a discount, and only on certain routes.

    Args:
        origin: Required. Starting point as 'lat,lon' or 'stop:ID'
                (use search_location to find coordinates)
        destination: Required. Destination as 'lat,lon' or 'stop:ID'
        depart_at: Optional ISO 8601 departure time (UTC preferred)
        arrive_by: Optional ISO 8601 arrival deadline; use only one of
                   depart_at or arrive_by
        modes: Optional comma-separated modes (e.g. "mtr,bus,ferry").
               Only set if needed.
        max_results: Optional cap on returned plans (1-5)

    Returns:
        JSON text with a "plans" list; each plan has durations, fares and
        ordered legs (walk, transit, wait, station_transfer).
    """
    result = await _plan_trip(
        origin=origin,
        destination=destination,
        depart_at=depart_at,
        arrive_by=arrive_by,
        modes=modes,
        max_results=max_results,
    )
    return result.to_json()

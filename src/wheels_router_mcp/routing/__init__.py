"""Provider selection from location tokens."""

from wheels_router_mcp.routing.coordinates import Coordinate, parse_coordinates
from wheels_router_mcp.routing.region import LOCAL_REGION, BoundingBox, is_in_local_region
from wheels_router_mcp.routing.selector import Provider, select_provider

__all__ = [
    # Parsing
    "Coordinate",
    "parse_coordinates",
    # Region
    "BoundingBox",
    "LOCAL_REGION",
    "is_in_local_region",
    # Selection
    "Provider",
    "select_provider",
]

import logging
from enum import Enum

from wheels_router_mcp.routing.coordinates import parse_coordinates
from wheels_router_mcp.routing.region import LOCAL_REGION, BoundingBox, is_in_local_region

logger = logging.getLogger(__name__)


class Provider(str, Enum):
    """Upstream trip planners."""

    LOCAL = "wheels"
    GLOBAL = "transitous"

    @property
    def display_name(self) -> str:
        return PROVIDER_NAMES[self]


PROVIDER_NAMES = {
    Provider.LOCAL: "Wheels Router",
    Provider.GLOBAL: "Transitous",
}


def select_provider(
    origin: str,
    destination: str,
    region: BoundingBox = LOCAL_REGION,
) -> Provider:
    """Choose the provider that answers a trip between two location tokens.

    The local provider is used only when both tokens are coordinates inside
    its region. Stop references cannot be located, so they always go global.
    """
    origin_coords = parse_coordinates(origin)
    destination_coords = parse_coordinates(destination)

    if (
        origin_coords is not None
        and destination_coords is not None
        and is_in_local_region(origin_coords, region)
        and is_in_local_region(destination_coords, region)
    ):
        provider = Provider.LOCAL
    else:
        provider = Provider.GLOBAL

    logger.debug(f"Selected {provider.display_name} for {origin} -> {destination}")
    return provider

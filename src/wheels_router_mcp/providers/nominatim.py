import logging
from typing import Any

from pydantic import ValidationError

from wheels_router_mcp.models.places import GeocodeResult
from wheels_router_mcp.providers.payload import as_dict, as_list

logger = logging.getLogger(__name__)


def build_nominatim_params(query: str, limit: int) -> dict[str, str]:
    """Build /search query parameters."""
    return {
        "format": "jsonv2",
        "q": query,
        "limit": str(limit),
        "addressdetails": "1",
    }


def _geocode_result(raw: Any) -> GeocodeResult | None:
    item = as_dict(raw)
    if item is None:
        return None
    try:
        return GeocodeResult(
            display_name=item.get("display_name"),
            lat=item.get("lat"),
            lon=item.get("lon"),
            type=item.get("type"),
            place_class=item.get("class"),
        )
    except ValidationError as e:
        logger.debug(f"Dropping malformed geocode result: {e}")
        return None


def normalize_nominatim_results(data: Any) -> list[GeocodeResult]:
    """Normalize a Nominatim jsonv2 result list.

    Returns:
        One GeocodeResult per place record; empty if the body is not a list.
    """
    results = [_geocode_result(item) for item in as_list(data)]
    return [result for result in results if result is not None]

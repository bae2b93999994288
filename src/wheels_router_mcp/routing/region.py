from dataclasses import dataclass

from wheels_router_mcp.routing.coordinates import Coordinate


@dataclass(frozen=True)
class BoundingBox:
    """Rectangular region, inclusive on all edges."""

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    def contains(self, coordinate: Coordinate) -> bool:
        return (
            self.min_lat <= coordinate.lat <= self.max_lat
            and self.min_lon <= coordinate.lon <= self.max_lon
        )


# Wheels Router coverage (Hong Kong)
LOCAL_REGION = BoundingBox(min_lat=22.15, max_lat=22.58, min_lon=113.82, max_lon=114.45)


def is_in_local_region(coordinate: Coordinate, region: BoundingBox = LOCAL_REGION) -> bool:
    """Check whether a coordinate is covered by the local provider."""
    return region.contains(coordinate)

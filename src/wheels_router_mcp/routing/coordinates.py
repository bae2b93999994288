import re
from dataclasses import dataclass

# "lat,lon" in decimal degrees, no whitespace
COORDINATE_PATTERN = re.compile(r"^(-?\d+\.?\d*),(-?\d+\.?\d*)$")


@dataclass(frozen=True)
class Coordinate:
    """A latitude/longitude pair in decimal degrees."""

    lat: float
    lon: float


def parse_coordinates(token: str) -> Coordinate | None:
    """Parse a location token into a coordinate.

    Example: "22.3,114.2" -> Coordinate(lat=22.3, lon=114.2)

    Returns:
        The coordinate, or None for stop references ("stop:123") and any
        other token that is not exactly "lat,lon".
    """
    if not isinstance(token, str):
        return None
    match = COORDINATE_PATTERN.fullmatch(token)
    if not match:
        return None
    return Coordinate(lat=float(match.group(1)), lon=float(match.group(2)))

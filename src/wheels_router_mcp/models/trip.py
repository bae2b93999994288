"""Canonical, provider-agnostic trip plan models.

Every provider response is normalized into these shapes. Optional fields
left as None are omitted when the plan is serialized.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


# Providers may report whole or fractional seconds; kept as sent
Seconds = int | float


class CanonicalModel(BaseModel):
    """Immutable base for normalized values."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True, populate_by_name=True)


class Point(CanonicalModel):
    lat: float | None = None
    lon: float | None = None


class Place(CanonicalModel):
    """Endpoint of a walking leg (street address, entrance, or stop)."""

    address: str | None = None
    id: str | None = None
    stop_id: str | None = None
    entrance: str | None = None
    platform: str | None = None
    location: Point | None = None


class Stop(CanonicalModel):
    """Boarding or alighting stop of a transit route option."""

    id: str | None = None
    stop_id: str | None = None
    stop_name: str | None = None
    platform: str | None = None
    location: Point | None = None


class Fare(CanonicalModel):
    """Fare for a single route option.

    base_fare and discount are only set when the provider reports them.
    """

    base_fare: float | None = None
    discount: float | None = None
    final_fare: float | None = None
    currency: str | None = None


class RouteOption(CanonicalModel):
    """One of several interchangeable services for a transit leg."""

    route_id: str | None = None
    route_name: str | None = None
    route_short_name: str | None = None
    headsign: str | None = None
    mode: str | None = None
    duration_seconds: Seconds | None = None
    start_time: str | None = None
    fare: Fare | None = None
    from_stop: Stop | None = Field(default=None, alias="from")
    to_stop: Stop | None = Field(default=None, alias="to")


class WalkLeg(CanonicalModel):
    type: Literal["walk"] = "walk"
    walk_type: str | None = Field(default=None, description="street, bike, car, rental, ...")
    duration_seconds: Seconds | None = None
    distance_meters: float | None = None
    from_place: Place | None = Field(default=None, alias="from")
    to_place: Place | None = Field(default=None, alias="to")


class TransitLeg(CanonicalModel):
    type: Literal["transit"] = "transit"
    route_options: list[RouteOption] = Field(default_factory=list)


class WaitLeg(CanonicalModel):
    type: Literal["wait"] = "wait"
    duration_seconds: Seconds | None = None


class StationTransferLeg(CanonicalModel):
    """Platform-to-platform transfer inside a station."""

    type: Literal["station_transfer"] = "station_transfer"
    from_platform: str | None = None
    to_platform: str | None = None
    duration_seconds: Seconds | None = None
    distance_meters: float | None = None


class UnknownLeg(CanonicalModel):
    """Fallback for leg types this server does not recognize.

    The upstream type tag is kept as-is.
    """

    type: str = "unknown"
    duration_seconds: Seconds | None = None


Leg = WalkLeg | TransitLeg | WaitLeg | StationTransferLeg | UnknownLeg


class Plan(CanonicalModel):
    """A complete itinerary from origin to destination."""

    duration_seconds: Seconds | None = None
    duration_seconds_min: Seconds | None = Field(
        default=None, description="Lower bound when the provider reports a range"
    )
    duration_seconds_max: Seconds | None = Field(
        default=None, description="Upper bound when the provider reports a range"
    )
    start_time: str | None = None
    fares_min: float | None = Field(
        default=None, description="Fare range lower bound (not an interchange discount)"
    )
    fares_max: float | None = Field(default=None, description="Fare range upper bound")
    currency: str | None = None
    legs: list[Leg] = Field(default_factory=list, description="Ordered list of legs")


class TripPlan(CanonicalModel):
    """Response of plan_trip."""

    plans: list[Plan] = Field(default_factory=list)

    def to_json(self) -> str:
        """Serialize with upstream key names, omitting absent fields."""
        return self.model_dump_json(indent=2, by_alias=True, exclude_none=True)

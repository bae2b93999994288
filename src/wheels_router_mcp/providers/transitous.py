"""Transitous (global provider) request building and response normalization.

Transitous answers with MOTIS itineraries: a point duration per itinerary, no
fares, and one mode tag per leg. Those are mapped onto the canonical plan
shape used by Wheels Router.
"""

import logging
from typing import Any

from pydantic import ValidationError

from wheels_router_mcp.models.requests import TripRequest
from wheels_router_mcp.models.trip import (
    Leg,
    Place,
    Plan,
    Point,
    RouteOption,
    Stop,
    TransitLeg,
    TripPlan,
    WalkLeg,
)
from wheels_router_mcp.providers.payload import (
    as_dict,
    as_list,
    fallback_leg,
    first_non_empty,
)

logger = logging.getLogger(__name__)

# Non-transit leg modes, normalized to walk legs
STREET_MODES = frozenset({"WALK", "BIKE", "CAR", "RENTAL"})

# Transitous mode code -> canonical mode (heavy rail collapses to "mtr")
TRANSITOUS_MODE_MAP: dict[str, str] = {
    "TRAM": "tram",
    "SUBWAY": "subway",
    "BUS": "bus",
    "FERRY": "ferry",
    "AIRPLANE": "air",
    "COACH": "coach",
    "RAIL": "mtr",
    "SUBURBAN": "mtr",
    "HIGHSPEED_RAIL": "mtr",
    "LONG_DISTANCE": "mtr",
    "NIGHT_RAIL": "mtr",
    "REGIONAL_FAST_RAIL": "mtr",
    "REGIONAL_RAIL": "mtr",
    "CABLE_CAR": "funicular",
    "FUNICULAR": "funicular",
    "AERIAL_LIFT": "funicular",
}


def transitous_mode_to_canonical(mode: str) -> str:
    """Translate a Transitous mode code; unknown codes are lower-cased."""
    return TRANSITOUS_MODE_MAP.get(mode, mode.lower())


def build_transitous_params(request: TripRequest) -> dict[str, str]:
    """Map a trip request onto /api/v5/plan query parameters.

    depart_at/arrive_by become a single "time" plus the "arriveBy" flag.
    """
    params = {
        "fromPlace": request.origin,
        "toPlace": request.destination,
        "detailedTransfers": "true",
    }
    if request.depart_at:
        params["time"] = request.depart_at
        params["arriveBy"] = "false"
    elif request.arrive_by:
        params["time"] = request.arrive_by
        params["arriveBy"] = "true"
    if request.max_results:
        params["numItineraries"] = str(request.max_results)
    return params


def _point(place: dict) -> Point | None:
    if place.get("lat") is None and place.get("lon") is None:
        return None
    return Point(lat=place.get("lat"), lon=place.get("lon"))


def _place(raw: Any) -> Place | None:
    place = as_dict(raw)
    if place is None:
        return None
    return Place(address=place.get("name"), id=place.get("stopId"), location=_point(place))


def _stop(raw: Any) -> Stop | None:
    place = as_dict(raw)
    if place is None:
        return None
    return Stop(
        id=place.get("stopId"),
        stop_name=place.get("name"),
        platform=place.get("track"),
        location=_point(place),
    )


def _street_leg(leg: dict, mode: str) -> WalkLeg:
    return WalkLeg(
        walk_type="street" if mode == "WALK" else mode.lower(),
        duration_seconds=leg.get("duration"),
        distance_meters=leg.get("distance"),
        from_place=_place(leg.get("from")),
        to_place=_place(leg.get("to")),
    )


def _transit_leg(leg: dict, mode: str) -> TransitLeg:
    option = RouteOption(
        route_id=leg.get("tripId"),
        route_name=first_non_empty(
            leg.get("routeLongName"), leg.get("routeShortName"), leg.get("displayName")
        ),
        route_short_name=leg.get("routeShortName"),
        headsign=leg.get("headsign"),
        mode=transitous_mode_to_canonical(mode),
        duration_seconds=leg.get("duration"),
        start_time=leg.get("startTime"),
        from_stop=_stop(leg.get("from")),
        to_stop=_stop(leg.get("to")),
    )
    return TransitLeg(route_options=[option])


def normalize_transitous_leg(raw: Any) -> Leg | None:
    """Normalize one leg, or return None if it is not a JSON object.

    Objects without a mode tag, or that fail to normalize, degrade to the
    fallback leg.
    """
    leg = as_dict(raw)
    if leg is None:
        return None
    mode = leg.get("mode")
    if not isinstance(mode, str):
        logger.debug(f"Leg without a mode tag kept as fallback: {mode!r}")
        return fallback_leg(None, leg.get("duration"))
    try:
        if mode in STREET_MODES:
            return _street_leg(leg, mode)
        return _transit_leg(leg, mode)
    except ValidationError as e:
        logger.debug(f"Unreadable {mode} leg kept as fallback: {e}")
        return fallback_leg(mode, leg.get("duration"))


def _plan(raw: Any) -> Plan | None:
    itinerary = as_dict(raw)
    if itinerary is None:
        return None
    legs = [normalize_transitous_leg(leg) for leg in as_list(itinerary.get("legs"))]
    duration = itinerary.get("duration")
    try:
        # no duration range and no fares from this provider
        return Plan(
            duration_seconds=duration,
            duration_seconds_min=duration,
            duration_seconds_max=duration,
            start_time=itinerary.get("startTime"),
            legs=[leg for leg in legs if leg is not None],
        )
    except ValidationError as e:
        logger.debug(f"Dropping malformed itinerary: {e}")
        return None


def normalize_transitous_response(data: Any, max_results: int | None = None) -> TripPlan:
    """Normalize a Transitous /api/v5/plan response body.

    Args:
        data: Decoded JSON body, expected to look like {"itineraries": [...]}.
        max_results: If set, keep only the first N itineraries.

    Returns:
        TripPlan; empty when the body has no itineraries list.
    """
    payload = as_dict(data)
    if payload is None or not isinstance(payload.get("itineraries"), list):
        return TripPlan(plans=[])

    plans = [plan for plan in map(_plan, payload["itineraries"]) if plan is not None]
    # cap counts readable itineraries; same as truncating first when all are well-formed
    if max_results:
        plans = plans[:max_results]
    return TripPlan(plans=plans)

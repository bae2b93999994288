"""Wheels Router (local provider) request building and response normalization.

Wheels Router already answers in the canonical shape, so normalization is a
field-by-field reshape that drops unexpected fields and malformed entries.
"""

import logging
from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from wheels_router_mcp.models.requests import TripRequest
from wheels_router_mcp.models.trip import (
    Fare,
    Leg,
    Place,
    Plan,
    Point,
    RouteOption,
    StationTransferLeg,
    Stop,
    TransitLeg,
    TripPlan,
    UnknownLeg,
    WaitLeg,
    WalkLeg,
)
from wheels_router_mcp.providers.payload import as_dict, as_list, fallback_leg

logger = logging.getLogger(__name__)


def build_wheels_params(request: TripRequest) -> dict[str, str]:
    """Map a trip request onto /v1/plan query parameters.

    Parameters whose source field is absent are omitted.
    """
    params = {"origin": request.origin, "destination": request.destination}
    if request.depart_at:
        params["depart_at"] = request.depart_at
    if request.arrive_by:
        params["arrive_by"] = request.arrive_by
    if request.modes:
        params["modes"] = ",".join(request.modes)
    if request.max_results:
        params["max_results"] = str(request.max_results)
    return params


def _point(raw: Any) -> Point | None:
    point = as_dict(raw)
    if point is None:
        return None
    return Point(lat=point.get("lat"), lon=point.get("lon"))


def _place(raw: Any) -> Place | None:
    loc = as_dict(raw)
    if loc is None:
        return None
    return Place(
        address=loc.get("address"),
        id=loc.get("id"),
        stop_id=loc.get("stop_id"),
        entrance=loc.get("entrance"),
        platform=loc.get("platform"),
        location=_point(loc.get("location")),
    )


def _stop(raw: Any) -> Stop | None:
    stop = as_dict(raw)
    if stop is None:
        return None
    return Stop(
        id=stop.get("id"),
        stop_id=stop.get("stop_id"),
        stop_name=stop.get("stop_name"),
        platform=stop.get("platform"),
        location=_point(stop.get("location")),
    )


def _fare(raw: Any) -> Fare | None:
    fare = as_dict(raw)
    if fare is None:
        return None
    return Fare(
        base_fare=fare.get("base_fare"),
        discount=fare.get("discount"),
        final_fare=fare.get("final_fare"),
        currency=fare.get("currency"),
    )


def _route_option(raw: Any) -> RouteOption | None:
    opt = as_dict(raw)
    if opt is None:
        return None
    try:
        return RouteOption(
            route_id=opt.get("route_id"),
            route_name=opt.get("route_name"),
            route_short_name=opt.get("route_short_name"),
            headsign=opt.get("headsign"),
            mode=opt.get("mode"),
            duration_seconds=opt.get("duration_seconds"),
            start_time=opt.get("start_time"),
            fare=_fare(opt.get("fare")),
            from_stop=_stop(opt.get("from")),
            to_stop=_stop(opt.get("to")),
        )
    except ValidationError as e:
        logger.debug(f"Dropping malformed route option: {e}")
        return None


def _walk_leg(leg: dict) -> WalkLeg:
    return WalkLeg(
        walk_type=leg.get("walk_type"),
        duration_seconds=leg.get("duration_seconds"),
        distance_meters=leg.get("distance_meters"),
        from_place=_place(leg.get("from")),
        to_place=_place(leg.get("to")),
    )


def _transit_leg(leg: dict) -> TransitLeg:
    options = [_route_option(opt) for opt in as_list(leg.get("route_options"))]
    return TransitLeg(route_options=[opt for opt in options if opt is not None])


def _wait_leg(leg: dict) -> WaitLeg:
    return WaitLeg(duration_seconds=leg.get("duration_seconds"))


def _station_transfer_leg(leg: dict) -> StationTransferLeg:
    return StationTransferLeg(
        from_platform=leg.get("from_platform"),
        to_platform=leg.get("to_platform"),
        duration_seconds=leg.get("duration_seconds"),
        distance_meters=leg.get("distance_meters"),
    )


def _unknown_leg(leg: dict) -> UnknownLeg:
    return fallback_leg(leg.get("type"), leg.get("duration_seconds"))


# Leg builders by upstream "type"; anything else falls back to _unknown_leg
LEG_BUILDERS: dict[str, Callable[[dict], Leg]] = {
    "walk": _walk_leg,
    "transit": _transit_leg,
    "wait": _wait_leg,
    "station_transfer": _station_transfer_leg,
}


def normalize_wheels_leg(raw: Any) -> Leg | None:
    """Normalize one leg, or return None if it is not a JSON object.

    Objects that fail to normalize degrade to the fallback leg.
    """
    leg = as_dict(raw)
    if leg is None:
        return None
    leg_type = leg.get("type")
    builder = LEG_BUILDERS.get(leg_type, _unknown_leg) if isinstance(leg_type, str) else _unknown_leg
    try:
        return builder(leg)
    except ValidationError as e:
        logger.debug(f"Unreadable {leg_type!r} leg kept as fallback: {e}")
        return _unknown_leg(leg)


def _plan(raw: Any) -> Plan | None:
    plan = as_dict(raw)
    if plan is None:
        return None
    legs = [normalize_wheels_leg(leg) for leg in as_list(plan.get("legs"))]
    try:
        return Plan(
            duration_seconds=plan.get("duration_seconds"),
            duration_seconds_min=plan.get("duration_seconds_min"),
            duration_seconds_max=plan.get("duration_seconds_max"),
            start_time=plan.get("start_time"),
            fares_min=plan.get("fares_min"),
            fares_max=plan.get("fares_max"),
            currency=plan.get("currency"),
            legs=[leg for leg in legs if leg is not None],
        )
    except ValidationError as e:
        logger.debug(f"Dropping malformed plan: {e}")
        return None


def normalize_wheels_response(data: Any) -> TripPlan:
    """Normalize a Wheels Router /v1/plan response body.

    Args:
        data: Decoded JSON body, expected to look like {"plans": [...]}.

    Returns:
        TripPlan; empty when the body has no plans list.
    """
    payload = as_dict(data)
    if payload is None or not isinstance(payload.get("plans"), list):
        return TripPlan(plans=[])

    plans = [_plan(plan) for plan in payload["plans"]]
    return TripPlan(plans=[plan for plan in plans if plan is not None])

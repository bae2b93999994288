"""Tests for Transitous request building and response normalization."""

import json

import pytest

from wheels_router_mcp.models.requests import TripRequest
from wheels_router_mcp.models.trip import TransitLeg, UnknownLeg, WalkLeg
from wheels_router_mcp.providers.transitous import (
    TRANSITOUS_MODE_MAP,
    build_transitous_params,
    normalize_transitous_leg,
    normalize_transitous_response,
    transitous_mode_to_canonical,
)


def _walk_leg(mode: str = "WALK") -> dict:
    return {
        "mode": mode,
        "duration": 300,
        "distance": 420.0,
        "from": {"name": "START", "lat": 35.6812, "lon": 139.7671, "vertexType": "NORMAL"},
        "to": {
            "name": "Tokyo",
            "stopId": "jp_tokyo_1",
            "lat": 35.6813,
            "lon": 139.7660,
            "track": "3",
        },
    }


def _rail_leg() -> dict:
    return {
        "mode": "SUBURBAN",
        "duration": 900,
        "startTime": "2025-01-08T00:05:00Z",
        "tripId": "20250108_JY_123",
        "routeShortName": "JY",
        "routeLongName": "Yamanote Line",
        "displayName": "JY Yamanote",
        "headsign": "Shinagawa",
        "from": {
            "name": "Tokyo",
            "stopId": "jp_tokyo_1",
            "lat": 35.6813,
            "lon": 139.7660,
            "track": "3",
        },
        "to": {"name": "Shinagawa", "stopId": "jp_shinagawa_2", "lat": 35.6285, "lon": 139.7388},
        "intermediateStops": [],
    }


def _itinerary(duration: int = 600, start: str = "2025-01-08T00:00:00Z") -> dict:
    return {
        "duration": duration,
        "startTime": start,
        "endTime": "2025-01-08T00:20:00Z",
        "transfers": 0,
        "legs": [_walk_leg(), _rail_leg()],
    }


class TestBuildTransitousParams:
    """Tests for /api/v5/plan query parameters."""

    def test_minimal(self) -> None:
        """Test origin/destination mapping and detailed transfers."""
        request = TripRequest(origin="stop:123", destination="35.68,139.76")
        assert build_transitous_params(request) == {
            "fromPlace": "stop:123",
            "toPlace": "35.68,139.76",
            "detailedTransfers": "true",
        }

    def test_depart_at(self) -> None:
        """Test depart_at becomes time with arriveBy=false."""
        request = TripRequest(
            origin="48.85,2.35",
            destination="48.87,2.29",
            depart_at="2025-01-08T08:00:00+01:00",
        )
        params = build_transitous_params(request)
        assert params["time"] == "2025-01-08T08:00:00+01:00"
        assert params["arriveBy"] == "false"

    def test_arrive_by(self) -> None:
        """Test arrive_by becomes time with arriveBy=true."""
        request = TripRequest(
            origin="48.85,2.35",
            destination="48.87,2.29",
            arrive_by="2025-01-08T09:00:00Z",
        )
        params = build_transitous_params(request)
        assert params["time"] == "2025-01-08T09:00:00Z"
        assert params["arriveBy"] == "true"

    def test_max_results_and_modes(self) -> None:
        """Test the result cap parameter name and that modes are not sent."""
        request = TripRequest(
            origin="48.85,2.35",
            destination="48.87,2.29",
            modes="bus",
            max_results=4,
        )
        params = build_transitous_params(request)
        assert params["numItineraries"] == "4"
        assert "modes" not in params
        assert "time" not in params
        assert "arriveBy" not in params


class TestModeTable:
    """Tests for Transitous mode code translation."""

    @pytest.mark.parametrize(
        "code,expected",
        [
            ("RAIL", "mtr"),
            ("SUBURBAN", "mtr"),
            ("HIGHSPEED_RAIL", "mtr"),
            ("LONG_DISTANCE", "mtr"),
            ("NIGHT_RAIL", "mtr"),
            ("REGIONAL_FAST_RAIL", "mtr"),
            ("REGIONAL_RAIL", "mtr"),
            ("TRAM", "tram"),
            ("SUBWAY", "subway"),
            ("BUS", "bus"),
            ("FERRY", "ferry"),
            ("AIRPLANE", "air"),
            ("COACH", "coach"),
            ("CABLE_CAR", "funicular"),
            ("FUNICULAR", "funicular"),
            ("AERIAL_LIFT", "funicular"),
        ],
    )
    def test_known_codes(self, code: str, expected: str) -> None:
        """Test every documented code."""
        assert transitous_mode_to_canonical(code) == expected

    def test_table_covers_documented_codes(self) -> None:
        """Test the table holds exactly the documented codes."""
        assert len(TRANSITOUS_MODE_MAP) == 16

    def test_unknown_code_lowercased(self) -> None:
        """Test unknown codes pass through lower-cased."""
        assert transitous_mode_to_canonical("FOOBAR") == "foobar"
        assert transitous_mode_to_canonical("ODM") == "odm"


class TestNormalizeTransitousResponse:
    """Tests for Transitous response normalization."""

    def test_point_duration(self) -> None:
        """Test duration fills point, min and max; fares are absent."""
        plan = normalize_transitous_response({"itineraries": [_itinerary(600)]}).plans[0]
        assert plan.duration_seconds == 600
        assert plan.duration_seconds_min == 600
        assert plan.duration_seconds_max == 600
        assert plan.fares_min is None
        assert plan.fares_max is None
        assert plan.currency is None
        assert plan.start_time == "2025-01-08T00:00:00Z"

    def test_fares_absent_in_json(self) -> None:
        """Test fare keys are omitted, not zero, in the serialized plan."""
        data = json.loads(
            normalize_transitous_response({"itineraries": [_itinerary(600)]}).to_json()
        )
        plan = data["plans"][0]
        assert "fares_min" not in plan
        assert "fares_max" not in plan
        assert "currency" not in plan
        assert "fare" not in plan["legs"][1]["route_options"][0]

    def test_legs_in_order(self) -> None:
        """Test walk then transit legs keep upstream order."""
        legs = normalize_transitous_response({"itineraries": [_itinerary()]}).plans[0].legs
        assert len(legs) == 2
        assert isinstance(legs[0], WalkLeg)
        assert isinstance(legs[1], TransitLeg)

    def test_walk_leg(self) -> None:
        """Test WALK legs map to street walks with places."""
        leg = normalize_transitous_leg(_walk_leg())
        assert leg.walk_type == "street"
        assert leg.duration_seconds == 300
        assert leg.distance_meters == 420.0
        assert leg.from_place.address == "START"
        assert leg.from_place.id is None
        assert leg.from_place.location.lat == 35.6812
        assert leg.to_place.id == "jp_tokyo_1"

    @pytest.mark.parametrize("mode", ["BIKE", "CAR", "RENTAL"])
    def test_other_street_modes(self, mode: str) -> None:
        """Test BIKE/CAR/RENTAL become walk legs with a lower-cased sub-type."""
        leg = normalize_transitous_leg(_walk_leg(mode))
        assert isinstance(leg, WalkLeg)
        assert leg.walk_type == mode.lower()

    def test_transit_leg(self) -> None:
        """Test transit legs carry exactly one route option."""
        leg = normalize_transitous_leg(_rail_leg())
        assert isinstance(leg, TransitLeg)
        assert len(leg.route_options) == 1

        option = leg.route_options[0]
        assert option.route_id == "20250108_JY_123"
        assert option.route_name == "Yamanote Line"
        assert option.route_short_name == "JY"
        assert option.headsign == "Shinagawa"
        assert option.mode == "mtr"
        assert option.duration_seconds == 900
        assert option.start_time == "2025-01-08T00:05:00Z"
        assert option.fare is None
        assert option.from_stop.id == "jp_tokyo_1"
        assert option.from_stop.stop_name == "Tokyo"
        assert option.from_stop.platform == "3"
        assert option.to_stop.location.lat == 35.6285

    def test_route_name_fallback(self) -> None:
        """Test route name falls back from long name to short name to display name."""
        leg = _rail_leg()
        leg["routeLongName"] = ""
        assert normalize_transitous_leg(leg).route_options[0].route_name == "JY"

        del leg["routeShortName"]
        assert normalize_transitous_leg(leg).route_options[0].route_name == "JY Yamanote"

        del leg["displayName"]
        assert normalize_transitous_leg(leg).route_options[0].route_name is None

    def test_unknown_mode_is_transit(self) -> None:
        """Test unrecognized mode codes are transit with a lower-cased mode."""
        leg = _rail_leg()
        leg["mode"] = "FOOBAR"
        result = normalize_transitous_leg(leg)
        assert isinstance(result, TransitLeg)
        assert result.route_options[0].mode == "foobar"

    def test_unreadable_legs_fall_back(self) -> None:
        """Test legs without a mode become unknown legs; non-objects are dropped."""
        itinerary = _itinerary()
        itinerary["legs"] = [None, {"duration": 5}, _walk_leg(), "BUS"]
        legs = normalize_transitous_response({"itineraries": [itinerary]}).plans[0].legs
        assert len(legs) == 2
        assert legs[0] == UnknownLeg(type="unknown", duration_seconds=5)
        assert isinstance(legs[1], WalkLeg)

    def test_malformed_street_leg_keeps_mode_tag(self) -> None:
        """Test a street leg with an unreadable field falls back under its mode tag."""
        leg = _walk_leg()
        leg["distance"] = "far"
        result = normalize_transitous_leg(leg)
        assert result == UnknownLeg(type="WALK", duration_seconds=300)

    def test_fallback_drops_unreadable_duration(self) -> None:
        """Test the fallback leg leaves out a duration it cannot read."""
        result = normalize_transitous_leg({"duration": "soon"})
        assert result == UnknownLeg(type="unknown")

    def test_fractional_duration_kept(self) -> None:
        """Test a fractional itinerary duration keeps the itinerary."""
        data = {"itineraries": [{"duration": 600.5, "legs": []}]}
        plans = normalize_transitous_response(data).plans
        assert len(plans) == 1
        assert plans[0].duration_seconds == 600.5
        assert plans[0].duration_seconds_min == 600.5
        assert plans[0].duration_seconds_max == 600.5
        assert plans[0].legs == []

    def test_max_results_truncates(self) -> None:
        """Test max_results keeps the first N itineraries in order."""
        data = {"itineraries": [_itinerary(duration=100 * i) for i in range(1, 6)]}
        result = normalize_transitous_response(data, max_results=2)
        assert [plan.duration_seconds for plan in result.plans] == [100, 200]

    def test_no_cap_keeps_all(self) -> None:
        """Test all itineraries are kept without a cap."""
        data = {"itineraries": [_itinerary(duration=100 * i) for i in range(1, 6)]}
        assert len(normalize_transitous_response(data).plans) == 5

    def test_empty_and_malformed(self) -> None:
        """Test missing or non-list itineraries give an empty plan list."""
        assert normalize_transitous_response({}).plans == []
        assert normalize_transitous_response(None).plans == []
        assert normalize_transitous_response({"itineraries": {}}).plans == []
        assert normalize_transitous_response({"itineraries": [None, 1]}).plans == []

"""Tests for haversine distance, bearings, legs and hull-speed ETA."""

import pytest

from src.routes.planner import (
    RoutePlanner,
    Waypoint,
    eta_hours,
    haversine_nm,
    initial_bearing,
    legs,
    total_distance_nm,
    validate_coordinate,
)
from src.errors import DomainError, InvalidQueryError

SAN_FRANCISCO = (37.8060, -122.4659)
SAUSALITO = (37.8591, -122.4853)
BERKELEY = (37.8659, -122.3114)


# ============================================================================
# Distance
# ============================================================================

class TestHaversine:

    def test_sf_to_sausalito(self):
        # 6.15 km on the 6371 km sphere
        assert haversine_nm(SAN_FRANCISCO, SAUSALITO) == pytest.approx(3.32, abs=0.02)

    def test_one_degree_of_latitude(self):
        # 111.19 km
        assert haversine_nm((0, 0), (1, 0)) == pytest.approx(60.04, abs=0.01)

    def test_symmetric(self):
        assert haversine_nm(SAUSALITO, BERKELEY) == pytest.approx(haversine_nm(BERKELEY, SAUSALITO))

    def test_same_point(self):
        assert haversine_nm(SAUSALITO, SAUSALITO) == 0.0

    def test_antipodal_points(self):
        half_circumference_nm = 3.141592653589793 * 6371.0 * 0.539957
        assert haversine_nm((0, 0), (0, 180)) == pytest.approx(half_circumference_nm)

    def test_accepts_waypoints(self):
        assert haversine_nm(Waypoint(*SAN_FRANCISCO), Waypoint(*SAUSALITO)) == \
            pytest.approx(haversine_nm(SAN_FRANCISCO, SAUSALITO))


class TestTotalDistance:

    def test_empty_and_single(self):
        assert total_distance_nm([]) == 0.0
        assert total_distance_nm([SAN_FRANCISCO]) == 0.0

    def test_sum_of_legs(self):
        route = [SAN_FRANCISCO, SAUSALITO, BERKELEY]
        expected = haversine_nm(SAN_FRANCISCO, SAUSALITO) + haversine_nm(SAUSALITO, BERKELEY)
        assert total_distance_nm(route) == pytest.approx(expected)

    def test_order_matters_for_legs_only(self):
        forward = total_distance_nm([SAN_FRANCISCO, SAUSALITO, BERKELEY])
        backward = total_distance_nm([BERKELEY, SAUSALITO, SAN_FRANCISCO])
        assert forward == pytest.approx(backward)


class TestBearingAndLegs:

    def test_due_north(self):
        assert initial_bearing((0, 0), (1, 0)) == pytest.approx(0.0)

    def test_due_east(self):
        assert initial_bearing((0, 0), (0, 1)) == pytest.approx(90.0)

    def test_range(self):
        assert 0 <= initial_bearing(SAUSALITO, SAN_FRANCISCO) < 360

    def test_legs(self):
        route_legs = legs([SAN_FRANCISCO, SAUSALITO, BERKELEY])
        assert len(route_legs) == 2
        assert route_legs[0].from_wp == Waypoint(*SAN_FRANCISCO)
        assert route_legs[1].to_wp == Waypoint(*BERKELEY)

    def test_no_legs_below_two_points(self):
        assert legs([SAN_FRANCISCO]) == []


# ============================================================================
# ETA
# ============================================================================

class TestEta:

    def test_undefined_below_two_points(self):
        assert eta_hours([], "30ft") is None
        assert eta_hours([SAN_FRANCISCO], "30ft") is None

    def test_distance_over_hull_speed(self):
        route = [SAN_FRANCISCO, SAUSALITO]
        assert eta_hours(route, "30ft") == pytest.approx(total_distance_nm(route) / 7.3)

    def test_bigger_boat_is_faster(self):
        route = [SAN_FRANCISCO, BERKELEY]
        assert eta_hours(route, "50ft") < eta_hours(route, "20ft")

    def test_unknown_class(self):
        with pytest.raises(DomainError):
            eta_hours([SAN_FRANCISCO, SAUSALITO], "70ft")

    def test_unknown_class_ignored_below_two_points(self):
        assert eta_hours([SAN_FRANCISCO], "70ft") is None


# ============================================================================
# Validation and planner
# ============================================================================

class TestValidation:

    @pytest.mark.parametrize("lat,lon", [(90, 180), (-90, -180), (0, 0)])
    def test_valid(self, lat, lon):
        validate_coordinate(lat, lon)

    @pytest.mark.parametrize("lat,lon", [(91, 0), (-90.5, 0), (0, 181), (0, -180.1)])
    def test_out_of_range(self, lat, lon):
        with pytest.raises(InvalidQueryError):
            validate_coordinate(lat, lon)

    def test_nan_rejected(self):
        with pytest.raises(InvalidQueryError) as exc_info:
            validate_coordinate(float("nan"), 0)
        assert "lat" in exc_info.value.details

    def test_reports_both_fields(self):
        with pytest.raises(InvalidQueryError) as exc_info:
            validate_coordinate(100, 200)
        assert set(exc_info.value.details) == {"lat", "lon"}


class TestRoutePlanner:

    def test_append_and_totals(self):
        planner = RoutePlanner()
        assert planner.total_distance_nm() == 0.0
        assert planner.eta_hours("30ft") is None

        planner.append(*SAN_FRANCISCO)
        planner.append(*SAUSALITO)
        assert len(planner) == 2
        assert planner.total_distance_nm() == pytest.approx(3.32, abs=0.02)
        assert planner.eta_hours("30ft") == pytest.approx(planner.total_distance_nm() / 7.3)

    def test_append_validates(self):
        planner = RoutePlanner()
        with pytest.raises(InvalidQueryError):
            planner.append(95, 0)
        assert len(planner) == 0

    def test_initial_waypoints_validated(self):
        with pytest.raises(InvalidQueryError):
            RoutePlanner([SAN_FRANCISCO, (0, 200)])

    def test_waypoints_is_a_copy(self):
        planner = RoutePlanner([SAN_FRANCISCO])
        planner.waypoints.append(Waypoint(*SAUSALITO))
        assert len(planner) == 1

    def test_clear(self):
        planner = RoutePlanner([SAN_FRANCISCO, SAUSALITO])
        planner.clear()
        assert len(planner) == 0
        assert planner.legs() == []

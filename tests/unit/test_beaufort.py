"""Tests for Beaufort classification, gauge projections and the scale table."""

import math

import pytest

from src.conditions.beaufort import (
    classify,
    compass_point,
    describe_wind,
    gauge_position,
    wave_height_for,
)
from src.data.beaufort_scale import BEAUFORT_SCALE, BeaufortBand, validate_scale
from src.errors import DomainError


class TestScaleTable:

    def test_thirteen_forces(self):
        assert [band.force for band in BEAUFORT_SCALE] == list(range(13))

    def test_contiguous(self):
        for lower, upper in zip(BEAUFORT_SCALE, BEAUFORT_SCALE[1:]):
            assert upper.min_kts == lower.max_kts

    def test_last_band_unbounded(self):
        assert math.isinf(BEAUFORT_SCALE[-1].max_kts)
        assert BEAUFORT_SCALE[-1].to_dict()["max_kts"] is None

    def test_validate_rejects_gap(self):
        broken = (
            BeaufortBand(0, "Calm", 0, 1, "0 ft", "#fff", "#000"),
            BeaufortBand(1, "Light Air", 2, math.inf, "0-1 ft", "#fff", "#000"),
        )
        with pytest.raises(ValueError):
            validate_scale(broken)

    def test_validate_rejects_bounded_top(self):
        with pytest.raises(ValueError):
            validate_scale((BeaufortBand(0, "Calm", 0, 1, "0 ft", "#fff", "#000"),))


class TestClassify:

    @pytest.mark.parametrize("speed,force", [
        (0, 0),
        (1, 0),
        (1.01, 1),
        (3, 1),
        (3.01, 2),
        (6, 2),
        (10, 3),
        (10.5, 4),
        (16, 4),
        (21, 5),
        (27, 6),
        (33, 7),
        (40, 8),
        (47, 9),
        (55, 10),
        (63, 11),
        (63.5, 12),
        (150, 12),
    ])
    def test_bands(self, speed, force):
        assert classify(speed).force == force

    def test_missing_is_calm(self):
        assert classify(None).force == 0
        assert classify(float("nan")).force == 0

    def test_negative_is_calm(self):
        assert classify(-5).label == "Calm"

    def test_monotonic(self):
        speeds = [i * 0.25 for i in range(300)]
        forces = [classify(s).force for s in speeds]
        assert forces == sorted(forces)

    def test_wave_height(self):
        assert wave_height_for(8) == "2-4 ft"
        assert wave_height_for(None) == "0 ft"


class TestGauge:

    def test_linear_midpoint(self):
        assert gauge_position(32, "linear") == pytest.approx(50.0)

    def test_linear_pinned_at_full_scale(self):
        assert gauge_position(64, "linear") == pytest.approx(100.0)
        assert gauge_position(120, "linear") == pytest.approx(100.0)

    def test_full_scale_sits_above_force_12_threshold(self):
        assert classify(63.5).force == 12
        assert gauge_position(63.5, "linear") < 100.0
        assert gauge_position(63.5, "log") < 100.0
        assert gauge_position(64, "linear") == pytest.approx(100.0)

    def test_log_full_scale(self):
        assert gauge_position(64, "log") == pytest.approx(100.0)
        assert gauge_position(500, "log") == pytest.approx(100.0)

    def test_log_spreads_light_winds(self):
        assert gauge_position(10, "log") > gauge_position(10, "linear")

    @pytest.mark.parametrize("scale", ["linear", "log"])
    def test_zero_missing_and_negative(self, scale):
        assert gauge_position(0, scale) == 0.0
        assert gauge_position(None, scale) == 0.0
        assert gauge_position(-3, scale) == 0.0

    @pytest.mark.parametrize("scale", ["linear", "log"])
    def test_within_bounds_and_monotonic(self, scale):
        positions = [gauge_position(i * 0.5, scale) for i in range(200)]
        assert all(0 <= p <= 100 for p in positions)
        assert positions == sorted(positions)

    def test_unknown_scale(self):
        with pytest.raises(DomainError):
            gauge_position(10, "cubic")


class TestCompassAndDescribe:

    @pytest.mark.parametrize("deg,point", [
        (0, "N"), (11, "N"), (12, "NNE"), (45, "NE"), (180, "S"),
        (270, "W"), (348, "NNW"), (355, "N"), (360, "N"),
    ])
    def test_compass_point(self, deg, point):
        assert compass_point(deg) == point

    def test_compass_missing(self):
        assert compass_point(None) is None

    def test_describe_wind(self):
        wind = describe_wind(14.0, 22.0, 270.0, scale="linear")
        assert wind["force"] == 4
        assert wind["label"] == "Moderate Breeze"
        assert wind["gust_force"] == 6
        assert wind["compass"] == "W"
        assert wind["gauge"]["speed"] == pytest.approx(14 / 64 * 100)
        assert wind["gauge"]["gust"] == pytest.approx(22 / 64 * 100)

    def test_describe_wind_without_gust_or_direction(self):
        wind = describe_wind(5.0)
        assert wind["gust_force"] is None
        assert wind["compass"] is None
        assert wind["gauge"]["gust"] is None

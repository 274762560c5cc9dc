"""Unit tests for the Haversine distance calculator."""

import math
import random

import pytest

from src.domain.distance import EARTH_RADIUS_KM, calculate_distance_km

MAX_DISTANCE_KM = 20015.09  # half the circumference at the fixed radius


class TestCalculateDistance:
    def test_same_point_is_zero(self):
        assert calculate_distance_km(19.0896, 72.8656, 19.0896, 72.8656) == 0.0

    @pytest.mark.parametrize(
        "point", [(0.0, 0.0), (90.0, 0.0), (-90.0, 180.0), (-33.8688, 151.2093)]
    )
    def test_identity_anywhere(self, point):
        assert calculate_distance_km(*point, *point) == 0.0

    def test_one_degree_longitude_at_equator(self):
        assert calculate_distance_km(0, 0, 0, 1) == 111.19

    def test_new_york_to_london(self):
        d = calculate_distance_km(40.7128, -74.0060, 51.5074, -0.1278)
        assert 5570.22 <= d <= 5570.25

    def test_antipodal_points(self):
        assert calculate_distance_km(0, 0, 0, 180) == MAX_DISTANCE_KM

    def test_pole_to_pole(self):
        assert calculate_distance_km(90, 0, -90, 0) == MAX_DISTANCE_KM

    def test_symmetric(self):
        rng = random.Random(42)
        for _ in range(500):
            a = (rng.uniform(-90, 90), rng.uniform(-180, 180))
            b = (rng.uniform(-90, 90), rng.uniform(-180, 180))
            assert calculate_distance_km(*a, *b) == calculate_distance_km(*b, *a)

    def test_range_and_precision(self):
        rng = random.Random(7)
        for _ in range(500):
            d = calculate_distance_km(
                rng.uniform(-90, 90), rng.uniform(-180, 180),
                rng.uniform(-90, 90), rng.uniform(-180, 180),
            )
            assert 0.0 <= d <= MAX_DISTANCE_KM
            assert round(d, 2) == d

    def test_returns_float_not_string(self):
        assert isinstance(calculate_distance_km(19.0, 72.0, 20.0, 73.0), float)

    def test_short_hop_rounds_to_two_decimals(self):
        # ~55 m apart
        assert calculate_distance_km(12.9719, 77.6412, 12.9724, 77.6412) == 0.06

    def test_out_of_range_input_still_defined(self):
        d = calculate_distance_km(100.0, 200.0, -100.0, -200.0)
        assert not math.isnan(d)
        assert 0.0 <= d <= MAX_DISTANCE_KM

    def test_nan_propagates(self):
        assert math.isnan(calculate_distance_km(float("nan"), 0, 0, 0))

    def test_radius_constant(self):
        assert EARTH_RADIUS_KM == 6371.0

    @pytest.mark.parametrize("bad", [float("inf"), float("-inf")])
    def test_infinite_input_returns_nan(self, bad):
        assert math.isnan(calculate_distance_km(0, bad, 0, 0))

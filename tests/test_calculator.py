import pytest

from app.footprint.calculator import compute, round2, points_for, travelled_km
from app.footprint.constants import TransportMode


def test_walking_is_zero_emission_and_max_points():
    assert compute(TransportMode.WALKING, 5, 2) == (0.0, 500)


def test_car_ten_km_single_trip():
    assert compute(TransportMode.CAR, 10, 1) == (2.3, 21)


def test_bus_ten_km_single_trip():
    # 50 / (0.5 + 0.1) = 83.33
    assert compute(TransportMode.BUS, 10, 1) == (0.5, 83)


@pytest.mark.parametrize("mode", list(TransportMode))
def test_zero_distance_scores_ceiling(mode):
    assert compute(mode, 0, 1) == (0.0, 500)


@pytest.mark.parametrize("mode", [TransportMode.WALKING, TransportMode.BICYCLE])
def test_zero_emission_modes_any_distance(mode):
    assert compute(mode, 42.5, 7) == (0.0, 500)


def test_accepts_plain_string_mode():
    assert compute("EV", 20, 2) == (2.0, 24)


def test_emissions_scale_with_trips():
    one, _ = compute(TransportMode.BIKE, 12, 1)
    three, _ = compute(TransportMode.BIKE, 12, 3)
    assert one == 1.32
    assert three == 3.96


def test_points_decay_towards_zero_but_never_negative():
    assert points_for(1000.0) == 0
    assert points_for(0.15) == 200
    assert points_for(10.0) < points_for(1.0) < points_for(0.1)


def test_round2_is_half_up():
    assert round2(0.125) == 0.13
    assert round2(2.3000000000000003) == 2.3


def test_travelled_km():
    assert travelled_km(2.5, 4) == 10.0

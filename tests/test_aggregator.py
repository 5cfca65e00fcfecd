from datetime import date, timedelta

from app.auth.models import User
from app.footprint.aggregator import apply_daily_log, next_streak, streak_ending_at
from app.footprint.constants import TransportMode
from app.footprint.models import DailyLog

TODAY = date(2026, 3, 10)


def _user(**overrides):
    values = dict(
        id=1, name="Ada", email="ada@campus.edu", password_hash="x",
        department="Engineering", campus="Main Campus",
        total_points=0, total_emissions=0.0, daily_points=0, daily_emissions=0.0,
        streak=0, walked_km=0.0, cycled_km=0.0, last_log_date=None,
    )
    values.update(overrides)
    return User(**values)


def _entry(mode, distance_km, trips, emissions, points, log_date=TODAY):
    return DailyLog(user_id=1, log_date=log_date, transport_mode=mode,
                    distance_km=distance_km, trips=trips, emissions=emissions, points=points)


def test_first_log_of_the_day_adds_full_values():
    user = _user(total_points=100, total_emissions=4.0)

    user, entry = apply_daily_log(user, None, TransportMode.CAR, 10, 1, TODAY)

    assert entry.log_date == TODAY
    assert entry.user_id == 1
    assert (entry.emissions, entry.points) == (2.3, 21)
    assert user.total_emissions == 6.3
    assert user.total_points == 121
    assert user.daily_points == 21
    assert user.today_transport_mode == "Car"
    assert user.last_log_date == TODAY


def test_overwrite_adjusts_totals_by_difference():
    existing = _entry("Car", 10, 1, 2.3, 21)
    # Totals include other days too; those must be left intact
    user = _user(total_points=321, total_emissions=12.3, last_log_date=TODAY, streak=4)

    user, entry = apply_daily_log(user, existing, TransportMode.BUS, 10, 1, TODAY)

    assert entry is existing
    assert (entry.transport_mode, entry.emissions, entry.points) == ("Bus", 0.5, 83)
    assert user.total_emissions == 10.5   # -1.8
    assert user.total_points == 383       # +62
    assert user.streak == 4


def test_same_log_twice_is_a_no_op_on_totals():
    user = _user()
    user, entry = apply_daily_log(user, None, TransportMode.BIKE, 7, 2, TODAY)
    totals = (user.total_points, user.total_emissions)

    user, entry = apply_daily_log(user, entry, TransportMode.BIKE, 7, 2, TODAY)

    assert (user.total_points, user.total_emissions) == totals


def test_entry_replaced_wholesale():
    existing = _entry("Car", 25, 4, 23.0, 2)
    user = _user(total_points=2, total_emissions=23.0, last_log_date=TODAY, streak=1)

    user, entry = apply_daily_log(user, existing, TransportMode.WALKING, 1.5, 2, TODAY)

    assert (entry.transport_mode, entry.distance_km, entry.trips) == ("Walking", 1.5, 2)
    assert (entry.emissions, entry.points) == (0.0, 500)
    assert user.total_emissions == 0.0
    assert user.total_points == 500


def test_milestones_follow_the_entry_delta():
    user = _user(walked_km=20.0, cycled_km=5.0)
    user, entry = apply_daily_log(user, None, TransportMode.WALKING, 2.5, 2, TODAY)
    assert user.walked_km == 25.0

    user, entry = apply_daily_log(user, entry, TransportMode.BICYCLE, 4, 2, TODAY)
    assert user.walked_km == 20.0
    assert user.cycled_km == 13.0

    user, entry = apply_daily_log(user, entry, TransportMode.CAR, 4, 2, TODAY)
    assert (user.walked_km, user.cycled_km) == (20.0, 5.0)


def test_streak_grows_on_consecutive_days():
    user = _user(streak=3, last_log_date=TODAY - timedelta(days=1))
    user, _ = apply_daily_log(user, None, TransportMode.BUS, 3, 2, TODAY)
    assert user.streak == 4


def test_next_streak_rules():
    assert next_streak(0, None, TODAY) == 1
    assert next_streak(5, TODAY, TODAY) == 5
    assert next_streak(5, TODAY - timedelta(days=1), TODAY) == 6
    assert next_streak(5, TODAY - timedelta(days=2), TODAY) == 1


def test_correcting_an_earlier_day_keeps_latest_day_and_streak():
    day1, day2 = TODAY - timedelta(days=1), TODAY
    user = _user()
    user, day1_entry = apply_daily_log(user, None, TransportMode.CAR, 10, 1, day1)
    user, _ = apply_daily_log(user, None, TransportMode.WALKING, 1, 2, day2)
    assert (user.total_points, user.streak) == (521, 2)

    user, day1_entry = apply_daily_log(user, day1_entry, TransportMode.BUS, 10, 1, day1)

    assert day1_entry.points == 83
    assert user.total_points == 583       # +62 from the corrected day
    assert user.total_emissions == 0.5
    assert user.last_log_date == day2
    assert (user.daily_points, user.daily_emissions, user.today_transport_mode) == (500, 0.0, "Walking")
    assert user.streak == 2

    user, _ = apply_daily_log(user, None, TransportMode.BUS, 3, 2, day2 + timedelta(days=1))
    assert user.streak == 3


def test_streak_ending_at_latest_log():
    assert streak_ending_at([]) == 0
    assert streak_ending_at([TODAY]) == 1
    assert streak_ending_at([TODAY - timedelta(days=2), TODAY, TODAY - timedelta(days=1)]) == 3
    assert streak_ending_at([TODAY - timedelta(days=5), TODAY - timedelta(days=1), TODAY]) == 2

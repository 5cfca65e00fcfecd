"""
Daily log aggregation.

A user has at most one DailyLog per calendar date. Logging again on the same
date overwrites that entry, and the user's running totals move by the
difference between the new and the old entry. Totals are never re-summed
here, so other days can't be double counted; reconciliation lives in
footprint.service.
"""
from datetime import date, timedelta

from app.auth.models import User
from app.footprint.calculator import compute, round2, travelled_km
from app.footprint.constants import TransportMode
from app.footprint.models import DailyLog


def next_streak(streak: int, last_log_date: date | None, log_date: date) -> int:
    """
    Streak after logging on *log_date*.
    Same day again: unchanged. Day after the last log: +1. Any gap: restart at 1.
    """
    if last_log_date is None:
        return 1
    if last_log_date >= log_date:
        return max(streak or 0, 1)
    if last_log_date == log_date - timedelta(days=1):
        return (streak or 0) + 1
    return 1


def streak_ending_at(log_dates: list[date]) -> int:
    """Consecutive logged days ending at the latest of *log_dates*."""
    days = sorted(set(log_dates), reverse=True)
    if not days:
        return 0
    streak = 1
    for previous, current in zip(days, days[1:]):
        if previous - current != timedelta(days=1):
            break
        streak += 1
    return streak


def milestone_km(mode: str | None, distance_km: float, trips: int) -> tuple[float, float]:
    """(walked, cycled) km contributed by one entry."""
    if mode == TransportMode.WALKING.value:
        return travelled_km(distance_km, trips), 0.0
    if mode == TransportMode.BICYCLE.value:
        return 0.0, travelled_km(distance_km, trips)
    return 0.0, 0.0


def apply_daily_log(
    user: User,
    existing: DailyLog | None,
    mode: TransportMode,
    distance_km: float,
    trips: int,
    log_date: date,
) -> tuple[User, DailyLog]:
    """
    Merge one day's transport into *user* and return (user, entry).

    *existing* is the user's entry for *log_date* or None. Both objects are
    mutated in memory only; the caller owns persistence.
    """
    mode = TransportMode(mode)
    emissions, points = compute(mode, distance_km, trips)

    if existing is not None:
        emissions_diff = emissions - (existing.emissions or 0.0)
        points_diff = points - (existing.points or 0)
        old_walked, old_cycled = milestone_km(existing.transport_mode, existing.distance_km or 0.0, existing.trips or 0)
        entry = existing
    else:
        emissions_diff = emissions
        points_diff = points
        old_walked, old_cycled = 0.0, 0.0
        entry = DailyLog(user_id=user.id, log_date=log_date)

    # Replace the entry wholesale
    entry.transport_mode = mode.value
    entry.distance_km = distance_km
    entry.trips = trips
    entry.emissions = emissions
    entry.points = points

    new_walked, new_cycled = milestone_km(mode.value, distance_km, trips)

    user.total_emissions = round2((user.total_emissions or 0.0) + emissions_diff)
    user.total_points = (user.total_points or 0) + points_diff
    user.walked_km = round2((user.walked_km or 0.0) + new_walked - old_walked)
    user.cycled_km = round2((user.cycled_km or 0.0) + new_cycled - old_cycled)

    # Correcting an older day only moves the totals; the latest-day figures
    # and the streak belong to last_log_date
    if user.last_log_date is None or log_date >= user.last_log_date:
        user.streak = next_streak(user.streak, user.last_log_date, log_date)
        user.daily_emissions = emissions
        user.daily_points = points
        user.today_transport_mode = mode.value
        user.last_log_date = log_date

    return user, entry


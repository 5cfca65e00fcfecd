"""
Persistence around the aggregator.

log_transport() writes the user profile, the day's entry and the
leaderboard projection in ONE commit. If the commit fails nothing is kept
(rollback) and the error goes to the caller, who treats the log as not
committed and lets the user resubmit. No retries here.
"""
from datetime import date, timedelta

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.auth.models import User
from app.footprint.aggregator import apply_daily_log, milestone_km, streak_ending_at
from app.footprint.calculator import round2
from app.footprint.constants import TransportMode
from app.footprint.models import DailyLog
from app.leaderboard.models import LeaderboardEntry


def get_log_for_date(db: Session, user_id: int, log_date: date) -> DailyLog | None:
    return db.query(DailyLog).filter(
        DailyLog.user_id == user_id,
        DailyLog.log_date == log_date,
    ).first()


def sync_leaderboard_entry(db: Session, user: User) -> LeaderboardEntry:
    """Write the user's current standing into their leaderboard row (no commit)."""
    entry = db.get(LeaderboardEntry, user.id)
    if entry is None:
        entry = LeaderboardEntry(user_id=user.id)
        db.add(entry)
    entry.name = user.name
    entry.department = user.department
    entry.campus = user.campus
    entry.total_points = user.total_points or 0
    entry.daily_points = user.daily_points or 0
    return entry


def log_transport(
    db: Session,
    user: User,
    mode: TransportMode,
    distance_km: float,
    trips: int,
    log_date: date | None = None,
) -> DailyLog:
    """Record (or overwrite) the user's transport for *log_date* (default today)."""
    log_date = log_date or date.today()
    existing = get_log_for_date(db, user.id, log_date)
    old_points = existing.points if existing else 0

    try:
        user, entry = apply_daily_log(user, existing, mode, distance_km, trips, log_date)
        if existing is None:
            db.add(entry)
        sync_leaderboard_entry(db, user)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        print(f"[LOG] commit failed user={user.id} date={log_date}: {exc!r}", flush=True)
        raise

    db.refresh(entry)
    print(f"[LOG] user={user.id} date={log_date} mode={entry.transport_mode} "
          f"emissions={entry.emissions} points={entry.points} "
          f"points_diff={entry.points - old_points} total={user.total_points} "
          f"{'overwrite' if existing else 'insert'}", flush=True)
    return entry


def get_history(db: Session, user_id: int, days: int = 30, today: date | None = None) -> list[DailyLog]:
    """Logs of the last *days* days including today, oldest first."""
    today = today or date.today()
    since = today - timedelta(days=days - 1)
    return (
        db.query(DailyLog)
        .filter(DailyLog.user_id == user_id, DailyLog.log_date >= since, DailyLog.log_date <= today)
        .order_by(DailyLog.log_date.asc())
        .all()
    )


# ---------------------------------------------------------------------------
# RECONCILIATION (profile and leaderboard rebuilt from daily_logs)
# ---------------------------------------------------------------------------

_PROFILE_FIELDS = (
    "total_points", "total_emissions", "walked_km", "cycled_km", "streak",
    "daily_points", "daily_emissions", "today_transport_mode", "last_log_date",
)


def rebuild_profile(logs: list[DailyLog]) -> dict:
    """Every derived profile field, computed from the user's full set of daily logs."""
    walked = cycled = 0.0
    for log in logs:
        log_walked, log_cycled = milestone_km(log.transport_mode, log.distance_km or 0.0, log.trips or 0)
        walked += log_walked
        cycled += log_cycled

    latest = max(logs, key=lambda log: log.log_date) if logs else None
    return {
        "total_points": sum(log.points or 0 for log in logs),
        "total_emissions": round2(sum(log.emissions or 0.0 for log in logs)),
        "walked_km": round2(walked),
        "cycled_km": round2(cycled),
        "streak": streak_ending_at([log.log_date for log in logs]),
        "daily_points": latest.points if latest else 0,
        "daily_emissions": latest.emissions if latest else 0.0,
        "today_transport_mode": latest.transport_mode if latest else None,
        "last_log_date": latest.log_date if latest else None,
    }


def reconcile_user(db: Session, user: User) -> bool:
    """
    Rebuild the profile's totals, milestones, streak and latest-day figures
    from daily_logs, then rewrite the leaderboard row.
    Returns True if anything was out of sync. Does not commit.
    """
    logs = db.query(DailyLog).filter(DailyLog.user_id == user.id).all()
    expected = rebuild_profile(logs)

    drifted = [field for field in _PROFILE_FIELDS if getattr(user, field) != expected[field]]
    for field in drifted:
        setattr(user, field, expected[field])

    current = db.get(LeaderboardEntry, user.id)
    if (
        current is None
        or current.total_points != user.total_points
        or current.daily_points != user.daily_points
        or current.department != user.department
        or current.name != user.name
        or current.campus != user.campus
    ):
        drifted.append("leaderboard")
    sync_leaderboard_entry(db, user)

    if drifted:
        print(f"[RECONCILE] user={user.id} fixed={','.join(drifted)} "
              f"total_points={user.total_points} total_emissions={user.total_emissions}", flush=True)
    return bool(drifted)


def reconcile_all(db: Session) -> int:
    """Reconcile every user; returns how many were corrected."""
    corrected = 0
    try:
        for user in db.query(User).order_by(User.id.asc()).all():
            if reconcile_user(db, user):
                corrected += 1
        # Leaderboard rows whose user no longer exists
        orphans = (
            db.query(LeaderboardEntry)
            .filter(~LeaderboardEntry.user_id.in_(db.query(User.id)))
            .all()
        )
        for orphan in orphans:
            db.delete(orphan)
            corrected += 1
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    print(f"[RECONCILE] done corrected={corrected}", flush=True)
    return corrected

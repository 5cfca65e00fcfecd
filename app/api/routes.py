"""
API routes for the user's dashboard, onboarding and recommendations.
"""
from datetime import date

from fastapi import APIRouter, Depends, Form
from sqlalchemy.orm import Session

from app.ai.recommendations import get_recommendations
from app.auth.models import User
from app.core.deps import get_current_user
from app.db.session import get_db
from app.footprint.calculator import compute
from app.footprint.constants import (
    TransportMode, DEPARTMENTS, CAMPUSES, EMISSION_FACTORS, MAX_DISTANCE_KM, MAX_TRIPS, MAX_ROUND_TRIPS,
)
from app.footprint.service import get_log_for_date
from app.leaderboard.ranker import compare_emissions

router = APIRouter(prefix="/api", tags=["api"])


def _commute_baseline(user: User) -> dict | None:
    """Onboarding habit expressed in daily-log units: trips = 2 x round trips."""
    if not user.commute_mode:
        return None
    trips = 2 * (user.commute_round_trips or 0)
    emissions, points = compute(user.commute_mode, user.commute_distance_km or 0.0, trips)
    return {
        "mode": user.commute_mode,
        "distance_km": user.commute_distance_km,
        "round_trips": user.commute_round_trips,
        "trips": trips,
        "emissions": emissions,
        "points": points,
    }


@router.get("/options")
def get_options():
    """Choices offered by the signup and transport forms."""
    return {
        "transport_modes": [m.value for m in TransportMode],
        "emission_factors": {m.value: f for m, f in EMISSION_FACTORS.items()},
        "limits": {"distance_km": MAX_DISTANCE_KM, "trips": MAX_TRIPS, "round_trips": MAX_ROUND_TRIPS},
        "departments": DEPARTMENTS,
        "campuses": CAMPUSES,
    }


@router.get("/me/dashboard")
def get_dashboard(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    today = date.today()
    logged_today = user.last_log_date == today
    daily_emissions = user.daily_emissions if logged_today else 0.0
    daily_points = user.daily_points if logged_today else 0

    logged_today_profiles = db.query(User).filter(User.last_log_date == today).all()

    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "department": user.department,
        "campus": user.campus,
        "total_points": user.total_points,
        "total_emissions": user.total_emissions,
        "daily_points": daily_points,
        "daily_emissions": daily_emissions,
        "today_transport_mode": user.today_transport_mode if logged_today else None,
        "streak": user.streak,
        "milestones": {"walked": user.walked_km, "cycled": user.cycled_km},
        "commute_baseline": _commute_baseline(user),
        "comparison": compare_emissions(daily_emissions, logged_today_profiles, user.department),
    }


@router.post("/me/commute")
def set_commute(
    mode: TransportMode = Form(...),
    distance_km: float = Form(..., ge=0, le=MAX_DISTANCE_KM, allow_inf_nan=False,
                              description="Average one-way distance, km"),
    round_trips: int = Form(..., ge=0, le=MAX_ROUND_TRIPS, description="Round trips per day"),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Store the commute habit collected right after signup."""
    user.commute_mode = mode.value
    user.commute_distance_km = distance_km
    user.commute_round_trips = round_trips
    db.commit()
    db.refresh(user)
    print(f"[ONBOARDING] user={user.id} commute={mode.value} {distance_km}km x{round_trips}", flush=True)
    return {"commute_baseline": _commute_baseline(user)}


@router.get("/recommendations")
def get_my_recommendations(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """
    Suggestions for today's log. Independent of the log request itself;
    a failed model call still returns one fallback suggestion.
    """
    entry = get_log_for_date(db, user.id, date.today())
    if entry is None:
        return {"recommendations": [], "message": "Log today's transport to get suggestions."}

    context = {
        "mode": entry.transport_mode,
        "distance_km": entry.distance_km,
        "trips": entry.trips,
        "daily_emissions": entry.emissions,
        "total_points": user.total_points,
        "daily_points": entry.points,
    }
    return {"recommendations": get_recommendations(context)}

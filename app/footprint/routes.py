from fastapi import APIRouter, Depends, Form, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.auth.models import User
from app.core.deps import get_current_user
from app.db.session import get_db
from app.footprint.constants import TransportMode, MAX_DISTANCE_KM, MAX_TRIPS
from app.footprint.service import log_transport, get_history

router = APIRouter(prefix="/transport", tags=["transport"])


def _serialize_log(entry) -> dict:
    return {
        "date": entry.log_date.isoformat(),
        "mode": entry.transport_mode,
        "distance_km": entry.distance_km,
        "trips": entry.trips,
        "emissions": entry.emissions,
        "points": entry.points,
    }


# ======================================================
# LOG TODAY'S TRANSPORT
# ======================================================
@router.post("/log")
def submit_transport_log(
    mode: TransportMode = Form(...),
    distance_km: float = Form(..., ge=0, le=MAX_DISTANCE_KM, allow_inf_nan=False,
                              description="One-way distance of a trip, km"),
    trips: int = Form(..., ge=1, le=MAX_TRIPS, description="Number of one-way trips"),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """
    Create or overwrite today's entry. Totals move by (new - old).
    On a failed write nothing is committed and the client may resubmit.
    """
    try:
        entry = log_transport(db, user, mode, distance_km, trips)
    except SQLAlchemyError:
        raise HTTPException(
            status_code=503,
            detail="Your log could not be saved. Nothing was recorded, please submit again.",
        )

    return {
        "log": _serialize_log(entry),
        "total_points": user.total_points,
        "total_emissions": user.total_emissions,
        "streak": user.streak,
        "milestones": {"walked": user.walked_km, "cycled": user.cycled_km},
    }


# ======================================================
# HISTORY (chart data)
# ======================================================
@router.get("/history")
def transport_history(
    days: int = Query(30, ge=1, le=366),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    logs = get_history(db, user.id, days)
    return {"days": days, "history": [_serialize_log(entry) for entry in logs]}

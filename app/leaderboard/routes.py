from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.auth.models import User
from app.core.config import LEADERBOARD_LIMIT
from app.core.deps import get_current_user
from app.db.session import get_db
from app.leaderboard.models import LeaderboardEntry
from app.leaderboard.ranker import rank_department, rank_campus

router = APIRouter(prefix="/leaderboard", tags=["leaderboard"])


# ======================================================
# DEPARTMENT LEADERBOARD
# ======================================================
@router.get("/department")
def department_leaderboard(
    department: str | None = Query(None, description="Defaults to the viewer's department"),
    limit: int = Query(LEADERBOARD_LIMIT, ge=1, le=100),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    department = (department or user.department).strip()
    entries = db.query(LeaderboardEntry).filter(LeaderboardEntry.department == department).all()
    ranked = rank_department(entries, department, viewer_id=user.id, limit=limit)
    print(f"[LEADERBOARD] department='{department}' entries={len(entries)} shown={len(ranked)}", flush=True)
    return {"department": department, "entries": ranked}


# ======================================================
# CAMPUS LEADERBOARD (departments)
# ======================================================
@router.get("/campus")
def campus_leaderboard(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    entries = db.query(LeaderboardEntry).all()
    return {"departments": rank_campus(entries)}

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.ai.openai_client import key_present, key_fingerprint, get_last_error
from app.db.base import describe_engine
from app.db.session import get_db
from app.footprint.service import reconcile_all

router = APIRouter(prefix="/debug", tags=["debug"])


@router.get("/diagnostics/db")
def db_diagnostics():
    """
    Lightweight DB diagnostics for debugging deployments.

    Only mounted when ENABLE_DEBUG_ROUTES=1. Never returns the password.
    """
    return describe_engine()


@router.get("/ai-status")
def ai_status():
    """Return OpenAI configuration status for debugging."""
    return {
        "key_present": key_present(),
        "key_fingerprint": key_fingerprint(),
        "last_error": get_last_error(),
    }


@router.post("/reconcile")
def reconcile(db: Session = Depends(get_db)):
    """Rebuild user totals and leaderboard rows from daily logs."""
    return {"corrected": reconcile_all(db)}

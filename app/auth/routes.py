from fastapi import APIRouter, Depends, HTTPException, Form, Response
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.auth.models import User
from app.core.security import hash_password, verify_password, issue_token, ACCESS_TOKEN_EXPIRE_MINUTES
from app.footprint.constants import DEPARTMENTS, CAMPUSES
from app.footprint.service import sync_leaderboard_entry

router = APIRouter(prefix="/auth", tags=["auth"])


# =========================
# SIGNUP
# =========================
@router.post("/signup")
def signup(
    name: str = Form(..., min_length=2),
    email: str = Form(...),
    password: str = Form(..., min_length=8),
    department: str = Form(...),
    campus: str = Form(...),
    db: Session = Depends(get_db),
):
    email = email.strip().lower()
    if "@" not in email:
        raise HTTPException(status_code=400, detail="Please enter a valid email")

    if department not in DEPARTMENTS:
        raise HTTPException(status_code=400, detail="Unknown department")

    if campus not in CAMPUSES:
        raise HTTPException(status_code=400, detail="Unknown campus")

    if db.query(User).filter(User.email == email).first():
        raise HTTPException(status_code=400, detail="Email already registered")

    user = User(
        name=name.strip(),
        email=email,
        password_hash=hash_password(password),
        department=department,
        campus=campus,
        total_points=0,
        total_emissions=0.0,
        daily_points=0,
        daily_emissions=0.0,
        streak=0,
        walked_km=0.0,
        cycled_km=0.0,
    )

    db.add(user)
    db.flush()
    # New users show up on the leaderboard with 0 points
    sync_leaderboard_entry(db, user)
    db.commit()
    db.refresh(user)

    print(f"[AUTH] signup user={user.id} department='{department}' campus='{campus}'", flush=True)
    return {"message": "Signup successful", "user_id": user.id}


# =========================
# LOGIN
# =========================
@router.post("/login")
def login(
    response: Response,
    email: str = Form(...),
    password: str = Form(...),
    db: Session = Depends(get_db),
):
    user = db.query(User).filter(User.email == email.strip().lower()).first()

    if not user or not verify_password(password, user.password_hash):
        print("[AUTH] Invalid credentials for:", email, flush=True)
        raise HTTPException(status_code=401, detail="Invalid credentials")

    token = issue_token(user.id)
    response.set_cookie(
        "access_token",
        token,
        httponly=True,
        samesite="lax",
        max_age=ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )
    print(f"[AUTH] Login successful for user={user.id}", flush=True)
    return {"access_token": token, "token_type": "bearer"}

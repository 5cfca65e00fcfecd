from datetime import datetime, timezone

from fastapi import Request, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.auth.models import User
from app.core.security import user_id_from_token


def _extract_token(request: Request) -> str | None:
    """Read the JWT from the access_token cookie, then the Authorization header."""
    token = request.cookies.get("access_token")
    if not token:
        token = request.headers.get("authorization")
    if not token:
        return None

    # Support both "Bearer <token>" and raw token values.
    if token.lower().startswith("bearer "):
        token = token[7:].strip()
    return token or None


def get_current_user(
    request: Request,
    db: Session = Depends(get_db)
) -> User:
    token = _extract_token(request)

    if not token:
        print(f"[AUTH] reject reason=missing_token path={request.url.path}", flush=True)
        raise HTTPException(status_code=401, detail="Not authenticated")

    user_id = user_id_from_token(token)
    if user_id is None:
        print(f"[AUTH] reject reason=invalid_token path={request.url.path}", flush=True)
        raise HTTPException(status_code=401, detail="Invalid token")

    user = db.get(User, user_id)

    if not user:
        print(f"[AUTH] reject reason=user_not_found user={user_id} path={request.url.path}", flush=True)
        raise HTTPException(status_code=401, detail="User not found")

    # Update last_active timestamp; a failure here must not block the request
    try:
        user.last_active = datetime.now(timezone.utc)
        db.commit()
    except SQLAlchemyError:
        db.rollback()

    return user

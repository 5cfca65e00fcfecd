"""
Password hashing and access tokens.

Tokens carry the user's numeric id as "sub"; deps.get_current_user resolves
it back to a User row.
"""
from datetime import datetime, timedelta, timezone
import hashlib
import hmac
import os

from jose import jwt, JWTError

_PBKDF2_ROUNDS = 100_000

ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = 60 * 24


def _load_secret_key() -> str:
    secret = os.getenv("SECRET_KEY", os.getenv("JWT_SECRET_KEY", ""))
    if secret:
        return secret
    if os.getenv("ENVIRONMENT", "").lower() == "production":
        raise RuntimeError("SECRET_KEY or JWT_SECRET_KEY env var is required in production")
    print("[AUTH] WARNING: no SECRET_KEY set, using the development key", flush=True)
    return "campus-carbon-dev-key-not-for-production"


SECRET_KEY = _load_secret_key()


def _pbkdf2(password: str, salt: bytes) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode(), salt, _PBKDF2_ROUNDS)


def hash_password(password: str) -> str:
    """Return "<salt hex>:<hash hex>"."""
    salt = os.urandom(16)
    return salt.hex() + ":" + _pbkdf2(password, salt).hex()


def verify_password(password: str, stored: str) -> bool:
    try:
        salt_hex, hash_hex = stored.split(":")
        salt, expected = bytes.fromhex(salt_hex), bytes.fromhex(hash_hex)
    except ValueError:
        return False
    return hmac.compare_digest(_pbkdf2(password, salt), expected)


def issue_token(user_id: int, expires_delta: timedelta | None = None) -> str:
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    return jwt.encode({"sub": str(user_id), "exp": expire}, SECRET_KEY, algorithm=ALGORITHM)


def user_id_from_token(token: str) -> int | None:
    """The user id a valid token was issued for, or None (expired, forged, malformed)."""
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError as e:
        print(f"[AUTH] token rejected: {type(e).__name__}", flush=True)
        return None

    subject = str(payload.get("sub") or "")
    return int(subject) if subject.isdigit() else None

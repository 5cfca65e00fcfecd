import os

from fastapi import FastAPI

from app.db.base import Base, engine
from app.auth.models import User  # noqa: F401  Import so create_all picks it up
from app.footprint.models import DailyLog  # noqa: F401
from app.leaderboard.models import LeaderboardEntry  # noqa: F401

from app.auth.routes import router as auth_router
from app.footprint.routes import router as transport_router
from app.leaderboard.routes import router as leaderboard_router
from app.api.routes import router as api_router
from app.web.debug_routes import router as debug_router
from app.ai.openai_client import log_startup as _ai_log_startup


app = FastAPI(title="CampusCarbon", version="0.1.0")

# Only expose debug routes (including diagnostics) when explicitly enabled.
if os.getenv("ENABLE_DEBUG_ROUTES", "0") == "1":
    app.include_router(debug_router)

# Create database tables (still useful in dev; in production prefer Alembic)
Base.metadata.create_all(bind=engine)

# Log OpenAI status once at startup
_ai_log_startup()

# Include routers
app.include_router(auth_router)
app.include_router(transport_router)
app.include_router(leaderboard_router)
app.include_router(api_router)


@app.get("/", include_in_schema=False)
def root():
    return {"message": "CampusCarbon API running", "docs": "/docs"}

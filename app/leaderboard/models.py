from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.sql import func

from app.db.base import Base


class LeaderboardEntry(Base):
    """
    Denormalized projection of a user's standing.

    Derived state: written in the same transaction as the user's totals and
    rebuildable from users at any time (see footprint.service.reconcile_all).
    """
    __tablename__ = "leaderboard_entries"

    user_id = Column(Integer, ForeignKey("users.id"), primary_key=True)

    name = Column(String, nullable=False)
    department = Column(String, nullable=False, index=True)
    campus = Column(String, nullable=False)

    total_points = Column(Integer, nullable=False, default=0)
    daily_points = Column(Integer, nullable=False, default=0)

    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

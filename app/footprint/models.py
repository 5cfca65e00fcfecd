from sqlalchemy import Column, Integer, String, Float, Date, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func

from app.db.base import Base


class DailyLog(Base):
    """
    One transport record per user per calendar date.
    emissions/points are always derived from (transport_mode, distance_km, trips).
    """
    __tablename__ = "daily_logs"

    id = Column(Integer, primary_key=True, index=True)

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    log_date = Column(Date, nullable=False)

    transport_mode = Column(String(16), nullable=False)
    distance_km = Column(Float, nullable=False, default=0.0)  # one-way, per trip
    trips = Column(Integer, nullable=False, default=1)

    emissions = Column(Float, nullable=False, default=0.0)  # kg CO2
    points = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        UniqueConstraint("user_id", "log_date", name="uq_daily_log_user_date"),
    )

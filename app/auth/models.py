from sqlalchemy import Column, Integer, String, Float, Date, DateTime
from sqlalchemy.sql import func

from app.db.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)

    password_hash = Column(String, nullable=False)

    department = Column(String, nullable=False, index=True)
    campus = Column(String, nullable=False)

    # Running totals: always the sum over every daily_logs row of this user
    total_points = Column(Integer, nullable=False, default=0)
    total_emissions = Column(Float, nullable=False, default=0.0)

    # Figures of the most recent daily log (stale once last_log_date is not today)
    daily_points = Column(Integer, nullable=False, default=0)
    daily_emissions = Column(Float, nullable=False, default=0.0)
    today_transport_mode = Column(String, nullable=True)
    last_log_date = Column(Date, nullable=True)

    streak = Column(Integer, nullable=False, default=0)

    # Lifetime milestones, in km
    walked_km = Column(Float, nullable=False, default=0.0)
    cycled_km = Column(Float, nullable=False, default=0.0)

    # Commute habit captured at onboarding (one-way km, round trips per day)
    commute_mode = Column(String, nullable=True)
    commute_distance_km = Column(Float, nullable=True)
    commute_round_trips = Column(Integer, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Track when user was last active (updated on every authenticated request)
    last_active = Column(DateTime(timezone=True), nullable=True)

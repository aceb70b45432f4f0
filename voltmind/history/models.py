from __future__ import annotations

from datetime import datetime

from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from voltmind.base.models import BaseDbModel, UTCDateTime


class Reading(BaseDbModel):
    """Saved snapshot of the dashboard: battery level plus its estimate."""

    __tablename__ = "readings"

    recorded_at: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)
    battery_percentage: Mapped[int] = mapped_column(Integer, nullable=False)
    estimated_range_km: Mapped[float] = mapped_column(Float, nullable=False)
    estimated_time_hours: Mapped[float] = mapped_column(Float, nullable=False)
    notes: Mapped[str | None] = mapped_column(String, nullable=True)
    latitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    longitude: Mapped[float | None] = mapped_column(Float, nullable=True)

from __future__ import annotations

from datetime import datetime
from typing import Any, cast

from sqlalchemy import CursorResult, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from voltmind.base.models import utcnow
from voltmind.estimation.models import Estimate
from voltmind.history.models import Reading


async def append_reading(
    session: AsyncSession,
    battery_percentage: int,
    estimate: Estimate,
    *,
    latitude: float | None = None,
    longitude: float | None = None,
    recorded_at: datetime | None = None,
) -> Reading:
    """Add a reading built from ``estimate``. Readings are never edited."""
    reading = Reading(
        recorded_at=recorded_at or utcnow(),
        battery_percentage=battery_percentage,
        estimated_range_km=estimate.range_km,
        estimated_time_hours=estimate.time_left_hours,
        notes=estimate.efficiency_note,
        latitude=latitude,
        longitude=longitude,
    )
    session.add(reading)
    await session.flush()
    return reading


async def list_readings(session: AsyncSession) -> list[Reading]:
    """Return all readings, newest first."""
    stmt = select(Reading).order_by(Reading.recorded_at.desc())
    return list((await session.execute(stmt)).scalars().all())


async def clear_readings(session: AsyncSession) -> int:
    """Delete every reading and return how many were removed."""
    result = cast(CursorResult[Any], await session.execute(delete(Reading)))
    return result.rowcount or 0

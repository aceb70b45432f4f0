from datetime import datetime, timedelta, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from voltmind.estimation.engine import fallback_estimate
from voltmind.estimation.models import Estimate
from voltmind.history.store import append_reading, clear_readings, list_readings

_ESTIMATE = Estimate(range_km=210.0, time_left_hours=2.3, efficiency_note="Smooth.")


class TestAppendReading:
    async def test_copies_estimate(self, db_session: AsyncSession) -> None:
        reading = await append_reading(
            db_session, 60, _ESTIMATE, latitude=52.52, longitude=13.40
        )

        assert reading.id is not None
        assert reading.battery_percentage == 60
        assert reading.estimated_range_km == 210.0
        assert reading.estimated_time_hours == 2.3
        assert reading.notes == "Smooth."
        assert reading.latitude == 52.52
        assert reading.longitude == 13.40
        assert reading.recorded_at.tzinfo is not None

    async def test_location_is_optional(self, db_session: AsyncSession) -> None:
        reading = await append_reading(db_session, 10, fallback_estimate(10))

        assert reading.latitude is None
        assert reading.longitude is None
        assert reading.notes == "AI unavailable, showing rough estimates."


class TestListReadings:
    async def test_newest_first(self, db_session: AsyncSession) -> None:
        start = datetime(2026, 3, 1, 8, 0, tzinfo=timezone.utc)
        for minutes, battery in [(0, 80), (20, 70), (10, 75)]:
            await append_reading(
                db_session,
                battery,
                _ESTIMATE,
                recorded_at=start + timedelta(minutes=minutes),
            )

        readings = await list_readings(db_session)

        assert [r.battery_percentage for r in readings] == [70, 75, 80]
        assert readings[0].recorded_at == start + timedelta(minutes=20)

    async def test_empty(self, db_session: AsyncSession) -> None:
        assert await list_readings(db_session) == []


class TestClearReadings:
    async def test_removes_everything(self, db_session: AsyncSession) -> None:
        await append_reading(db_session, 50, _ESTIMATE)
        await append_reading(db_session, 40, _ESTIMATE)

        removed = await clear_readings(db_session)

        assert removed == 2
        assert await list_readings(db_session) == []

from datetime import datetime
from typing import Self
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from pydantic import Field
from sqlalchemy.ext.asyncio import AsyncSession

from voltmind.base.dependencies import get_session
from voltmind.base.schemas import ApiModel
from voltmind.dashboard.context import Dashboard, get_dashboard
from voltmind.history.models import Reading
from voltmind.history.store import append_reading, clear_readings, list_readings

router = APIRouter(prefix="/history")


class ReadingCreate(ApiModel):
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)


class ReadingResponse(ApiModel):
    id: UUID
    timestamp: datetime
    battery_percentage: int
    estimated_range_km: float
    estimated_time_hours: float
    notes: str | None
    latitude: float | None
    longitude: float | None

    @classmethod
    def from_reading(cls, reading: Reading) -> Self:
        return cls(
            id=reading.id,
            timestamp=reading.recorded_at,
            battery_percentage=reading.battery_percentage,
            estimated_range_km=reading.estimated_range_km,
            estimated_time_hours=reading.estimated_time_hours,
            notes=reading.notes,
            latitude=reading.latitude,
            longitude=reading.longitude,
        )


@router.get("", response_model=list[ReadingResponse])
async def get_history(
    session: AsyncSession = Depends(get_session),
) -> list[ReadingResponse]:
    return [ReadingResponse.from_reading(r) for r in await list_readings(session)]


@router.post("", response_model=ReadingResponse, status_code=201)
async def save_reading(
    body: ReadingCreate,
    dashboard: Dashboard = Depends(get_dashboard),
    session: AsyncSession = Depends(get_session),
) -> ReadingResponse:
    state = dashboard.state
    if state.estimate is None:
        raise HTTPException(status_code=409, detail="No estimate to save yet")

    reading = await append_reading(
        session,
        state.battery_percentage,
        state.estimate,
        latitude=body.latitude,
        longitude=body.longitude,
    )
    return ReadingResponse.from_reading(reading)


@router.delete("", status_code=204)
async def clear_history(
    session: AsyncSession = Depends(get_session),
) -> None:
    await clear_readings(session)

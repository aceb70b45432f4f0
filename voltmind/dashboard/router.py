import dataclasses

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import Field

from voltmind.base.schemas import ApiModel
from voltmind.dashboard.context import Dashboard, get_dashboard
from voltmind.dashboard.state import make_timestamp_label
from voltmind.estimation.models import Estimate, EstimateSource
from voltmind.stations.models import StationResult, StationStatus

router = APIRouter()


class EstimateRequest(ApiModel):
    battery_percentage: int = Field(..., ge=0, le=100)
    timestamp_label: str | None = None


class EstimateResponse(ApiModel):
    range_km: float
    time_left_hours: float
    efficiency_note: str
    source: EstimateSource


class CurrentEstimateResponse(ApiModel):
    battery_percentage: int
    timestamp_label: str
    estimate: EstimateResponse


class StationResponse(ApiModel):
    name: str
    address: str
    rating: float | None
    open_now: bool | None
    status: StationStatus | None
    uri: str | None


class StationResultResponse(ApiModel):
    text: str
    stations: list[StationResponse]


class SimulationResponse(ApiModel):
    running: bool
    battery_percentage: int


@router.post("/estimates", response_model=EstimateResponse)
async def recalculate(
    body: EstimateRequest,
    dashboard: Dashboard = Depends(get_dashboard),
) -> Estimate:
    label = body.timestamp_label or make_timestamp_label()
    estimate = await dashboard.engine.estimate(body.battery_percentage, label)
    dashboard.state.publish(
        estimate,
        battery_percentage=body.battery_percentage,
        timestamp_label=label,
    )
    return estimate


@router.get("/estimates/current", response_model=CurrentEstimateResponse)
async def current_estimate(
    dashboard: Dashboard = Depends(get_dashboard),
) -> CurrentEstimateResponse:
    state = dashboard.state
    if state.estimate is None:
        raise HTTPException(status_code=404, detail="No estimate yet")
    return CurrentEstimateResponse(
        battery_percentage=state.battery_percentage,
        timestamp_label=state.timestamp_label,
        estimate=EstimateResponse.model_validate(dataclasses.asdict(state.estimate)),
    )


@router.get("/stations", response_model=StationResultResponse)
async def find_stations(
    latitude: float = Query(..., ge=-90, le=90),
    longitude: float = Query(..., ge=-180, le=180),
    dashboard: Dashboard = Depends(get_dashboard),
) -> StationResult:
    return await dashboard.reconciler.find_stations(latitude, longitude)


@router.post("/simulation/start", response_model=SimulationResponse)
async def start_simulation(
    dashboard: Dashboard = Depends(get_dashboard),
) -> SimulationResponse:
    dashboard.simulator.start()
    return _simulation_response(dashboard)


@router.post("/simulation/stop", response_model=SimulationResponse)
async def stop_simulation(
    dashboard: Dashboard = Depends(get_dashboard),
) -> SimulationResponse:
    dashboard.simulator.stop()
    return _simulation_response(dashboard)


def _simulation_response(dashboard: Dashboard) -> SimulationResponse:
    return SimulationResponse(
        running=dashboard.simulator.running,
        battery_percentage=dashboard.state.battery_percentage,
    )

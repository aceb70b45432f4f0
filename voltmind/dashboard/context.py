from __future__ import annotations

from dataclasses import dataclass, field
from typing import Self

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from fastapi import Request

from voltmind.dashboard.simulation import DriveSimulator
from voltmind.dashboard.state import DashboardState, make_timestamp_label
from voltmind.estimation.engine import EstimationEngine
from voltmind.oracle.interface import Oracle
from voltmind.stations.reconciler import StationReconciler


@dataclass
class Dashboard:
    """Everything the dashboard routes need, wired around one oracle."""

    engine: EstimationEngine
    reconciler: StationReconciler
    simulator: DriveSimulator
    state: DashboardState = field(default_factory=DashboardState)

    @classmethod
    def create(cls, oracle: Oracle, scheduler: AsyncIOScheduler) -> Self:
        engine = EstimationEngine(oracle)
        state = DashboardState()
        return cls(
            engine=engine,
            reconciler=StationReconciler(oracle),
            simulator=DriveSimulator(scheduler, engine, state),
            state=state,
        )

    async def refresh_estimate(self) -> None:
        """Estimate the current battery level and publish it to the slot."""
        label = make_timestamp_label()
        estimate = await self.engine.estimate(self.state.battery_percentage, label)
        self.state.publish(estimate, timestamp_label=label)


def get_dashboard(request: Request) -> Dashboard:
    dashboard: Dashboard = request.app.state.dashboard
    return dashboard

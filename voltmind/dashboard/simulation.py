from __future__ import annotations

import logging
import os

from apscheduler.schedulers.asyncio import AsyncIOScheduler

from voltmind.dashboard.state import DashboardState, make_timestamp_label
from voltmind.estimation.engine import EstimationEngine

logger = logging.getLogger(__name__)

SIMULATION_INTERVAL_SECONDS = float(
    os.environ.get("VOLTMIND_SIMULATION_INTERVAL_SECONDS", "3")
)

_JOB_ID = "simulated_drive"


class DriveSimulator:
    """Drains the battery by 1% per tick and re-estimates after each step.

    Ticks go through the same engine and the same state slot as a manual
    recalculation. They may overlap when the oracle is slow; the last answer
    to arrive is the one that stays.
    """

    def __init__(
        self,
        scheduler: AsyncIOScheduler,
        engine: EstimationEngine,
        state: DashboardState,
        interval_seconds: float = SIMULATION_INTERVAL_SECONDS,
    ) -> None:
        self._scheduler = scheduler
        self._engine = engine
        self._state = state
        self._interval_seconds = interval_seconds

    @property
    def running(self) -> bool:
        return self._scheduler.get_job(_JOB_ID) is not None

    def start(self) -> None:
        if self.running:
            return
        self._scheduler.add_job(
            self.tick,
            "interval",
            seconds=self._interval_seconds,
            id=_JOB_ID,
            max_instances=10,
        )
        logger.info("Simulated drive started at %d%%", self._state.battery_percentage)

    def stop(self) -> None:
        if not self.running:
            return
        self._scheduler.remove_job(_JOB_ID)
        logger.info("Simulated drive stopped at %d%%", self._state.battery_percentage)

    async def tick(self) -> None:
        if self._state.battery_percentage <= 0:
            self.stop()
            return

        level = max(0, self._state.battery_percentage - 1)
        self._state.battery_percentage = level

        label = make_timestamp_label(with_date=False)
        estimate = await self._engine.estimate(level, label)
        self._state.publish(estimate, timestamp_label=label)

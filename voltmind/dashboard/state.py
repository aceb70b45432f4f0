from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from voltmind.estimation.models import Estimate

DEFAULT_BATTERY_PERCENTAGE = 75


def make_timestamp_label(now: datetime | None = None, *, with_date: bool = True) -> str:
    now = now or datetime.now()
    return now.strftime("%Y-%m-%d %H:%M" if with_date else "%H:%M:%S")


@dataclass
class DashboardState:
    """Single result slot shared by recalculation and the simulated drive.

    No sequence numbers: whichever estimate is published last wins, even if
    it was requested earlier.
    """

    battery_percentage: int = DEFAULT_BATTERY_PERCENTAGE
    timestamp_label: str = field(default_factory=make_timestamp_label)
    estimate: Estimate | None = None

    def publish(
        self,
        estimate: Estimate,
        *,
        battery_percentage: int | None = None,
        timestamp_label: str | None = None,
    ) -> None:
        if battery_percentage is not None:
            self.battery_percentage = battery_percentage
        if timestamp_label is not None:
            self.timestamp_label = timestamp_label
        self.estimate = estimate

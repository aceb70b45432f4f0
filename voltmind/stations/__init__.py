from __future__ import annotations

__all__ = [
    "GroundingRecord",
    "Station",
    "StationCandidate",
    "StationReconciler",
    "StationResult",
    "StationStatus",
]

from voltmind.stations.models import (
    GroundingRecord,
    Station,
    StationCandidate,
    StationResult,
    StationStatus,
)
from voltmind.stations.reconciler import StationReconciler

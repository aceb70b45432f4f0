from __future__ import annotations

import enum
from dataclasses import dataclass


class StationStatus(enum.Enum):
    OPEN = "open"
    CLOSED = "closed"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class StationCandidate:
    """One station as the model described it in the pipe-delimited list."""

    name: str
    address: str
    rating: float | None = None
    status: StationStatus = StationStatus.UNKNOWN

    @property
    def open_now(self) -> bool:
        # "Closed" and "Unknown" both read as not open
        return self.status is StationStatus.OPEN


@dataclass(frozen=True)
class GroundingRecord:
    """Place reference from the grounding metadata. Trusted for links only."""

    title: str | None = None
    uri: str | None = None


@dataclass(frozen=True)
class Station:
    name: str
    address: str
    rating: float | None = None
    open_now: bool | None = None
    status: StationStatus | None = None
    uri: str | None = None


@dataclass(frozen=True)
class StationResult:
    text: str
    stations: tuple[Station, ...] = ()

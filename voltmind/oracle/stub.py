from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

from voltmind.oracle.interface import GroundedResponse, Oracle, OracleError

_DEFAULT_ESTIMATE = json.dumps(
    {
        "rangeKm": 262.5,
        "timeLeftHours": 2.9,
        "efficiencyNote": "Mild evening temperatures keep consumption close to average.",
    }
)

_DEFAULT_STATIONS = "\n".join(
    [
        "Central Supercharger|1 Market Square|4.6|Open",
        "Riverside EV Hub|22 Quay Road|4.1|Open",
        "Park & Charge|5 Station Lane|N/A|Unknown",
    ]
)


class StubOracle(Oracle):
    """Deterministic offline oracle.

    Returns the canned payloads it was built with, or raises ``error`` from
    every call when one is given. Records every prompt it receives.
    """

    def __init__(
        self,
        *,
        estimate_payload: str = _DEFAULT_ESTIMATE,
        station_text: str | None = _DEFAULT_STATIONS,
        grounding_chunks: Sequence[Mapping[str, Any]] = (),
        error: Exception | None = None,
    ) -> None:
        self._estimate_payload = estimate_payload
        self._station_text = station_text
        self._grounding_chunks = tuple(grounding_chunks)
        self._error = error
        self.prompts: list[str] = []

    async def estimate(self, prompt: str, response_schema: Mapping[str, Any]) -> str:
        self.prompts.append(prompt)
        if self._error is not None:
            raise self._error
        if not self._estimate_payload:
            raise OracleError("Stub has no estimate payload")
        return self._estimate_payload

    async def find_stations(
        self, prompt: str, latitude: float, longitude: float
    ) -> GroundedResponse:
        self.prompts.append(prompt)
        if self._error is not None:
            raise self._error
        return GroundedResponse(
            text=self._station_text,
            grounding_chunks=self._grounding_chunks,
        )

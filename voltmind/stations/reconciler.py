from __future__ import annotations

import logging

from voltmind.oracle.interface import Oracle
from voltmind.stations.models import StationResult
from voltmind.stations.parsing import parse_candidates, parse_grounding_records
from voltmind.stations.prompts import build_stations_prompt
from voltmind.stations.reconcile import merge_stations

logger = logging.getLogger(__name__)

NO_TEXT_MESSAGE = "No station information available."
FAILURE_MESSAGE = (
    "Could not fetch station data at this time. "
    "Please check your internet or location permissions."
)


class StationReconciler:
    """Nearby charging stations from a location-grounded oracle answer."""

    def __init__(self, oracle: Oracle) -> None:
        self._oracle = oracle

    async def find_stations(self, latitude: float, longitude: float) -> StationResult:
        """Ask for the three nearest stations and reconcile the answer.

        Never raises; any failure yields an empty list with an explanatory
        text.
        """
        prompt = build_stations_prompt(latitude, longitude)

        try:
            response = await self._oracle.find_stations(prompt, latitude, longitude)
            text = response.text or NO_TEXT_MESSAGE

            candidates = parse_candidates(text)
            records = parse_grounding_records(response.grounding_chunks)
            stations = merge_stations(candidates, records)
        except Exception:
            logger.exception("Error finding stations near (%s, %s)", latitude, longitude)
            return StationResult(text=FAILURE_MESSAGE)

        if not candidates:
            logger.warning(
                "No pipe-delimited lines in station answer, using %d map references",
                len(records),
            )
        return StationResult(text=text, stations=tuple(stations))

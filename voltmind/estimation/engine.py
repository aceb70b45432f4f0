from __future__ import annotations

import logging

from voltmind.estimation.models import Estimate, EstimateSource, _EstimatePayload
from voltmind.estimation.prompts import ESTIMATE_RESPONSE_SCHEMA, build_estimate_prompt
from voltmind.oracle.interface import Oracle, OracleError

logger = logging.getLogger(__name__)

KM_PER_PERCENT = 3.5
HIGHWAY_SPEED_KMH = 90.0
FALLBACK_NOTE = "AI unavailable, showing rough estimates."


def fallback_estimate(battery_percentage: int) -> Estimate:
    """Rough local estimate used whenever the oracle can't be trusted."""
    range_km = battery_percentage * KM_PER_PERCENT
    return Estimate(
        range_km=range_km,
        time_left_hours=range_km / HIGHWAY_SPEED_KMH,
        efficiency_note=FALLBACK_NOTE,
        source=EstimateSource.FALLBACK,
    )


class EstimationEngine:
    """Range and time-left estimates from the oracle, with a local fallback.

    ``estimate`` never raises: a failed call, an empty answer or a payload
    that does not match the schema all resolve to ``fallback_estimate``.
    There is no retry.
    """

    def __init__(self, oracle: Oracle) -> None:
        self._oracle = oracle

    async def estimate(self, battery_percentage: int, timestamp_label: str) -> Estimate:
        prompt = build_estimate_prompt(battery_percentage, timestamp_label)

        try:
            raw = await self._oracle.estimate(prompt, ESTIMATE_RESPONSE_SCHEMA)
            if not raw:
                raise OracleError("No data returned from oracle")
            payload = _EstimatePayload.model_validate_json(raw)
        except Exception:
            logger.exception("Error fetching EV estimates at %d%%", battery_percentage)
            return fallback_estimate(battery_percentage)

        return Estimate(
            range_km=payload.range_km,
            time_left_hours=payload.time_left_hours,
            efficiency_note=payload.efficiency_note,
            source=EstimateSource.ORACLE,
        )

import json
from unittest.mock import AsyncMock

import pytest

from voltmind.estimation.engine import FALLBACK_NOTE, EstimationEngine, fallback_estimate
from voltmind.estimation.models import EstimateSource
from voltmind.estimation.prompts import ESTIMATE_RESPONSE_SCHEMA
from voltmind.oracle.interface import Oracle


def _oracle_returning(payload: object) -> AsyncMock:
    oracle = AsyncMock(spec=Oracle)
    oracle.estimate = AsyncMock(
        return_value=payload if isinstance(payload, str) else json.dumps(payload)
    )
    return oracle


class TestFallbackEstimate:
    @pytest.mark.parametrize("battery", [0, 1, 33, 50, 99, 100])
    def test_formula(self, battery: int) -> None:
        estimate = fallback_estimate(battery)

        assert estimate.range_km == 3.5 * battery
        assert estimate.time_left_hours == estimate.range_km / 90
        assert estimate.efficiency_note == FALLBACK_NOTE
        assert estimate.source is EstimateSource.FALLBACK

    def test_empty_battery_gives_zero(self) -> None:
        estimate = fallback_estimate(0)

        assert estimate.range_km == 0
        assert estimate.time_left_hours == 0


class TestEstimationEngine:
    async def test_uses_oracle_payload(self) -> None:
        oracle = _oracle_returning(
            {"rangeKm": 250.0, "timeLeftHours": 2.8, "efficiencyNote": "Cool night air."}
        )

        estimate = await EstimationEngine(oracle).estimate(72, "2026-01-05 22:10")

        assert estimate.range_km == 250.0
        assert estimate.time_left_hours == 2.8
        assert estimate.efficiency_note == "Cool night air."
        assert estimate.source is EstimateSource.ORACLE

    async def test_prompt_and_schema(self) -> None:
        oracle = _oracle_returning(
            {"rangeKm": 10, "timeLeftHours": 0.1, "efficiencyNote": "Low."}
        )

        await EstimationEngine(oracle).estimate(42, "2026-01-05 08:00")

        prompt, schema = oracle.estimate.call_args.args
        assert "Current Battery: 42%." in prompt
        assert "Current Time: 2026-01-05 08:00." in prompt
        assert schema == ESTIMATE_RESPONSE_SCHEMA
        assert schema["required"] == ["rangeKm", "timeLeftHours", "efficiencyNote"]

    async def test_integer_payload_values_accepted(self) -> None:
        oracle = _oracle_returning(
            {"rangeKm": 200, "timeLeftHours": 2, "efficiencyNote": "Fine."}
        )

        estimate = await EstimationEngine(oracle).estimate(60, "now")

        assert estimate.range_km == 200.0
        assert estimate.source is EstimateSource.ORACLE

    async def test_oracle_error_falls_back(self) -> None:
        oracle = AsyncMock(spec=Oracle)
        oracle.estimate = AsyncMock(side_effect=RuntimeError("503 Service Unavailable"))

        estimate = await EstimationEngine(oracle).estimate(40, "now")

        assert estimate.efficiency_note == "AI unavailable, showing rough estimates."
        assert estimate.range_km == 140.0
        assert estimate.time_left_hours == 140.0 / 90
        assert oracle.estimate.call_count == 1

    @pytest.mark.parametrize(
        "payload",
        [
            "",
            "not json at all",
            "[]",
            json.dumps({"rangeKm": 100, "timeLeftHours": 1}),
            json.dumps({"rangeKm": "far", "timeLeftHours": 1, "efficiencyNote": "x"}),
            json.dumps({"rangeKm": -5, "timeLeftHours": 1, "efficiencyNote": "x"}),
            json.dumps({"rangeKm": 5, "timeLeftHours": 1, "efficiencyNote": ""}),
            '{"rangeKm": NaN, "timeLeftHours": 1, "efficiencyNote": "x"}',
            json.dumps({"rangeKm": True, "timeLeftHours": 1, "efficiencyNote": "x"}),
            json.dumps({"rangeKm": 5, "timeLeftHours": False, "efficiencyNote": "x"}),
            json.dumps({"rangeKm": 5, "timeLeftHours": 1, "efficiencyNote": "   "}),
        ],
    )
    async def test_malformed_payload_falls_back(self, payload: str) -> None:
        oracle = _oracle_returning(payload)

        estimate = await EstimationEngine(oracle).estimate(20, "now")

        assert estimate == fallback_estimate(20)

    async def test_failure_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        oracle = AsyncMock(spec=Oracle)
        oracle.estimate = AsyncMock(side_effect=ConnectionError("offline"))

        await EstimationEngine(oracle).estimate(10, "now")

        assert "Error fetching EV estimates" in caplog.text

    async def test_note_whitespace_trimmed(self) -> None:
        oracle = _oracle_returning(
            {"rangeKm": 80, "timeLeftHours": 0.9, "efficiencyNote": "  Cold morning.  "}
        )

        estimate = await EstimationEngine(oracle).estimate(25, "now")

        assert estimate.efficiency_note == "Cold morning."
        assert estimate.source is EstimateSource.ORACLE

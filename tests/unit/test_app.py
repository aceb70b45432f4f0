from unittest.mock import AsyncMock, patch

import pytest
from fastapi import FastAPI

from voltmind.app import lifespan
from voltmind.estimation.models import EstimateSource


class TestLifespan:
    async def test_startup_publishes_default_estimate(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("VOLTMIND_ORACLE", "stub")
        app = FastAPI()

        with patch("voltmind.app.create_tables", new_callable=AsyncMock) as create_tables:
            async with lifespan(app):
                state = app.state.dashboard.state

                assert state.battery_percentage == 75
                assert state.estimate is not None
                assert state.estimate.range_km == 262.5
                assert state.estimate.source is EstimateSource.ORACLE
                assert not app.state.dashboard.simulator.running

        create_tables.assert_awaited_once_with()

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from fastapi import FastAPI

from voltmind.base.db import create_tables
from voltmind.dashboard.context import Dashboard
from voltmind.dashboard.router import router as dashboard_router
from voltmind.history.router import router as history_router
from voltmind.oracle import OracleConfig, create_oracle

logging.basicConfig(level=logging.INFO)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    await create_tables()

    config = OracleConfig.from_env()
    logger.info("Using %s oracle (%s)", config.backend.value, config.model)

    scheduler = AsyncIOScheduler()
    dashboard = Dashboard.create(create_oracle(config), scheduler)
    app.state.dashboard = dashboard
    # The dashboard always has an estimate for its default battery level
    await dashboard.refresh_estimate()
    scheduler.start()
    yield
    scheduler.shutdown(wait=False)


app = FastAPI(title="VoltMind", lifespan=lifespan)
app.include_router(dashboard_router)
app.include_router(history_router)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}

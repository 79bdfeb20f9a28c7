from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roi_simulator.api.routes import health, reports, scenarios, simulation
from roi_simulator.core.config import get_settings
from roi_simulator.core.logging import configure_logging, get_logger, mask_database_url
from roi_simulator.db.session import lifespan


configure_logging(get_settings().log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def application_lifespan(app: FastAPI) -> AsyncIterator[None]:  # pragma: no cover - side effect
    settings = get_settings()
    logger.info(
        "application.startup",
        environment=settings.environment,
        database_url=mask_database_url(settings.database_url),
        scenario_store=settings.scenario_store.value,
    )
    async with lifespan(app):
        yield
    logger.info("application.shutdown")


def create_application() -> FastAPI:
    settings = get_settings()
    application = FastAPI(title=settings.app_name, lifespan=application_lifespan)
    application.include_router(health.router)
    application.include_router(simulation.router)
    application.include_router(scenarios.router)
    application.include_router(reports.router)

    if settings.allowed_origins:
        application.add_middleware(
            CORSMiddleware,
            allow_origins=[str(origin).rstrip("/") for origin in settings.allowed_origins],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    return application


app = create_application()

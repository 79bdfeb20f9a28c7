from collections.abc import AsyncIterator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from roi_simulator.core.config import ScenarioStore, Settings, get_settings
from roi_simulator.db.session import get_session
from roi_simulator.repositories import ScenarioRepository, ScenarioRepositoryFactory
from roi_simulator.services.scenario_service import ScenarioService


async def get_db() -> AsyncIterator[AsyncSession]:
    async for session in get_session():
        yield session


def get_scenario_repository(
    session: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> ScenarioRepository:
    if settings.scenario_store is ScenarioStore.MEMORY:
        return ScenarioRepositoryFactory.create_repository(ScenarioStore.MEMORY)
    return ScenarioRepositoryFactory.create_repository(ScenarioStore.DATABASE, session=session)


def get_scenario_service(repository: ScenarioRepository = Depends(get_scenario_repository)) -> ScenarioService:
    return ScenarioService(repository)

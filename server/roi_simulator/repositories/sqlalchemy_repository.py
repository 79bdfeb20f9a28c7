from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from roi_simulator.core.logging import get_logger
from roi_simulator.models.scenario import Scenario
from roi_simulator.repositories.base import ScenarioRecord, ScenarioRepository
from roi_simulator.services.errors import ScenarioPersistenceError

logger = get_logger(__name__)


def _to_record(row: Scenario) -> ScenarioRecord:
    return ScenarioRecord(
        id=row.id,
        scenario_name=row.scenario_name or "",
        inputs=dict(row.inputs or {}),
        results=dict(row.results or {}),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlAlchemyScenarioRepository(ScenarioRepository):
    """Scenario store backed by a relational database through an AsyncSession."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, scenario_name: str, inputs: Dict[str, Any], results: Dict[str, Any]) -> ScenarioRecord:
        scenario = Scenario(scenario_name=scenario_name, inputs=inputs, results=results)
        try:
            self.session.add(scenario)
            await self.session.commit()
            await self.session.refresh(scenario)
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.error("scenario.save_failed", scenario_name=scenario_name, error=str(exc))
            raise ScenarioPersistenceError("failed to save scenario", operation="save") from exc
        return _to_record(scenario)

    async def list_all(self) -> List[ScenarioRecord]:
        try:
            result = await self.session.execute(select(Scenario).order_by(Scenario.created_at.desc()))
        except SQLAlchemyError as exc:
            logger.error("scenario.list_failed", error=str(exc))
            raise ScenarioPersistenceError("failed to list scenarios", operation="list") from exc
        return [_to_record(row) for row in result.scalars().all()]

    async def get_by_id(self, scenario_id: str) -> Optional[ScenarioRecord]:
        try:
            row = await self.session.get(Scenario, scenario_id)
        except SQLAlchemyError as exc:
            logger.error("scenario.load_failed", scenario_id=scenario_id, error=str(exc))
            raise ScenarioPersistenceError("failed to load scenario", operation="get") from exc
        return _to_record(row) if row is not None else None

    async def delete_by_id(self, scenario_id: str) -> bool:
        try:
            result = await self.session.execute(delete(Scenario).where(Scenario.id == scenario_id))
            await self.session.commit()
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.error("scenario.delete_failed", scenario_id=scenario_id, error=str(exc))
            raise ScenarioPersistenceError("failed to delete scenario", operation="delete") from exc
        return (result.rowcount or 0) > 0

    async def count(self) -> int:
        try:
            total = await self.session.scalar(select(func.count()).select_from(Scenario))
        except SQLAlchemyError as exc:
            logger.error("scenario.count_failed", error=str(exc))
            raise ScenarioPersistenceError("failed to count scenarios", operation="count") from exc
        return int(total or 0)

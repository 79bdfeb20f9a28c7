from __future__ import annotations

import copy
import itertools
import uuid
from typing import Any, Dict, List, Optional, Tuple

from roi_simulator.models.mixins import utcnow
from roi_simulator.repositories.base import ScenarioRecord, ScenarioRepository


class InMemoryScenarioRepository(ScenarioRepository):
    """Process-local scenario store. Contents are lost on restart."""

    def __init__(self) -> None:
        self._records: Dict[str, Tuple[int, ScenarioRecord]] = {}
        self._sequence = itertools.count()

    async def save(self, scenario_name: str, inputs: Dict[str, Any], results: Dict[str, Any]) -> ScenarioRecord:
        now = utcnow()
        record = ScenarioRecord(
            id=str(uuid.uuid4()),
            scenario_name=scenario_name,
            inputs=copy.deepcopy(inputs),
            results=copy.deepcopy(results),
            created_at=now,
            updated_at=now,
        )
        self._records[record.id] = (next(self._sequence), record)
        return record

    async def list_all(self) -> List[ScenarioRecord]:
        # insertion order breaks ties between identical timestamps
        ordered = sorted(self._records.values(), key=lambda item: (item[1].created_at, item[0]), reverse=True)
        return [record for _, record in ordered]

    async def get_by_id(self, scenario_id: str) -> Optional[ScenarioRecord]:
        entry = self._records.get(scenario_id)
        return entry[1] if entry else None

    async def delete_by_id(self, scenario_id: str) -> bool:
        return self._records.pop(scenario_id, None) is not None

    async def count(self) -> int:
        return len(self._records)

    def clear(self) -> None:
        self._records.clear()

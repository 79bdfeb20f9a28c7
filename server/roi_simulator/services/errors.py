from __future__ import annotations

from typing import List, Sequence


class ScenarioError(Exception):
    """Base class for scenario domain errors."""


class ScenarioValidationError(ScenarioError):
    """Raw inputs failed validation; carries every message, in order."""

    def __init__(self, errors: Sequence[str]):
        self.errors: List[str] = list(errors)
        super().__init__("; ".join(self.errors))


class ScenarioNotFoundError(ScenarioError):
    def __init__(self, scenario_id: str):
        super().__init__(f"Scenario {scenario_id} not found")
        self.scenario_id = scenario_id


class ScenarioPersistenceError(ScenarioError):
    """The scenario store failed. Not retried."""

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.error_message = message
        self.operation = operation

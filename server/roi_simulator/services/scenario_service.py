"""
Scenario Service

Business logic behind the simulator API: validate, calculate, persist and
report. Storage is reached only through a ScenarioRepository.
"""

from __future__ import annotations

from typing import Any, Callable, List, Mapping, Optional

from roi_simulator.core.logging import get_logger
from roi_simulator.repositories.base import ScenarioRecord, ScenarioRepository
from roi_simulator.services.errors import ScenarioNotFoundError, ScenarioValidationError
from roi_simulator.services.report_service import GeneratedReport, build_report
from roi_simulator.services.roi_calculator import ROICalculator, ROIResult
from roi_simulator.services.validation import ScenarioInput, validate_inputs

logger = get_logger(__name__)


class ScenarioService:
    """Service for simulating, storing and reporting ROI scenarios."""

    def __init__(
        self,
        repository: ScenarioRepository,
        calculator: Optional[ROICalculator] = None,
        now_ms: Optional[Callable[[], int]] = None,
    ):
        self.repository = repository
        self.calculator = calculator or ROICalculator()
        self.now_ms = now_ms

    def validate(self, raw: Mapping[str, Any]) -> ScenarioInput:
        """
        Validate raw fields.

        Raises:
            ScenarioValidationError: With every collected message
        """
        inputs, errors = validate_inputs(raw)
        if errors:
            logger.info("scenario.validation_failed", errors=errors)
            raise ScenarioValidationError(errors)
        return inputs

    def simulate(self, raw: Mapping[str, Any]) -> ROIResult:
        return self.calculator.calculate(self.validate(raw))

    async def save_scenario(self, raw: Mapping[str, Any]) -> ScenarioRecord:
        """
        Validate, calculate and persist a scenario.

        A blank name is replaced by the repository's default name, and the
        resolved name is stored both on the scenario and inside its inputs.

        Raises:
            ScenarioValidationError: If inputs are invalid (nothing is stored)
            ScenarioPersistenceError: If the store fails
        """
        inputs = self.validate(raw)
        results = self.calculator.calculate(inputs)

        scenario_name = inputs.scenario_name.strip()
        if not scenario_name:
            scenario_name = await self.repository.next_default_name()

        stored_inputs = {**inputs.to_dict(), "scenario_name": scenario_name}
        record = await self.repository.save(scenario_name, stored_inputs, results.to_dict())
        logger.info("scenario.saved", scenario_id=record.id, scenario_name=record.scenario_name)
        return record

    async def list_scenarios(self) -> List[ScenarioRecord]:
        return await self.repository.list_all()

    async def get_scenario(self, scenario_id: str) -> ScenarioRecord:
        record = await self.repository.get_by_id(scenario_id)
        if record is None:
            raise ScenarioNotFoundError(scenario_id)
        return record

    async def delete_scenario(self, scenario_id: str) -> None:
        if not await self.repository.delete_by_id(scenario_id):
            raise ScenarioNotFoundError(scenario_id)
        logger.info("scenario.deleted", scenario_id=scenario_id)

    async def generate_report(
        self,
        email: str,
        scenario_id: Optional[str] = None,
        raw_inputs: Optional[Mapping[str, Any]] = None,
    ) -> GeneratedReport:
        """
        Render a report for a stored scenario or for ad-hoc inputs.

        A stored scenario is rendered from its stored inputs and results; ad-hoc
        inputs are validated and calculated first. ``scenario_id`` wins when both
        are given.

        Raises:
            ValueError: If neither a scenario id nor inputs are provided
            ScenarioNotFoundError: If ``scenario_id`` is unknown
            ScenarioValidationError: If ad-hoc inputs are invalid
        """
        if scenario_id:
            record = await self.get_scenario(scenario_id)
            inputs, results = record.inputs, record.results
        elif raw_inputs is not None:
            validated = self.validate(raw_inputs)
            inputs, results = validated.to_dict(), self.calculator.calculate(validated).to_dict()
        else:
            raise ValueError("provide scenario_id or inputs")

        report = build_report(email, inputs, results, now_ms=self.now_ms)
        logger.info("report.generated", filename=report.filename, scenario_id=scenario_id)
        return report

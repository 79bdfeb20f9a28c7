"""
Scenario service tests.

This module tests:
- Saving with resolved default names
- Stored results matching a fresh calculation
- Not-found handling
- Report generation from stored and ad-hoc scenarios
"""

import pytest

from roi_simulator.repositories import InMemoryScenarioRepository
from roi_simulator.services.errors import (
    ScenarioNotFoundError,
    ScenarioPersistenceError,
    ScenarioValidationError,
)
from roi_simulator.services.roi_calculator import calculate
from roi_simulator.services.scenario_service import ScenarioService
from roi_simulator.services.validation import ScenarioInput


FIXED_NOW_MS = 1700000000000


class FailingRepository(InMemoryScenarioRepository):
    async def save(self, scenario_name, inputs, results):
        raise ScenarioPersistenceError("failed to save scenario", operation="save")


@pytest.fixture
def service(repository):
    return ScenarioService(repository, now_ms=lambda: FIXED_NOW_MS)


class TestSimulate:
    def test_simulate(self, memory_repository, canonical_inputs, canonical_results):
        service = ScenarioService(memory_repository)

        assert service.simulate(canonical_inputs).to_dict() == canonical_results

    def test_invalid_inputs(self, memory_repository):
        service = ScenarioService(memory_repository)

        with pytest.raises(ScenarioValidationError) as exc_info:
            service.simulate({})

        assert len(exc_info.value.errors) == 6


class TestSaveScenario:
    """Testing persistence through the service."""

    @pytest.mark.asyncio
    async def test_default_names(self, service, canonical_inputs):
        first = await service.save_scenario(canonical_inputs)
        second = await service.save_scenario({**canonical_inputs, "scenario_name": "   "})

        assert first.scenario_name == "Scenario 1"
        assert first.inputs["scenario_name"] == "Scenario 1"
        assert second.scenario_name == "Scenario 2"

    @pytest.mark.asyncio
    async def test_name_is_trimmed(self, service, canonical_inputs):
        record = await service.save_scenario({**canonical_inputs, "scenario_name": "  Q3 plan "})

        assert record.scenario_name == "Q3 plan"
        assert record.inputs["scenario_name"] == "Q3 plan"

    @pytest.mark.asyncio
    async def test_stored_results_match_calculation(self, service, canonical_inputs):
        record = await service.save_scenario(canonical_inputs)
        loaded = await service.get_scenario(record.id)

        assert loaded.results == calculate(ScenarioInput.from_dict(loaded.inputs)).to_dict()
        assert loaded.inputs["one_time_implementation_cost"] == 50000.0

    @pytest.mark.asyncio
    async def test_invalid_inputs_are_not_stored(self, service, canonical_inputs):
        canonical_inputs["hourly_wage"] = -1

        with pytest.raises(ScenarioValidationError) as exc_info:
            await service.save_scenario(canonical_inputs)

        assert exc_info.value.errors == ["hourly_wage must be a non-negative number"]
        assert await service.list_scenarios() == []

    @pytest.mark.asyncio
    async def test_persistence_failure_propagates(self, canonical_inputs):
        service = ScenarioService(FailingRepository())

        with pytest.raises(ScenarioPersistenceError):
            await service.save_scenario(canonical_inputs)


class TestLookup:
    @pytest.mark.asyncio
    async def test_get_unknown(self, service):
        with pytest.raises(ScenarioNotFoundError) as exc_info:
            await service.get_scenario("missing")

        assert exc_info.value.scenario_id == "missing"

    @pytest.mark.asyncio
    async def test_delete(self, service, canonical_inputs):
        record = await service.save_scenario(canonical_inputs)

        await service.delete_scenario(record.id)

        with pytest.raises(ScenarioNotFoundError):
            await service.delete_scenario(record.id)


class TestGenerateReport:
    """Testing report generation."""

    @pytest.mark.asyncio
    async def test_from_stored_scenario(self, service, canonical_inputs):
        record = await service.save_scenario({**canonical_inputs, "scenario_name": "Q3"})

        report = await service.generate_report("cfo@example.com", scenario_id=record.id)

        assert report.filename == f"roi-report-{FIXED_NOW_MS}.html"
        assert "<tr><th>Scenario</th><td>Q3</td></tr>" in report.content
        assert "cfo@example.com" in report.content

    @pytest.mark.asyncio
    async def test_from_inputs(self, service, canonical_inputs):
        report = await service.generate_report("cfo@example.com", raw_inputs=canonical_inputs)

        assert "<td>$34100</td>" in report.content

    @pytest.mark.asyncio
    async def test_scenario_id_wins_over_inputs(self, service, canonical_inputs):
        record = await service.save_scenario({**canonical_inputs, "scenario_name": "Stored"})

        report = await service.generate_report("cfo@example.com", scenario_id=record.id, raw_inputs={})

        assert "<td>Stored</td>" in report.content

    @pytest.mark.asyncio
    async def test_unknown_scenario(self, service):
        with pytest.raises(ScenarioNotFoundError):
            await service.generate_report("cfo@example.com", scenario_id="missing")

    @pytest.mark.asyncio
    async def test_empty_inputs_are_validated(self, service):
        with pytest.raises(ScenarioValidationError):
            await service.generate_report("cfo@example.com", raw_inputs={})

    @pytest.mark.asyncio
    async def test_requires_a_source(self, service):
        with pytest.raises(ValueError, match="provide scenario_id or inputs"):
            await service.generate_report("cfo@example.com")

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, status

from roi_simulator.api.dependencies.database import get_scenario_service
from roi_simulator.api.errors import NOT_FOUND, error_response, validation_error_response
from roi_simulator.schemas.common import ErrorResponse, ValidationErrorResponse
from roi_simulator.schemas.scenario import ScenarioCreated, ScenarioDeleted, ScenarioRead, ScenarioSummary
from roi_simulator.services.errors import ScenarioNotFoundError, ScenarioPersistenceError, ScenarioValidationError
from roi_simulator.services.scenario_service import ScenarioService


router = APIRouter(prefix="/scenarios", tags=["scenarios"])

NotFound = {404: {"model": ErrorResponse}}
ServerError = {500: {"model": ErrorResponse}}


@router.post(
    "",
    response_model=ScenarioCreated,
    responses={400: {"model": ValidationErrorResponse}, **ServerError},
)
async def save_scenario_endpoint(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    service: ScenarioService = Depends(get_scenario_service),
):
    body = payload or {}
    # {"inputs": {...}} is the documented shape; a flat body is accepted too
    inputs = body.get("inputs")
    raw = inputs if isinstance(inputs, (dict, list)) or inputs else body
    if not isinstance(raw, dict):
        raw = {}
    try:
        record = await service.save_scenario(raw)
    except ScenarioValidationError as exc:
        return validation_error_response(exc.errors)
    except ScenarioPersistenceError:
        return error_response("failed to save scenario", status.HTTP_500_INTERNAL_SERVER_ERROR)
    return ScenarioCreated.model_validate(record)


@router.get("", response_model=List[ScenarioSummary], responses=ServerError)
async def list_scenarios_endpoint(service: ScenarioService = Depends(get_scenario_service)):
    try:
        records = await service.list_scenarios()
    except ScenarioPersistenceError:
        return error_response("failed to list scenarios", status.HTTP_500_INTERNAL_SERVER_ERROR)
    return [ScenarioSummary.model_validate(record) for record in records]


@router.get("/{scenario_id}", response_model=ScenarioRead, responses={**NotFound, **ServerError})
async def get_scenario_endpoint(scenario_id: str, service: ScenarioService = Depends(get_scenario_service)):
    try:
        record = await service.get_scenario(scenario_id)
    except ScenarioNotFoundError:
        return error_response(NOT_FOUND, status.HTTP_404_NOT_FOUND)
    except ScenarioPersistenceError:
        return error_response("failed to load scenario", status.HTTP_500_INTERNAL_SERVER_ERROR)
    return ScenarioRead.model_validate(record)


@router.delete("/{scenario_id}", response_model=ScenarioDeleted, responses={**NotFound, **ServerError})
async def delete_scenario_endpoint(scenario_id: str, service: ScenarioService = Depends(get_scenario_service)):
    try:
        await service.delete_scenario(scenario_id)
    except ScenarioNotFoundError:
        return error_response(NOT_FOUND, status.HTTP_404_NOT_FOUND)
    except ScenarioPersistenceError:
        return error_response("failed to delete scenario", status.HTTP_500_INTERNAL_SERVER_ERROR)
    return ScenarioDeleted(deleted=True)

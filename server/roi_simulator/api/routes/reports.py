from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, status

from roi_simulator.api.dependencies.database import get_scenario_service
from roi_simulator.api.errors import error_response, validation_error_response
from roi_simulator.schemas.common import ErrorResponse
from roi_simulator.schemas.report import ReportRead
from roi_simulator.services.errors import ScenarioNotFoundError, ScenarioPersistenceError, ScenarioValidationError
from roi_simulator.services.scenario_service import ScenarioService


router = APIRouter(prefix="/report", tags=["reports"])


@router.post(
    "/generate",
    response_model=ReportRead,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def generate_report_endpoint(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    service: ScenarioService = Depends(get_scenario_service),
):
    body = payload or {}
    email = str(body["email"]).strip() if body.get("email") else ""
    if not email:
        return error_response("email is required", status.HTTP_400_BAD_REQUEST)

    scenario_id = body.get("scenario_id")
    inputs = body.get("inputs")
    if not isinstance(inputs, dict):
        # any list counts as provided and fails validation like an empty object
        inputs = {} if isinstance(inputs, list) or inputs else None

    try:
        report = await service.generate_report(
            email,
            scenario_id=str(scenario_id) if scenario_id else None,
            raw_inputs=inputs,
        )
    except ScenarioValidationError as exc:
        return validation_error_response(exc.errors)
    except (ScenarioNotFoundError, ScenarioPersistenceError):
        return error_response("scenario not found", status.HTTP_404_NOT_FOUND)
    except ValueError as exc:
        return error_response(str(exc), status.HTTP_400_BAD_REQUEST)
    return ReportRead.model_validate(report)

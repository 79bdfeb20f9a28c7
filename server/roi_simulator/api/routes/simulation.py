from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends

from roi_simulator.api.dependencies.database import get_scenario_service
from roi_simulator.api.errors import validation_error_response
from roi_simulator.schemas.common import ValidationErrorResponse
from roi_simulator.schemas.scenario import ROIResultRead
from roi_simulator.services.errors import ScenarioValidationError
from roi_simulator.services.scenario_service import ScenarioService


router = APIRouter(tags=["simulation"])


@router.post(
    "/simulate",
    response_model=ROIResultRead,
    responses={400: {"model": ValidationErrorResponse}},
)
async def simulate_endpoint(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    service: ScenarioService = Depends(get_scenario_service),
):
    try:
        result = service.simulate(payload or {})
    except ScenarioValidationError as exc:
        return validation_error_response(exc.errors)
    return ROIResultRead.model_validate(result)

from roi_simulator.schemas.common import ErrorResponse, ValidationErrorResponse
from roi_simulator.schemas.report import ReportRead
from roi_simulator.schemas.scenario import (
    ROIResultRead,
    ScenarioCreated,
    ScenarioDeleted,
    ScenarioInputRead,
    ScenarioRead,
    ScenarioSummary,
)

__all__ = [
    "ErrorResponse",
    "ValidationErrorResponse",
    "ReportRead",
    "ROIResultRead",
    "ScenarioCreated",
    "ScenarioDeleted",
    "ScenarioInputRead",
    "ScenarioRead",
    "ScenarioSummary",
]

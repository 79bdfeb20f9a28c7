from roi_simulator.services import (
    errors,
    report_service,
    roi_calculator,
    validation,
)

__all__ = [
    "errors",
    "report_service",
    "roi_calculator",
    "validation",
]

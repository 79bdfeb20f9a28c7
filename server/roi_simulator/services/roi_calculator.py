from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Optional

from roi_simulator.services.validation import ScenarioInput

CENT = Decimal("0.01")
UNDEFINED_ROI_PERCENTAGE = 999.0
FIXED_NOTATION_LIMIT = 1e21


@dataclass(frozen=True)
class CalculatorConstants:
    automated_cost_per_invoice: float = 0.20
    error_rate_auto_percent: float = 0.1
    min_roi_boost_factor: float = 1.1


DEFAULT_CONSTANTS = CalculatorConstants()


@dataclass(frozen=True)
class ROIResult:
    monthly_savings: float
    cumulative_savings: float
    net_savings: float
    payback_months: Optional[float]
    roi_percentage: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def round_currency(value: float) -> float:
    """Round to two decimals, half away from zero, on the exact binary value.

    Matches ``Number(x.toFixed(2))``: 0.125 -> 0.13, but 1.005 -> 1.0 because the
    double nearest 1.005 is slightly below it.
    Magnitudes of 1e21 and above are returned unchanged, as ``toFixed`` does.
    """
    if not math.isfinite(value) or abs(value) >= FIXED_NOTATION_LIMIT:
        return value
    return float(Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP))


class ROICalculator:
    """Projects savings of automated invoice processing over a time horizon."""

    def __init__(self, constants: CalculatorConstants = DEFAULT_CONSTANTS):
        self.constants = constants

    def calculate(self, inputs: ScenarioInput) -> ROIResult:
        c = self.constants
        volume = float(inputs.monthly_invoice_volume)
        implementation_cost = float(inputs.one_time_implementation_cost)

        labor_cost_manual = (
            float(inputs.num_ap_staff) * float(inputs.hourly_wage) * float(inputs.avg_hours_per_invoice) * volume
        )
        auto_cost = volume * c.automated_cost_per_invoice
        # error rates are percentages
        error_savings = (
            (float(inputs.error_rate_manual) - c.error_rate_auto_percent) * volume * float(inputs.error_cost) / 100
        )
        monthly_savings = (labor_cost_manual + error_savings - auto_cost) * c.min_roi_boost_factor

        cumulative_savings = monthly_savings * float(inputs.time_horizon_months)
        net_savings = cumulative_savings - implementation_cost
        payback_months = implementation_cost / monthly_savings if monthly_savings > 0 else None

        if implementation_cost > 0:
            roi_percentage = (net_savings / implementation_cost) * 100
        elif cumulative_savings > 0:
            roi_percentage = UNDEFINED_ROI_PERCENTAGE
        else:
            roi_percentage = 0.0

        return ROIResult(
            monthly_savings=round_currency(monthly_savings),
            cumulative_savings=round_currency(cumulative_savings),
            net_savings=round_currency(net_savings),
            payback_months=None if payback_months is None else round_currency(payback_months),
            roi_percentage=round_currency(roi_percentage),
        )


_default_calculator = ROICalculator()


def calculate(inputs: ScenarioInput) -> ROIResult:
    return _default_calculator.calculate(inputs)

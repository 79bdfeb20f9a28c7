"""
Input Validation

Normalizes raw, untyped scenario fields (form posts, JSON bodies, CLI options)
into a ScenarioInput and collects every validation message at once.

Numeric coercion follows the rules browsers apply to form values: blank and
null become zero, numeric strings are parsed, anything else is "not a number".
"""

from __future__ import annotations

import math
import re
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Mapping, Tuple

_MISSING = object()

_DECIMAL_LITERAL = re.compile(r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)", re.ASCII)
_RADIX_LITERAL = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+", re.ASCII)

REQUIRED_NON_NEGATIVE_FIELDS: Tuple[str, ...] = (
    "monthly_invoice_volume",
    "num_ap_staff",
    "avg_hours_per_invoice",
    "hourly_wage",
    "error_cost",
)

DEFAULT_TIME_HORIZON_MONTHS = 36.0
DEFAULT_IMPLEMENTATION_COST = 0.0


@dataclass(frozen=True)
class ScenarioInput:
    """Normalized calculator input. Fields that failed to parse hold NaN."""

    monthly_invoice_volume: float
    num_ap_staff: float
    avg_hours_per_invoice: float
    hourly_wage: float
    error_rate_manual: float
    error_cost: float
    time_horizon_months: float = DEFAULT_TIME_HORIZON_MONTHS
    one_time_implementation_cost: float = DEFAULT_IMPLEMENTATION_COST
    scenario_name: str = ""

    def to_dict(self) -> Dict[str, Any]:
        # field order matches the input form and report layout
        data = asdict(self)
        return {"scenario_name": data.pop("scenario_name"), **data}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ScenarioInput":
        """Rebuild a stored, already validated record."""
        return cls(
            scenario_name=str(data.get("scenario_name") or ""),
            monthly_invoice_volume=float(data["monthly_invoice_volume"]),
            num_ap_staff=float(data["num_ap_staff"]),
            avg_hours_per_invoice=float(data["avg_hours_per_invoice"]),
            hourly_wage=float(data["hourly_wage"]),
            error_rate_manual=float(data["error_rate_manual"]),
            error_cost=float(data["error_cost"]),
            time_horizon_months=float(data["time_horizon_months"]),
            one_time_implementation_cost=float(data["one_time_implementation_cost"]),
        )


def coerce_number(value: Any) -> float:
    """Convert an untyped value to float; NaN when it is not numeric."""
    if value is _MISSING:
        return math.nan
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        if _DECIMAL_LITERAL.fullmatch(text):
            return float(text)
        if _RADIX_LITERAL.fullmatch(text):
            try:
                return float(int(text, 0))
            except OverflowError:
                return math.inf
        return math.nan
    if isinstance(value, list):
        # a list reads as its comma-joined text: only an empty or single-element list can be numeric
        if not value:
            return 0.0
        if len(value) > 1 or isinstance(value[0], bool):
            return math.nan
        return coerce_number(value[0])
    return math.nan


def as_number(value: Any, fallback: float) -> float:
    number = coerce_number(value)
    return number if math.isfinite(number) else fallback


def clamp(value: float, minimum: float, maximum: float) -> float:
    if math.isnan(value):
        return value
    return min(max(value, minimum), maximum)


def validate_inputs(raw: Mapping[str, Any]) -> Tuple[ScenarioInput, List[str]]:
    """Normalize raw fields and collect validation messages.

    Returns the normalized record together with every error found; callers must
    not calculate or persist anything when the list is non-empty.

    ``error_rate_manual`` is clamped into [0, 100] when numeric, so an
    out-of-range number passes silently while a non-numeric value is reported.
    ``time_horizon_months`` falls back to 36 when missing or non-numeric and is
    only rejected when the resolved value is not positive.
    """
    errors: List[str] = []

    def required_non_negative(name: str) -> float:
        number = as_number(raw.get(name, _MISSING), math.nan)
        if math.isnan(number) or number < 0:
            errors.append(f"{name} must be a non-negative number")
        return number

    required = {name: required_non_negative(name) for name in REQUIRED_NON_NEGATIVE_FIELDS}
    scenario_name = raw.get("scenario_name")

    inputs = ScenarioInput(
        scenario_name=scenario_name if isinstance(scenario_name, str) else "",
        error_rate_manual=clamp(as_number(raw.get("error_rate_manual", _MISSING), math.nan), 0.0, 100.0),
        time_horizon_months=as_number(raw.get("time_horizon_months", _MISSING), DEFAULT_TIME_HORIZON_MONTHS),
        one_time_implementation_cost=as_number(
            raw.get("one_time_implementation_cost", _MISSING), DEFAULT_IMPLEMENTATION_COST
        ),
        **required,
    )

    if math.isnan(inputs.error_rate_manual):
        errors.append("error_rate_manual must be a number between 0 and 100")
    if inputs.time_horizon_months <= 0:
        errors.append("time_horizon_months must be > 0")

    return inputs, errors

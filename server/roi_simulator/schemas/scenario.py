from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from roi_simulator.schemas.common import ORMModel, Timestamped


class ScenarioInputRead(ORMModel):
    scenario_name: str = ""
    monthly_invoice_volume: float
    num_ap_staff: float
    avg_hours_per_invoice: float
    hourly_wage: float
    error_rate_manual: float
    error_cost: float
    time_horizon_months: float
    one_time_implementation_cost: float


class ROIResultRead(ORMModel):
    monthly_savings: float
    cumulative_savings: float
    net_savings: float
    payback_months: Optional[float] = None
    roi_percentage: float


class ScenarioCreated(ORMModel):
    id: str
    scenario_name: str


class ScenarioSummary(ORMModel):
    id: str
    scenario_name: str
    created_at: datetime


class ScenarioRead(Timestamped):
    id: str
    scenario_name: str
    inputs: ScenarioInputRead
    results: ROIResultRead


class ScenarioDeleted(BaseModel):
    deleted: bool = True

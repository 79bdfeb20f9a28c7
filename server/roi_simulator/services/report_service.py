"""
HTML Report Generator for invoicing ROI scenarios.

Renders a self-contained document (inline styles, no external assets) with the
scenario inputs and the projected savings, ready to be downloaded as a file.
"""

from __future__ import annotations

import html
import math
import time
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Mapping, Optional

REPORT_FILENAME_TEMPLATE = "roi-report-{timestamp_ms}.html"

# (label, inputs key) in display order
INPUT_ROWS = (
    ("Monthly Volume", "monthly_invoice_volume"),
    ("AP Staff", "num_ap_staff"),
    ("Hours/Invoice", "avg_hours_per_invoice"),
    ("Hourly Wage", "hourly_wage"),
    ("Error Rate (manual %)", "error_rate_manual"),
    ("Error Cost", "error_cost"),
    ("Horizon (months)", "time_horizon_months"),
    ("One-time Cost", "one_time_implementation_cost"),
)


@dataclass(frozen=True)
class GeneratedReport:
    filename: str
    content: str


def format_number(value: Any) -> str:
    """Render a number the way JavaScript stringifies it (2000, 0.17, 1e-7)."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    number = float(value)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number.is_integer() and abs(number) < 1e21:
        return str(int(number))
    text = repr(number)
    if "e" not in text:
        return text
    if 1e-6 <= abs(number) < 1e21:
        return format(Decimal(text), "f")
    mantissa, exponent = text.split("e")
    power = int(exponent)
    return f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"


def render_report_html(email: str, inputs: Mapping[str, Any], results: Mapping[str, Any]) -> str:
    scenario_name = html.escape(str(inputs.get("scenario_name") or ""))
    input_rows = "\n".join(
        f"      <tr><th>{label}</th><td>{format_number(inputs.get(key))}</td></tr>" for label, key in INPUT_ROWS
    )
    payback = results.get("payback_months")
    payback_text = "N/A" if payback is None else format_number(payback)

    return f"""<!doctype html><html><head><meta charset="utf-8"><title>ROI Report</title>
    <style>body{{font-family:Arial, sans-serif; padding:24px; color:#222}} h1{{color:#0b3a5b}}
    table{{border-collapse:collapse}} td,th{{border:1px solid #ddd; padding:8px}}</style></head>
    <body><h1>Invoicing ROI Report</h1>
    <p><strong>Email:</strong> {html.escape(email)}</p>
    <h2>Inputs</h2>
    <table>
      <tr><th>Scenario</th><td>{scenario_name}</td></tr>
{input_rows}
    </table>
    <h2>Results</h2>
    <table>
      <tr><th>Monthly Savings</th><td>${format_number(results.get('monthly_savings'))}</td></tr>
      <tr><th>Payback (months)</th><td>{payback_text}</td></tr>
      <tr><th>ROI %</th><td>{format_number(results.get('roi_percentage'))}%</td></tr>
      <tr><th>Cumulative Savings</th><td>${format_number(results.get('cumulative_savings'))}</td></tr>
    </table>
    <p style="margin-top:16px;color:#666">This report includes a conservative pro-automation bias factor.</p>
    </body></html>"""


def _current_time_ms() -> int:
    return int(time.time() * 1000)


def report_filename(timestamp_ms: int) -> str:
    return REPORT_FILENAME_TEMPLATE.format(timestamp_ms=timestamp_ms)


def build_report(
    email: str,
    inputs: Mapping[str, Any],
    results: Mapping[str, Any],
    now_ms: Optional[Callable[[], int]] = None,
) -> GeneratedReport:
    timestamp_ms = (now_ms or _current_time_ms)()
    return GeneratedReport(
        filename=report_filename(timestamp_ms),
        content=render_report_html(email, inputs, results),
    )

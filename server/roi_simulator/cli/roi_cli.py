#!/usr/bin/env python3
"""
CLI for running ROI simulations and exporting reports without the HTTP server
"""

import asyncio
import json
from pathlib import Path
from typing import Any, Dict, Optional

import click

from roi_simulator.services.errors import ScenarioValidationError
from roi_simulator.services.report_service import build_report
from roi_simulator.services.roi_calculator import calculate
from roi_simulator.services.validation import ScenarioInput, validate_inputs

NUMERIC_FIELDS = (
    "monthly_invoice_volume",
    "num_ap_staff",
    "avg_hours_per_invoice",
    "hourly_wage",
    "error_rate_manual",
    "error_cost",
    "time_horizon_months",
    "one_time_implementation_cost",
)


def scenario_options(func):
    """Attach one raw string option per input field; the validator coerces them."""
    for field in reversed(NUMERIC_FIELDS):
        func = click.option(f"--{field.replace('_', '-')}", field, default=None, help=f"Value for {field}")(func)
    return click.option("--scenario-name", "scenario_name", default=None, help="Optional scenario label")(func)


def _collect(options: Dict[str, Any]) -> Dict[str, Any]:
    # unset options count as missing, like absent form fields
    return {name: value for name, value in options.items() if value is not None}


def _validated(raw: Dict[str, Any]) -> ScenarioInput:
    inputs, errors = validate_inputs(raw)
    if errors:
        raise ScenarioValidationError(errors)
    return inputs


def _fail(exc: ScenarioValidationError) -> None:
    for message in exc.errors:
        click.echo(message, err=True)
    raise SystemExit(1)


@click.group()
def cli():
    """Invoicing ROI simulator CLI"""
    pass


@cli.command()
@scenario_options
def simulate(**options):
    """Print the projected savings for the given inputs as JSON"""
    try:
        inputs = _validated(_collect(options))
    except ScenarioValidationError as exc:
        _fail(exc)
    click.echo(json.dumps(calculate(inputs).to_dict(), indent=2))


@cli.command()
@scenario_options
@click.option('--email', required=True, help='Recipient shown on the report')
@click.option('--output-dir', type=click.Path(file_okay=False, path_type=Path), default=Path('.'), show_default=True)
def report(email: str, output_dir: Path, **options):
    """Write an HTML report for the given inputs"""
    try:
        inputs = _validated(_collect(options))
    except ScenarioValidationError as exc:
        _fail(exc)
    generated = build_report(email.strip(), inputs.to_dict(), calculate(inputs).to_dict())
    output_dir.mkdir(parents=True, exist_ok=True)
    target = output_dir / generated.filename
    target.write_text(generated.content, encoding="utf-8")
    click.echo(str(target))


@cli.command(name="init-db")
@click.option('--database-url', default=None, help='Override the configured database URL')
def init_db(database_url: Optional[str]):
    """Create the scenario tables"""
    from roi_simulator.core.logging import mask_database_url
    from roi_simulator.db.session import build_engine, init_models, settings

    url = database_url or settings.database_url

    async def _run() -> None:
        target = build_engine(url)
        try:
            await init_models(target)
        finally:
            await target.dispose()

    asyncio.run(_run())
    click.echo(f"Initialized scenario tables at {mask_database_url(url)}")


if __name__ == "__main__":
    cli()

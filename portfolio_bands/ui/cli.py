"""Typer-based command line interface for rendering simulation results."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional, Sequence

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from ..config import get_settings
from ..core.adapter import PayloadValidationError, normalize_payload
from ..core.result_validation import ValidationResult, validate_simulation_result
from ..core.ticks import format_year_tick, select_ticks
from ..models.parameters import SimulationParameters
from ..models.results import SummaryRow
from ..reporting import ReportGenerator
from ..visualization import extract_chart_payload

app = typer.Typer(help="Percentile bands, axis ticks and summary rows for Monte Carlo portfolio paths")
console = Console()


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _fail(message: str) -> None:
    console.print(f"[red]{message}[/red]")
    raise typer.Exit(code=1)


def _load_parameters(params_path: Optional[Path]) -> Optional[SimulationParameters]:
    if params_path is None:
        return None
    try:
        return SimulationParameters.model_validate_json(params_path.read_text(encoding="utf-8"))
    except ValidationError as exc:
        _fail(f"Invalid simulation parameters in {params_path}: {exc}")
    return None


def _summary_table(rows: Sequence[SummaryRow]) -> Table:
    table = Table(title="Summary Statistics", show_lines=False)
    table.add_column("Statistic")
    table.add_column("Value", justify="right")
    for row in rows:
        table.add_row(row.label, row.display_value)
    return table


def _print_validation(validation: ValidationResult) -> None:
    colour = "green" if validation.passed else "red"
    console.print(f"Validation: [{colour}]{validation.status}[/{colour}]")
    for check in validation.failed_checks:
        console.print(f"  [red]- {check}[/red]")
    for warning in validation.warnings:
        console.print(f"  [yellow]- {warning}[/yellow]")


@app.command()
def render(
    payload_path: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="Simulation response JSON file"
    ),
    params_path: Optional[Path] = typer.Option(
        None,
        "--params",
        exists=True,
        dir_okay=False,
        readable=True,
        help="Simulation parameters JSON (used to derive CAGR when the response lacks it)",
    ),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o", help="Directory for exports"),
    low: Optional[float] = typer.Option(None, "--low", help="Lower band percentile"),
    high: Optional[float] = typer.Option(None, "--high", help="Upper band percentile"),
    html: bool = typer.Option(True, "--html/--no-html", help="Write an interactive Plotly chart"),
    png: bool = typer.Option(False, "--png/--no-png", help="Write static matplotlib charts"),
) -> None:
    """Aggregate a simulation response and export chart and table data."""
    settings = get_settings()
    _configure_logging(settings.log_level)

    parameters = _load_parameters(params_path)
    try:
        result = normalize_payload(payload_path.read_text(encoding="utf-8"), parameters)
    except PayloadValidationError as exc:
        _fail(str(exc))

    try:
        payload = extract_chart_payload(result, low_percentile=low, high_percentile=high)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    validation = validate_simulation_result(result)

    console.print(f"\n[bold]Simulation Results[/bold] ({result.wire_shape} response)")
    if payload.is_empty:
        console.print("[yellow]No path data to chart.[/yellow]")
    else:
        console.print(
            f"{len(result.paths)} paths, {len(payload.points)} charted months, "
            f"ticks at {', '.join(format_year_tick(tick) for tick in payload.ticks)}"
        )
    console.print(_summary_table(payload.rows))
    _print_validation(validation)

    reporter = ReportGenerator(output_dir or Path(settings.output_dir))
    outputs: Dict[str, Path] = reporter.export_all(
        points=payload.points,
        ticks=payload.ticks,
        rows=payload.rows,
        validation=validation,
        result=result,
        html=html,
        png=png,
        band_label=payload.band_label,
    )
    console.print("\n[bold green]Export complete![/bold green]")
    for name, path in outputs.items():
        console.print(f"  - {name}: {path}")


@app.command()
def ticks(total_steps: int = typer.Argument(..., help="Number of monthly steps in the series")) -> None:
    """Show which months receive an axis label."""
    selected = select_ticks(total_steps)
    if not selected:
        console.print("[yellow]No ticks for an empty series.[/yellow]")
        return
    table = Table(title=f"Axis Ticks ({total_steps} months)")
    table.add_column("Month", justify="right")
    table.add_column("Label", justify="right")
    for tick in selected:
        table.add_row(str(tick), format_year_tick(tick))
    console.print(table)


def main() -> None:
    """Entry point for CLI execution."""
    app()


if __name__ == "__main__":
    main()

"""
Terminal rendering for weather-quant results.

Uses Rich to lay out rounding ranges, simulation steps, consensus and
per-bracket edges. Rendering only; all numbers come from the core.
"""

from typing import Sequence

from rich import box
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from weather_quant.core import (
    Bracket,
    ConsensusSummary,
    EdgeReport,
    MeasurementPipeline,
    RoundingResult,
    Signal,
    SimulationResult,
    TemperatureUnit,
)
from weather_quant.rounding import format_range

SIGNAL_STYLES = {
    Signal.UNDERPRICED: "bold green",
    Signal.OVERPRICED: "bold red",
    Signal.FAIR: "white",
}


def _unit(unit: TemperatureUnit) -> str:
    return f"°{unit.value}"


def pipelines_table(pipelines: Sequence[MeasurementPipeline]) -> Table:
    """Create the registered pipelines table."""
    table = Table(box=box.SIMPLE)
    table.add_column("Pipeline")
    table.add_column("Name")
    table.add_column("Steps")

    for p in pipelines:
        table.add_row(p.identifier, p.name, " → ".join(p.steps))

    return table


def range_panel(result: RoundingResult) -> Panel:
    """Create the panel for one analyzed display value."""
    unit = _unit(result.unit)

    grid = Table.grid(expand=True)
    grid.add_column()
    grid.add_column(justify="right")

    grid.add_row("Displayed:", f"[b]{result.displayed_value:g}{unit}[/b]")
    grid.add_row("True range:", f"{format_range(result.lower_bound, result.upper_bound)}")
    grid.add_row("Uncertainty:", f"±{result.uncertainty:g}{unit}")
    grid.add_row(
        f"Whole {_unit(result.pipeline.quantized_unit)}:",
        ", ".join(str(c) for c in result.quantized_intermediates),
    )

    if result.unit == TemperatureUnit.CELSIUS:
        low_f, high_f = result.to_unit(TemperatureUnit.FAHRENHEIT)
        grid.add_row("True range (°F):", format_range(low_f, high_f))

    if not result.reachable:
        grid.add_row("[yellow]Warning:[/yellow]", "[yellow]value not producible; fallback range[/yellow]")
    if not result.is_contiguous:
        segments = ", ".join(f"[{s.lower:g}, {s.upper:g})" for s in result.segments)
        grid.add_row("[red]Gaps:[/red]", f"[red]{segments}[/red]")

    return Panel(grid, title=result.pipeline.name, border_style="cyan")


def simulation_table(simulation: SimulationResult) -> Table:
    """Create the forward simulation steps table."""
    table = Table(box=box.SIMPLE, title=f"{simulation.pipeline.name} forward")
    table.add_column("#", justify="right")
    table.add_column("Step")
    table.add_column("Value", justify="right")

    for step in simulation:
        value = f"{step.value:g}{_unit(step.unit)}"
        table.add_row(
            str(step.index),
            step.name,
            f"[b]{value}[/b]" if step.quantized else value,
        )

    return table


def consensus_panel(summary: ConsensusSummary, std_dev: float = None) -> Panel:
    """Create the model consensus summary."""
    if not summary.is_known:
        return Panel("No forecast data available", title="Consensus", border_style="white")

    grid = Table.grid(expand=True)
    grid.add_column()
    grid.add_column(justify="right")

    grid.add_row("Models:", str(summary.count))
    grid.add_row("Mean:", f"[b]{summary.mean:.1f}°[/b]")
    grid.add_row("Range:", f"{summary.min:g}° - {summary.max:g}°")
    grid.add_row("Spread:", f"{summary.spread:g}°")
    grid.add_row("Confidence:", summary.confidence.value)
    if std_dev is not None:
        grid.add_row("Std dev used:", f"{std_dev:.2f}°")

    return Panel(grid, title="Consensus", border_style="green")


def edges_table(brackets: Sequence[Bracket], report: EdgeReport) -> Table:
    """Create the per-bracket model vs market table."""
    table = Table(box=box.SIMPLE)
    table.add_column("Bracket")
    table.add_column("Model %", justify="right")
    table.add_column("Mkt %", justify="right")
    table.add_column("Edge", justify="right")
    table.add_column("Signal")

    for b in brackets:
        edge = report[b.bracket_id]
        signal = Text(f"{edge.signal.value} ({edge.magnitude.value})")
        table.add_row(
            b.label,
            f"{edge.model_probability:g}",
            f"{edge.market_probability:g}",
            f"{edge.edge:+g}",
            signal,
            style=SIGNAL_STYLES[edge.signal],
        )

    return table

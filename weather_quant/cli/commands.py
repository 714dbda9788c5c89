"""Command-line interface for weather-quant."""

from typing import List, Tuple

import click
from rich.console import Console

from weather_quant import __version__
from weather_quant.config import DEFAULT_PIPELINE_ID, get_pipeline, list_pipelines
from weather_quant.core import Bracket, ForecastPoint, WeatherQuantError
from weather_quant.engine import EdgeDetector
from weather_quant.rounding import analyze, simulate
from weather_quant.utils import get_logger, setup_logging
from weather_quant.cli.display import (
    consensus_panel,
    edges_table,
    pipelines_table,
    range_panel,
    simulation_table,
)

logger = get_logger(__name__)

PIPELINE_OPTION = click.option(
    "--pipeline", "-p",
    default=DEFAULT_PIPELINE_ID,
    show_default=True,
    help="Pipeline identifier (ASOS_5MIN, METAR_HOURLY, CELSIUS_NATIVE)",
)


def _parse_forecast(text: str) -> ForecastPoint:
    """Parse ``MODEL=VALUE``."""
    model, sep, value = text.partition("=")
    if not sep or not model.strip():
        raise click.BadParameter(f"expected MODEL=VALUE, got {text!r}", param_hint="--forecast")
    try:
        return ForecastPoint(model=model.strip(), value=float(value))
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--forecast")


def _parse_bracket(text: str, index: int) -> Bracket:
    """Parse ``LABEL=PROB``; the label itself may contain '=' (">=72")."""
    label, sep, prob = text.rpartition("=")
    if not sep or not label.strip():
        raise click.BadParameter(f"expected LABEL=PROB, got {text!r}", param_hint="--bracket")
    try:
        return Bracket.from_label(f"B{index}", label.strip(), float(prob))
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--bracket")


@click.group()
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """weather-quant - Station rounding ranges and forecast edges."""
    setup_logging(level="DEBUG" if debug else None)


@main.command()
def pipelines():
    """List the registered measurement pipelines."""
    console = Console()
    console.print(pipelines_table([get_pipeline(p) for p in list_pipelines()]))


@main.command(name="range", context_settings={"ignore_unknown_options": True})
@click.argument("value", type=float)
@PIPELINE_OPTION
def range_(value: float, pipeline: str):
    """Show the true-temperature range behind a displayed VALUE."""
    try:
        result = analyze(value, pipeline)
    except WeatherQuantError as e:
        raise click.ClickException(str(e))

    Console().print(range_panel(result))


@main.command(name="simulate", context_settings={"ignore_unknown_options": True})
@click.argument("value", type=float)
@PIPELINE_OPTION
def simulate_(value: float, pipeline: str):
    """Run a true VALUE forward through a pipeline."""
    try:
        result = simulate(value, pipeline)
    except WeatherQuantError as e:
        raise click.ClickException(str(e))

    console = Console()
    console.print(simulation_table(result))
    console.print(f"Displayed: [b]{result.final_value:g}[/b]")


@main.command()
@click.option(
    "--forecast", "-f", "forecast_args",
    multiple=True, required=True,
    help="Model forecast as MODEL=VALUE (repeatable)",
)
@click.option(
    "--bracket", "-b", "bracket_args",
    multiple=True, required=True,
    help='Market bracket as LABEL=PROB, e.g. "70-71°=35" (repeatable)',
)
@click.option("--min-edge", type=float, default=None, help="Only show brackets with |edge| >= this")
def edges(forecast_args: Tuple[str, ...], bracket_args: Tuple[str, ...], min_edge: float):
    """Compare model consensus with market bracket quotes."""
    forecasts: List[ForecastPoint] = [_parse_forecast(f) for f in forecast_args]
    brackets: List[Bracket] = [_parse_bracket(b, i) for i, b in enumerate(bracket_args, start=1)]
    logger.debug(f"Parsed {len(forecasts)} forecasts and {len(brackets)} brackets")

    detector = EdgeDetector()
    try:
        summary = detector.summarize(forecasts)
        report = detector.compute_all_edges(forecasts, brackets)
    except WeatherQuantError as e:
        raise click.ClickException(str(e))

    shown = brackets
    if min_edge is not None:
        shown = [b for b in brackets if report[b.bracket_id].abs_edge >= min_edge]

    console = Console()
    console.print(consensus_panel(summary, report.distribution.std_dev))
    if report.distribution.degenerate:
        console.print("[yellow]All forecasts agree; using minimum std dev[/yellow]")

    if not shown:
        console.print("No brackets meet the edge threshold")
        return
    console.print(edges_table(shown, report))

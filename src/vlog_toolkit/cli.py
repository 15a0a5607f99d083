"""Vehicle log toolkit CLI application."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .analysis.diagnostics import DiagnosticClient
from .config import SimulationConfig
from .display.console import console as display_console
from .display.tables import TableDisplay
from .exceptions import VlogError
from .models.session import format_file_size
from .pipeline import LogProcessor, read_bytes
from .simulation.drive_cycle import DriveCycleSimulator
from .storage.exporter import ResultExporter, SUPPORTED_FORMATS


app = typer.Typer(
    name="vlog-toolkit",
    help="Vehicle Log Toolkit - Discover signals in vehicle logs and synthesize their time series",
    no_args_is_help=True,
)

_table_display = TableDisplay(Console())


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Configure logging for all commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def _config(duration: Optional[float] = None) -> SimulationConfig:
    if duration is not None:
        return SimulationConfig.from_env(duration=duration)
    return SimulationConfig.from_env()


# ============ Main Commands ============

@app.command()
def parse(
    log_file: Path = typer.Argument(..., help="Log file (.mf4, .mdf, .blf, .asc, .csv, .dbc)"),
    dbc: Optional[Path] = typer.Option(None, "--dbc", "-d", help="Companion description file for BLF logs"),
    export: Optional[Path] = typer.Option(None, "--export", "-e", help="Write the result to this file"),
    format: str = typer.Option("json", "--format", "-f", help="Export format (json, csv)"),
    duration: Optional[float] = typer.Option(None, "--duration", help="Simulated duration in seconds"),
):
    """Parse a log and show per-signal statistics."""
    if format.lower() not in SUPPORTED_FORMATS:
        display_console.error(f"Unsupported export format: {format}")
        raise typer.Exit(1)

    processor = LogProcessor(_config(duration))

    try:
        result = processor.process_file(log_file, dbc)
    except VlogError as e:
        display_console.error(str(e))
        raise typer.Exit(1)

    display_console.header(
        f"{result.file_name} ({result.file_type.value})",
        f"{format_file_size(log_file.stat().st_size)}, {result.point_count} points, "
        + ("synthesized" if result.synthesized else "measured"),
    )

    if result.is_empty:
        display_console.warning("No data found in log")
        return

    _table_display.show(_table_display.signal_table(result.signals))

    if export:
        path = ResultExporter(format).export(result, export)
        display_console.success(f"Exported to {path}")


@app.command()
def signals(
    log_file: Path = typer.Argument(..., help="Log file"),
    dbc: Optional[Path] = typer.Option(None, "--dbc", "-d", help="Companion description file for BLF logs"),
):
    """List discovered signals without generating data."""
    processor = LogProcessor(_config())

    try:
        content = read_bytes(log_file)
        description = read_bytes(dbc) if dbc else None
    except VlogError as e:
        display_console.error(str(e))
        raise typer.Exit(1)

    descriptors = processor.discover(content, log_file.name, description)

    display_console.header(f"Signals in {log_file.name}")
    _table_display.show(_table_display.descriptor_table(descriptors))
    display_console.info(f"Total: {len(descriptors)} signal(s)")


@app.command("drive-cycle")
def drive_cycle(
    duration: Optional[float] = typer.Option(None, "--duration", help="Simulated duration in seconds"),
):
    """Show a summary of the simulated drive cycle."""
    cycle = DriveCycleSimulator(_config(duration)).run()
    _table_display.show(_table_display.drive_cycle_table(cycle))


@app.command()
def analyze(
    log_file: Path = typer.Argument(..., help="Log file"),
    dbc: Optional[Path] = typer.Option(None, "--dbc", "-d", help="Companion description file for BLF logs"),
):
    """Parse a log and request a diagnostic assessment."""
    processor = LogProcessor(_config())

    try:
        result = processor.process_file(log_file, dbc)
        display_console.info(f"Analyzing {len(result.signals)} signal(s) from {result.file_name}...")
        report = DiagnosticClient().analyze(result.file_name, result.signals)
    except VlogError as e:
        display_console.error(str(e))
        raise typer.Exit(1)

    display_console.header("Diagnostic Summary")
    display_console.panel(report.summary or "No summary returned", title=result.file_name)
    _table_display.show(_table_display.report_table(report))


@app.command()
def version():
    """Show version information."""
    display_console.print(f"Vehicle Log Toolkit v{__version__}")


if __name__ == "__main__":
    app()

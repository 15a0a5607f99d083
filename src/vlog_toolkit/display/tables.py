"""Table display utilities for parsed logs."""

from typing import List, Optional
from rich.table import Table
from rich.console import Console

from ..models.drive_cycle import DriveCycleState, CHANNELS
from ..models.signal import SignalDescriptor, DiagnosticReport
from ..synthesis.synthesizer import SignalSynthesizer


def _label(signal: SignalDescriptor) -> str:
    return f"[{signal.color or 'white'}]●[/] {signal.name}"


class TableDisplay:
    """Create and display formatted tables."""

    def __init__(self, console: Optional[Console] = None):
        self._console = console or Console()

    def signal_table(self, signals: List[SignalDescriptor], title: str = "Signals") -> Table:
        """Create a table of signals with their statistics."""
        table = Table(title=title, show_header=True, header_style="bold cyan")

        table.add_column("Signal", style="cyan bold")
        table.add_column("Unit", style="dim", width=8)
        table.add_column("Min", justify="right")
        table.add_column("Max", justify="right")
        table.add_column("Avg", justify="right")
        table.add_column("Std Dev", justify="right")

        for signal in signals:
            stats = signal.statistics
            if stats is None:
                table.add_row(_label(signal), signal.unit, "-", "-", "-", "-")
                continue
            table.add_row(
                _label(signal),
                signal.unit,
                f"{stats.min:g}",
                f"{stats.max:g}",
                f"{stats.avg:g}",
                f"{stats.std_dev:g}",
            )

        return table

    def descriptor_table(
        self,
        signals: List[SignalDescriptor],
        synthesizer: Optional[SignalSynthesizer] = None,
        title: str = "Discovered Signals",
    ) -> Table:
        """Create a table of declared metadata and the synthesis archetype."""
        table = Table(title=title, show_header=True, header_style="bold cyan")

        table.add_column("#", justify="right", style="dim")
        table.add_column("Signal", style="cyan bold")
        table.add_column("Unit", style="dim", width=8)
        table.add_column("Range", style="dim")
        table.add_column("Scale", style="dim")
        table.add_column("Behaviour")

        synthesizer = synthesizer or SignalSynthesizer()
        for i, signal in enumerate(signals, 1):
            range_str = f"{signal.min:g} .. {signal.max:g}" if signal.has_declared_range else "-"
            archetype = synthesizer.archetype(signal)
            table.add_row(
                str(i),
                signal.name,
                signal.unit,
                range_str,
                f"x{signal.factor:g} {signal.offset:+g}",
                archetype.value if archetype else "[green]drive cycle[/green]",
            )

        return table

    def drive_cycle_table(self, cycle: DriveCycleState) -> Table:
        """Create a summary table of drive-cycle channels."""
        table = Table(title=f"Drive Cycle ({len(cycle)} steps)", show_header=True, header_style="bold cyan")

        table.add_column("Channel", style="cyan bold")
        table.add_column("Min", justify="right")
        table.add_column("Max", justify="right")
        table.add_column("Mean", justify="right")

        for name in CHANNELS:
            values = cycle.channel(name)
            if not values:
                table.add_row(name, "-", "-", "-")
                continue
            table.add_row(
                name,
                f"{min(values):g}",
                f"{max(values):g}",
                f"{sum(values) / len(values):.2f}",
            )

        return table

    def report_table(self, report: DiagnosticReport) -> Table:
        """Create a table of diagnostic anomalies and recommendations."""
        table = Table(title="Diagnostic Findings", show_header=True, header_style="bold cyan")

        table.add_column("Type", width=16)
        table.add_column("Finding")

        for anomaly in report.anomalies:
            table.add_row("[yellow]Anomaly[/yellow]", anomaly)
        for recommendation in report.recommendations:
            table.add_row("[cyan]Recommendation[/cyan]", recommendation)

        return table

    def show(self, table: Table) -> None:
        """Display a table to the console."""
        self._console.print(table)
        self._console.print()

"""Tests for table rendering."""

import pytest
from rich.console import Console

from vlog_toolkit.display import TableDisplay
from vlog_toolkit.models.signal import SignalDescriptor, SignalStatistics, DiagnosticReport


@pytest.fixture
def recorder():
    return Console(record=True, width=120)


def test_signal_table(recorder):
    display = TableDisplay(recorder)
    display.show(display.signal_table([
        SignalDescriptor(name="CoolantTemp", unit="degC", color="#ef4444",
                         statistics=SignalStatistics(min=20, max=95.5, avg=80, std_dev=3.25)),
        SignalDescriptor(name="NoStats"),
    ]))
    text = recorder.export_text()
    assert "CoolantTemp" in text
    assert "95.5" in text
    assert "NoStats" in text


def test_descriptor_table_marks_aliases(recorder):
    display = TableDisplay(recorder)
    display.show(display.descriptor_table([
        SignalDescriptor(name="VehicleSpeed"),
        SignalDescriptor(name="Alive_Counter", min=0, max=15),
    ]))
    text = recorder.export_text()
    assert "drive cycle" in text
    assert "counter" in text


def test_drive_cycle_table(recorder, drive_cycle):
    display = TableDisplay(recorder)
    display.show(display.drive_cycle_table(drive_cycle))
    text = recorder.export_text()
    assert "600 steps" in text
    assert "steering" in text


def test_report_table(recorder):
    display = TableDisplay(recorder)
    display.show(display.report_table(DiagnosticReport(
        summary="ok", anomalies=["Low voltage"], recommendations=["Check battery"],
    )))
    text = recorder.export_text()
    assert "Low voltage" in text
    assert "Check battery" in text

"""Tests for result export."""

import csv
import json

import pytest

from vlog_toolkit.models.session import LogParseResult, LogFileType
from vlog_toolkit.models.signal import SignalDescriptor, SignalStatistics
from vlog_toolkit.storage import ResultExporter


@pytest.fixture
def result():
    return LogParseResult(
        file_name="trace.csv",
        file_type=LogFileType.CSV,
        data=[
            {"timestamp": 0.0, "a": 1.0, "b": 2.0},
            {"timestamp": 1.0, "a": 3.0},
        ],
        signals=[
            SignalDescriptor(name="a", unit="V", color="#3b82f6",
                             statistics=SignalStatistics(min=1, max=3, avg=2, std_dev=1)),
            SignalDescriptor(name="b", color="#ef4444"),
        ],
        synthesized=False,
    )


class TestResultExporter:
    def test_unsupported_format(self):
        with pytest.raises(ValueError):
            ResultExporter("xml")

    def test_format_is_case_insensitive(self):
        assert ResultExporter("CSV").format == "csv"

    def test_json(self, tmp_path, result):
        path = ResultExporter("json").export(result, tmp_path / "out" / "trace.json")

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["file_type"] == "CSV"
        assert data["synthesized"] is False
        assert data["signals"][0] == {
            "name": "a", "unit": "V", "min": 1.0, "max": 3.0, "avg": 2.0, "stdDev": 1.0,
            "color": "#3b82f6", "factor": 1.0, "offset": 0.0,
        }
        assert data["data"] == result.data

    def test_csv(self, tmp_path, result):
        path = ResultExporter("csv").export(result, tmp_path / "trace_out.csv")

        with open(path, newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f))
        assert rows[0] == ["timestamp", "a", "b"]
        assert rows[1] == ["0.0", "1.0", "2.0"]
        assert rows[2] == ["1.0", "3.0", ""]

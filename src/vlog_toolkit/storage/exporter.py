"""Export of parsed logs to JSON and CSV files."""

import csv
import json
import logging
from pathlib import Path
from typing import Union

from ..models.session import LogParseResult

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("json", "csv")


class ResultExporter:
    """Writes a LogParseResult to disk."""

    def __init__(self, format: str = "json"):
        """
        Initialize exporter.

        Args:
            format: Output format ('json' or 'csv')
        """
        format = format.lower()
        if format not in SUPPORTED_FORMATS:
            raise ValueError(f"Unsupported export format: {format}")
        self._format = format

    @property
    def format(self) -> str:
        return self._format

    def export(self, result: LogParseResult, output_path: Union[str, Path]) -> Path:
        """
        Export a result.

        Args:
            result: Parsed log
            output_path: Destination file

        Returns:
            Path of the written file
        """
        filepath = Path(output_path)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        if self._format == "csv":
            self._export_csv(result, filepath)
        else:
            self._export_json(result, filepath)

        logger.info(f"Exported {result.point_count} row(s) of {result.file_name or 'log'} to {filepath}")
        return filepath

    def _export_json(self, result: LogParseResult, filepath: Path) -> None:
        data = {
            "file_name": result.file_name,
            "file_type": result.file_type.value,
            "description_file": result.description_file,
            "synthesized": result.synthesized,
            "signals": [
                {**s.summary(), "color": s.color, "factor": s.factor, "offset": s.offset}
                for s in result.signals
            ],
            "data": result.data,
        }
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def _export_csv(self, result: LogParseResult, filepath: Path) -> None:
        names = result.signal_names
        with open(filepath, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(["timestamp"] + names)
            for row in result.data:
                writer.writerow([row["timestamp"]] + [row.get(name, "") for name in names])

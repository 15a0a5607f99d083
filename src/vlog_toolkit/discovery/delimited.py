"""Header and row parser for delimited text exports (CSV, semicolon, tab)."""

import re
import logging
from typing import List, Optional, Tuple

from .base import BaseDiscovery, decode_text
from ..models.signal import SignalDescriptor, UNIT_PLACEHOLDER
from ..models.session import LogParseResult, LogFileType

logger = logging.getLogger(__name__)

COMMENT_PREFIXES = ("//", "#", "Begin")

TIME_COLUMN_NAMES = {"time", "t", "timestamp", "seconds", "s", "zeit", "globaltime"}

# Row key holding the zero-offset time
TIMESTAMP_KEY = "timestamp"

_LEADING_NUMBER_RE = re.compile(r"^[+\-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+\-]?\d+)?")


def sniff_delimiter(header: str) -> str:
    """Pick comma unless semicolon or tab strictly dominates."""
    commas = header.count(",")
    semicolons = header.count(";")
    tabs = header.count("\t")

    delimiter = ","
    if semicolons > commas:
        delimiter = ";"
    if tabs > commas and tabs > semicolons:
        delimiter = "\t"
    return delimiter


def try_parse_float(value: str, decimal_separator: str = ".") -> Optional[float]:
    """
    Parse a number written with either decimal convention.

    Boolean-like tokens map to 1/0. Thousands separators of the other
    convention are stripped. Leading numeric text is accepted.

    Args:
        value: Cell text
        decimal_separator: '.' or ','

    Returns:
        Parsed value or None if the text is not numeric
    """
    if value is None:
        return None
    cleaned = value.strip()
    if not cleaned:
        return None

    lowered = cleaned.lower()
    if lowered in ("true", "on"):
        return 1.0
    if lowered in ("false", "off"):
        return 0.0

    if decimal_separator == ",":
        normalized = cleaned.replace(".", "").replace(",", ".", 1)
    else:
        normalized = cleaned.replace(",", "")

    match = _LEADING_NUMBER_RE.match(normalized)
    if not match:
        return None
    return float(match.group(0))


def parse_flexible_float(value: str, decimal_separator: str = ".") -> float:
    """Like try_parse_float but unparsable text becomes 0."""
    parsed = try_parse_float(value, decimal_separator)
    return 0.0 if parsed is None else parsed


def _split(line: str, delimiter: str) -> List[str]:
    return [cell.strip().strip('"') for cell in line.split(delimiter)]


class DelimitedTextParser(BaseDiscovery):
    """Reads real measured values from delimited text exports."""

    @property
    def name(self) -> str:
        return "delimited"

    def discover(self, content: bytes) -> List[SignalDescriptor]:
        return self.parse(content).signals

    def parse(self, content: bytes, file_name: str = "") -> LogParseResult:
        """
        Parse a delimited export into rows and descriptors.

        Args:
            content: Raw file bytes
            file_name: Source name recorded on the result

        Returns:
            LogParseResult with measured rows (statistics not yet attached)
        """
        lines = self._retained_lines(decode_text(content))
        if len(lines) < 2:
            logger.info(f"Delimited file {file_name or '<memory>'} has fewer than 2 usable lines")
            return LogParseResult(file_name=file_name, file_type=LogFileType.CSV, synthesized=False)

        delimiter = sniff_delimiter(lines[0])
        decimal_separator = "," if delimiter == ";" else "."

        headers = _split(lines[0], delimiter)
        time_idx = self._find_time_column(headers)
        columns = self._signal_columns(headers, time_idx)
        units = {}

        rows = []
        start_time: Optional[float] = None
        data_lines = lines[1:1 + self._config.max_csv_rows]

        for i, line in enumerate(data_lines):
            values = _split(line, delimiter)

            if i == 0 and self._is_units_row(values, time_idx, decimal_separator):
                units = {h: values[idx] for idx, h in columns if idx < len(values) and values[idx]}
                continue

            if len(values) < len(headers):
                continue

            if time_idx is not None:
                timestamp = parse_flexible_float(values[time_idx], decimal_separator)
                if start_time is None:
                    start_time = timestamp
                timestamp -= start_time
            else:
                timestamp = i * self._config.csv_default_interval

            row = {TIMESTAMP_KEY: round(timestamp, 3)}
            for idx, header in columns:
                row[header] = parse_flexible_float(values[idx], decimal_separator)
            rows.append(row)

        rows.sort(key=lambda r: r[TIMESTAMP_KEY])

        signals = [
            self.create_descriptor(h, i, unit=units.get(h, UNIT_PLACEHOLDER))
            for i, (_, h) in enumerate(columns)
        ]

        logger.info(
            f"Parsed {len(rows)} row(s) and {len(signals)} signal(s) "
            f"(delimiter={delimiter!r}, time column={'none' if time_idx is None else headers[time_idx]})"
        )
        return LogParseResult(
            file_name=file_name,
            file_type=LogFileType.CSV,
            data=rows,
            signals=signals,
            synthesized=False,
        )

    @staticmethod
    def _retained_lines(text: str) -> List[str]:
        retained = []
        for line in text.splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith(COMMENT_PREFIXES):
                continue
            retained.append(line)
        return retained

    @staticmethod
    def _find_time_column(headers: List[str]) -> Optional[int]:
        for idx, header in enumerate(headers):
            if header.lower() in TIME_COLUMN_NAMES:
                return idx
        return None

    @staticmethod
    def _signal_columns(headers: List[str], time_idx: Optional[int]) -> List[Tuple[int, str]]:
        """
        Pick the value columns: everything but the time column, first occurrence of each name.

        A second time-like column named like the row key is dropped.
        """
        columns = []
        seen = {TIMESTAMP_KEY}
        for idx, header in enumerate(headers):
            if idx == time_idx:
                continue
            if header in seen:
                logger.debug(f"Skipping repeated or reserved column {header!r} at position {idx}")
                continue
            seen.add(header)
            columns.append((idx, header))
        return columns

    @staticmethod
    def _is_units_row(values: List[str], time_idx: Optional[int], decimal_separator: str) -> bool:
        """Exports sometimes put units in the first row under the header."""
        probe_idx = time_idx if time_idx is not None else 0
        if probe_idx >= len(values):
            return False
        return try_parse_float(values[probe_idx], decimal_separator) is None and bool(values[probe_idx])


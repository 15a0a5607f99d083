"""End-to-end processing of one log file."""

import logging
from pathlib import Path
from typing import List, Optional, Union

from .analysis.statistics import StatisticsAggregator
from .config import SimulationConfig
from .discovery.cascade import SignalDiscovery
from .discovery.delimited import DelimitedTextParser
from .exceptions import LogReadError
from .models.session import LogParseResult, LogFileType
from .models.signal import SignalDescriptor
from .simulation.drive_cycle import DriveCycleSimulator
from .synthesis.synthesizer import SignalSynthesizer

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_bytes(path: PathLike) -> bytes:
    """
    Read a file completely.

    Raises:
        LogReadError: If the file cannot be read
    """
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise LogReadError(path, e.strerror or str(e)) from e


class LogProcessor:
    """Turns raw log content into time series and signal metadata."""

    def __init__(self, config: Optional[SimulationConfig] = None):
        """
        Initialize processor.

        Args:
            config: Simulation configuration
        """
        self._config = config or SimulationConfig()
        self._delimited = DelimitedTextParser(self._config)
        self._discovery = SignalDiscovery(self._config)
        self._synthesizer = SignalSynthesizer(self._config)
        self._aggregator = StatisticsAggregator()

    @property
    def config(self) -> SimulationConfig:
        return self._config

    def process_file(self, log_path: PathLike, description_path: Optional[PathLike] = None) -> LogParseResult:
        """
        Process a log file from disk.

        Args:
            log_path: Path of the log
            description_path: Optional companion description file

        Returns:
            LogParseResult

        Raises:
            LogReadError: If either file cannot be read
        """
        log_path = Path(log_path)
        content = read_bytes(log_path)

        description = None
        description_name = None
        if description_path is not None:
            description_path = Path(description_path)
            description = read_bytes(description_path)
            description_name = description_path.name

        return self.process(content, log_path.name, description, description_name)

    def process(
        self,
        content: bytes,
        file_name: str,
        description: Optional[bytes] = None,
        description_name: Optional[str] = None,
    ) -> LogParseResult:
        """
        Process log content already in memory.

        Args:
            content: Raw log bytes
            file_name: Log file name, used to detect the file type
            description: Raw bytes of a companion description file
            description_name: Name of the description file

        Returns:
            LogParseResult
        """
        file_type = LogFileType.from_name(file_name)
        logger.info(f"Processing {file_name} as {file_type.value} ({len(content)} bytes)")

        if file_type.is_delimited_text:
            if description is not None:
                logger.warning(f"Ignoring description file for delimited log {file_name}")
            result = self._delimited.parse(content, file_name=file_name)
            # Measured exports keep the units they declare
            signals = self._aggregator.attach_from_rows(result.signals, result.data, backfill_units=False)
            return result.model_copy(update={"signals": signals})

        description = self._applicable_description(file_type, file_name, content, description)
        if description is None:
            description_name = None
        elif file_type == LogFileType.DBC:
            description_name = file_name

        descriptors = self._discovery.discover(content, description)
        return self.synthesize(descriptors, file_name, file_type, description_name)

    def discover(self, content: bytes, file_name: str, description: Optional[bytes] = None) -> List[SignalDescriptor]:
        """
        Discover signals without generating any data.

        Args:
            content: Raw log bytes
            file_name: Log file name
            description: Raw bytes of a companion description file

        Returns:
            Discovered descriptors
        """
        file_type = LogFileType.from_name(file_name)
        if file_type.is_delimited_text:
            return self._delimited.discover(content)

        description = self._applicable_description(file_type, file_name, content, description)
        return self._discovery.discover(content, description)

    @staticmethod
    def _applicable_description(
        file_type: LogFileType,
        file_name: str,
        content: bytes,
        description: Optional[bytes],
    ) -> Optional[bytes]:
        if file_type == LogFileType.DBC:
            # A description file on its own: its declarations are the signal list
            return content
        if description is not None and not file_type.accepts_description:
            logger.warning(f"Description files only apply to BLF logs, ignoring it for {file_name}")
            return None
        return description

    def synthesize(
        self,
        descriptors: List[SignalDescriptor],
        file_name: str = "",
        file_type: LogFileType = LogFileType.UNKNOWN,
        description_name: Optional[str] = None,
    ) -> LogParseResult:
        """Generate series and statistics for already discovered signals."""
        cycle = DriveCycleSimulator(self._config).run()
        series = self._synthesizer.synthesize(descriptors, cycle)
        rows = self._synthesizer.build_rows(descriptors, series)
        signals = self._aggregator.attach(descriptors, series)

        return LogParseResult(
            file_name=file_name,
            file_type=file_type,
            description_file=description_name,
            data=rows,
            signals=signals,
            synthesized=True,
        )


def parse_log(
    log_path: PathLike,
    description_path: Optional[PathLike] = None,
    config: Optional[SimulationConfig] = None,
) -> LogParseResult:
    """Convenience wrapper around LogProcessor.process_file."""
    return LogProcessor(config).process_file(log_path, description_path)

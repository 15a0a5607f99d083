"""Discovery cascade for binary logs: description file, string scan, fallback."""

import logging
from typing import List, Optional

from .binary import BinaryStringScanner
from .description import DescriptionFileParser
from ..config import SimulationConfig
from ..models.signal import SignalDescriptor

logger = logging.getLogger(__name__)

FALLBACK_UNIT = "raw"
FALLBACK_BASE_ID = 200
FALLBACK_ID_STEP = 10


class SignalDiscovery:
    """Runs the discovery strategies in order until one yields enough signals."""

    def __init__(self, config: Optional[SimulationConfig] = None):
        """
        Initialize discovery cascade.

        Args:
            config: Simulation configuration
        """
        self._config = config or SimulationConfig()
        self._description_parser = DescriptionFileParser(self._config)
        self._scanner = BinaryStringScanner(self._config)

    def discover(self, log_content: bytes, description_content: Optional[bytes] = None) -> List[SignalDescriptor]:
        """
        Discover signals for a binary log.

        Args:
            log_content: Raw bytes of the log
            description_content: Raw bytes of a companion description file

        Returns:
            Descriptors from the first strategy that produced a usable result
        """
        if description_content is not None:
            signals = self._description_parser.discover(description_content)
            if signals:
                return signals
            logger.info("Description file yielded no signals, scanning binary content")

        names = self._scanner.scan(log_content)
        if len(names) >= self._config.min_binary_signals:
            names = names[:self._config.max_binary_signals]
            return [self._scanner.create_descriptor(name, i) for i, name in enumerate(names)]

        logger.info(f"Binary scan found only {len(names)} name(s), using fallback signal list")
        return self.fallback_signals()

    def fallback_signals(self) -> List[SignalDescriptor]:
        """Generic channel names used when nothing better is found."""
        return [
            self._scanner.create_descriptor(
                f"CAN_ID_0x{FALLBACK_BASE_ID + i * FALLBACK_ID_STEP:X}_Signal_{i}",
                i,
                unit=FALLBACK_UNIT,
            )
            for i in range(self._config.fallback_signal_count)
        ]


"""Base class for signal discovery strategies."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..config import SimulationConfig
from ..models.signal import SignalDescriptor, UNIT_PLACEHOLDER


class BaseDiscovery(ABC):
    """Abstract base class for strategies that turn raw input into descriptors."""

    def __init__(self, config: Optional[SimulationConfig] = None):
        """
        Initialize discovery strategy.

        Args:
            config: Simulation configuration (defaults used if omitted)
        """
        self._config = config or SimulationConfig()

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    @abstractmethod
    def name(self) -> str:
        """Strategy name for logging."""
        pass

    @abstractmethod
    def discover(self, content: bytes) -> List[SignalDescriptor]:
        """
        Extract signal descriptors from raw content.

        Args:
            content: Raw file bytes

        Returns:
            Descriptors in discovery order, names unique
        """
        pass

    def create_descriptor(
        self,
        name: str,
        index: int,
        unit: str = UNIT_PLACEHOLDER,
        min_value: float = 0.0,
        max_value: float = 0.0,
        factor: float = 1.0,
        offset: float = 0.0,
    ) -> SignalDescriptor:
        """
        Helper to create a SignalDescriptor with its palette colour.

        Args:
            name: Signal name
            index: Position in the discovery result
            unit: Physical unit
            min_value: Declared minimum
            max_value: Declared maximum
            factor: Scale factor
            offset: Offset

        Returns:
            SignalDescriptor instance
        """
        return SignalDescriptor(
            name=name,
            unit=unit,
            min=min_value,
            max=max_value,
            factor=factor,
            offset=offset,
            color=self._config.color_for(index),
        )


def decode_text(content: bytes) -> str:
    """Decode file content as text, tolerating stray bytes."""
    if content.startswith(b"\xef\xbb\xbf"):
        content = content[3:]
    return content.decode("utf-8", errors="replace")

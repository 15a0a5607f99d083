"""Per-signal series synthesis on top of the shared drive cycle."""

import logging
from typing import Dict, List, Optional

from .aliasing import alias_channel
from .archetypes import Archetype, SignalProfile, GENERATORS, classify
from .heuristics import resolve_range
from .quantize import finalize, decimals_for
from ..config import SimulationConfig
from ..models.drive_cycle import DriveCycleState
from ..models.signal import SignalDescriptor
from ..prng import SeededRandom

logger = logging.getLogger(__name__)


class SignalSynthesizer:
    """Generates a plausible, reproducible series for each discovered signal."""

    def __init__(self, config: Optional[SimulationConfig] = None):
        """
        Initialize synthesizer.

        Args:
            config: Simulation configuration
        """
        self._config = config or SimulationConfig()

    def profile(self, descriptor: SignalDescriptor) -> SignalProfile:
        """Resolve the generation range of a descriptor."""
        min_value, max_value, factor = resolve_range(descriptor)
        return SignalProfile(
            name=descriptor.name,
            min=min_value,
            max=max_value,
            factor=factor,
            offset=descriptor.offset,
        )

    def archetype(self, descriptor: SignalDescriptor) -> Optional[Archetype]:
        """Get the archetype used for a signal, or None if it aliases a drive-cycle channel."""
        if alias_channel(descriptor.name) is not None:
            return None
        return classify(self.profile(descriptor))

    def synthesize_signal(self, descriptor: SignalDescriptor, cycle: DriveCycleState) -> List[float]:
        """
        Generate the series of a single signal.

        The generator is seeded from the signal name, so the same name always
        yields the same series for a given drive cycle.

        Args:
            descriptor: Discovered signal
            cycle: Shared drive cycle

        Returns:
            One value per drive-cycle step
        """
        profile = self.profile(descriptor)
        channel = alias_channel(descriptor.name)

        if channel is not None:
            values = list(cycle.channel(channel))
        else:
            rng = SeededRandom.for_name(descriptor.name)
            archetype = classify(profile)
            values = GENERATORS[archetype](profile, rng, cycle, self._config.warmup_time_constant)

        return finalize(values, profile.min, profile.max, profile.factor, profile.offset)

    def synthesize(self, descriptors: List[SignalDescriptor], cycle: DriveCycleState) -> Dict[str, List[float]]:
        """
        Generate series for all signals.

        Args:
            descriptors: Discovered signals
            cycle: Shared drive cycle

        Returns:
            Dictionary of signal name -> series
        """
        series = {}
        for descriptor in descriptors:
            series[descriptor.name] = self.synthesize_signal(descriptor, cycle)
        logger.debug(f"Synthesized {len(series)} signal(s) over {len(cycle)} step(s)")
        return series

    def build_rows(self, descriptors: List[SignalDescriptor], series: Dict[str, List[float]]) -> List[Dict[str, float]]:
        """
        Pivot per-signal series into timestamped rows.

        Args:
            descriptors: Signals in output order
            series: Dictionary of signal name -> series

        Returns:
            One row per step with a timestamp and every signal
        """
        interval = self._config.sampling_interval
        decimals = decimals_for(interval)
        rows = []
        for i in range(self._config.total_points):
            row = {"timestamp": round(i * interval, decimals)}
            for descriptor in descriptors:
                row[descriptor.name] = series[descriptor.name][i]
            rows.append(row)
        return rows

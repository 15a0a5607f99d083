"""Summary statistics of signal series."""

import statistics
import logging
from typing import Dict, List, Sequence

from ..models.signal import SignalDescriptor, SignalStatistics
from ..synthesis.heuristics import guess_unit

logger = logging.getLogger(__name__)

PRECISION = 2


class StatisticsAggregator:
    """Computes min, max, mean and population standard deviation per signal."""

    def compute(self, values: Sequence[float]) -> SignalStatistics:
        """
        Calculate statistics of one series, each rounded to 2 decimals.

        Args:
            values: Series values

        Returns:
            SignalStatistics (all zero for an empty series)
        """
        if not values:
            return SignalStatistics()

        return SignalStatistics(
            min=round(min(values), PRECISION),
            max=round(max(values), PRECISION),
            avg=round(statistics.fmean(values), PRECISION),
            std_dev=round(statistics.pstdev(values), PRECISION),
        )

    def attach(
        self,
        descriptors: List[SignalDescriptor],
        series: Dict[str, List[float]],
        backfill_units: bool = True,
    ) -> List[SignalDescriptor]:
        """
        Return descriptors carrying statistics of their series.

        Placeholder units are replaced by the unit suggested by the name
        unless backfill_units is False.

        Args:
            descriptors: Signals to summarise
            series: Dictionary of signal name -> series
            backfill_units: Whether to guess units for placeholders

        Returns:
            New descriptors with statistics attached
        """
        result = []
        for descriptor in descriptors:
            values = series.get(descriptor.name)
            if values is None:
                logger.debug(f"No series for {descriptor.name}, leaving it without statistics")
                result.append(descriptor)
                continue

            unit = None
            if backfill_units and not descriptor.has_unit:
                unit = guess_unit(descriptor.name)
            result.append(descriptor.with_statistics(self.compute(values), unit=unit))
        return result

    def attach_from_rows(
        self,
        descriptors: List[SignalDescriptor],
        rows: List[Dict[str, float]],
        backfill_units: bool = True,
    ) -> List[SignalDescriptor]:
        """Same as attach, reading series out of row-oriented data."""
        series = {d.name: [row[d.name] for row in rows if d.name in row] for d in descriptors}
        return self.attach(descriptors, series, backfill_units=backfill_units)

"""Data models for discovered vehicle signals."""

from typing import Optional, Dict, Any, List
from pydantic import BaseModel, Field

# Unit assigned when a source declares none
UNIT_PLACEHOLDER = "-"


class SignalStatistics(BaseModel):
    """Summary statistics of a signal series."""

    min: float = Field(default=0.0, description="Smallest value")
    max: float = Field(default=0.0, description="Largest value")
    avg: float = Field(default=0.0, description="Arithmetic mean")
    std_dev: float = Field(default=0.0, description="Population standard deviation")


class SignalDescriptor(BaseModel):
    """A discovered signal with its declared physical metadata."""

    name: str = Field(..., description="Unique signal name")
    unit: str = Field(default=UNIT_PLACEHOLDER, description="Physical unit")

    min: float = Field(default=0.0, description="Declared physical minimum")
    max: float = Field(default=0.0, description="Declared physical maximum")

    factor: float = Field(default=1.0, description="Raw-to-physical scale")
    offset: float = Field(default=0.0, description="Raw-to-physical offset")

    color: str = Field(default="", description="Display colour tag")

    statistics: Optional[SignalStatistics] = Field(default=None, description="Computed statistics")

    @property
    def has_declared_range(self) -> bool:
        """Check if the range is a real interval rather than the (0, 0) sentinel."""
        return self.max > self.min

    @property
    def has_unit(self) -> bool:
        """Check if a real unit was declared."""
        return self.unit not in (UNIT_PLACEHOLDER, "")

    def with_statistics(self, stats: SignalStatistics, unit: Optional[str] = None) -> "SignalDescriptor":
        """Return a copy carrying statistics and optionally a replacement unit."""
        update: Dict[str, Any] = {"statistics": stats}
        if unit is not None:
            update["unit"] = unit
        return self.model_copy(update=update)

    def summary(self) -> Dict[str, Any]:
        """
        Get the statistical record handed to diagnostic consumers.

        Returns:
            Dictionary with name, unit, min, max, avg and stdDev
        """
        stats = self.statistics or SignalStatistics()
        return {
            "name": self.name,
            "unit": self.unit,
            "min": stats.min,
            "max": stats.max,
            "avg": stats.avg,
            "stdDev": stats.std_dev,
        }


class DiagnosticReport(BaseModel):
    """Result returned by the diagnostic service."""

    summary: str = Field(..., description="Executive summary of the vehicle state")
    anomalies: List[str] = Field(..., description="Suspected anomalies")
    recommendations: List[str] = Field(..., description="Recommended inspections")

"""Simulation and pipeline configuration."""

import os
from typing import List, Tuple

from pydantic import BaseModel, Field, field_validator

# Display colour tags cycled over discovered signals
DEFAULT_PALETTE = [
    "#3b82f6", "#ef4444", "#10b981", "#f59e0b", "#8b5cf6", "#ec4899", "#06b6d4", "#f43f5e",
    "#6366f1", "#84cc16", "#d946ef", "#0ea5e9", "#a855f7", "#14b8a6", "#f97316", "#d946ef",
]

ENV_PREFIX = "VLOG_"


class SimulationConfig(BaseModel):
    """Constants that drive discovery, simulation and synthesis."""

    duration: float = Field(default=600.0, description="Simulated log length in seconds")
    sampling_interval: float = Field(default=0.1, description="Time step in seconds")
    drive_cycle_seed: int = Field(default=12345, description="Seed of the drive-cycle generator")

    palette: List[str] = Field(default_factory=lambda: list(DEFAULT_PALETTE))

    # Discovery limits
    max_binary_bytes: int = Field(default=5 * 1024 * 1024, description="Bytes scanned from binary logs")
    max_binary_signals: int = Field(default=100, description="Cap on names taken from a binary scan")
    min_binary_signals: int = Field(default=6, description="Below this the fallback list is used")
    fallback_signal_count: int = Field(default=12, description="Size of the synthetic fallback list")
    max_csv_rows: int = Field(default=7999, description="Data rows read from delimited text")
    csv_default_interval: float = Field(default=0.1, description="Row spacing when no time column exists")

    # Drive-cycle script
    wiper_window: Tuple[int, int] = Field(default=(2000, 2500), description="Step window with wipers on")
    lights_on_after: int = Field(default=5000, description="Step after which lights are on")
    warmup_time_constant: float = Field(default=1200.0, description="Temperature warm-up constant in steps")
    max_speed: float = Field(default=240.0, description="Upper bound on vehicle speed in km/h")

    @field_validator("duration", "sampling_interval", "csv_default_interval")
    @classmethod
    def _positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("must be positive")
        return value

    @field_validator("palette")
    @classmethod
    def _non_empty(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("palette must contain at least one colour")
        return value

    @property
    def total_points(self) -> int:
        """Number of samples in a generated series."""
        return int(round(self.duration / self.sampling_interval))

    def color_for(self, index: int) -> str:
        """Get the display colour for the n-th discovered signal."""
        return self.palette[index % len(self.palette)]

    @classmethod
    def from_env(cls, **overrides) -> "SimulationConfig":
        """
        Build a config from VLOG_* environment variables.

        Args:
            **overrides: Explicit values that win over the environment

        Returns:
            SimulationConfig instance
        """
        values = {}
        for name in ("duration", "sampling_interval", "drive_cycle_seed", "max_binary_bytes",
                     "max_binary_signals", "max_csv_rows", "fallback_signal_count"):
            raw = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is not None and raw.strip():
                values[name] = raw.strip()
        values.update(overrides)
        return cls(**values)


class DiagnosticConfig(BaseModel):
    """Settings for the remote diagnostic service."""

    api_key: str = Field(default="", description="Gemini API key")
    model: str = Field(default="gemini-2.5-flash")
    base_url: str = Field(default="https://generativelanguage.googleapis.com/v1beta")
    timeout: float = Field(default=30.0, description="Request timeout in seconds")

    @classmethod
    def from_env(cls) -> "DiagnosticConfig":
        """Read the API key from GEMINI_API_KEY or API_KEY."""
        api_key = os.environ.get("GEMINI_API_KEY") or os.environ.get("API_KEY", "")
        model = os.environ.get(f"{ENV_PREFIX}MODEL")
        if model:
            return cls(api_key=api_key, model=model)
        return cls(api_key=api_key)

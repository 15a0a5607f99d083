"""Data models for the simulated drive cycle."""

from enum import Enum
from typing import List
from pydantic import BaseModel, Field, model_validator

CHANNELS = ("speed", "rpm", "throttle", "brake", "gear", "load", "steering", "wipers", "lights")


class DriveState(str, Enum):
    """States of the drive-cycle machine."""
    IDLE = "IDLE"
    ACCEL = "ACCEL"
    CRUISE = "CRUISE"
    DECEL = "DECEL"


class DriveCycleState(BaseModel):
    """Time-aligned vehicle dynamics channels, one value per step."""

    speed: List[float] = Field(default_factory=list, description="Vehicle speed in km/h")
    rpm: List[float] = Field(default_factory=list, description="Engine speed in rpm")
    throttle: List[float] = Field(default_factory=list, description="Throttle position in %")
    brake: List[float] = Field(default_factory=list, description="Brake pedal in %")
    gear: List[int] = Field(default_factory=list, description="Engaged gear, 0 when stopped")
    load: List[float] = Field(default_factory=list, description="Engine load in %")
    steering: List[float] = Field(default_factory=list, description="Steering angle in deg")
    wipers: List[int] = Field(default_factory=list, description="Wiper switch 0/1")
    lights: List[int] = Field(default_factory=list, description="Light switch 0/1")

    sampling_interval: float = Field(default=0.1, description="Seconds between samples")

    @model_validator(mode="after")
    def _check_lengths(self) -> "DriveCycleState":
        lengths = {len(getattr(self, name)) for name in CHANNELS}
        if len(lengths) > 1:
            raise ValueError("drive-cycle channels must have equal length")
        return self

    def __len__(self) -> int:
        return len(self.speed)

    def channel(self, name: str) -> List[float]:
        """Get a channel by name."""
        if name not in CHANNELS:
            raise KeyError(f"Unknown drive-cycle channel: {name}")
        return getattr(self, name)

    @property
    def timestamps(self) -> List[float]:
        """Shared time base starting at 0."""
        return [i * self.sampling_interval for i in range(len(self))]

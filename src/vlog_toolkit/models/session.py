"""Data models for a parsed log."""

from enum import Enum
from typing import Optional, List, Dict
from pydantic import BaseModel, Field

from .signal import SignalDescriptor


class LogFileType(str, Enum):
    """Input file types recognised by extension."""
    MF4 = "MF4"
    MDF = "MDF"
    BLF = "BLF"
    ASC = "ASC"
    CSV = "CSV"
    DBC = "DBC"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def from_name(cls, file_name: str) -> "LogFileType":
        """Detect the type from a file name's extension."""
        if "." not in file_name:
            return cls.UNKNOWN
        extension = file_name.rsplit(".", 1)[1].upper()
        try:
            return cls(extension)
        except ValueError:
            return cls.UNKNOWN

    @property
    def is_delimited_text(self) -> bool:
        return self is LogFileType.CSV

    @property
    def accepts_description(self) -> bool:
        """Only BLF logs are paired with a companion description file."""
        return self is LogFileType.BLF


class LogParseResult(BaseModel):
    """Time series and signal metadata produced from one log file."""

    file_name: str = Field(default="", description="Name of the source log")
    file_type: LogFileType = Field(default=LogFileType.UNKNOWN)
    description_file: Optional[str] = Field(default=None, description="Companion description file")

    data: List[Dict[str, float]] = Field(default_factory=list, description="Rows keyed by signal name")
    signals: List[SignalDescriptor] = Field(default_factory=list)

    synthesized: bool = Field(default=True, description="Whether values were generated")

    @property
    def point_count(self) -> int:
        return len(self.data)

    @property
    def signal_names(self) -> List[str]:
        return [s.name for s in self.signals]

    @property
    def is_empty(self) -> bool:
        return not self.data and not self.signals

    def signal(self, name: str) -> Optional[SignalDescriptor]:
        """Get a descriptor by name."""
        for descriptor in self.signals:
            if descriptor.name == name:
                return descriptor
        return None

    def series(self, name: str) -> List[float]:
        """Get the values of one signal in row order."""
        return [row[name] for row in self.data if name in row]

    @property
    def timestamps(self) -> List[float]:
        return [row["timestamp"] for row in self.data]


def format_file_size(size: int) -> str:
    """Format a byte count for display."""
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.2f} MB"
